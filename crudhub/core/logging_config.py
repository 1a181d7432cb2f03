"""Logging configuration"""

import logging
import logging.config
from typing import Optional

from .config import settings


SIMPLE_FORMAT = "%(levelname)s - %(name)s - %(message)s"

DETAILED_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - [%(filename)s:%(lineno)d] - %(message)s"

# Noisy third-party loggers
MODULE_LOG_LEVELS = {
    "sqlalchemy.engine": "WARNING",
    "passlib": "ERROR",
    "uvicorn.access": "INFO",
}


def setup_logging(level: Optional[str] = None) -> None:
    """Configure the root logger once at application startup."""
    log_level = (level or settings.LOG_LEVEL).upper()
    config = {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "detailed": {"format": DETAILED_FORMAT},
            "simple": {"format": SIMPLE_FORMAT},
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "formatter": "simple" if settings.TESTING else "detailed",
                "level": log_level,
            },
        },
        "root": {"handlers": ["console"], "level": log_level},
        "loggers": {
            name: {"level": module_level, "propagate": True}
            for name, module_level in MODULE_LOG_LEVELS.items()
        },
    }
    logging.config.dictConfig(config)
