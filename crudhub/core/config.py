"""Application configuration"""

from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field


class Settings(BaseSettings):
    """Application settings."""

    # API Configuration
    API_V1_PREFIX: str = "/api/v1"
    PROJECT_NAME: str = "CrudHub"
    VERSION: str = "1.0.0"
    DESCRIPTION: str = "Todo, discussion board, community and shopping mall services"

    # Security
    SECRET_KEY: str = Field(...)
    ACCESS_TOKEN_EXPIRE_MINUTES: int = Field(default=60)
    REFRESH_TOKEN_EXPIRE_DAYS: int = Field(default=7)
    ALGORITHM: str = "HS256"
    BCRYPT_ROUNDS: int = Field(default=12)

    # Database
    DATABASE_URL: str = Field(...)
    DB_POOL_SIZE: int = Field(default=10)
    DB_MAX_OVERFLOW: int = Field(default=20)
    DB_POOL_RECYCLE: int = Field(default=300)  # seconds
    DB_ECHO: bool = Field(default=False)

    # CORS
    ALLOWED_HOSTS: list[str] = Field(default=["http://localhost:3000"])

    # Pagination
    DEFAULT_PAGE_SIZE: int = Field(default=20)
    MAX_PAGE_SIZE: int = Field(default=100)

    # Discussion board
    MAX_REPLY_DEPTH: int = Field(default=5)
    APPEAL_WINDOW_DAYS: int = Field(default=30)
    MAX_PENDING_APPEALS: int = Field(default=5)

    # Shopping mall
    TAX_RATE: float = Field(default=0.10)
    MIN_ORDER_TOTAL_CENTS: int = Field(default=500)  # $5.00
    CURRENCY: str = Field(default="USD")

    # Logging
    LOG_LEVEL: str = Field(default="INFO")

    # Development
    DEBUG: bool = Field(default=False)
    TESTING: bool = Field(default=False)
    ENVIRONMENT: str = Field(default="development")

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=True)


settings = Settings()
