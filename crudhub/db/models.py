"""Declarative base and shared column mixins"""

from datetime import datetime
from uuid import uuid4

from sqlalchemy import Column, DateTime, String, Uuid
from sqlalchemy.orm import declarative_base

from ..domain.enums import AccountStatus

# Keep Base for ORM models
Base = declarative_base()

# NOTE: model classes live in infrastructure/orm/. No imports of ORM models
# here to avoid circular dependencies.


class UuidPrimaryKeyMixin:
    id = Column(Uuid, primary_key=True, default=uuid4, index=True)


class TimestampMixin:
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)


class SoftDeleteMixin:
    deleted_at = Column(DateTime, nullable=True, index=True)

    @property
    def is_deleted(self) -> bool:
        return self.deleted_at is not None

    def soft_delete(self) -> None:
        self.deleted_at = datetime.utcnow()


class AccountMixin(UuidPrimaryKeyMixin, TimestampMixin, SoftDeleteMixin):
    """Columns shared by every role's account table."""

    display_name = Column(String(120), nullable=False)
    status = Column(String(20), default=AccountStatus.ACTIVE.value, nullable=False)
    last_login_at = Column(DateTime, nullable=True)

    @property
    def is_active(self) -> bool:
        return self.deleted_at is None and self.status == AccountStatus.ACTIVE.value


class CredentialsMixin:
    email = Column(String(254), unique=True, index=True, nullable=False)
    password_hash = Column(String, nullable=False)
