"""Account repository implementation over the per-role tables"""

from typing import Any, Optional
from uuid import UUID

from sqlalchemy.orm import Session

from ...domain.enums import ActorRole, AccountStatus
from ...domain.repositories.account_repository import IAccountRepository
from ..orm.account_model import ACCOUNT_MODELS


class AccountRepositoryImpl(IAccountRepository):
    """Repository implementation for accounts of every role"""

    def __init__(self, session: Session):
        self.session = session

    def _model(self, role: ActorRole):
        return ACCOUNT_MODELS[ActorRole(role)]

    def get_by_id(self, role: ActorRole, account_id: UUID) -> Optional[Any]:
        model = self._model(role)
        return self.session.query(model).filter(model.id == account_id).first()

    def get_active(self, role: ActorRole, account_id: UUID) -> Optional[Any]:
        model = self._model(role)
        return self.session.query(model).filter(
            model.id == account_id,
            model.deleted_at.is_(None),
            model.status == AccountStatus.ACTIVE.value
        ).first()

    def get_by_email(self, role: ActorRole, email: str) -> Optional[Any]:
        model = self._model(role)
        return self.session.query(model).filter(model.email == email.lower()).first()

    def exists_by_email(self, role: ActorRole, email: str) -> bool:
        return self.get_by_email(role, email) is not None

    def add(self, role: ActorRole, **fields: Any) -> Any:
        """Insert a new account row and flush so its id is assigned"""
        account = self._model(role)(**fields)
        self.session.add(account)
        self.session.flush()
        return account
