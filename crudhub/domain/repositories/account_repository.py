"""Account repository interface"""

from abc import ABC, abstractmethod
from typing import Any, Optional
from uuid import UUID

from ..enums import ActorRole


class IAccountRepository(ABC):
    """Lookups over the per-role account tables."""

    @abstractmethod
    def get_by_id(self, role: ActorRole, account_id: UUID) -> Optional[Any]:
        pass

    @abstractmethod
    def get_active(self, role: ActorRole, account_id: UUID) -> Optional[Any]:
        """Account row that is neither soft-deleted nor suspended"""
        pass

    @abstractmethod
    def get_by_email(self, role: ActorRole, email: str) -> Optional[Any]:
        pass

    @abstractmethod
    def exists_by_email(self, role: ActorRole, email: str) -> bool:
        pass

    @abstractmethod
    def add(self, role: ActorRole, **fields: Any) -> Any:
        pass
