"""Unit of Work interface for transaction management"""

from abc import ABC, abstractmethod

from sqlalchemy.orm import Session

from .account_repository import IAccountRepository


class IUnitOfWork(ABC):
    """Unit of Work interface for managing one request's transaction"""

    session: Session
    accounts: IAccountRepository

    @abstractmethod
    async def __aenter__(self):
        """Enter async context"""
        pass

    @abstractmethod
    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Exit async context"""
        pass

    @abstractmethod
    async def commit(self):
        """Commit transaction"""
        pass

    @abstractmethod
    async def rollback(self):
        """Rollback transaction"""
        pass
