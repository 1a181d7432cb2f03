"""API dependencies: sessions, unit of work, paging and per-role authorization"""

import logging
from typing import Optional
from uuid import UUID

from fastapi import Depends, Query
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from sqlalchemy.orm import Session

from ..core.config import settings
from ..core.exceptions import ForbiddenError, UnauthorizedError
from ..core.security import verify_token
from ..db.database import get_db
from ..domain.enums import ActorRole
from ..domain.repositories.unit_of_work import IUnitOfWork
from ..domain.value_objects.actor import ActorPayload
from ..application.dtos.common_dtos import PageRequest
from ..infrastructure.repositories.unit_of_work_impl import UnitOfWorkImpl

logger = logging.getLogger(__name__)

security = HTTPBearer(auto_error=False)


def get_unit_of_work(db: Session = Depends(get_db)) -> IUnitOfWork:
    """Get unit of work"""
    return UnitOfWorkImpl(db)


def get_page_request(
    page: int = Query(1, ge=1),
    limit: int = Query(settings.DEFAULT_PAGE_SIZE, ge=1, le=settings.MAX_PAGE_SIZE),
) -> PageRequest:
    return PageRequest(page=page, limit=limit)


def authorize(
    role: ActorRole,
    credentials: Optional[HTTPAuthorizationCredentials],
    unit_of_work: IUnitOfWork,
) -> ActorPayload:
    """
    Check a bearer token against the account table of ``role``.

    Missing or unreadable tokens are 401. A token issued for another role,
    or one whose account is gone or suspended, is 403.
    """
    if credentials is None:
        raise UnauthorizedError("Not authenticated")

    payload = verify_token(credentials.credentials)
    if payload is None:
        raise UnauthorizedError("Invalid or expired token")

    if payload["type"] != role.value:
        logger.warning("Rejected %s token on a %s route", payload["type"], role.value)
        raise ForbiddenError(f"{role.value.capitalize()} access required")

    try:
        account_id = UUID(str(payload["id"]))
    except ValueError:
        raise UnauthorizedError("Invalid or expired token")

    if unit_of_work.accounts.get_active(role, account_id) is None:
        logger.warning("Rejected token of missing or inactive %s %s", role.value, account_id)
        raise ForbiddenError("Account is not active")

    return ActorPayload(id=account_id, role=role)


def require_role(role: ActorRole):
    """Build the dependency that authorizes callers of one role"""

    async def dependency(
        credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
        unit_of_work: IUnitOfWork = Depends(get_unit_of_work),
    ) -> ActorPayload:
        return authorize(role, credentials, unit_of_work)

    dependency.__name__ = f"get_current_{role.value}"
    return dependency


get_current_member = require_role(ActorRole.MEMBER)
get_current_moderator = require_role(ActorRole.MODERATOR)
get_current_admin = require_role(ActorRole.ADMIN)
get_current_customer = require_role(ActorRole.CUSTOMER)
get_current_seller = require_role(ActorRole.SELLER)


async def get_current_actor(
    role: ActorRole,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    unit_of_work: IUnitOfWork = Depends(get_unit_of_work),
) -> ActorPayload:
    """Authorize against the role named in the request path"""
    return authorize(role, credentials, unit_of_work)
