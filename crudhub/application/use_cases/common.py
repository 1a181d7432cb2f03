"""Helpers shared by the use cases"""

from typing import Any, Callable, Type
from uuid import UUID

from sqlalchemy import case
from sqlalchemy.orm import Query, Session

from ...core.exceptions import NotFoundError, ForbiddenError
from ...domain.value_objects.actor import ActorPayload
from ..dtos.common_dtos import Page, PageRequest, Pagination

LIKE_ESCAPE = "\\"


def paginate(query: Query, request: PageRequest, mapper: Callable[[Any], Any]) -> Page:
    """Count the query, then fetch one page of rows mapped to DTOs"""
    records = query.order_by(None).count()
    rows = query.offset(request.offset).limit(request.limit).all()
    return Page(
        pagination=Pagination.of(request, records),
        data=[mapper(row) for row in rows],
    )


def get_or_404(session: Session, model: Type, entity_id: UUID, resource: str, include_deleted: bool = False):
    """Load a row by id; soft-deleted rows count as missing unless asked for"""
    query = session.query(model).filter(model.id == entity_id)
    if not include_deleted and hasattr(model, "deleted_at"):
        query = query.filter(model.deleted_at.is_(None))
    entity = query.first()
    if entity is None:
        raise NotFoundError(resource, entity_id)
    return entity


def ensure_owner(actor: ActorPayload, owner_id: UUID, resource: str) -> None:
    if not actor.owns(owner_id):
        raise ForbiddenError(f"You do not own this {resource.lower()}")


def contains_pattern(term: str) -> str:
    """LIKE pattern matching ``term`` literally anywhere; use with ``escape=LIKE_ESCAPE``"""
    escaped = (
        term.replace(LIKE_ESCAPE, LIKE_ESCAPE * 2)
        .replace("%", LIKE_ESCAPE + "%")
        .replace("_", LIKE_ESCAPE + "_")
    )
    return f"%{escaped}%"


def increment(column, by: int = 1):
    """``column + by`` evaluated by the database at UPDATE time"""
    return column + by


def decrement(column, by: int = 1):
    """``column - by`` evaluated by the database, floored at zero"""
    return case((column >= by, column - by), else_=0)
