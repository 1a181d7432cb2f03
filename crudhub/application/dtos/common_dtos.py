"""Pagination DTOs shared by every list endpoint"""

from math import ceil
from typing import Generic, List, TypeVar

from pydantic import BaseModel, Field

from ...core.config import settings

T = TypeVar("T")


class PageRequest(BaseModel):
    """Page and limit requested by the caller"""
    page: int = Field(1, ge=1)
    limit: int = Field(settings.DEFAULT_PAGE_SIZE, ge=1, le=settings.MAX_PAGE_SIZE)

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit


class Pagination(BaseModel):
    current: int
    limit: int
    records: int
    pages: int

    @classmethod
    def of(cls, request: PageRequest, records: int) -> "Pagination":
        return cls(
            current=request.page,
            limit=request.limit,
            records=records,
            pages=ceil(records / request.limit),
        )


class Page(BaseModel, Generic[T]):
    """Paginated response body"""
    pagination: Pagination
    data: List[T]
