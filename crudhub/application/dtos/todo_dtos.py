"""Todo DTOs"""

from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class TodoCreateDto(BaseModel):
    title: str = Field(..., min_length=1, max_length=200)
    description: Optional[str] = Field(None, max_length=5000)
    due_date: Optional[datetime] = None


class TodoUpdateDto(BaseModel):
    """Partial update, omitted fields are left untouched"""
    title: Optional[str] = Field(None, min_length=1, max_length=200)
    description: Optional[str] = Field(None, max_length=5000)
    due_date: Optional[datetime] = None
    is_completed: Optional[bool] = None


class TodoDto(BaseModel):
    id: UUID
    member_id: UUID
    title: str
    description: Optional[str] = None
    is_completed: bool
    due_date: Optional[datetime] = None
    completed_at: Optional[datetime] = None
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)
