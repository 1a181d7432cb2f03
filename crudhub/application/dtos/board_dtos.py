"""Discussion board DTOs"""

from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from ...domain.enums import (
    ReportReason, ReportStatus, ModerationActionType, AppealStatus, AppealDecision
)


class TopicCreateDto(BaseModel):
    title: str = Field(..., min_length=1, max_length=200)
    body: str = Field(..., min_length=1)
    category: Optional[str] = Field(None, max_length=50)


class TopicUpdateDto(BaseModel):
    title: Optional[str] = Field(None, min_length=1, max_length=200)
    body: Optional[str] = Field(None, min_length=1)
    category: Optional[str] = Field(None, max_length=50)


class TopicFlagsDto(BaseModel):
    is_locked: Optional[bool] = None
    is_pinned: Optional[bool] = None


class TopicDto(BaseModel):
    id: UUID
    author_id: UUID
    title: str
    body: str
    category: Optional[str] = None
    is_locked: bool
    is_pinned: bool
    reply_count: int
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


class ReplyCreateDto(BaseModel):
    body: str = Field(..., min_length=1)
    parent_reply_id: Optional[UUID] = None


class ReplyUpdateDto(BaseModel):
    body: str = Field(..., min_length=1)


class ReplyDto(BaseModel):
    id: UUID
    topic_id: UUID
    author_id: UUID
    parent_reply_id: Optional[UUID] = None
    depth: int
    body: str
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


class ReportCreateDto(BaseModel):
    """Exactly one of topic_id / reply_id must be given"""
    topic_id: Optional[UUID] = None
    reply_id: Optional[UUID] = None
    reason: ReportReason
    details: Optional[str] = Field(None, max_length=2000)


class ReportUpdateDto(BaseModel):
    status: ReportStatus
    resolution_note: Optional[str] = Field(None, max_length=2000)


class ReportDto(BaseModel):
    id: UUID
    reporter_id: UUID
    topic_id: Optional[UUID] = None
    reply_id: Optional[UUID] = None
    reason: ReportReason
    details: Optional[str] = None
    status: ReportStatus
    moderator_id: Optional[UUID] = None
    resolution_note: Optional[str] = None
    resolved_at: Optional[datetime] = None
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class ModerationActionCreateDto(BaseModel):
    target_member_id: UUID
    report_id: Optional[UUID] = None
    action_type: ModerationActionType
    reason: str = Field(..., min_length=1, max_length=2000)
    is_appealable: bool = True
    expires_at: Optional[datetime] = None


class ModerationActionDto(BaseModel):
    id: UUID
    moderator_id: UUID
    target_member_id: UUID
    report_id: Optional[UUID] = None
    action_type: ModerationActionType
    reason: str
    is_appealable: bool
    expires_at: Optional[datetime] = None
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class AppealCreateDto(BaseModel):
    moderation_action_id: UUID
    explanation: str = Field(..., min_length=1, max_length=5000)
    evidence: Optional[str] = Field(None, max_length=5000)


class AppealDecisionDto(BaseModel):
    decision: AppealDecision
    decision_reasoning: str = Field(..., min_length=1, max_length=5000)


class AppealDto(BaseModel):
    id: UUID
    member_id: UUID
    moderation_action_id: UUID
    explanation: str
    evidence: Optional[str] = None
    status: AppealStatus
    decision_reasoning: Optional[str] = None
    reviewing_admin_id: Optional[UUID] = None
    reviewed_at: Optional[datetime] = None
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)
