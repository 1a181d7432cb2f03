"""Community platform DTOs"""

from datetime import datetime
from typing import Literal, Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from ...domain.enums import PostType

COMMUNITY_NAME_PATTERN = r"^[A-Za-z0-9_]{3,21}$"


class CommunityCreateDto(BaseModel):
    name: str = Field(..., pattern=COMMUNITY_NAME_PATTERN)
    title: str = Field(..., min_length=1, max_length=100)
    description: Optional[str] = Field(None, max_length=5000)


class CommunityUpdateDto(BaseModel):
    title: Optional[str] = Field(None, min_length=1, max_length=100)
    description: Optional[str] = Field(None, max_length=5000)


class CommunityDto(BaseModel):
    id: UUID
    name: str
    title: str
    description: Optional[str] = None
    creator_id: UUID
    subscriber_count: int
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


class SubscriptionDto(BaseModel):
    id: UUID
    community_id: UUID
    member_id: UUID
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class ModeratorAssignmentCreateDto(BaseModel):
    moderator_id: UUID


class ModeratorAssignmentDto(BaseModel):
    id: UUID
    community_id: UUID
    moderator_id: UUID
    assigned_by_admin_id: UUID
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class PostCreateDto(BaseModel):
    post_type: PostType = PostType.TEXT
    title: str = Field(..., min_length=1, max_length=300)
    body: Optional[str] = Field(None, max_length=40000)
    url: Optional[str] = Field(None, max_length=2000)


class PostUpdateDto(BaseModel):
    title: Optional[str] = Field(None, min_length=1, max_length=300)
    body: Optional[str] = Field(None, max_length=40000)
    url: Optional[str] = Field(None, max_length=2000)


class PostDto(BaseModel):
    id: UUID
    community_id: UUID
    author_id: UUID
    post_type: PostType
    title: str
    body: Optional[str] = None
    url: Optional[str] = None
    score: int
    upvote_count: int
    downvote_count: int
    comment_count: int
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


class CommentCreateDto(BaseModel):
    body: str = Field(..., min_length=1, max_length=10000)
    parent_comment_id: Optional[UUID] = None


class CommentUpdateDto(BaseModel):
    body: str = Field(..., min_length=1, max_length=10000)


class CommentDto(BaseModel):
    id: UUID
    post_id: UUID
    author_id: UUID
    parent_comment_id: Optional[UUID] = None
    body: str
    score: int
    upvote_count: int
    downvote_count: int
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


class VoteDto(BaseModel):
    """Vote request; +1 for an upvote, -1 for a downvote"""
    value: Literal[1, -1]


class VoteResponseDto(BaseModel):
    target_id: UUID
    member_id: UUID
    value: int
    score: int
    upvote_count: int
    downvote_count: int
