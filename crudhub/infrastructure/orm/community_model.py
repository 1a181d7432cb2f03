"""Community platform ORM Models"""

from datetime import datetime

from sqlalchemy import (
    Column, String, Text, Integer, SmallInteger, DateTime, ForeignKey, Uuid, UniqueConstraint
)

from ...db.models import Base, UuidPrimaryKeyMixin, TimestampMixin, SoftDeleteMixin
from ...domain.enums import PostType


class CommunityModel(UuidPrimaryKeyMixin, TimestampMixin, SoftDeleteMixin, Base):
    __tablename__ = 'communities'

    name = Column(String(21), unique=True, nullable=False, index=True)
    title = Column(String(100), nullable=False)
    description = Column(Text, nullable=True)
    creator_id = Column(Uuid, ForeignKey('members.id'), nullable=False)
    subscriber_count = Column(Integer, default=0, nullable=False)


class CommunitySubscriptionModel(UuidPrimaryKeyMixin, Base):
    __tablename__ = 'community_subscriptions'
    __table_args__ = (
        UniqueConstraint('community_id', 'member_id', name='uq_community_subscriptions_member'),
    )

    community_id = Column(Uuid, ForeignKey('communities.id'), nullable=False, index=True)
    member_id = Column(Uuid, ForeignKey('members.id'), nullable=False, index=True)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)


class CommunityModeratorAssignmentModel(UuidPrimaryKeyMixin, Base):
    __tablename__ = 'community_moderator_assignments'
    __table_args__ = (
        UniqueConstraint('community_id', 'moderator_id', name='uq_community_moderator_assignments'),
    )

    community_id = Column(Uuid, ForeignKey('communities.id'), nullable=False, index=True)
    moderator_id = Column(Uuid, ForeignKey('moderators.id'), nullable=False, index=True)
    assigned_by_admin_id = Column(Uuid, ForeignKey('admins.id'), nullable=False)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)


class CommunityPostModel(UuidPrimaryKeyMixin, TimestampMixin, SoftDeleteMixin, Base):
    __tablename__ = 'community_posts'

    community_id = Column(Uuid, ForeignKey('communities.id'), nullable=False, index=True)
    author_id = Column(Uuid, ForeignKey('members.id'), nullable=False, index=True)
    post_type = Column(String(10), default=PostType.TEXT.value, nullable=False)
    title = Column(String(300), nullable=False)
    body = Column(Text, nullable=True)
    url = Column(String(2000), nullable=True)
    score = Column(Integer, default=0, nullable=False, index=True)
    upvote_count = Column(Integer, default=0, nullable=False)
    downvote_count = Column(Integer, default=0, nullable=False)
    comment_count = Column(Integer, default=0, nullable=False)


class CommunityCommentModel(UuidPrimaryKeyMixin, TimestampMixin, SoftDeleteMixin, Base):
    __tablename__ = 'community_comments'

    post_id = Column(Uuid, ForeignKey('community_posts.id'), nullable=False, index=True)
    author_id = Column(Uuid, ForeignKey('members.id'), nullable=False, index=True)
    parent_comment_id = Column(Uuid, ForeignKey('community_comments.id'), nullable=True)
    body = Column(Text, nullable=False)
    score = Column(Integer, default=0, nullable=False)
    upvote_count = Column(Integer, default=0, nullable=False)
    downvote_count = Column(Integer, default=0, nullable=False)


class CommunityPostVoteModel(UuidPrimaryKeyMixin, TimestampMixin, Base):
    __tablename__ = 'community_post_votes'
    __table_args__ = (
        UniqueConstraint('post_id', 'member_id', name='uq_community_post_votes_member'),
    )

    post_id = Column(Uuid, ForeignKey('community_posts.id'), nullable=False, index=True)
    member_id = Column(Uuid, ForeignKey('members.id'), nullable=False)
    value = Column(SmallInteger, nullable=False)


class CommunityCommentVoteModel(UuidPrimaryKeyMixin, TimestampMixin, Base):
    __tablename__ = 'community_comment_votes'
    __table_args__ = (
        UniqueConstraint('comment_id', 'member_id', name='uq_community_comment_votes_member'),
    )

    comment_id = Column(Uuid, ForeignKey('community_comments.id'), nullable=False, index=True)
    member_id = Column(Uuid, ForeignKey('members.id'), nullable=False)
    value = Column(SmallInteger, nullable=False)
