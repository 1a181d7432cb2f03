"""Discussion board ORM Models"""

from datetime import datetime

from sqlalchemy import (
    Column, String, Text, Boolean, Integer, DateTime, ForeignKey, Uuid, UniqueConstraint
)

from ...db.models import Base, UuidPrimaryKeyMixin, TimestampMixin, SoftDeleteMixin
from ...domain.enums import ReportStatus, AppealStatus


class BoardTopicModel(UuidPrimaryKeyMixin, TimestampMixin, SoftDeleteMixin, Base):
    __tablename__ = 'board_topics'

    author_id = Column(Uuid, ForeignKey('members.id'), nullable=False, index=True)
    title = Column(String(200), nullable=False)
    body = Column(Text, nullable=False)
    category = Column(String(50), nullable=True, index=True)
    is_locked = Column(Boolean, default=False, nullable=False)
    is_pinned = Column(Boolean, default=False, nullable=False)
    reply_count = Column(Integer, default=0, nullable=False)


class BoardReplyModel(UuidPrimaryKeyMixin, TimestampMixin, SoftDeleteMixin, Base):
    __tablename__ = 'board_replies'

    topic_id = Column(Uuid, ForeignKey('board_topics.id'), nullable=False, index=True)
    author_id = Column(Uuid, ForeignKey('members.id'), nullable=False, index=True)
    parent_reply_id = Column(Uuid, ForeignKey('board_replies.id'), nullable=True)
    depth = Column(Integer, default=0, nullable=False)
    body = Column(Text, nullable=False)


class BoardReportModel(UuidPrimaryKeyMixin, TimestampMixin, Base):
    __tablename__ = 'board_reports'

    reporter_id = Column(Uuid, ForeignKey('members.id'), nullable=False, index=True)
    topic_id = Column(Uuid, ForeignKey('board_topics.id'), nullable=True)
    reply_id = Column(Uuid, ForeignKey('board_replies.id'), nullable=True)
    reason = Column(String(30), nullable=False)
    details = Column(Text, nullable=True)
    status = Column(String(20), default=ReportStatus.PENDING.value, nullable=False, index=True)
    moderator_id = Column(Uuid, ForeignKey('moderators.id'), nullable=True)
    resolution_note = Column(Text, nullable=True)
    resolved_at = Column(DateTime, nullable=True)


class BoardModerationActionModel(UuidPrimaryKeyMixin, Base):
    __tablename__ = 'board_moderation_actions'

    moderator_id = Column(Uuid, ForeignKey('moderators.id'), nullable=False)
    target_member_id = Column(Uuid, ForeignKey('members.id'), nullable=False, index=True)
    report_id = Column(Uuid, ForeignKey('board_reports.id'), nullable=True)
    action_type = Column(String(30), nullable=False)
    reason = Column(Text, nullable=False)
    is_appealable = Column(Boolean, default=True, nullable=False)
    expires_at = Column(DateTime, nullable=True)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)


class BoardAppealModel(UuidPrimaryKeyMixin, TimestampMixin, Base):
    __tablename__ = 'board_appeals'
    __table_args__ = (
        UniqueConstraint('member_id', 'moderation_action_id', name='uq_board_appeals_member_action'),
    )

    member_id = Column(Uuid, ForeignKey('members.id'), nullable=False, index=True)
    moderation_action_id = Column(Uuid, ForeignKey('board_moderation_actions.id'), nullable=False)
    explanation = Column(Text, nullable=False)
    evidence = Column(Text, nullable=True)
    status = Column(String(20), default=AppealStatus.PENDING_REVIEW.value, nullable=False, index=True)
    decision_reasoning = Column(Text, nullable=True)
    reviewing_admin_id = Column(Uuid, ForeignKey('admins.id'), nullable=True)
    reviewed_at = Column(DateTime, nullable=True)
