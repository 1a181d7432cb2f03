"""Discussion board reports, moderation actions and appeals"""

import logging
from datetime import datetime, timedelta
from typing import Optional
from uuid import UUID

from ...core.config import settings
from ...core.exceptions import BadRequestError, ConflictError, ForbiddenError, NotFoundError
from ...domain.enums import ActorRole, AppealStatus, ReportStatus
from ...domain.repositories.unit_of_work import IUnitOfWork
from ...domain.value_objects.actor import ActorPayload
from ...infrastructure.orm.board_model import (
    BoardAppealModel, BoardModerationActionModel, BoardReplyModel, BoardReportModel, BoardTopicModel
)
from ..dtos.board_dtos import (
    AppealCreateDto, AppealDecisionDto, AppealDto, ModerationActionCreateDto, ModerationActionDto,
    ReportCreateDto, ReportDto, ReportUpdateDto
)
from ..dtos.common_dtos import Page, PageRequest
from .common import get_or_404, paginate

logger = logging.getLogger(__name__)

OPEN_REPORT_STATUSES = [ReportStatus.PENDING.value, ReportStatus.UNDER_REVIEW.value]


class CreateReportUseCase:
    """Report a topic or a reply for moderator review"""

    def __init__(self, unit_of_work: IUnitOfWork):
        self.unit_of_work = unit_of_work

    async def execute(self, actor: ActorPayload, request: ReportCreateDto) -> ReportDto:
        if (request.topic_id is None) == (request.reply_id is None):
            raise BadRequestError("Report exactly one of topic_id or reply_id")

        async with self.unit_of_work:
            session = self.unit_of_work.session
            if request.topic_id is not None:
                target = get_or_404(session, BoardTopicModel, request.topic_id, "Topic")
                target_filter = BoardReportModel.topic_id == target.id
            else:
                target = get_or_404(session, BoardReplyModel, request.reply_id, "Reply")
                target_filter = BoardReportModel.reply_id == target.id

            if target.author_id == actor.id:
                raise BadRequestError("You cannot report your own content")

            duplicate = session.query(BoardReportModel).filter(
                BoardReportModel.reporter_id == actor.id,
                target_filter,
                BoardReportModel.status.in_(OPEN_REPORT_STATUSES)
            ).first()
            if duplicate:
                raise ConflictError("You already have an open report on this content")

            report = BoardReportModel(
                reporter_id=actor.id,
                topic_id=request.topic_id,
                reply_id=request.reply_id,
                reason=request.reason.value,
                details=request.details,
            )
            session.add(report)
            await self.unit_of_work.commit()
            return ReportDto.model_validate(report)


class ListReportsUseCase:

    def __init__(self, unit_of_work: IUnitOfWork):
        self.unit_of_work = unit_of_work

    async def execute(self, page: PageRequest, status: Optional[ReportStatus] = None) -> Page:
        async with self.unit_of_work:
            query = self.unit_of_work.session.query(BoardReportModel)
            if status is not None:
                query = query.filter(BoardReportModel.status == status.value)
            query = query.order_by(BoardReportModel.created_at.desc())
            return paginate(query, page, ReportDto.model_validate)


class UpdateReportUseCase:
    """Moderator review; resolved and dismissed reports are final"""

    def __init__(self, unit_of_work: IUnitOfWork):
        self.unit_of_work = unit_of_work

    async def execute(self, actor: ActorPayload, report_id: UUID, request: ReportUpdateDto) -> ReportDto:
        async with self.unit_of_work:
            report = get_or_404(self.unit_of_work.session, BoardReportModel, report_id, "Report")
            if ReportStatus(report.status).is_closed:
                raise ConflictError(f"Report is already {report.status}")

            report.status = request.status.value
            report.moderator_id = actor.id
            if request.resolution_note is not None:
                report.resolution_note = request.resolution_note
            if request.status.is_closed:
                report.resolved_at = datetime.utcnow()
            await self.unit_of_work.commit()
            return ReportDto.model_validate(report)


class CreateModerationActionUseCase:

    def __init__(self, unit_of_work: IUnitOfWork):
        self.unit_of_work = unit_of_work

    async def execute(self, actor: ActorPayload, request: ModerationActionCreateDto) -> ModerationActionDto:
        async with self.unit_of_work:
            session = self.unit_of_work.session
            member = self.unit_of_work.accounts.get_by_id(ActorRole.MEMBER, request.target_member_id)
            if not member or member.is_deleted:
                raise NotFoundError("Member", request.target_member_id)
            if request.report_id is not None:
                get_or_404(session, BoardReportModel, request.report_id, "Report")

            action = BoardModerationActionModel(
                moderator_id=actor.id,
                target_member_id=member.id,
                report_id=request.report_id,
                action_type=request.action_type.value,
                reason=request.reason,
                is_appealable=request.is_appealable,
                expires_at=request.expires_at,
            )
            session.add(action)
            await self.unit_of_work.commit()
            logger.info(
                "Moderator %s issued %s against member %s", actor.id, action.action_type, member.id
            )
            return ModerationActionDto.model_validate(action)


class CreateAppealUseCase:
    """A member contests a moderation action taken against them"""

    def __init__(self, unit_of_work: IUnitOfWork):
        self.unit_of_work = unit_of_work

    async def execute(self, actor: ActorPayload, request: AppealCreateDto) -> AppealDto:
        async with self.unit_of_work:
            session = self.unit_of_work.session
            action = get_or_404(session, BoardModerationActionModel, request.moderation_action_id, "Moderation action")
            if action.target_member_id != actor.id:
                raise ForbiddenError("This moderation action was not taken against you")
            if not action.is_appealable:
                raise ForbiddenError("This moderation action cannot be appealed")
            if action.created_at < datetime.utcnow() - timedelta(days=settings.APPEAL_WINDOW_DAYS):
                raise BadRequestError(f"Appeals must be filed within {settings.APPEAL_WINDOW_DAYS} days")

            existing = session.query(BoardAppealModel).filter(
                BoardAppealModel.member_id == actor.id,
                BoardAppealModel.moderation_action_id == action.id
            ).first()
            if existing:
                raise ConflictError("This moderation action has already been appealed")

            pending = session.query(BoardAppealModel).filter(
                BoardAppealModel.member_id == actor.id,
                BoardAppealModel.status == AppealStatus.PENDING_REVIEW.value
            ).count()
            if pending >= settings.MAX_PENDING_APPEALS:
                raise BadRequestError(f"You cannot have more than {settings.MAX_PENDING_APPEALS} pending appeals")

            appeal = BoardAppealModel(
                member_id=actor.id,
                moderation_action_id=action.id,
                explanation=request.explanation,
                evidence=request.evidence,
            )
            session.add(appeal)
            await self.unit_of_work.commit()
            return AppealDto.model_validate(appeal)


class ListAppealsUseCase:

    def __init__(self, unit_of_work: IUnitOfWork):
        self.unit_of_work = unit_of_work

    async def execute(
        self,
        page: PageRequest,
        member_id: Optional[UUID] = None,
        status: Optional[AppealStatus] = None,
    ) -> Page:
        async with self.unit_of_work:
            query = self.unit_of_work.session.query(BoardAppealModel)
            if member_id is not None:
                query = query.filter(BoardAppealModel.member_id == member_id)
            if status is not None:
                query = query.filter(BoardAppealModel.status == status.value)
            query = query.order_by(BoardAppealModel.created_at.desc())
            return paginate(query, page, AppealDto.model_validate)


class DecideAppealUseCase:

    def __init__(self, unit_of_work: IUnitOfWork):
        self.unit_of_work = unit_of_work

    async def execute(self, actor: ActorPayload, appeal_id: UUID, request: AppealDecisionDto) -> AppealDto:
        async with self.unit_of_work:
            appeal = get_or_404(self.unit_of_work.session, BoardAppealModel, appeal_id, "Appeal")
            if appeal.status != AppealStatus.PENDING_REVIEW.value:
                raise ConflictError(f"Appeal has already been {appeal.status}")

            appeal.status = request.decision.value
            appeal.decision_reasoning = request.decision_reasoning
            appeal.reviewing_admin_id = actor.id
            appeal.reviewed_at = datetime.utcnow()
            await self.unit_of_work.commit()
            logger.info("Admin %s marked appeal %s as %s", actor.id, appeal.id, appeal.status)
            return AppealDto.model_validate(appeal)
