"""Discussion board routes"""

from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query, Response, status

from ...api.dependencies import (
    get_current_admin, get_current_member, get_current_moderator, get_page_request, get_unit_of_work
)
from ...application.dtos.board_dtos import (
    AppealCreateDto, AppealDecisionDto, AppealDto, ModerationActionCreateDto, ModerationActionDto,
    ReplyCreateDto, ReplyDto, ReplyUpdateDto, ReportCreateDto, ReportDto, ReportUpdateDto,
    TopicCreateDto, TopicDto, TopicFlagsDto, TopicUpdateDto
)
from ...application.dtos.common_dtos import Page, PageRequest
from ...application.use_cases.moderation_use_cases import (
    CreateAppealUseCase, CreateModerationActionUseCase, CreateReportUseCase, DecideAppealUseCase,
    ListAppealsUseCase, ListReportsUseCase, UpdateReportUseCase
)
from ...application.use_cases.topic_use_cases import (
    CreateReplyUseCase, CreateTopicUseCase, DeleteReplyUseCase, DeleteTopicUseCase, GetTopicUseCase,
    ListRepliesUseCase, ListTopicsUseCase, SetTopicFlagsUseCase, UpdateReplyUseCase, UpdateTopicUseCase
)
from ...domain.enums import AppealStatus, ReportStatus
from ...domain.repositories.unit_of_work import IUnitOfWork
from ...domain.value_objects.actor import ActorPayload

router = APIRouter()


# Topics

@router.get("/topics", response_model=Page[TopicDto])
async def list_topics(
    search: Optional[str] = Query(None, max_length=200),
    category: Optional[str] = None,
    page: PageRequest = Depends(get_page_request),
    unit_of_work: IUnitOfWork = Depends(get_unit_of_work)
):
    """List topics, pinned first"""
    return await ListTopicsUseCase(unit_of_work).execute(page, search=search, category=category)


@router.get("/topics/{topic_id}", response_model=TopicDto)
async def get_topic(topic_id: UUID, unit_of_work: IUnitOfWork = Depends(get_unit_of_work)):
    return await GetTopicUseCase(unit_of_work).execute(topic_id)


@router.post("/member/topics", response_model=TopicDto, status_code=status.HTTP_201_CREATED)
async def create_topic(
    request: TopicCreateDto,
    member: ActorPayload = Depends(get_current_member),
    unit_of_work: IUnitOfWork = Depends(get_unit_of_work)
):
    return await CreateTopicUseCase(unit_of_work).execute(member, request)


@router.put("/member/topics/{topic_id}", response_model=TopicDto)
async def update_topic(
    topic_id: UUID,
    request: TopicUpdateDto,
    member: ActorPayload = Depends(get_current_member),
    unit_of_work: IUnitOfWork = Depends(get_unit_of_work)
):
    return await UpdateTopicUseCase(unit_of_work).execute(member, topic_id, request)


@router.delete("/member/topics/{topic_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_topic(
    topic_id: UUID,
    member: ActorPayload = Depends(get_current_member),
    unit_of_work: IUnitOfWork = Depends(get_unit_of_work)
):
    await DeleteTopicUseCase(unit_of_work).execute(member, topic_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/moderator/topics/{topic_id}", status_code=status.HTTP_204_NO_CONTENT)
async def moderator_delete_topic(
    topic_id: UUID,
    moderator: ActorPayload = Depends(get_current_moderator),
    unit_of_work: IUnitOfWork = Depends(get_unit_of_work)
):
    await DeleteTopicUseCase(unit_of_work).execute(moderator, topic_id, as_moderator=True)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.put("/moderator/topics/{topic_id}/flags", response_model=TopicDto)
async def set_topic_flags(
    topic_id: UUID,
    request: TopicFlagsDto,
    moderator: ActorPayload = Depends(get_current_moderator),
    unit_of_work: IUnitOfWork = Depends(get_unit_of_work)
):
    """Lock or pin a topic"""
    return await SetTopicFlagsUseCase(unit_of_work).execute(topic_id, request)


# Replies

@router.get("/topics/{topic_id}/replies", response_model=Page[ReplyDto])
async def list_replies(
    topic_id: UUID,
    page: PageRequest = Depends(get_page_request),
    unit_of_work: IUnitOfWork = Depends(get_unit_of_work)
):
    return await ListRepliesUseCase(unit_of_work).execute(topic_id, page)


@router.post("/member/topics/{topic_id}/replies", response_model=ReplyDto, status_code=status.HTTP_201_CREATED)
async def create_reply(
    topic_id: UUID,
    request: ReplyCreateDto,
    member: ActorPayload = Depends(get_current_member),
    unit_of_work: IUnitOfWork = Depends(get_unit_of_work)
):
    return await CreateReplyUseCase(unit_of_work).execute(member, topic_id, request)


@router.put("/member/replies/{reply_id}", response_model=ReplyDto)
async def update_reply(
    reply_id: UUID,
    request: ReplyUpdateDto,
    member: ActorPayload = Depends(get_current_member),
    unit_of_work: IUnitOfWork = Depends(get_unit_of_work)
):
    return await UpdateReplyUseCase(unit_of_work).execute(member, reply_id, request)


@router.delete("/member/replies/{reply_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_reply(
    reply_id: UUID,
    member: ActorPayload = Depends(get_current_member),
    unit_of_work: IUnitOfWork = Depends(get_unit_of_work)
):
    await DeleteReplyUseCase(unit_of_work).execute(member, reply_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/moderator/replies/{reply_id}", status_code=status.HTTP_204_NO_CONTENT)
async def moderator_delete_reply(
    reply_id: UUID,
    moderator: ActorPayload = Depends(get_current_moderator),
    unit_of_work: IUnitOfWork = Depends(get_unit_of_work)
):
    await DeleteReplyUseCase(unit_of_work).execute(moderator, reply_id, as_moderator=True)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


# Reports and moderation

@router.post("/member/reports", response_model=ReportDto, status_code=status.HTTP_201_CREATED)
async def create_report(
    request: ReportCreateDto,
    member: ActorPayload = Depends(get_current_member),
    unit_of_work: IUnitOfWork = Depends(get_unit_of_work)
):
    """Report a topic or reply"""
    return await CreateReportUseCase(unit_of_work).execute(member, request)


@router.get("/moderator/reports", response_model=Page[ReportDto])
async def list_reports(
    report_status: Optional[ReportStatus] = Query(None, alias="status"),
    page: PageRequest = Depends(get_page_request),
    moderator: ActorPayload = Depends(get_current_moderator),
    unit_of_work: IUnitOfWork = Depends(get_unit_of_work)
):
    return await ListReportsUseCase(unit_of_work).execute(page, status=report_status)


@router.put("/moderator/reports/{report_id}", response_model=ReportDto)
async def update_report(
    report_id: UUID,
    request: ReportUpdateDto,
    moderator: ActorPayload = Depends(get_current_moderator),
    unit_of_work: IUnitOfWork = Depends(get_unit_of_work)
):
    return await UpdateReportUseCase(unit_of_work).execute(moderator, report_id, request)


@router.post(
    "/moderator/moderation-actions",
    response_model=ModerationActionDto,
    status_code=status.HTTP_201_CREATED
)
async def create_moderation_action(
    request: ModerationActionCreateDto,
    moderator: ActorPayload = Depends(get_current_moderator),
    unit_of_work: IUnitOfWork = Depends(get_unit_of_work)
):
    return await CreateModerationActionUseCase(unit_of_work).execute(moderator, request)


# Appeals

@router.post("/member/appeals", response_model=AppealDto, status_code=status.HTTP_201_CREATED)
async def create_appeal(
    request: AppealCreateDto,
    member: ActorPayload = Depends(get_current_member),
    unit_of_work: IUnitOfWork = Depends(get_unit_of_work)
):
    """Appeal a moderation action"""
    return await CreateAppealUseCase(unit_of_work).execute(member, request)


@router.get("/member/appeals", response_model=Page[AppealDto])
async def list_my_appeals(
    page: PageRequest = Depends(get_page_request),
    member: ActorPayload = Depends(get_current_member),
    unit_of_work: IUnitOfWork = Depends(get_unit_of_work)
):
    return await ListAppealsUseCase(unit_of_work).execute(page, member_id=member.id)


@router.get("/admin/appeals", response_model=Page[AppealDto])
async def list_appeals(
    appeal_status: Optional[AppealStatus] = Query(None, alias="status"),
    page: PageRequest = Depends(get_page_request),
    admin: ActorPayload = Depends(get_current_admin),
    unit_of_work: IUnitOfWork = Depends(get_unit_of_work)
):
    return await ListAppealsUseCase(unit_of_work).execute(page, status=appeal_status)


@router.put("/admin/appeals/{appeal_id}", response_model=AppealDto)
async def decide_appeal(
    appeal_id: UUID,
    request: AppealDecisionDto,
    admin: ActorPayload = Depends(get_current_admin),
    unit_of_work: IUnitOfWork = Depends(get_unit_of_work)
):
    """Uphold or overturn a pending appeal"""
    return await DecideAppealUseCase(unit_of_work).execute(admin, appeal_id, request)
