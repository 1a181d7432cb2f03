"""Discussion board topic and reply use cases"""

from typing import Optional
from uuid import UUID

from sqlalchemy import or_

from ...core.config import settings
from ...core.exceptions import BadRequestError, ForbiddenError, NotFoundError
from ...domain.repositories.unit_of_work import IUnitOfWork
from ...domain.value_objects.actor import ActorPayload
from ...infrastructure.orm.board_model import BoardTopicModel, BoardReplyModel
from ..dtos.board_dtos import (
    ReplyCreateDto, ReplyDto, ReplyUpdateDto, TopicCreateDto, TopicDto, TopicFlagsDto, TopicUpdateDto
)
from ..dtos.common_dtos import Page, PageRequest
from .common import LIKE_ESCAPE, contains_pattern, decrement, ensure_owner, get_or_404, increment, paginate


class ListTopicsUseCase:
    """Public topic listing, pinned topics first then newest"""

    def __init__(self, unit_of_work: IUnitOfWork):
        self.unit_of_work = unit_of_work

    async def execute(self, page: PageRequest, search: Optional[str] = None, category: Optional[str] = None) -> Page:
        async with self.unit_of_work:
            query = self.unit_of_work.session.query(BoardTopicModel).filter(
                BoardTopicModel.deleted_at.is_(None)
            )
            if search:
                pattern = contains_pattern(search)
                query = query.filter(or_(
                    BoardTopicModel.title.ilike(pattern, escape=LIKE_ESCAPE),
                    BoardTopicModel.body.ilike(pattern, escape=LIKE_ESCAPE),
                ))
            if category:
                query = query.filter(BoardTopicModel.category == category)
            query = query.order_by(BoardTopicModel.is_pinned.desc(), BoardTopicModel.created_at.desc())
            return paginate(query, page, TopicDto.model_validate)


class GetTopicUseCase:

    def __init__(self, unit_of_work: IUnitOfWork):
        self.unit_of_work = unit_of_work

    async def execute(self, topic_id: UUID) -> TopicDto:
        async with self.unit_of_work:
            topic = get_or_404(self.unit_of_work.session, BoardTopicModel, topic_id, "Topic")
            return TopicDto.model_validate(topic)


class CreateTopicUseCase:

    def __init__(self, unit_of_work: IUnitOfWork):
        self.unit_of_work = unit_of_work

    async def execute(self, actor: ActorPayload, request: TopicCreateDto) -> TopicDto:
        async with self.unit_of_work:
            topic = BoardTopicModel(
                author_id=actor.id,
                title=request.title,
                body=request.body,
                category=request.category,
            )
            self.unit_of_work.session.add(topic)
            await self.unit_of_work.commit()
            return TopicDto.model_validate(topic)


class UpdateTopicUseCase:

    def __init__(self, unit_of_work: IUnitOfWork):
        self.unit_of_work = unit_of_work

    async def execute(self, actor: ActorPayload, topic_id: UUID, request: TopicUpdateDto) -> TopicDto:
        async with self.unit_of_work:
            topic = get_or_404(self.unit_of_work.session, BoardTopicModel, topic_id, "Topic")
            ensure_owner(actor, topic.author_id, "Topic")
            if topic.is_locked:
                raise ForbiddenError("Topic is locked")

            for field, value in request.model_dump(exclude_unset=True, exclude_none=True).items():
                setattr(topic, field, value)
            await self.unit_of_work.commit()
            return TopicDto.model_validate(topic)


class DeleteTopicUseCase:
    """Soft delete by the author, or by any moderator"""

    def __init__(self, unit_of_work: IUnitOfWork):
        self.unit_of_work = unit_of_work

    async def execute(self, actor: ActorPayload, topic_id: UUID, as_moderator: bool = False) -> None:
        async with self.unit_of_work:
            topic = get_or_404(self.unit_of_work.session, BoardTopicModel, topic_id, "Topic")
            if not as_moderator:
                ensure_owner(actor, topic.author_id, "Topic")
            topic.soft_delete()
            await self.unit_of_work.commit()


class SetTopicFlagsUseCase:

    def __init__(self, unit_of_work: IUnitOfWork):
        self.unit_of_work = unit_of_work

    async def execute(self, topic_id: UUID, request: TopicFlagsDto) -> TopicDto:
        async with self.unit_of_work:
            topic = get_or_404(self.unit_of_work.session, BoardTopicModel, topic_id, "Topic")
            if request.is_locked is not None:
                topic.is_locked = request.is_locked
            if request.is_pinned is not None:
                topic.is_pinned = request.is_pinned
            await self.unit_of_work.commit()
            return TopicDto.model_validate(topic)


class ListRepliesUseCase:
    """Replies of one topic, oldest first"""

    def __init__(self, unit_of_work: IUnitOfWork):
        self.unit_of_work = unit_of_work

    async def execute(self, topic_id: UUID, page: PageRequest) -> Page:
        async with self.unit_of_work:
            session = self.unit_of_work.session
            get_or_404(session, BoardTopicModel, topic_id, "Topic")
            query = session.query(BoardReplyModel).filter(
                BoardReplyModel.topic_id == topic_id,
                BoardReplyModel.deleted_at.is_(None)
            ).order_by(BoardReplyModel.created_at.asc(), BoardReplyModel.id)
            return paginate(query, page, ReplyDto.model_validate)


class CreateReplyUseCase:
    """Add a reply and bump the topic's reply counter in the same transaction"""

    def __init__(self, unit_of_work: IUnitOfWork):
        self.unit_of_work = unit_of_work

    async def execute(self, actor: ActorPayload, topic_id: UUID, request: ReplyCreateDto) -> ReplyDto:
        async with self.unit_of_work:
            session = self.unit_of_work.session
            topic = get_or_404(session, BoardTopicModel, topic_id, "Topic")
            if topic.is_locked:
                raise ForbiddenError("Topic is locked")

            depth = 0
            if request.parent_reply_id is not None:
                parent = get_or_404(session, BoardReplyModel, request.parent_reply_id, "Parent reply")
                if parent.topic_id != topic.id:
                    raise NotFoundError("Parent reply", request.parent_reply_id)
                depth = parent.depth + 1
                if depth > settings.MAX_REPLY_DEPTH:
                    raise BadRequestError(f"Replies cannot be nested more than {settings.MAX_REPLY_DEPTH} levels deep")

            reply = BoardReplyModel(
                topic_id=topic.id,
                author_id=actor.id,
                parent_reply_id=request.parent_reply_id,
                depth=depth,
                body=request.body,
            )
            session.add(reply)
            topic.reply_count = increment(BoardTopicModel.reply_count)
            await self.unit_of_work.commit()
            return ReplyDto.model_validate(reply)


class UpdateReplyUseCase:

    def __init__(self, unit_of_work: IUnitOfWork):
        self.unit_of_work = unit_of_work

    async def execute(self, actor: ActorPayload, reply_id: UUID, request: ReplyUpdateDto) -> ReplyDto:
        async with self.unit_of_work:
            reply = get_or_404(self.unit_of_work.session, BoardReplyModel, reply_id, "Reply")
            ensure_owner(actor, reply.author_id, "Reply")
            reply.body = request.body
            await self.unit_of_work.commit()
            return ReplyDto.model_validate(reply)


class DeleteReplyUseCase:
    """Soft delete a reply and decrement the topic's reply counter"""

    def __init__(self, unit_of_work: IUnitOfWork):
        self.unit_of_work = unit_of_work

    async def execute(self, actor: ActorPayload, reply_id: UUID, as_moderator: bool = False) -> None:
        async with self.unit_of_work:
            session = self.unit_of_work.session
            reply = get_or_404(session, BoardReplyModel, reply_id, "Reply")
            if not as_moderator:
                ensure_owner(actor, reply.author_id, "Reply")

            reply.soft_delete()
            topic = session.get(BoardTopicModel, reply.topic_id)
            topic.reply_count = decrement(BoardTopicModel.reply_count)
            await self.unit_of_work.commit()
