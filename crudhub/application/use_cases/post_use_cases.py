"""Community posts, comments and votes"""

from dataclasses import dataclass
from typing import Type
from uuid import UUID

from sqlalchemy.orm import Session

from ...core.exceptions import BadRequestError, ForbiddenError, NotFoundError
from ...domain.enums import PostSort, PostType
from ...domain.repositories.unit_of_work import IUnitOfWork
from ...domain.value_objects.actor import ActorPayload
from ...infrastructure.orm.community_model import (
    CommunityCommentModel, CommunityCommentVoteModel, CommunityModel, CommunityModeratorAssignmentModel,
    CommunityPostModel, CommunityPostVoteModel
)
from ..dtos.common_dtos import Page, PageRequest
from ..dtos.community_dtos import (
    CommentCreateDto, CommentDto, CommentUpdateDto, PostCreateDto, PostDto, PostUpdateDto, VoteDto,
    VoteResponseDto
)
from .common import decrement, ensure_owner, get_or_404, increment, paginate


def _ensure_assigned_moderator(session: Session, actor: ActorPayload, community_id: UUID) -> None:
    assignment = session.query(CommunityModeratorAssignmentModel).filter(
        CommunityModeratorAssignmentModel.community_id == community_id,
        CommunityModeratorAssignmentModel.moderator_id == actor.id
    ).first()
    if not assignment:
        raise ForbiddenError("You do not moderate this community")


def _validate_post_content(post_type: PostType, body, url) -> None:
    if post_type is PostType.TEXT and not body:
        raise BadRequestError("Text posts require a body")
    if post_type is PostType.LINK and not url:
        raise BadRequestError("Link posts require a url")


class CreatePostUseCase:

    def __init__(self, unit_of_work: IUnitOfWork):
        self.unit_of_work = unit_of_work

    async def execute(self, actor: ActorPayload, community_id: UUID, request: PostCreateDto) -> PostDto:
        _validate_post_content(request.post_type, request.body, request.url)
        async with self.unit_of_work:
            session = self.unit_of_work.session
            community = get_or_404(session, CommunityModel, community_id, "Community")
            post = CommunityPostModel(
                community_id=community.id,
                author_id=actor.id,
                post_type=request.post_type.value,
                title=request.title,
                body=request.body,
                url=request.url,
            )
            session.add(post)
            await self.unit_of_work.commit()
            return PostDto.model_validate(post)


class ListPostsUseCase:

    def __init__(self, unit_of_work: IUnitOfWork):
        self.unit_of_work = unit_of_work

    async def execute(self, community_id: UUID, page: PageRequest, sort: PostSort = PostSort.NEW) -> Page:
        async with self.unit_of_work:
            session = self.unit_of_work.session
            get_or_404(session, CommunityModel, community_id, "Community")
            query = session.query(CommunityPostModel).filter(
                CommunityPostModel.community_id == community_id,
                CommunityPostModel.deleted_at.is_(None)
            )
            if sort is PostSort.TOP:
                query = query.order_by(CommunityPostModel.score.desc(), CommunityPostModel.created_at.desc())
            else:
                query = query.order_by(CommunityPostModel.created_at.desc())
            return paginate(query, page, PostDto.model_validate)


class GetPostUseCase:

    def __init__(self, unit_of_work: IUnitOfWork):
        self.unit_of_work = unit_of_work

    async def execute(self, post_id: UUID) -> PostDto:
        async with self.unit_of_work:
            post = get_or_404(self.unit_of_work.session, CommunityPostModel, post_id, "Post")
            return PostDto.model_validate(post)


class UpdatePostUseCase:

    def __init__(self, unit_of_work: IUnitOfWork):
        self.unit_of_work = unit_of_work

    async def execute(self, actor: ActorPayload, post_id: UUID, request: PostUpdateDto) -> PostDto:
        async with self.unit_of_work:
            post = get_or_404(self.unit_of_work.session, CommunityPostModel, post_id, "Post")
            ensure_owner(actor, post.author_id, "Post")

            changes = request.model_dump(exclude_unset=True)
            if "title" in changes and changes["title"] is None:
                raise BadRequestError("Title cannot be empty")
            body = changes.get("body", post.body)
            url = changes.get("url", post.url)
            _validate_post_content(PostType(post.post_type), body, url)

            for field, value in changes.items():
                setattr(post, field, value)
            await self.unit_of_work.commit()
            return PostDto.model_validate(post)


class DeletePostUseCase:
    """Soft delete by the author, an assigned moderator or an admin"""

    def __init__(self, unit_of_work: IUnitOfWork):
        self.unit_of_work = unit_of_work

    async def execute(self, actor: ActorPayload, post_id: UUID, as_moderator: bool = False, as_admin: bool = False) -> None:
        async with self.unit_of_work:
            session = self.unit_of_work.session
            post = get_or_404(session, CommunityPostModel, post_id, "Post")
            if as_moderator:
                _ensure_assigned_moderator(session, actor, post.community_id)
            elif not as_admin:
                ensure_owner(actor, post.author_id, "Post")
            post.soft_delete()
            await self.unit_of_work.commit()


class CreateCommentUseCase:
    """Add a comment and bump the post's comment counter"""

    def __init__(self, unit_of_work: IUnitOfWork):
        self.unit_of_work = unit_of_work

    async def execute(self, actor: ActorPayload, post_id: UUID, request: CommentCreateDto) -> CommentDto:
        async with self.unit_of_work:
            session = self.unit_of_work.session
            post = get_or_404(session, CommunityPostModel, post_id, "Post")
            if request.parent_comment_id is not None:
                parent = get_or_404(session, CommunityCommentModel, request.parent_comment_id, "Parent comment")
                if parent.post_id != post.id:
                    raise NotFoundError("Parent comment", request.parent_comment_id)

            comment = CommunityCommentModel(
                post_id=post.id,
                author_id=actor.id,
                parent_comment_id=request.parent_comment_id,
                body=request.body,
            )
            session.add(comment)
            post.comment_count = increment(CommunityPostModel.comment_count)
            await self.unit_of_work.commit()
            return CommentDto.model_validate(comment)


class ListCommentsUseCase:

    def __init__(self, unit_of_work: IUnitOfWork):
        self.unit_of_work = unit_of_work

    async def execute(self, post_id: UUID, page: PageRequest) -> Page:
        async with self.unit_of_work:
            session = self.unit_of_work.session
            get_or_404(session, CommunityPostModel, post_id, "Post")
            query = session.query(CommunityCommentModel).filter(
                CommunityCommentModel.post_id == post_id,
                CommunityCommentModel.deleted_at.is_(None)
            ).order_by(CommunityCommentModel.created_at.asc(), CommunityCommentModel.id)
            return paginate(query, page, CommentDto.model_validate)


class UpdateCommentUseCase:

    def __init__(self, unit_of_work: IUnitOfWork):
        self.unit_of_work = unit_of_work

    async def execute(self, actor: ActorPayload, comment_id: UUID, request: CommentUpdateDto) -> CommentDto:
        async with self.unit_of_work:
            comment = get_or_404(self.unit_of_work.session, CommunityCommentModel, comment_id, "Comment")
            ensure_owner(actor, comment.author_id, "Comment")
            comment.body = request.body
            await self.unit_of_work.commit()
            return CommentDto.model_validate(comment)


class DeleteCommentUseCase:
    """Soft delete a comment and decrement the post's comment counter"""

    def __init__(self, unit_of_work: IUnitOfWork):
        self.unit_of_work = unit_of_work

    async def execute(self, actor: ActorPayload, comment_id: UUID, as_moderator: bool = False) -> None:
        async with self.unit_of_work:
            session = self.unit_of_work.session
            comment = get_or_404(session, CommunityCommentModel, comment_id, "Comment")
            post = session.get(CommunityPostModel, comment.post_id)
            if as_moderator:
                _ensure_assigned_moderator(session, actor, post.community_id)
            else:
                ensure_owner(actor, comment.author_id, "Comment")

            comment.soft_delete()
            post.comment_count = decrement(CommunityPostModel.comment_count)
            await self.unit_of_work.commit()


@dataclass(frozen=True)
class VoteTarget:
    """What a vote points at: posts or comments"""
    resource: str
    model: Type
    vote_model: Type
    key: str

    def vote_query(self, session: Session, target_id: UUID):
        return session.query(self.vote_model).filter(getattr(self.vote_model, self.key) == target_id)


POST_VOTES = VoteTarget("Post", CommunityPostModel, CommunityPostVoteModel, "post_id")
COMMENT_VOTES = VoteTarget("Comment", CommunityCommentModel, CommunityCommentVoteModel, "comment_id")


def _recount(session: Session, target: VoteTarget, entity) -> None:
    session.flush()
    votes = target.vote_query(session, entity.id)
    entity.upvote_count = votes.filter(target.vote_model.value == 1).count()
    entity.downvote_count = votes.filter(target.vote_model.value == -1).count()
    entity.score = entity.upvote_count - entity.downvote_count


def _vote_response(entity, member_id: UUID, value: int) -> VoteResponseDto:
    return VoteResponseDto(
        target_id=entity.id,
        member_id=member_id,
        value=value,
        score=entity.score,
        upvote_count=entity.upvote_count,
        downvote_count=entity.downvote_count,
    )


class CastVoteUseCase:
    """Create or replace the caller's vote, then recount"""

    def __init__(self, unit_of_work: IUnitOfWork, target: VoteTarget):
        self.unit_of_work = unit_of_work
        self.target = target

    async def execute(self, actor: ActorPayload, target_id: UUID, request: VoteDto) -> VoteResponseDto:
        async with self.unit_of_work:
            session = self.unit_of_work.session
            entity = get_or_404(session, self.target.model, target_id, self.target.resource)
            vote = self.target.vote_query(session, entity.id).filter(
                self.target.vote_model.member_id == actor.id
            ).first()
            if vote:
                vote.value = request.value
            else:
                vote = self.target.vote_model(member_id=actor.id, value=request.value)
                setattr(vote, self.target.key, entity.id)
                session.add(vote)

            _recount(session, self.target, entity)
            await self.unit_of_work.commit()
            return _vote_response(entity, actor.id, request.value)


class GetVoteUseCase:

    def __init__(self, unit_of_work: IUnitOfWork, target: VoteTarget):
        self.unit_of_work = unit_of_work
        self.target = target

    async def execute(self, actor: ActorPayload, target_id: UUID) -> VoteResponseDto:
        async with self.unit_of_work:
            session = self.unit_of_work.session
            entity = get_or_404(session, self.target.model, target_id, self.target.resource)
            vote = self.target.vote_query(session, entity.id).filter(
                self.target.vote_model.member_id == actor.id
            ).first()
            if not vote:
                raise NotFoundError("Vote")
            return _vote_response(entity, actor.id, vote.value)


class RemoveVoteUseCase:
    """Idempotent: removing a vote that does not exist succeeds"""

    def __init__(self, unit_of_work: IUnitOfWork, target: VoteTarget):
        self.unit_of_work = unit_of_work
        self.target = target

    async def execute(self, actor: ActorPayload, target_id: UUID) -> None:
        async with self.unit_of_work:
            session = self.unit_of_work.session
            entity = get_or_404(session, self.target.model, target_id, self.target.resource)
            vote = self.target.vote_query(session, entity.id).filter(
                self.target.vote_model.member_id == actor.id
            ).first()
            if vote:
                session.delete(vote)
                _recount(session, self.target, entity)
            await self.unit_of_work.commit()
