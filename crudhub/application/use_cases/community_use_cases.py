"""Community, subscription and moderator assignment use cases"""

from typing import Optional
from uuid import UUID

from sqlalchemy import func, or_

from ...core.exceptions import ConflictError, NotFoundError
from ...domain.enums import ActorRole, CommunitySort
from ...domain.repositories.unit_of_work import IUnitOfWork
from ...domain.value_objects.actor import ActorPayload
from ...infrastructure.orm.community_model import (
    CommunityModel, CommunityModeratorAssignmentModel, CommunitySubscriptionModel
)
from ..dtos.common_dtos import Page, PageRequest
from ..dtos.community_dtos import (
    CommunityCreateDto, CommunityDto, CommunityUpdateDto, ModeratorAssignmentCreateDto,
    ModeratorAssignmentDto, SubscriptionDto
)
from .common import LIKE_ESCAPE, contains_pattern, decrement, ensure_owner, get_or_404, increment, paginate


class CreateCommunityUseCase:
    """Create a community; its creator is subscribed straight away"""

    def __init__(self, unit_of_work: IUnitOfWork):
        self.unit_of_work = unit_of_work

    async def execute(self, actor: ActorPayload, request: CommunityCreateDto) -> CommunityDto:
        async with self.unit_of_work:
            session = self.unit_of_work.session
            taken = session.query(CommunityModel).filter(
                func.lower(CommunityModel.name) == request.name.lower()
            ).first()
            if taken:
                raise ConflictError(f"Community name '{request.name}' is already taken")

            community = CommunityModel(
                name=request.name,
                title=request.title,
                description=request.description,
                creator_id=actor.id,
                subscriber_count=1,
            )
            session.add(community)
            session.flush()
            session.add(CommunitySubscriptionModel(community_id=community.id, member_id=actor.id))
            await self.unit_of_work.commit()
            return CommunityDto.model_validate(community)


class ListCommunitiesUseCase:

    def __init__(self, unit_of_work: IUnitOfWork):
        self.unit_of_work = unit_of_work

    async def execute(
        self,
        page: PageRequest,
        search: Optional[str] = None,
        sort: CommunitySort = CommunitySort.SUBSCRIBERS,
    ) -> Page:
        async with self.unit_of_work:
            query = self.unit_of_work.session.query(CommunityModel).filter(CommunityModel.deleted_at.is_(None))
            if search:
                pattern = contains_pattern(search)
                query = query.filter(or_(
                    CommunityModel.name.ilike(pattern, escape=LIKE_ESCAPE),
                    CommunityModel.title.ilike(pattern, escape=LIKE_ESCAPE),
                ))
            if sort is CommunitySort.NEW:
                query = query.order_by(CommunityModel.created_at.desc())
            else:
                query = query.order_by(CommunityModel.subscriber_count.desc(), CommunityModel.created_at.desc())
            return paginate(query, page, CommunityDto.model_validate)


class GetCommunityUseCase:

    def __init__(self, unit_of_work: IUnitOfWork):
        self.unit_of_work = unit_of_work

    async def execute(self, community_id: UUID) -> CommunityDto:
        async with self.unit_of_work:
            community = get_or_404(self.unit_of_work.session, CommunityModel, community_id, "Community")
            return CommunityDto.model_validate(community)


class UpdateCommunityUseCase:

    def __init__(self, unit_of_work: IUnitOfWork):
        self.unit_of_work = unit_of_work

    async def execute(self, actor: ActorPayload, community_id: UUID, request: CommunityUpdateDto) -> CommunityDto:
        async with self.unit_of_work:
            community = get_or_404(self.unit_of_work.session, CommunityModel, community_id, "Community")
            ensure_owner(actor, community.creator_id, "Community")
            for field, value in request.model_dump(exclude_unset=True).items():
                if field == "title" and value is None:
                    continue
                setattr(community, field, value)
            await self.unit_of_work.commit()
            return CommunityDto.model_validate(community)


class DeleteCommunityUseCase:

    def __init__(self, unit_of_work: IUnitOfWork):
        self.unit_of_work = unit_of_work

    async def execute(self, actor: ActorPayload, community_id: UUID) -> None:
        async with self.unit_of_work:
            community = get_or_404(self.unit_of_work.session, CommunityModel, community_id, "Community")
            ensure_owner(actor, community.creator_id, "Community")
            community.soft_delete()
            await self.unit_of_work.commit()


class SubscribeUseCase:
    """Subscribe and bump the subscriber counter in one transaction"""

    def __init__(self, unit_of_work: IUnitOfWork):
        self.unit_of_work = unit_of_work

    async def execute(self, actor: ActorPayload, community_id: UUID) -> SubscriptionDto:
        async with self.unit_of_work:
            session = self.unit_of_work.session
            community = get_or_404(session, CommunityModel, community_id, "Community")
            existing = session.query(CommunitySubscriptionModel).filter(
                CommunitySubscriptionModel.community_id == community.id,
                CommunitySubscriptionModel.member_id == actor.id
            ).first()
            if existing:
                raise ConflictError("Already subscribed to this community")

            subscription = CommunitySubscriptionModel(community_id=community.id, member_id=actor.id)
            session.add(subscription)
            community.subscriber_count = increment(CommunityModel.subscriber_count)
            await self.unit_of_work.commit()
            return SubscriptionDto.model_validate(subscription)


class UnsubscribeUseCase:
    """Remove the subscription and decrement the counter in one transaction"""

    def __init__(self, unit_of_work: IUnitOfWork):
        self.unit_of_work = unit_of_work

    async def execute(self, actor: ActorPayload, community_id: UUID) -> None:
        async with self.unit_of_work:
            session = self.unit_of_work.session
            community = get_or_404(session, CommunityModel, community_id, "Community")
            subscription = session.query(CommunitySubscriptionModel).filter(
                CommunitySubscriptionModel.community_id == community.id,
                CommunitySubscriptionModel.member_id == actor.id
            ).first()
            if not subscription:
                raise NotFoundError("Subscription")

            session.delete(subscription)
            community.subscriber_count = decrement(CommunityModel.subscriber_count)
            await self.unit_of_work.commit()


class ListSubscriptionsUseCase:

    def __init__(self, unit_of_work: IUnitOfWork):
        self.unit_of_work = unit_of_work

    async def execute(self, actor: ActorPayload, page: PageRequest) -> Page:
        async with self.unit_of_work:
            query = self.unit_of_work.session.query(CommunitySubscriptionModel).filter(
                CommunitySubscriptionModel.member_id == actor.id
            ).order_by(CommunitySubscriptionModel.created_at.desc())
            return paginate(query, page, SubscriptionDto.model_validate)


class AssignModeratorUseCase:

    def __init__(self, unit_of_work: IUnitOfWork):
        self.unit_of_work = unit_of_work

    async def execute(
        self, actor: ActorPayload, community_id: UUID, request: ModeratorAssignmentCreateDto
    ) -> ModeratorAssignmentDto:
        async with self.unit_of_work:
            session = self.unit_of_work.session
            community = get_or_404(session, CommunityModel, community_id, "Community")
            moderator = self.unit_of_work.accounts.get_by_id(ActorRole.MODERATOR, request.moderator_id)
            if not moderator or moderator.is_deleted:
                raise NotFoundError("Moderator", request.moderator_id)

            existing = session.query(CommunityModeratorAssignmentModel).filter(
                CommunityModeratorAssignmentModel.community_id == community.id,
                CommunityModeratorAssignmentModel.moderator_id == moderator.id
            ).first()
            if existing:
                raise ConflictError("Moderator is already assigned to this community")

            assignment = CommunityModeratorAssignmentModel(
                community_id=community.id,
                moderator_id=moderator.id,
                assigned_by_admin_id=actor.id,
            )
            session.add(assignment)
            await self.unit_of_work.commit()
            return ModeratorAssignmentDto.model_validate(assignment)


class UnassignModeratorUseCase:

    def __init__(self, unit_of_work: IUnitOfWork):
        self.unit_of_work = unit_of_work

    async def execute(self, community_id: UUID, moderator_id: UUID) -> None:
        async with self.unit_of_work:
            session = self.unit_of_work.session
            assignment = session.query(CommunityModeratorAssignmentModel).filter(
                CommunityModeratorAssignmentModel.community_id == community_id,
                CommunityModeratorAssignmentModel.moderator_id == moderator_id
            ).first()
            if not assignment:
                raise NotFoundError("Moderator assignment")
            session.delete(assignment)
            await self.unit_of_work.commit()
