"""Community platform routes"""

from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query, Response, status

from ...api.dependencies import (
    get_current_admin, get_current_member, get_current_moderator, get_page_request, get_unit_of_work
)
from ...application.dtos.common_dtos import Page, PageRequest
from ...application.dtos.community_dtos import (
    CommentCreateDto, CommentDto, CommentUpdateDto, CommunityCreateDto, CommunityDto, CommunityUpdateDto,
    ModeratorAssignmentCreateDto, ModeratorAssignmentDto, PostCreateDto, PostDto, PostUpdateDto,
    SubscriptionDto, VoteDto, VoteResponseDto
)
from ...application.use_cases.community_use_cases import (
    AssignModeratorUseCase, CreateCommunityUseCase, DeleteCommunityUseCase, GetCommunityUseCase,
    ListCommunitiesUseCase, ListSubscriptionsUseCase, SubscribeUseCase, UnassignModeratorUseCase,
    UnsubscribeUseCase, UpdateCommunityUseCase
)
from ...application.use_cases.post_use_cases import (
    COMMENT_VOTES, POST_VOTES, CastVoteUseCase, CreateCommentUseCase, CreatePostUseCase,
    DeleteCommentUseCase, DeletePostUseCase, GetPostUseCase, GetVoteUseCase, ListCommentsUseCase,
    ListPostsUseCase, RemoveVoteUseCase, UpdateCommentUseCase, UpdatePostUseCase
)
from ...domain.enums import CommunitySort, PostSort
from ...domain.repositories.unit_of_work import IUnitOfWork
from ...domain.value_objects.actor import ActorPayload

router = APIRouter()


# Communities

@router.post("/member/communities", response_model=CommunityDto, status_code=status.HTTP_201_CREATED)
async def create_community(
    request: CommunityCreateDto,
    member: ActorPayload = Depends(get_current_member),
    unit_of_work: IUnitOfWork = Depends(get_unit_of_work)
):
    """Create a community; the creator is subscribed automatically"""
    return await CreateCommunityUseCase(unit_of_work).execute(member, request)


@router.get("/communities", response_model=Page[CommunityDto])
async def list_communities(
    search: Optional[str] = Query(None, max_length=100),
    sort: CommunitySort = CommunitySort.SUBSCRIBERS,
    page: PageRequest = Depends(get_page_request),
    unit_of_work: IUnitOfWork = Depends(get_unit_of_work)
):
    return await ListCommunitiesUseCase(unit_of_work).execute(page, search=search, sort=sort)


@router.get("/communities/{community_id}", response_model=CommunityDto)
async def get_community(community_id: UUID, unit_of_work: IUnitOfWork = Depends(get_unit_of_work)):
    return await GetCommunityUseCase(unit_of_work).execute(community_id)


@router.put("/member/communities/{community_id}", response_model=CommunityDto)
async def update_community(
    community_id: UUID,
    request: CommunityUpdateDto,
    member: ActorPayload = Depends(get_current_member),
    unit_of_work: IUnitOfWork = Depends(get_unit_of_work)
):
    return await UpdateCommunityUseCase(unit_of_work).execute(member, community_id, request)


@router.delete("/member/communities/{community_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_community(
    community_id: UUID,
    member: ActorPayload = Depends(get_current_member),
    unit_of_work: IUnitOfWork = Depends(get_unit_of_work)
):
    await DeleteCommunityUseCase(unit_of_work).execute(member, community_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


# Subscriptions

@router.post(
    "/member/communities/{community_id}/subscription",
    response_model=SubscriptionDto,
    status_code=status.HTTP_201_CREATED
)
async def subscribe(
    community_id: UUID,
    member: ActorPayload = Depends(get_current_member),
    unit_of_work: IUnitOfWork = Depends(get_unit_of_work)
):
    return await SubscribeUseCase(unit_of_work).execute(member, community_id)


@router.delete("/member/communities/{community_id}/subscription", status_code=status.HTTP_204_NO_CONTENT)
async def unsubscribe(
    community_id: UUID,
    member: ActorPayload = Depends(get_current_member),
    unit_of_work: IUnitOfWork = Depends(get_unit_of_work)
):
    await UnsubscribeUseCase(unit_of_work).execute(member, community_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/member/subscriptions", response_model=Page[SubscriptionDto])
async def list_subscriptions(
    page: PageRequest = Depends(get_page_request),
    member: ActorPayload = Depends(get_current_member),
    unit_of_work: IUnitOfWork = Depends(get_unit_of_work)
):
    return await ListSubscriptionsUseCase(unit_of_work).execute(member, page)


# Moderator assignments

@router.post(
    "/admin/communities/{community_id}/moderators",
    response_model=ModeratorAssignmentDto,
    status_code=status.HTTP_201_CREATED
)
async def assign_moderator(
    community_id: UUID,
    request: ModeratorAssignmentCreateDto,
    admin: ActorPayload = Depends(get_current_admin),
    unit_of_work: IUnitOfWork = Depends(get_unit_of_work)
):
    return await AssignModeratorUseCase(unit_of_work).execute(admin, community_id, request)


@router.delete(
    "/admin/communities/{community_id}/moderators/{moderator_id}",
    status_code=status.HTTP_204_NO_CONTENT
)
async def unassign_moderator(
    community_id: UUID,
    moderator_id: UUID,
    admin: ActorPayload = Depends(get_current_admin),
    unit_of_work: IUnitOfWork = Depends(get_unit_of_work)
):
    await UnassignModeratorUseCase(unit_of_work).execute(community_id, moderator_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


# Posts

@router.post(
    "/member/communities/{community_id}/posts",
    response_model=PostDto,
    status_code=status.HTTP_201_CREATED
)
async def create_post(
    community_id: UUID,
    request: PostCreateDto,
    member: ActorPayload = Depends(get_current_member),
    unit_of_work: IUnitOfWork = Depends(get_unit_of_work)
):
    return await CreatePostUseCase(unit_of_work).execute(member, community_id, request)


@router.get("/communities/{community_id}/posts", response_model=Page[PostDto])
async def list_posts(
    community_id: UUID,
    sort: PostSort = PostSort.NEW,
    page: PageRequest = Depends(get_page_request),
    unit_of_work: IUnitOfWork = Depends(get_unit_of_work)
):
    return await ListPostsUseCase(unit_of_work).execute(community_id, page, sort=sort)


@router.get("/posts/{post_id}", response_model=PostDto)
async def get_post(post_id: UUID, unit_of_work: IUnitOfWork = Depends(get_unit_of_work)):
    return await GetPostUseCase(unit_of_work).execute(post_id)


@router.put("/member/posts/{post_id}", response_model=PostDto)
async def update_post(
    post_id: UUID,
    request: PostUpdateDto,
    member: ActorPayload = Depends(get_current_member),
    unit_of_work: IUnitOfWork = Depends(get_unit_of_work)
):
    return await UpdatePostUseCase(unit_of_work).execute(member, post_id, request)


@router.delete("/member/posts/{post_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_post(
    post_id: UUID,
    member: ActorPayload = Depends(get_current_member),
    unit_of_work: IUnitOfWork = Depends(get_unit_of_work)
):
    await DeletePostUseCase(unit_of_work).execute(member, post_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/moderator/posts/{post_id}", status_code=status.HTTP_204_NO_CONTENT)
async def moderator_delete_post(
    post_id: UUID,
    moderator: ActorPayload = Depends(get_current_moderator),
    unit_of_work: IUnitOfWork = Depends(get_unit_of_work)
):
    """Remove a post from a community the caller moderates"""
    await DeletePostUseCase(unit_of_work).execute(moderator, post_id, as_moderator=True)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/admin/posts/{post_id}", status_code=status.HTTP_204_NO_CONTENT)
async def admin_delete_post(
    post_id: UUID,
    admin: ActorPayload = Depends(get_current_admin),
    unit_of_work: IUnitOfWork = Depends(get_unit_of_work)
):
    await DeletePostUseCase(unit_of_work).execute(admin, post_id, as_admin=True)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


# Comments

@router.post("/member/posts/{post_id}/comments", response_model=CommentDto, status_code=status.HTTP_201_CREATED)
async def create_comment(
    post_id: UUID,
    request: CommentCreateDto,
    member: ActorPayload = Depends(get_current_member),
    unit_of_work: IUnitOfWork = Depends(get_unit_of_work)
):
    return await CreateCommentUseCase(unit_of_work).execute(member, post_id, request)


@router.get("/posts/{post_id}/comments", response_model=Page[CommentDto])
async def list_comments(
    post_id: UUID,
    page: PageRequest = Depends(get_page_request),
    unit_of_work: IUnitOfWork = Depends(get_unit_of_work)
):
    return await ListCommentsUseCase(unit_of_work).execute(post_id, page)


@router.put("/member/comments/{comment_id}", response_model=CommentDto)
async def update_comment(
    comment_id: UUID,
    request: CommentUpdateDto,
    member: ActorPayload = Depends(get_current_member),
    unit_of_work: IUnitOfWork = Depends(get_unit_of_work)
):
    return await UpdateCommentUseCase(unit_of_work).execute(member, comment_id, request)


@router.delete("/member/comments/{comment_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_comment(
    comment_id: UUID,
    member: ActorPayload = Depends(get_current_member),
    unit_of_work: IUnitOfWork = Depends(get_unit_of_work)
):
    await DeleteCommentUseCase(unit_of_work).execute(member, comment_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/moderator/comments/{comment_id}", status_code=status.HTTP_204_NO_CONTENT)
async def moderator_delete_comment(
    comment_id: UUID,
    moderator: ActorPayload = Depends(get_current_moderator),
    unit_of_work: IUnitOfWork = Depends(get_unit_of_work)
):
    await DeleteCommentUseCase(unit_of_work).execute(moderator, comment_id, as_moderator=True)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


# Votes

@router.put("/member/posts/{post_id}/vote", response_model=VoteResponseDto)
async def vote_post(
    post_id: UUID,
    request: VoteDto,
    member: ActorPayload = Depends(get_current_member),
    unit_of_work: IUnitOfWork = Depends(get_unit_of_work)
):
    """Upvote or downvote a post, replacing any earlier vote"""
    return await CastVoteUseCase(unit_of_work, POST_VOTES).execute(member, post_id, request)


@router.get("/member/posts/{post_id}/vote", response_model=VoteResponseDto)
async def get_post_vote(
    post_id: UUID,
    member: ActorPayload = Depends(get_current_member),
    unit_of_work: IUnitOfWork = Depends(get_unit_of_work)
):
    return await GetVoteUseCase(unit_of_work, POST_VOTES).execute(member, post_id)


@router.delete("/member/posts/{post_id}/vote", status_code=status.HTTP_204_NO_CONTENT)
async def remove_post_vote(
    post_id: UUID,
    member: ActorPayload = Depends(get_current_member),
    unit_of_work: IUnitOfWork = Depends(get_unit_of_work)
):
    await RemoveVoteUseCase(unit_of_work, POST_VOTES).execute(member, post_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.put("/member/comments/{comment_id}/vote", response_model=VoteResponseDto)
async def vote_comment(
    comment_id: UUID,
    request: VoteDto,
    member: ActorPayload = Depends(get_current_member),
    unit_of_work: IUnitOfWork = Depends(get_unit_of_work)
):
    return await CastVoteUseCase(unit_of_work, COMMENT_VOTES).execute(member, comment_id, request)


@router.get("/member/comments/{comment_id}/vote", response_model=VoteResponseDto)
async def get_comment_vote(
    comment_id: UUID,
    member: ActorPayload = Depends(get_current_member),
    unit_of_work: IUnitOfWork = Depends(get_unit_of_work)
):
    return await GetVoteUseCase(unit_of_work, COMMENT_VOTES).execute(member, comment_id)


@router.delete("/member/comments/{comment_id}/vote", status_code=status.HTTP_204_NO_CONTENT)
async def remove_comment_vote(
    comment_id: UUID,
    member: ActorPayload = Depends(get_current_member),
    unit_of_work: IUnitOfWork = Depends(get_unit_of_work)
):
    await RemoveVoteUseCase(unit_of_work, COMMENT_VOTES).execute(member, comment_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
