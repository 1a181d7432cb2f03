"""Authentication routes"""

from typing import Optional

from fastapi import APIRouter, Depends, status

from ...api.dependencies import get_current_actor, get_unit_of_work
from ...application.dtos.auth_dtos import (
    AccountDto, AuthorizedDto, ChangePasswordDto, GuestJoinDto, JoinDto, LoginDto, RefreshTokenDto
)
from ...application.use_cases.auth_use_cases import (
    ChangePasswordUseCase, GetProfileUseCase, JoinAccountUseCase, JoinGuestUseCase, LoginUseCase,
    RefreshTokenUseCase
)
from ...domain.enums import ActorRole
from ...domain.repositories.unit_of_work import IUnitOfWork
from ...domain.value_objects.actor import ActorPayload

router = APIRouter()


@router.post("/guest/join", response_model=AuthorizedDto, status_code=status.HTTP_201_CREATED)
async def join_guest(
    request: Optional[GuestJoinDto] = None,
    unit_of_work: IUnitOfWork = Depends(get_unit_of_work)
):
    """Start an anonymous guest session"""
    return await JoinGuestUseCase(unit_of_work).execute(request or GuestJoinDto())


@router.post("/{role}/join", response_model=AuthorizedDto, status_code=status.HTTP_201_CREATED)
async def join(
    role: ActorRole,
    request: JoinDto,
    unit_of_work: IUnitOfWork = Depends(get_unit_of_work)
):
    """Register an account for the given role"""
    return await JoinAccountUseCase(unit_of_work).execute(role, request)


@router.post("/{role}/login", response_model=AuthorizedDto)
async def login(
    role: ActorRole,
    request: LoginDto,
    unit_of_work: IUnitOfWork = Depends(get_unit_of_work)
):
    """Login with email and password"""
    return await LoginUseCase(unit_of_work).execute(role, request)


@router.post("/{role}/refresh", response_model=AuthorizedDto)
async def refresh(
    role: ActorRole,
    request: RefreshTokenDto,
    unit_of_work: IUnitOfWork = Depends(get_unit_of_work)
):
    """Exchange a refresh token for a new token pair"""
    return await RefreshTokenUseCase(unit_of_work).execute(role, request)


@router.get("/{role}/me", response_model=AccountDto)
async def get_me(
    actor: ActorPayload = Depends(get_current_actor),
    unit_of_work: IUnitOfWork = Depends(get_unit_of_work)
):
    """Get the authenticated account's profile"""
    return await GetProfileUseCase(unit_of_work).execute(actor)


@router.put("/{role}/password", response_model=AccountDto)
async def change_password(
    request: ChangePasswordDto,
    actor: ActorPayload = Depends(get_current_actor),
    unit_of_work: IUnitOfWork = Depends(get_unit_of_work)
):
    return await ChangePasswordUseCase(unit_of_work).execute(actor, request)
