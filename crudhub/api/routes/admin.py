"""Admin account management routes"""

from uuid import UUID

from fastapi import APIRouter, Depends, Response, status

from ...api.dependencies import get_current_admin, get_unit_of_work
from ...application.dtos.auth_dtos import AccountDto, AccountStatusDto
from ...application.use_cases.auth_use_cases import DeleteAccountUseCase, UpdateAccountStatusUseCase
from ...domain.enums import ActorRole
from ...domain.repositories.unit_of_work import IUnitOfWork
from ...domain.value_objects.actor import ActorPayload

router = APIRouter()


@router.put("/accounts/{role}/{account_id}/status", response_model=AccountDto)
async def update_account_status(
    role: ActorRole,
    account_id: UUID,
    request: AccountStatusDto,
    admin: ActorPayload = Depends(get_current_admin),
    unit_of_work: IUnitOfWork = Depends(get_unit_of_work)
):
    """Suspend or reactivate an account (admin only)"""
    return await UpdateAccountStatusUseCase(unit_of_work).execute(role, account_id, request)


@router.delete("/accounts/{role}/{account_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_account(
    role: ActorRole,
    account_id: UUID,
    admin: ActorPayload = Depends(get_current_admin),
    unit_of_work: IUnitOfWork = Depends(get_unit_of_work)
):
    """Soft delete an account (admin only)"""
    await DeleteAccountUseCase(unit_of_work).execute(role, account_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
