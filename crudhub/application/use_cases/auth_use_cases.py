"""Account registration, login, token refresh and profile use cases"""

import logging
from datetime import datetime
from uuid import UUID

from jose import JWTError

from ...core.exceptions import BadRequestError, ConflictError, ForbiddenError, NotFoundError, UnauthorizedError
from ...core.security import (
    REFRESH_TOKEN, create_token_pair, decode_token, get_password_hash, verify_password
)
from ...domain.enums import ActorRole
from ...domain.repositories.unit_of_work import IUnitOfWork
from ...domain.value_objects.actor import ActorPayload
from ..dtos.auth_dtos import (
    AccountDto, AccountStatusDto, AuthorizedDto, ChangePasswordDto, GuestJoinDto, JoinDto,
    LoginDto, RefreshTokenDto, TokenDto
)

logger = logging.getLogger(__name__)


def _authorized(account, role: ActorRole) -> AuthorizedDto:
    return AuthorizedDto(
        id=account.id,
        role=role,
        token=TokenDto(**create_token_pair(str(account.id), role.value)),
    )


def _require_credentials(role: ActorRole) -> None:
    if not role.has_credentials:
        raise BadRequestError("Guests do not have credentials")


class JoinGuestUseCase:

    def __init__(self, unit_of_work: IUnitOfWork):
        self.unit_of_work = unit_of_work

    async def execute(self, request: GuestJoinDto) -> AuthorizedDto:
        async with self.unit_of_work:
            guest = self.unit_of_work.accounts.add(
                ActorRole.GUEST,
                display_name=request.display_name,
                user_agent=request.user_agent,
            )
            await self.unit_of_work.commit()
            return _authorized(guest, ActorRole.GUEST)


class JoinAccountUseCase:
    """Register a credentialed account for one role"""

    def __init__(self, unit_of_work: IUnitOfWork):
        self.unit_of_work = unit_of_work

    async def execute(self, role: ActorRole, request: JoinDto) -> AuthorizedDto:
        _require_credentials(role)
        async with self.unit_of_work:
            email = request.email.lower()
            if self.unit_of_work.accounts.exists_by_email(role, email):
                raise ConflictError(f"A {role.value} with this email already exists")

            fields = {
                "email": email,
                "password_hash": get_password_hash(request.password),
                "display_name": request.display_name,
            }
            if role is ActorRole.CUSTOMER:
                fields["phone"] = request.phone
            if role is ActorRole.SELLER:
                fields["business_name"] = request.business_name

            account = self.unit_of_work.accounts.add(role, **fields)
            await self.unit_of_work.commit()
            logger.info("Registered %s account %s", role.value, account.id)
            return _authorized(account, role)


class LoginUseCase:

    def __init__(self, unit_of_work: IUnitOfWork):
        self.unit_of_work = unit_of_work

    async def execute(self, role: ActorRole, request: LoginDto) -> AuthorizedDto:
        _require_credentials(role)
        async with self.unit_of_work:
            account = self.unit_of_work.accounts.get_by_email(role, request.email)
            if not account or not verify_password(request.password, account.password_hash):
                raise UnauthorizedError("Invalid email or password")
            if not account.is_active:
                raise ForbiddenError("Account is suspended or deleted")

            account.last_login_at = datetime.utcnow()
            await self.unit_of_work.commit()
            return _authorized(account, role)


class RefreshTokenUseCase:

    def __init__(self, unit_of_work: IUnitOfWork):
        self.unit_of_work = unit_of_work

    async def execute(self, role: ActorRole, request: RefreshTokenDto) -> AuthorizedDto:
        try:
            payload = decode_token(request.refresh_token, REFRESH_TOKEN)
            account_id = UUID(payload["id"])
        except (JWTError, ValueError):
            raise UnauthorizedError("Invalid refresh token")
        if payload["type"] != role.value:
            raise UnauthorizedError("Invalid refresh token")

        async with self.unit_of_work:
            account = self.unit_of_work.accounts.get_active(role, account_id)
            if not account:
                raise ForbiddenError("Account is suspended or deleted")
            return _authorized(account, role)


class GetProfileUseCase:

    def __init__(self, unit_of_work: IUnitOfWork):
        self.unit_of_work = unit_of_work

    async def execute(self, actor: ActorPayload) -> AccountDto:
        async with self.unit_of_work:
            account = self.unit_of_work.accounts.get_by_id(actor.role, actor.id)
            return AccountDto.from_model(actor.role, account)


class ChangePasswordUseCase:

    def __init__(self, unit_of_work: IUnitOfWork):
        self.unit_of_work = unit_of_work

    async def execute(self, actor: ActorPayload, request: ChangePasswordDto) -> AccountDto:
        _require_credentials(actor.role)
        async with self.unit_of_work:
            account = self.unit_of_work.accounts.get_by_id(actor.role, actor.id)
            if not verify_password(request.current_password, account.password_hash):
                raise BadRequestError("Current password is incorrect")
            account.password_hash = get_password_hash(request.new_password)
            await self.unit_of_work.commit()
            return AccountDto.from_model(actor.role, account)


class UpdateAccountStatusUseCase:
    """Admin: suspend or reactivate any account"""

    def __init__(self, unit_of_work: IUnitOfWork):
        self.unit_of_work = unit_of_work

    async def execute(self, role: ActorRole, account_id: UUID, request: AccountStatusDto) -> AccountDto:
        async with self.unit_of_work:
            account = self.unit_of_work.accounts.get_by_id(role, account_id)
            if not account or account.is_deleted:
                raise NotFoundError(f"{role.value.capitalize()} account", account_id)
            account.status = request.status.value
            await self.unit_of_work.commit()
            logger.info("Set %s account %s status to %s", role.value, account_id, request.status.value)
            return AccountDto.from_model(role, account)


class DeleteAccountUseCase:
    """Admin: soft delete an account"""

    def __init__(self, unit_of_work: IUnitOfWork):
        self.unit_of_work = unit_of_work

    async def execute(self, role: ActorRole, account_id: UUID) -> None:
        async with self.unit_of_work:
            account = self.unit_of_work.accounts.get_by_id(role, account_id)
            if not account or account.is_deleted:
                raise NotFoundError(f"{role.value.capitalize()} account", account_id)
            account.soft_delete()
            await self.unit_of_work.commit()
            logger.info("Deleted %s account %s", role.value, account_id)
