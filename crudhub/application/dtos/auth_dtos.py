"""Account and authentication DTOs"""

from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, EmailStr, Field

from ...domain.enums import ActorRole, AccountStatus


class JoinDto(BaseModel):
    """DTO for credentialed account registration"""
    email: EmailStr
    password: str = Field(..., min_length=8, max_length=128)
    display_name: str = Field(..., min_length=1, max_length=120)
    phone: Optional[str] = Field(None, max_length=40)
    business_name: Optional[str] = Field(None, max_length=200)


class GuestJoinDto(BaseModel):
    """DTO for anonymous guest sessions"""
    display_name: str = Field("Guest", min_length=1, max_length=120)
    user_agent: Optional[str] = Field(None, max_length=500)


class LoginDto(BaseModel):
    """DTO for login"""
    email: EmailStr
    password: str


class RefreshTokenDto(BaseModel):
    """DTO for refresh token request"""
    refresh_token: str


class ChangePasswordDto(BaseModel):
    current_password: str
    new_password: str = Field(..., min_length=8, max_length=128)


class AccountStatusDto(BaseModel):
    """DTO for admin status changes"""
    status: AccountStatus


class TokenDto(BaseModel):
    """DTO for authentication tokens"""
    access: str
    refresh: str
    expired_at: datetime
    refreshable_until: datetime


class AuthorizedDto(BaseModel):
    """DTO returned by join, login and refresh"""
    id: UUID
    role: ActorRole
    token: TokenDto


class AccountDto(BaseModel):
    """DTO for account profile"""
    id: UUID
    role: ActorRole
    display_name: str
    email: Optional[str] = None
    status: AccountStatus
    phone: Optional[str] = None
    business_name: Optional[str] = None
    last_login_at: Optional[datetime] = None
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_model(cls, role: ActorRole, account):
        return cls(
            id=account.id,
            role=role,
            display_name=account.display_name,
            email=getattr(account, "email", None),
            status=account.status,
            phone=getattr(account, "phone", None),
            business_name=getattr(account, "business_name", None),
            last_login_at=account.last_login_at,
            created_at=account.created_at,
            updated_at=account.updated_at,
        )
