"""Security utilities"""

from datetime import datetime, timedelta
from typing import Any, Dict, Optional
from jose import jwt, JWTError
from passlib.context import CryptContext
from .config import settings


ACCESS_TOKEN = "access"
REFRESH_TOKEN = "refresh"

# Password context
pwd_context = CryptContext(
    schemes=["bcrypt"],
    deprecated="auto",
    bcrypt__rounds=settings.BCRYPT_ROUNDS,
)


def get_password_hash(password: str) -> str:
    """Hash password"""
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify password"""
    return pwd_context.verify(plain_password, hashed_password)


def _encode(subject: str, role: str, token_type: str, expire: datetime) -> str:
    to_encode = {"exp": expire, "id": subject, "type": role, "token_type": token_type}
    return jwt.encode(to_encode, settings.SECRET_KEY, algorithm=settings.ALGORITHM)


def create_access_token(subject: str, role: str, expire: Optional[datetime] = None) -> str:
    """Create access token"""
    expire = expire or datetime.utcnow() + timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)
    return _encode(subject, role, ACCESS_TOKEN, expire)


def create_refresh_token(subject: str, role: str, expire: Optional[datetime] = None) -> str:
    """Create refresh token"""
    expire = expire or datetime.utcnow() + timedelta(days=settings.REFRESH_TOKEN_EXPIRE_DAYS)
    return _encode(subject, role, REFRESH_TOKEN, expire)


def create_token_pair(subject: str, role: str) -> Dict[str, Any]:
    """Issue an access/refresh pair together with their expiry instants."""
    now = datetime.utcnow()
    expired_at = now + timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)
    refreshable_until = now + timedelta(days=settings.REFRESH_TOKEN_EXPIRE_DAYS)
    return {
        "access": create_access_token(subject, role, expired_at),
        "refresh": create_refresh_token(subject, role, refreshable_until),
        "expired_at": expired_at,
        "refreshable_until": refreshable_until,
    }


def decode_token(token: str, token_type: str = ACCESS_TOKEN) -> Dict[str, Any]:
    """Decode a token and check its type.

    Raises ``JWTError`` when the signature, expiry, claims or token type are wrong.
    """
    payload = jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.ALGORITHM])
    if payload.get("token_type") != token_type:
        raise JWTError(f"Expected a {token_type} token")
    if not payload.get("id") or not payload.get("type"):
        raise JWTError("Token is missing identity claims")
    return payload


def verify_token(token: str, token_type: str = ACCESS_TOKEN) -> Optional[Dict[str, Any]]:
    """Verify token and return its claims"""
    try:
        return decode_token(token, token_type)
    except JWTError:
        return None
