"""
JWT session utilities for the FastAPI application.

This module issues and verifies the bearer tokens handed out on login,
first-time setup and registration. Tokens are HS256-signed with the
server secret and stay valid for ``JWT_EXPIRE_DAYS`` (30) days.
"""

from datetime import datetime, timedelta, timezone
from typing import Optional, Dict, Any
from jose import JWTError, jwt

from backend.fastapi.core.exceptions import Unauthorized
from backend.fastapi.core.init_settings import global_settings


def create_access_token(data: Dict[str, Any], expires_delta: Optional[timedelta] = None) -> str:
    """
    Create a JWT access token.

    Args:
        data: Dictionary containing token payload data (admin id, role)
        expires_delta: Optional custom expiration time

    Returns:
        Encoded JWT token as string

    Example:
        >>> token = create_access_token({"sub": "admin_id"})
        >>> token.count(".")
        2
    """
    to_encode = data.copy()
    now = datetime.now(timezone.utc)

    # Set expiration time
    if expires_delta:
        expire = now + expires_delta
    else:
        expire = now + timedelta(days=global_settings.JWT_EXPIRE_DAYS)

    to_encode.update({
        "exp": expire,
        "iat": now
    })

    return jwt.encode(
        to_encode,
        global_settings.JWT_SECRET_KEY,
        algorithm=global_settings.JWT_ALGORITHM
    )


def verify_access_token(token: str) -> Dict[str, Any]:
    """
    Verify and decode a JWT access token.

    Malformed, expired and wrongly signed tokens are rejected with the same
    error, so callers cannot tell which check failed.

    Args:
        token: JWT token string to verify

    Returns:
        Dictionary containing decoded token payload

    Raises:
        Unauthorized: If token is invalid, expired, or malformed
    """
    try:
        payload = jwt.decode(
            token,
            global_settings.JWT_SECRET_KEY,
            algorithms=[global_settings.JWT_ALGORITHM]
        )
    except JWTError:
        raise Unauthorized()

    if payload.get("sub") is None:
        raise Unauthorized()

    return payload


def create_admin_token(admin_id: str, role: str, expires_delta: Optional[timedelta] = None) -> str:
    """
    Create a session token for an admin identity.

    Args:
        admin_id: Admin ID (UUID as string)
        role: Admin role at issuance time
        expires_delta: Optional custom expiration time

    Returns:
        Encoded JWT token whose ``sub`` is the admin id
    """
    token_data = {
        "sub": admin_id,
        "role": role
    }

    return create_access_token(token_data, expires_delta)
