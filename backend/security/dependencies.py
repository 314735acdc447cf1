"""
Authentication dependencies for FastAPI.

This module provides the access gate placed in front of protected routes:
a bearer-token check that resolves the calling admin, and a role check
that admits only admin roles.
"""

from typing import Optional
from fastapi import Depends
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from sqlalchemy.orm import Session

from backend.fastapi.core.exceptions import Forbidden, Unauthorized
from backend.fastapi.crud.admin import get_admin
from backend.fastapi.dependencies.database import get_sync_db
from backend.fastapi.models.admin import Admin, ADMIN_ROLES
from backend.security.auth import verify_access_token


# Missing credentials are reported as 401 by get_current_user_token
security = HTTPBearer(auto_error=False)


async def get_current_user_token(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security)
) -> dict:
    """
    Extract and validate the JWT from the Authorization header.

    Args:
        credentials: HTTP Bearer credentials from request header

    Returns:
        Dictionary containing decoded token payload

    Raises:
        Unauthorized: If the header is missing or the token is invalid
    """
    if credentials is None or not credentials.credentials:
        raise Unauthorized()
    return verify_access_token(credentials.credentials)


async def get_current_admin(
    token_data: dict = Depends(get_current_user_token),
    db: Session = Depends(get_sync_db)
) -> Admin:
    """
    Get the admin identified by the bearer token.

    Args:
        token_data: Decoded JWT token payload
        db: Database session

    Returns:
        Admin instance for the token subject

    Raises:
        Unauthorized: If the token subject no longer resolves to an admin

    Usage:
        @router.get("/me")
        async def me(current_admin: Admin = Depends(get_current_admin)):
            return {"admin": current_admin.email}
    """
    admin = get_admin(db, token_data["sub"])
    if admin is None:
        raise Unauthorized()
    return admin


async def require_admin_role(
    current_admin: Admin = Depends(get_current_admin)
) -> Admin:
    """
    Admit only admin and superadmin identities.

    Both roles share one capability level for every protected route.

    Raises:
        Forbidden: If the stored role is not an admin role
    """
    if current_admin.role not in ADMIN_ROLES:
        raise Forbidden()
    return current_admin


# Dependency for admin-only routes
RequireAdmin = Depends(require_admin_role)
