"""
Admin authentication endpoints.

This module provides FastAPI endpoints for admin login, first-time setup,
registration, profile lookup and the login audit trail.
"""

import logging
from fastapi import APIRouter, Depends, HTTPException, Request, status
from sqlalchemy.orm import Session

from backend.fastapi.core.exceptions import InvalidCredentials, NotFound
from backend.fastapi.core.utils import get_client_ip, normalize_email
from backend.fastapi.crud.admin import (
    get_admin, get_admin_by_email, record_login, register_admin, setup_first_admin
)
from backend.fastapi.dependencies.database import get_sync_db
from backend.fastapi.models.admin import Admin
from backend.fastapi.schemas.admin import (
    AdminAuthResponse, AdminCreate, AdminLogin, AdminRead, AdminSetup,
    LoginHistoryResponse
)
from backend.security.auth import create_admin_token
from backend.security.dependencies import RequireAdmin, get_current_user_token
from backend.security.password import verify_password

logger = logging.getLogger(__name__)

router = APIRouter(tags=["admin-authentication"])


def build_auth_response(admin: Admin) -> AdminAuthResponse:
    """Public profile of ``admin`` plus a new session token."""
    return AdminAuthResponse(
        id=admin.id,
        name=admin.name,
        email=admin.email,
        role=admin.role,
        token=create_admin_token(str(admin.id), admin.role)
    )


@router.post("/login", response_model=AdminAuthResponse, summary="Admin Login")
async def login(
    admin_login: AdminLogin,
    request: Request,
    db: Session = Depends(get_sync_db)
):
    """
    Authenticate an admin and return a session token.

    **Process:**
    1. Look up the admin by email
    2. Verify the password
    3. Record the login time and client address in the audit trail
    4. Return the public profile with a bearer token

    **Errors:**
    - **401**: Invalid email or password (same response for both cases)
    """
    client_ip = get_client_ip(request)
    email = normalize_email(admin_login.email)

    try:
        admin = get_admin_by_email(db, email)
        if not admin or not verify_password(admin_login.password, admin.password_hash):
            logger.warning("Failed login for %s from %s", email, client_ip)
            raise InvalidCredentials()

        admin = record_login(db, admin, client_ip)
        logger.info("Admin %s logged in from %s", admin.id, client_ip)
        return build_auth_response(admin)
    except HTTPException:
        raise
    except Exception as e:
        logger.exception("Login failed unexpectedly")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to log in: {str(e)}"
        )


@router.get("/profile", response_model=AdminRead, summary="Get Current Admin")
async def get_profile(
    db: Session = Depends(get_sync_db),
    token_data: dict = Depends(get_current_user_token)
):
    """
    Get the profile of the authenticated admin (password excluded).

    **Errors:**
    - **401**: Not authenticated or invalid token
    - **404**: Admin no longer exists
    """
    try:
        admin = get_admin(db, token_data["sub"])
        if not admin:
            raise NotFound("Admin")
        return AdminRead.model_validate(admin)
    except HTTPException:
        raise
    except Exception as e:
        logger.exception("Failed to load admin profile")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to load profile: {str(e)}"
        )


@router.post(
    "/register",
    response_model=AdminAuthResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Register New Admin"
)
async def register(
    admin_create: AdminCreate,
    db: Session = Depends(get_sync_db),
    current_admin: Admin = RequireAdmin
):
    """
    Register a new admin (admin-only endpoint).

    **Parameters:**
    - **name**: Display name
    - **email**: Unique email
    - **password**: Password (8+ chars)
    - **role**: admin or superadmin (default: admin)

    **Returns:**
    - Profile of the new admin and a token for it

    **Errors:**
    - **400**: Admin already exists or invalid data
    - **401**: Not authenticated
    """
    try:
        admin = register_admin(db, admin_create)
        logger.info("Admin %s (%s) registered by %s", admin.id, admin.role, current_admin.id)
        return build_auth_response(admin)
    except HTTPException:
        raise
    except Exception as e:
        logger.exception("Failed to register admin")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to create admin: {str(e)}"
        )


@router.post(
    "/setup",
    response_model=AdminAuthResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create First Admin (Public)"
)
async def setup(
    admin_setup: AdminSetup,
    db: Session = Depends(get_sync_db)
):
    """
    Create the first admin account (public endpoint).

    Only works while no admin exists; the account is created as
    superadmin. Afterwards use `/register` with admin authentication.

    **Errors:**
    - **400**: Admin setup has already been completed
    """
    try:
        admin = setup_first_admin(db, admin_setup)
        logger.info("Initial superadmin %s created", admin.id)
        return build_auth_response(admin)
    except HTTPException:
        raise
    except Exception as e:
        logger.exception("Failed to create initial admin")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to create initial admin: {str(e)}"
        )


@router.get("/login-history", response_model=LoginHistoryResponse, summary="Get Login History")
async def get_login_history(
    db: Session = Depends(get_sync_db),
    token_data: dict = Depends(get_current_user_token)
):
    """
    Get the login audit trail of the authenticated admin.

    **Returns:**
    - **lastLogin**, **lastLoginIp** and up to 50 **loginHistory** entries

    **Errors:**
    - **401**: Not authenticated
    - **404**: Admin no longer exists
    """
    try:
        admin = get_admin(db, token_data["sub"])
        if not admin:
            raise NotFound("Admin")
        return LoginHistoryResponse.model_validate(admin)
    except HTTPException:
        raise
    except Exception as e:
        logger.exception("Failed to load login history")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to load login history: {str(e)}"
        )
