"""
Admin schemas for request/response validation.

This module defines Pydantic models for admin authentication, first-time
setup, registration, profile and login-history responses. JSON bodies use
camelCase keys; snake_case names are accepted as well.
"""

from typing import List, Literal, Optional
from uuid import UUID
from pydantic import EmailStr, Field

from backend.fastapi.schemas.base import CamelModel, UtcDatetime


AdminRole = Literal["admin", "superadmin"]


class AdminBase(CamelModel):
    """Base admin schema with common fields."""

    name: str = Field(
        ...,
        min_length=1,
        max_length=100,
        description="Admin display name",
        examples=["Fest Coordinator"]
    )

    email: EmailStr = Field(
        ...,
        description="Admin email, used for login",
        examples=["admin@techfest.in"]
    )


class AdminSetup(AdminBase):
    """Schema for creating the very first admin account."""

    password: str = Field(
        ...,
        min_length=8,
        max_length=100,
        description="Admin password (minimum 8 characters)",
        examples=["SecurePassword123!"]
    )


class AdminCreate(AdminSetup):
    """Schema for registering an additional admin account."""

    role: Optional[AdminRole] = Field(
        default=None,
        description="Role of the new account, defaults to admin"
    )


class AdminLogin(CamelModel):
    """Schema for admin login request."""

    email: str = Field(
        ...,
        min_length=1,
        description="Admin email",
        examples=["admin@techfest.in"]
    )

    password: str = Field(
        ...,
        min_length=1,
        description="Admin password",
        examples=["SecurePassword123!"]
    )


class LoginHistoryEntry(CamelModel):
    """One successful login."""

    ip: str = Field(..., description="Client address recorded for the login")
    timestamp: UtcDatetime = Field(..., description="When the login happened (UTC)")


class AdminRead(AdminBase):
    """Admin profile as returned to callers. Never includes the password."""

    id: UUID = Field(..., description="Unique identifier for the admin")
    role: AdminRole = Field(..., description="admin or superadmin")
    last_login: Optional[UtcDatetime] = Field(None, description="Most recent login (UTC)")
    last_login_ip: Optional[str] = Field(None, description="Address of the most recent login")
    login_history: List[LoginHistoryEntry] = Field(
        default_factory=list,
        description="Most recent logins, oldest first"
    )
    created_at: UtcDatetime = Field(..., description="When the admin account was created")
    updated_at: UtcDatetime = Field(..., description="When the admin account was last updated")


class AdminAuthResponse(CamelModel):
    """Public profile plus a freshly issued session token."""

    id: UUID = Field(..., description="Unique identifier for the admin")
    name: str = Field(..., description="Admin display name")
    email: str = Field(..., description="Admin email")
    role: AdminRole = Field(..., description="admin or superadmin")
    token: str = Field(..., description="Bearer token, valid for 30 days")


class LoginHistoryResponse(CamelModel):
    """Login audit trail of the calling admin."""

    last_login: Optional[UtcDatetime] = Field(None, description="Most recent login (UTC)")
    last_login_ip: Optional[str] = Field(None, description="Address of the most recent login")
    login_history: List[LoginHistoryEntry] = Field(
        default_factory=list,
        description="Most recent logins, oldest first"
    )
