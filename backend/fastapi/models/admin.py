"""
Admin model for the authentication system.

This module defines the Admin table structure, including the login audit
fields updated on every successful login.
"""

import uuid
from sqlalchemy import Column, String, DateTime, JSON
from sqlalchemy.dialects.postgresql import UUID

from backend.fastapi.core.utils import utc_now
from backend.fastapi.dependencies.database import Base


ADMIN_ROLES = ("admin", "superadmin")

# Only the most recent logins are kept on the record
LOGIN_HISTORY_LIMIT = 50


class Admin(Base):
    """
    Admin user model for authentication and authorization.

    Passwords are stored as bcrypt hashes. ``login_history`` is a JSON list
    of ``{"ip": str, "timestamp": iso-8601 str}`` entries, oldest first.
    """

    __tablename__ = "admins"

    # Primary key
    id = Column(
        UUID(as_uuid=True),
        primary_key=True,
        default=uuid.uuid4,
        comment="Unique identifier for the admin"
    )

    name = Column(
        String(100),
        nullable=False,
        comment="Display name of the admin"
    )

    # Authentication fields
    email = Column(
        String(255),
        unique=True,
        nullable=False,
        index=True,
        comment="Unique email used for admin login"
    )

    password_hash = Column(
        String(255),
        nullable=False,
        comment="Bcrypt hashed password"
    )

    role = Column(
        String(20),
        default="admin",
        nullable=False,
        comment="admin or superadmin"
    )

    # Login audit
    last_login = Column(
        DateTime(timezone=True),
        nullable=True,
        comment="Timestamp of the most recent successful login"
    )

    last_login_ip = Column(
        String(255),
        nullable=True,
        comment="Client address of the most recent successful login"
    )

    login_history = Column(
        JSON,
        default=list,
        nullable=False,
        comment="Most recent successful logins, oldest first"
    )

    # Timestamps
    created_at = Column(
        DateTime(timezone=True),
        default=utc_now,
        nullable=False,
        comment="When the admin account was created"
    )

    updated_at = Column(
        DateTime(timezone=True),
        default=utc_now,
        onupdate=utc_now,
        nullable=False,
        comment="When the admin account was last updated"
    )

    def __repr__(self) -> str:
        return f"<Admin(id={self.id}, email='{self.email}', role='{self.role}')>"

    def __str__(self) -> str:
        return f"Admin: {self.email}"
