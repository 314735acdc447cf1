"""
Admin CRUD operations.

This module provides database operations for admin users: creation,
first-time setup, lookups, counting, and recording successful logins.
"""

import logging
from typing import Optional, Union
from uuid import UUID
from sqlalchemy.orm import Session

from backend.fastapi.core.exceptions import AlreadyExists, SetupAlreadyComplete
from backend.fastapi.core.utils import normalize_email, utc_now
from backend.fastapi.models.admin import Admin, LOGIN_HISTORY_LIMIT
from backend.fastapi.schemas.admin import AdminCreate, AdminSetup
from backend.security.password import hash_password

logger = logging.getLogger(__name__)


def _as_uuid(value: Union[UUID, str]) -> Optional[UUID]:
    if isinstance(value, UUID):
        return value
    try:
        return UUID(str(value))
    except ValueError:
        return None


class AdminCRUD:
    """CRUD operations for Admin model."""

    def __init__(self, db: Session):
        """Initialize with database session."""
        self.db = db

    def create_admin(self, admin_data: AdminSetup, role: str = "admin") -> Admin:
        """
        Create a new admin user.

        Args:
            admin_data: Admin data with name, email and password
            role: Role to assign to the new account

        Returns:
            Created Admin instance

        Raises:
            AlreadyExists: If the email is already registered
        """
        email = normalize_email(admin_data.email)
        if self.get_admin_by_email(email):
            raise AlreadyExists()

        db_admin = Admin(
            name=admin_data.name,
            email=email,
            password_hash=hash_password(admin_data.password),
            role=role,
            login_history=[]
        )

        self.db.add(db_admin)
        self.db.commit()
        self.db.refresh(db_admin)

        return db_admin

    def register_admin(self, admin_data: AdminCreate) -> Admin:
        """Create an additional admin; role defaults to ``admin``."""
        return self.create_admin(admin_data, role=admin_data.role or "admin")

    def setup_first_admin(self, admin_data: AdminSetup) -> Admin:
        """
        Create the very first admin as ``superadmin``.

        Raises:
            SetupAlreadyComplete: If any admin already exists
        """
        if self.count_admins() > 0:
            raise SetupAlreadyComplete()
        return self.create_admin(admin_data, role="superadmin")

    def get_admin(self, admin_id: Union[UUID, str]) -> Optional[Admin]:
        """
        Get admin by ID.

        Args:
            admin_id: Admin UUID, or its string form

        Returns:
            Admin instance or None if not found or not a valid UUID
        """
        admin_uuid = _as_uuid(admin_id)
        if admin_uuid is None:
            return None
        return self.db.query(Admin).filter(Admin.id == admin_uuid).first()

    def get_admin_by_email(self, email: str) -> Optional[Admin]:
        """
        Get admin by email (exact match).

        Args:
            email: Admin email

        Returns:
            Admin instance or None if not found
        """
        return self.db.query(Admin).filter(Admin.email == email).first()

    def count_admins(self) -> int:
        """Count every admin account."""
        return self.db.query(Admin).count()

    def record_login(self, admin: Admin, client_ip: str) -> Admin:
        """
        Record a successful login on the admin record.

        Sets ``last_login``/``last_login_ip``, appends to ``login_history``
        and keeps only the newest ``LOGIN_HISTORY_LIMIT`` entries. All of it
        is persisted in a single commit.

        Args:
            admin: Authenticated admin
            client_ip: Address recorded for the login

        Returns:
            Updated Admin instance
        """
        now = utc_now()

        history = list(admin.login_history or [])
        history.append({"ip": client_ip, "timestamp": now.isoformat()})

        admin.last_login = now
        admin.last_login_ip = client_ip
        # Reassign so the JSON column is flagged as modified
        admin.login_history = history[-LOGIN_HISTORY_LIMIT:]

        self.db.commit()
        self.db.refresh(admin)

        return admin


# Convenience functions
def create_admin(db: Session, admin_data: AdminSetup, role: str = "admin") -> Admin:
    """Create a new admin."""
    return AdminCRUD(db).create_admin(admin_data, role=role)


def register_admin(db: Session, admin_data: AdminCreate) -> Admin:
    """Register an additional admin."""
    return AdminCRUD(db).register_admin(admin_data)


def setup_first_admin(db: Session, admin_data: AdminSetup) -> Admin:
    """Create the first admin as superadmin."""
    return AdminCRUD(db).setup_first_admin(admin_data)


def get_admin_by_email(db: Session, email: str) -> Optional[Admin]:
    """Get admin by email."""
    return AdminCRUD(db).get_admin_by_email(email)


def get_admin(db: Session, admin_id: Union[UUID, str]) -> Optional[Admin]:
    """Get admin by ID."""
    return AdminCRUD(db).get_admin(admin_id)


def get_admin_count(db: Session) -> int:
    """Get total count of admins."""
    return AdminCRUD(db).count_admins()


def record_login(db: Session, admin: Admin, client_ip: str) -> Admin:
    """Record a successful login."""
    return AdminCRUD(db).record_login(admin, client_ip)
