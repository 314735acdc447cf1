"""Pytest configuration and shared fixtures for all tests."""

import os

# Settings are read at import time, so configure them before importing the app
os.environ["ENV_MODE"] = "dev"
os.environ["DATABASE_URL"] = "sqlite://"
os.environ.setdefault("JWT_SECRET_KEY", "test_secret_key_for_testing_only")

import pytest
from fastapi.testclient import TestClient

from backend.fastapi.crud.admin import create_admin
from backend.fastapi.dependencies.database import Base, SessionLocal, engine, init_db
from backend.fastapi.main import app
from backend.fastapi.schemas.admin import AdminSetup
from backend.security.auth import create_admin_token


ADMIN_PASSWORD = "SecurePassword123!"


@pytest.fixture(autouse=True)
def reset_database():
    """Start every test from an empty schema."""
    Base.metadata.drop_all(bind=engine)
    init_db()
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def db():
    """Database session for arranging and inspecting state directly."""
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client():
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def admin(db):
    """A stored admin account with a known password."""
    return create_admin(
        db,
        AdminSetup(name="Fest Admin", email="admin@techfest.in", password=ADMIN_PASSWORD),
        role="superadmin",
    )


@pytest.fixture
def auth_headers(admin):
    token = create_admin_token(str(admin.id), admin.role)
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def event_payload():
    """Minimal valid event body in camelCase."""
    return {
        "title": "Code Sprint",
        "description": "Competitive programming marathon",
        "image": "https://ik.imagekit.io/techfest/code-sprint.png",
        "eventType": "competition",
        "capacity": 120,
    }
