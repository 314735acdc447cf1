"""
Database engine, session factory and declarative base.

The engine is built from the active settings. SQLite URLs get the
thread-check disabled so FastAPI's threadpool can share connections, and
in-memory SQLite uses a single static connection so every session sees
the same schema.
"""

import logging
from typing import Generator

from sqlalchemy import create_engine
from sqlalchemy.orm import Session, declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool

from backend.fastapi.core.init_settings import global_settings

logger = logging.getLogger(__name__)

DATABASE_URL = global_settings.DB_URL


def _build_engine(url: str):
    if url.startswith("sqlite"):
        kwargs = {"connect_args": {"check_same_thread": False}}
        if url in ("sqlite://", "sqlite:///:memory:"):
            kwargs["poolclass"] = StaticPool
        return create_engine(url, **kwargs)
    return create_engine(url, pool_pre_ping=True)


engine = _build_engine(DATABASE_URL)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base = declarative_base()


def init_db():
    """Create all tables that are not present yet."""
    # Register models with Base.metadata
    from backend.fastapi.models import admin, event  # noqa: F401

    Base.metadata.create_all(bind=engine)
    logger.info("Database tables ready (%s)", engine.url.get_backend_name())


def get_sync_db() -> Generator[Session, None, None]:
    """Dependency for FastAPI routes to get a database session."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
