import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from backend.fastapi.dependencies.database import init_db, SessionLocal
from backend.fastapi.crud.admin import get_admin_count

logger = logging.getLogger(__name__)

@asynccontextmanager
async def lifespan(app: FastAPI):
    # Initialize the database schema
    init_db()

    db = SessionLocal()
    try:
        admin_count = get_admin_count(db)
        if admin_count == 0:
            logger.warning("No admin accounts yet. Create the first one with POST /api/admin/setup")
        else:
            logger.info("Found %d existing admin(s)", admin_count)
    finally:
        db.close()

    yield
