from fastapi import FastAPI
from backend.fastapi.api.v1.endpoints import admin, event

def setup_routers(app: FastAPI):
    # Admin authentication and audit trail
    app.include_router(admin.router, prefix="/api/admin", tags=["admin-authentication"])

    # Event management routes
    app.include_router(event.router, prefix="/api/events", tags=["event-management"])
