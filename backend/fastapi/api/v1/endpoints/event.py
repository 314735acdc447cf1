"""
Event management API endpoints.

Listing and reading events is public; creating, updating and deleting
requires an admin token.
"""

import logging
from typing import List
from uuid import UUID
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from backend.fastapi.core.exceptions import NotFound
from backend.fastapi.crud.event import (
    create_event, delete_event, get_active_events, get_event, update_event
)
from backend.fastapi.dependencies.database import get_sync_db
from backend.fastapi.models.admin import Admin
from backend.fastapi.schemas.event import (
    EventCreate, EventDeleteResponse, EventRead, EventUpdate
)
from backend.security.dependencies import RequireAdmin

logger = logging.getLogger(__name__)

router = APIRouter(tags=["event-management"])


@router.get("", response_model=List[EventRead], summary="List Active Events")
async def list_events(db: Session = Depends(get_sync_db)):
    """
    Get all active events (public endpoint).

    Events with `isActive` set to false are left out.
    """
    try:
        events = get_active_events(db)
        logger.info("Retrieved %d events", len(events))
        return [EventRead.model_validate(event) for event in events]
    except Exception as e:
        logger.exception("Error retrieving events")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to retrieve events: {str(e)}"
        )


@router.get("/{event_id}", response_model=EventRead, summary="Get Event by ID")
async def get_event_by_id(
    event_id: UUID,
    db: Session = Depends(get_sync_db)
):
    """
    Get a single event (public endpoint), whether active or not.

    **Errors:**
    - **404**: Event not found
    """
    try:
        event = get_event(db, event_id)
        if not event:
            raise NotFound("Event")
        return EventRead.model_validate(event)
    except HTTPException:
        raise
    except Exception as e:
        logger.exception("Error retrieving event %s", event_id)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to retrieve event: {str(e)}"
        )


@router.post(
    "",
    response_model=EventRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create New Event"
)
async def create_new_event(
    event_data: EventCreate,
    db: Session = Depends(get_sync_db),
    current_admin: Admin = RequireAdmin
):
    """
    Create a new event (admin-only endpoint).

    A non-empty **qrCode** must be an https URL on a trusted domain.

    **Errors:**
    - **400**: Validation error or rejected QR code URL
    - **401**: Not authenticated
    """
    try:
        event = create_event(db, event_data, current_admin)
        return EventRead.model_validate(event)
    except HTTPException:
        raise
    except Exception as e:
        logger.exception("Failed to create event")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to create event: {str(e)}"
        )


@router.put("/{event_id}", response_model=EventRead, summary="Update Event")
async def update_event_by_id(
    event_id: UUID,
    event_update: EventUpdate,
    db: Session = Depends(get_sync_db),
    current_admin: Admin = RequireAdmin
):
    """
    Update an event (admin-only endpoint).

    Only the keys sent in the body are changed. A payment QR code can be
    set once; after that it may only be resent unchanged.

    **Errors:**
    - **400**: Validation error or rejected QR code URL
    - **401**: Not authenticated
    - **403**: QR code already set and the request changes it
    - **404**: Event not found
    """
    try:
        event = update_event(db, event_id, event_update, current_admin)
        return EventRead.model_validate(event)
    except HTTPException:
        raise
    except Exception as e:
        logger.exception("Failed to update event %s", event_id)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to update event: {str(e)}"
        )


@router.delete("/{event_id}", response_model=EventDeleteResponse, summary="Delete Event")
async def delete_event_by_id(
    event_id: UUID,
    db: Session = Depends(get_sync_db),
    current_admin: Admin = RequireAdmin
):
    """
    Permanently delete an event (admin-only endpoint).

    **Errors:**
    - **401**: Not authenticated
    - **404**: Event not found
    """
    try:
        delete_event(db, event_id, current_admin)
        return EventDeleteResponse(id=event_id)
    except HTTPException:
        raise
    except Exception as e:
        logger.exception("Failed to delete event %s", event_id)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to delete event: {str(e)}"
        )
