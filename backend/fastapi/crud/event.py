"""
Event CRUD operations.

This module provides Create, Read, Update, Delete operations for events
and enforces the payment QR-code rules:

- a non-empty QR code must pass the URL trust check,
- once an event has a QR code, it can only be resent unchanged.
"""

import logging
from typing import List, Optional, Union
from uuid import UUID
from sqlalchemy.orm import Session

from backend.fastapi.core.exceptions import NotFound, QrCodeImmutable
from backend.fastapi.models.admin import Admin
from backend.fastapi.models.event import Event
from backend.fastapi.schemas.event import EventCreate, EventUpdate
from backend.security.url_trust import validate_qr_code_url

logger = logging.getLogger(__name__)


def _is_blank(value: Optional[str]) -> bool:
    return not value or not value.strip()


def _as_uuid(value: Union[UUID, str]) -> Optional[UUID]:
    if isinstance(value, UUID):
        return value
    try:
        return UUID(str(value))
    except ValueError:
        return None


def create_event(db: Session, event_data: EventCreate, actor: Admin) -> Event:
    """
    Create a new event.

    Args:
        db: Database session
        event_data: Event creation data, defaults already applied
        actor: Admin performing the change (logged, not stored)

    Returns:
        Created event instance

    Raises:
        InvalidUrl, InsecureUrl, UntrustedDomain: If the QR code URL fails
            the trust check
    """
    if not _is_blank(event_data.qr_code):
        validate_qr_code_url(event_data.qr_code)

    db_event = Event(**event_data.model_dump())

    db.add(db_event)
    db.commit()
    db.refresh(db_event)

    logger.info("Event %s created by admin %s (%s)", db_event.id, actor.id, actor.name)

    return db_event


def get_event(db: Session, event_id: Union[UUID, str]) -> Optional[Event]:
    """
    Get an event by ID, active or not.

    Args:
        db: Database session
        event_id: Event unique identifier

    Returns:
        Event instance if found, None otherwise
    """
    event_uuid = _as_uuid(event_id)
    if event_uuid is None:
        return None
    return db.query(Event).filter(Event.id == event_uuid).first()


def get_active_events(db: Session) -> List[Event]:
    """
    Get all events visible in the public listing.

    Args:
        db: Database session

    Returns:
        List of events with ``is_active`` set, oldest first
    """
    return (
        db.query(Event)
        .filter(Event.is_active.is_(True))
        .order_by(Event.created_at)
        .all()
    )


def check_qr_code_change(current: Optional[str], new: str) -> None:
    """
    Apply the QR code rules to a requested change.

    Args:
        current: QR code stored on the event
        new: QR code supplied in the update

    Raises:
        QrCodeImmutable: If a QR code is already set and ``new`` differs
        InvalidUrl, InsecureUrl, UntrustedDomain: If a first-time QR code
            fails the trust check
    """
    if not _is_blank(current):
        if new != current:
            raise QrCodeImmutable()
        # Resending the stored value is a no-op
        return

    if new:
        validate_qr_code_url(new)


def update_event(db: Session, event_id: Union[UUID, str], event_update: EventUpdate, actor: Admin) -> Event:
    """
    Update an existing event.

    Only the keys present in the request are written; everything else is
    left as stored.

    Args:
        db: Database session
        event_id: Event unique identifier
        event_update: Event update data
        actor: Admin performing the change

    Returns:
        Updated event instance

    Raises:
        NotFound: If the event does not exist
        QrCodeImmutable: If the request changes an already set QR code
        InvalidUrl, InsecureUrl, UntrustedDomain: If a first-time QR code
            fails the trust check
    """
    db_event = get_event(db, event_id)
    if not db_event:
        raise NotFound("Event")

    update_data = event_update.supplied_fields()

    if "qr_code" in update_data:
        first_time = _is_blank(db_event.qr_code) and bool(update_data["qr_code"])
        check_qr_code_change(db_event.qr_code, update_data["qr_code"])
        if first_time:
            logger.info(
                "QR code set for the first time for event %s by admin %s (%s): %s",
                db_event.id, actor.id, actor.name, update_data["qr_code"]
            )

    for field, value in update_data.items():
        setattr(db_event, field, value)

    db.commit()
    db.refresh(db_event)

    return db_event


def delete_event(db: Session, event_id: Union[UUID, str], actor: Admin) -> None:
    """
    Permanently delete an event.

    Args:
        db: Database session
        event_id: Event unique identifier
        actor: Admin performing the deletion

    Raises:
        NotFound: If the event does not exist
    """
    db_event = get_event(db, event_id)
    if not db_event:
        raise NotFound("Event")

    db.delete(db_event)
    db.commit()

    logger.info("Event %s deleted by admin %s (%s)", event_id, actor.id, actor.name)
