"""
Event model for fest activities.

Nested, document-shaped fields (fees, prizes, coordinators, team size,
rule lists) are stored as JSON columns. Defaults mirror the public schema
so rows created outside the API still read back consistently.
"""

from uuid import uuid4
from sqlalchemy import Column, String, Text, Integer, Boolean, DateTime, JSON
from sqlalchemy.dialects.postgresql import UUID

from backend.fastapi.core.utils import utc_now
from backend.fastapi.dependencies.database import Base


EVENT_TYPES = (
    "workshop",
    "competition",
    "hackathon",
    "talk",
    "panel",
    "technical",
    "nontechnical",
)


def default_registration_fees() -> dict:
    return {"solo": 0, "team": 0}


def default_prizes() -> dict:
    return {"first": "", "second": "", "third": "", "other": ""}


def default_team_size() -> dict:
    return {"min": 1, "max": 1}


class Event(Base):
    """
    Event model representing a single fest activity.

    Attributes:
        id: Unique identifier for the event
        title, description, image: Required descriptive fields
        event_type: One of EVENT_TYPES
        capacity: Maximum number of participants
        registration_fees: ``{"solo": number, "team": number}``
        qr_code: Payment QR image URL; cannot change once set
        upi_id: Payment UPI handle
        is_active: Visibility flag for the public listing
    """
    __tablename__ = "events"

    # Primary key
    id = Column(
        UUID(as_uuid=True),
        primary_key=True,
        default=uuid4,
        index=True,
        doc="Unique identifier for the event"
    )

    # Descriptive fields
    title = Column(String(200), nullable=False, doc="Event title")
    description = Column(Text, nullable=False, doc="Short event description")
    image = Column(String(500), nullable=False, doc="Banner image URL")
    event_type = Column(String(20), nullable=False, index=True, doc="Event category")
    capacity = Column(Integer, nullable=False, doc="Maximum participants")

    # Payment
    registration_fees = Column(JSON, nullable=False, default=default_registration_fees)
    qr_code = Column(String(500), nullable=False, default="", doc="Payment QR image URL")
    upi_id = Column(String(100), nullable=False, default="", doc="Payment UPI id")

    # Scheduling and content
    date = Column(DateTime(timezone=True), nullable=True, doc="Event date")
    location = Column(String(200), nullable=False, default="")
    about_content = Column(Text, nullable=False, default="")
    details_content = Column(Text, nullable=False, default="")
    rules = Column(JSON, nullable=False, default=list)
    requirements = Column(JSON, nullable=False, default=list)
    prizes = Column(JSON, nullable=False, default=default_prizes)
    coordinators = Column(JSON, nullable=False, default=list)
    start_time = Column(String(50), nullable=False, default="")
    end_time = Column(String(50), nullable=False, default="")

    # Participation
    is_team_event = Column(Boolean, nullable=False, default=False)
    team_size = Column(JSON, nullable=False, default=default_team_size)

    is_active = Column(
        Boolean,
        nullable=False,
        default=True,
        index=True,
        doc="Whether the event appears in the public listing"
    )

    # Timestamps
    created_at = Column(
        DateTime(timezone=True),
        default=utc_now,
        nullable=False,
        doc="Event creation timestamp"
    )

    updated_at = Column(
        DateTime(timezone=True),
        default=utc_now,
        onupdate=utc_now,
        nullable=False,
        doc="Last event update timestamp"
    )

    def __repr__(self) -> str:
        return f"<Event(id='{self.id}', title='{self.title}')>"

    def __str__(self) -> str:
        return self.title
