"""
Event Pydantic schemas for request/response validation.

``EventCreate`` fills every unspecified field with its documented default.
``EventUpdate`` keeps track of which keys the caller actually sent, so an
update only touches those keys.
"""

from typing import List, Literal, Optional
from uuid import UUID
from pydantic import BaseModel, Field, ConfigDict, field_validator

from backend.fastapi.schemas.base import CamelModel, UtcDatetime


EventType = Literal[
    "workshop",
    "competition",
    "hackathon",
    "talk",
    "panel",
    "technical",
    "nontechnical",
]


class RegistrationFees(CamelModel):
    solo: float = Field(0, description="Fee for a solo participant")
    team: float = Field(0, description="Fee for a team")


class Prizes(CamelModel):
    first: str = ""
    second: str = ""
    third: str = ""
    other: str = ""


class Coordinator(CamelModel):
    name: str = Field(..., min_length=1, description="Coordinator name")
    contact: str = Field(..., min_length=1, description="Phone or other contact")
    email: Optional[str] = Field(None, description="Coordinator email")


class TeamSize(CamelModel):
    min: int = Field(1, description="Minimum team size")
    max: int = Field(1, description="Maximum team size")


class EventBase(CamelModel):
    """Fields shared by event creation and event responses."""

    title: str = Field(
        ...,
        min_length=1,
        max_length=200,
        description="Event title",
        examples=["Code Sprint"]
    )
    description: str = Field(..., description="Short description")
    image: str = Field(..., description="Banner image URL")
    event_type: EventType = Field(..., description="Event category")
    capacity: int = Field(..., description="Maximum participants")

    registration_fees: RegistrationFees = Field(default_factory=RegistrationFees)
    qr_code: str = Field("", description="Payment QR image URL, immutable once set")
    upi_id: str = Field("", description="Payment UPI id")

    date: Optional[UtcDatetime] = Field(None, description="Event date")
    location: str = ""
    about_content: str = ""
    details_content: str = ""
    rules: List[str] = Field(default_factory=list)
    requirements: List[str] = Field(default_factory=list)
    prizes: Prizes = Field(default_factory=Prizes)
    coordinators: List[Coordinator] = Field(default_factory=list)
    start_time: str = Field("", description="Free-form start time label")
    end_time: str = Field("", description="Free-form end time label")

    is_team_event: bool = False
    team_size: TeamSize = Field(default_factory=TeamSize)
    is_active: bool = Field(True, description="Whether the event is publicly listed")

    @field_validator("title")
    @classmethod
    def strip_title(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("title must not be blank")
        return value


class EventCreate(EventBase):
    """Schema for creating a new event."""

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "title": "Code Sprint",
                "description": "24 hour competitive programming marathon",
                "image": "https://ik.imagekit.io/techfest/code-sprint.png",
                "eventType": "competition",
                "capacity": 120,
                "registrationFees": {"solo": 100, "team": 250},
                "qrCode": "https://ik.imagekit.io/techfest/qr/code-sprint.png",
                "isTeamEvent": True,
                "teamSize": {"min": 1, "max": 3}
            }
        }
    )


# Columns that cannot hold NULL; an explicit null in an update is rejected
NON_NULLABLE_FIELDS = (
    "title", "description", "image", "event_type", "capacity",
    "registration_fees", "qr_code", "upi_id", "location", "about_content",
    "details_content", "rules", "requirements", "prizes", "coordinators",
    "start_time", "end_time", "is_team_event", "team_size", "is_active",
)


class EventUpdate(CamelModel):
    """Schema for updating an existing event. Every key is optional."""

    title: Optional[str] = Field(None, min_length=1, max_length=200)
    description: Optional[str] = None
    image: Optional[str] = None
    event_type: Optional[EventType] = None
    capacity: Optional[int] = None
    registration_fees: Optional[RegistrationFees] = None
    qr_code: Optional[str] = None
    upi_id: Optional[str] = None
    date: Optional[UtcDatetime] = None
    location: Optional[str] = None
    about_content: Optional[str] = None
    details_content: Optional[str] = None
    rules: Optional[List[str]] = None
    requirements: Optional[List[str]] = None
    prizes: Optional[Prizes] = None
    coordinators: Optional[List[Coordinator]] = None
    start_time: Optional[str] = None
    end_time: Optional[str] = None
    is_team_event: Optional[bool] = None
    team_size: Optional[TeamSize] = None
    is_active: Optional[bool] = None

    @field_validator(*NON_NULLABLE_FIELDS)
    @classmethod
    def reject_null(cls, value, info):
        if value is None:
            raise ValueError(f"{info.field_name} cannot be null")
        return value

    @field_validator("title")
    @classmethod
    def strip_title(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return value
        value = value.strip()
        if not value:
            raise ValueError("title must not be blank")
        return value

    def supplied_fields(self) -> dict:
        """Fully dumped values of the keys present in the request body."""
        data = self.model_dump()
        return {field: data[field] for field in self.model_fields_set}


class EventRead(EventBase):
    """Schema for reading event information."""

    id: UUID = Field(..., description="Unique identifier of the event")
    created_at: UtcDatetime = Field(..., description="Creation timestamp")
    updated_at: UtcDatetime = Field(..., description="Last update timestamp")


class EventDeleteResponse(BaseModel):
    message: str = Field(default="Event removed")
    id: UUID = Field(..., description="Identifier of the removed event")
