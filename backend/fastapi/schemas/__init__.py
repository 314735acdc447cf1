from backend.fastapi.schemas.base import CamelModel
from backend.fastapi.schemas.admin import (
    AdminBase,
    AdminSetup,
    AdminCreate,
    AdminLogin,
    AdminRead,
    AdminAuthResponse,
    LoginHistoryEntry,
    LoginHistoryResponse
)
from backend.fastapi.schemas.event import (
    RegistrationFees,
    Prizes,
    Coordinator,
    TeamSize,
    EventBase,
    EventCreate,
    EventUpdate,
    EventRead,
    EventDeleteResponse
)
