"""
Pydantic schemas for API request/response validation.
"""

from app.schemas.table import (
    TableCreate,
    TableUpdate,
    TableInfo,
    TableResponse,
    AssignGuestRequest,
)
from app.schemas.guest import (
    GuestCreate,
    GuestUpdate,
    GuestInfo,
    GuestResponse,
    GuestDetailResponse,
)
from app.schemas.relationship import (
    RelationshipCreate,
    RelationshipResponse,
)
from app.schemas.photo import (
    PhotoResponse,
    PhotoGuestsUpdate,
)
from app.schemas.seating import (
    TableSuggestionResponse,
    SuggestionsResponse,
    SeatingOverviewResponse,
)

__all__ = [
    # Tables
    "TableCreate",
    "TableUpdate",
    "TableInfo",
    "TableResponse",
    "AssignGuestRequest",
    # Guests
    "GuestCreate",
    "GuestUpdate",
    "GuestInfo",
    "GuestResponse",
    "GuestDetailResponse",
    # Relationships
    "RelationshipCreate",
    "RelationshipResponse",
    # Photos
    "PhotoResponse",
    "PhotoGuestsUpdate",
    # Seating
    "TableSuggestionResponse",
    "SuggestionsResponse",
    "SeatingOverviewResponse",
]
