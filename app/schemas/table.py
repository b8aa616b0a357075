"""
Pydantic schemas for SeatingTable.
"""

from datetime import datetime
from typing import List, Optional
from uuid import UUID

from pydantic import BaseModel, Field

from app.models.enums import RsvpStatus
from app.models.table import DEFAULT_CAPACITY


class TableBase(BaseModel):
    """Base schema for SeatingTable."""
    name: str = Field(..., min_length=1, max_length=100, description="Table name shown on the seating chart")
    capacity: int = Field(DEFAULT_CAPACITY, ge=1, description="Number of seats")
    description: Optional[str] = Field(None, description="Free-form notes, e.g. location in the room")


class TableCreate(TableBase):
    """Schema for creating a SeatingTable."""
    pass


class TableUpdate(BaseModel):
    """Schema for updating a SeatingTable."""
    name: Optional[str] = Field(None, min_length=1, max_length=100)
    capacity: Optional[int] = Field(None, ge=1)
    description: Optional[str] = None


class SeatedGuestInfo(BaseModel):
    """Nested guest info for table response."""
    id: UUID
    first_name: str
    last_name: str
    rsvp_status: RsvpStatus

    class Config:
        from_attributes = True


class TableInfo(BaseModel):
    """Nested table info for guest and suggestion responses."""
    id: UUID
    name: str
    capacity: int

    class Config:
        from_attributes = True


class TableResponse(BaseModel):
    """Schema for SeatingTable response."""
    id: UUID
    name: str
    capacity: int
    description: Optional[str] = None
    guest_count: int
    available_seats: int
    is_full: bool
    guests: List[SeatedGuestInfo] = Field(default_factory=list)
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True


class AssignGuestRequest(BaseModel):
    """Request schema for seating (or unseating) a guest."""
    guest_id: UUID
    table_id: Optional[UUID] = Field(None, description="Target table; null unassigns the guest")
