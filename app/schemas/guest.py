"""
Pydantic schemas for Guest.
"""

from datetime import datetime
from typing import List, Optional
from uuid import UUID

from pydantic import BaseModel, EmailStr, Field

from app.models.enums import RelationshipKind, RsvpStatus
from app.schemas.table import TableInfo


class GuestBase(BaseModel):
    """Base schema for Guest."""
    first_name: str = Field(..., min_length=1, max_length=150)
    last_name: str = Field(..., min_length=1, max_length=150)
    email: Optional[EmailStr] = None
    phone: Optional[str] = Field(None, max_length=100)
    address: Optional[str] = None
    rsvp_status: RsvpStatus = RsvpStatus.PENDING
    dietary_restrictions: Optional[str] = None
    plus_one: bool = False
    notes: Optional[str] = None
    table_id: Optional[UUID] = Field(None, description="Table the guest is seated at")


class GuestCreate(GuestBase):
    """Schema for creating a Guest."""
    pass


class GuestUpdate(BaseModel):
    """Schema for updating a Guest. Only fields that are sent are changed."""
    first_name: Optional[str] = Field(None, min_length=1, max_length=150)
    last_name: Optional[str] = Field(None, min_length=1, max_length=150)
    email: Optional[EmailStr] = None
    phone: Optional[str] = Field(None, max_length=100)
    address: Optional[str] = None
    rsvp_status: Optional[RsvpStatus] = None
    dietary_restrictions: Optional[str] = None
    plus_one: Optional[bool] = None
    notes: Optional[str] = None
    table_id: Optional[UUID] = None


class GuestInfo(BaseModel):
    """Nested guest info for relationship and photo responses."""
    id: UUID
    first_name: str
    last_name: str
    full_name: str
    rsvp_status: RsvpStatus
    table_id: Optional[UUID] = None

    class Config:
        from_attributes = True


class GuestResponse(BaseModel):
    """Schema for Guest response."""
    id: UUID
    first_name: str
    last_name: str
    full_name: str
    email: Optional[str] = None
    phone: Optional[str] = None
    address: Optional[str] = None
    rsvp_status: RsvpStatus
    dietary_restrictions: Optional[str] = None
    plus_one: bool
    notes: Optional[str] = None
    table_id: Optional[UUID] = None
    table: Optional[TableInfo] = None
    has_photos: bool = False
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True


class OutgoingRelationship(BaseModel):
    """Relationship entered from this guest, with the other guest."""
    id: UUID
    relationship_type: RelationshipKind
    strength: int
    notes: Optional[str] = None
    guest_to: GuestInfo

    class Config:
        from_attributes = True


class IncomingRelationship(BaseModel):
    """Relationship entered towards this guest, with the other guest."""
    id: UUID
    relationship_type: RelationshipKind
    strength: int
    notes: Optional[str] = None
    guest_from: GuestInfo

    class Config:
        from_attributes = True


class GuestDetailResponse(GuestResponse):
    """Guest with both directions of relationships."""
    relationships_from: List[OutgoingRelationship] = Field(default_factory=list)
    relationships_to: List[IncomingRelationship] = Field(default_factory=list)
