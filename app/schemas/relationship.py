"""
Pydantic schemas for GuestRelationship.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, Field, model_validator

from app.models.enums import MAX_STRENGTH, MIN_STRENGTH, RelationshipKind
from app.schemas.guest import GuestInfo


class RelationshipCreate(BaseModel):
    """Schema for creating a GuestRelationship."""
    guest_from_id: UUID = Field(..., description="Guest the relationship is entered from")
    guest_to_id: UUID = Field(..., description="Related guest")
    relationship_type: RelationshipKind
    strength: int = Field(1, ge=MIN_STRENGTH, le=MAX_STRENGTH, description="Closeness, 1 (loose) to 5 (closest)")
    notes: Optional[str] = None

    @model_validator(mode="after")
    def check_distinct_guests(self) -> "RelationshipCreate":
        if self.guest_from_id == self.guest_to_id:
            raise ValueError("A guest cannot have a relationship with themselves")
        return self


class RelationshipResponse(BaseModel):
    """Schema for GuestRelationship response."""
    id: UUID
    guest_from_id: UUID
    guest_to_id: UUID
    relationship_type: RelationshipKind
    strength: int
    notes: Optional[str] = None
    created_at: datetime
    updated_at: datetime
    guest_from: GuestInfo
    guest_to: GuestInfo

    class Config:
        from_attributes = True
