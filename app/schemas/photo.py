"""
Pydantic schemas for Photo and PhotoAssignment.
"""

from datetime import datetime
from typing import List
from uuid import UUID

from pydantic import BaseModel, Field

from app.schemas.guest import GuestInfo


class PhotoAssignmentInfo(BaseModel):
    """Nested assignment info for photo response."""
    id: UUID
    guest_id: UUID
    guest: GuestInfo

    class Config:
        from_attributes = True


class PhotoResponse(BaseModel):
    """Schema for Photo response."""
    id: UUID
    file_name: str
    original_name: str
    file_path: str
    file_size: int
    mime_type: str
    created_at: datetime
    guest_assignments: List[PhotoAssignmentInfo] = Field(default_factory=list)

    class Config:
        from_attributes = True


class PhotoGuestsUpdate(BaseModel):
    """Request schema for replacing the guests tagged in a photo."""
    guest_ids: List[UUID] = Field(default_factory=list, description="Guests in the photo; empty clears all")
