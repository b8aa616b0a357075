"""
Pydantic schemas for seating suggestions and the assignment overview.
"""

from typing import List
from uuid import UUID

from pydantic import BaseModel, Field

from app.schemas.guest import GuestInfo
from app.schemas.table import TableResponse


class TableSuggestionResponse(BaseModel):
    """One suggested table and its relationship score."""
    table: TableResponse
    score: int = Field(..., description="Sum of relationship strengths to guests at this table")


class SuggestionsResponse(BaseModel):
    """Suggested tables for an unseated guest."""
    guest_id: UUID
    suggestions: List[TableSuggestionResponse] = Field(default_factory=list)
    available_tables: List[TableResponse] = Field(default_factory=list)


class TableOverview(BaseModel):
    """A table plus the number of relationships among its own guests."""
    table: TableResponse
    internal_connections: int


class SeatingOverviewResponse(BaseModel):
    """Totals for the table assignment screen."""
    total_capacity: int
    assigned_count: int
    unassigned_count: int
    unassigned_guests: List[GuestInfo] = Field(default_factory=list)
    tables: List[TableOverview] = Field(default_factory=list)
