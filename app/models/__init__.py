"""
SQLAlchemy models for the wedding guestbook.

All models are imported here for easy access and to ensure
they are registered with the declarative base.
"""

from app.models.base import Base
from app.models.enums import RsvpStatus, RelationshipKind, FAMILY_KINDS
from app.models.table import SeatingTable, DEFAULT_CAPACITY
from app.models.guest import Guest
from app.models.relationship import GuestRelationship
from app.models.photo import Photo, PhotoAssignment

__all__ = [
    # Base
    "Base",
    # Core models
    "Guest",
    "SeatingTable",
    "GuestRelationship",
    "Photo",
    # Junction tables
    "PhotoAssignment",
    # Enums
    "RsvpStatus",
    "RelationshipKind",
    "FAMILY_KINDS",
    # Defaults
    "DEFAULT_CAPACITY",
]
