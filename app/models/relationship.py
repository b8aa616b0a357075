"""
GuestRelationship model for storing guest-to-guest relationships.
"""

import uuid
from typing import TYPE_CHECKING

from sqlalchemy import (
    CheckConstraint,
    Enum,
    ForeignKey,
    Index,
    Integer,
    Text,
    Uuid,
)
from sqlalchemy.orm import Mapped, mapped_column, relationship as orm_relationship

from app.models.base import Base, TimestampMixin
from app.models.enums import RelationshipKind

if TYPE_CHECKING:
    from app.models.guest import Guest


class GuestRelationship(TimestampMixin, Base):
    """
    Guest-to-guest relationship.

    Stored with a direction (from -> to) as entered, but treated as
    symmetric everywhere it is read: an edge A->B counts exactly like B->A
    for seating suggestions and the graph.
    """

    __tablename__ = "relationships"
    __table_args__ = (
        CheckConstraint("guest_from_id <> guest_to_id", name="ck_relationships_distinct_guests"),
        CheckConstraint("strength BETWEEN 1 AND 5", name="ck_relationships_strength_range"),
        Index("idx_relationships_guest_from_id", "guest_from_id"),
        Index("idx_relationships_guest_to_id", "guest_to_id"),
    )

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        primary_key=True,
        default=uuid.uuid4,
    )
    guest_from_id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        ForeignKey("guests.id", ondelete="CASCADE"),
        nullable=False,
    )
    guest_to_id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        ForeignKey("guests.id", ondelete="CASCADE"),
        nullable=False,
    )
    relationship_type: Mapped[RelationshipKind] = mapped_column(
        Enum(RelationshipKind, name="relationship_kind"),
        nullable=False,
    )
    strength: Mapped[int] = mapped_column(Integer, default=1, nullable=False)
    notes: Mapped[str | None] = mapped_column(Text)

    guest_from: Mapped["Guest"] = orm_relationship(
        "Guest",
        foreign_keys=[guest_from_id],
        back_populates="relationships_from",
    )
    guest_to: Mapped["Guest"] = orm_relationship(
        "Guest",
        foreign_keys=[guest_to_id],
        back_populates="relationships_to",
    )

    def __repr__(self) -> str:
        return (
            f"<GuestRelationship(from={self.guest_from_id}, to={self.guest_to_id}, "
            f"type={self.relationship_type.value}, strength={self.strength})>"
        )
