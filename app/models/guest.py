"""
Guest model.
"""

import uuid
from typing import TYPE_CHECKING

from sqlalchemy import (
    String,
    Text,
    Boolean,
    Enum,
    ForeignKey,
    Index,
    Uuid,
)
from sqlalchemy.orm import Mapped, mapped_column, relationship as orm_relationship

from app.models.base import Base, TimestampMixin
from app.models.enums import RsvpStatus

if TYPE_CHECKING:
    from app.models.table import SeatingTable
    from app.models.relationship import GuestRelationship
    from app.models.photo import PhotoAssignment


class Guest(TimestampMixin, Base):
    """Wedding guest."""

    __tablename__ = "guests"
    __table_args__ = (
        Index("idx_guests_table_id", "table_id"),
        Index("idx_guests_name", "last_name", "first_name"),
    )

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        primary_key=True,
        default=uuid.uuid4,
    )
    first_name: Mapped[str] = mapped_column(String(150), nullable=False)
    last_name: Mapped[str] = mapped_column(String(150), nullable=False)

    # Contact info
    email: Mapped[str | None] = mapped_column(String(255))
    phone: Mapped[str | None] = mapped_column(String(100))
    address: Mapped[str | None] = mapped_column(Text)

    rsvp_status: Mapped[RsvpStatus] = mapped_column(
        Enum(RsvpStatus, name="rsvp_status"),
        default=RsvpStatus.PENDING,
        nullable=False,
    )
    dietary_restrictions: Mapped[str | None] = mapped_column(Text)
    plus_one: Mapped[bool] = mapped_column(Boolean, default=False)
    notes: Mapped[str | None] = mapped_column(Text)

    # Seating
    table_id: Mapped[uuid.UUID | None] = mapped_column(
        Uuid,
        ForeignKey("tables.id", ondelete="SET NULL"),
        nullable=True,
    )

    table: Mapped["SeatingTable | None"] = orm_relationship(
        "SeatingTable",
        back_populates="guests",
    )

    # Relationships FROM this guest (outgoing)
    relationships_from: Mapped[list["GuestRelationship"]] = orm_relationship(
        "GuestRelationship",
        foreign_keys="GuestRelationship.guest_from_id",
        back_populates="guest_from",
        cascade="all, delete-orphan",
    )

    # Relationships TO this guest (incoming)
    relationships_to: Mapped[list["GuestRelationship"]] = orm_relationship(
        "GuestRelationship",
        foreign_keys="GuestRelationship.guest_to_id",
        back_populates="guest_to",
        cascade="all, delete-orphan",
    )

    photo_assignments: Mapped[list["PhotoAssignment"]] = orm_relationship(
        "PhotoAssignment",
        back_populates="guest",
        cascade="all, delete-orphan",
    )

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    @property
    def is_seated(self) -> bool:
        return self.table_id is not None

    @property
    def has_photos(self) -> bool:
        return bool(self.photo_assignments)

    def __repr__(self) -> str:
        return f"<Guest(name={self.full_name!r}, rsvp={self.rsvp_status.value})>"
