"""
Photo model and the guest <-> photo junction.
"""

import uuid
from typing import TYPE_CHECKING

from sqlalchemy import ForeignKey, Integer, String, UniqueConstraint, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship as orm_relationship

from app.models.base import Base, TimestampMixin

if TYPE_CHECKING:
    from app.models.guest import Guest


class Photo(TimestampMixin, Base):
    """A photo already stored under the front end's public photos directory."""

    __tablename__ = "photos"

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        primary_key=True,
        default=uuid.uuid4,
    )
    file_name: Mapped[str] = mapped_column(String(255), nullable=False)
    original_name: Mapped[str] = mapped_column(String(255), nullable=False)
    file_path: Mapped[str] = mapped_column(String(500), nullable=False)
    file_size: Mapped[int] = mapped_column(Integer, default=0)
    mime_type: Mapped[str] = mapped_column(String(100), default="application/octet-stream")

    guest_assignments: Mapped[list["PhotoAssignment"]] = orm_relationship(
        "PhotoAssignment",
        back_populates="photo",
        cascade="all, delete-orphan",
    )

    def __repr__(self) -> str:
        return f"<Photo(file_name={self.file_name!r})>"


class PhotoAssignment(TimestampMixin, Base):
    """Junction table for Guest <-> Photo many-to-many relationship."""

    __tablename__ = "photo_assignments"
    __table_args__ = (
        UniqueConstraint("guest_id", "photo_id", name="uq_photo_assignments_guest_photo"),
    )

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        primary_key=True,
        default=uuid.uuid4,
    )
    guest_id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        ForeignKey("guests.id", ondelete="CASCADE"),
        nullable=False,
    )
    photo_id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        ForeignKey("photos.id", ondelete="CASCADE"),
        nullable=False,
    )

    guest: Mapped["Guest"] = orm_relationship("Guest", back_populates="photo_assignments")
    photo: Mapped["Photo"] = orm_relationship("Photo", back_populates="guest_assignments")

    def __repr__(self) -> str:
        return f"<PhotoAssignment(guest={self.guest_id}, photo={self.photo_id})>"
