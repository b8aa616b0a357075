"""
SeatingTable model - a reception table with a fixed number of seats.
"""

import uuid
from typing import TYPE_CHECKING

from sqlalchemy import CheckConstraint, Integer, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship as orm_relationship

from app.models.base import Base, TimestampMixin

if TYPE_CHECKING:
    from app.models.guest import Guest

DEFAULT_CAPACITY = 8


class SeatingTable(TimestampMixin, Base):
    """
    Reception table.

    Capacity is a soft bound: guests can be assigned past it (the front end
    shows the table as over capacity), but full tables are never suggested.
    """

    __tablename__ = "tables"
    __table_args__ = (
        CheckConstraint("capacity >= 1", name="ck_tables_capacity_positive"),
    )

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        primary_key=True,
        default=uuid.uuid4,
    )
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    capacity: Mapped[int] = mapped_column(Integer, default=DEFAULT_CAPACITY, nullable=False)
    description: Mapped[str | None] = mapped_column(Text)

    # Guests seated here, unassigned (not deleted) when the table goes away
    guests: Mapped[list["Guest"]] = orm_relationship(
        "Guest",
        back_populates="table",
        order_by="[Guest.last_name, Guest.first_name]",
    )

    @property
    def guest_count(self) -> int:
        return len(self.guests)

    @property
    def available_seats(self) -> int:
        return max(self.capacity - self.guest_count, 0)

    @property
    def is_full(self) -> bool:
        return self.guest_count >= self.capacity

    def __repr__(self) -> str:
        return f"<SeatingTable(name={self.name!r}, {self.guest_count}/{self.capacity})>"
