"""
Seating service.

Loads tables and relationships from the database and runs the in-memory
suggestion scorer over them. Also handles assigning guests to tables.
"""

import logging
from typing import Any
from uuid import UUID

from sqlalchemy.orm import Session, selectinload

from app.models import Guest, GuestRelationship, SeatingTable
from app.services.seating_suggestions import (
    SUGGESTION_LIMIT,
    RelationshipEdge,
    TableOccupancy,
    count_table_connections,
    rank_tables,
)

logger = logging.getLogger(__name__)


class SeatingError(Exception):
    """Base exception for seating errors."""
    pass


class GuestNotFoundError(SeatingError):
    """Raised when a guest is not found."""
    pass


class TableNotFoundError(SeatingError):
    """Raised when a table is not found."""
    pass


def load_tables(db: Session) -> list[SeatingTable]:
    """All tables ordered by name, with their guests loaded."""
    return (
        db.query(SeatingTable)
        .options(selectinload(SeatingTable.guests))
        .order_by(SeatingTable.name)
        .all()
    )


def load_relationship_edges(db: Session) -> list[RelationshipEdge]:
    return [RelationshipEdge.from_model(rel) for rel in db.query(GuestRelationship).all()]


def get_guest(db: Session, guest_id: UUID) -> Guest:
    guest = db.query(Guest).filter(Guest.id == guest_id).first()
    if not guest:
        raise GuestNotFoundError(f"Guest not found: {guest_id}")
    return guest


def get_table(db: Session, table_id: UUID) -> SeatingTable:
    table = db.query(SeatingTable).filter(SeatingTable.id == table_id).first()
    if not table:
        raise TableNotFoundError(f"Table not found: {table_id}")
    return table


def assign_guest(db: Session, guest_id: UUID, table_id: UUID | None) -> Guest:
    """
    Seat a guest at a table, or unseat them when table_id is None.

    Capacity is not enforced; the front end shows over-capacity tables.

    Raises:
        GuestNotFoundError: Unknown guest
        TableNotFoundError: Unknown table
    """
    guest = get_guest(db, guest_id)

    if table_id is None:
        logger.info(f"Unassigning guest {guest_id} from table {guest.table_id}")
        guest.table_id = None
    else:
        table = get_table(db, table_id)
        if guest.table_id != table.id and table.is_full:
            logger.warning(
                f"Table {table.name!r} is over capacity after seating guest {guest_id} "
                f"({table.guest_count + 1}/{table.capacity})"
            )
        guest.table_id = table.id

    db.commit()
    db.refresh(guest)
    return guest


def suggestions_for_guest(
    db: Session,
    guest_id: UUID,
    limit: int = SUGGESTION_LIMIT,
) -> dict[str, Any]:
    """
    Suggest tables for a guest based on who they know.

    Returns:
        Dict with:
        - guest: the Guest
        - suggestions: list of (SeatingTable, score), best first, at most
          ``limit`` and never more than SUGGESTION_LIMIT
        - available_tables: every table with a free seat, in name order

    Raises:
        GuestNotFoundError: Unknown guest
    """
    guest = get_guest(db, guest_id)
    tables = load_tables(db)
    tables_by_id = {table.id: table for table in tables}
    available = [table for table in tables if not table.is_full]

    if guest.is_seated:
        logger.debug(f"Guest {guest_id} is already seated; no suggestions")
        return {"guest": guest, "suggestions": [], "available_tables": available}

    ranked = rank_tables(
        guest.id,
        load_relationship_edges(db),
        [TableOccupancy.from_model(table) for table in tables],
    )[:min(limit, SUGGESTION_LIMIT)]

    return {
        "guest": guest,
        "suggestions": [(tables_by_id[s.table.id], s.score) for s in ranked],
        "available_tables": available,
    }


def seating_overview(db: Session) -> dict[str, Any]:
    """
    Totals for the table assignment screen.

    Returns:
        Dict with total_capacity, assigned_count, unassigned_count,
        unassigned_guests and per-table internal connection counts.
    """
    tables = load_tables(db)
    unassigned = (
        db.query(Guest)
        .filter(Guest.table_id.is_(None))
        .order_by(Guest.last_name, Guest.first_name)
        .all()
    )
    assigned_count = db.query(Guest).filter(Guest.table_id.isnot(None)).count()

    connections = count_table_connections(
        [TableOccupancy.from_model(table) for table in tables],
        load_relationship_edges(db),
    )

    return {
        "total_capacity": sum(table.capacity for table in tables),
        "assigned_count": assigned_count,
        "unassigned_count": len(unassigned),
        "unassigned_guests": unassigned,
        "tables": [
            {"table": table, "internal_connections": connections.get(table.id, 0)}
            for table in tables
        ],
    }
