"""
Table suggestions for unseated guests.

Ranks candidate tables for a guest by the summed strength of that guest's
relationships to people already sitting at each table. Operates purely on
in-memory snapshots: no database access, and inputs are never mutated.
"""

from dataclasses import dataclass
from typing import Any, Hashable, Iterable, Sequence

SUGGESTION_LIMIT = 3


@dataclass(frozen=True)
class RelationshipEdge:
    """A relationship reduced to what the scorer needs."""
    guest_from_id: Hashable
    guest_to_id: Hashable
    strength: int

    @classmethod
    def from_model(cls, relationship: Any) -> "RelationshipEdge":
        return cls(
            guest_from_id=relationship.guest_from_id,
            guest_to_id=relationship.guest_to_id,
            strength=relationship.strength,
        )


@dataclass(frozen=True)
class TableOccupancy:
    """Snapshot of a table and who currently sits at it."""
    id: Hashable
    capacity: int
    guest_ids: tuple[Hashable, ...] = ()
    name: str = ""

    @property
    def occupant_count(self) -> int:
        return len(self.guest_ids)

    @property
    def is_full(self) -> bool:
        return self.occupant_count >= self.capacity

    @classmethod
    def from_model(cls, table: Any) -> "TableOccupancy":
        return cls(
            id=table.id,
            capacity=table.capacity,
            guest_ids=tuple(guest.id for guest in table.guests),
            name=table.name,
        )


@dataclass(frozen=True)
class TableSuggestion:
    """A candidate table and its accumulated relationship score."""
    table: TableOccupancy
    score: int


def _seat_index(tables: Sequence[TableOccupancy]) -> dict[Hashable, int]:
    """Map guest id -> position of the first table that contains the guest."""
    seats: dict[Hashable, int] = {}
    for position, table in enumerate(tables):
        for guest_id in table.guest_ids:
            seats.setdefault(guest_id, position)
    return seats


def rank_tables(
    guest_id: Hashable,
    relationships: Iterable[RelationshipEdge],
    tables: Sequence[TableOccupancy],
) -> list[TableSuggestion]:
    """
    Score every table that holds someone the guest knows.

    Each relationship touching ``guest_id`` adds its strength to the table
    where the other guest sits, unless that table is already full. Edges are
    symmetric: ``A -> B`` and ``B -> A`` count the same.

    Args:
        guest_id: Guest who needs a seat
        relationships: All known relationship edges; filtered here
        tables: Current tables with their occupants

    Returns:
        Suggestions with a positive score, highest first. Equal scores keep
        the order of ``tables``.
    """
    seats = _seat_index(tables)
    scores: dict[int, int] = {}

    for edge in relationships:
        if edge.guest_from_id == guest_id:
            other_id = edge.guest_to_id
        elif edge.guest_to_id == guest_id:
            other_id = edge.guest_from_id
        else:
            continue
        if other_id == guest_id:
            continue

        position = seats.get(other_id)
        if position is None or tables[position].is_full:
            continue
        scores[position] = scores.get(position, 0) + edge.strength

    ranked = sorted(
        (position for position, score in scores.items() if score > 0),
        key=lambda position: (-scores[position], position),
    )
    return [TableSuggestion(table=tables[position], score=scores[position]) for position in ranked]


def suggest_tables(
    guest_id: Hashable,
    relationships: Iterable[RelationshipEdge],
    tables: Sequence[TableOccupancy],
    limit: int = SUGGESTION_LIMIT,
) -> list[TableOccupancy]:
    """Return up to ``limit`` tables for the guest, best match first; never more than three."""
    limit = min(limit, SUGGESTION_LIMIT)
    return [suggestion.table for suggestion in rank_tables(guest_id, relationships, tables)[:limit]]


def count_table_connections(
    tables: Sequence[TableOccupancy],
    relationships: Iterable[RelationshipEdge],
) -> dict[Hashable, int]:
    """Count relationships whose two guests sit at the same table, per table id."""
    seats = _seat_index(tables)
    counts: dict[Hashable, int] = {table.id: 0 for table in tables}
    for edge in relationships:
        from_position = seats.get(edge.guest_from_id)
        if from_position is not None and from_position == seats.get(edge.guest_to_id):
            counts[tables[from_position].id] += 1
    return counts
