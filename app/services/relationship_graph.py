"""
Relationship graph builder for the guest network visualization.

Produces force-graph style nodes and links from guests, relationships and
tables that have already been loaded. Nodes are guests, links are
relationships, node size is the guest's connection count and node colour
follows the table the guest sits at.
"""

from typing import Any, Iterable, Sequence

from app.models.enums import FAMILY_KINDS, RelationshipKind

FILTER_ALL = "all"
FILTER_FAMILY = "family"
FILTER_FRIENDS = "friends"
GRAPH_FILTERS = (FILTER_ALL, FILTER_FAMILY, FILTER_FRIENDS)

UNSEATED_COLOR = "#94a3b8"

# Cycled by table position
TABLE_COLORS = [
    "#ef4444",
    "#3b82f6",
    "#10b981",
    "#f59e0b",
    "#8b5cf6",
    "#ec4899",
    "#06b6d4",
    "#84cc16",
]

# Color scheme for relationship kinds
LINK_COLORS = {
    RelationshipKind.FAMILY: "#3b82f6",  # Blue
    RelationshipKind.SIBLING: "#3b82f6",
    RelationshipKind.PARENT: "#3b82f6",
    RelationshipKind.CHILD: "#3b82f6",
    RelationshipKind.COUSIN: "#3b82f6",
    RelationshipKind.SPOUSE: "#ef4444",  # Red
    RelationshipKind.PARTNER: "#ef4444",
    RelationshipKind.FRIEND: "#10b981",  # Green
    RelationshipKind.COLLEAGUE: "#6b7280",  # Gray
}
DEFAULT_LINK_COLOR = "#8b5cf6"  # Purple


def relationship_color(kind: RelationshipKind) -> str:
    return LINK_COLORS.get(kind, DEFAULT_LINK_COLOR)


def table_color(table_id: Any, table_positions: dict[Any, int]) -> str:
    position = table_positions.get(table_id)
    if position is None:
        return UNSEATED_COLOR
    return TABLE_COLORS[position % len(TABLE_COLORS)]


def _matches_filter(guest_id: Any, relationships: Sequence[Any], filter_type: str) -> bool:
    if filter_type == FILTER_FAMILY:
        kinds = FAMILY_KINDS
    elif filter_type == FILTER_FRIENDS:
        kinds = frozenset({RelationshipKind.FRIEND})
    else:
        return True
    return any(
        guest_id in (rel.guest_from_id, rel.guest_to_id) and rel.relationship_type in kinds
        for rel in relationships
    )


def connection_counts(relationships: Iterable[Any]) -> dict[Any, int]:
    """Number of relationships touching each guest id."""
    counts: dict[Any, int] = {}
    for rel in relationships:
        counts[rel.guest_from_id] = counts.get(rel.guest_from_id, 0) + 1
        counts[rel.guest_to_id] = counts.get(rel.guest_to_id, 0) + 1
    return counts


def build_relationship_graph(
    guests: Sequence[Any],
    relationships: Sequence[Any],
    tables: Sequence[Any],
    filter_type: str = FILTER_ALL,
) -> dict[str, Any]:
    """
    Build graph data for the front end.

    Args:
        guests: Guests to consider as nodes (already filtered by RSVP if wanted)
        relationships: All relationships; links are kept only when both ends are nodes
        tables: Tables in display order; a table's position picks its colour
        filter_type: "all", "family" or "friends"; anything else behaves as "all"

    Returns:
        Dict with "nodes", "links" and "stats"
    """
    table_positions = {table.id: position for position, table in enumerate(tables)}
    table_names = {table.id: table.name for table in tables}
    counts = connection_counts(relationships)

    nodes = []
    node_ids = set()
    for guest in guests:
        if not _matches_filter(guest.id, relationships, filter_type):
            continue
        node_ids.add(guest.id)
        nodes.append({
            "id": str(guest.id),
            "name": f"{guest.first_name} {guest.last_name}",
            "rsvp_status": guest.rsvp_status.value,
            "table_id": str(guest.table_id) if guest.table_id else None,
            "table_name": table_names.get(guest.table_id),
            "group": table_positions.get(guest.table_id, 0),
            "val": counts.get(guest.id, 0) or 1,
            "color": table_color(guest.table_id, table_positions),
        })

    links = []
    for rel in relationships:
        if rel.guest_from_id not in node_ids or rel.guest_to_id not in node_ids:
            continue
        links.append({
            "id": str(rel.id),
            "source": str(rel.guest_from_id),
            "target": str(rel.guest_to_id),
            "relationship_type": rel.relationship_type.value,
            "strength": rel.strength,
            "color": relationship_color(rel.relationship_type),
        })

    return {
        "nodes": nodes,
        "links": links,
        "stats": {
            "node_count": len(nodes),
            "link_count": len(links),
            "seated_count": sum(1 for node in nodes if node["table_id"]),
        },
    }
