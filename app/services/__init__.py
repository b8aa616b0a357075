"""
Application services for the wedding guestbook.
"""

from app.services.seating_suggestions import (
    SUGGESTION_LIMIT,
    RelationshipEdge,
    TableOccupancy,
    TableSuggestion,
    rank_tables,
    suggest_tables,
    count_table_connections,
)
from app.services.relationship_graph import (
    GRAPH_FILTERS,
    build_relationship_graph,
    connection_counts,
)
from app.services.seating_service import (
    SeatingError,
    GuestNotFoundError,
    TableNotFoundError,
    assign_guest,
    suggestions_for_guest,
    seating_overview,
)
from app.services.photo_service import (
    PhotoServiceError,
    PhotoNotFoundError,
    PhotoGuestNotFoundError,
    AssignmentNotFoundError,
    assign_guests,
    list_photos,
    remove_guest_assignment,
    scan_photo_directory,
    register_photos,
)

__all__ = [
    # Suggestions
    "SUGGESTION_LIMIT",
    "RelationshipEdge",
    "TableOccupancy",
    "TableSuggestion",
    "rank_tables",
    "suggest_tables",
    "count_table_connections",
    # Graph
    "GRAPH_FILTERS",
    "build_relationship_graph",
    "connection_counts",
    # Seating
    "SeatingError",
    "GuestNotFoundError",
    "TableNotFoundError",
    "assign_guest",
    "suggestions_for_guest",
    "seating_overview",
    # Photos
    "PhotoServiceError",
    "PhotoNotFoundError",
    "PhotoGuestNotFoundError",
    "AssignmentNotFoundError",
    "assign_guests",
    "list_photos",
    "remove_guest_assignment",
    "scan_photo_directory",
    "register_photos",
]
