"""
Enumerations shared by the guest, relationship and graph layers.
"""

import enum


class RsvpStatus(str, enum.Enum):
    """A guest's response to the invitation."""
    PENDING = "PENDING"
    ACCEPTED = "ACCEPTED"
    DECLINED = "DECLINED"
    MAYBE = "MAYBE"


class RelationshipKind(str, enum.Enum):
    """How two guests know each other."""
    FAMILY = "FAMILY"
    FRIEND = "FRIEND"
    COLLEAGUE = "COLLEAGUE"
    PARTNER = "PARTNER"
    SPOUSE = "SPOUSE"
    SIBLING = "SIBLING"
    PARENT = "PARENT"
    CHILD = "CHILD"
    COUSIN = "COUSIN"
    ACQUAINTANCE = "ACQUAINTANCE"


# Kinds that count as "family" in the graph filter (couples included)
FAMILY_KINDS = frozenset({
    RelationshipKind.FAMILY,
    RelationshipKind.SIBLING,
    RelationshipKind.PARENT,
    RelationshipKind.CHILD,
    RelationshipKind.COUSIN,
    RelationshipKind.SPOUSE,
    RelationshipKind.PARTNER,
})

MIN_STRENGTH = 1
MAX_STRENGTH = 5
