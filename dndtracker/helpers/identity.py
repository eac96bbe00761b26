"""Identifier canonicalization.

Character and participant identifiers travel between stored documents and
in-memory objects, so the same identity may arrive as a plain string, a UUID,
or a driver-specific object id. Comparisons always go through the canonical
string form.
"""

from typing import Any


def canonical_id(value: Any) -> str:
    """
    Return the canonical string form of an identifier.

    Args:
        value: Identifier in any representation (str, UUID, object id, ...)

    Returns:
        Stripped string form of the identifier
    """
    if value is None:
        raise ValueError("Identifier cannot be None")
    return str(value).strip()


def ids_equal(left: Any, right: Any) -> bool:
    """Check whether two identifiers refer to the same entity."""
    if left is None or right is None:
        return False
    return canonical_id(left) == canonical_id(right)
