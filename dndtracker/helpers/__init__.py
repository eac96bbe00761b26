"""Helper utilities."""

from dndtracker.helpers.debug import configure_logging, log_call
from dndtracker.helpers.identity import canonical_id, ids_equal

__all__ = [
    "canonical_id",
    "configure_logging",
    "ids_equal",
    "log_call",
]
