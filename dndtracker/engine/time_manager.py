"""Combat time bookkeeping."""

from datetime import datetime, timedelta
from typing import Optional


def calculate_combat_duration(start: datetime, end: datetime, pause: Optional[datetime] = None) -> int:
    """
    Calculate elapsed combat time.

    Args:
        start: When timing started
        end: When timing ended
        pause: Optional pause timestamp; only the time before it counts

    Returns:
        Duration in whole milliseconds, never negative
    """
    stop = pause if pause is not None else end
    elapsed = (stop - start) // timedelta(milliseconds=1)
    return max(0, elapsed)
