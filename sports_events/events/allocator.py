"""Sequential eventId allocation."""

from typing import Optional


def allocate_event_id(current_max: Optional[str]) -> str:
    """
    Return the eventId that follows ``current_max``.

    ``current_max`` is the id of the most recently inserted event, or None
    when no events exist, in which case the first id is "0".

    Raises:
        ValueError: If ``current_max`` is not a decimal integer
    """
    if current_max is None:
        return "0"
    return str(int(current_max) + 1)
