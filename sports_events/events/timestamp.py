"""Codec for event timestamps.

Timestamps are stored as ``YYYY-MM-DD|HH:MM-HH:MM``: a calendar date, a pipe,
then a start and end time of day. Hours and minutes may be written with a
single digit (``9:5-10:30``). All values are naive local times.
"""

import re
from datetime import datetime
from enum import Enum
from typing import Any, Tuple

DATE_PATTERN = re.compile(r'([0-9]{4})-([0-9]{2})-([0-9]{2})')

_HOUR = r'([01]?[0-9]|2[0-3])'
_MINUTE = r'([0-5]?[0-9])'
TIME_RANGE_PATTERN = re.compile(rf'{_HOUR}:{_MINUTE}-{_HOUR}:{_MINUTE}')

# e.g. "Wed May 01 2024"
DISPLAY_DATE_FORMAT = '%a %b %d %Y'


class TimestampStatus(Enum):
    VALID = "valid"
    INVALID_FORMAT = "invalid_format"
    INVALID_DATE = "invalid_date"


class TimestampError(ValueError):
    """Raised when a timestamp cannot be parsed."""

    def __init__(self, raw: Any, status: TimestampStatus):
        self.raw = raw
        self.status = status
        reason = "is not a valid date" if status is TimestampStatus.INVALID_DATE else "has an invalid format"
        super().__init__(f"Timestamp {raw!r} {reason}")


def _split(raw: Any) -> Tuple[str, str]:
    if not isinstance(raw, str):
        raise TimestampError(raw, TimestampStatus.INVALID_FORMAT)
    parts = raw.split('|')
    if len(parts) != 2:
        raise TimestampError(raw, TimestampStatus.INVALID_FORMAT)
    return parts[0], parts[1]


def parse_timestamp(raw: Any) -> datetime:
    """
    Parse a timestamp into the datetime of its date and start time.

    Raises:
        TimestampError: With status INVALID_FORMAT when the grammar does not
            match, INVALID_DATE when the date is not a real calendar day
    """
    date_part, time_part = _split(raw)

    date_match = DATE_PATTERN.fullmatch(date_part)
    time_match = TIME_RANGE_PATTERN.fullmatch(time_part)
    if not date_match or not time_match:
        raise TimestampError(raw, TimestampStatus.INVALID_FORMAT)

    year, month, day = (int(g) for g in date_match.groups())
    start_hour, start_minute = int(time_match.group(1)), int(time_match.group(2))

    try:
        parsed = datetime(year, month, day, start_hour, start_minute)
    except ValueError:
        raise TimestampError(raw, TimestampStatus.INVALID_DATE) from None

    # The rendered date must give back exactly what was written
    if parsed.strftime('%Y-%m-%d') != date_part:
        raise TimestampError(raw, TimestampStatus.INVALID_DATE)

    return parsed


def validate_timestamp(raw: Any) -> TimestampStatus:
    """Classify ``raw`` as valid, badly formatted, or naming an impossible date."""
    try:
        parse_timestamp(raw)
    except TimestampError as e:
        return e.status
    return TimestampStatus.VALID


def decode_timestamp(raw: str) -> Tuple[str, str]:
    """
    Split a stored timestamp into display values.

    Returns:
        (display_date, display_time): e.g. ``("Wed May 01 2024", "14:00-16:00")``.
        The time range is returned exactly as stored.
    """
    parsed = parse_timestamp(raw)
    return parsed.strftime(DISPLAY_DATE_FORMAT), raw.split('|')[1]
