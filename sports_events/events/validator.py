"""Validation of event create and update payloads.

Both entry points return the cleaned values together with a list of
``FieldError``. Callers must not touch the store when the list is non-empty.
"""

import math
from numbers import Real
from typing import Any, Callable, Dict, List, Optional, Tuple

from .errors import FieldError
from .timestamp import TimestampStatus, validate_timestamp

SPORTS = ('Volleyball', 'Basketball', 'Badminton')

# Field order used for create and for reporting errors
CREATE_FIELDS = (
    'name',
    'host',
    'sport',
    'timestamp',
    'location',
    'image',
    'price',
    'players',
    'totalNumOfPlayers',
)

# host, players and eventId cannot be changed after creation
UPDATE_FIELDS = (
    'name',
    'sport',
    'timestamp',
    'location',
    'image',
    'price',
    'totalNumOfPlayers',
)


class _Invalid(Exception):
    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


def _trimmed_text(value: Any) -> str:
    if not isinstance(value, str):
        raise _Invalid("must be a string")
    value = value.strip()
    if not value:
        raise _Invalid("must not be empty")
    return value


def _text(value: Any) -> str:
    if not isinstance(value, str):
        raise _Invalid("must be a string")
    if not value:
        raise _Invalid("must not be empty")
    return value


def _any_text(value: Any) -> str:
    if not isinstance(value, str):
        raise _Invalid("must be a string")
    return value


def _sport(value: Any) -> str:
    if value not in SPORTS:
        raise _Invalid(f"must be one of {', '.join(SPORTS)}")
    return value


def _timestamp(value: Any) -> str:
    status = validate_timestamp(value)
    if status is TimestampStatus.INVALID_FORMAT:
        raise _Invalid("must use the format YYYY-MM-DD|HH:MM-HH:MM")
    if status is TimestampStatus.INVALID_DATE:
        raise _Invalid("must be a valid calendar date")
    return value


def _non_negative_number(value: Any):
    # bool is a Real subclass but not a number here
    if isinstance(value, bool) or not isinstance(value, Real):
        raise _Invalid("must be a number")
    # json.loads accepts Infinity and NaN
    if not math.isfinite(value):
        raise _Invalid("must be a finite number")
    if value < 0:
        raise _Invalid("must not be negative")
    return value


def _players(value: Any) -> List[Any]:
    if not isinstance(value, list):
        raise _Invalid("must be a list")
    if not value:
        raise _Invalid("must not be empty")
    for player in value:
        if isinstance(player, bool) or not isinstance(player, (str, int)):
            raise _Invalid("must contain only player names or identifiers")
    return list(value)


RULES: Dict[str, Callable[[Any], Any]] = {
    'name': _trimmed_text,
    'host': _text,
    'sport': _sport,
    'timestamp': _timestamp,
    'location': _trimmed_text,
    'image': _any_text,
    'price': _non_negative_number,
    'players': _players,
    'totalNumOfPlayers': _non_negative_number,
}


def _check_body(payload: Any) -> Optional[FieldError]:
    if not isinstance(payload, dict):
        return FieldError('body', "must be a JSON object")
    return None


def _apply_rules(payload: Dict[str, Any], fields) -> Tuple[Dict[str, Any], List[FieldError]]:
    cleaned: Dict[str, Any] = {}
    errors: List[FieldError] = []
    for name in fields:
        if name not in payload:
            continue
        try:
            cleaned[name] = RULES[name](payload[name])
        except _Invalid as e:
            errors.append(FieldError(name, e.message))
    return cleaned, errors


def validate_create(payload: Any) -> Tuple[Dict[str, Any], List[FieldError]]:
    """
    Validate a create request; every field is required.

    Returns:
        (document, errors): the cleaned document (trimmed name and location)
        and the field errors, empty when the payload is acceptable
    """
    body_error = _check_body(payload)
    if body_error:
        return {}, [body_error]

    document, errors = _apply_rules(payload, CREATE_FIELDS)
    missing = [FieldError(name, "is required") for name in CREATE_FIELDS if name not in payload]

    # Report in field order
    order = {name: i for i, name in enumerate(CREATE_FIELDS)}
    errors = sorted(errors + missing, key=lambda e: order[e.field])
    return document, errors


def validate_update(payload: Any) -> Tuple[Dict[str, Any], List[FieldError]]:
    """
    Validate a partial update; only fields present are checked.

    An empty ``patch`` together with an empty error list means the payload
    carried no updatable field at all.

    Returns:
        (patch, errors)
    """
    body_error = _check_body(payload)
    if body_error:
        return {}, [body_error]
    return _apply_rules(payload, UPDATE_FIELDS)


def has_updatable_fields(payload: Any) -> bool:
    """True if ``payload`` names at least one field an update may change."""
    return isinstance(payload, dict) and any(name in payload for name in UPDATE_FIELDS)
