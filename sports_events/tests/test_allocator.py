"""Tests for eventId allocation."""

import pytest

from sports_events.events.allocator import allocate_event_id


def test_first_id_is_zero():
    assert allocate_event_id(None) == "0"


def test_next_id_is_successor():
    assert allocate_event_id("7") == "8"
    assert allocate_event_id("9") == "10"
    assert allocate_event_id("0") == "1"


def test_non_numeric_id_is_rejected():
    with pytest.raises(ValueError):
        allocate_event_id("abc")
