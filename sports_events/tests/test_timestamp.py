"""Tests for the timestamp codec."""

from datetime import date, datetime

import pytest

from sports_events.events.timestamp import (
    TimestampError,
    TimestampStatus,
    decode_timestamp,
    parse_timestamp,
    validate_timestamp,
)


@pytest.mark.parametrize('raw', [
    '2024-05-01|14:00-16:00',
    '2024-02-29|00:00-23:59',
    '1999-12-31|23:00-23:59',
    '2024-05-01|9:5-10:30',
    '2024-05-01|09:05-10:30',
])
def test_valid_timestamps(raw):
    assert validate_timestamp(raw) is TimestampStatus.VALID


@pytest.mark.parametrize('raw', [
    '2024-02-30|10:00-11:00',
    '2023-02-29|10:00-11:00',
    '2024-04-31|10:00-11:00',
    '2024-13-01|10:00-11:00',
    '2024-00-10|10:00-11:00',
    '2024-05-00|10:00-11:00',
])
def test_impossible_dates_are_invalid_date(raw):
    assert validate_timestamp(raw) is TimestampStatus.INVALID_DATE


@pytest.mark.parametrize('raw', [
    '2024-05-01 10:00-11:00',        # missing pipe
    '2024-05-01|25:00-26:00',        # hour out of range
    '2024-05-01|10:00-24:00',
    '2024-05-01|10:60-11:00',        # minute out of range
    '2024-5-01|10:00-11:00',         # short month
    '24-05-01|10:00-11:00',
    '2024-05-01|10:00',              # no end time
    '2024-05-01|10:00-11:00|x',
    '2024-05-01|100:00-11:00',
    '2024-05-01|10:00-11:00\n',      # trailing newline
    '2024-05-01\n|10:00-11:00',
    '\u0662024-05-01|10:00-11:00',  # non-ASCII digit
    '',
    None,
    20240501,
])
def test_malformed_timestamps_are_invalid_format(raw):
    assert validate_timestamp(raw) is TimestampStatus.INVALID_FORMAT


def test_parse_uses_date_and_start_time():
    assert parse_timestamp('2024-05-01|9:5-10:30') == datetime(2024, 5, 1, 9, 5)


def test_parse_raises_with_status():
    with pytest.raises(TimestampError) as exc_info:
        parse_timestamp('2024-02-30|10:00-11:00')
    assert exc_info.value.status is TimestampStatus.INVALID_DATE


def test_decode_renders_display_date_and_keeps_time_verbatim():
    assert decode_timestamp('2024-05-01|14:00-16:00') == ('Wed May 01 2024', '14:00-16:00')
    assert decode_timestamp('2024-05-01|9:5-10:30')[1] == '9:5-10:30'


@pytest.mark.parametrize('day', [date(2024, 1, 1), date(2024, 2, 29), date(2025, 7, 6), date(2030, 12, 31)])
def test_decoded_weekday_matches_calendar(day):
    display_date, _ = decode_timestamp(f'{day:%Y-%m-%d}|08:00-09:00')
    assert display_date.split()[0] == day.strftime('%a')
    assert display_date.endswith(str(day.year))
