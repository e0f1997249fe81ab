"""Tests for create and update validation."""

import pytest

from sports_events.events.validator import (
    CREATE_FIELDS,
    has_updatable_fields,
    validate_create,
    validate_update,
)


def fields(errors):
    return [e.field for e in errors]


class TestValidateCreate:
    """Tests for validate_create"""

    def test_valid_payload(self, make_event):
        document, errors = validate_create(make_event())
        assert errors == []
        assert document == make_event()

    def test_all_fields_required(self):
        _, errors = validate_create({})
        assert fields(errors) == list(CREATE_FIELDS)
        assert all(e.message == "is required" for e in errors)

    def test_unknown_sport_rejected(self, make_event):
        _, errors = validate_create(make_event(sport='Soccer'))
        assert fields(errors) == ['sport']

    @pytest.mark.parametrize('sport', ['Volleyball', 'Basketball', 'Badminton'])
    def test_known_sports_accepted(self, make_event, sport):
        _, errors = validate_create(make_event(sport=sport))
        assert errors == []

    def test_name_and_location_trimmed(self, make_event):
        document, errors = validate_create(make_event(name='  Pickup  ', location=' Gym '))
        assert errors == []
        assert document['name'] == 'Pickup'
        assert document['location'] == 'Gym'

    @pytest.mark.parametrize('field', ['name', 'location', 'host'])
    def test_blank_text_rejected(self, make_event, field):
        value = '   ' if field != 'host' else ''
        _, errors = validate_create(make_event(**{field: value}))
        assert fields(errors) == [field]

    def test_empty_image_allowed(self, make_event):
        _, errors = validate_create(make_event(image=''))
        assert errors == []

    @pytest.mark.parametrize('value', ['10', None, True, -1])
    def test_price_must_be_non_negative_number(self, make_event, value):
        _, errors = validate_create(make_event(price=value))
        assert fields(errors) == ['price']

    @pytest.mark.parametrize('field', ['price', 'totalNumOfPlayers'])
    @pytest.mark.parametrize('value', [float('inf'), float('-inf'), float('nan')])
    def test_non_finite_numbers_rejected(self, make_event, field, value):
        _, errors = validate_create(make_event(**{field: value}))
        assert fields(errors) == [field]
        assert errors[0].message == "must be a finite number"

        _, errors = validate_update({field: value})
        assert fields(errors) == [field]

    def test_float_price_accepted(self, make_event):
        document, errors = validate_create(make_event(price=7.5))
        assert errors == []
        assert document['price'] == 7.5

    @pytest.mark.parametrize('players', [[], 'bob', None, [{'name': 'bob'}]])
    def test_players_must_be_non_empty_list(self, make_event, players):
        _, errors = validate_create(make_event(players=players))
        assert fields(errors) == ['players']

    def test_bad_timestamp_messages(self, make_event):
        _, errors = validate_create(make_event(timestamp='2024-02-30|10:00-11:00'))
        assert errors[0].message == "must be a valid calendar date"

        _, errors = validate_create(make_event(timestamp='2024-02-10'))
        assert errors[0].message.startswith("must use the format")

    def test_errors_reported_in_field_order(self, make_event):
        payload = make_event(totalNumOfPlayers='many', sport='Chess')
        del payload['name']
        _, errors = validate_create(payload)
        assert fields(errors) == ['name', 'sport', 'totalNumOfPlayers']

    def test_non_object_body(self):
        _, errors = validate_create(['not', 'an', 'object'])
        assert fields(errors) == ['body']


class TestValidateUpdate:
    """Tests for validate_update"""

    def test_only_present_fields_returned(self):
        patch, errors = validate_update({'price': 10})
        assert errors == []
        assert patch == {'price': 10}

    def test_present_fields_checked(self):
        _, errors = validate_update({'sport': 'Soccer', 'name': ' ', 'price': 3})
        assert fields(errors) == ['name', 'sport']

    def test_location_trimmed(self):
        patch, _ = validate_update({'location': '  Hall B '})
        assert patch == {'location': 'Hall B'}

    def test_host_and_players_ignored(self):
        patch, errors = validate_update({'host': 'Someone', 'players': ['x'], 'price': 1})
        assert errors == []
        assert patch == {'price': 1}

    def test_empty_payload_gives_empty_patch(self):
        assert validate_update({}) == ({}, [])

    def test_has_updatable_fields(self):
        assert has_updatable_fields({'image': ''})
        assert not has_updatable_fields({})
        assert not has_updatable_fields({'host': 'x', 'eventId': '9'})
        assert not has_updatable_fields(None)
