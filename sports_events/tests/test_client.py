"""Tests for the requests-based API client."""

from unittest.mock import MagicMock

import pytest
import requests

from sports_events.web import EventAPIClient


def fake_response(payload, status_code=200):
    response = MagicMock(spec=requests.Response)
    response.status_code = status_code
    response.json.return_value = payload
    if status_code >= 400:
        response.raise_for_status.side_effect = requests.HTTPError(response=response)
    return response


@pytest.fixture
def session():
    return MagicMock(spec=requests.Session)


def test_get_events(session):
    session.request.return_value = fake_response([{'eventId': '0'}])
    client = EventAPIClient('http://localhost:8000/', timeout=5, session=session)

    assert client.get_events() == [{'eventId': '0'}]
    session.request.assert_called_once_with('GET', 'http://localhost:8000/api/events', timeout=5)


def test_get_events_rejects_non_list(session):
    session.request.return_value = fake_response({'eventId': '0'})
    with pytest.raises(ValueError):
        EventAPIClient('http://api', session=session).get_events()


def test_update_event_sends_patch(session):
    session.request.return_value = fake_response({'eventId': '3', 'changes': {'price': 1}})
    client = EventAPIClient('http://api', session=session)

    client.update_event('3', {'price': 1})
    session.request.assert_called_once_with('PUT', 'http://api/api/events/3', timeout=30, json={'price': 1})


def test_http_errors_propagate(session):
    session.request.return_value = fake_response({'type': 'NotFoundError'}, status_code=404)
    with pytest.raises(requests.HTTPError):
        EventAPIClient('http://api', session=session).delete_event('9')
