"""Pytest configuration and shared fixtures."""

import pytest
from fastapi.testclient import TestClient

from sports_events.api.app import create_application
from sports_events.db import Database, DatabaseConfig, EventRepository
from sports_events.events.service import EventService


def sample_event(**overrides):
    """A valid create payload; keyword arguments replace fields."""
    event = {
        'name': 'Sunday Volleyball',
        'host': 'Uncle Bob',
        'sport': 'Volleyball',
        'timestamp': '2024-05-01|14:00-16:00',
        'location': 'Ocean Park',
        'image': '/images/volleyball.jpg',
        'price': 5,
        'players': ['bob', 'alice'],
        'totalNumOfPlayers': 12,
    }
    event.update(overrides)
    return event


@pytest.fixture
def make_event():
    return sample_event


@pytest.fixture
def database():
    database = Database(DatabaseConfig(sqlite_path=':memory:', production=False))
    yield database
    database.dispose()


@pytest.fixture
def repository(database) -> EventRepository:
    return EventRepository(database)


@pytest.fixture
def service(repository) -> EventService:
    return EventService(repository)


@pytest.fixture
def api_client(database):
    app = create_application(database)
    with TestClient(app) as client:
        yield client
