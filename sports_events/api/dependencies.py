"""FastAPI dependencies wiring handlers to the application's database."""

from fastapi import Request

from ..db import Database, EventRepository
from ..events.service import EventService


def get_database(request: Request) -> Database:
    """Return the database constructed for this application."""
    return request.app.state.database


def get_event_service(request: Request) -> EventService:
    """Build an event service over the application's database."""
    return EventService(EventRepository(get_database(request)))
