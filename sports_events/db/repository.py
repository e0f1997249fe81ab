"""Event repository.

Durable operations on the ``events`` table. Every method opens its own
session, so each call is one transaction, and returns plain documents keyed
by the public field names. Nothing is cached between calls.
"""

import logging
from typing import Any, Dict, List, Optional

from sqlalchemy.exc import IntegrityError

from ..events.allocator import allocate_event_id
from ..models.event import Event
from .db_core import Database, DuplicateEventIdError
from .operations import with_retry

logger = logging.getLogger(__name__)


class EventRepository:
    """Persists and queries event documents."""

    def __init__(self, database: Database):
        self.database = database

    def list_events(self) -> List[Dict[str, Any]]:
        """Return every stored event document, in insertion order."""
        with self.database.session() as session:
            events = session.query(Event).order_by(Event.id).all()
            return [event.to_document() for event in events]

    def get_event(self, event_id: str) -> Optional[Dict[str, Any]]:
        """Return the document for ``event_id``, or None if not found."""
        with self.database.session() as session:
            event = session.query(Event).filter(Event.event_id == event_id).first()
            return event.to_document() if event else None

    def latest_event_id(self) -> Optional[str]:
        """Return the eventId of the most recently inserted event."""
        with self.database.session() as session:
            return self._latest_event_id(session)

    @staticmethod
    def _latest_event_id(session) -> Optional[str]:
        row = (
            session.query(Event.event_id)
            .order_by(Event.id.desc())
            .limit(1)
            .first()
        )
        return row[0] if row else None

    @with_retry(max_attempts=3, delay=0.05, exceptions=(DuplicateEventIdError,))
    def create_event(self, document: Dict[str, Any]) -> Dict[str, Any]:
        """
        Allocate the next eventId and insert ``document`` under it.

        The id lookup and the insert share one transaction. If a concurrent
        create claimed the same id first, the unique constraint rejects the
        insert and the whole operation is retried.

        Raises:
            DuplicateEventIdError: If every attempt collided
            SessionError: On any other store failure
        """
        with self.database.session() as session:
            event_id = allocate_event_id(self._latest_event_id(session))
            event = Event.from_document({**document, 'eventId': event_id})
            session.add(event)
            try:
                session.flush()
            except IntegrityError as e:
                if _is_duplicate_event_id(e):
                    raise DuplicateEventIdError(f"eventId {event_id} already exists") from e
                raise
            created = event.to_document()

        logger.info(f"Created event {event_id} ({created['name']})")
        return created

    def update_event(self, event_id: str, changes: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        """
        Apply ``changes`` to the event in a single transaction.

        Returns:
            The updated document, or None if the event does not exist
        """
        with self.database.session() as session:
            event = session.query(Event).filter(Event.event_id == event_id).first()
            if event is None:
                return None
            event.apply_changes(changes)
            session.flush()
            updated = event.to_document()

        logger.info(f"Updated event {event_id}: {sorted(changes)}")
        return updated

    def delete_event(self, event_id: str) -> Optional[Dict[str, Any]]:
        """Remove the event and return its last document, or None if not found."""
        with self.database.session() as session:
            event = session.query(Event).filter(Event.event_id == event_id).first()
            if event is None:
                return None
            deleted = event.to_document()
            session.delete(event)

        logger.info(f"Deleted event {event_id}")
        return deleted

    def clear(self) -> int:
        """Delete every event. Returns the number of rows removed."""
        with self.database.session() as session:
            count = session.query(Event).delete()
        logger.info(f"Cleared {count} events from database")
        return count


def _is_duplicate_event_id(error: IntegrityError) -> bool:
    """True if ``error`` is the unique violation on ``event_id``."""
    # PostgreSQL unique_violation; SQLite only reports it in the message
    if getattr(error.orig, 'sqlstate', None) == '23505':
        return 'event_id' in str(error.orig)
    message = str(error.orig)
    return 'UNIQUE constraint failed' in message and 'event_id' in message
