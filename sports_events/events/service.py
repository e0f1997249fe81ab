"""Event service.

Orchestrates validation, id allocation, persistence and response shaping.
Every operation returns an ``OperationResult``; failures are reported as a
``ServiceError`` whose kind the HTTP layer maps to a status code.
"""

import logging
from typing import Any, Dict, List

from ..db.db_core import DatabaseError
from ..db.repository import EventRepository
from .errors import OperationResult, ServiceError
from .shaper import shape_event, sort_by_timestamp
from .validator import has_updatable_fields, validate_create, validate_update

logger = logging.getLogger(__name__)


class EventService:
    """Service for event operations."""

    def __init__(self, repository: EventRepository) -> None:
        self._repository = repository

    def list_events(self) -> OperationResult[List[Dict[str, Any]]]:
        """Return all events shaped for clients, earliest first."""
        try:
            documents = self._repository.list_events()
        except DatabaseError as e:
            return self._repository_failure("list events", e)
        return OperationResult.success([shape_event(doc) for doc in sort_by_timestamp(documents)])

    def get_event(self, event_id: str) -> OperationResult[Dict[str, Any]]:
        try:
            document = self._repository.get_event(event_id)
        except DatabaseError as e:
            return self._repository_failure(f"get event {event_id}", e)
        if document is None:
            return OperationResult.failure(ServiceError.not_found(event_id))
        return OperationResult.success(shape_event(document))

    def create_event(self, payload: Any) -> OperationResult[Dict[str, Any]]:
        """
        Validate ``payload`` and store it under the next eventId.

        Returns the stored document, timestamp included.
        """
        document, errors = validate_create(payload)
        if errors:
            return OperationResult.failure(ServiceError.validation(errors))
        try:
            created = self._repository.create_event(document)
        except DatabaseError as e:
            return self._repository_failure("create event", e)
        return OperationResult.success(created)

    def update_event(self, event_id: str, payload: Any) -> OperationResult[Dict[str, Any]]:
        """
        Apply the fields present in ``payload`` to an existing event.

        All changes are written in one transaction. Returns the eventId and
        the changes that were applied.
        """
        if isinstance(payload, dict) and not has_updatable_fields(payload):
            return OperationResult.failure(ServiceError.empty_update())

        patch, errors = validate_update(payload)
        if errors:
            return OperationResult.failure(ServiceError.validation(errors))

        try:
            updated = self._repository.update_event(event_id, patch)
        except DatabaseError as e:
            return self._repository_failure(f"update event {event_id}", e)
        if updated is None:
            return OperationResult.failure(ServiceError.not_found(event_id))
        return OperationResult.success({'eventId': event_id, 'changes': patch})

    def delete_event(self, event_id: str) -> OperationResult[Dict[str, Any]]:
        """Remove an event; returns the deleted document."""
        try:
            deleted = self._repository.delete_event(event_id)
        except DatabaseError as e:
            return self._repository_failure(f"delete event {event_id}", e)
        if deleted is None:
            return OperationResult.failure(ServiceError.not_found(event_id))
        return OperationResult.success(deleted)

    @staticmethod
    def _repository_failure(action: str, exc: DatabaseError) -> OperationResult:
        logger.error(f"Failed to {action}: {exc}")
        return OperationResult.failure(ServiceError.repository(exc))
