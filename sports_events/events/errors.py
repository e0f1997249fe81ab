"""Error kinds and operation results for the events service."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Generic, List, Optional, TypeVar

T = TypeVar('T')


class ErrorKind(Enum):
    """Kinds of failure an event operation can report."""

    VALIDATION = "ValidationError"
    NOT_FOUND = "NotFoundError"
    EMPTY_UPDATE = "EmptyUpdateError"
    REPOSITORY = "RepositoryError"


@dataclass(frozen=True)
class FieldError:
    """A single rejected field."""

    field: str
    message: str

    def to_dict(self) -> Dict[str, str]:
        return {"field": self.field, "message": self.message}


@dataclass(frozen=True)
class ServiceError:
    """Failure returned by a service operation."""

    kind: ErrorKind
    message: str
    field_errors: List[FieldError] = field(default_factory=list)

    @classmethod
    def validation(cls, errors: List[FieldError]) -> 'ServiceError':
        return cls(ErrorKind.VALIDATION, "Validation failed", list(errors))

    @classmethod
    def not_found(cls, event_id: str) -> 'ServiceError':
        return cls(ErrorKind.NOT_FOUND, f"Event {event_id} not found")

    @classmethod
    def empty_update(cls) -> 'ServiceError':
        return cls(ErrorKind.EMPTY_UPDATE, "No changes provided")

    @classmethod
    def repository(cls, exc: Exception) -> 'ServiceError':
        return cls(ErrorKind.REPOSITORY, str(exc))

    def to_dict(self) -> Dict[str, Any]:
        """Error body sent to clients."""
        if self.kind is ErrorKind.VALIDATION:
            return {"errors": [e.to_dict() for e in self.field_errors]}
        return {"type": self.kind.value, "error": self.message}


@dataclass(frozen=True)
class OperationResult(Generic[T]):
    """Outcome of a service operation: either a value or an error."""

    value: Optional[T] = None
    error: Optional[ServiceError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, value: T) -> 'OperationResult[T]':
        return cls(value=value)

    @classmethod
    def failure(cls, error: ServiceError) -> 'OperationResult[T]':
        return cls(error=error)
