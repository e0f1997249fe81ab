"""Database package initialization.

This module exposes the public interface of the database package.
"""

from .db_core import (
    Database,
    DatabaseConfig,
    DatabaseError,
    ConnectionError,
    SessionError,
    DuplicateEventIdError,
)
from .operations import with_retry
from .repository import EventRepository

__all__ = [
    # Core database classes
    'Database',
    'DatabaseConfig',

    # Exceptions
    'DatabaseError',
    'ConnectionError',
    'SessionError',
    'DuplicateEventIdError',

    # Repository
    'EventRepository',

    # Utilities
    'with_retry',
]
