"""Event model definition."""

from typing import Any, Dict
from sqlalchemy import Column, Integer, String, Float, JSON

from .base import Base

# Public document fields, in response order
DOCUMENT_FIELDS = (
    'eventId',
    'name',
    'host',
    'sport',
    'timestamp',
    'location',
    'image',
    'price',
    'players',
    'totalNumOfPlayers',
)

# Document field name -> model attribute
ATTRIBUTE_NAMES = {
    'eventId': 'event_id',
    'name': 'name',
    'host': 'host',
    'sport': 'sport',
    'timestamp': 'timestamp',
    'location': 'location',
    'image': 'image',
    'price': 'price',
    'players': 'players',
    'totalNumOfPlayers': 'total_num_of_players',
}


class Event(Base):
    """
    Stored sporting event.

    Fields:
        id: Internal auto-generated key. Orders rows by insertion and is
            never exposed to clients.
        event_id: Public sequential identifier (decimal string)
        name: Event name
        host: Who hosts the event
        sport: One of the supported sports
        timestamp: Date and time range as 'YYYY-MM-DD|HH:MM-HH:MM'
        location: Where the event takes place
        image: URL or path of the event image (may be empty)
        price: Price of participation
        players: Ordered roster of player names/identifiers
        total_num_of_players: Capacity of the event
    """
    __tablename__ = 'events'

    id = Column(Integer, primary_key=True, autoincrement=True)
    event_id = Column(String, nullable=False, unique=True, index=True)
    name = Column(String, nullable=False)
    host = Column(String, nullable=False)
    sport = Column(String, nullable=False)
    timestamp = Column(String, nullable=False)
    location = Column(String, nullable=False)
    image = Column(String, nullable=False, default='')
    price = Column(Float, nullable=False)
    players = Column(JSON, nullable=False, default=list)
    total_num_of_players = Column(Float, nullable=False)

    @classmethod
    def from_document(cls, document: Dict[str, Any]) -> 'Event':
        """Build a model instance from a document keyed by public field names."""
        return cls(**{
            ATTRIBUTE_NAMES[field]: value
            for field, value in document.items()
            if field in ATTRIBUTE_NAMES
        })

    def apply_changes(self, changes: Dict[str, Any]) -> None:
        """Set every field present in ``changes``; other fields are untouched."""
        for field, value in changes.items():
            setattr(self, ATTRIBUTE_NAMES[field], value)

    def to_document(self) -> Dict[str, Any]:
        """Convert to the stored document representation."""
        return {
            field: _plain_number(getattr(self, ATTRIBUTE_NAMES[field]))
            for field in DOCUMENT_FIELDS
        }

    def __str__(self) -> str:
        """String representation."""
        return f"Event(event_id={self.event_id}, name={self.name}, sport={self.sport})"


def _plain_number(value: Any) -> Any:
    # Float columns hand back 10.0 for 10
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return value
