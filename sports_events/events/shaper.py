"""Mapping of stored event documents to the public response shape."""

from typing import Any, Dict, Iterable, List

from .timestamp import decode_timestamp, parse_timestamp


def shape_event(document: Dict[str, Any]) -> Dict[str, Any]:
    """Replace ``timestamp`` by display ``date`` and ``time``; copy the rest verbatim."""
    date, time = decode_timestamp(document['timestamp'])
    return {
        'eventId': document['eventId'],
        'name': document['name'],
        'host': document['host'],
        'sport': document['sport'],
        'date': date,
        'time': time,
        'location': document['location'],
        'image': document['image'],
        'price': document['price'],
        'players': document['players'],
        'totalNumOfPlayers': document['totalNumOfPlayers'],
    }


def sort_by_timestamp(documents: Iterable[Dict[str, Any]]) -> List[Dict[str, Any]]:
    """Order documents by date and start time, earliest first."""
    return sorted(documents, key=lambda doc: parse_timestamp(doc['timestamp']))
