#!/usr/bin/env python3

"""
Seed a running sports events API with sample events.

Events are sent through the public API, so they are validated and get
their eventId exactly as client-created events do.

Usage:
    # Seed the local development server with data/sample_events.json
    python scripts/seed_events.py

    # Seed another server from another file
    python scripts/seed_events.py --base-url http://localhost:9000 --file my_events.json
"""

import argparse
import json
import logging
import sys
from pathlib import Path

import requests

# Add project root to Python path
sys.path.append(str(Path(__file__).parent.parent))

from sports_events.utils.logging_config import setup_logging
from sports_events.web import EventAPIClient

DEFAULT_FILE = Path(__file__).parent.parent / 'data' / 'sample_events.json'

logger = logging.getLogger(__name__)

def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Seed the sports events API with sample events")
    parser.add_argument('--file', type=Path, default=DEFAULT_FILE,
                        help="JSON file holding a list of events")
    parser.add_argument('--base-url', default='http://localhost:8000',
                        help="Base URL of the API server")
    parser.add_argument('--timeout', type=int, default=30,
                        help="Request timeout in seconds")
    return parser.parse_args(argv)

def seed_events(client: EventAPIClient, events) -> int:
    """Create every event in ``events``. Returns how many were created."""
    created = 0
    for event in events:
        try:
            client.create_event(event)
            created += 1
        except requests.HTTPError as e:
            body = e.response.text if e.response is not None else ''
            logger.error(f"Skipping '{event.get('name')}': {body}")
    return created

def main(argv=None) -> int:
    setup_logging()
    args = parse_args(argv)

    with open(args.file, encoding='utf-8') as f:
        events = json.load(f)

    client = EventAPIClient(base_url=args.base_url, timeout=args.timeout)
    try:
        created = seed_events(client, events)
    except requests.RequestException as e:
        logger.error(f"Could not reach {args.base_url}: {e}")
        return 1

    logger.info(f"Created {created}/{len(events)} events")
    return 0 if created == len(events) else 1

if __name__ == "__main__":
    sys.exit(main())
