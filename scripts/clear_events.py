#!/usr/bin/env python3

import logging
import sys
from pathlib import Path

# Add project root to Python path
sys.path.append(str(Path(__file__).parent.parent))

from sports_events.db import Database, EventRepository

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

def clear_all_events():
    """Clear all events from the database"""
    database = Database()
    try:
        count = EventRepository(database).clear()
        logger.info(f"Cleared {count} events from database")
    finally:
        database.dispose()

if __name__ == "__main__":
    clear_all_events()
