"""Tests for application wiring."""

import inspect
import logging

from sports_events.api.app import create_application
from sports_events.api.routes import events


def test_write_routes_run_in_threadpool():
    # Create retries sleep between attempts
    for handler in (events.create_event, events.update_event, events.delete_event):
        assert not inspect.iscoroutinefunction(handler)


def test_creating_apps_does_not_add_log_handlers(database):
    root_logger = logging.getLogger()
    before = list(root_logger.handlers)

    create_application(database)
    create_application(database)

    assert root_logger.handlers == before
