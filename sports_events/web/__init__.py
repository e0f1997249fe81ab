"""Client-side helpers for talking to the sports events API."""

from .api import EventAPIClient

__all__ = ['EventAPIClient']
