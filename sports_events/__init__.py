"""Sports events service: a REST API for scheduling sporting events."""

__version__ = "1.0.0"
