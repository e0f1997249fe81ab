"""HTTP layer for the sports events service."""
