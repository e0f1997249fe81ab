"""Configuration package for the sports events service."""
