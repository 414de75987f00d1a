"""Conflict and view serializability checks for transaction schedules."""

__version__ = "0.1.0"
__all__ = ["operation", "conflict", "view", "cli"]