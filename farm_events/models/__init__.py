"""Domain models used across the project."""

from .event import EventRecord  # noqa: F401

__all__ = ["EventRecord"]
