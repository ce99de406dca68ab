"""Request-level workflows composing the service layer."""

from .event_queries import analyze_events, list_events, search_events  # noqa: F401

__all__ = ["list_events", "search_events", "analyze_events"]
