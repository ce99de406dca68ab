"""Service layer modules grouping business logic by concern.

This module provides convenience re-exports so that callers can simply do for
example `from farm_events.services import filter_records` without having to
know which underlying module provides the symbol.
"""

from .loader import load_records  # noqa: F401
from .filtering import filter_records  # noqa: F401
from .aggregation import aggregate_themes, aggregate_types, top_themes  # noqa: F401
from .insights import InsightComposer, compose_insight  # noqa: F401
from .chat import send_chat_message  # noqa: F401

__all__ = [
    "load_records",
    "filter_records",
    "aggregate_themes",
    "aggregate_types",
    "top_themes",
    "InsightComposer",
    "compose_insight",
    "send_chat_message",
]
