"""Free-text filtering over event records."""

from __future__ import annotations

from typing import Iterable, List

from ..models.event import EventRecord


def filter_records(records: Iterable[EventRecord], query: str) -> List[EventRecord]:
    """Return the records whose title, summary, body or topics contain *query*.

    Matching is a case-insensitive substring test and the input order is
    preserved. Callers are expected to reject blank queries beforehand.
    """
    needle = query.lower()
    return [
        record
        for record in records
        if any(needle in value.lower() for value in record.searchable_text())
    ]

__all__ = ["filter_records"]
