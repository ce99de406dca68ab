"""Frequency tables over the categorical event fields."""

from __future__ import annotations

from collections import Counter
from typing import Dict, Iterable, List, Tuple

from ..models.event import EventRecord

TOP_THEMES_LIMIT: int = 10


def aggregate_themes(records: Iterable[EventRecord]) -> Dict[str, int]:
    """Count how many records carry each topic.

    A record tagged ``"A, B"`` counts once towards ``A`` and once towards
    ``B``; a topic repeated within one record still counts once, so the
    total of the table is the number of distinct (record, topic) pairs.
    """
    counts: Counter[str] = Counter()
    for record in records:
        counts.update(list(dict.fromkeys(record.topics)))
    return dict(counts)


def aggregate_types(records: Iterable[EventRecord]) -> Dict[str, int]:
    """Count records per exact event type; records without a type are skipped."""
    return dict(Counter(record.type for record in records if record.type))


def top_themes(table: Dict[str, int], limit: int = TOP_THEMES_LIMIT) -> List[Tuple[str, int]]:
    """Return the *limit* most frequent entries of *table*.

    ``sorted`` is stable, so equal counts keep the table's first-seen order.
    """
    return sorted(table.items(), key=lambda item: item[1], reverse=True)[:limit]

__all__ = ["aggregate_themes", "aggregate_types", "top_themes", "TOP_THEMES_LIMIT"]
