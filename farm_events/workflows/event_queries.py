"""List, search and analytics queries over the event file.

Each query re-reads the CSV, so no state is shared between requests.
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List

from ..errors import BadRequest
from ..models.event import EventRecord
from ..services.aggregation import aggregate_themes, aggregate_types
from ..services.filtering import filter_records
from ..services.insights import InsightComposer
from ..services.loader import load_records

logger = logging.getLogger(__name__)

SEARCH_INSTRUCTION: str = (
    "You are an agricultural events analyst. Analyse the following events that"
    " matched a user's search. Explain how they relate to each other thematically,"
    " point out the most relevant events and summarise the common themes in a"
    " short paragraph."
)
ANALYSIS_INSTRUCTION: str = (
    "You are an agricultural events analyst. Based on the following statistics"
    " about an event calendar (total number of events, event types and the"
    " themes covered), give a concise overall analysis of the event offering."
)
RECOMMENDATION_INSTRUCTION: str = (
    "You are an agricultural events planner. Based on the following table of"
    " event themes and how many events cover each one, recommend which themes"
    " deserve more events in the future and why. Keep it brief and practical."
)


@dataclass(slots=True)
class SearchResult:
    """Records matching a query plus one insight over them."""

    records: List[EventRecord] = field(default_factory=list)
    insight: str = ""


@dataclass(slots=True)
class AnalyticsResult:
    """Aggregate statistics over the full record set plus two insights."""

    total_events: int = 0
    theme_analysis: Dict[str, int] = field(default_factory=dict)
    type_analysis: Dict[str, int] = field(default_factory=dict)
    ai_analysis: str = ""
    ai_recommendations: str = ""


def list_events(path: str | Path | None = None) -> List[EventRecord]:
    """Return every record in the event file."""
    return load_records(path)


def search_events(
    query: str | None,
    composer: InsightComposer,
    path: str | Path | None = None,
) -> SearchResult:
    """Filter the event file by *query* and compose an insight over the matches.

    Raises
    ------
    BadRequest
        If *query* is missing or blank; nothing is loaded in that case.
    """
    if query is None or not query.strip():
        raise BadRequest("Search query is required")

    records = load_records(path)
    matches = filter_records(records, query)
    logger.info("Search '%s' matched %d of %d events", query, len(matches), len(records))

    insight = composer.compose_json([record.to_dict() for record in matches], SEARCH_INSTRUCTION)
    return SearchResult(records=matches, insight=insight)


async def analyze_events(
    composer: InsightComposer,
    path: str | Path | None = None,
) -> AnalyticsResult:
    """Aggregate the full event file and compose analysis + recommendations.

    Both compositions run concurrently; each degrades to its own placeholder
    so the result always carries both strings.
    """
    records = load_records(path)
    themes = aggregate_themes(records)
    types = aggregate_types(records)
    logger.info(
        "Aggregated %d events into %d themes and %d types", len(records), len(themes), len(types)
    )

    overview = {
        "totalEvents": len(records),
        "eventTypes": types,
        "themes": list(themes),
    }
    ai_analysis, ai_recommendations = await asyncio.gather(
        composer.acompose_json(overview, ANALYSIS_INSTRUCTION),
        composer.acompose_json(themes, RECOMMENDATION_INSTRUCTION),
    )

    return AnalyticsResult(
        total_events=len(records),
        theme_analysis=themes,
        type_analysis=types,
        ai_analysis=ai_analysis,
        ai_recommendations=ai_recommendations,
    )

__all__ = [
    "list_events",
    "search_events",
    "analyze_events",
    "SearchResult",
    "AnalyticsResult",
    "SEARCH_INSTRUCTION",
    "ANALYSIS_INSTRUCTION",
    "RECOMMENDATION_INSTRUCTION",
]
