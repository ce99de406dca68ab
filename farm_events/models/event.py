"""Definition of the `EventRecord` dataclass used throughout the project."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Mapping, Optional

# ---------------------------------------------------------------------------
# CSV column names (wire contract, kept exactly as in the source file)
# ---------------------------------------------------------------------------
TITLE: str = "Otsikko"
SUMMARY: str = "Tiivistelmä"
BODY: str = "Sisältö"
TOPICS: str = "Aiheet"
TYPE: str = "Tyyppi"
VENUE: str = "Tapahtumapaikan_nimi"

SEARCHABLE_FIELDS = (TITLE, SUMMARY, BODY, TOPICS)


@dataclass(slots=True)
class EventRecord:
    """A single agricultural event row.

    The raw row is kept as-is so that every column, including ones this
    package does not know about, survives the round trip to JSON.
    """

    fields: Dict[str, str] = field(default_factory=dict)

    @classmethod
    def from_row(cls, row: Mapping[str, Optional[str]]) -> "EventRecord":
        # csv.DictReader yields None for missing trailing cells and a
        # None key for surplus ones
        return cls({key: value or "" for key, value in row.items() if key is not None})

    def get(self, name: str) -> str:
        return self.fields.get(name) or ""

    @property
    def title(self) -> str:
        return self.get(TITLE)

    @property
    def summary(self) -> str:
        return self.get(SUMMARY)

    @property
    def body(self) -> str:
        return self.get(BODY)

    @property
    def topics_text(self) -> str:
        return self.get(TOPICS)

    @property
    def topics(self) -> List[str]:
        """Return the comma-separated topics, trimmed, without empty entries."""
        return [topic.strip() for topic in self.topics_text.split(",") if topic.strip()]

    @property
    def type(self) -> str:
        return self.get(TYPE).strip()

    @property
    def venue(self) -> str:
        return self.get(VENUE)

    def searchable_text(self) -> List[str]:
        """Return the values of the fields free-text search looks at."""
        return [self.get(name) for name in SEARCHABLE_FIELDS]

    def to_dict(self) -> Dict[str, str]:
        return dict(self.fields)

__all__ = [
    "EventRecord",
    "TITLE",
    "SUMMARY",
    "BODY",
    "TOPICS",
    "TYPE",
    "VENUE",
    "SEARCHABLE_FIELDS",
]
