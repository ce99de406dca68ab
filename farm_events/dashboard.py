"""Terminal dashboard for the event insights API.

Usage:
    farm-events-dashboard [--base-url URL] list
    farm-events-dashboard [--base-url URL] search <query>
    farm-events-dashboard [--base-url URL] analytics
    farm-events-dashboard [--base-url URL] chat <message>
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Any, Dict, List, Optional

import requests

from .logging_config import logging as _  # noqa: F401  # ensure config applied early
from .clients.http_session import get_session
from .config import API_BASE_URL
from .models.event import EventRecord
from .services.aggregation import top_themes

logger = logging.getLogger(__name__)

REQUEST_TIMEOUT: float = 60.0
BAR_WIDTH: int = 40


class ApiError(RuntimeError):
    """Raised when the API cannot be reached or answers with a failure."""


class EventApiClient:
    """Thin wrapper around the four API endpoints."""

    def __init__(self, base_url: str = API_BASE_URL, session: Optional[requests.Session] = None):
        self.base_url = base_url.rstrip("/")
        self.session = session or get_session()

    def _request(self, method: str, path: str, **kwargs: Any) -> Dict[str, Any]:
        url = f"{self.base_url}{path}"
        try:
            response = self.session.request(method, url, timeout=REQUEST_TIMEOUT, **kwargs)
        except requests.RequestException as exc:
            logger.error("Request to %s failed: %s", url, exc)
            raise ApiError(f"Could not reach {url}") from exc

        try:
            body = response.json()
        except ValueError as exc:
            raise ApiError(f"Invalid response from {url} ({response.status_code})") from exc

        if response.status_code != 200 or not body.get("success"):
            logger.error("Error from API: %s - %s", response.status_code, body)
            raise ApiError(body.get("error") or f"API error: {response.status_code}")
        return body

    def list_events(self) -> List[Dict[str, str]]:
        return self._request("GET", "/events")["data"]

    def search(self, query: str) -> Dict[str, Any]:
        return self._request("GET", "/events/search", params={"query": query})

    def analytics(self) -> Dict[str, Any]:
        return self._request("GET", "/events/analytics")["data"]

    def chat(self, message: str) -> str:
        return self._request("POST", "/chat", json={"message": message})["data"]


# ---------------------------------------------------------------------------
# Rendering
# ---------------------------------------------------------------------------


def render_event(row: Dict[str, str]) -> str:
    record = EventRecord.from_row(row)
    lines = [record.title]
    if record.summary:
        lines.append(f"  {record.summary}")
    if record.topics:
        lines.append("  " + " ".join(f"[{topic}]" for topic in record.topics))
    if record.venue:
        lines.append(f"  @ {record.venue}")
    return "\n".join(lines)


def render_events(rows: List[Dict[str, str]]) -> str:
    return "\n\n".join(render_event(row) for row in rows)


def render_search(query: str, body: Dict[str, Any]) -> str:
    sections = []
    if body.get("aiInsights"):
        sections.append(f"AI Analysis\n-----------\n{body['aiInsights']}")
    if body.get("data"):
        sections.append(render_events(body["data"]))
    else:
        sections.append(f"No events found matching '{query}'.")
    return "\n\n".join(sections)


def render_theme_chart(theme_analysis: Dict[str, int]) -> str:
    """Draw the ten most common themes as a horizontal text bar chart."""
    themes = top_themes(theme_analysis)
    if not themes:
        return "(no themes)"
    highest = themes[0][1]
    label_width = max(len(name) for name, _count in themes)
    lines = []
    for name, count in themes:
        bar = "#" * max(1, round(count / highest * BAR_WIDTH))
        lines.append(f"{name.ljust(label_width)} | {bar} {count}")
    return "\n".join(lines)


def render_analytics(data: Dict[str, Any]) -> str:
    return "\n\n".join(
        [
            f"Total events: {data['totalEvents']}",
            f"Analysis\n--------\n{data['aiAnalysis']}",
            f"Recommendations\n---------------\n{data['aiRecommendations']}",
            "Top 10 Event Themes\n-------------------\n"
            + render_theme_chart(data.get("themeAnalysis") or {}),
        ]
    )


def error_banner(message: str) -> str:
    return f"! {message}"


# ---------------------------------------------------------------------------
# CLI
# ---------------------------------------------------------------------------


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="farm-events-dashboard",
        description="Browse, search and analyse agricultural events.",
    )
    parser.add_argument("--base-url", default=API_BASE_URL, help="API base URL")
    sub = parser.add_subparsers(dest="command", required=True)
    sub.add_parser("list", help="List all events")
    search = sub.add_parser("search", help="Search events")
    search.add_argument("query", nargs="*")
    sub.add_parser("analytics", help="Show theme statistics and AI analysis")
    chat = sub.add_parser("chat", help="Send one message to the chat model")
    chat.add_argument("message", nargs="+")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = _build_parser().parse_args(argv)
    client = EventApiClient(args.base_url)

    if args.command == "chat":
        message = " ".join(args.message)
        try:
            print(client.chat(message))
        except ApiError as exc:
            print(f"Error occurred while fetching response: {exc}", file=sys.stderr)
            return 1
        return 0

    try:
        if args.command == "list":
            print(render_events(client.list_events()))
        elif args.command == "search":
            query = " ".join(args.query).strip()
            if not query:
                return 0
            print(render_search(query, client.search(query)))
        elif args.command == "analytics":
            print(render_analytics(client.analytics()))
    except ApiError as exc:
        print(error_banner(str(exc)))
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
