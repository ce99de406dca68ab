"""FastAPI routes for the event list, search, analytics and chat endpoints."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from fastapi import APIRouter, Depends, Query, Request

from ..errors import BadRequest
from ..services.chat import send_chat_message
from ..services.insights import InsightComposer
from ..workflows.event_queries import analyze_events, list_events, search_events
from .schemas import (
    AnalyticsData,
    AnalyticsResponse,
    ChatRequest,
    ChatResponse,
    EventsResponse,
    SearchResponse,
)

router = APIRouter(prefix="/api", tags=["events"])


def get_composer(request: Request) -> InsightComposer:
    return InsightComposer(request.app.state.openai_client)


def get_csv_path(request: Request) -> Optional[Path]:
    return request.app.state.csv_path


# ═══════════════════════════════════════════════════════════════════════════
# Events
# ═══════════════════════════════════════════════════════════════════════════


@router.get("/events", response_model=EventsResponse)
def get_events(csv_path: Optional[Path] = Depends(get_csv_path)):
    records = list_events(csv_path)
    return EventsResponse(data=[record.to_dict() for record in records])


@router.get("/events/search", response_model=SearchResponse)
def search(
    query: Optional[str] = Query(default=None, description="Free-text search term"),
    composer: InsightComposer = Depends(get_composer),
    csv_path: Optional[Path] = Depends(get_csv_path),
):
    """Return events whose title, summary, content or topics contain *query*."""
    result = search_events(query, composer, csv_path)
    return SearchResponse(
        data=[record.to_dict() for record in result.records],
        aiInsights=result.insight,
    )


@router.get("/events/analytics", response_model=AnalyticsResponse)
async def analytics(
    composer: InsightComposer = Depends(get_composer),
    csv_path: Optional[Path] = Depends(get_csv_path),
):
    """Theme and type frequencies over all events plus AI analysis."""
    result = await analyze_events(composer, csv_path)
    return AnalyticsResponse(
        data=AnalyticsData(
            totalEvents=result.total_events,
            themeAnalysis=result.theme_analysis,
            typeAnalysis=result.type_analysis,
            aiAnalysis=result.ai_analysis,
            aiRecommendations=result.ai_recommendations,
        )
    )


# ═══════════════════════════════════════════════════════════════════════════
# Chat
# ═══════════════════════════════════════════════════════════════════════════


@router.post("/chat", response_model=ChatResponse)
def chat(req: ChatRequest, request: Request):
    if not req.message.strip():
        raise BadRequest("Message is required")
    reply = send_chat_message(request.app.state.openai_client, req.message)
    return ChatResponse(data=reply)
