from __future__ import annotations

from typing import Dict, List, Optional

from pydantic import BaseModel, Field

# Event rows are passed through with their original (Finnish) column names.
EventRow = Dict[str, str]


# ---------------------------------------------------------------------------
# Requests
# ---------------------------------------------------------------------------


class ChatRequest(BaseModel):
    message: str = Field(default="", description="User message forwarded to the model")


# ---------------------------------------------------------------------------
# Responses
# ---------------------------------------------------------------------------


class EventsResponse(BaseModel):
    success: bool = True
    data: List[EventRow]


class SearchResponse(BaseModel):
    success: bool = True
    data: List[EventRow]
    aiInsights: str = Field(..., description="Model commentary on the matching events")


class AnalyticsData(BaseModel):
    totalEvents: int
    themeAnalysis: Dict[str, int]
    typeAnalysis: Dict[str, int]
    aiAnalysis: str
    aiRecommendations: str


class AnalyticsResponse(BaseModel):
    success: bool = True
    data: AnalyticsData


class ChatResponse(BaseModel):
    success: bool = True
    data: str


class ErrorResponse(BaseModel):
    success: bool = False
    error: str
    details: Optional[str] = None


class HealthResponse(BaseModel):
    status: str
