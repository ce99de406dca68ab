"""FastAPI application factory for the event insights API."""

from __future__ import annotations

import logging
from pathlib import Path

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from openai import OpenAI

from ..clients.openai_client import build_openai_client
from ..config import APP_ENV, CORS_ORIGINS
from ..errors import BadRequest, ChatUnavailable, DataUnavailable
from .routes import router
from .schemas import ErrorResponse, HealthResponse

logger = logging.getLogger(__name__)


def _error(status_code: int, error: str, details: str | None = None) -> JSONResponse:
    body = ErrorResponse(error=error, details=details).model_dump(exclude_none=True)
    return JSONResponse(status_code=status_code, content=body)


async def _data_unavailable(request: Request, exc: DataUnavailable) -> JSONResponse:
    logger.error("Event data unavailable for %s: %s", request.url.path, exc)
    details = None if APP_ENV == "production" else str(exc)
    return _error(500, "Failed to load events", details)


async def _bad_request(request: Request, exc: BadRequest) -> JSONResponse:
    return _error(400, str(exc))


async def _chat_unavailable(request: Request, exc: ChatUnavailable) -> JSONResponse:
    return _error(500, "Failed to get response from OpenAI")


async def _invalid_request(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.warning("Invalid request to %s: %s", request.url.path, exc.errors())
    return _error(400, "Invalid request")


_UNSET = object()


def create_app(
    openai_client: OpenAI | None = _UNSET,  # type: ignore[assignment]
    csv_path: str | Path | None = None,
) -> FastAPI:
    """Build the API with one OpenAI client shared by all requests.

    When *openai_client* is omitted it is built from the environment; pass
    ``None`` explicitly to run without AI insights.
    """
    app = FastAPI(
        title="Farm Events",
        description="Search and analytics over agricultural events with AI commentary.",
        version="0.1.0",
    )
    if openai_client is _UNSET:
        openai_client = build_openai_client()
    app.state.openai_client = openai_client
    app.state.csv_path = Path(csv_path) if csv_path else None

    app.add_middleware(
        CORSMiddleware,
        allow_origins=CORS_ORIGINS,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_exception_handler(DataUnavailable, _data_unavailable)
    app.add_exception_handler(BadRequest, _bad_request)
    app.add_exception_handler(ChatUnavailable, _chat_unavailable)
    app.add_exception_handler(RequestValidationError, _invalid_request)

    app.include_router(router)

    @app.get("/health", response_model=HealthResponse, tags=["system"])
    async def health_check():
        return HealthResponse(status="ok")

    return app

__all__ = ["create_app"]
