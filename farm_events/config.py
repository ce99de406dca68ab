"""Centralised configuration for farm_events.

Environment variables are loaded once and all related constants are
grouped by concern for easier maintenance.
"""

from __future__ import annotations

import os
from dotenv import load_dotenv

# ---------------------------------------------------------------------------
# Load environment variables from `.env` (if present)
# ---------------------------------------------------------------------------
load_dotenv()

# ---------------------------------------------------------------------------
# Core credentials (from environment)
# ---------------------------------------------------------------------------
OPENAI_API_KEY: str | None = os.getenv("OPENAI_API_KEY")

# ---------------------------------------------------------------------------
# Text generation settings
# ---------------------------------------------------------------------------
OPENAI_CHAT_MODEL: str = os.getenv("OPENAI_CHAT_MODEL", "gpt-4o-mini")
OPENAI_TEMPERATURE: float = float(os.getenv("OPENAI_TEMPERATURE", "0.7"))
# seconds; bounds every outbound completion request
OPENAI_TIMEOUT: float = float(os.getenv("OPENAI_TIMEOUT", "30"))

# ---------------------------------------------------------------------------
# Data source
# ---------------------------------------------------------------------------
EVENTS_CSV_PATH: str = os.getenv("EVENTS_CSV_PATH", os.path.join("data", "events.csv"))

# ---------------------------------------------------------------------------
# Server
# ---------------------------------------------------------------------------
APP_ENV: str = os.getenv("APP_ENV", "development")
HOST: str = os.getenv("HOST", "0.0.0.0")
PORT: int = int(os.getenv("PORT", "5001"))
CORS_ORIGINS: list[str] = [
    origin.strip() for origin in os.getenv("CORS_ORIGINS", "*").split(",") if origin.strip()
]

# ---------------------------------------------------------------------------
# Presentation client
# ---------------------------------------------------------------------------
API_BASE_URL: str = os.getenv("API_BASE_URL", f"http://localhost:{PORT}/api")

# ---------------------------------------------------------------------------
# Re-exported names
# ---------------------------------------------------------------------------
__all__ = [
    # credentials
    "OPENAI_API_KEY",
    # text generation
    "OPENAI_CHAT_MODEL",
    "OPENAI_TEMPERATURE",
    "OPENAI_TIMEOUT",
    # data
    "EVENTS_CSV_PATH",
    # server
    "APP_ENV",
    "HOST",
    "PORT",
    "CORS_ORIGINS",
    # client
    "API_BASE_URL",
]
