"""Convenience re-exports for SDK client factories."""

from .openai_client import build_openai_client  # noqa: F401
from .http_session import get_session  # noqa: F401

__all__ = ["build_openai_client", "get_session"]
