"""Factory for the OpenAI SDK client.

The client is built once at process start and handed to whichever component
issues outbound calls, so tests can inject a fake.
"""

from __future__ import annotations

import logging

from openai import OpenAI as _OpenAIClient

from ..config import OPENAI_API_KEY, OPENAI_TIMEOUT

logger = logging.getLogger(__name__)


def build_openai_client(
    api_key: str | None = OPENAI_API_KEY,
    timeout: float = OPENAI_TIMEOUT,
) -> _OpenAIClient | None:
    """Return a configured :class:`openai.OpenAI`, or ``None`` without a key."""
    if not api_key:
        logger.warning("OPENAI_API_KEY is not set – AI insights are disabled")
        return None
    return _OpenAIClient(api_key=api_key, timeout=timeout)

__all__ = ["build_openai_client"]
