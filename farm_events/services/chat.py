"""Single-message pass-through to the chat model."""

from __future__ import annotations

import logging

from openai import OpenAI

from ..config import OPENAI_CHAT_MODEL, OPENAI_TEMPERATURE
from ..errors import ChatUnavailable

logger = logging.getLogger(__name__)


def send_chat_message(client: OpenAI | None, message: str) -> str:
    """Forward *message* as a user turn and return the model's reply.

    Raises
    ------
    ChatUnavailable
        If no client is configured or the upstream call fails.
    """
    if client is None:
        raise ChatUnavailable("OPENAI_API_KEY is not configured")

    logger.info("Forwarding chat message (first 50 chars): %s…", message[:50])
    try:
        resp = client.chat.completions.create(
            model=OPENAI_CHAT_MODEL,
            messages=[{"role": "user", "content": message}],
            temperature=OPENAI_TEMPERATURE,
        )
        return resp.choices[0].message.content or ""
    except Exception as exc:
        logger.error("Chat completion failed: %s", exc)
        raise ChatUnavailable(str(exc)) from exc

__all__ = ["send_chat_message"]
