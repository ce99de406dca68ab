"""AI commentary over event data via the OpenAI chat-completions API.

Every call goes through :meth:`InsightComposer.compose`, which never raises:
a missing client or any upstream failure is turned into one of two fixed
placeholder strings so that the surrounding response can still be served.
"""

from __future__ import annotations

import asyncio
import json
import logging
from typing import Any

from openai import OpenAI

from ..config import OPENAI_CHAT_MODEL, OPENAI_TEMPERATURE

logger = logging.getLogger(__name__)

AI_NOT_CONFIGURED: str = "AI analysis not available"
AI_UNAVAILABLE: str = "AI analysis temporarily unavailable"


def build_prompt(payload: str, instruction: str) -> str:
    return f"{instruction}\n\n{payload}"


class InsightComposer:
    """Send prompts built from event data to a chat model and return its reply."""

    def __init__(
        self,
        client: OpenAI | None,
        *,
        model: str = OPENAI_CHAT_MODEL,
        temperature: float = OPENAI_TEMPERATURE,
    ) -> None:
        self.client = client
        self.model = model
        self.temperature = temperature

    @property
    def enabled(self) -> bool:
        return self.client is not None

    def compose(self, payload: str, instruction: str) -> str:
        """Return the model's reply to *instruction* applied to *payload*.

        Returns :data:`AI_NOT_CONFIGURED` when no client is configured and
        :data:`AI_UNAVAILABLE` when the call fails for any reason.
        """
        if self.client is None:
            return AI_NOT_CONFIGURED

        try:
            resp = self.client.chat.completions.create(
                model=self.model,
                messages=[{"role": "user", "content": build_prompt(payload, instruction)}],
                temperature=self.temperature,
            )
            content = resp.choices[0].message.content
        except Exception as exc:  # upstream failures degrade to a placeholder
            logger.error("Insight generation failed: %s", exc)
            return AI_UNAVAILABLE

        if not content:
            logger.warning("Insight generation returned an empty reply")
            return AI_UNAVAILABLE
        return content

    def compose_json(self, data: Any, instruction: str) -> str:
        """Serialise *data* as JSON and compose an insight over it."""
        return self.compose(json.dumps(data, ensure_ascii=False), instruction)

    async def acompose_json(self, data: Any, instruction: str) -> str:
        """Async variant of :meth:`compose_json` running the SDK call in a thread."""
        return await asyncio.to_thread(self.compose_json, data, instruction)


def compose_insight(client: OpenAI | None, payload: str, instruction: str) -> str:
    """Functional shortcut for ``InsightComposer(client).compose(...)``."""
    return InsightComposer(client).compose(payload, instruction)

__all__ = [
    "InsightComposer",
    "compose_insight",
    "build_prompt",
    "AI_NOT_CONFIGURED",
    "AI_UNAVAILABLE",
]
