"""Forward a single question to the Gemini ``generateContent`` API.

Only the first word of the first candidate's reply is kept.  Network and HTTP
errors are not retried; they propagate to the caller as ``httpx`` exceptions.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional

import httpx

from lib.config.service_loader import ServiceConfig
from lib.telemetry.logger import get_logger

FALLBACK_ANSWER = "Unknown"

logger = get_logger(__name__)


def extract_first_word(payload: Any) -> str:
    """Return the first token of ``candidates[0].content.parts[0].text``.

    Any missing or malformed step along that path yields ``"Unknown"``.
    """

    try:
        text = payload["candidates"][0]["content"]["parts"][0]["text"]
    except (KeyError, IndexError, TypeError):
        return FALLBACK_ANSWER
    if not isinstance(text, str):
        return FALLBACK_ANSWER
    words = text.split()
    return words[0] if words else FALLBACK_ANSWER


@dataclass
class GeminiForwarder:
    """Thin async client for one-shot Gemini prompts.

    Parameters
    ----------
    config: service settings providing the model, base URL and API key.
    client: optional shared :class:`httpx.AsyncClient`.  When omitted the
        forwarder opens its own and :meth:`aclose` releases it.
    """

    config: ServiceConfig
    client: Optional[httpx.AsyncClient] = None

    def __post_init__(self) -> None:
        self._owns_client = self.client is None
        if self.client is None:
            self.client = httpx.AsyncClient()

    @property
    def endpoint(self) -> str:
        base = self.config.gemini_base_url.rstrip("/")
        return f"{base}/models/{self.config.gemini_model}:generateContent"

    @staticmethod
    def build_body(prompt: str) -> Dict[str, Any]:
        return {"contents": [{"parts": [{"text": prompt}]}]}

    async def ask(self, prompt: str) -> str:
        logger.debug("Forwarding prompt to %s", self.config.gemini_model)
        response = await self.client.post(
            self.endpoint,
            headers={"x-goog-api-key": self.config.gemini_api_key},
            json=self.build_body(prompt),
        )
        response.raise_for_status()
        answer = extract_first_word(response.json())
        if answer == FALLBACK_ANSWER:
            logger.info("Gemini reply had no usable text")
        return answer

    async def aclose(self) -> None:
        if self._owns_client and self.client is not None:
            await self.client.aclose()


__all__ = ["GeminiForwarder", "extract_first_word", "FALLBACK_ANSWER"]
