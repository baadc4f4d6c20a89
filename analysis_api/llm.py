"""
OpenRouter chat-completion client.
"""
import logging
from dataclasses import dataclass
from typing import Optional

import httpx

from .config import Config
from .errors import UpstreamCallFailed
from .prompts import NO_ANSWER, SYSTEM_PROMPT, UPSTREAM_UNAVAILABLE, build_user_message

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LLMAnswer:
    text: str
    degraded: bool = False


class LLMClient:
    """
    Sends one vehicle text plus instruction to OpenRouter.

    There is no retry. Provider failures are turned into a degraded answer
    string so the request still succeeds.
    """

    def __init__(self, config: Config, transport: Optional[httpx.AsyncBaseTransport] = None):
        self.config = config
        self._transport = transport

    def _build_payload(self, vehicle_text: str, instruction: str) -> dict:
        return {
            "model": self.config.OPENROUTER_MODEL,
            "messages": [
                {"role": "system", "content": SYSTEM_PROMPT},
                {
                    "role": "user",
                    "content": [
                        {"type": "text", "text": build_user_message(vehicle_text, instruction)}
                    ],
                },
            ],
        }

    async def _post(self, payload: dict) -> dict:
        headers = {
            "Authorization": f"Bearer {self.config.OPENROUTER_API_KEY}",
            "Content-Type": "application/json",
        }
        try:
            async with httpx.AsyncClient(timeout=self.config.LLM_TIMEOUT_S, transport=self._transport) as client:
                response = await client.post(self.config.OPENROUTER_URL, headers=headers, json=payload)
        except httpx.HTTPError as e:
            raise UpstreamCallFailed(f"{type(e).__name__}: {e}") from e

        if not response.is_success:
            raise UpstreamCallFailed(f"HTTP {response.status_code}: {response.text[:300]}", response.status_code)
        try:
            return response.json()
        except ValueError as e:
            raise UpstreamCallFailed(f"invalid JSON from provider: {e}") from e

    async def ask(self, vehicle_text: str, instruction: str) -> LLMAnswer:
        payload = self._build_payload(vehicle_text, instruction)
        logger.info(f"Calling OpenRouter ({self.config.OPENROUTER_MODEL})...")
        try:
            data = await self._post(payload)
        except UpstreamCallFailed as e:
            logger.error(f"LLM call failed: {e.reason}")
            return LLMAnswer(text=UPSTREAM_UNAVAILABLE, degraded=True)

        content = _first_message_content(data)
        if not content:
            logger.warning("LLM returned no content")
            return LLMAnswer(text=NO_ANSWER, degraded=True)
        return LLMAnswer(text=content)


def _first_message_content(data) -> str:
    try:
        content = data["choices"][0]["message"]["content"]
    except (KeyError, IndexError, TypeError):
        return ""
    return content if isinstance(content, str) else ""
