import time
from typing import Any, Dict, List

import httpx

from app.config.settings import settings
from app.core.models import ChatMessage
from app.core.prompts import FOLLOW_UP_PROMPT
from app.system.exceptions import UpstreamResponseError
from app.utils.logger import GenerationLogger
from app.utils.truthiness import is_truthy


def _first_message(data: Any) -> Dict[str, Any] | None:
    if not isinstance(data, dict):
        return None
    choices = data.get("choices")
    if not isinstance(choices, list) or not choices or not isinstance(choices[0], dict):
        return None
    message = choices[0].get("message")
    return message if isinstance(message, dict) else None


class OpenRouterEngine:
    """Draft-then-double-check question generation against the OpenRouter chat API."""

    def __init__(
        self,
        api_key: str | None = None,
        model: str | None = None,
        url: str | None = None,
        client: httpx.AsyncClient | None = None,
        logger: GenerationLogger | None = None
    ):
        self.api_key = api_key or settings.OPENROUTER_API_KEY
        self.model = model or settings.OPENROUTER_MODEL
        self.url = url or settings.OPENROUTER_URL
        self.client = client or httpx.AsyncClient(timeout=settings.OPENROUTER_TIMEOUT)
        self.logger = logger or GenerationLogger()

    async def _call_llm(self, messages: List[ChatMessage], reasoning: bool = False) -> Dict[str, Any] | None:
        payload: Dict[str, Any] = {"model": self.model, "messages": messages}
        if reasoning:
            payload["reasoning"] = {"enabled": True}
        payload["temperature"] = 0

        start_time = time.time()
        response = await self.client.post(
            self.url,
            headers={
                "Content-Type": "application/json",
                "Authorization": f"Bearer {self.api_key}",
            },
            json=payload,
        )
        self.logger.log_latency((time.time() - start_time) * 1000)

        if response.is_error:
            self.logger.log("OpenRouter", f"Upstream answered HTTP {response.status_code}")

        data = response.json()
        if isinstance(data, dict):
            self.logger.log_usage(data.get("usage"))
        return _first_message(data)

    async def draft(self, prompt: str) -> ChatMessage:
        self.logger.log("OpenRouter", "First call (reasoning enabled)", {"model": self.model})
        message = await self._call_llm([{"role": "user", "content": prompt}], reasoning=True)
        if message is None:
            raise UpstreamResponseError("first")

        content = message.get("content")
        assistant: ChatMessage = {
            "role": "assistant",
            "content": content if content is not None else "",
        }
        if is_truthy(message.get("reasoning_details")):
            assistant["reasoning_details"] = message["reasoning_details"]
        return assistant

    async def double_check(self, prompt: str, draft: ChatMessage) -> Any:
        messages: List[ChatMessage] = [
            {"role": "user", "content": prompt},
            draft,
            {"role": "user", "content": FOLLOW_UP_PROMPT},
        ]
        self.logger.log("OpenRouter", "Second call (double check)", {"messages": len(messages)})
        message = await self._call_llm(messages)
        if message is None:
            raise UpstreamResponseError("second")

        content = message.get("content")
        return content if content is not None else "[]"

    async def aclose(self) -> None:
        await self.client.aclose()
