# services/assistant/chat_client.py
from typing import Any, Dict, List, Optional, Protocol

import httpx

from shared.config import settings


class ChatCompletionProvider(Protocol):
    async def complete(self, messages: List[Dict[str, str]]) -> str: ...


class OpenAIChatClient:
    def __init__(
        self,
        api_key: Optional[str] = None,
        *,
        base_url: Optional[str] = None,
        model: Optional[str] = None,
        max_tokens: int = 500,
        temperature: float = 0.7,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.api_key = api_key or settings.openai_api_key
        if not self.api_key:
            raise ValueError("OPENAI_API_KEY is not configured")
        self.base_url = base_url or settings.openai_base_url
        self.model = model or settings.openai_model
        self.max_tokens = max_tokens
        self.temperature = temperature
        self._client = httpx.AsyncClient(timeout=timeout or settings.openai_timeout_seconds, transport=transport)

    async def complete(self, messages: List[Dict[str, str]]) -> str:
        payload: Dict[str, Any] = {
            "model": self.model,
            "messages": messages,
            "max_tokens": self.max_tokens,
            "temperature": self.temperature,
        }
        headers = {
            "Authorization": f"Bearer {self.api_key}",
            "Content-Type": "application/json",
        }
        r = await self._client.post(self.base_url, headers=headers, json=payload)
        r.raise_for_status()
        data = r.json()
        try:
            content = data["choices"][0]["message"]["content"]
        except (KeyError, IndexError, TypeError):
            raise RuntimeError(f"Unexpected completion response: {r.text}")
        if not content:
            raise RuntimeError("No response from completion API")
        return content

    async def aclose(self) -> None:
        await self._client.aclose()


async def get_chat_provider():
    # None tells the chat endpoint the service is not configured
    if not settings.openai_api_key:
        yield None
        return
    client = OpenAIChatClient()
    try:
        yield client
    finally:
        await client.aclose()
