from __future__ import annotations

import logging
from typing import Any

import httpx

from app.ai.errors import ProviderConnectionError, ProviderContentMissing, ProviderHTTPError
from app.ai.messages import build_messages, to_wire
from app.ai.types import LLMRequest

logger = logging.getLogger(__name__)

PROVIDER_NAME = "Ollama"
DEFAULT_BASE_URL = "http://localhost:11434"


def _extract_content(data: Any) -> str:
    if not isinstance(data, dict):
        return ""
    message = data.get("message")
    if not isinstance(message, dict):
        return ""
    content = message.get("content")
    return content.strip() if isinstance(content, str) else ""


class OllamaProvider:
    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        timeout_s: float = 30.0,
        http_client: httpx.AsyncClient | None = None,
    ):
        self._base_url = base_url.rstrip("/")
        self._timeout_s = timeout_s
        self._http_client = http_client

    @property
    def base_url(self) -> str:
        return self._base_url

    async def _post(self, url: str, payload: dict[str, Any]) -> httpx.Response:
        if self._http_client is not None:
            return await self._http_client.post(url, json=payload, timeout=self._timeout_s)
        async with httpx.AsyncClient(timeout=self._timeout_s) as client:
            return await client.post(url, json=payload)

    async def generate(self, request: LLMRequest) -> str:
        payload = {
            "model": request.model,
            "messages": to_wire(build_messages(request)),
            "stream": False,
        }
        try:
            response = await self._post(f"{self._base_url}/api/chat", payload)
        except httpx.HTTPError as exc:
            raise ProviderConnectionError(PROVIDER_NAME, str(exc) or type(exc).__name__) from exc

        if not response.is_success:
            raise ProviderHTTPError(PROVIDER_NAME, response.status_code, response.text)

        try:
            data = response.json()
        except ValueError:
            logger.warning("ollama_invalid_json status=%s", response.status_code)
            data = None

        content = _extract_content(data)
        if not content:
            raise ProviderContentMissing(PROVIDER_NAME)
        return content
