from __future__ import annotations

import httpx
from openai import (
    APIConnectionError,
    APIResponseValidationError,
    APIStatusError,
    AsyncOpenAI,
)

from app.ai.errors import (
    MissingCredential,
    ProviderConnectionError,
    ProviderContentMissing,
    ProviderHTTPError,
)
from app.ai.messages import build_messages, to_wire
from app.ai.types import LLMRequest

PROVIDER_NAME = "External LLM"
DEFAULT_BASE_URL = "https://api.openai.com/v1"


class ExternalProvider:
    """OpenAI-compatible chat completions backend.

    The SDK's own retry loop is disabled; a failed call surfaces immediately
    and the caller decides what to tell the end user.
    """

    def __init__(
        self,
        api_key: str,
        base_url: str | None = None,
        timeout_s: float = 30.0,
        temperature: float = 0.2,
        http_client: httpx.AsyncClient | None = None,
    ):
        key = (api_key or "").strip()
        if not key:
            raise MissingCredential()

        self._base_url = (base_url or DEFAULT_BASE_URL).rstrip("/")
        self._temperature = temperature
        self._client = AsyncOpenAI(
            api_key=key,
            base_url=self._base_url,
            timeout=timeout_s,
            max_retries=0,
            http_client=http_client,
        )

    @property
    def base_url(self) -> str:
        return self._base_url

    async def generate(self, request: LLMRequest) -> str:
        try:
            completion = await self._client.chat.completions.create(
                model=request.model,
                messages=to_wire(build_messages(request)),
                temperature=self._temperature,
            )
        except APIStatusError as exc:
            raise ProviderHTTPError(PROVIDER_NAME, exc.status_code, exc.response.text) from exc
        except APIResponseValidationError as exc:
            raise ProviderContentMissing(PROVIDER_NAME) from exc
        except APIConnectionError as exc:
            raise ProviderConnectionError(PROVIDER_NAME, str(exc)) from exc
        except ValueError as exc:
            # Undecodable 2xx body; the SDK lets json.JSONDecodeError through.
            raise ProviderContentMissing(PROVIDER_NAME) from exc

        choices = getattr(completion, "choices", None) or []
        message = getattr(choices[0], "message", None) if choices else None
        content = getattr(message, "content", None)
        if not isinstance(content, str) or not content.strip():
            raise ProviderContentMissing(PROVIDER_NAME)
        return content.strip()
