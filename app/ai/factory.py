from __future__ import annotations

from functools import lru_cache

from app.ai.config import AIConfig, load_ai_config
from app.ai.errors import MissingCredential, UnsupportedProvider
from app.ai.types import AIClient

from app.ai.providers.external_provider import ExternalProvider
from app.ai.providers.ollama_provider import OllamaProvider


def get_ai_client(cfg: AIConfig | None = None) -> AIClient:
    cfg = cfg or load_ai_config()

    if cfg.provider == "ollama":
        return OllamaProvider(base_url=cfg.ollama_base_url, timeout_s=cfg.timeout_s)

    if cfg.provider == "external":
        if not cfg.external_api_key:
            raise MissingCredential()
        return ExternalProvider(
            api_key=cfg.external_api_key,
            base_url=cfg.external_base_url,
            timeout_s=cfg.timeout_s,
        )

    raise UnsupportedProvider(cfg.provider)


@lru_cache(maxsize=1)
def get_default_ai_client() -> AIClient:
    return get_ai_client()
