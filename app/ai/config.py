from __future__ import annotations

from dataclasses import dataclass

from app.core.config import Settings, settings as default_settings


@dataclass(frozen=True)
class AIConfig:
    provider: str
    model: str | None
    ollama_base_url: str
    external_base_url: str | None
    external_api_key: str | None
    timeout_s: float


def load_ai_config(settings: Settings | None = None) -> AIConfig:
    cfg = settings or default_settings
    return AIConfig(
        provider=cfg.llm_provider.strip().lower(),
        model=cfg.model_name,
        ollama_base_url=cfg.ollama_base_url,
        external_base_url=cfg.external_llm_base_url,
        external_api_key=(cfg.external_llm_api_key or "").strip() or None,
        timeout_s=cfg.llm_timeout_s,
    )
