from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv

load_dotenv()

def _get_env(name: str, default: str | None = None) -> str | None:
    value = os.getenv(name)
    if value is None or value == "":
        return default
    return value


def _get_env_bool(name: str, default: bool) -> bool:
    raw = _get_env(name, None)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _get_env_int(name: str, default: int) -> int:
    raw = _get_env(name, None)
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _get_env_float(name: str, default: float) -> float:
    raw = _get_env(name, None)
    if raw is None:
        return default
    try:
        return float(raw)
    except ValueError:
        return default


def _get_env_list(name: str, default: list[str]) -> tuple[str, ...]:
    raw = _get_env(name, None)
    if raw is None:
        return tuple(default)
    values = [item.strip() for item in raw.split(",")]
    clean = [item for item in values if item]
    return tuple(clean) if clean else tuple(default)


@dataclass(frozen=True)
class Settings:
    llm_provider: str
    model_name: str | None
    ollama_base_url: str
    external_llm_base_url: str | None
    external_llm_api_key: str | None
    llm_timeout_s: float
    resume_id: str | None
    resume_data_dir: str
    chat_rate_limit: int
    chat_rate_window_ms: int
    job_fit_rate_limit: int
    job_fit_rate_window_ms: int
    rate_limit_max_keys: int
    rate_limit_sweep_interval_s: int
    rate_limit: str
    rate_limit_enabled: bool
    log_level: str
    sentry_dsn: str | None
    log_message_max_chars: int
    cors_allowed_origins: tuple[str, ...]


def load_settings() -> Settings:
    return Settings(
        llm_provider=(_get_env("LLM_PROVIDER", "ollama") or "ollama").strip().lower(),
        model_name=(_get_env("MODEL_NAME") or "").strip() or None,
        ollama_base_url=_get_env("OLLAMA_BASE_URL", "http://localhost:11434") or "http://localhost:11434",
        external_llm_base_url=_get_env("EXTERNAL_LLM_BASE_URL"),
        external_llm_api_key=_get_env("EXTERNAL_LLM_API_KEY"),
        llm_timeout_s=_get_env_float("LLM_TIMEOUT_S", 30.0),
        resume_id=_get_env("RESUME_ID"),
        resume_data_dir=_get_env("RESUME_DATA_DIR", "data") or "data",
        chat_rate_limit=_get_env_int("CHAT_RATE_LIMIT", 20),
        chat_rate_window_ms=_get_env_int("CHAT_RATE_WINDOW_MS", 60_000),
        job_fit_rate_limit=_get_env_int("JOB_FIT_RATE_LIMIT", 10),
        job_fit_rate_window_ms=_get_env_int("JOB_FIT_RATE_WINDOW_MS", 60_000),
        rate_limit_max_keys=_get_env_int("RATE_LIMIT_MAX_KEYS", 10_000),
        rate_limit_sweep_interval_s=_get_env_int("RATE_LIMIT_SWEEP_INTERVAL_S", 300),
        rate_limit=_get_env("RATE_LIMIT", "60/minute") or "60/minute",
        rate_limit_enabled=_get_env_bool("RATE_LIMIT_ENABLED", True),
        log_level=_get_env("LOG_LEVEL", "INFO") or "INFO",
        sentry_dsn=_get_env("SENTRY_DSN"),
        log_message_max_chars=_get_env_int("LOG_MESSAGE_MAX_CHARS", 800),
        cors_allowed_origins=_get_env_list(
            "CORS_ALLOWED_ORIGINS",
            [
                "http://localhost:5173",
                "http://127.0.0.1:5173",
                "http://localhost:3000",
            ],
        ),
    )


settings = load_settings()
