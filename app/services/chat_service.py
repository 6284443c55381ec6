from __future__ import annotations

import hashlib
import json
import logging
import time

from app.ai.errors import MissingModel, ProviderError
from app.ai.types import AIClient, LLMRequest
from app.core.config import Settings, settings as default_settings
from app.resume.loader import find_bullet_by_id, load_resume
from app.schemas.chat import ChatRequest, ChatResponse
from app.services.prompts import chat_system_prompt
from app.services.sanitize import (
    MAX_MESSAGE_LENGTH,
    parse_bullet_id,
    parse_history,
    require_text,
)

logger = logging.getLogger("app.chat")

FALLBACK_MESSAGE = (
    "Sorry, I'm having trouble retrieving that right now. Please try again in a moment."
)
LLM_FAILURE = "LLM_FAILURE"


def short_hash(value: str | None) -> str:
    normalized = (value or "").strip()
    if not normalized:
        return ""
    return hashlib.sha256(normalized.encode("utf-8")).hexdigest()[:12]


def resolve_model(settings: Settings) -> str:
    if not settings.model_name:
        raise MissingModel()
    return settings.model_name


def log_provider_failure(event: str, exc: ProviderError, started_at: float, settings: Settings) -> None:
    logger.error(
        json.dumps(
            {
                "event": event,
                "code": exc.code,
                "error": str(exc)[: settings.log_message_max_chars],
                "status": getattr(exc, "status", None),
                "duration_ms": int((time.perf_counter() - started_at) * 1000),
            }
        )
    )


async def answer_chat(
    payload: ChatRequest,
    *,
    ai: AIClient,
    settings: Settings | None = None,
) -> ChatResponse:
    cfg = settings or default_settings
    started_at = time.perf_counter()

    message = require_text(payload.message, "message", MAX_MESSAGE_LENGTH)
    history = parse_history(payload.history)
    bullet_id = parse_bullet_id(payload.bullet_id)
    model = resolve_model(cfg)

    resume = load_resume(cfg)
    bullet = find_bullet_by_id(resume, bullet_id) if bullet_id else None

    logger.info(
        json.dumps(
            {
                "event": "chat_request",
                "model": model,
                "history_len": len(history),
                "bullet_id": bullet_id,
                "bullet_found": bullet is not None,
                "message_len": len(message),
                "message_hash": short_hash(message),
            }
        )
    )

    try:
        reply = await ai.generate(
            LLMRequest(
                system_prompt=chat_system_prompt(resume.name),
                resume_context=resume,
                chat_history=tuple(history),
                user_message=message,
                bullet_context=bullet,
                model=model,
            )
        )
    except ProviderError as exc:
        log_provider_failure("chat_error", exc, started_at, cfg)
        return ChatResponse(message=FALLBACK_MESSAGE, error=LLM_FAILURE)

    logger.info(
        json.dumps(
            {
                "event": "chat_complete",
                "reply_len": len(reply),
                "duration_ms": int((time.perf_counter() - started_at) * 1000),
            }
        )
    )
    return ChatResponse(message=reply)
