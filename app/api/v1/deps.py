from __future__ import annotations

from typing import Any

from fastapi import Request

from app.ai.factory import get_default_ai_client
from app.ai.types import AIClient
from app.core.client_ip import client_key
from app.core.config import Settings, settings
from app.services.sanitize import MalformedInput

__all__ = ["client_key", "get_llm_client", "get_settings", "read_json_object"]


def get_settings() -> Settings:
    return settings


def get_llm_client() -> AIClient:
    return get_default_ai_client()


async def read_json_object(request: Request) -> dict[str, Any]:
    try:
        body = await request.json()
    except ValueError as exc:
        raise MalformedInput("Invalid JSON body") from exc
    if not isinstance(body, dict):
        raise MalformedInput("Invalid JSON body")
    return body
