from __future__ import annotations

import re
from typing import Any

from app.ai.types import ChatMessage

MAX_MESSAGE_LENGTH = 1000
MAX_HISTORY_MESSAGES = 10
MAX_HISTORY_ITEM_LENGTH = 1000
MAX_JOB_DESCRIPTION_LENGTH = 6000

_CONTROL_CHARS = re.compile(r"[\x00-\x1f\x7f]")


class MalformedInput(ValueError):
    pass


def sanitize_text(text: str) -> str:
    return _CONTROL_CHARS.sub("", text).strip()


def require_text(value: Any, field: str, max_length: int) -> str:
    if not isinstance(value, str):
        raise MalformedInput(f"{field} is required")
    clean = sanitize_text(value)[:max_length]
    if not clean:
        raise MalformedInput(f"{field} is empty")
    return clean


def parse_history(value: Any) -> list[ChatMessage]:
    """Keep well-formed user/assistant turns, newest ``MAX_HISTORY_MESSAGES`` only."""
    if not isinstance(value, list):
        return []
    parsed: list[ChatMessage] = []
    for item in value:
        if not isinstance(item, dict):
            continue
        role = item.get("role")
        content = item.get("content")
        if role not in {"user", "assistant"} or not isinstance(content, str):
            continue
        parsed.append(
            ChatMessage(role=role, content=sanitize_text(content)[:MAX_HISTORY_ITEM_LENGTH])
        )
    return parsed[-MAX_HISTORY_MESSAGES:]


def parse_bullet_id(value: Any) -> str | None:
    if not isinstance(value, str):
        return None
    return sanitize_text(value) or None
