from __future__ import annotations

import dataclasses
import json
from typing import Any

from pydantic import BaseModel

from app.ai.types import ChatMessage, LLMRequest

RESUME_LABEL = "Resume data (JSON)"
_HISTORY_ROLES = {"user", "assistant"}


def _to_jsonable(value: Any) -> Any:
    if isinstance(value, BaseModel):
        return value.model_dump(mode="json", by_alias=True, exclude_none=True)
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return dataclasses.asdict(value)
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def to_json(value: Any) -> str:
    return json.dumps(value, default=_to_jsonable, ensure_ascii=False, separators=(",", ":"))


def _bullet_id(bullet: Any) -> str:
    if isinstance(bullet, dict):
        return str(bullet.get("id", ""))
    return str(getattr(bullet, "id", ""))


def build_messages(request: LLMRequest) -> list[ChatMessage]:
    """Assemble the provider message list for one request.

    Order is fixed: instructions, serialized résumé, optional bullet story,
    prior turns, then the live question. History entries carrying any role
    other than ``user`` or ``assistant`` are dropped.
    """
    messages = [
        ChatMessage(role="system", content=request.system_prompt),
        ChatMessage(role="system", content=f"{RESUME_LABEL}: {to_json(request.resume_context)}"),
    ]

    if request.bullet_context:
        bullet = request.bullet_context
        messages.append(
            ChatMessage(
                role="system",
                content=f"Bullet story context (id: {_bullet_id(bullet)}): {to_json(bullet)}",
            )
        )

    for turn in request.chat_history:
        if turn.role in _HISTORY_ROLES:
            messages.append(ChatMessage(role=turn.role, content=turn.content))

    messages.append(ChatMessage(role="user", content=request.user_message))
    return messages


def to_wire(messages: list[ChatMessage]) -> list[dict[str, str]]:
    return [{"role": m.role, "content": m.content} for m in messages]
