from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Literal, Protocol, Sequence


Role = Literal["system", "user", "assistant"]


@dataclass(frozen=True)
class ChatMessage:
    role: Role
    content: str


@dataclass(frozen=True)
class LLMRequest:
    system_prompt: str
    resume_context: Any
    user_message: str
    model: str
    chat_history: Sequence[ChatMessage] = field(default_factory=tuple)
    bullet_context: Any | None = None


class AIClient(Protocol):
    async def generate(self, request: LLMRequest) -> str: ...
