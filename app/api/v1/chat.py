from fastapi import APIRouter, Depends, Request

from app.ai.types import AIClient
from app.api.v1.deps import client_key, get_llm_client, get_settings, read_json_object
from app.core.client_rate_limit import chat_rate_limiter
from app.core.config import Settings
from app.core.rate_limit import rate_limit
from app.schemas.chat import ChatRequest, ChatResponse
from app.services.chat_service import answer_chat

router = APIRouter()


@router.post(
    "/chat",
    response_model=ChatResponse,
    response_model_exclude_none=True,
    openapi_extra={
        "requestBody": {
            "required": True,
            "content": {"application/json": {"schema": ChatRequest.model_json_schema(by_alias=True)}},
        }
    },
)
@rate_limit()
async def chat(
    request: Request,
    ai: AIClient = Depends(get_llm_client),
    cfg: Settings = Depends(get_settings),
):
    # Every request counts against the window, including ones with a bad body.
    chat_rate_limiter.enforce(
        client_key(request),
        window_ms=cfg.chat_rate_window_ms,
        max_requests=cfg.chat_rate_limit,
    )
    payload = ChatRequest.model_validate(await read_json_object(request))
    return await answer_chat(payload, ai=ai, settings=cfg)
