from __future__ import annotations

import json
import logging
import math

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from app.ai.errors import AIConfigError
from app.core.client_rate_limit import RateLimitExceeded
from app.resume.loader import ResumeLoadError
from app.services.sanitize import MalformedInput

logger = logging.getLogger(__name__)

SLOW_DOWN_MESSAGE = (
    "Please slow down a bit, you've reached the request limit. Try again shortly."
)
CONFIG_ERROR_MESSAGE = "The assistant is not configured correctly."


async def _rate_limit_exceeded(request: Request, exc: RateLimitExceeded) -> JSONResponse:
    retry_after_s = max(1, math.ceil(exc.retry_after_ms / 1000))
    logger.info(
        json.dumps({"event": "client_rate_limited", "path": request.url.path, "retry_after_s": retry_after_s})
    )
    return JSONResponse(
        status_code=status.HTTP_429_TOO_MANY_REQUESTS,
        content={"message": SLOW_DOWN_MESSAGE},
        headers={"Retry-After": str(retry_after_s)},
    )


async def _malformed_input(request: Request, exc: MalformedInput) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"message": str(exc), "error": "MALFORMED_INPUT"},
    )


async def _resume_load_error(request: Request, exc: ResumeLoadError) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"message": str(exc), "error": "NO_RESUME"},
    )


async def _ai_config_error(request: Request, exc: AIConfigError) -> JSONResponse:
    logger.error(json.dumps({"event": "llm_config_error", "code": exc.code, "error": str(exc)}))
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"message": CONFIG_ERROR_MESSAGE, "error": "CONFIG_ERROR"},
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded)
    app.add_exception_handler(MalformedInput, _malformed_input)
    app.add_exception_handler(ResumeLoadError, _resume_load_error)
    app.add_exception_handler(AIConfigError, _ai_config_error)
