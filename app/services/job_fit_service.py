from __future__ import annotations

import json
import logging
import time

from app.ai.errors import ProviderError
from app.ai.types import AIClient, LLMRequest
from app.core.config import Settings, settings as default_settings
from app.parsing.markdown_table import segment_response
from app.resume.loader import load_resume
from app.schemas.chat import JobFitRequest, JobFitResponse
from app.services.chat_service import (
    FALLBACK_MESSAGE,
    LLM_FAILURE,
    log_provider_failure,
    resolve_model,
    short_hash,
)
from app.services.prompts import job_fit_system_prompt
from app.services.sanitize import MAX_JOB_DESCRIPTION_LENGTH, require_text

logger = logging.getLogger("app.job_fit")


async def score_job_fit(
    payload: JobFitRequest,
    *,
    ai: AIClient,
    settings: Settings | None = None,
) -> JobFitResponse:
    cfg = settings or default_settings
    started_at = time.perf_counter()

    job_description = require_text(
        payload.job_description, "jobDescription", MAX_JOB_DESCRIPTION_LENGTH
    )
    model = resolve_model(cfg)
    resume = load_resume(cfg)

    logger.info(
        json.dumps(
            {
                "event": "job_fit_request",
                "model": model,
                "description_len": len(job_description),
                "description_hash": short_hash(job_description),
            }
        )
    )

    try:
        reply = await ai.generate(
            LLMRequest(
                system_prompt=job_fit_system_prompt(resume.name),
                resume_context=resume,
                user_message=job_description,
                model=model,
            )
        )
    except ProviderError as exc:
        log_provider_failure("job_fit_error", exc, started_at, cfg)
        return JobFitResponse(message=FALLBACK_MESSAGE, error=LLM_FAILURE)

    parsed = segment_response(reply)
    logger.info(
        json.dumps(
            {
                "event": "job_fit_complete",
                "reply_len": len(reply),
                "has_table": parsed.table is not None,
                "table_rows": len(parsed.table.rows) if parsed.table else 0,
                "duration_ms": int((time.perf_counter() - started_at) * 1000),
            }
        )
    )
    return JobFitResponse(message=reply, parsed=parsed)
