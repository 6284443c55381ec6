from fastapi import APIRouter, Depends, Request

from app.ai.types import AIClient
from app.api.v1.deps import client_key, get_llm_client, get_settings, read_json_object
from app.core.client_rate_limit import job_fit_rate_limiter
from app.core.config import Settings
from app.core.rate_limit import rate_limit
from app.schemas.chat import JobFitRequest, JobFitResponse
from app.services.job_fit_service import score_job_fit

router = APIRouter()


@router.post(
    "/job-fit",
    response_model=JobFitResponse,
    response_model_exclude_none=True,
    openapi_extra={
        "requestBody": {
            "required": True,
            "content": {"application/json": {"schema": JobFitRequest.model_json_schema(by_alias=True)}},
        }
    },
)
@rate_limit()
async def job_fit(
    request: Request,
    ai: AIClient = Depends(get_llm_client),
    cfg: Settings = Depends(get_settings),
):
    job_fit_rate_limiter.enforce(
        client_key(request),
        window_ms=cfg.job_fit_rate_window_ms,
        max_requests=cfg.job_fit_rate_limit,
    )
    payload = JobFitRequest.model_validate(await read_json_object(request))
    return await score_job_fit(payload, ai=ai, settings=cfg)
