from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from app.parsing.models import ParsedResult


class ChatRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    # Routes validate a raw JSON object into these; field shape checks happen
    # in app.services.sanitize and map to MALFORMED_INPUT.
    message: Any = None
    history: Any = None
    bullet_id: Any = Field(default=None, alias="bulletId")


class ChatResponse(BaseModel):
    message: str
    error: str | None = None


class JobFitRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    job_description: Any = Field(default=None, alias="jobDescription")


class JobFitResponse(BaseModel):
    message: str
    error: str | None = None
    parsed: ParsedResult | None = None
