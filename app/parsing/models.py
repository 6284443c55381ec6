from __future__ import annotations

from pydantic import BaseModel, Field


class ParsedTable(BaseModel):
    headers: list[str]
    rows: list[list[str]] = Field(default_factory=list)


class ParsedResult(BaseModel):
    before: str
    table: ParsedTable | None = None
    after: str = ""
