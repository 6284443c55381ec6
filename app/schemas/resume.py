from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class ResumeBullet(BaseModel):
    model_config = ConfigDict(extra="allow")

    id: str
    text: str
    story: str | None = None


class ResumeExperience(BaseModel):
    model_config = ConfigDict(extra="allow")

    company: str
    role: str
    start: str = ""
    end: str = ""
    bullets: list[ResumeBullet] = Field(default_factory=list)


class ResumeContact(BaseModel):
    model_config = ConfigDict(extra="allow")

    email: str = ""
    phone: str = ""


class ResumeData(BaseModel):
    model_config = ConfigDict(extra="allow", populate_by_name=True)

    name: str
    title: str = ""
    contact: ResumeContact = Field(default_factory=ResumeContact)
    summary: str = ""
    experience: list[ResumeExperience] = Field(default_factory=list)
    suggested_questions: list[str] = Field(default_factory=list, alias="suggestedQuestions")


class ResumeProfileResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    name: str
    title: str
    summary: str
    experience: list[ResumeExperience]
    suggested_questions: list[str] = Field(alias="suggestedQuestions")
