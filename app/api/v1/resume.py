from fastapi import APIRouter, Depends

from app.api.v1.deps import get_settings
from app.core.config import Settings
from app.resume.loader import load_resume
from app.schemas.resume import ResumeProfileResponse

router = APIRouter()


@router.get("/resume", response_model=ResumeProfileResponse, response_model_by_alias=True)
def resume_profile(cfg: Settings = Depends(get_settings)):
    resume = load_resume(cfg)
    return ResumeProfileResponse(
        name=resume.name,
        title=resume.title,
        summary=resume.summary,
        experience=resume.experience,
        suggested_questions=resume.suggested_questions,
    )
