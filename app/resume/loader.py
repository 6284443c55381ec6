from __future__ import annotations

import json
import logging
from pathlib import Path

from pydantic import ValidationError

from app.core.config import Settings, settings as default_settings
from app.schemas.resume import ResumeBullet, ResumeData

logger = logging.getLogger(__name__)

RESUME_LOAD_ERROR = "No resume loaded, please add a resume json file to /data directory."


class ResumeLoadError(RuntimeError):
    def __init__(self, message: str = RESUME_LOAD_ERROR):
        super().__init__(message)


def resolve_resume_path(settings: Settings | None = None) -> Path:
    cfg = settings or default_settings
    resume_id = (cfg.resume_id or "").strip()
    if not resume_id:
        raise ResumeLoadError()
    # Only a bare file name is accepted so RESUME_ID cannot point outside the data dir.
    if Path(resume_id).name != resume_id or resume_id in {".", ".."}:
        raise ResumeLoadError()
    return Path(cfg.resume_data_dir) / f"{resume_id}.json"


def load_resume(settings: Settings | None = None) -> ResumeData:
    path = resolve_resume_path(settings)
    if not path.is_file():
        raise ResumeLoadError()
    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
        return ResumeData.model_validate(raw)
    except (OSError, ValueError, ValidationError) as exc:
        logger.error("resume_load_failed path=%s: %s", path, exc)
        raise ResumeLoadError() from exc


def find_bullet_by_id(resume: ResumeData, bullet_id: str) -> ResumeBullet | None:
    for experience in resume.experience:
        for bullet in experience.bullets:
            if bullet.id == bullet_id:
                return bullet
    return None
