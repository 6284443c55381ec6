from app.resume.loader import ResumeLoadError, find_bullet_by_id, load_resume

__all__ = ["ResumeLoadError", "find_bullet_by_id", "load_resume"]
