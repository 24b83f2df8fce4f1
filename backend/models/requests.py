from pydantic import BaseModel, Field

from config import settings


class MatchRequest(BaseModel):
    resume_text: str = Field(
        ..., max_length=settings.max_resume_chars, description="Plain text resume content"
    )
    job_description: str = Field(
        ..., max_length=settings.max_jd_chars, description="Job description text"
    )
