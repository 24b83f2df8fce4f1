"""Everything the extractors pull out of one input text."""

from pydantic import BaseModel

from models.schemas.domain_context import DomainContext


class ExtractedProfile(BaseModel):
    """Extractor output for a resume or a job description.

    experience_years is None when no tenure or junior indicator was found;
    0.0 means the text reads as a fresher.
    """
    skills: list[str] = []  # canonical skills, vocabulary order
    experience_years: float | None = None
    context: DomainContext = DomainContext()
