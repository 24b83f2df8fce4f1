"""Intermediate pydantic contracts passed between pipeline stages."""

from models.schemas.domain_context import DomainContext
from models.schemas.extracted_profile import ExtractedProfile

__all__ = [
    "DomainContext",
    "ExtractedProfile",
]
