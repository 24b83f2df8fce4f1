"""Regional context signals extracted from a single text."""

from pydantic import BaseModel


class DomainContext(BaseModel):
    """Indian job-market signals found in a resume or job description.

    Each flag is an independent "pattern matched anywhere" test.
    """
    is_fresher: bool = False
    has_outsourcing_experience: bool = False  # TCS, Infosys, Wipro, ...
    compensation_mentioned: bool = False
    compensation_lpa: float | None = None  # first CTC figure, in lakhs per annum
    notice_period_mentioned: bool = False
    notice_period_days: int | None = None  # months counted as 30 days
