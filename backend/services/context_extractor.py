"""Indian job-market context: CTC, notice period, fresher, service-based firms."""

import logging

from models.schemas.domain_context import DomainContext
from services.patterns import (
    COMPENSATION_RE,
    FRESHER_RE,
    NOTICE_PERIOD_RE,
    OUTSOURCING_RE,
)

logger = logging.getLogger(__name__)

DAYS_PER_MONTH = 30


def _notice_days(match) -> int:
    amount = int(match.group(1))
    if match.group(2).lower().startswith("month"):
        return amount * DAYS_PER_MONTH
    return amount


def extract_context(text: str) -> DomainContext:
    """Run each context pattern independently against text."""
    ctc_match = COMPENSATION_RE.search(text)
    notice_match = NOTICE_PERIOD_RE.search(text)

    context = DomainContext(
        is_fresher=FRESHER_RE.search(text) is not None,
        has_outsourcing_experience=OUTSOURCING_RE.search(text) is not None,
        compensation_mentioned=ctc_match is not None,
        compensation_lpa=float(ctc_match.group(1)) if ctc_match else None,
        notice_period_mentioned=notice_match is not None,
        notice_period_days=_notice_days(notice_match) if notice_match else None,
    )
    logger.debug("Extracted context: %s", context.model_dump())
    return context
