"""Years-of-experience estimation from free text."""

from services.patterns import FRESHER_RE, TENURE_RE

# Returned when the only signal is a junior indicator ("fresher", "entry level")
FRESHER_YEARS = 0.0


# A dash or "to" only marks a range when the bounds read like tenure
MAX_RANGE_YEARS = 50
MAX_RANGE_SPAN = 10


def _mention_years(match) -> float:
    """Value of one tenure mention.

    A range like "4-6 years" counts as its midpoint. When the number before the
    dash is not a plausible lower bound ("B.Tech 2020 - 3 years", "Java 8 - 2
    years") only the number next to "years" is used.
    """
    high = match.group(2)
    if high is None:
        return float(match.group(1))

    low, high = float(match.group(1)), float(high)
    if low <= high <= MAX_RANGE_YEARS and high - low <= MAX_RANGE_SPAN:
        return (low + high) / 2
    return high


def extract_experience(text: str) -> float | None:
    """Best estimate of years of experience stated in text.

    Numeric mentions always win: the largest one is returned even if the text
    also says "fresher". Without any, a junior indicator yields FRESHER_YEARS.
    None means unknown and must not be read as zero.
    """
    mentions = [_mention_years(m) for m in TENURE_RE.finditer(text)]
    if mentions:
        return max(mentions)

    if FRESHER_RE.search(text):
        return FRESHER_YEARS

    return None


def experience_gap(resume_years: float | None, jd_years: float | None) -> float | None:
    """Absolute difference in years, or None when either side is unknown."""
    if resume_years is None or jd_years is None:
        return None
    return abs(resume_years - jd_years)
