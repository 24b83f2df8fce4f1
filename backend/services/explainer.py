"""Human-readable explanation of a match, derived from extractor output only."""

from models.responses import Explanation
from models.schemas.domain_context import DomainContext
from services.experience import experience_gap
from services.skill_extractor import get_skill_gap

MAX_LISTED_SKILLS = 5
MAX_EXTRA_SKILLS = 5


def _format_years(years: float) -> str:
    """Render 3.0 as "3" and 2.5 as "2.5"."""
    return f"{years:g}"


def _build_strengths(
    matched: list[str],
    resume_exp: float | None,
    jd_exp: float | None,
    resume_context: DomainContext,
) -> list[str]:
    strengths: list[str] = []

    if matched:
        strengths.append(
            f"Strong match in {len(matched)} key skills: "
            f"{', '.join(matched[:MAX_LISTED_SKILLS])}"
        )

    gap = experience_gap(resume_exp, jd_exp)
    if gap is not None and gap <= 1:
        strengths.append(
            f"Experience level matches requirement "
            f"({_format_years(resume_exp)} years vs {_format_years(jd_exp)} years required)"
        )

    if resume_context.has_outsourcing_experience:
        strengths.append(
            "Experience in service-based companies shows client-facing project work"
        )

    return strengths


def _build_weaknesses(
    missing: list[str],
    resume_exp: float | None,
    jd_exp: float | None,
) -> list[str]:
    weaknesses: list[str] = []

    if missing:
        weaknesses.append(
            f"Missing {len(missing)} required skills: "
            f"{', '.join(missing[:MAX_LISTED_SKILLS])}"
        )

    if resume_exp is not None and jd_exp is not None and resume_exp < jd_exp - 1:
        weaknesses.append(
            f"Experience gap: Resume shows {_format_years(resume_exp)} years, "
            f"JD requires {_format_years(jd_exp)}+ years"
        )

    return weaknesses


def explain(
    resume_skills: list[str],
    jd_skills: list[str],
    resume_exp: float | None,
    jd_exp: float | None,
    resume_context: DomainContext,
) -> Explanation:
    """Build matched/missing/extra skill lists plus strengths and weaknesses.

    Matched and missing keep the job description's order; extras keep
    vocabulary order and are capped at five. The text is advisory and is
    never fed back into scoring.
    """
    matched, missing, extra = get_skill_gap(resume_skills, jd_skills)

    return Explanation(
        matched_skills=matched,
        missing_skills=missing,
        extra_skills=extra[:MAX_EXTRA_SKILLS],
        strengths=_build_strengths(matched, resume_exp, jd_exp, resume_context),
        weaknesses=_build_weaknesses(missing, resume_exp, jd_exp),
    )
