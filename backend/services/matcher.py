"""Orchestrator: single-pass resume / job-description matching pipeline.

Pipeline:
1. Extraction per text (skills, years of experience, regional context)
2. Scoring (keyword overlap, lexical overlap, rule-based adjustments)
3. Explanation (matched / missing / extra skills, strengths, weaknesses)
4. Suggestions (ordered, prioritized recommendations)
5. Verdict (score label and next steps)

Pure and synchronous: no I/O, no delays, no shared mutable state.
"""

import logging

from exceptions import InvalidInputError
from models.responses import MatchResult
from models.schemas.extracted_profile import ExtractedProfile
from services import scorer
from services.context_extractor import extract_context
from services.experience import extract_experience
from services.explainer import explain
from services.skill_extractor import extract_skills
from services.suggestions import generate_suggestions
from services.verdict import next_steps, score_label

logger = logging.getLogger(__name__)


def _require_text(field: str, value: object) -> str:
    # bool/bytes/None are not coerced; any str, even empty, is valid
    if not isinstance(value, str):
        raise InvalidInputError(field, value)
    return value


def extract_profile(text: str) -> ExtractedProfile:
    """Run all extractors over one text."""
    return ExtractedProfile(
        skills=extract_skills(text),
        experience_years=extract_experience(text),
        context=extract_context(text),
    )


def match(resume_text: str, job_description: str) -> MatchResult:
    """Score how well a resume matches a job description.

    Total over str input: blank or nonsensical text yields a low score, never
    an exception. Raises InvalidInputError only for non-str arguments.
    """
    resume_text = _require_text("resume_text", resume_text)
    job_description = _require_text("job_description", job_description)

    # --- Stage 1: Extraction ---
    resume = extract_profile(resume_text)
    jd = extract_profile(job_description)

    # --- Stage 2: Scoring ---
    final, breakdown = scorer.score(resume_text, job_description, resume, jd)
    logger.debug(
        "Sub-scores keyword=%d semantic=%d rule=%d",
        breakdown.keyword_score,
        breakdown.semantic_score,
        breakdown.rule_score,
    )

    # --- Stage 3: Explanation ---
    explanation = explain(
        resume.skills,
        jd.skills,
        resume.experience_years,
        jd.experience_years,
        resume.context,
    )

    # --- Stage 4: Suggestions ---
    suggestions = generate_suggestions(explanation, resume.context)

    logger.info(
        "Match score %d (%d matched, %d missing skills)",
        final,
        len(explanation.matched_skills),
        len(explanation.missing_skills),
    )

    return MatchResult(
        score=final,
        breakdown=breakdown,
        explanation=explanation,
        suggestions=suggestions,
        resume_experience=resume.experience_years,
        job_experience=jd.experience_years,
        label=score_label(final),
        next_steps=next_steps(final),
    )
