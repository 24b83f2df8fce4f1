"""Three independent sub-scores and their weighted combination.

- keyword: share of JD skills present in the resume
- semantic: Jaccard overlap of significant word tokens (lexical, no embeddings)
- rule: starts at 100 and loses points for regional mismatch heuristics

Every sub-score lies in [0, 100]. The final score combines the unrounded
sub-scores and rounds once; the breakdown carries each sub-score rounded
the same way for display.
"""

import math

from models.responses import ScoreBreakdown
from models.schemas.domain_context import DomainContext
from models.schemas.extracted_profile import ExtractedProfile
from services.experience import experience_gap
from services.patterns import STOP_WORDS, WORD_RE

# Weights for the final score
W_KEYWORD = 0.30
W_SEMANTIC = 0.50
W_RULE = 0.20

MIN_TOKEN_LENGTH = 3

# Rule-based penalties
EXPERIENCE_CLOSE_YEARS = 1
EXPERIENCE_NEAR_YEARS = 2
NEAR_GAP_PENALTY = 15
FAR_GAP_PENALTY = 30
FRESHER_ROLE_MAX_YEARS = 2
OVERQUALIFIED_FOR_FRESHER_PENALTY = 20
OUTSOURCING_PENALTY = 5


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves going up (12.5 -> 13)."""
    return math.floor(value + 0.5)


def keyword_score(resume_skills: list[str], jd_skills: list[str]) -> float:
    """Percentage of JD skills found in the resume. 0.0 when the JD lists none.

    Not symmetric: swapping the arguments changes the denominator.
    """
    if not jd_skills:
        return 0.0
    resume_set = set(resume_skills)
    matched = sum(1 for skill in jd_skills if skill in resume_set)
    return matched / len(jd_skills) * 100


def significant_tokens(text: str) -> set[str]:
    """Lower-cased word tokens minus stop words and tokens of 2 chars or fewer."""
    return {
        token
        for token in WORD_RE.findall(text.lower())
        if token not in STOP_WORDS and len(token) >= MIN_TOKEN_LENGTH
    }


def semantic_score(resume_text: str, jd_text: str) -> float:
    """Jaccard similarity of significant tokens, as a percentage."""
    resume_tokens = significant_tokens(resume_text)
    jd_tokens = significant_tokens(jd_text)
    union = resume_tokens | jd_tokens
    if not union:
        return 0.0
    return len(resume_tokens & jd_tokens) / len(union) * 100


def rule_score(
    resume_years: float | None,
    jd_years: float | None,
    resume_context: DomainContext,
    jd_context: DomainContext,
) -> float:
    """Heuristic score starting at 100; penalties are additive, floor is 0."""
    score = 100.0

    gap = experience_gap(resume_years, jd_years)
    # Unknown experience on either side: no adjustment
    if gap is not None and gap > EXPERIENCE_CLOSE_YEARS:
        if gap <= EXPERIENCE_NEAR_YEARS:
            score -= NEAR_GAP_PENALTY
        else:
            score -= FAR_GAP_PENALTY

    # Experienced candidate applying to a fresher role
    if (
        jd_context.is_fresher
        and not resume_context.is_fresher
        and resume_years is not None
        and resume_years > FRESHER_ROLE_MAX_YEARS
    ):
        score -= OVERQUALIFIED_FOR_FRESHER_PENALTY

    # Service-based background against a non service-based JD. Minor only.
    if resume_context.has_outsourcing_experience and not jd_context.has_outsourcing_experience:
        score -= OUTSOURCING_PENALTY

    return max(0.0, score)


def final_score(keyword: float, semantic: float, rule: float) -> int:
    """Weighted combination of unrounded sub-scores, rounded once."""
    return round_half_up(W_KEYWORD * keyword + W_SEMANTIC * semantic + W_RULE * rule)


def score(
    resume_text: str,
    jd_text: str,
    resume: ExtractedProfile,
    jd: ExtractedProfile,
) -> tuple[int, ScoreBreakdown]:
    """Compute all sub-scores for a resume/JD pair. Returns (final, breakdown)."""
    keyword = keyword_score(resume.skills, jd.skills)
    semantic = semantic_score(resume_text, jd_text)
    rule = rule_score(
        resume.experience_years, jd.experience_years, resume.context, jd.context
    )

    breakdown = ScoreBreakdown(
        keyword_score=round_half_up(keyword),
        semantic_score=round_half_up(semantic),
        rule_score=round_half_up(rule),
    )
    return final_score(keyword, semantic, rule), breakdown
