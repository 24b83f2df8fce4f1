"""Vocabulary-based skill extraction.

Scans text for every surface form in SKILL_MAPPINGS and reports the canonical
skills present. Presence is binary: no frequency weighting, no partial credit.
"""

import logging

from services.vocabulary import SKILL_PATTERNS

logger = logging.getLogger(__name__)


def extract_skills(text: str) -> list[str]:
    """Return the canonical skills mentioned in text, in vocabulary order.

    Uses whole-word/phrase matching so "java" does not fire inside
    "javascript" and "rest" does not fire inside "restaurant".
    """
    if not text:
        return []

    text_lower = text.lower()
    found: list[str] = []

    for skill, patterns in SKILL_PATTERNS.items():
        if any(p.search(text_lower) for p in patterns):
            found.append(skill)

    logger.debug("Extracted %d skills: %s", len(found), found)
    return found


def get_skill_gap(
    resume_skills: list[str], jd_skills: list[str]
) -> tuple[list[str], list[str], list[str]]:
    """Split skills into (matched, missing, extra).

    matched and missing follow the job description's order; extra follows
    the resume's order.
    """
    resume_set = set(resume_skills)
    jd_set = set(jd_skills)
    matched = [s for s in jd_skills if s in resume_set]
    missing = [s for s in jd_skills if s not in resume_set]
    extra = [s for s in resume_skills if s not in jd_set]
    return matched, missing, extra
