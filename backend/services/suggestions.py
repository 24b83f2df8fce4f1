"""Prioritized improvement suggestions.

Order is fixed: skill gaps, resume format, keyword optimization, experience
highlighting, and the generic ATS tip always last. Impact figures are static
estimates, not computed.
"""

from models.responses import Explanation, Priority, Suggestion
from models.schemas.domain_context import DomainContext

MAX_SKILL_GAP_SUGGESTIONS = 3
MAX_EMPHASIZED_SKILLS = 3


def _skill_gap(skill: str) -> Suggestion:
    return Suggestion(
        category="Skill Gap",
        recommendation=(
            f"Add {skill} to your skillset. Consider free courses on Coursera, "
            "Udemy India, or YouTube."
        ),
        priority=Priority.HIGH,
        impact="+12-15 points",
    )


def generate_suggestions(
    explanation: Explanation, resume_context: DomainContext
) -> list[Suggestion]:
    """Map an explanation and the resume's context to ordered recommendations."""
    suggestions = [
        _skill_gap(skill)
        for skill in explanation.missing_skills[:MAX_SKILL_GAP_SUGGESTIONS]
    ]

    if not resume_context.compensation_mentioned:
        suggestions.append(Suggestion(
            category="Resume Format",
            recommendation=(
                "Add Current/Expected CTC in LPA format (standard in Indian resumes)"
            ),
            priority=Priority.MEDIUM,
            impact="+5 points",
        ))

    if explanation.matched_skills:
        top = ", ".join(explanation.matched_skills[:MAX_EMPHASIZED_SKILLS])
        suggestions.append(Suggestion(
            category="Keyword Optimization",
            recommendation=f"Emphasize matched skills ({top}) in project descriptions",
            priority=Priority.MEDIUM,
            impact="+8-10 points",
        ))

    if resume_context.has_outsourcing_experience:
        suggestions.append(Suggestion(
            category="Experience Highlighting",
            recommendation=(
                "Highlight individual contributions and technical ownership "
                "in service-based projects"
            ),
            priority=Priority.MEDIUM,
            impact="+6-8 points",
        ))

    suggestions.append(Suggestion(
        category="ATS Optimization",
        recommendation=(
            "Use standard section headers: Summary, Skills, Experience, Education, Projects"
        ),
        priority=Priority.LOW,
        impact="+3-5 points",
    ))

    return suggestions
