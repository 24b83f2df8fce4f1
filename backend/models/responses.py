from enum import Enum

from pydantic import BaseModel


class ScoreBreakdown(BaseModel):
    # Sub-scores rounded half-up for display, each 0-100
    keyword_score: int = 0
    semantic_score: int = 0
    rule_score: int = 100


class Explanation(BaseModel):
    matched_skills: list[str] = []
    missing_skills: list[str] = []
    extra_skills: list[str] = []  # at most 5
    strengths: list[str] = []
    weaknesses: list[str] = []


class Priority(str, Enum):
    HIGH = "High"
    MEDIUM = "Medium"
    LOW = "Low"


class Suggestion(BaseModel):
    category: str
    recommendation: str
    priority: Priority
    impact: str  # static estimate, e.g. "+5 points"


class MatchResult(BaseModel):
    score: int = 0
    breakdown: ScoreBreakdown = ScoreBreakdown()
    explanation: Explanation = Explanation()
    suggestions: list[Suggestion] = []
    resume_experience: float | None = None
    job_experience: float | None = None
    label: str = ""
    next_steps: list[str] = []
