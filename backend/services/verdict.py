"""Score label and next steps shown alongside a match result."""

STRONG_MATCH_THRESHOLD = 70

# (minimum score, label), checked highest first
SCORE_LABELS: tuple[tuple[int, str], ...] = (
    (90, "Excellent Match"),
    (70, "Good Match"),
    (50, "Moderate Match"),
)
DEFAULT_LABEL = "Poor Match"

_APPLY_STEPS: tuple[str, ...] = (
    "Apply to this position - you're a strong candidate!",
    "Tailor your resume using the suggestions above for an even better match",
    "Prepare for interviews by focusing on your matched skills",
)

_UPSKILL_STEPS: tuple[str, ...] = (
    "Work on the missing skills through online courses (Coursera, Udemy India, YouTube)",
    "Update your resume with relevant projects showcasing required technologies",
    "Consider similar roles that better match your current skill level",
)


def score_label(score: int) -> str:
    for threshold, label in SCORE_LABELS:
        if score >= threshold:
            return label
    return DEFAULT_LABEL


def next_steps(score: int) -> list[str]:
    if score >= STRONG_MATCH_THRESHOLD:
        return list(_APPLY_STEPS)
    return list(_UPSKILL_STEPS)
