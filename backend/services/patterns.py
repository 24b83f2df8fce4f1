"""Domain-context regexes: CTC, tenure, notice period, fresher, service firms.

Every pattern is compiled once and is case-insensitive. Python patterns keep
no cursor between calls, so each ``search``/``finditer`` is independent.
"""

import re

_NUMBER = r"\d+(?:\.\d+)?"

# "CTC: 8 LPA", "Expected CTC INR 12.5 Lakhs", "Current CTC 6 per annum"
COMPENSATION_RE = re.compile(
    rf"(?:CTC|Current CTC|Expected CTC)[:\s]*(?:INR\s*)?({_NUMBER})\s*"
    r"(?:LPA|Lakhs?|L|per annum)",
    re.IGNORECASE,
)

# "3 years experience", "2.5 yrs", "5+ years", "4-6 years of experience"
# A range is one mention; group 2 holds its upper bound when present.
TENURE_RE = re.compile(
    rf"\b({_NUMBER})(?:\s*(?:-|–|to)\s*({_NUMBER}))?\+?\s*(?:years?|yrs?)\b"
    r"(?:\s*of)?(?:\s*experience)?",
    re.IGNORECASE,
)

# "Notice Period: 30 days", "NP 2 months"
NOTICE_PERIOD_RE = re.compile(
    r"(?:Notice Period|NP)[:\s]*(\d+)\s*(days?|months?)",
    re.IGNORECASE,
)

FRESHER_RE = re.compile(
    r"\b(?:fresher|recent graduate|0-1 years?|entry level)\b",
    re.IGNORECASE,
)

OUTSOURCING_FIRMS: tuple[str, ...] = (
    "TCS",
    "Infosys",
    "Wipro",
    "HCL",
    "Tech Mahindra",
    "Cognizant",
    "Accenture",
    "Capgemini",
)

OUTSOURCING_RE = re.compile(
    r"\b(?:" + "|".join(re.escape(firm) for firm in OUTSOURCING_FIRMS) + r")\b",
    re.IGNORECASE,
)

# Lexical-overlap tokenizer and its fixed stop words
WORD_RE = re.compile(r"\b\w+\b")

STOP_WORDS: frozenset[str] = frozenset({
    "the", "is", "at", "which", "on", "a", "an", "and", "or", "but",
    "in", "with", "to", "for", "of", "as", "by",
})
