"""Canonical skill vocabulary for the Indian tech job market.

Maps each canonical skill to the surface forms it may appear as in free text.
Declaration order is significant: extracted skill lists, extra-skill
truncation and suggestion output all follow it.
"""

import re
from types import MappingProxyType

SKILL_MAPPINGS: MappingProxyType = MappingProxyType({
    "javascript": ("js", "javascript", "ecmascript", "es6", "es2015"),
    "python": ("python", "py", "python3"),
    "react": ("react", "reactjs", "react.js", "react native"),
    "node": ("node", "nodejs", "node.js", "express"),
    "java": ("java", "core java", "j2ee", "spring", "spring boot"),
    "aws": ("aws", "amazon web services", "ec2", "s3", "lambda"),
    "docker": ("docker", "containerization", "containers"),
    "kubernetes": ("kubernetes", "k8s", "container orchestration"),
    "machine learning": ("ml", "machine learning", "ai/ml", "artificial intelligence"),
    "sql": ("sql", "mysql", "postgresql", "oracle", "sql server"),
    "mongodb": ("mongodb", "mongo", "nosql"),
    "git": ("git", "github", "gitlab", "version control"),
    "agile": ("agile", "scrum", "sprint", "kanban"),
    "rest api": ("rest", "rest api", "restful", "api"),
    "microservices": ("microservices", "micro services", "microservice architecture"),
    "devops": ("devops", "ci/cd", "jenkins", "gitlab ci"),
    "angular": ("angular", "angularjs", "angular2+"),
    "vue": ("vue", "vuejs", "vue.js"),
    "django": ("django", "django rest framework", "drf"),
    "flask": ("flask", "flask-restful"),
    "azure": ("azure", "microsoft azure", "azure devops"),
    "gcp": ("gcp", "google cloud", "google cloud platform"),
})

CANONICAL_SKILLS: tuple[str, ...] = tuple(SKILL_MAPPINGS)


def surface_form_pattern(form: str) -> re.Pattern:
    """Compile a whole-word/phrase matcher for one surface form.

    Lookarounds stand in for ``\\b`` so forms that start or end with a
    non-word character (``angular2+``, ``.net``) still get boundary checks.
    """
    return re.compile(rf"(?<!\w){re.escape(form.lower())}(?!\w)")


# Compiled once at import; re.Pattern objects hold no search state
SKILL_PATTERNS: MappingProxyType = MappingProxyType({
    skill: tuple(surface_form_pattern(form) for form in forms)
    for skill, forms in SKILL_MAPPINGS.items()
})
