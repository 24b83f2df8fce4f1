"""Tests for vocabulary-based skill extraction."""

import pytest

from services.skill_extractor import extract_skills, get_skill_gap
from services.vocabulary import CANONICAL_SKILLS, SKILL_MAPPINGS


def test_extract_skills_finds_python():
    skills = extract_skills("Experience with Python and JavaScript")
    assert "python" in skills
    assert "javascript" in skills


def test_extract_skills_java_not_in_javascript():
    skills = extract_skills("Proficient in JavaScript and TypeScript")
    assert "javascript" in skills
    assert "java" not in skills  # "java" should not match inside "javascript"


def test_extract_skills_java_alone():
    skills = extract_skills("Core Java developer")
    assert skills == ["java"]


def test_extract_skills_avoids_substring_false_positives():
    skills = extract_skills("Managed a restaurant chain and a pythonesque sketch show")
    assert "rest api" not in skills  # "rest" inside "restaurant"
    assert "python" not in skills


def test_extract_skills_synonyms_map_to_canonical():
    skills = extract_skills("Deployed on K8s with EC2 and S3, CI/CD via Jenkins")
    assert "kubernetes" in skills
    assert "aws" in skills
    assert "devops" in skills


def test_extract_skills_multiword():
    skills = extract_skills("Knowledge of machine learning and container orchestration")
    assert "machine learning" in skills
    assert "kubernetes" in skills


def test_extract_skills_trailing_symbol_form():
    skills = extract_skills("Built dashboards in Angular2+ for banking clients")
    assert "angular" in skills


def test_extract_skills_dots_and_plus_match_literally():
    # "." and "+" in surface forms are not wildcards or repeats
    assert extract_skills("Wrote reactxjs, nodexjs and vuexjs plugins for angular22") == []
    skills = extract_skills("React.js on Node.js")
    assert "react" in skills
    assert "node" in skills


def test_extract_skills_case_insensitive():
    assert extract_skills("PYTHON, DJANGO") == ["python", "django"]


def test_extract_skills_vocabulary_order_not_text_order():
    skills = extract_skills("Django, then Flask, then Python")
    assert skills == ["python", "django", "flask"]


def test_extract_skills_each_skill_once():
    skills = extract_skills("python py python3 Python")
    assert skills == ["python"]


def test_extract_skills_empty():
    assert extract_skills("") == []
    assert extract_skills("Nothing technical here at all") == []


def test_vocabulary_is_read_only():
    assert len(SKILL_MAPPINGS) == 22
    assert CANONICAL_SKILLS[0] == "javascript"
    with pytest.raises(TypeError):
        SKILL_MAPPINGS["rust"] = ("rust",)


def test_get_skill_gap():
    matched, missing, extra = get_skill_gap(
        ["python", "aws", "django"],
        ["python", "java", "docker", "django"],
    )
    assert matched == ["python", "django"]
    assert missing == ["java", "docker"]
    assert extra == ["aws"]
