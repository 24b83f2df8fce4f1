"""End-to-end tests for the matching orchestrator."""

import pytest

from exceptions import InvalidInputError
from models.responses import MatchResult, Priority
from services.matcher import extract_profile, match


class TestScenarioA:
    def test_skills(self, scenario_a):
        result = match(*scenario_a)
        assert result.explanation.matched_skills == ["python", "aws", "django"]
        assert result.explanation.missing_skills == [
            "docker", "kubernetes", "rest api", "microservices",
        ]
        assert result.explanation.extra_skills == ["react"]

    def test_breakdown(self, scenario_a):
        result = match(*scenario_a)
        # 3/7 and 4/19, shown rounded; the final score uses the exact values
        assert result.breakdown.keyword_score == 43
        assert result.breakdown.semantic_score == 21
        # 2-year gap (3 vs 4-6 years) -> -15, TCS vs product JD -> -5
        assert result.breakdown.rule_score == 80
        assert result.score == 39

    def test_breakdown_is_json_integers(self, scenario_a):
        breakdown = match(*scenario_a).model_dump(mode="json")["breakdown"]
        assert breakdown == {"keyword_score": 43, "semantic_score": 21, "rule_score": 80}

    def test_experience(self, scenario_a):
        result = match(*scenario_a)
        assert result.resume_experience == 3.0
        assert result.job_experience == 5.0

    def test_explanation_text(self, scenario_a):
        result = match(*scenario_a)
        assert result.explanation.strengths[0].startswith("Strong match in 3 key skills")
        assert "service-based" in result.explanation.strengths[-1]
        assert result.explanation.weaknesses == [
            "Missing 4 required skills: docker, kubernetes, rest api, microservices",
            "Experience gap: Resume shows 3 years, JD requires 5+ years",
        ]

    def test_suggestions(self, scenario_a):
        result = match(*scenario_a)
        categories = [s.category for s in result.suggestions]
        # CTC is present, so no format suggestion
        assert categories == [
            "Skill Gap", "Skill Gap", "Skill Gap",
            "Keyword Optimization", "Experience Highlighting", "ATS Optimization",
        ]

    def test_verdict(self, scenario_a):
        result = match(*scenario_a)
        assert result.label == "Poor Match"
        assert len(result.next_steps) == 3


def test_scenario_b_fresher_mismatch():
    resume = "Python developer with 5 years experience in Django and AWS"
    jd = "Entry level Python developer, Django knowledge is a plus"
    result = match(resume, jd)
    assert result.job_experience == 0.0
    # 5-year gap -> -30, experienced candidate for fresher role -> -20
    assert result.breakdown.rule_score == 50.0


def test_graduation_year_before_tenure_is_not_a_range():
    resume = "Python developer. B.Tech 2020 - 3 years experience at a product startup"
    jd = "Python developer with 3 years experience"
    result = match(resume, jd)
    assert result.resume_experience == 3.0
    assert result.breakdown.rule_score == 100
    assert not any("Experience gap" in w for w in result.explanation.weaknesses)


def test_keyword_score_not_symmetric(scenario_a):
    resume, jd = scenario_a
    forward = match(resume, jd)
    backward = match(jd, resume)
    assert forward.breakdown.keyword_score != backward.breakdown.keyword_score
    assert 0 <= forward.breakdown.keyword_score <= 100
    assert 0 <= backward.breakdown.keyword_score <= 100


def test_match_is_idempotent(scenario_a):
    first = match(*scenario_a)
    second = match(*scenario_a)
    assert first.model_dump() == second.model_dump()


def test_jd_without_skills_scores_zero_keyword():
    result = match("Python and Django", "Great communicator wanted")
    assert result.breakdown.keyword_score == 0.0
    assert result.explanation.matched_skills == []


def test_empty_inputs_are_scored_not_rejected():
    result = match("", "")
    assert isinstance(result, MatchResult)
    assert result.breakdown.keyword_score == 0.0
    assert result.breakdown.semantic_score == 0.0
    assert result.breakdown.rule_score == 100.0
    assert result.score == 20
    assert result.resume_experience is None
    assert result.job_experience is None
    assert [s.category for s in result.suggestions] == ["Resume Format", "ATS Optimization"]
    assert result.suggestions[-1].priority == Priority.LOW


def test_nonsense_text_gets_low_score():
    result = match("asdf qwer zxcv", "lorem ipsum dolor")
    assert 0 <= result.score <= 20


@pytest.mark.parametrize(
    "resume, jd",
    [(None, "Python"), (b"Python", "Python"), ("Python", 42)],
)
def test_non_text_input_raises(resume, jd):
    with pytest.raises(InvalidInputError):
        match(resume, jd)


def test_invalid_input_error_names_field():
    with pytest.raises(InvalidInputError, match="job_description must be text"):
        match("Python", None)


def test_extract_profile(scenario_a):
    profile = extract_profile(scenario_a[0])
    assert profile.skills == ["python", "react", "aws", "django"]
    assert profile.experience_years == 3.0
    assert profile.context.compensation_lpa == 8.0
    assert profile.context.has_outsourcing_experience is True
