"""Shared test configuration and fixtures."""

import pytest

SCENARIO_A_RESUME = "Python Django React AWS, 3 years experience, CTC 8 LPA, TCS 2021-2023"
SCENARIO_A_JD = (
    "Senior Backend Engineer, 4-6 years, Python, Django, AWS, Docker, "
    "Kubernetes, REST API, Microservices"
)


@pytest.fixture
def scenario_a():
    """Mid-level resume from a service-based firm against a senior backend JD."""
    return SCENARIO_A_RESUME, SCENARIO_A_JD
