"""
Shared fixtures for the scholarship matching tests.
"""

import pytest

from scholarship_matching.logic.contracts import (
    ScholarshipProgram,
    ScholarshipCoverage,
    Requirements,
    LanguageRequirement,
    UserProfile,
    SearchPreferences,
    FinancialCriteria,
    Language,
)


def make_program(**overrides) -> ScholarshipProgram:
    """Build a catalog program with sensible defaults; override any field."""
    data = dict(
        id="test-phd-cs",
        program_name="PhD in Computer Science",
        university_name="Test University",
        country="Germany",
        city="Berlin",
        region="Europe",
        academic_level=["PhD"],
        fields_of_study=["Computer Science", "Engineering"],
        duration="3 years",
        language_of_instruction="English",
        scholarship_name="Test Research Fellowship",
        scholarship_type="Full",
        funding_organization="Test Foundation",
        coverage=ScholarshipCoverage(
            tuition=True, living_stipend=True, housing=True, travel=True,
            health_insurance=True, estimated_total_value=60000, currency="EUR",
        ),
        requirements=Requirements(
            language_requirements=[
                LanguageRequirement(language="English", test="IELTS", minimum_score="6.5")
            ],
        ),
        application_deadline="2025-06-01",
        program_start_date="2025-10-01",
        program_url="https://example.org/program",
        scholarship_url="https://example.org/scholarship",
        description="Doctoral research training in machine learning systems.",
        benefits=["Monthly stipend", "Conference travel", "Mentoring"],
        competitiveness="Medium",
    )
    data.update(overrides)
    return ScholarshipProgram(**data)


@pytest.fixture
def phd_cs_program():
    return make_program()


@pytest.fixture
def phd_cs_profile():
    return UserProfile(
        desired_level="PhD",
        fields_of_study=["Computer Science"],
        languages=[Language(name="English", proficiency="Fluent")],
    )


@pytest.fixture
def full_coverage_preferences():
    return SearchPreferences(financial=FinancialCriteria(minimum_coverage="Full"))


@pytest.fixture
def empty_profile():
    return UserProfile()


@pytest.fixture
def empty_preferences():
    return SearchPreferences()
