"""
Test executive summary generation.
"""

from scholarship_matching.logic import generate_executive_summary
from scholarship_matching.logic.contracts import (
    UserProfile,
    SearchPreferences,
    GeographicPreferences,
    FinancialCriteria,
    AcademicConditions,
    ScholarshipCoverage,
    MatchScore,
    ApplicationGuidance,
    ProgramRecommendation,
)
from scholarship_matching.tests.conftest import make_program


def _recommendation(rank, overall=80, **program_fields):
    score = MatchScore(
        overall=overall, academic_fit=80, financial_feasibility=80,
        career_alignment=80, acceptance_probability=80, long_term_value=80,
    )
    return ProgramRecommendation(
        program=make_program(id=f"program-{rank}", **program_fields),
        rank=rank,
        match_score=score,
        explanation="",
        application_guidance=ApplicationGuidance(),
    )


def _coverage(value, currency="EUR", **flags):
    return ScholarshipCoverage(estimated_total_value=value, currency=currency, **flags)


def test_profile_overview_with_name():
    profile = UserProfile(
        full_name="Ana Lima",
        nationality="Brazil",
        desired_level="PhD",
        fields_of_study=["Computer Science", "Mathematics"],
    )

    summary = generate_executive_summary(profile, SearchPreferences(), [])

    assert summary.profile_overview == (
        "Report prepared for Ana Lima, from Brazil, seeking PhD programs, "
        "in Computer Science, Mathematics"
    )


def test_profile_overview_without_name():
    summary = generate_executive_summary(UserProfile(nationality="Kenya"), SearchPreferences(), [])
    assert summary.profile_overview == "Report prepared for candidate from Kenya"


def test_search_criteria_joins_clauses():
    preferences = SearchPreferences(
        geographic=GeographicPreferences(regions=["Europe", "Asia"]),
        financial=FinancialCriteria(minimum_coverage="Full"),
        academic=AcademicConditions(language_of_instruction=["English"]),
    )

    summary = generate_executive_summary(UserProfile(), preferences, [])

    assert summary.search_criteria == (
        "Regions: Europe, Asia | Funding: Full coverage preferred | Language: English"
    )


def test_search_criteria_when_nothing_selected():
    summary = generate_executive_summary(UserProfile(), SearchPreferences(), [])
    assert summary.search_criteria == "No specific criteria selected"


def test_key_findings_use_top_three_only():
    recommendations = [
        _recommendation(1, overall=91, coverage=_coverage(60000),
                        scholarship_name="Alpha Award", university_name="North University"),
        _recommendation(2, coverage=_coverage(52500, currency="USD")),
        _recommendation(3, coverage=_coverage(40000)),
        _recommendation(4, coverage=_coverage(900000)),
    ]

    findings = generate_executive_summary(UserProfile(), SearchPreferences(), recommendations).key_findings

    assert findings == [
        "Identified 4 matching scholarship programs",
        "Top match: Alpha Award at North University (Score: 91/100)",
        "Total potential funding across top 3 programs: 152,500 EUR",
        "Application deadlines range from 2025-06-01 to 2025-06-01",
    ]


def test_deadline_range_uses_plain_string_order():
    recommendations = [
        _recommendation(1, application_deadline="9/1/2025"),
        _recommendation(2, application_deadline="10/15/2025"),
    ]

    findings = generate_executive_summary(UserProfile(), SearchPreferences(), recommendations).key_findings

    assert findings[3] == "Application deadlines range from 10/15/2025 to 9/1/2025"


def test_empty_recommendations_fall_back():
    summary = generate_executive_summary(UserProfile(), SearchPreferences(), [])

    assert summary.key_findings[0] == "Identified 0 matching scholarship programs"
    assert summary.key_findings[1] == "Top match: N/A"
    assert summary.key_findings[2] == "Total potential funding across top 3 programs: 0 USD"
    assert summary.key_findings[3] == "Application deadlines range from N/A to N/A"
    assert summary.top_recommendation == (
        "Unable to generate a top recommendation. Please refine your search criteria."
    )


def test_top_recommendation_describes_coverage():
    full = _recommendation(
        1, overall=88, scholarship_name="Alpha Award", university_name="North University",
        coverage=_coverage(60000, tuition=True, living_stipend=True),
    )
    partial = _recommendation(
        1, overall=60, scholarship_name="Beta Grant", university_name="South College",
        scholarship_type="Partial", coverage=_coverage(10000),
    )

    full_text = generate_executive_summary(UserProfile(), SearchPreferences(), [full]).top_recommendation
    partial_text = generate_executive_summary(UserProfile(), SearchPreferences(), [partial]).top_recommendation

    assert full_text == (
        "We highly recommend the **Alpha Award** at North University. "
        "This full scholarship offers full tuition coverage plus a monthly living stipend. "
        "The program aligns strongly with your profile with an overall match score of 88/100."
    )
    assert "This partial scholarship offers partial tuition support." in partial_text
