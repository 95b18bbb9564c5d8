"""
Executive Summary

Aggregates the top recommendations into a short report overview.
"""

from typing import List

from .contracts import (
    UserProfile,
    SearchPreferences,
    ProgramRecommendation,
    ExecutiveSummary,
)
from .constants import SUMMARY_TOP_N, DEFAULT_CURRENCY

NO_CRITERIA_TEXT = "No specific criteria selected"
NO_TOP_RECOMMENDATION_TEXT = (
    "Unable to generate a top recommendation. Please refine your search criteria."
)
NOT_AVAILABLE = "N/A"


def generate_executive_summary(
    profile: UserProfile,
    preferences: SearchPreferences,
    recommendations: List[ProgramRecommendation]
) -> ExecutiveSummary:
    """
    Build the executive summary for an already-ranked recommendation list.

    Args:
        profile: Student profile
        preferences: Search preferences
        recommendations: Ranked recommendations (may be empty)

    Returns:
        ExecutiveSummary
    """
    return ExecutiveSummary(
        profile_overview=_profile_overview(profile),
        search_criteria=_search_criteria(preferences),
        key_findings=_key_findings(recommendations),
        top_recommendation=_top_recommendation(recommendations),
    )


def _profile_overview(profile: UserProfile) -> str:
    if profile.full_name:
        opening = f"Report prepared for {profile.full_name}, "
    else:
        opening = "Report prepared for candidate "

    details = [
        f"from {profile.nationality}" if profile.nationality else "",
        f"seeking {profile.desired_level} programs" if profile.desired_level else "",
        f"in {', '.join(profile.fields_of_study)}" if profile.fields_of_study else "",
    ]
    return opening + ", ".join(d for d in details if d)


def _search_criteria(preferences: SearchPreferences) -> str:
    clauses = []
    if preferences.geographic and preferences.geographic.regions:
        clauses.append(f"Regions: {', '.join(preferences.geographic.regions)}")
    if preferences.financial and preferences.financial.minimum_coverage:
        clauses.append(f"Funding: {preferences.financial.minimum_coverage} coverage preferred")
    if preferences.academic and preferences.academic.language_of_instruction:
        clauses.append(f"Language: {', '.join(preferences.academic.language_of_instruction)}")
    return " | ".join(clauses) or NO_CRITERIA_TEXT


def _key_findings(recommendations: List[ProgramRecommendation]) -> List[str]:
    top = recommendations[:SUMMARY_TOP_N]

    if top:
        first = top[0]
        top_match = (
            f"Top match: {first.program.scholarship_name} at {first.program.university_name} "
            f"(Score: {first.match_score.overall}/100)"
        )
        currency = first.program.coverage.currency or DEFAULT_CURRENCY
    else:
        top_match = f"Top match: {NOT_AVAILABLE}"
        currency = DEFAULT_CURRENCY

    total_value = sum(r.program.coverage.estimated_total_value for r in top)

    # Plain string sort: ISO dates order correctly, other formats may not.
    deadlines = sorted(r.program.application_deadline for r in top)
    earliest = deadlines[0] if deadlines else NOT_AVAILABLE
    latest = deadlines[-1] if deadlines else NOT_AVAILABLE

    return [
        f"Identified {len(recommendations)} matching scholarship programs",
        top_match,
        f"Total potential funding across top 3 programs: {total_value:,} {currency}",
        f"Application deadlines range from {earliest} to {latest}",
    ]


def _top_recommendation(recommendations: List[ProgramRecommendation]) -> str:
    if not recommendations:
        return NO_TOP_RECOMMENDATION_TEXT

    top = recommendations[0]
    program = top.program
    tuition = "full tuition coverage" if program.coverage.tuition else "partial tuition support"
    stipend = " plus a monthly living stipend" if program.coverage.living_stipend else ""
    return (
        f"We highly recommend the **{program.scholarship_name}** at {program.university_name}. "
        f"This {program.scholarship_type.lower()} scholarship offers {tuition}{stipend}. "
        f"The program aligns strongly with your profile with an overall match score of "
        f"{top.match_score.overall}/100."
    )
