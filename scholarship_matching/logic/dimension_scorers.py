"""
Dimension Scorers

Individual scoring functions for each evaluation dimension.
Each scorer produces a score between 0 and 100 for one program against a
(possibly partial) profile and preferences. Missing inputs contribute nothing
or a neutral value; no scorer raises.
All logic is deterministic - no AI/ML components.
"""

from .contracts import UserProfile, SearchPreferences, ScholarshipProgram
from .constants import (
    MIN_SCORE,
    MAX_SCORE,
    LEVEL_MATCH_POINTS,
    FIELD_MATCH_POINTS,
    LANGUAGE_MATCH_POINTS,
    NO_LANGUAGE_INFO_POINTS,
    ALL_FIELDS_WILDCARD,
    STRONG_PROFICIENCIES,
    FALLBACK_LANGUAGE,
    COVERAGE_POINTS,
    FULL_COVERAGE,
    FULL_COVERAGE_MISMATCH_PENALTY,
    STIPEND_INTEREST_BONUS,
    HOUSING_INTEREST_BONUS,
    CAREER_KEYWORDS,
    CAREER_BASE_SCORE,
    CAREER_KEYWORD_POINTS,
    CAREER_NEUTRAL_SCORE,
    EXPERIENCE_MEETS_REQUIREMENT_BONUS,
    EXPERIENCE_BELOW_REQUIREMENT_PENALTY,
    EXPERIENCE_NOT_REQUIRED_BONUS,
    COMPETITIVENESS_BASE_MAP,
    DEFAULT_ACCEPTANCE_BASE,
    GPA_COMFORT_MARGIN,
    GPA_WELL_ABOVE_BONUS,
    GPA_MEETS_BONUS,
    GPA_BELOW_PENALTY,
    LONG_TERM_BASE_SCORE,
    PRESTIGIOUS_SCHOLARSHIPS,
    PRESTIGE_BONUS,
    FUNDING_VALUE_BANDS,
    REGION_MATCH_BONUS,
    GLOBAL_REGION,
)


def score_academic_fit(
    program: ScholarshipProgram,
    profile: UserProfile,
    preferences: SearchPreferences
) -> float:
    """
    Score academic alignment between the student and the program.

    Considers:
    - Desired level offered by the program
    - Field of study overlap (or an "All Fields" program)
    - Language of instruction vs. the student's languages
    """
    score = 0

    if profile.desired_level and profile.desired_level in program.academic_level:
        score += LEVEL_MATCH_POINTS

    if profile.fields_of_study and _has_field_match(profile.fields_of_study, program.fields_of_study):
        score += FIELD_MATCH_POINTS

    if profile.languages:
        if _has_instruction_language(profile, program):
            score += LANGUAGE_MATCH_POINTS
    else:
        score += NO_LANGUAGE_INFO_POINTS

    return clamp_score(score)


def score_financial_feasibility(
    program: ScholarshipProgram,
    profile: UserProfile,
    preferences: SearchPreferences
) -> float:
    """
    Score how much of the cost of study the scholarship covers, adjusted for
    the student's financial preferences.

    The running total may leave the 0-100 range; it is clamped once, at the end.
    """
    coverage = program.coverage
    score = sum(
        points for flag, points in COVERAGE_POINTS.items()
        if getattr(coverage, flag)
    )

    financial = preferences.financial
    if financial:
        if financial.minimum_coverage == FULL_COVERAGE and program.scholarship_type != FULL_COVERAGE:
            score += FULL_COVERAGE_MISMATCH_PENALTY
        if financial.interested_in_stipend and coverage.living_stipend:
            score += STIPEND_INTEREST_BONUS
        if financial.interested_in_housing and coverage.housing:
            score += HOUSING_INTEREST_BONUS

    return clamp_score(score)


def score_career_alignment(
    program: ScholarshipProgram,
    profile: UserProfile,
    preferences: SearchPreferences
) -> float:
    """
    Score career goal alignment and professional experience fit.
    """
    if profile.career_goals:
        goals = profile.career_goals.lower()
        program_text = (
            program.description.lower() + " " + " ".join(program.fields_of_study).lower()
        )
        match_count = sum(
            1 for keyword in CAREER_KEYWORDS
            if keyword in goals and keyword in program_text
        )
        score = min(MAX_SCORE, CAREER_BASE_SCORE + match_count * CAREER_KEYWORD_POINTS)
    else:
        score = CAREER_NEUTRAL_SCORE

    if profile.professional_experience:
        total_years = sum(exp.years for exp in profile.professional_experience)
        required_years = program.requirements.work_experience
        if required_years:
            if total_years >= required_years:
                score += EXPERIENCE_MEETS_REQUIREMENT_BONUS
            else:
                score += EXPERIENCE_BELOW_REQUIREMENT_PENALTY
        else:
            score += EXPERIENCE_NOT_REQUIRED_BONUS

    return clamp_score(score)


def score_acceptance_probability(
    program: ScholarshipProgram,
    profile: UserProfile,
    preferences: SearchPreferences
) -> float:
    """
    Score the likelihood of acceptance from program competitiveness,
    adjusted by the most recent GPA against the program minimum.
    """
    score = COMPETITIVENESS_BASE_MAP.get(program.competitiveness, DEFAULT_ACCEPTANCE_BASE)

    if profile.academic_background:
        latest_gpa = profile.academic_background[0].gpa
        minimum_gpa = program.requirements.minimum_gpa
        if latest_gpa and minimum_gpa:
            if latest_gpa >= minimum_gpa + GPA_COMFORT_MARGIN:
                score += GPA_WELL_ABOVE_BONUS
            elif latest_gpa >= minimum_gpa:
                score += GPA_MEETS_BONUS
            else:
                score += GPA_BELOW_PENALTY

    return clamp_score(score)


def score_long_term_value(
    program: ScholarshipProgram,
    profile: UserProfile,
    preferences: SearchPreferences
) -> float:
    """
    Score the long-term value of the award: prestige, funding size and
    regional preference.
    """
    score = LONG_TERM_BASE_SCORE

    scholarship_name = program.scholarship_name.lower()
    if any(name in scholarship_name for name in PRESTIGIOUS_SCHOLARSHIPS):
        score += PRESTIGE_BONUS

    total_value = program.coverage.estimated_total_value
    for threshold, bonus in FUNDING_VALUE_BANDS:
        if total_value > threshold:
            score += bonus
            break

    geographic = preferences.geographic
    if geographic and geographic.regions:
        if program.region in geographic.regions or GLOBAL_REGION in geographic.regions:
            score += REGION_MATCH_BONUS

    return clamp_score(score)


# =============================================================================
# HELPER FUNCTIONS
# =============================================================================

def clamp_score(value: float) -> float:
    """Clamp a raw score to the 0-100 range."""
    return max(MIN_SCORE, min(MAX_SCORE, value))


def _has_field_match(profile_fields, program_fields) -> bool:
    """Substring match of any student field against any program field."""
    for field in profile_fields:
        needle = field.lower()
        for program_field in program_fields:
            if needle in program_field.lower() or program_field == ALL_FIELDS_WILDCARD:
                return True
    return False


def _has_instruction_language(profile: UserProfile, program: ScholarshipProgram) -> bool:
    """
    True when the student speaks the language of instruction well enough.
    A strong English speaker counts for any program.
    """
    instruction = program.language_of_instruction.lower()
    for language in profile.languages:
        name = language.name.lower()
        strong = language.proficiency in STRONG_PROFICIENCIES
        if name in instruction:
            if strong:
                return True
        elif name == FALLBACK_LANGUAGE and strong:
            return True
    return False
