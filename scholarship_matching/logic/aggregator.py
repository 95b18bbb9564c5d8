"""
Score Aggregator

Combines individual dimension scores into an overall match score.
Applies weighting and rounding.
"""

import math
from typing import Dict, List, Optional

from .contracts import (
    UserProfile,
    SearchPreferences,
    ScholarshipProgram,
    MatchScore,
    ScoredCandidate,
)
from .dimension_scorers import (
    score_academic_fit,
    score_financial_feasibility,
    score_career_alignment,
    score_acceptance_probability,
    score_long_term_value,
    clamp_score,
)
from .constants import DIMENSION_WEIGHTS


SCORERS = {
    "academic_fit": score_academic_fit,
    "financial_feasibility": score_financial_feasibility,
    "career_alignment": score_career_alignment,
    "acceptance_probability": score_acceptance_probability,
    "long_term_value": score_long_term_value,
}


def calculate_match_score(
    program: ScholarshipProgram,
    profile: Optional[UserProfile] = None,
    preferences: Optional[SearchPreferences] = None
) -> MatchScore:
    """
    Compute all dimension scores and aggregate into an overall score.

    Args:
        program: Catalog program to score
        profile: Student's (possibly partial) profile
        preferences: Student's (possibly partial) search preferences

    Returns:
        MatchScore with five rounded sub-scores and the weighted overall
    """
    profile = profile or UserProfile()
    preferences = preferences or SearchPreferences()

    dimension_scores: Dict[str, float] = {
        dimension: scorer(program, profile, preferences)
        for dimension, scorer in SCORERS.items()
    }

    overall = sum(
        dimension_scores[dimension] * weight
        for dimension, weight in DIMENSION_WEIGHTS.items()
    )

    return MatchScore(
        overall=round_score(clamp_score(overall)),
        **{dimension: round_score(score) for dimension, score in dimension_scores.items()}
    )


def batch_score(
    programs: List[ScholarshipProgram],
    profile: Optional[UserProfile] = None,
    preferences: Optional[SearchPreferences] = None
) -> List[ScoredCandidate]:
    """
    Score multiple programs in batch, preserving input order.
    """
    return [
        ScoredCandidate(program=program, score=calculate_match_score(program, profile, preferences))
        for program in programs
    ]


def round_score(value: float) -> int:
    """Round half up (62.5 -> 63), unlike round()'s half-to-even."""
    return int(math.floor(value + 0.5))
