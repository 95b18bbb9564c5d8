"""
Scoring Engine Constants

Defines all point values, weights, thresholds and keyword lists used by the
scholarship scoring engine. Scores are integers on a 0-100 scale.
All values are deterministic with no AI/ML components.
"""

from typing import Dict, List, Tuple

# =============================================================================
# SCORE BOUNDS
# =============================================================================

MIN_SCORE = 0
MAX_SCORE = 100

# =============================================================================
# ACADEMIC FIT
# =============================================================================

LEVEL_MATCH_POINTS = 30
FIELD_MATCH_POINTS = 40
LANGUAGE_MATCH_POINTS = 30
NO_LANGUAGE_INFO_POINTS = 15  # Neutral when the profile lists no languages

ALL_FIELDS_WILDCARD = "All Fields"
STRONG_PROFICIENCIES: Tuple[str, ...] = ("Native", "Fluent", "Advanced")
FALLBACK_LANGUAGE = "english"

# =============================================================================
# FINANCIAL FEASIBILITY
# =============================================================================

# Coverage flag -> points. Sum exceeds 100; clamped once at the end.
COVERAGE_POINTS: Dict[str, int] = {
    "tuition": 30,
    "living_stipend": 25,
    "housing": 15,
    "travel": 15,
    "health_insurance": 15,
}

FULL_COVERAGE_MISMATCH_PENALTY = -30
STIPEND_INTEREST_BONUS = 10
HOUSING_INTEREST_BONUS = 10

FULL_COVERAGE = "Full"
FULL_COVERAGE_TYPES: Tuple[str, ...] = ("Full", "Fellowship")

# =============================================================================
# CAREER ALIGNMENT
# =============================================================================

CAREER_KEYWORDS: List[str] = [
    "research",
    "academic",
    "industry",
    "leadership",
    "development",
    "international",
    "business",
    "technology",
    "science",
    "policy",
]

CAREER_BASE_SCORE = 40
CAREER_KEYWORD_POINTS = 15
CAREER_NEUTRAL_SCORE = 50

EXPERIENCE_MEETS_REQUIREMENT_BONUS = 20
EXPERIENCE_BELOW_REQUIREMENT_PENALTY = -10
EXPERIENCE_NOT_REQUIRED_BONUS = 10

# =============================================================================
# ACCEPTANCE PROBABILITY
# =============================================================================

COMPETITIVENESS_BASE_MAP: Dict[str, int] = {
    "Low": 80,
    "Medium": 65,
    "High": 45,
    "Very High": 25,
}
DEFAULT_ACCEPTANCE_BASE = 50

GPA_COMFORT_MARGIN = 0.5
GPA_WELL_ABOVE_BONUS = 15
GPA_MEETS_BONUS = 5
GPA_BELOW_PENALTY = -20

# =============================================================================
# LONG-TERM VALUE
# =============================================================================

LONG_TERM_BASE_SCORE = 50

PRESTIGIOUS_SCHOLARSHIPS: List[str] = [
    "erasmus",
    "fulbright",
    "gates",
    "knight",
    "chevening",
    "daad",
    "rhodes",
    "clarendon",
]
PRESTIGE_BONUS = 25

# (threshold, bonus) checked highest first; only the first band met applies
FUNDING_VALUE_BANDS: List[Tuple[int, int]] = [
    (100000, 15),
    (50000, 10),
    (25000, 5),
]

REGION_MATCH_BONUS = 10
GLOBAL_REGION = "Global"

# =============================================================================
# DIMENSION WEIGHTS
# =============================================================================

# Weights for each scoring dimension (must sum to 1.0)
DIMENSION_WEIGHTS: Dict[str, float] = {
    "academic_fit": 0.25,
    "financial_feasibility": 0.25,
    "career_alignment": 0.20,
    "acceptance_probability": 0.15,
    "long_term_value": 0.15,
}

# =============================================================================
# EXPLANATION THRESHOLDS
# =============================================================================

STRONG_ACADEMIC_THRESHOLD = 80
GOOD_ACADEMIC_THRESHOLD = 60
EXCELLENT_FINANCIAL_THRESHOLD = 80
SOLID_FINANCIAL_THRESHOLD = 60
CAREER_ALIGNMENT_THRESHOLD = 70
REASONABLE_ACCEPTANCE_THRESHOLD = 60
COMPETITIVE_ACCEPTANCE_THRESHOLD = 40
HIGH_VALUE_THRESHOLD = 70

MAX_BENEFITS_IN_EXPLANATION = 2

# =============================================================================
# RANKING CONFIGURATION
# =============================================================================

DEFAULT_MATCH_LIMIT = 10
SUMMARY_TOP_N = 3
DEFAULT_CURRENCY = "USD"

ENGINE_VERSION = "1.0.0"
