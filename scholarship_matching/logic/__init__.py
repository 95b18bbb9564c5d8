"""
Scholarship Matching Logic Module

Provides the deterministic scoring engine for scholarship recommendations.
"""

from .contracts import (
    UserProfile,
    SearchPreferences,
    ScholarshipProgram,
    MatchScore,
    ProgramRecommendation,
    ApplicationGuidance,
    ExecutiveSummary,
    RecommendationReport,
    AcademicLevel,
    Region,
    CoverageTier,
)
from .aggregator import calculate_match_score
from .guidance import generate_application_guidance
from .summary import generate_executive_summary
from .output_assembler import generate_explanation
from .engine import (
    MatchingEngine,
    find_matching_programs,
    build_recommendation_report,
    get_program,
    list_programs,
)
from .session import MatchingSession, AppStep

__all__ = [
    # Main engine
    "MatchingEngine",
    "find_matching_programs",
    "build_recommendation_report",
    "calculate_match_score",
    "generate_application_guidance",
    "generate_executive_summary",
    "generate_explanation",
    "get_program",
    "list_programs",

    # Session
    "MatchingSession",
    "AppStep",

    # Contracts
    "UserProfile",
    "SearchPreferences",
    "ScholarshipProgram",
    "MatchScore",
    "ProgramRecommendation",
    "ApplicationGuidance",
    "ExecutiveSummary",
    "RecommendationReport",

    # Enums
    "AcademicLevel",
    "Region",
    "CoverageTier",
]
