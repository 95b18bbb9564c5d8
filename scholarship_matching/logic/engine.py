"""
Matching Engine

Main orchestrator that combines all scoring components into a single pipeline.
This is the primary entry point for generating scholarship recommendations.
"""

import logging
import time
from datetime import datetime, timezone
from typing import List, Optional, Sequence

from .contracts import (
    UserProfile,
    SearchPreferences,
    ScholarshipProgram,
    ProgramRecommendation,
    RecommendationReport,
)
from .candidate_generator import filter_candidates
from .aggregator import batch_score
from .ranker import rank_candidates
from .output_assembler import assemble_recommendations
from .summary import generate_executive_summary
from .constants import DEFAULT_MATCH_LIMIT, ENGINE_VERSION

logger = logging.getLogger(__name__)


class MatchingEngine:
    """
    Scholarship matching engine that orchestrates the scoring pipeline.

    Pipeline flow:
    1. Candidate Generation - Filter the catalog by hard criteria
    2. Dimension Scoring - Score each dimension independently
    3. Aggregation - Combine dimension scores into an overall score
    4. Ranking - Stable sort by overall score and truncate
    5. Output Assembly - Explanation and guidance per recommendation
    """

    def __init__(self, catalog: Optional[Sequence[ScholarshipProgram]] = None):
        """
        Initialize the matching engine.

        Args:
            catalog: Programs to match against. If None, uses the built-in catalog.
        """
        self.catalog = tuple(_default_catalog() if catalog is None else catalog)
        self.version = ENGINE_VERSION

    def recommend(
        self,
        profile: Optional[UserProfile] = None,
        preferences: Optional[SearchPreferences] = None,
        limit: int = DEFAULT_MATCH_LIMIT
    ) -> List[ProgramRecommendation]:
        """
        Find and rank the best-matching programs.

        Args:
            profile: Student's profile (may be partial)
            preferences: Student's search preferences (may be partial)
            limit: Maximum number of recommendations

        Returns:
            Ranked recommendations, best first
        """
        profile = profile or UserProfile()
        preferences = preferences or SearchPreferences()
        start_time = time.perf_counter()

        candidates = filter_candidates(self.catalog, profile, preferences)
        logger.info(f"Candidates after filtering: {len(candidates)} of {len(self.catalog)}")

        scored = batch_score(candidates, profile, preferences)
        ranked = rank_candidates(scored, limit)
        recommendations = assemble_recommendations(ranked)

        processing_time = (time.perf_counter() - start_time) * 1000
        logger.info(f"Returning {len(recommendations)} recommendations ({processing_time:.2f}ms)")
        return recommendations

    def build_report(
        self,
        profile: Optional[UserProfile] = None,
        preferences: Optional[SearchPreferences] = None,
        limit: int = DEFAULT_MATCH_LIMIT
    ) -> RecommendationReport:
        """
        Run the pipeline and wrap the result with an executive summary.
        """
        profile = profile or UserProfile()
        preferences = preferences or SearchPreferences()

        recommendations = self.recommend(profile, preferences, limit)
        summary = generate_executive_summary(profile, preferences, recommendations)

        return RecommendationReport(
            generated_at=datetime.now(timezone.utc),
            user_profile=profile,
            search_preferences=preferences,
            recommendations=recommendations,
            executive_summary=summary,
            engine_version=self.version,
        )

    def get_program(self, program_id: str) -> Optional[ScholarshipProgram]:
        """Look up a catalog program by id; None when unknown."""
        for program in self.catalog:
            if program.id == program_id:
                return program.model_copy(deep=True)
        return None


# Convenience functions for simple usage
def find_matching_programs(
    profile: Optional[UserProfile] = None,
    preferences: Optional[SearchPreferences] = None,
    limit: int = DEFAULT_MATCH_LIMIT,
    catalog: Optional[Sequence[ScholarshipProgram]] = None
) -> List[ProgramRecommendation]:
    """
    Convenience function to get ranked recommendations.

    Args:
        profile: Student profile
        preferences: Search preferences
        limit: Maximum number of recommendations
        catalog: Optional catalog override (defaults to the built-in catalog)

    Returns:
        List of ProgramRecommendation
    """
    return MatchingEngine(catalog).recommend(profile, preferences, limit)


def build_recommendation_report(
    profile: Optional[UserProfile] = None,
    preferences: Optional[SearchPreferences] = None,
    limit: int = DEFAULT_MATCH_LIMIT,
    catalog: Optional[Sequence[ScholarshipProgram]] = None
) -> RecommendationReport:
    """Convenience function to get a full RecommendationReport."""
    return MatchingEngine(catalog).build_report(profile, preferences, limit)


def get_program(program_id: str) -> Optional[ScholarshipProgram]:
    return MatchingEngine().get_program(program_id)


def list_programs() -> List[ScholarshipProgram]:
    return [program.model_copy(deep=True) for program in _default_catalog()]


def _default_catalog() -> Sequence[ScholarshipProgram]:
    # Imported lazily: the catalog module itself depends on the contracts.
    from ..catalog import SCHOLARSHIP_PROGRAMS
    return SCHOLARSHIP_PROGRAMS
