"""
Candidate Generator

Narrows the scholarship catalog by hard criteria from the student's profile
and preferences before scoring.

Filters are AND-combined and each one is applied only when its input is
present. When the combined filters leave nothing, the whole chain is discarded
and the full catalog is scored instead.
"""

import logging
from typing import List, Sequence

from .contracts import UserProfile, SearchPreferences, ScholarshipProgram
from .constants import FULL_COVERAGE, FULL_COVERAGE_TYPES, GLOBAL_REGION

logger = logging.getLogger(__name__)


def filter_candidates(
    catalog: Sequence[ScholarshipProgram],
    profile: UserProfile,
    preferences: SearchPreferences
) -> List[ScholarshipProgram]:
    """
    Generate candidate programs based on student profile and preferences.

    Applies, in order:
    - Desired academic level
    - Preferred regions (skipped when "Global" is listed)
    - Preferred countries (case-insensitive substring)
    - Full coverage requirement (Full or Fellowship awards only)

    Args:
        catalog: All programs
        profile: Student's profile
        preferences: Student's search preferences

    Returns:
        Filtered programs in catalog order, or the whole catalog when the
        filters match nothing
    """
    candidates = list(catalog)

    if profile.desired_level:
        candidates = [p for p in candidates if profile.desired_level in p.academic_level]
        logger.debug(f"After level filter ({profile.desired_level}): {len(candidates)}")

    geographic = preferences.geographic
    if geographic and geographic.regions and GLOBAL_REGION not in geographic.regions:
        candidates = [p for p in candidates if p.region in geographic.regions]
        logger.debug(f"After region filter {geographic.regions}: {len(candidates)}")

    if geographic and geographic.countries:
        countries = [c.lower() for c in geographic.countries]
        candidates = [
            p for p in candidates
            if any(country in p.country.lower() for country in countries)
        ]
        logger.debug(f"After country filter {geographic.countries}: {len(candidates)}")

    financial = preferences.financial
    if financial and financial.minimum_coverage == FULL_COVERAGE:
        candidates = [p for p in candidates if p.scholarship_type in FULL_COVERAGE_TYPES]
        logger.debug(f"After full coverage filter: {len(candidates)}")

    if not candidates:
        logger.warning(
            f"No programs matched the search filters; scoring the full catalog ({len(catalog)} programs)"
        )
        return list(catalog)

    return candidates
