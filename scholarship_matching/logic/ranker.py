"""
Ranker

Ranks scored candidates by overall match score.
"""

from typing import List, Optional

from .contracts import ScoredCandidate


def rank_candidates(
    scored_candidates: List[ScoredCandidate],
    limit: Optional[int] = None
) -> List[ScoredCandidate]:
    """
    Rank candidates by overall score (descending).

    The sort is stable, so ties keep their catalog order.

    Args:
        scored_candidates: List of scored candidates
        limit: Maximum number of candidates to keep (None keeps all)

    Returns:
        Sorted list by score, truncated to limit
    """
    ranked = sorted(
        scored_candidates,
        key=lambda x: x.score.overall,
        reverse=True
    )
    if limit is None:
        return ranked
    return ranked[:max(0, limit)]
