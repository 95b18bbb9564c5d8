"""
Scholarship Matching API Routes

Exposes the matching engine via REST API.
Main endpoint: POST /scholarships/matches
"""

import logging
from typing import Any, Dict, List

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel, Field

from settings import SCHOLARSHIP_DEFAULT_LIMIT, SCHOLARSHIP_MAX_LIMIT
from .logic.contracts import (
    UserProfile,
    SearchPreferences,
    ScholarshipProgram,
    MatchScore,
    ApplicationGuidance,
    ProgramRecommendation,
    ExecutiveSummary,
    RecommendationReport,
)
from .logic.aggregator import calculate_match_score
from .logic.guidance import generate_application_guidance
from .logic.summary import generate_executive_summary
from .logic.constants import ENGINE_VERSION
from .logic.engine import (
    find_matching_programs,
    build_recommendation_report,
    get_program,
    list_programs,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/scholarships", tags=["scholarships"])


# =============================================================================
# REQUEST/RESPONSE SCHEMAS
# =============================================================================

class MatchRequest(BaseModel):
    """Request body for the matching endpoints."""
    profile: UserProfile = Field(
        default_factory=UserProfile,
        description="Student profile (any field may be omitted)"
    )
    preferences: SearchPreferences = Field(
        default_factory=SearchPreferences,
        description="Search preferences (any section may be omitted)"
    )
    limit: int = Field(
        default=SCHOLARSHIP_DEFAULT_LIMIT,
        ge=1,
        le=SCHOLARSHIP_MAX_LIMIT,
        description="Max recommendations to return"
    )


class ScoreRequest(BaseModel):
    profile: UserProfile = Field(default_factory=UserProfile)
    preferences: SearchPreferences = Field(default_factory=SearchPreferences)


class MatchResponse(BaseModel):
    recommendations: List[ProgramRecommendation]
    count: int
    summary: ExecutiveSummary
    engine_version: str = ENGINE_VERSION


# =============================================================================
# ENDPOINTS
# =============================================================================

@router.get("/programs", response_model=List[ScholarshipProgram], summary="List catalog programs")
def get_programs():
    """Return the full scholarship catalog."""
    return list_programs()


@router.get("/programs/{program_id}", response_model=ScholarshipProgram, summary="Get a program")
def get_program_detail(program_id: str):
    return _get_program_or_404(program_id)


@router.get(
    "/programs/{program_id}/guidance",
    response_model=ApplicationGuidance,
    summary="Application guidance for a program"
)
def get_program_guidance(program_id: str):
    """
    Checklist, deadline timeline, process steps, visa notes, tips and
    backup options for one program.
    """
    program = _get_program_or_404(program_id)
    return generate_application_guidance(program)


@router.post(
    "/programs/{program_id}/score",
    response_model=MatchScore,
    summary="Score one program against a profile"
)
def score_program(program_id: str, request: ScoreRequest):
    program = _get_program_or_404(program_id)
    return calculate_match_score(program, request.profile, request.preferences)


@router.post("/matches", response_model=MatchResponse, summary="Get scholarship recommendations")
def get_matches(request: MatchRequest):
    """
    Rank catalog programs for the given profile and preferences.

    **Request Body:**
    - `profile`: Student's academic, professional and language background
    - `preferences`: Geographic, financial, academic and personal preferences
    - `limit`: Maximum number of recommendations (default: 8)

    **Response:**
    - Ranked recommendations with match scores, explanation and guidance
    - Executive summary of the top matches
    """
    recommendations = find_matching_programs(request.profile, request.preferences, request.limit)
    summary = generate_executive_summary(request.profile, request.preferences, recommendations)
    logger.info(f"Matched {len(recommendations)} programs (limit {request.limit})")
    return MatchResponse(
        recommendations=recommendations,
        count=len(recommendations),
        summary=summary,
    )


@router.post("/report", response_model=RecommendationReport, summary="Full recommendation report")
def get_report(request: MatchRequest):
    return build_recommendation_report(request.profile, request.preferences, request.limit)


# =============================================================================
# HEALTH CHECK
# =============================================================================

@router.get("/health", summary="Matching engine health check")
def health_check() -> Dict[str, Any]:
    """Check if the matching engine is operational."""
    return {
        "status": "ok",
        "engine": "scholarship_matching",
        "version": ENGINE_VERSION,
        "programs": len(list_programs()),
    }


def _get_program_or_404(program_id: str) -> ScholarshipProgram:
    program = get_program(program_id)
    if program is None:
        raise HTTPException(status_code=404, detail=f"Program not found: {program_id}")
    return program
