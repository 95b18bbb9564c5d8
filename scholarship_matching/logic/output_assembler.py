"""
Output Assembler

Transforms ranked candidates into ProgramRecommendation records.
Generates the templated explanation for each recommendation.
"""

from typing import List

from .contracts import (
    ScholarshipProgram,
    MatchScore,
    ScoredCandidate,
    ProgramRecommendation,
)
from .constants import (
    STRONG_ACADEMIC_THRESHOLD,
    GOOD_ACADEMIC_THRESHOLD,
    EXCELLENT_FINANCIAL_THRESHOLD,
    SOLID_FINANCIAL_THRESHOLD,
    CAREER_ALIGNMENT_THRESHOLD,
    REASONABLE_ACCEPTANCE_THRESHOLD,
    COMPETITIVE_ACCEPTANCE_THRESHOLD,
    HIGH_VALUE_THRESHOLD,
    MAX_BENEFITS_IN_EXPLANATION,
)
from .guidance import generate_application_guidance


def generate_explanation(
    program: ScholarshipProgram,
    score: MatchScore,
    rank: int
) -> str:
    """
    Explain why a program is recommended.

    Each score threshold contributes at most one reason; reasons keep a fixed
    order and are followed by the program description.

    Args:
        program: Recommended program
        score: Its match score
        rank: 1-based position in the ranked list

    Returns:
        Markdown-flavoured explanation text
    """
    reasons: List[str] = []

    if score.academic_fit >= STRONG_ACADEMIC_THRESHOLD:
        reasons.append("Strong academic alignment with your desired field and level of study")
    elif score.academic_fit >= GOOD_ACADEMIC_THRESHOLD:
        reasons.append("Good match for your academic background")

    if score.financial_feasibility >= EXCELLENT_FINANCIAL_THRESHOLD:
        covered = "living stipend" if program.coverage.living_stipend else "tuition"
        reasons.append(f"Excellent financial coverage including {covered}")
    elif score.financial_feasibility >= SOLID_FINANCIAL_THRESHOLD:
        reasons.append(f"Solid financial support through {program.scholarship_type.lower()} funding")

    if score.career_alignment >= CAREER_ALIGNMENT_THRESHOLD:
        reasons.append("Aligns well with your career goals")

    if score.acceptance_probability >= REASONABLE_ACCEPTANCE_THRESHOLD:
        reasons.append("Reasonable acceptance probability based on your profile")
    elif score.acceptance_probability < COMPETITIVE_ACCEPTANCE_THRESHOLD:
        reasons.append("Highly competitive but offers exceptional value")

    if score.long_term_value >= HIGH_VALUE_THRESHOLD:
        reasons.append("High long-term value for career development")

    if program.benefits:
        highlights = ", ".join(program.benefits[:MAX_BENEFITS_IN_EXPLANATION])
        reasons.append(f"Key benefits include: {highlights}")

    if rank == 1:
        rank_text = "Top recommendation"
    elif rank <= 3:
        rank_text = "Strongly recommended"
    else:
        rank_text = "Recommended option"

    return f"**{rank_text}** (Score: {score.overall}/100)\n\n{'. '.join(reasons)}. {program.description}"


def assemble_recommendation(
    scored: ScoredCandidate,
    rank: int
) -> ProgramRecommendation:
    """
    Convert a ScoredCandidate into a ProgramRecommendation.

    Args:
        scored: The scored candidate
        rank: Overall ranking position (1-based)

    Returns:
        ProgramRecommendation object
    """
    # Recommendations never alias catalog records
    return ProgramRecommendation(
        program=scored.program.model_copy(deep=True),
        rank=rank,
        match_score=scored.score,
        explanation=generate_explanation(scored.program, scored.score, rank),
        application_guidance=generate_application_guidance(scored.program),
    )


def assemble_recommendations(
    ranked: List[ScoredCandidate]
) -> List[ProgramRecommendation]:
    """Build the ranked recommendation list with dense 1-based ranks."""
    return [
        assemble_recommendation(scored, rank)
        for rank, scored in enumerate(ranked, 1)
    ]
