"""
Matching Session State

Immutable state carried through the profile -> questionnaire -> results
wizard. Every transition returns a new MatchingSession; nothing is mutated
in place and there is no global store. A session is created when a user
starts the wizard and dropped when they leave.
"""

from enum import Enum
from typing import Any, Dict, Optional, Union

from pydantic import BaseModel, Field

from .contracts import UserProfile, SearchPreferences, RecommendationReport
from .constants import DEFAULT_MATCH_LIMIT
from .engine import MatchingEngine


class AppStep(str, Enum):
    LANDING = "landing"
    PROFILE = "profile"
    QUESTIONNAIRE = "questionnaire"
    PROCESSING = "processing"
    RESULTS = "results"
    GUIDANCE = "guidance"


class MatchingSession(BaseModel):
    current_step: AppStep = AppStep.LANDING
    profile: UserProfile = Field(default_factory=UserProfile)
    preferences: SearchPreferences = Field(default_factory=SearchPreferences)
    report: Optional[RecommendationReport] = None
    selected_program_id: Optional[str] = None

    class Config:
        frozen = True

    def set_step(self, step: AppStep) -> "MatchingSession":
        return self.model_copy(update={"current_step": AppStep(step)})

    def update_profile(
        self,
        partial: Union[UserProfile, Dict[str, Any]]
    ) -> "MatchingSession":
        """Merge the given top-level profile fields over the current ones."""
        profile = UserProfile.model_validate(_merge(self.profile, partial))
        return self.model_copy(update={"profile": profile})

    def update_preferences(
        self,
        partial: Union[SearchPreferences, Dict[str, Any]]
    ) -> "MatchingSession":
        """
        Merge preference sections over the current ones. A section
        (geographic, financial, ...) is replaced as a whole.
        """
        preferences = SearchPreferences.model_validate(_merge(self.preferences, partial))
        return self.model_copy(update={"preferences": preferences})

    def set_report(self, report: RecommendationReport) -> "MatchingSession":
        return self.model_copy(update={"report": report})

    def select_program(self, program_id: str) -> "MatchingSession":
        return self.model_copy(update={"selected_program_id": program_id})

    def reset(self) -> "MatchingSession":
        return MatchingSession()

    def run_matching(
        self,
        engine: Optional[MatchingEngine] = None,
        limit: int = DEFAULT_MATCH_LIMIT
    ) -> "MatchingSession":
        """Build a report from the collected answers and move to results."""
        engine = engine or MatchingEngine()
        report = engine.build_report(self.profile, self.preferences, limit)
        return self.model_copy(update={"report": report, "current_step": AppStep.RESULTS})


def _merge(current: BaseModel, partial: Union[BaseModel, Dict[str, Any]]) -> Dict[str, Any]:
    if isinstance(partial, BaseModel):
        partial = partial.model_dump(exclude_unset=True)
    return {**current.model_dump(exclude_unset=True), **partial}
