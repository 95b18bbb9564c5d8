"""
Test the immutable matching session.
"""

import pytest
from pydantic import ValidationError

from scholarship_matching.logic import MatchingSession, AppStep, MatchingEngine
from scholarship_matching.logic.contracts import FinancialCriteria, GeographicPreferences
from scholarship_matching.tests.conftest import make_program


def test_new_session_starts_on_landing():
    session = MatchingSession()
    assert session.current_step == AppStep.LANDING
    assert session.report is None
    assert session.selected_program_id is None


def test_session_is_immutable():
    session = MatchingSession()
    with pytest.raises(ValidationError):
        session.current_step = AppStep.RESULTS


def test_transitions_return_new_sessions():
    session = MatchingSession()
    moved = session.set_step(AppStep.PROFILE)

    assert moved.current_step == AppStep.PROFILE
    assert session.current_step == AppStep.LANDING


def test_update_profile_merges_top_level_fields():
    session = MatchingSession().update_profile({"full_name": "Ana Lima", "desired_level": "PhD"})
    session = session.update_profile({"nationality": "Brazil"})

    assert session.profile.full_name == "Ana Lima"
    assert session.profile.desired_level == "PhD"
    assert session.profile.nationality == "Brazil"


def test_update_profile_rejects_invalid_values():
    with pytest.raises(ValidationError):
        MatchingSession().update_profile({"desired_level": "Kindergarten"})


def test_update_preferences_replaces_whole_sections():
    session = MatchingSession().update_preferences({
        "financial": FinancialCriteria(minimum_coverage="Full", interested_in_stipend=True),
    })
    session = session.update_preferences({
        "geographic": GeographicPreferences(regions=["Europe"]),
    })
    session = session.update_preferences({
        "financial": {"interested_in_housing": True},
    })

    assert session.preferences.geographic.regions == ["Europe"]
    assert session.preferences.financial.interested_in_housing is True
    assert session.preferences.financial.minimum_coverage is None
    assert session.preferences.financial.interested_in_stipend is False


def test_run_matching_builds_report_and_moves_to_results():
    engine = MatchingEngine(catalog=[make_program(id="only-program")])
    session = MatchingSession().update_profile({"desired_level": "PhD"})

    session = session.run_matching(engine=engine, limit=5)

    assert session.current_step == AppStep.RESULTS
    assert [r.program.id for r in session.report.recommendations] == ["only-program"]
    assert session.report.user_profile.desired_level == "PhD"


def test_select_program_and_reset():
    session = MatchingSession().set_step(AppStep.RESULTS).select_program("chevening")
    assert session.selected_program_id == "chevening"

    fresh = session.reset()
    assert fresh == MatchingSession()
