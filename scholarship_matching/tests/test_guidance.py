"""
Test application guidance generation.
"""

import pytest

from scholarship_matching.logic import generate_application_guidance
from scholarship_matching.logic.contracts import Requirements, LanguageRequirement
from scholarship_matching.tests.conftest import make_program


def test_timeline_counts_back_from_deadline(phd_cs_program):
    guidance = generate_application_guidance(phd_cs_program)
    timeline = guidance.timeline

    assert timeline[0].task == "Start preparing documents and drafting motivation letter"
    assert timeline[0].date == "March 2025"
    assert [event.date for event in timeline[:5]] == [
        "March 2025", "April 2025", "April 2025", "May 2025", "May 2025"
    ]
    assert timeline[-2].date == "2025-06-01"
    assert timeline[-1].date == "2025-10-01"
    assert timeline[-1].task == "Program start date"


def test_timeline_priorities(phd_cs_program):
    timeline = generate_application_guidance(phd_cs_program).timeline

    assert [event.priority for event in timeline[:-1]] == ["High"] * 6
    assert timeline[-1].priority == "Medium"


def test_timeline_crosses_year_boundary():
    program = make_program(application_deadline="2025-01-15")
    timeline = generate_application_guidance(program).timeline
    assert timeline[0].date == "October 2024"


def test_unparseable_deadline_falls_back_to_literal_string():
    program = make_program(application_deadline="Rolling admissions")
    timeline = generate_application_guidance(program).timeline

    assert [event.date for event in timeline[:6]] == ["Rolling admissions"] * 6


def test_required_documents_for_phd_program():
    program = make_program(requirements=Requirements(
        language_requirements=[
            LanguageRequirement(language="English", test="IELTS", minimum_score="6.5"),
            LanguageRequirement(language="German", test="TestDaF", minimum_score="4"),
        ],
        other_requirements=["Curriculum Vitae", "Research statement"],
    ))

    documents = generate_application_guidance(program).required_documents

    assert documents == [
        "Valid passport (copy)",
        "Official academic transcripts",
        "Bachelor/Master degree certificate",
        "Curriculum Vitae (CV)",
        "Motivation/Personal statement letter",
        "IELTS certificate (minimum 6.5)",
        "TestDaF certificate (minimum 4)",
        "2-3 recommendation letters",
        "Research statement",
        "Research proposal (2-5 pages)",
    ]


def test_no_research_proposal_outside_phd():
    program = make_program(academic_level=["Master"], requirements=Requirements())
    documents = generate_application_guidance(program).required_documents

    assert "Research proposal (2-5 pages)" not in documents
    assert documents[-1] == "2-3 recommendation letters"


def test_process_and_visa_mention_program(phd_cs_program):
    guidance = generate_application_guidance(phd_cs_program)

    assert len(guidance.scholarship_process) == 8
    assert guidance.scholarship_process[0] == (
        "Visit the official scholarship page: https://example.org/scholarship"
    )
    assert len(guidance.visa_considerations) == 5
    assert guidance.visa_considerations[0].startswith("Research Germany student visa")


def test_tips_and_backup_options_are_static():
    first = generate_application_guidance(make_program(id="a", country="Japan"))
    second = generate_application_guidance(make_program(id="b", country="Chile"))

    assert len(first.tips) == 7
    assert len(first.backup_options) == 5
    assert first.tips == second.tips
    assert first.backup_options == second.backup_options


@pytest.mark.parametrize("deadline,expected", [
    ("9/1/2025", ["June 2025", "July 2025", "July 2025", "August 2025", "August 2025"]),
    ("January 15, 2026", ["October 2025", "November 2025", "December 2025", "December 2025", "January 2026"]),
])
def test_timeline_understands_non_iso_deadlines(deadline, expected):
    program = make_program(application_deadline=deadline)
    timeline = generate_application_guidance(program).timeline

    assert [event.date for event in timeline[:5]] == expected
    assert timeline[5].date == deadline
