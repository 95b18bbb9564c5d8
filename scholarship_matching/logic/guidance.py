"""
Application Guidance

Builds the application checklist for a single program: required documents,
a timeline counted back from the application deadline, the scholarship
process, visa considerations, tips and backup options.

Everything is derived from the program record alone; the only date
arithmetic is relative to the program's stored deadline.
"""

import calendar
import logging
from datetime import date, timedelta
from typing import List, Optional, Tuple

from dateutil import parser as date_parser

from .contracts import (
    ScholarshipProgram,
    ApplicationGuidance,
    TimelineEvent,
    Priority,
    AcademicLevel,
)

logger = logging.getLogger(__name__)


BASE_DOCUMENTS: List[str] = [
    "Valid passport (copy)",
    "Official academic transcripts",
    "Bachelor/Master degree certificate",
    "Curriculum Vitae (CV)",
    "Motivation/Personal statement letter",
]

RECOMMENDATION_LETTERS = "2-3 recommendation letters"
RESEARCH_PROPOSAL = "Research proposal (2-5 pages)"

# (days before deadline, task)
PREPARATION_MILESTONES: List[Tuple[int, str]] = [
    (90, "Start preparing documents and drafting motivation letter"),
    (60, "Request recommendation letters from professors/employers"),
    (45, "Take required language tests if not yet completed"),
    (30, "Finalize all documents and review application"),
    (14, "Submit application online"),
]

DEADLINE_TASK = "Application deadline - final submission"
PROGRAM_START_TASK = "Program start date"

TIPS: List[str] = [
    "Tailor your motivation letter to this specific program and scholarship",
    "Highlight how your background aligns with the program objectives",
    "Demonstrate leadership experience and community engagement",
    "Show clear career goals and how this program helps achieve them",
    "Proofread all documents multiple times before submission",
    "Request recommendation letters from people who know your work well",
    "Prepare specific examples for potential interview questions",
]

BACKUP_OPTIONS: List[str] = [
    "Apply to multiple scholarships with similar deadlines",
    "Consider partial funding options if full funding is not secured",
    "Look into teaching or research assistantships at the university",
    "Explore country-specific government funding programs",
    "Check for university-specific merit scholarships",
]


def generate_application_guidance(program: ScholarshipProgram) -> ApplicationGuidance:
    """
    Generate application guidance for a program.

    Args:
        program: Catalog program

    Returns:
        ApplicationGuidance with all six sections filled in
    """
    return ApplicationGuidance(
        required_documents=build_required_documents(program),
        timeline=build_timeline(program),
        scholarship_process=[
            f"Visit the official scholarship page: {program.scholarship_url}",
            "Create an account on the application portal",
            "Complete the online application form with personal and academic details",
            "Upload all required documents in the specified formats",
            "Submit the application before the deadline",
            "Wait for shortlisting notification (typically 2-4 months)",
            "If shortlisted, prepare for interview (if required)",
            "Await final selection decision",
        ],
        visa_considerations=[
            f"Research {program.country} student visa requirements for your nationality",
            "Gather required visa documents (acceptance letter, financial proof, etc.)",
            "Schedule visa interview at the nearest embassy/consulate",
            "Allow 4-8 weeks for visa processing",
            "Arrange health insurance as required by the destination country",
        ],
        tips=list(TIPS),
        backup_options=list(BACKUP_OPTIONS),
    )


def build_required_documents(program: ScholarshipProgram) -> List[str]:
    """Base documents, language certificates, letters, extras, PhD proposal."""
    documents = list(BASE_DOCUMENTS)

    for requirement in program.requirements.language_requirements:
        documents.append(f"{requirement.test} certificate (minimum {requirement.minimum_score})")

    documents.append(RECOMMENDATION_LETTERS)

    for extra in program.requirements.other_requirements:
        needle = extra.lower()
        if not any(needle in doc.lower() for doc in documents):
            documents.append(extra)

    if AcademicLevel.PHD.value in program.academic_level:
        documents.append(RESEARCH_PROPOSAL)

    return documents


def build_timeline(program: ScholarshipProgram) -> List[TimelineEvent]:
    """
    Milestones counted back from the deadline, then the deadline and the
    program start date as stored.
    """
    deadline = _parse_date(program.application_deadline)
    if deadline is None:
        logger.warning(
            f"Unparseable deadline '{program.application_deadline}' for program {program.id}"
        )

    timeline = []
    for days_before, task in PREPARATION_MILESTONES:
        if deadline is None:
            label = program.application_deadline
        else:
            label = format_month_year(deadline - timedelta(days=days_before))
        timeline.append(TimelineEvent(date=label, task=task, priority=Priority.HIGH))

    timeline.append(TimelineEvent(
        date=program.application_deadline,
        task=DEADLINE_TASK,
        priority=Priority.HIGH,
    ))
    timeline.append(TimelineEvent(
        date=program.program_start_date,
        task=PROGRAM_START_TASK,
        priority=Priority.MEDIUM,
    ))
    return timeline


def format_month_year(value: date) -> str:
    """'March 2025' style label, independent of the process locale."""
    return f"{calendar.month_name[value.month]} {value.year}"


def _parse_date(value: str) -> Optional[date]:
    """ISO or US-style (month first) date; None for free text like "Rolling"."""
    try:
        return date_parser.parse(value, dayfirst=False).date()
    except (TypeError, ValueError, OverflowError):
        return None
