"""
Data Contracts for the Scholarship Matching Engine

Defines Pydantic models for the UserProfile and SearchPreferences (input),
the ScholarshipProgram catalog record, and the ProgramRecommendation /
RecommendationReport output. These contracts are the API boundary for the
matching engine.

Input models are partial: every field is optional and a missing value means
"no preference", never zero.
"""

from datetime import datetime
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field

from .constants import ENGINE_VERSION


# =============================================================================
# ENUMS
# =============================================================================

class AcademicLevel(str, Enum):
    """Level of study a program offers or a student is seeking."""
    BACHELOR = "Bachelor"
    MASTER = "Master"
    PHD = "PhD"
    POSTGRADUATE = "Postgraduate"
    CERTIFICATE = "Certificate"


class LanguageProficiency(str, Enum):
    NATIVE = "Native"
    FLUENT = "Fluent"
    ADVANCED = "Advanced"
    INTERMEDIATE = "Intermediate"
    BASIC = "Basic"


class Region(str, Enum):
    """World region of a program. GLOBAL in preferences means no restriction."""
    EUROPE = "Europe"
    NORTH_AMERICA = "North America"
    ASIA = "Asia"
    LATIN_AMERICA = "Latin America"
    OCEANIA = "Oceania"
    AFRICA = "Africa"
    MIDDLE_EAST = "Middle East"
    GLOBAL = "Global"


class CoverageTier(str, Enum):
    FULL = "Full"
    PARTIAL = "Partial"
    TUITION_ONLY = "Tuition Only"
    ANY = "Any"


class ProgramType(str, Enum):
    RESEARCH = "Research"
    PROFESSIONAL = "Professional"
    EITHER = "Either"


class AdmissionTimeline(str, Enum):
    NEXT_INTAKE = "Next Intake"
    FLEXIBLE = "Flexible"
    SPECIFIC_YEAR = "Specific Year"


class ScholarshipType(str, Enum):
    FULL = "Full"
    PARTIAL = "Partial"
    TUITION_WAIVER = "Tuition Waiver"
    LIVING_STIPEND = "Living Stipend"
    FELLOWSHIP = "Fellowship"


class Competitiveness(str, Enum):
    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"
    VERY_HIGH = "Very High"


class Priority(str, Enum):
    HIGH = "High"
    MEDIUM = "Medium"
    LOW = "Low"


# =============================================================================
# INPUT CONTRACTS: USER PROFILE
# =============================================================================

class AcademicBackground(BaseModel):
    degree: str = ""
    institution: str = ""
    country: str = ""
    field: str = ""
    gpa: Optional[float] = None  # 4.0 scale
    graduation_year: Optional[int] = None


class ProfessionalExperience(BaseModel):
    role: str = ""
    company: str = ""
    field: str = ""
    years: float = 0.0
    description: Optional[str] = None


class Language(BaseModel):
    name: str
    proficiency: LanguageProficiency

    class Config:
        use_enum_values = True


class BudgetConstraints(BaseModel):
    needs_full_funding: bool = False
    max_annual_cost: Optional[float] = None
    currency: str = "USD"


class UserProfile(BaseModel):
    """
    Student's self-reported background and goals.
    Filled in step by step by the profile form; any field may still be missing.
    """
    full_name: Optional[str] = None
    nationality: Optional[str] = None
    country_of_residence: Optional[str] = None

    # Background
    academic_background: List[AcademicBackground] = Field(default_factory=list)
    professional_experience: List[ProfessionalExperience] = Field(default_factory=list)
    languages: List[Language] = Field(default_factory=list)

    # Goals
    desired_level: Optional[AcademicLevel] = None
    fields_of_study: List[str] = Field(default_factory=list, max_length=5)
    career_goals: Optional[str] = None

    budget_constraints: Optional[BudgetConstraints] = None
    previous_international_experience: Optional[bool] = None

    class Config:
        use_enum_values = True


# =============================================================================
# INPUT CONTRACTS: SEARCH PREFERENCES
# =============================================================================

class GeographicPreferences(BaseModel):
    regions: List[Region] = Field(default_factory=list)
    countries: List[str] = Field(default_factory=list)
    willing_to_relocate: bool = True
    open_to_online: bool = False

    class Config:
        use_enum_values = True


class FinancialCriteria(BaseModel):
    minimum_coverage: Optional[CoverageTier] = None
    interested_in_stipend: bool = False
    interested_in_housing: bool = False
    interested_in_travel: bool = False
    max_out_of_pocket: Optional[float] = None

    class Config:
        use_enum_values = True


class AcademicConditions(BaseModel):
    language_of_instruction: List[str] = Field(default_factory=list)
    preferred_duration: Optional[str] = None
    program_type: Optional[ProgramType] = None
    admission_timeline: Optional[AdmissionTimeline] = None
    specific_year: Optional[int] = None

    class Config:
        use_enum_values = True


class PersonalConstraints(BaseModel):
    visa_limitations: Optional[str] = None
    work_while_studying: bool = False
    family_considerations: bool = False
    special_needs: Optional[str] = None


class SearchPreferences(BaseModel):
    """Search constraints collected by the questionnaire, one section per step."""
    geographic: Optional[GeographicPreferences] = None
    financial: Optional[FinancialCriteria] = None
    academic: Optional[AcademicConditions] = None
    personal: Optional[PersonalConstraints] = None


# =============================================================================
# CATALOG RECORDS
# =============================================================================

class ScholarshipCoverage(BaseModel):
    tuition: bool = False
    tuition_amount: Optional[int] = None
    living_stipend: bool = False
    stipend_amount: Optional[int] = None
    housing: bool = False
    travel: bool = False
    travel_amount: Optional[int] = None
    health_insurance: bool = False
    estimated_total_value: int = 0
    currency: str = "USD"

    class Config:
        frozen = True


class LanguageRequirement(BaseModel):
    language: str
    test: str
    minimum_score: str

    class Config:
        frozen = True


class Requirements(BaseModel):
    minimum_gpa: Optional[float] = None
    required_degree: List[str] = Field(default_factory=list)
    work_experience: Optional[float] = None  # years
    language_requirements: List[LanguageRequirement] = Field(default_factory=list)
    nationality: Optional[List[str]] = None
    age_limit: Optional[int] = None
    other_requirements: List[str] = Field(default_factory=list)

    class Config:
        frozen = True


class ScholarshipProgram(BaseModel):
    """
    A single university/scholarship offering in the catalog.
    Immutable once loaded.
    """
    id: str
    program_name: str
    university_name: str
    country: str
    city: str
    region: Region
    academic_level: List[AcademicLevel]
    fields_of_study: List[str]
    duration: str
    language_of_instruction: str

    # Scholarship details
    scholarship_name: str
    scholarship_type: ScholarshipType
    funding_organization: str
    coverage: ScholarshipCoverage

    requirements: Requirements

    # Deadlines and links (date strings, kept verbatim)
    application_deadline: str
    program_start_date: str
    program_url: str
    scholarship_url: str

    description: str
    benefits: List[str] = Field(default_factory=list)
    competitiveness: Competitiveness

    class Config:
        frozen = True
        use_enum_values = True


# =============================================================================
# OUTPUT CONTRACTS
# =============================================================================

class MatchScore(BaseModel):
    """Five-dimension fit assessment plus weighted overall, all in [0, 100]."""
    overall: int = Field(ge=0, le=100)
    academic_fit: int = Field(ge=0, le=100)
    financial_feasibility: int = Field(ge=0, le=100)
    career_alignment: int = Field(ge=0, le=100)
    acceptance_probability: int = Field(ge=0, le=100)
    long_term_value: int = Field(ge=0, le=100)


class TimelineEvent(BaseModel):
    date: str
    task: str
    priority: Priority

    class Config:
        use_enum_values = True


class ApplicationGuidance(BaseModel):
    required_documents: List[str] = Field(default_factory=list)
    timeline: List[TimelineEvent] = Field(default_factory=list)
    scholarship_process: List[str] = Field(default_factory=list)
    visa_considerations: List[str] = Field(default_factory=list)
    tips: List[str] = Field(default_factory=list)
    backup_options: List[str] = Field(default_factory=list)


class ProgramRecommendation(BaseModel):
    """
    Single program recommendation with score, explanation and guidance.
    """
    program: ScholarshipProgram
    rank: int = Field(ge=1)
    match_score: MatchScore
    explanation: str
    application_guidance: ApplicationGuidance


class ExecutiveSummary(BaseModel):
    profile_overview: str
    search_criteria: str
    key_findings: List[str] = Field(default_factory=list)
    top_recommendation: str


class RecommendationReport(BaseModel):
    """
    Complete matching result for one profile + preferences pair.
    """
    generated_at: datetime
    user_profile: UserProfile
    search_preferences: SearchPreferences
    recommendations: List[ProgramRecommendation] = Field(default_factory=list)
    executive_summary: ExecutiveSummary
    engine_version: str = ENGINE_VERSION


# =============================================================================
# INTERMEDIATE DATA STRUCTURES
# =============================================================================

class ScoredCandidate(BaseModel):
    """
    A program with its computed score.
    Used between scoring and ranking stages.
    """
    program: ScholarshipProgram
    score: MatchScore
