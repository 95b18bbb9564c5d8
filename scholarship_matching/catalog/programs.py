"""
Scholarship Program Catalog

Static, in-memory catalog of scholarship programs. Loaded once at import and
never mutated. Deadlines and start dates are ISO date strings.
"""

from typing import Tuple

from ..logic.contracts import (
    ScholarshipProgram,
    ScholarshipCoverage,
    Requirements,
    LanguageRequirement,
)


IELTS_65 = LanguageRequirement(language="English", test="IELTS", minimum_score="6.5")
IELTS_70 = LanguageRequirement(language="English", test="IELTS", minimum_score="7.0")
IELTS_75 = LanguageRequirement(language="English", test="IELTS", minimum_score="7.5")
TOEFL_90 = LanguageRequirement(language="English", test="TOEFL iBT", minimum_score="90")
TOEFL_100 = LanguageRequirement(language="English", test="TOEFL iBT", minimum_score="100")


SCHOLARSHIP_PROGRAMS: Tuple[ScholarshipProgram, ...] = (
    ScholarshipProgram(
        id="erasmus-mundus-ds",
        program_name="Erasmus Mundus Joint Master in Data Science",
        university_name="University of Amsterdam (consortium)",
        country="Netherlands",
        city="Amsterdam",
        region="Europe",
        academic_level=["Master"],
        fields_of_study=["Computer Science", "Data Science", "Mathematics"],
        duration="2 years",
        language_of_instruction="English",
        scholarship_name="Erasmus Mundus Joint Masters Scholarship",
        scholarship_type="Full",
        funding_organization="European Commission",
        coverage=ScholarshipCoverage(
            tuition=True, living_stipend=True, stipend_amount=1400, housing=False,
            travel=True, travel_amount=3000, health_insurance=True,
            estimated_total_value=49000, currency="EUR",
        ),
        requirements=Requirements(
            minimum_gpa=3.0,
            required_degree=["Bachelor"],
            language_requirements=[IELTS_65],
            other_requirements=["Motivation letter", "Two reference letters"],
        ),
        application_deadline="2025-01-15",
        program_start_date="2025-09-01",
        program_url="https://www.uva.nl/en/programmes/masters/data-science",
        scholarship_url="https://erasmus-plus.ec.europa.eu/opportunities/individuals/students/erasmus-mundus-joint-masters-scholarships",
        description="A two-year international master combining research and industry practice in data science across three European universities.",
        benefits=["Study in two European countries", "Monthly stipend of 1,400 EUR", "International alumni network"],
        competitiveness="High",
    ),
    ScholarshipProgram(
        id="fulbright-foreign-student",
        program_name="Graduate Study in the United States",
        university_name="Various US Universities",
        country="United States",
        city="Multiple",
        region="North America",
        academic_level=["Master", "PhD"],
        fields_of_study=["All Fields"],
        duration="1-5 years",
        language_of_instruction="English",
        scholarship_name="Fulbright Foreign Student Program",
        scholarship_type="Full",
        funding_organization="U.S. Department of State",
        coverage=ScholarshipCoverage(
            tuition=True, living_stipend=True, housing=True, travel=True,
            health_insurance=True, estimated_total_value=120000, currency="USD",
        ),
        requirements=Requirements(
            minimum_gpa=3.0,
            required_degree=["Bachelor"],
            language_requirements=[TOEFL_90],
            other_requirements=["Study objectives essay", "Personal statement"],
        ),
        application_deadline="2025-05-15",
        program_start_date="2026-08-15",
        program_url="https://foreign.fulbrightonline.org",
        scholarship_url="https://foreign.fulbrightonline.org/about/foreign-student-program",
        description="Flagship international exchange program funding graduate study and research at US universities, with a strong focus on leadership and cultural exchange.",
        benefits=["Full tuition and living costs", "Pre-academic orientation", "Global Fulbright network"],
        competitiveness="Very High",
    ),
    ScholarshipProgram(
        id="gates-cambridge",
        program_name="Postgraduate Study at the University of Cambridge",
        university_name="University of Cambridge",
        country="United Kingdom",
        city="Cambridge",
        region="Europe",
        academic_level=["Master", "PhD"],
        fields_of_study=["All Fields"],
        duration="1-4 years",
        language_of_instruction="English",
        scholarship_name="Gates Cambridge Scholarship",
        scholarship_type="Full",
        funding_organization="Bill & Melinda Gates Foundation",
        coverage=ScholarshipCoverage(
            tuition=True, living_stipend=True, stipend_amount=20000, housing=False,
            travel=True, health_insurance=True,
            estimated_total_value=150000, currency="GBP",
        ),
        requirements=Requirements(
            minimum_gpa=3.7,
            required_degree=["Bachelor"],
            language_requirements=[IELTS_75],
            nationality=["Non-UK"],
            other_requirements=["Gates Cambridge statement", "Research proposal"],
        ),
        application_deadline="2024-12-03",
        program_start_date="2025-10-01",
        program_url="https://www.postgraduate.study.cam.ac.uk",
        scholarship_url="https://www.gatescambridge.org/apply",
        description="Full-cost scholarships for outstanding applicants from outside the UK to pursue research and academic study, building leadership to improve the lives of others.",
        benefits=["Full cost of study", "Gates Scholar community", "Discretionary academic development funding"],
        competitiveness="Very High",
    ),
    ScholarshipProgram(
        id="knight-hennessy",
        program_name="Graduate Degree Programs at Stanford",
        university_name="Stanford University",
        country="United States",
        city="Stanford",
        region="North America",
        academic_level=["Master", "PhD"],
        fields_of_study=["All Fields"],
        duration="1-6 years",
        language_of_instruction="English",
        scholarship_name="Knight-Hennessy Scholars",
        scholarship_type="Fellowship",
        funding_organization="Stanford University",
        coverage=ScholarshipCoverage(
            tuition=True, living_stipend=True, housing=False, travel=True,
            health_insurance=True, estimated_total_value=250000, currency="USD",
        ),
        requirements=Requirements(
            required_degree=["Bachelor"],
            language_requirements=[TOEFL_100],
            other_requirements=["Video statement", "Leadership essay"],
        ),
        application_deadline="2024-10-09",
        program_start_date="2025-09-20",
        program_url="https://www.stanford.edu",
        scholarship_url="https://knight-hennessy.stanford.edu/admission",
        description="Multidisciplinary leadership development program that funds graduate study in any Stanford school for future global leaders.",
        benefits=["Funding for up to three years", "King Global Leadership Program", "Cross-disciplinary cohort"],
        competitiveness="Very High",
    ),
    ScholarshipProgram(
        id="chevening",
        program_name="One-Year Master's in the UK",
        university_name="Any UK University",
        country="United Kingdom",
        city="Multiple",
        region="Europe",
        academic_level=["Master"],
        fields_of_study=["All Fields"],
        duration="1 year",
        language_of_instruction="English",
        scholarship_name="Chevening Scholarship",
        scholarship_type="Full",
        funding_organization="UK Foreign, Commonwealth & Development Office",
        coverage=ScholarshipCoverage(
            tuition=True, living_stipend=True, housing=False, travel=True,
            health_insurance=True, estimated_total_value=55000, currency="GBP",
        ),
        requirements=Requirements(
            required_degree=["Bachelor"],
            work_experience=2,
            language_requirements=[IELTS_65],
            other_requirements=["Four Chevening essays", "Two reference letters"],
        ),
        application_deadline="2024-11-05",
        program_start_date="2025-09-15",
        program_url="https://www.chevening.org",
        scholarship_url="https://www.chevening.org/scholarships/",
        description="UK government scholarship for future leaders with work experience, covering a one-year master in policy, business, development or any other field.",
        benefits=["Full tuition and monthly stipend", "Return flights to the UK", "Chevening leadership network"],
        competitiveness="High",
    ),
    ScholarshipProgram(
        id="daad-epos",
        program_name="Development-Related Postgraduate Courses",
        university_name="Various German Universities",
        country="Germany",
        city="Multiple",
        region="Europe",
        academic_level=["Master", "PhD"],
        fields_of_study=["Engineering", "Economics", "Public Policy", "Environmental Science", "Agriculture"],
        duration="1-3 years",
        language_of_instruction="English",
        scholarship_name="DAAD EPOS Scholarship",
        scholarship_type="Full",
        funding_organization="German Academic Exchange Service (DAAD)",
        coverage=ScholarshipCoverage(
            tuition=True, living_stipend=True, stipend_amount=934, housing=False,
            travel=True, health_insurance=True,
            estimated_total_value=45000, currency="EUR",
        ),
        requirements=Requirements(
            minimum_gpa=3.0,
            required_degree=["Bachelor"],
            work_experience=2,
            language_requirements=[IELTS_65],
            other_requirements=["Employer reference", "Motivation letter"],
        ),
        application_deadline="2025-08-31",
        program_start_date="2026-10-01",
        program_url="https://www.daad.de/en/",
        scholarship_url="https://www.daad.de/en/study-and-research-in-germany/scholarships/",
        description="Postgraduate courses with special relevance to sustainable development for professionals from developing countries, combining academic study with international policy practice.",
        benefits=["Monthly stipend", "German language course", "Travel allowance"],
        competitiveness="Medium",
    ),
    ScholarshipProgram(
        id="rhodes-oxford",
        program_name="Postgraduate Study at Oxford",
        university_name="University of Oxford",
        country="United Kingdom",
        city="Oxford",
        region="Europe",
        academic_level=["Master", "PhD"],
        fields_of_study=["All Fields"],
        duration="2-3 years",
        language_of_instruction="English",
        scholarship_name="Rhodes Scholarship",
        scholarship_type="Full",
        funding_organization="Rhodes Trust",
        coverage=ScholarshipCoverage(
            tuition=True, living_stipend=True, stipend_amount=19092, housing=False,
            travel=True, health_insurance=True,
            estimated_total_value=110000, currency="GBP",
        ),
        requirements=Requirements(
            minimum_gpa=3.7,
            required_degree=["Bachelor"],
            language_requirements=[IELTS_75],
            age_limit=24,
            other_requirements=["Personal statement", "Academic statement"],
        ),
        application_deadline="2025-08-01",
        program_start_date="2026-10-01",
        program_url="https://www.ox.ac.uk",
        scholarship_url="https://www.rhodeshouse.ox.ac.uk/scholarships/applications/",
        description="The oldest international graduate scholarship, supporting academic excellence, character and leadership at the University of Oxford.",
        benefits=["All university fees", "Annual stipend", "Rhodes House community"],
        competitiveness="Very High",
    ),
    ScholarshipProgram(
        id="clarendon-oxford",
        program_name="Graduate Research Degrees at Oxford",
        university_name="University of Oxford",
        country="United Kingdom",
        city="Oxford",
        region="Europe",
        academic_level=["Master", "PhD"],
        fields_of_study=["All Fields"],
        duration="1-4 years",
        language_of_instruction="English",
        scholarship_name="Clarendon Fund Scholarship",
        scholarship_type="Full",
        funding_organization="Clarendon Fund",
        coverage=ScholarshipCoverage(
            tuition=True, living_stipend=True, housing=False, travel=False,
            health_insurance=False, estimated_total_value=90000, currency="GBP",
        ),
        requirements=Requirements(
            minimum_gpa=3.7,
            required_degree=["Bachelor"],
            language_requirements=[IELTS_75],
            other_requirements=["Research proposal"],
        ),
        application_deadline="2025-01-08",
        program_start_date="2025-10-01",
        program_url="https://www.ox.ac.uk/admissions/graduate",
        scholarship_url="https://www.ox.ac.uk/clarendon",
        description="Automatic consideration for graduate applicants with outstanding academic merit and research potential across all Oxford departments.",
        benefits=["Course fees covered in full", "Grant for living costs", "Clarendon scholars community"],
        competitiveness="Very High",
    ),
    ScholarshipProgram(
        id="mext-research",
        program_name="Research Student Program",
        university_name="Various Japanese Universities",
        country="Japan",
        city="Multiple",
        region="Asia",
        academic_level=["Master", "PhD"],
        fields_of_study=["Engineering", "Natural Sciences", "Computer Science", "Social Sciences"],
        duration="2-5 years",
        language_of_instruction="English or Japanese",
        scholarship_name="MEXT Japanese Government Scholarship",
        scholarship_type="Full",
        funding_organization="Ministry of Education, Culture, Sports, Science and Technology",
        coverage=ScholarshipCoverage(
            tuition=True, living_stipend=True, stipend_amount=144000, housing=False,
            travel=True, health_insurance=False,
            estimated_total_value=60000, currency="USD",
        ),
        requirements=Requirements(
            minimum_gpa=3.0,
            required_degree=["Bachelor"],
            age_limit=35,
            other_requirements=["Research plan", "Medical certificate"],
        ),
        application_deadline="2025-05-31",
        program_start_date="2026-04-01",
        program_url="https://www.studyinjapan.go.jp",
        scholarship_url="https://www.studyinjapan.go.jp/en/planning/scholarships/mext-scholarships/",
        description="Japanese government scholarship for research students in science, technology and the humanities at national universities.",
        benefits=["Monthly allowance", "Round-trip airfare", "Japanese language training"],
        competitiveness="Medium",
    ),
    ScholarshipProgram(
        id="australia-awards",
        program_name="Postgraduate Study in Australia",
        university_name="Various Australian Universities",
        country="Australia",
        city="Multiple",
        region="Oceania",
        academic_level=["Master", "PhD"],
        fields_of_study=["Public Policy", "Development Studies", "Health", "Education", "Agriculture"],
        duration="2-4 years",
        language_of_instruction="English",
        scholarship_name="Australia Awards Scholarship",
        scholarship_type="Full",
        funding_organization="Department of Foreign Affairs and Trade",
        coverage=ScholarshipCoverage(
            tuition=True, living_stipend=True, housing=False, travel=True,
            health_insurance=True, estimated_total_value=95000, currency="AUD",
        ),
        requirements=Requirements(
            required_degree=["Bachelor"],
            work_experience=2,
            language_requirements=[IELTS_65],
            other_requirements=["Development impact statement"],
        ),
        application_deadline="2025-04-30",
        program_start_date="2026-02-01",
        program_url="https://www.dfat.gov.au/people-to-people/australia-awards",
        scholarship_url="https://www.dfat.gov.au/people-to-people/australia-awards/australia-awards-scholarships",
        description="Long-term development awards for emerging leaders from partner countries to study policy, health and international development in Australia.",
        benefits=["Full tuition fees", "Contribution to living expenses", "Introductory academic program"],
        competitiveness="High",
    ),
    ScholarshipProgram(
        id="vanier-canada",
        program_name="Doctoral Studies in Canada",
        university_name="Various Canadian Universities",
        country="Canada",
        city="Multiple",
        region="North America",
        academic_level=["PhD"],
        fields_of_study=["Health Sciences", "Natural Sciences", "Engineering", "Social Sciences", "Humanities"],
        duration="3 years",
        language_of_instruction="English or French",
        scholarship_name="Vanier Canada Graduate Scholarship",
        scholarship_type="Fellowship",
        funding_organization="Government of Canada",
        coverage=ScholarshipCoverage(
            tuition=False, living_stipend=True, stipend_amount=50000, housing=False,
            travel=False, health_insurance=False,
            estimated_total_value=150000, currency="CAD",
        ),
        requirements=Requirements(
            minimum_gpa=3.7,
            required_degree=["Master"],
            other_requirements=["University nomination", "Leadership statement"],
        ),
        application_deadline="2024-11-01",
        program_start_date="2025-05-01",
        program_url="https://vanier.gc.ca",
        scholarship_url="https://vanier.gc.ca/en/home-accueil.html",
        description="Doctoral fellowship for students who demonstrate leadership skills and a high standard of scholarly achievement in research.",
        benefits=["50,000 CAD per year", "Three years of funding"],
        competitiveness="Very High",
    ),
    ScholarshipProgram(
        id="swiss-excellence",
        program_name="Research Fellowship in Switzerland",
        university_name="ETH Zurich and Swiss Universities",
        country="Switzerland",
        city="Zurich",
        region="Europe",
        academic_level=["PhD", "Postgraduate"],
        fields_of_study=["All Fields"],
        duration="1-3 years",
        language_of_instruction="English",
        scholarship_name="Swiss Government Excellence Scholarship",
        scholarship_type="Fellowship",
        funding_organization="Swiss Confederation (FCS)",
        coverage=ScholarshipCoverage(
            tuition=True, living_stipend=True, stipend_amount=1920, housing=True,
            travel=False, health_insurance=True,
            estimated_total_value=70000, currency="CHF",
        ),
        requirements=Requirements(
            required_degree=["Master"],
            age_limit=35,
            other_requirements=["Research proposal", "Supervisor support letter"],
        ),
        application_deadline="2025-12-15",
        program_start_date="2026-09-01",
        program_url="https://ethz.ch",
        scholarship_url="https://www.sbfi.admin.ch/scholarships_eng",
        description="Research fellowships for postgraduate researchers to pursue doctoral or postdoctoral research in science and technology at Swiss institutions.",
        benefits=["Monthly stipend", "Housing allowance", "Health insurance"],
        competitiveness="High",
    ),
    ScholarshipProgram(
        id="csc-china",
        program_name="Chinese Government Scholarship Program",
        university_name="Tsinghua University",
        country="China",
        city="Beijing",
        region="Asia",
        academic_level=["Bachelor", "Master", "PhD"],
        fields_of_study=["Engineering", "Computer Science", "Business", "Chinese Language"],
        duration="2-4 years",
        language_of_instruction="English or Chinese",
        scholarship_name="Chinese Government Scholarship (CSC)",
        scholarship_type="Full",
        funding_organization="China Scholarship Council",
        coverage=ScholarshipCoverage(
            tuition=True, living_stipend=True, stipend_amount=3000, housing=True,
            travel=False, health_insurance=True,
            estimated_total_value=40000, currency="USD",
        ),
        requirements=Requirements(
            minimum_gpa=3.0,
            required_degree=["High School", "Bachelor"],
            language_requirements=[LanguageRequirement(language="Chinese", test="HSK", minimum_score="4")],
            age_limit=35,
            other_requirements=["Physical examination form", "Study plan"],
        ),
        application_deadline="2025-03-31",
        program_start_date="2025-09-01",
        program_url="https://www.tsinghua.edu.cn/en/",
        scholarship_url="https://www.campuschina.org",
        description="Government-funded study at leading Chinese universities covering technology, business and international development programs.",
        benefits=["Free on-campus accommodation", "Monthly living allowance", "Comprehensive medical insurance"],
        competitiveness="Medium",
    ),
    ScholarshipProgram(
        id="kaist-international",
        program_name="Graduate Programs in Science and Technology",
        university_name="KAIST",
        country="South Korea",
        city="Daejeon",
        region="Asia",
        academic_level=["Bachelor", "Master", "PhD"],
        fields_of_study=["Computer Science", "Engineering", "Physics", "Biology"],
        duration="2-4 years",
        language_of_instruction="English",
        scholarship_name="KAIST International Student Scholarship",
        scholarship_type="Full",
        funding_organization="KAIST",
        coverage=ScholarshipCoverage(
            tuition=True, living_stipend=True, stipend_amount=350, housing=False,
            travel=False, health_insurance=True,
            estimated_total_value=30000, currency="USD",
        ),
        requirements=Requirements(
            minimum_gpa=3.0,
            required_degree=["Bachelor"],
            language_requirements=[TOEFL_90],
            other_requirements=["Study plan"],
        ),
        application_deadline="2025-03-20",
        program_start_date="2025-09-01",
        program_url="https://www.kaist.ac.kr/en/",
        scholarship_url="https://admission.kaist.ac.kr/intl-graduate",
        description="Research-intensive science and technology graduate programs with full tuition waiver and monthly stipend for international students.",
        benefits=["Full tuition waiver", "Monthly stipend", "National health insurance"],
        competitiveness="Medium",
    ),
    ScholarshipProgram(
        id="eiffel-excellence",
        program_name="Master and PhD Programs in France",
        university_name="Various French Universities",
        country="France",
        city="Paris",
        region="Europe",
        academic_level=["Master", "PhD"],
        fields_of_study=["Engineering", "Economics", "Law", "Political Science"],
        duration="1-3 years",
        language_of_instruction="French or English",
        scholarship_name="Eiffel Excellence Scholarship",
        scholarship_type="Living Stipend",
        funding_organization="French Ministry for Europe and Foreign Affairs",
        coverage=ScholarshipCoverage(
            tuition=False, living_stipend=True, stipend_amount=1181, housing=False,
            travel=True, health_insurance=True,
            estimated_total_value=30000, currency="EUR",
        ),
        requirements=Requirements(
            age_limit=30,
            language_requirements=[LanguageRequirement(language="French", test="DELF", minimum_score="B2")],
            other_requirements=["Institution nomination"],
        ),
        application_deadline="2025-01-10",
        program_start_date="2025-09-01",
        program_url="https://www.campusfrance.org",
        scholarship_url="https://www.campusfrance.org/en/eiffel-scholarship-program-of-excellence",
        description="Scholarship attracting top international students to French master and doctoral programs in engineering, economics, law and political science.",
        benefits=["Monthly allowance", "International travel", "Cultural activities"],
        competitiveness="High",
    ),
    ScholarshipProgram(
        id="holland-scholarship",
        program_name="Bachelor and Master Programs in the Netherlands",
        university_name="Leiden University",
        country="Netherlands",
        city="Leiden",
        region="Europe",
        academic_level=["Bachelor", "Master"],
        fields_of_study=["All Fields"],
        duration="1-3 years",
        language_of_instruction="English",
        scholarship_name="Holland Scholarship",
        scholarship_type="Partial",
        funding_organization="Dutch Ministry of Education and Dutch universities",
        coverage=ScholarshipCoverage(
            tuition=True, tuition_amount=5000, living_stipend=False, housing=False,
            travel=False, health_insurance=False,
            estimated_total_value=5000, currency="EUR",
        ),
        requirements=Requirements(
            language_requirements=[IELTS_65],
            other_requirements=["Admission to a participating programme"],
        ),
        application_deadline="2025-02-01",
        program_start_date="2025-09-01",
        program_url="https://www.universiteitleiden.nl/en",
        scholarship_url="https://www.studyinnl.org/finances/holland-scholarship",
        description="One-off grant for non-EEA students starting their first year of a bachelor or master in the Netherlands.",
        benefits=["5,000 EUR in the first year"],
        competitiveness="Low",
    ),
    ScholarshipProgram(
        id="stipendium-hungaricum",
        program_name="Degree Programs in Hungary",
        university_name="University of Debrecen",
        country="Hungary",
        city="Debrecen",
        region="Europe",
        academic_level=["Bachelor", "Master", "PhD"],
        fields_of_study=["Medicine", "Engineering", "Business", "Computer Science"],
        duration="2-6 years",
        language_of_instruction="English",
        scholarship_name="Stipendium Hungaricum",
        scholarship_type="Full",
        funding_organization="Tempus Public Foundation",
        coverage=ScholarshipCoverage(
            tuition=True, living_stipend=True, stipend_amount=150, housing=True,
            travel=False, health_insurance=True,
            estimated_total_value=35000, currency="EUR",
        ),
        requirements=Requirements(
            required_degree=["High School", "Bachelor"],
            language_requirements=[IELTS_65],
            other_requirements=["Medical certificate"],
        ),
        application_deadline="2025-01-15",
        program_start_date="2025-09-01",
        program_url="https://unideb.hu/en",
        scholarship_url="https://stipendiumhungaricum.hu/apply/",
        description="Hungarian government scholarship covering study in English-taught programs from bachelor to doctoral level.",
        benefits=["Tuition-free education", "Dormitory place or housing allowance", "Medical insurance"],
        competitiveness="Low",
    ),
    ScholarshipProgram(
        id="mastercard-uct",
        program_name="Undergraduate and Postgraduate Studies at UCT",
        university_name="University of Cape Town",
        country="South Africa",
        city="Cape Town",
        region="Africa",
        academic_level=["Bachelor", "Master"],
        fields_of_study=["Business", "Development Studies", "Engineering", "Public Health"],
        duration="1-4 years",
        language_of_instruction="English",
        scholarship_name="Mastercard Foundation Scholars Program",
        scholarship_type="Full",
        funding_organization="Mastercard Foundation",
        coverage=ScholarshipCoverage(
            tuition=True, living_stipend=True, housing=True, travel=True,
            health_insurance=True, estimated_total_value=80000, currency="USD",
        ),
        requirements=Requirements(
            nationality=["Sub-Saharan Africa"],
            language_requirements=[IELTS_65],
            other_requirements=["Proof of financial need", "Community engagement essay"],
        ),
        application_deadline="2025-07-31",
        program_start_date="2026-02-15",
        program_url="https://www.uct.ac.za",
        scholarship_url="https://www.mcf.uct.ac.za/apply",
        description="Comprehensive scholarships for academically talented young Africans committed to leadership and social development.",
        benefits=["Full scholarship package", "Leadership development", "Mentorship"],
        competitiveness="High",
    ),
    ScholarshipProgram(
        id="oas-partnerships",
        program_name="Graduate Programs in the Americas",
        university_name="Universidad de Chile",
        country="Chile",
        city="Santiago",
        region="Latin America",
        academic_level=["Master", "PhD"],
        fields_of_study=["Public Policy", "Economics", "Environmental Science", "Engineering"],
        duration="2 years",
        language_of_instruction="Spanish",
        scholarship_name="OAS Academic Scholarship Program",
        scholarship_type="Tuition Waiver",
        funding_organization="Organization of American States",
        coverage=ScholarshipCoverage(
            tuition=True, living_stipend=False, housing=False, travel=False,
            health_insurance=False, estimated_total_value=20000, currency="USD",
        ),
        requirements=Requirements(
            minimum_gpa=3.0,
            required_degree=["Bachelor"],
            nationality=["OAS member states"],
            language_requirements=[LanguageRequirement(language="Spanish", test="DELE", minimum_score="B2")],
            other_requirements=["Admission letter"],
        ),
        application_deadline="2025-03-15",
        program_start_date="2025-08-01",
        program_url="https://www.uchile.cl",
        scholarship_url="https://www.oas.org/en/scholarships/",
        description="Tuition support for graduate study in policy, economics and sustainable development at partner universities across the Americas.",
        benefits=["Tuition waiver", "Regional academic network"],
        competitiveness="Medium",
    ),
    ScholarshipProgram(
        id="kaust-fellowship",
        program_name="Graduate Fellowship in Science and Engineering",
        university_name="King Abdullah University of Science and Technology",
        country="Saudi Arabia",
        city="Thuwal",
        region="Middle East",
        academic_level=["Master", "PhD"],
        fields_of_study=["Computer Science", "Engineering", "Marine Science", "Chemistry"],
        duration="1.5-5 years",
        language_of_instruction="English",
        scholarship_name="KAUST Discovery Fellowship",
        scholarship_type="Fellowship",
        funding_organization="KAUST",
        coverage=ScholarshipCoverage(
            tuition=True, living_stipend=True, stipend_amount=20000, housing=True,
            travel=True, health_insurance=True,
            estimated_total_value=140000, currency="USD",
        ),
        requirements=Requirements(
            minimum_gpa=3.5,
            required_degree=["Bachelor"],
            language_requirements=[TOEFL_90],
            other_requirements=["Statement of purpose"],
        ),
        application_deadline="2025-01-15",
        program_start_date="2025-08-20",
        program_url="https://www.kaust.edu.sa",
        scholarship_url="https://admissions.kaust.edu.sa/apply",
        description="Fully funded graduate research fellowship in science and technology with on-campus housing and an annual stipend.",
        benefits=["Full tuition", "Free on-campus housing", "Annual living allowance"],
        competitiveness="High",
    ),
    ScholarshipProgram(
        id="nus-research-certificate",
        program_name="Graduate Certificate in Data Analytics",
        university_name="National University of Singapore",
        country="Singapore",
        city="Singapore",
        region="Asia",
        academic_level=["Certificate", "Postgraduate"],
        fields_of_study=["Data Science", "Business Analytics"],
        duration="6 months",
        language_of_instruction="English",
        scholarship_name="NUS Lifelong Learning Tuition Grant",
        scholarship_type="Partial",
        funding_organization="National University of Singapore",
        coverage=ScholarshipCoverage(
            tuition=True, tuition_amount=6000, living_stipend=False, housing=False,
            travel=False, health_insurance=False,
            estimated_total_value=6000, currency="SGD",
        ),
        requirements=Requirements(
            required_degree=["Bachelor"],
            work_experience=1,
            language_requirements=[IELTS_65],
        ),
        application_deadline="2025-06-30",
        program_start_date="2025-08-11",
        program_url="https://scale.nus.edu.sg",
        scholarship_url="https://scale.nus.edu.sg/programmes/graduate-certificate",
        description="Short professional certificate in analytics for working professionals moving into technology and business roles.",
        benefits=["Stackable towards a master degree", "Part-time evening classes"],
        competitiveness="Low",
    ),
)
