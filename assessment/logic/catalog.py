"""
Stream Catalog

Static reference data for the candidate streams of each survey variant.
Declaration order is significant: it breaks ties when two streams score the
same weight.
"""

from typing import Dict, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field


class HighDemandSector(BaseModel):
    """Growing employment sector associated with a stream."""
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    sector: str
    growth: str
    skills: Tuple[str, ...] = Field(default_factory=tuple)
    career_paths: Tuple[str, ...] = Field(default_factory=tuple, alias="careerPaths")
    job_opportunities: str = Field(default="", alias="jobOpportunities")


class AbroadStudyOption(BaseModel):
    """Study-abroad destination offered when a respondent clears the stream's gates."""
    model_config = ConfigDict(frozen=True)

    country: str
    universities: Tuple[str, ...] = Field(default_factory=tuple)
    programs: Tuple[str, ...] = Field(default_factory=tuple)
    requirements: str = ""


class Stream(BaseModel):
    """Immutable catalog entry for one candidate stream."""
    model_config = ConfigDict(frozen=True)

    name: str
    required_subjects: Tuple[str, ...]
    required_aptitudes: Tuple[str, ...]
    required_interests: Tuple[str, ...]
    reasoning: str
    career_paths: Tuple[str, ...] = Field(default_factory=tuple)
    high_demand_sectors: Tuple[HighDemandSector, ...] = Field(default_factory=tuple)


# =============================================================================
# CAREER PATHS
# =============================================================================

_SCIENCE_CAREERS = (
    "Engineering (Mechanical, Civil, Electrical, Computer)",
    "Medicine (Doctor, Dentist, Pharmacist)",
    "Research Scientist",
    "Information Technology",
    "Architecture",
    "Mathematics and Statistics",
)

_MLT_CAREERS = (
    "Medical Laboratory Technology",
    "Nursing",
    "Biotechnology",
    "Pharmacy",
    "Allied Health Sciences",
    "Clinical Research",
)

_COMMERCE_CAREERS = (
    "Chartered Accountancy (CA)",
    "Company Secretary (CS)",
    "Business Administration (BBA/MBA)",
    "Finance and Banking",
    "Economics",
    "Marketing and Sales",
    "Human Resources",
)

_ARTS_CAREERS = (
    "Law (LLB)",
    "Journalism and Mass Communication",
    "Psychology",
    "Sociology",
    "Literature and Languages",
    "Fine Arts",
    "Teaching and Education",
    "Social Work",
)

_VOCATIONAL_CAREERS = (
    "Automotive Technology",
    "Electrical Technology",
    "Construction Technology",
    "Information Technology Support",
    "Welding and Fabrication",
    "Culinary Arts",
)

# =============================================================================
# HIGH-DEMAND SECTORS
# =============================================================================

_SCIENCE_SECTORS = (
    HighDemandSector(
        sector="Artificial Intelligence & Machine Learning",
        growth="35% annual growth",
        skills=("Python", "TensorFlow", "Data Analysis"),
        career_paths=("AI Engineer", "Data Scientist", "ML Researcher"),
        job_opportunities="Tech companies, research institutions, AI startups, government agencies",
    ),
    HighDemandSector(
        sector="Renewable Energy",
        growth="28% annual growth",
        skills=("Engineering", "Sustainability", "Project Management"),
        career_paths=("Solar Engineer", "Wind Energy Specialist", "Sustainability Consultant"),
        job_opportunities="Energy companies, environmental agencies, renewable energy firms, consulting firms",
    ),
    HighDemandSector(
        sector="Biotechnology & Healthcare",
        growth="22% annual growth",
        skills=("Biology", "Research", "Medical Technology"),
        career_paths=("Biotech Researcher", "Medical Scientist", "Healthcare Analyst"),
        job_opportunities="Hospitals, clinics, research centers, pharmaceutical companies, biotech firms, NGOs",
    ),
)

_COMMERCE_SECTORS = (
    HighDemandSector(
        sector="FinTech & Digital Banking",
        growth="32% annual growth",
        skills=("Blockchain", "Financial Analysis", "Digital Marketing"),
        career_paths=("FinTech Analyst", "Digital Banking Specialist", "Investment Banker"),
        job_opportunities="Banks, financial institutions, fintech startups, investment firms, consulting companies",
    ),
    HighDemandSector(
        sector="E-commerce & Digital Marketing",
        growth="25% annual growth",
        skills=("Digital Marketing", "E-commerce Platforms", "Analytics"),
        career_paths=("E-commerce Manager", "Digital Marketing Specialist", "Business Analyst"),
        job_opportunities="E-commerce companies, marketing agencies, retail chains, digital media firms, startups",
    ),
    HighDemandSector(
        sector="Sustainable Finance",
        growth="20% annual growth",
        skills=("ESG Investing", "Sustainable Finance", "Risk Management"),
        career_paths=("ESG Analyst", "Sustainable Investment Manager", "Green Finance Consultant"),
        job_opportunities="Investment banks, asset management firms, sustainability consulting, green finance institutions",
    ),
)

_ARTS_SECTORS = (
    HighDemandSector(
        sector="Digital Media & Content Creation",
        growth="30% annual growth",
        skills=("Content Creation", "Social Media", "Digital Storytelling"),
        career_paths=("Content Creator", "Social Media Manager", "Digital Journalist"),
        job_opportunities="Media companies, digital agencies, content platforms, entertainment industry, marketing firms",
    ),
    HighDemandSector(
        sector="Mental Health & Wellness",
        growth="24% annual growth",
        skills=("Psychology", "Counseling", "Wellness Coaching"),
        career_paths=("Mental Health Counselor", "Wellness Coach", "Therapist"),
        job_opportunities="Hospitals, clinics, wellness centers, counseling services, NGOs, educational institutions",
    ),
    HighDemandSector(
        sector="Education Technology",
        growth="18% annual growth",
        skills=("Educational Technology", "Online Learning", "Curriculum Design"),
        career_paths=("EdTech Specialist", "Online Educator", "Learning Designer"),
        job_opportunities="EdTech companies, educational institutions, training organizations, content development firms",
    ),
)

# =============================================================================
# STREAM CATALOGS
# =============================================================================

REGULAR_STREAMS: Tuple[Stream, ...] = (
    Stream(
        name="Science",
        required_subjects=("maths", "science"),
        required_aptitudes=("numerical", "logical", "spatial"),
        required_interests=("I", "R"),
        reasoning="Strong in analytical thinking, problem-solving, and scientific inquiry.",
        career_paths=_SCIENCE_CAREERS,
        high_demand_sectors=_SCIENCE_SECTORS,
    ),
    Stream(
        name="Commerce",
        required_subjects=("maths", "english", "socialScience"),
        required_aptitudes=("numerical", "verbal", "logical"),
        required_interests=("C", "E"),
        reasoning="Good with numbers, communication, and business-oriented thinking.",
        career_paths=_COMMERCE_CAREERS,
        high_demand_sectors=_COMMERCE_SECTORS,
    ),
    Stream(
        name="Arts/Humanities",
        required_subjects=("english", "socialScience", "languages"),
        required_aptitudes=("verbal", "spatial", "logical"),
        required_interests=("A", "S"),
        reasoning="Creative, communicative, and interested in human behavior and society.",
        career_paths=_ARTS_CAREERS,
        high_demand_sectors=_ARTS_SECTORS,
    ),
)

VHSC_STREAMS: Tuple[Stream, ...] = (
    Stream(
        name="Science with PCM/PCB",
        required_subjects=("maths", "science"),
        required_aptitudes=("numerical", "logical", "spatial"),
        required_interests=("I", "R"),
        reasoning="Strong analytical skills, interest in science and mathematics, suitable for medical and engineering fields.",
        career_paths=_SCIENCE_CAREERS,
    ),
    Stream(
        name="Science with MLT",
        required_subjects=("science", "english"),
        required_aptitudes=("logical", "verbal", "mechanical"),
        required_interests=("I", "S"),
        reasoning="Interest in healthcare sciences, good with practical applications and helping others.",
        career_paths=_MLT_CAREERS,
    ),
    Stream(
        name="Commerce",
        required_subjects=("maths", "english", "socialScience"),
        required_aptitudes=("numerical", "verbal", "logical"),
        required_interests=("C", "E"),
        reasoning="Strong in business-related subjects, interested in finance, management, and entrepreneurship.",
        career_paths=_COMMERCE_CAREERS,
    ),
    Stream(
        name="Arts/Humanities",
        required_subjects=("english", "socialScience", "languages"),
        required_aptitudes=("verbal", "spatial", "logical"),
        required_interests=("A", "S"),
        reasoning="Creative and communicative, interested in literature, social sciences, and human behavior.",
        career_paths=_ARTS_CAREERS,
    ),
    Stream(
        name="Vocational/Technical",
        required_subjects=("maths", "science"),
        required_aptitudes=("mechanical", "spatial", "logical"),
        required_interests=("R", "C"),
        reasoning="Practical and hands-on, interested in technical skills and vocational training.",
        career_paths=_VOCATIONAL_CAREERS,
    ),
)

# =============================================================================
# ABROAD STUDY OPTIONS (gated, see constants.ABROAD_THRESHOLDS)
# =============================================================================

ABROAD_STUDY_OPTIONS: Dict[str, Tuple[AbroadStudyOption, ...]] = {
    "Science": (
        AbroadStudyOption(
            country="USA",
            universities=("MIT", "Stanford", "Caltech"),
            programs=("Engineering", "Computer Science", "Data Science"),
            requirements="High GPA, GRE scores, strong letters of recommendation",
        ),
        AbroadStudyOption(
            country="Germany",
            universities=("TU Munich", "RWTH Aachen"),
            programs=("Engineering", "Research Programs"),
            requirements="German language proficiency, competitive entrance exams",
        ),
        AbroadStudyOption(
            country="UK",
            universities=("University of London", "University of Manchester"),
            programs=("Medical Laboratory Technology", "Biomedical Sciences"),
            requirements="IELTS, relevant qualifications, clinical experience",
        ),
        AbroadStudyOption(
            country="Gulf Countries (UAE, Saudi Arabia, Qatar)",
            universities=("University of Dubai", "King Saud University", "Carnegie Mellon University in Qatar"),
            programs=("Medical Laboratory Science", "Healthcare Management"),
            requirements="High academic scores, English proficiency, work visa sponsorship",
        ),
        AbroadStudyOption(
            country="European Countries (Netherlands, Sweden)",
            universities=("University of Amsterdam", "Karolinska Institute"),
            programs=("Biomedical Laboratory Science", "Clinical Research"),
            requirements="Bachelor's degree, language requirements, EU Blue Card",
        ),
    ),
    "Commerce": (
        AbroadStudyOption(
            country="UK",
            universities=("London School of Economics", "University of Oxford"),
            programs=("MBA", "Finance", "Business Analytics"),
            requirements="GMAT scores, work experience, English proficiency",
        ),
        AbroadStudyOption(
            country="Canada",
            universities=("University of Toronto", "McGill University"),
            programs=("Business Administration", "International Business"),
            requirements="Competitive GPA, language tests, financial proof",
        ),
    ),
    "Arts/Humanities": (
        AbroadStudyOption(
            country="Australia",
            universities=("University of Melbourne", "University of Sydney"),
            programs=("Media Studies", "International Relations", "Psychology"),
            requirements="Portfolio, English proficiency, competitive application",
        ),
        AbroadStudyOption(
            country="Netherlands",
            universities=("University of Amsterdam", "Utrecht University"),
            programs=("Social Sciences", "Cultural Studies"),
            requirements="Motivation letter, academic references",
        ),
    ),
}


def get_stream(catalog: Tuple[Stream, ...], name: str) -> Optional[Stream]:
    """Look up a stream by name within one catalog."""
    for stream in catalog:
        if stream.name == name:
            return stream
    return None
