"""
Sample data for demonstration.

Loaded into a fresh MemoryStore unless SEED_SAMPLE_DATA=false:
one applicant (user-1), four jobs in four countries (job-1..job-4)
and one stored match between them (match-1).
"""

from datetime import datetime, timezone

from bridge.schemas.schemas import (
    UserProfile, JobOpportunity, JobMatch, RequiredStep,
    SalaryRange, WorkExperience, EducationLevel, Difficulty,
)


def _date(year: int, month: int, day: int) -> datetime:
    return datetime(year, month, day, tzinfo=timezone.utc)


def sample_profile() -> UserProfile:
    return UserProfile(
        id="user-1",
        email="demo@bridge.com",
        full_name="Alex Johnson",
        age=28,
        nationality="American",
        current_location="New York, USA",
        languages=["English", "Spanish"],
        education=EducationLevel.bachelor,
        work_experience=[
            WorkExperience(
                title="Software Developer",
                industry="Technology",
                years_of_experience=3,
                description="Full-stack web development using React and Node.js"
            )
        ],
        skills=["JavaScript", "React", "Node.js", "Python", "SQL"],
        preferred_countries=["Canada", "Germany", "Netherlands", "Australia"],
        preferred_industries=["Technology", "Software Development", "Startups"],
        salary_expectation=SalaryRange(min=70000, max=100000, currency="USD"),
        willing_to_relocate=True,
        has_passport=True,
        created_at=datetime.now(timezone.utc),
    )


def sample_jobs() -> list:
    return [
        JobOpportunity(
            id="job-1",
            title="Frontend Developer",
            company="Tech Solutions GmbH",
            country="Germany",
            city="Berlin",
            industry="Technology",
            description="Join our dynamic team building innovative web applications. "
                        "We offer visa sponsorship and relocation assistance.",
            requirements=["React", "TypeScript", "3+ years experience", "English fluency"],
            salary=SalaryRange(min=65000, max=85000, currency="EUR"),
            languages_required=["English", "German (basic)"],
            visa_sponsorship=True,
            experience_required=3,
            education_required=EducationLevel.bachelor,
            is_active=True,
            created_at=_date(2024, 8, 15),
        ),
        JobOpportunity(
            id="job-2",
            title="Farm Worker",
            company="Green Valley Farms",
            country="Canada",
            city="Kelowna, BC",
            industry="Agriculture",
            description="Year-round position at organic farm with accommodation provided. "
                        "Perfect for those seeking outdoor work and Canadian experience.",
            requirements=["Physical fitness", "No experience required", "Willingness to learn"],
            salary=SalaryRange(min=35000, max=45000, currency="CAD"),
            languages_required=["English"],
            visa_sponsorship=True,
            experience_required=0,
            education_required=EducationLevel.none,
            is_active=True,
            created_at=_date(2024, 8, 10),
        ),
        JobOpportunity(
            id="job-3",
            title="Hotel Receptionist",
            company="Grand Hotel Amsterdam",
            country="Netherlands",
            city="Amsterdam",
            industry="Hospitality",
            description="Evening shift receptionist for luxury hotel. "
                        "Great opportunity to gain European work experience.",
            requirements=["Customer service", "Multiple languages", "Professional appearance"],
            salary=SalaryRange(min=28000, max=35000, currency="EUR"),
            languages_required=["English", "Dutch"],
            visa_sponsorship=False,
            experience_required=1,
            education_required=EducationLevel.secondary,
            is_active=True,
            created_at=_date(2024, 8, 5),
        ),
        JobOpportunity(
            id="job-4",
            title="Construction Worker",
            company="Sydney Build Co",
            country="Australia",
            city="Sydney",
            industry="Construction",
            description="Skilled construction work with competitive pay. "
                        "Sponsorship available for right candidate.",
            requirements=["Construction experience", "Safety certification", "Physical fitness"],
            salary=SalaryRange(min=55000, max=70000, currency="AUD"),
            languages_required=["English"],
            visa_sponsorship=True,
            experience_required=2,
            education_required=EducationLevel.vocational,
            is_active=True,
            created_at=_date(2024, 7, 30),
        ),
    ]


def sample_match() -> JobMatch:
    return JobMatch(
        id="match-1",
        user_id="user-1",
        job_id="job-1",
        match_score=92,
        match_analysis="Excellent match! Your React and JavaScript skills align perfectly with this role. "
                       "The salary matches your expectations, and the company offers visa sponsorship.",
        required_steps=[
            RequiredStep(
                step=1,
                title="Improve German Language Skills",
                description="Take basic German lessons to meet language requirements",
                estimated_time="2-3 months",
                cost=500
            ),
            RequiredStep(
                step=2,
                title="Update Resume for German Market",
                description="Format resume according to German standards (Lebenslauf)",
                estimated_time="1 week",
                cost=0
            ),
            RequiredStep(
                step=3,
                title="Apply for Work Visa",
                description="Submit visa application with job offer",
                estimated_time="4-6 weeks",
                cost=200
            ),
        ],
        overall_difficulty=Difficulty.medium,
        success_probability=85,
        created_at=datetime.now(timezone.utc),
    )


def load_sample_data(store) -> None:
    """Insert the sample records into an empty store."""
    profile = sample_profile()
    store.user_profiles[profile.id] = profile

    for job in sample_jobs():
        store.job_opportunities[job.id] = job

    match = sample_match()
    store.job_matches[match.id] = match
