"""
Job Matching Service

PURPOSE:
Score how well a user profile fits each active job opportunity.

HOW IT WORKS:
1. Load the profile (must exist)
2. Take the newest active jobs, up to MATCH_JOB_LIMIT
3. For each job, in order, ask the LLM for a JSON match analysis
4. Validate and clamp the answer, store it as a JobMatch
5. If anything fails for a job, store a fixed fallback match instead
6. Return the new matches, best score first

The scoring itself is entirely the model's; this module only shapes
the prompt payloads and sanitizes what comes back.
"""

import logging
import math
from typing import List, Optional

from bridge.core.config import get_settings
from bridge.core.errors import RecordNotFoundError
from bridge.db.memory import MemoryStore
from bridge.services.llm_client import LLMClient
from bridge.schemas.schemas import (
    UserProfile, JobOpportunity, JobMatchCreate, JobMatchWithJob,
    RequiredStep, Difficulty,
)

logger = logging.getLogger(__name__)


FALLBACK_SCORE = 50
FALLBACK_PROBABILITY = 50
FALLBACK_ANALYSIS = "Basic compatibility analysis: This job requires review of your qualifications."
MISSING_ANALYSIS = "AI analysis not available"


# ============================================================
# PROMPT PAYLOADS
# ============================================================

def profile_payload(profile: UserProfile) -> dict:
    """The profile fields the model sees."""
    data = profile.model_dump(mode="json")
    return {
        "skills": data["skills"],
        "experience": data["work_experience"],
        "education": data["education"],
        "languages": data["languages"],
        "location": data["current_location"],
        "preferred_countries": data["preferred_countries"],
        "salary_expectation": data["salary_expectation"],
        "willing_to_relocate": data["willing_to_relocate"],
        "has_passport": data["has_passport"],
    }


def job_payload(job: JobOpportunity) -> dict:
    """The job fields the model sees."""
    data = job.model_dump(mode="json")
    return {
        "title": data["title"],
        "company": data["company"],
        "country": data["country"],
        "industry": data["industry"],
        "requirements": data["requirements"],
        "salary": data["salary"],
        "languages_required": data["languages_required"],
        "visa_sponsorship": data["visa_sponsorship"],
        "experience_required": data["experience_required"],
        "education_required": data["education_required"],
    }


# ============================================================
# JSON VALIDATION HELPERS
# ============================================================

def clamp_percentage(value, default: int) -> int:
    """
    Round half-up and clamp into 0..100.

    Any falsy value (None, 0, "") means "not given" and uses the default.
    Non-numeric values raise, which sends the caller to the fallback path.
    """
    if not value:
        value = default
    number = float(value)
    return max(0, min(100, int(math.floor(number + 0.5))))


def validate_required_steps(raw_steps) -> List[RequiredStep]:
    """Keep well-formed step objects, coerce their fields, drop the rest."""
    if not isinstance(raw_steps, list):
        return []

    steps = []
    for index, item in enumerate(raw_steps, start=1):
        if not isinstance(item, dict):
            continue
        title = str(item.get("title", "")).strip()
        if not title:
            continue

        try:
            step_number = int(item.get("step", index))
        except (ValueError, TypeError):
            step_number = index

        try:
            cost = max(0.0, float(item.get("cost", 0) or 0))
        except (ValueError, TypeError):
            cost = 0.0

        steps.append(RequiredStep(
            step=step_number,
            title=title,
            description=str(item.get("description", "") or "").strip(),
            estimated_time=str(item.get("estimatedTime", item.get("estimated_time", "")) or "").strip(),
            cost=cost
        ))
    return steps


def validate_difficulty(value) -> Difficulty:
    try:
        return Difficulty(str(value).strip().lower())
    except ValueError:
        return Difficulty.medium


def build_match(user_id: str, job_id: str, ai_result: dict) -> JobMatchCreate:
    """Turn a raw model answer into a storable match."""
    return JobMatchCreate(
        user_id=user_id,
        job_id=job_id,
        match_score=clamp_percentage(ai_result.get("matchScore"), 0),
        match_analysis=str(ai_result.get("analysis") or MISSING_ANALYSIS),
        required_steps=validate_required_steps(ai_result.get("requiredSteps")),
        overall_difficulty=validate_difficulty(ai_result.get("difficulty") or "medium"),
        success_probability=clamp_percentage(ai_result.get("successProbability"), FALLBACK_PROBABILITY)
    )


def build_fallback_match(user_id: str, job_id: str) -> JobMatchCreate:
    """Fixed match stored when the model could not be used."""
    return JobMatchCreate(
        user_id=user_id,
        job_id=job_id,
        match_score=FALLBACK_SCORE,
        match_analysis=FALLBACK_ANALYSIS,
        required_steps=[
            RequiredStep(
                step=1,
                title="Review Requirements",
                description="Carefully review the job requirements and compare with your skills",
                estimated_time="30 minutes",
                cost=0
            )
        ],
        overall_difficulty=Difficulty.medium,
        success_probability=FALLBACK_PROBABILITY
    )


# ============================================================
# MATCHING SERVICE
# ============================================================

class MatchingService:
    """
    Generates and stores job matches for a user.
    """

    def __init__(self, store: MemoryStore, ai_client: LLMClient, job_limit: Optional[int] = None):
        self.store = store
        self.ai_client = ai_client
        self.job_limit = job_limit if job_limit is not None else get_settings().match_job_limit

    def analyze(self, profile: UserProfile, job: JobOpportunity) -> JobMatchCreate:
        """Match one job, falling back to the fixed record on any failure."""
        try:
            ai_result = self.ai_client.analyze_match(profile_payload(profile), job_payload(job))
            return build_match(profile.id, job.id, ai_result)
        except Exception as e:
            logger.warning("AI analysis failed for job %s: %s", job.id, e)
            return build_fallback_match(profile.id, job.id)

    def match_jobs(self, user_id: str) -> List[JobMatchWithJob]:
        """
        Run matching for a user against the newest active jobs.

        Raises:
            RecordNotFoundError: if the user profile does not exist
        """
        profile = self.store.get_user_profile(user_id)
        if profile is None:
            raise RecordNotFoundError("User profile", user_id)

        jobs = self.store.get_job_opportunities(active=True)[:self.job_limit]
        logger.info("Matching user %s against %d jobs", user_id, len(jobs))

        matches = []
        for job in jobs:
            stored = self.store.create_job_match(self.analyze(profile, job))
            matches.append(JobMatchWithJob(**stored.model_dump(), job=job))

        # sorted() is stable: equal scores keep job order
        return sorted(matches, key=lambda m: m.match_score, reverse=True)

    def get_user_matches(self, user_id: str) -> List[JobMatchWithJob]:
        """Stored matches for a user, newest first, with their jobs attached."""
        return [
            JobMatchWithJob(**match.model_dump(), job=self.store.get_job_opportunity(match.job_id))
            for match in self.store.get_job_matches(user_id)
        ]
