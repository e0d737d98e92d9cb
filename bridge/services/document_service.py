"""
Document Generation Service

Drafts application documents for a (profile, job) pair:
- cover_letter   - letter to the employer
- resume_summary - job-tailored summary and skill list
- action_plan    - steps to land the job abroad

The LLM writes the document. If the call fails a plain template built
from the stored records is returned instead, flagged ai_generated=False.
"""

import logging
from datetime import datetime, timezone

from bridge.core.errors import RecordNotFoundError
from bridge.db.memory import MemoryStore
from bridge.services.llm_client import LLMClient
from bridge.services.matching_service import profile_payload, job_payload
from bridge.schemas.schemas import (
    UserProfile, JobOpportunity, DocumentType, DocumentResponse,
)

logger = logging.getLogger(__name__)


TITLES = {
    DocumentType.cover_letter: "Cover Letter",
    DocumentType.resume_summary: "Resume Summary",
    DocumentType.action_plan: "Action Plan",
}


def _join(items) -> str:
    return ", ".join(items) if items else "none listed"


def template_document(document_type: DocumentType, profile: UserProfile, job: JobOpportunity) -> str:
    """Deterministic document used when the model is unavailable."""
    years = sum(exp.years_of_experience for exp in profile.work_experience)

    if document_type == DocumentType.cover_letter:
        relocation = (
            "I am ready to relocate" if profile.willing_to_relocate
            else "I would like to discuss relocation options"
        )
        visa = (
            "I understand your company offers visa sponsorship."
            if job.visa_sponsorship else
            "I am aware this position does not include visa sponsorship."
        )
        return (
            f"Dear {job.company} Hiring Team,\n\n"
            f"I am writing to apply for the {job.title} position in {job.city}, {job.country}. "
            f"I am currently based in {profile.current_location} and bring {years:g} years of experience "
            f"with skills in {_join(profile.skills)}.\n\n"
            f"I speak {_join(profile.languages)}. {relocation} to {job.country}. {visa}\n\n"
            f"Thank you for your consideration.\n\n"
            f"Sincerely,\n{profile.full_name}"
        )

    if document_type == DocumentType.resume_summary:
        relevant = [s for s in profile.skills if any(s.lower() in r.lower() for r in job.requirements)]
        lines = [
            f"{profile.full_name} - {profile.education.value} educated professional with "
            f"{years:g} years of experience, based in {profile.current_location}, "
            f"seeking a {job.title} role in {job.country}.",
            "",
            "Relevant skills:",
        ]
        lines.extend(f"- {skill}" for skill in (relevant or profile.skills))
        return "\n".join(lines)

    steps = []
    missing_languages = [lang for lang in job.languages_required if lang not in profile.languages]
    if missing_languages:
        steps.append(f"Study {_join(missing_languages)} to meet the language requirements (2-3 months)")
    steps.append(f"Tailor your resume to the {job.title} requirements: {_join(job.requirements)} (1 week)")
    if not profile.has_passport:
        steps.append("Apply for a passport (4-8 weeks)")
    if job.visa_sponsorship:
        steps.append(f"Apply with {job.company} and request visa sponsorship (4-6 weeks)")
    else:
        steps.append(f"Research work permit options for {job.country} before applying (2-4 weeks)")
    steps.append(f"Plan your move to {job.city} once an offer is confirmed (2-4 weeks)")
    return "\n".join(f"{i}. {step}" for i, step in enumerate(steps, start=1))


class DocumentService:
    def __init__(self, store: MemoryStore, ai_client: LLMClient):
        self.store = store
        self.ai_client = ai_client

    def generate(self, user_id: str, job_id: str, document_type: DocumentType) -> DocumentResponse:
        """
        Draft a document for a profile and job.

        Raises:
            RecordNotFoundError: if the profile or the job does not exist
        """
        profile = self.store.get_user_profile(user_id)
        if profile is None:
            raise RecordNotFoundError("User profile", user_id)
        job = self.store.get_job_opportunity(job_id)
        if job is None:
            raise RecordNotFoundError("Job", job_id)

        ai_generated = True
        try:
            content = self.ai_client.generate_document(
                document_type.value, profile_payload(profile), job_payload(job)
            )
            if not content:
                raise ValueError("empty document")
        except Exception as e:
            logger.warning("Document generation failed for user %s, job %s: %s", user_id, job_id, e)
            content = template_document(document_type, profile, job)
            ai_generated = False

        return DocumentResponse(
            document_type=document_type,
            title=f"{TITLES[document_type]}: {job.title} at {job.company}",
            content=content,
            ai_generated=ai_generated,
            generated_at=datetime.now(timezone.utc)
        )
