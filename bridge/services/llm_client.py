"""
LLM API Client

Talks to any OpenAI-compatible endpoint through the openai library.

AI is used for:
- Match analysis (profile + job -> score, analysis, steps)
- The chat assistant
- Drafting application documents

Errors from the API are NOT caught here. Callers decide whether to
fall back (matching, documents) or report the failure (chat).
"""
import json
import logging
from typing import Any, Iterable, Optional

from openai import OpenAI

from bridge.core.config import get_settings

logger = logging.getLogger(__name__)


MATCH_SYSTEM_PROMPT = (
    "You are an AI job matching expert. Analyze how well a user profile matches a job opportunity. "
    "Consider skills, experience, education, location preferences, salary expectations, and visa requirements. "
    "Respond with JSON in this format: { 'matchScore': number (0-100), 'analysis': string, "
    "'difficulty': 'easy'|'medium'|'hard', 'successProbability': number (0-100), "
    "'requiredSteps': [{'step': number, 'title': string, 'description': string, "
    "'estimatedTime': string, 'cost': number}] }"
)

CHAT_SYSTEM_PROMPT = """You are Bridge, an AI-powered international job placement assistant. You help people find job opportunities around the world and guide them through the process of securing employment in different countries.

Your expertise includes:
- Job matching based on skills, experience, and preferences
- Visa and work permit requirements for different countries
- Application strategies and resume optimization
- Interview preparation and cultural adaptation
- Salary expectations and cost of living comparisons
- Language requirements and learning resources

Always provide practical, actionable advice. Be encouraging but realistic about challenges. Focus on legitimate opportunities and legal pathways to international employment."""

DOCUMENT_PROMPTS = {
    "cover_letter": (
        "You write cover letters for international job applications. "
        "Write a concise, professional cover letter (under 350 words) from the applicant to the employer. "
        "Mention relocation and visa status honestly. Return plain text only."
    ),
    "resume_summary": (
        "You write resume summaries tailored to a specific job abroad. "
        "Write a 4-6 sentence professional summary followed by a bullet list of the most relevant skills. "
        "Return plain text only."
    ),
    "action_plan": (
        "You are an international relocation advisor. Write a numbered, step-by-step action plan "
        "for the applicant to secure this job: language, documents, visa, application and relocation steps, "
        "each with an estimated time. Return plain text only."
    ),
}


class LLMClient:
    """
    Wrapper for the chat completions API with task-specific methods.
    """

    def __init__(self, client: Optional[Any] = None, model: Optional[str] = None):
        settings = get_settings()
        self.client = client or OpenAI(
            api_key=settings.openai_api_key,
            base_url=settings.openai_base_url,
            timeout=settings.openai_timeout
        )
        self.model = model or settings.openai_model

    def _call_api(self, system_prompt: str, user_content: str, json_mode: bool = False,
                  history: Iterable[dict] = ()) -> str:
        """
        Internal method to call the API.
        Returns raw text response.
        """
        messages = [{"role": "system", "content": system_prompt}]
        messages.extend(history)
        messages.append({"role": "user", "content": user_content})

        kwargs = {}
        if json_mode:
            kwargs["response_format"] = {"type": "json_object"}

        response = self.client.chat.completions.create(
            model=self.model,
            messages=messages,
            **kwargs
        )
        return response.choices[0].message.content or ""

    def _extract_json(self, text: str) -> dict:
        """
        Extract JSON from API response.
        Handles cases where model wraps JSON in markdown code blocks.
        """
        text = text.strip()
        if text.startswith("```json"):
            text = text[7:]
        if text.startswith("```"):
            text = text[3:]
        if text.endswith("```"):
            text = text[:-3]

        text = text.strip()
        if not text:
            return {}
        return json.loads(text)

    def analyze_match(self, profile_payload: dict, job_payload: dict) -> dict:
        """
        Ask the model how well a profile fits a job.
        Returns the parsed JSON object (unvalidated).
        """
        user_content = (
            f"User Profile: {json.dumps(profile_payload)}\n\n"
            f"Job Opportunity: {json.dumps(job_payload)}"
        )
        response = self._call_api(MATCH_SYSTEM_PROMPT, user_content, json_mode=True)
        result = self._extract_json(response)
        if not isinstance(result, dict):
            raise ValueError("Match analysis must be a JSON object")
        return result

    def chat(self, message: str, context: Any = None, history: Iterable[dict] = ()) -> str:
        """Answer one assistant message, optionally with extra context and prior turns."""
        system_prompt = CHAT_SYSTEM_PROMPT
        if context:
            system_prompt += f"\n\nAdditional context: {json.dumps(context)}"
        return self._call_api(system_prompt, message, history=history)

    def generate_document(self, document_type: str, profile_payload: dict, job_payload: dict) -> str:
        """Draft an application document of the given type."""
        system_prompt = DOCUMENT_PROMPTS[document_type]
        user_content = (
            f"Applicant: {json.dumps(profile_payload)}\n\n"
            f"Job: {json.dumps(job_payload)}"
        )
        return self._call_api(system_prompt, user_content).strip()

    def test_connection(self) -> bool:
        """Test if the API is reachable"""
        try:
            response = self._call_api(
                "You are a test assistant.",
                "Reply with exactly: OK"
            )
            return "OK" in response.upper()
        except Exception as e:
            logger.warning("LLM connection failed: %s", e)
            return False


# Singleton instance
_llm_client: LLMClient = None


def get_llm_client() -> LLMClient:
    """Get or create the LLM client (singleton pattern)"""
    global _llm_client
    if _llm_client is None:
        _llm_client = LLMClient()
    return _llm_client
