"""Shared fixtures: a fresh seeded store and a scripted LLM client per test."""

import pytest
from fastapi.testclient import TestClient

from bridge.api.deps import store_dependency, llm_dependency
from bridge.db.memory import MemoryStore
from bridge.main import app


class FakeLLMClient:
    """
    Stands in for LLMClient. Each call pops the next scripted answer;
    an Exception instance in the script is raised instead of returned.
    """

    def __init__(self):
        self.match_results = []
        self.chat_replies = []
        self.documents = []
        self.calls = []

    @staticmethod
    def _next(queue, default):
        item = queue.pop(0) if queue else default
        if isinstance(item, Exception):
            raise item
        return item

    def analyze_match(self, profile_payload, job_payload):
        self.calls.append(("analyze_match", profile_payload, job_payload))
        return self._next(self.match_results, RuntimeError("no scripted match"))

    def chat(self, message, context=None, history=()):
        self.calls.append(("chat", message, context, list(history)))
        return self._next(self.chat_replies, RuntimeError("no scripted reply"))

    def generate_document(self, document_type, profile_payload, job_payload):
        self.calls.append(("generate_document", document_type, profile_payload, job_payload))
        return self._next(self.documents, RuntimeError("no scripted document"))


@pytest.fixture
def store():
    return MemoryStore(seed=True)


@pytest.fixture
def empty_store():
    return MemoryStore(seed=False)


@pytest.fixture
def fake_llm():
    return FakeLLMClient()


@pytest.fixture
def client(store, fake_llm):
    app.dependency_overrides[store_dependency] = lambda: store
    app.dependency_overrides[llm_dependency] = lambda: fake_llm
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
def profile_data():
    return {
        "email": "maria@example.com",
        "full_name": "Maria Lopez",
        "age": 31,
        "nationality": "Mexican",
        "current_location": "Guadalajara, Mexico",
        "languages": ["Spanish", "English"],
        "education": "master",
        "work_experience": [
            {"title": "Nurse", "industry": "Healthcare", "years_of_experience": 6}
        ],
        "skills": ["Patient care", "ICU", "Triage"],
        "preferred_countries": ["Canada", "Germany"],
        "preferred_industries": ["Healthcare"],
        "salary_expectation": {"min": 50000, "max": 70000, "currency": "CAD"},
        "willing_to_relocate": True,
        "has_passport": True,
    }


@pytest.fixture
def job_data():
    return {
        "title": "Registered Nurse",
        "company": "Toronto General",
        "country": "Canada",
        "city": "Toronto",
        "industry": "Healthcare",
        "description": "ICU nursing role with relocation support.",
        "requirements": ["ICU", "Nursing license"],
        "salary": {"min": 75000, "max": 90000, "currency": "CAD"},
        "languages_required": ["English"],
        "visa_sponsorship": True,
        "experience_required": 3,
        "education_required": "bachelor",
    }
