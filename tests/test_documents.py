"""Tests for application document generation."""

import pytest

from bridge.core.errors import RecordNotFoundError
from bridge.schemas.schemas import DocumentType
from bridge.services.document_service import DocumentService, template_document


def test_ai_document(client, fake_llm):
    fake_llm.documents = ["Dear Hiring Team, ..."]

    response = client.post("/api/documents/generate", json={
        "user_id": "user-1", "job_id": "job-1", "document_type": "cover_letter",
    })

    assert response.status_code == 200
    body = response.json()
    assert body["ai_generated"] is True
    assert body["content"] == "Dear Hiring Team, ..."
    assert body["title"] == "Cover Letter: Frontend Developer at Tech Solutions GmbH"
    name, document_type, profile, job = fake_llm.calls[0]
    assert document_type == "cover_letter"
    assert profile["skills"][0] == "JavaScript"
    assert job["company"] == "Tech Solutions GmbH"


def test_document_type_defaults_to_cover_letter(client, fake_llm):
    fake_llm.documents = ["text"]
    body = client.post("/api/documents/generate", json={"user_id": "user-1", "job_id": "job-2"}).json()
    assert body["document_type"] == "cover_letter"


def test_fallback_cover_letter(client):
    response = client.post("/api/documents/generate", json={
        "user_id": "user-1", "job_id": "job-1", "document_type": "cover_letter",
    })

    body = response.json()
    assert body["ai_generated"] is False
    assert body["content"].startswith("Dear Tech Solutions GmbH Hiring Team")
    assert "Alex Johnson" in body["content"]
    assert "visa sponsorship" in body["content"]


def test_empty_ai_answer_falls_back(store, fake_llm):
    fake_llm.documents = [""]
    document = DocumentService(store, fake_llm).generate("user-1", "job-3", DocumentType.resume_summary)

    assert document.ai_generated is False
    assert "Relevant skills:" in document.content


def test_action_plan_template(store):
    content = template_document(
        DocumentType.action_plan, store.get_user_profile("user-1"), store.get_job_opportunity("job-1")
    )
    lines = content.splitlines()

    assert lines[0].startswith("1. Study German (basic)")
    assert not any("passport" in line for line in lines)
    assert any("request visa sponsorship" in line for line in lines)
    assert lines[-1].startswith(f"{len(lines)}. Plan your move to Berlin")


def test_action_plan_without_sponsorship_or_passport(store):
    profile = store.update_user_profile("user-1", {"has_passport": False, "languages": ["English", "Dutch"]})
    content = template_document(DocumentType.action_plan, profile, store.get_job_opportunity("job-3"))

    assert content.startswith("1. Tailor your resume")
    assert "Apply for a passport" in content
    assert "work permit options for Netherlands" in content


def test_unknown_records(client, store, fake_llm):
    response = client.post("/api/documents/generate", json={"user_id": "nobody", "job_id": "job-1"})
    assert response.status_code == 404
    assert response.json()["detail"] == "User profile not found"

    response = client.post("/api/documents/generate", json={"user_id": "user-1", "job_id": "job-99"})
    assert response.status_code == 404
    assert response.json()["detail"] == "Job not found"

    with pytest.raises(RecordNotFoundError):
        DocumentService(store, fake_llm).generate("user-1", "job-99", DocumentType.action_plan)


def test_invalid_document_type(client):
    response = client.post("/api/documents/generate", json={
        "user_id": "user-1", "job_id": "job-1", "document_type": "poem",
    })
    assert response.status_code == 422
