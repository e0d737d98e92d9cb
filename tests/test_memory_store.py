"""Tests for the in-memory record store."""

from datetime import datetime, timedelta, timezone

from bridge.db.memory import MemoryStore
from bridge.schemas.schemas import (
    UserProfileCreate, JobOpportunityCreate, JobMatch, PaymentStatus, ServiceType,
)


def test_seeded_store_contents(store):
    assert store.stats() == {
        "user_profiles": 1,
        "job_opportunities": 4,
        "job_matches": 1,
        "service_orders": 0,
    }
    assert store.get_user_profile("user-1").email == "demo@bridge.com"
    assert store.get_job_match("match-1").match_score == 92


def test_unseeded_store_is_empty(empty_store):
    assert all(count == 0 for count in empty_store.stats().values())


def test_jobs_sorted_newest_first(store):
    ids = [job.id for job in store.get_job_opportunities()]
    assert ids == ["job-1", "job-2", "job-3", "job-4"]


def test_job_filters_are_case_insensitive_substrings(store):
    assert [j.id for j in store.get_job_opportunities(country="ger")] == ["job-1"]
    assert [j.id for j in store.get_job_opportunities(industry="TECH")] == ["job-1"]
    assert [j.id for j in store.get_job_opportunities(country="nether", industry="hosp")] == ["job-3"]


def test_active_filter(store):
    assert store.get_job_opportunities(active=False) == []

    store.update_job_opportunity("job-2", {"is_active": False})

    assert [j.id for j in store.get_job_opportunities(active=False)] == ["job-2"]
    assert len(store.get_job_opportunities(active=True)) == 3


def test_search_matches_any_text_field(store):
    assert [j.id for j in store.search_job_opportunities("amsterdam")] == ["job-3"]
    assert [j.id for j in store.search_job_opportunities("SPONSORSHIP")] == ["job-1", "job-4"]
    assert store.search_job_opportunities("astronaut") == []


def test_create_and_find_profile(empty_store, profile_data):
    profile = empty_store.create_user_profile(UserProfileCreate(**profile_data))

    assert profile.id
    assert profile.created_at.tzinfo is not None
    assert empty_store.get_user_profile(profile.id) == profile
    assert empty_store.get_user_profile_by_email("maria@example.com").id == profile.id
    assert empty_store.get_user_profile_by_email("nobody@example.com") is None


def test_update_profile_merges_fields(store):
    updated = store.update_user_profile("user-1", {"skills": ["Go"], "age": 30})

    assert updated.skills == ["Go"]
    assert updated.age == 30
    assert updated.full_name == "Alex Johnson"
    assert store.get_user_profile("user-1").skills == ["Go"]


def test_update_missing_records_returns_none(store):
    assert store.update_user_profile("missing", {"age": 30}) is None
    assert store.update_job_opportunity("missing", {"title": "X"}) is None
    assert store.update_service_order_status("missing", PaymentStatus.completed) is None


def test_create_job_defaults(empty_store, job_data):
    del job_data["visa_sponsorship"]
    job = empty_store.create_job_opportunity(JobOpportunityCreate(**job_data))

    assert job.visa_sponsorship is False
    assert job.is_active is True
    assert empty_store.get_job_opportunity(job.id) == job


def test_job_matches_newest_first(store):
    base = datetime(2025, 1, 1, tzinfo=timezone.utc)
    for i, match_id in enumerate(["old", "new"]):
        store.job_matches[match_id] = JobMatch(
            id=match_id, user_id="user-2", job_id="job-1", match_score=10,
            match_analysis="", success_probability=10,
            created_at=base + timedelta(days=i),
        )

    assert [m.id for m in store.get_job_matches("user-2")] == ["new", "old"]
    assert store.get_job_matches("nobody") == []


def test_service_order_status_keeps_payment_id(store):
    order = store.create_service_order({
        "user_id": "user-1",
        "service_type": ServiceType.basic_match,
        "price": 2900,
        "features": ["AI job matching analysis"],
    })
    assert order.status == PaymentStatus.pending
    assert order.currency == "usd"

    paid = store.update_service_order_status(order.id, PaymentStatus.completed, "pay_123")
    assert paid.payment_id == "pay_123"

    failed = store.update_service_order_status(order.id, PaymentStatus.failed)
    assert failed.status == PaymentStatus.failed
    assert failed.payment_id == "pay_123"
    assert store.get_service_orders("user-1") == [failed]


def test_stores_are_independent():
    first = MemoryStore(seed=True)
    second = MemoryStore(seed=True)
    first.update_user_profile("user-1", {"age": 40})
    assert second.get_user_profile("user-1").age == 28
