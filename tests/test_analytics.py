"""Tests for job statistics."""

from bridge.schemas.schemas import JobOpportunityCreate
from bridge.services.analytics_service import job_stats, top_counts


def test_top_counts_orders_by_count_then_first_seen():
    entries = top_counts(["b", "a", "a", "c", "b", "a", "d", "e", "f"])
    assert [(e.name, e.count) for e in entries] == [("a", 3), ("b", 2), ("c", 1), ("d", 1), ("e", 1)]


def test_seeded_stats(store):
    stats = job_stats(store)

    assert stats.total_jobs == 4
    assert stats.visa_sponsorship_jobs == 3
    assert stats.visa_sponsorship_percentage == 75
    assert [c.name for c in stats.top_countries] == ["Germany", "Canada", "Netherlands", "Australia"]
    assert all(c.count == 1 for c in stats.top_industries)


def test_stats_ignore_inactive_jobs(store):
    store.update_job_opportunity("job-3", {"is_active": False})

    stats = job_stats(store)

    assert stats.total_jobs == 3
    assert stats.visa_sponsorship_percentage == 100
    assert "Netherlands" not in [c.name for c in stats.top_countries]


def test_stats_on_empty_store(empty_store):
    stats = job_stats(empty_store)

    assert stats.total_jobs == 0
    assert stats.visa_sponsorship_percentage == 0
    assert stats.top_countries == []


def test_job_stats_route(client, store, job_data):
    store.create_job_opportunity(JobOpportunityCreate(**job_data))

    response = client.get("/api/analytics/job-stats")

    assert response.status_code == 200
    body = response.json()
    assert body["total_jobs"] == 5
    assert body["visa_sponsorship_percentage"] == 80
    assert body["top_countries"][0] == {"name": "Canada", "count": 2}
    assert body["top_industries"][0] == {"name": "Healthcare", "count": 1}
