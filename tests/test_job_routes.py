"""Tests for /api/jobs."""


def _ids(response):
    return [job["id"] for job in response.json()]


def test_list_jobs_newest_first(client):
    response = client.get("/api/jobs")
    assert response.status_code == 200
    assert _ids(response) == ["job-1", "job-2", "job-3", "job-4"]


def test_list_jobs_filters(client):
    assert _ids(client.get("/api/jobs", params={"country": "canada"})) == ["job-2"]
    assert _ids(client.get("/api/jobs", params={"industry": "construction"})) == ["job-4"]
    assert len(client.get("/api/jobs", params={"active": "true"}).json()) == 4
    assert client.get("/api/jobs", params={"active": "false"}).json() == []
    assert client.get("/api/jobs", params={"active": "yes"}).json() == []


def test_search_overrides_filters(client):
    response = client.get("/api/jobs", params={"search": "hotel", "country": "germany"})
    assert _ids(response) == ["job-3"]


def test_get_job(client):
    response = client.get("/api/jobs/job-2")
    assert response.status_code == 200
    assert response.json()["company"] == "Green Valley Farms"


def test_get_missing_job(client):
    response = client.get("/api/jobs/job-99")
    assert response.status_code == 404
    assert response.json()["detail"] == "Job not found"


def test_create_job(client, job_data):
    response = client.post("/api/jobs", json=job_data)

    assert response.status_code == 201
    body = response.json()
    assert body["is_active"] is True
    assert _ids(client.get("/api/jobs"))[0] == body["id"]


def test_create_job_validation(client, job_data):
    job_data["experience_required"] = -1
    assert client.post("/api/jobs", json=job_data).status_code == 422


def test_update_job(client):
    response = client.put("/api/jobs/job-3", json={"is_active": False, "title": "Night Receptionist"})

    assert response.status_code == 200
    assert response.json()["title"] == "Night Receptionist"
    assert _ids(client.get("/api/jobs", params={"active": "true"})) == ["job-1", "job-2", "job-4"]


def test_update_missing_job(client):
    assert client.put("/api/jobs/job-99", json={"title": "Night Porter"}).status_code == 404


def test_update_job_validation(client):
    assert client.put("/api/jobs/job-1", json={"title": "X"}).status_code == 422
    assert client.put("/api/jobs/job-1", json={"company": ""}).status_code == 422
    assert client.get("/api/jobs/job-1").json()["title"] == "Frontend Developer"
