"""
Job Routes

GET /jobs - List jobs with filters, or search
GET /jobs/{job_id} - Get job details
POST /jobs - Create job opportunity
PUT /jobs/{job_id} - Update job opportunity
"""

from fastapi import APIRouter, HTTPException, Depends, Query
from typing import List, Optional

from bridge.api.deps import store_dependency
from bridge.db.memory import MemoryStore
from bridge.schemas.schemas import JobOpportunity, JobOpportunityCreate, JobOpportunityUpdate

router = APIRouter(prefix="/jobs", tags=["Jobs"])


@router.get("", response_model=List[JobOpportunity])
async def list_jobs(
    country: Optional[str] = Query(None, description="Substring of the country"),
    industry: Optional[str] = Query(None, description="Substring of the industry"),
    active: Optional[str] = Query(None, description="'true' for active jobs, anything else for inactive"),
    search: Optional[str] = Query(None, description="Search title, company, industry, country, description"),
    store: MemoryStore = Depends(store_dependency)
):
    """
    List job opportunities, newest first.

    When search is given the other filters are ignored.
    """
    if search:
        return store.search_job_opportunities(search)

    return store.get_job_opportunities(
        country=country,
        industry=industry,
        active=(active == "true") if active else None
    )


@router.get("/{job_id}", response_model=JobOpportunity)
async def get_job(job_id: str, store: MemoryStore = Depends(store_dependency)):
    job = store.get_job_opportunity(job_id)
    if not job:
        raise HTTPException(status_code=404, detail="Job not found")
    return job


@router.post("", response_model=JobOpportunity, status_code=201)
async def create_job(job: JobOpportunityCreate, store: MemoryStore = Depends(store_dependency)):
    return store.create_job_opportunity(job)


@router.put("/{job_id}", response_model=JobOpportunity)
async def update_job(job_id: str, update: JobOpportunityUpdate, store: MemoryStore = Depends(store_dependency)):
    """Update a job opportunity. Only provided fields are changed."""
    job = store.update_job_opportunity(job_id, update.model_dump(exclude_none=True))
    if not job:
        raise HTTPException(status_code=404, detail="Job not found")
    return job
