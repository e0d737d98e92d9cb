"""
Analytics Routes

GET /analytics/job-stats - Counts over active jobs
"""

from fastapi import APIRouter, Depends

from bridge.api.deps import store_dependency
from bridge.db.memory import MemoryStore
from bridge.services.analytics_service import job_stats
from bridge.schemas.schemas import JobStatsResponse

router = APIRouter(prefix="/analytics", tags=["Analytics"])


@router.get("/job-stats", response_model=JobStatsResponse)
async def get_job_stats(store: MemoryStore = Depends(store_dependency)):
    """
    Global job statistics: totals, visa sponsorship share,
    and the top five countries and industries.
    """
    return job_stats(store)
