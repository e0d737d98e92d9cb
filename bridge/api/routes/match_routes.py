"""
Matching Routes

POST /match-jobs - Run AI matching for a user against active jobs
GET /matches/{user_id} - Get stored matches with job details
"""

from fastapi import APIRouter, HTTPException, Depends
from typing import List

from bridge.api.deps import get_matching_service
from bridge.core.errors import RecordNotFoundError
from bridge.services.matching_service import MatchingService
from bridge.schemas.schemas import MatchJobsRequest, MatchJobsResponse, JobMatchWithJob

router = APIRouter(tags=["Matching"])


@router.post("/match-jobs", response_model=MatchJobsResponse)
def match_jobs(
    request: MatchJobsRequest,
    service: MatchingService = Depends(get_matching_service)
):
    """
    Generate AI job matches for a user.

    Process:
    1. Take the newest active jobs (5 by default)
    2. Ask the AI to analyze each profile/job pair
    3. Store each result (or a fallback when the AI call fails)
    4. Return the new matches sorted by score
    """
    if not request.user_id or not request.user_id.strip():
        raise HTTPException(status_code=400, detail="User ID is required")

    try:
        matches = service.match_jobs(request.user_id)
    except RecordNotFoundError:
        raise HTTPException(status_code=404, detail="User profile not found")

    return MatchJobsResponse(matches=matches)


@router.get("/matches/{user_id}", response_model=List[JobMatchWithJob])
async def get_matches(user_id: str, service: MatchingService = Depends(get_matching_service)):
    """Get a user's stored matches, newest first, each with its job."""
    return service.get_user_matches(user_id)
