"""
User Profile Routes

GET /user-profile?email= - Find a profile by email
GET /user-profile/{profile_id} - Get a profile
POST /user-profile - Create a profile
PUT /user-profile/{profile_id} - Update a profile (only provided fields)
"""

from fastapi import APIRouter, HTTPException, Depends, Query

from bridge.api.deps import store_dependency
from bridge.db.memory import MemoryStore
from bridge.schemas.schemas import UserProfile, UserProfileCreate, UserProfileUpdate

router = APIRouter(prefix="/user-profile", tags=["User Profiles"])


@router.get("", response_model=UserProfile)
async def find_profile(
    email: str = Query(..., description="Email address of the profile"),
    store: MemoryStore = Depends(store_dependency)
):
    """Look up a profile by its email address."""
    profile = store.get_user_profile_by_email(email)
    if not profile:
        raise HTTPException(status_code=404, detail="User profile not found")
    return profile


@router.get("/{profile_id}", response_model=UserProfile)
async def get_profile(profile_id: str, store: MemoryStore = Depends(store_dependency)):
    profile = store.get_user_profile(profile_id)
    if not profile:
        raise HTTPException(status_code=404, detail="User profile not found")
    return profile


@router.post("", response_model=UserProfile, status_code=201)
async def create_profile(data: UserProfileCreate, store: MemoryStore = Depends(store_dependency)):
    """Create a job seeker profile. Email must be unique."""
    if store.get_user_profile_by_email(data.email):
        raise HTTPException(status_code=400, detail="Email already registered")
    return store.create_user_profile(data)


@router.put("/{profile_id}", response_model=UserProfile)
async def update_profile(
    profile_id: str,
    data: UserProfileUpdate,
    store: MemoryStore = Depends(store_dependency)
):
    """Update a profile. Only provided fields are changed."""
    updates = data.model_dump(exclude_none=True)

    if "email" in updates:
        owner = store.get_user_profile_by_email(updates["email"])
        if owner and owner.id != profile_id:
            raise HTTPException(status_code=400, detail="Email already registered")

    profile = store.update_user_profile(profile_id, updates)
    if not profile:
        raise HTTPException(status_code=404, detail="User profile not found")
    return profile
