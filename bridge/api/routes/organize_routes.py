"""
Organize Routes

POST /organize/suggestions - Upload files, get folder organization suggestions
"""

from fastapi import APIRouter, UploadFile, File
from typing import List

from bridge.utils.file_upload import describe_uploads
from bridge.services.organize_service import suggest_organization
from bridge.schemas.schemas import OrganizeResponse

router = APIRouter(prefix="/organize", tags=["Organize"])


@router.post("/suggestions", response_model=OrganizeResponse)
async def organize_suggestions(
    files: List[UploadFile] = File(..., description="Files to organize")
):
    """
    Suggest how to organize a batch of files.

    Files are inspected for name, type and size only (max 5MB each).
    """
    infos = await describe_uploads(files)
    return OrganizeResponse(files=infos, suggestions=suggest_organization(infos))
