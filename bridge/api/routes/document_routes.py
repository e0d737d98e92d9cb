"""
Document Routes

POST /documents/generate - Draft a cover letter, resume summary or action plan
"""

from fastapi import APIRouter, HTTPException, Depends

from bridge.api.deps import get_document_service
from bridge.core.errors import RecordNotFoundError
from bridge.services.document_service import DocumentService
from bridge.schemas.schemas import DocumentRequest, DocumentResponse

router = APIRouter(prefix="/documents", tags=["Documents"])


@router.post("/generate", response_model=DocumentResponse)
def generate_document(
    request: DocumentRequest,
    service: DocumentService = Depends(get_document_service)
):
    """
    Generate an application document for a profile and a job.

    Falls back to a template (ai_generated=false) when the AI is unavailable.
    """
    try:
        return service.generate(request.user_id, request.job_id, request.document_type)
    except RecordNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
