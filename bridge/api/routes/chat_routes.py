"""
Chat Routes

POST /chat - Ask the placement assistant
"""

import logging

from fastapi import APIRouter, HTTPException, Depends

from bridge.api.deps import get_chat_service
from bridge.services.chat_service import ChatService
from bridge.schemas.schemas import ChatRequest, ChatResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/chat", tags=["Assistant"])


@router.post("", response_model=ChatResponse)
def chat(request: ChatRequest, service: ChatService = Depends(get_chat_service)):
    """
    Send a message to the AI assistant.

    Optional context (any JSON) is passed to the assistant as extra
    background; history carries earlier turns of the conversation.
    """
    if not request.message or not request.message.strip():
        raise HTTPException(status_code=400, detail="Message is required")

    try:
        return service.reply(request.message, context=request.context, history=request.history)
    except Exception as e:
        logger.error("Chat error: %s", e)
        raise HTTPException(status_code=500, detail=f"Error processing chat: {e}")
