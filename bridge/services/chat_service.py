"""
Chat Service - the "Bridge" placement assistant.

No fallback here: if the model call fails the route reports it.
"""

from datetime import datetime, timezone
from typing import Any, List

from bridge.services.llm_client import LLMClient
from bridge.schemas.schemas import ChatTurn, ChatResponse


class ChatService:
    def __init__(self, ai_client: LLMClient):
        self.ai_client = ai_client

    def reply(self, message: str, context: Any = None, history: List[ChatTurn] = ()) -> ChatResponse:
        turns = [{"role": turn.role.value, "content": turn.content} for turn in history]
        answer = self.ai_client.chat(message, context=context, history=turns)
        return ChatResponse(message=answer, timestamp=datetime.now(timezone.utc))
