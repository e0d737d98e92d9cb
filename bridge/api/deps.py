"""
Dependency providers for the API routes.

Routes take services through Depends so tests can swap the store or the
LLM client with app.dependency_overrides.
"""

from fastapi import Depends

from bridge.db.memory import MemoryStore, get_store
from bridge.services.llm_client import LLMClient, get_llm_client
from bridge.services.matching_service import MatchingService
from bridge.services.chat_service import ChatService
from bridge.services.document_service import DocumentService
from bridge.services.pricing_service import PricingService


def store_dependency() -> MemoryStore:
    return get_store()


def llm_dependency() -> LLMClient:
    return get_llm_client()


def get_matching_service(
    store: MemoryStore = Depends(store_dependency),
    ai_client: LLMClient = Depends(llm_dependency)
) -> MatchingService:
    return MatchingService(store, ai_client)


def get_chat_service(ai_client: LLMClient = Depends(llm_dependency)) -> ChatService:
    return ChatService(ai_client)


def get_document_service(
    store: MemoryStore = Depends(store_dependency),
    ai_client: LLMClient = Depends(llm_dependency)
) -> DocumentService:
    return DocumentService(store, ai_client)


def get_pricing_service(store: MemoryStore = Depends(store_dependency)) -> PricingService:
    return PricingService(store)
