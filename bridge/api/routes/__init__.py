"""
API Routes - Combines all route modules into single router.
"""

from fastapi import APIRouter

from bridge.api.routes.profile_routes import router as profile_router
from bridge.api.routes.job_routes import router as job_router
from bridge.api.routes.match_routes import router as match_router
from bridge.api.routes.chat_routes import router as chat_router
from bridge.api.routes.pricing_routes import router as pricing_router
from bridge.api.routes.analytics_routes import router as analytics_router
from bridge.api.routes.document_routes import router as document_router
from bridge.api.routes.organize_routes import router as organize_router

# Main API router
api_router = APIRouter()

# Include all sub-routers
api_router.include_router(profile_router)
api_router.include_router(job_router)
api_router.include_router(match_router)
api_router.include_router(chat_router)
api_router.include_router(pricing_router)
api_router.include_router(analytics_router)
api_router.include_router(document_router)
api_router.include_router(organize_router)
