"""
Bridge - Main Application

FastAPI backend with:
- In-memory record store (profiles, jobs, matches, service orders)
- OpenAI-compatible LLM for matching, chat and document drafts
- Static pricing catalog
- Browser frontend served from /frontend/public when present

Run: uvicorn bridge.main:app --reload
"""

import logging
import os
from contextlib import asynccontextmanager

from fastapi import FastAPI, Depends
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles
from fastapi.responses import FileResponse

from bridge import __version__
from bridge.api.deps import store_dependency
from bridge.api.routes import api_router
from bridge.core.config import get_settings
from bridge.core.errors import unhandled_error_handler
from bridge.db.memory import MemoryStore, get_store
from bridge.schemas.schemas import HealthResponse

settings = get_settings()

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s"
)
logger = logging.getLogger("bridge")

# Get the project root directory
PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
FRONTEND_DIR = os.path.join(PROJECT_ROOT, "frontend", "public")


# Startup
@asynccontextmanager
async def lifespan(app: FastAPI):
    """Create the store on startup and report what it holds."""
    store = get_store()
    logger.info("Store ready: %s", store.stats())
    if not settings.ai_configured:
        logger.warning("OPENAI_API_KEY is not set; matching will use fallback results")
    yield


# Create FastAPI app
app = FastAPI(
    title="Bridge",
    description="""
    International job placement with AI-assisted matching.

    ## Features
    - **Profiles**: Job seeker profiles with skills, languages and preferences
    - **Jobs**: Browse, filter and search opportunities worldwide
    - **Matching**: AI compatibility analysis with step-by-step plans
    - **Assistant**: Chat about visas, applications and relocation
    - **Documents**: Cover letters, resume summaries and action plans
    - **Pricing**: Paid support tiers and service orders
    - **Analytics**: Job statistics by country and industry
    """,
    version=__version__,
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.add_exception_handler(Exception, unhandled_error_handler)

# Include API routes
app.include_router(api_router, prefix="/api")

# Serve static files (for any additional assets)
if os.path.exists(FRONTEND_DIR):
    app.mount("/static", StaticFiles(directory=FRONTEND_DIR), name="static")


# Serve frontend for root path
@app.get("/", tags=["Frontend"])
async def serve_frontend():
    """Serve the browser frontend."""
    index_path = os.path.join(FRONTEND_DIR, "index.html")
    if os.path.exists(index_path):
        return FileResponse(index_path)
    return {"status": "healthy", "app": "Bridge", "message": "Frontend not found. API is running."}


@app.get("/health", response_model=HealthResponse, tags=["Health"])
async def health_check(store: MemoryStore = Depends(store_dependency)):
    """Detailed health check."""
    return HealthResponse(
        status="healthy",
        ai="configured" if settings.ai_configured else "not configured",
        records=store.stats()
    )
