"""
API Endpoint for Hockey SEO Opportunity Analysis

FastAPI application that:
1. Receives a team name and candidate keywords
2. Resolves up to three keywords against live DataForSEO SERPs
3. Simulates the rest (and any failed lookup)
4. Returns keyword opportunities ranked by score
"""

import logging
import sys
from datetime import datetime, timezone
from typing import Any, List, Optional

from fastapi import Depends, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from src import __version__
from src.analyzer import AnalysisOrchestrator, AnalysisValidationError
from src.utils.config import Settings, get_settings

# Configure logging to stdout
logging.basicConfig(
    level=get_settings().LOG_LEVEL.upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    stream=sys.stdout,  # Explicitly use stdout
    force=True,  # Override any existing config
)
logger = logging.getLogger(__name__)

# Quiet down chatty loggers
logging.getLogger("httpx").setLevel(logging.WARNING)
logging.getLogger("httpcore").setLevel(logging.WARNING)

MISSING_FIELDS_ERROR = "Missing required fields: teamName and keywords array"

# Create FastAPI app
app = FastAPI(
    title="Hockey SEO Opportunity Analyzer",
    description="Keyword content-gap analysis for sports teams powered by DataForSEO",
    version=__version__,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)


# ============================================================================
# STARTUP
# ============================================================================

@app.on_event("startup")
async def startup_event():
    """Log configuration status on startup."""
    settings = get_settings()
    logger.info(f"Hockey SEO Backend starting on port {settings.PORT}")
    logger.info(
        f"DataForSEO credentials: "
        f"{'Configured' if settings.has_dataforseo_credentials else 'Missing'}"
    )
    if not settings.has_dataforseo_credentials:
        logger.warning("Real SERP lookups disabled - all keywords will be simulated")


# ============================================================================
# REQUEST MODELS
# ============================================================================

class AnalyzeRequest(BaseModel):
    """
    Request to analyze keyword opportunities for a team.

    Field names match the JSON body sent by the frontend.
    """
    teamName: Optional[str] = None
    league: Optional[Any] = None
    keywords: Optional[List[str]] = None


# ============================================================================
# DEPENDENCIES
# ============================================================================

def get_orchestrator(settings: Settings = Depends(get_settings)) -> AnalysisOrchestrator:
    """Fresh orchestrator per request; nothing is shared between requests."""
    return AnalysisOrchestrator(settings)


# ============================================================================
# ERROR HANDLERS
# ============================================================================

@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Malformed bodies are client errors with a single error message."""
    logger.warning(f"Invalid request to {request.url.path}: {exc.errors()}")
    return JSONResponse(status_code=400, content={"error": MISSING_FIELDS_ERROR})


# ============================================================================
# API ENDPOINTS
# ============================================================================

@app.get("/")
async def root():
    """Liveness check."""
    return {"status": "ok", "service": "Hockey SEO Opportunity Analyzer"}


@app.get("/api/health")
async def health(settings: Settings = Depends(get_settings)):
    """Health check including DataForSEO credential status."""
    return {
        "status": "OK",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "hasDataForSEOCredentials": settings.has_dataforseo_credentials,
    }


@app.post("/api/analyze")
async def analyze(
    request: AnalyzeRequest,
    orchestrator: AnalysisOrchestrator = Depends(get_orchestrator),
):
    """
    Analyze keyword opportunities.

    Returns 400 when teamName or the keywords array is missing, and 500 only
    for unexpected failures; DataForSEO problems degrade to simulated data.
    """
    if not request.teamName or request.keywords is None:
        return JSONResponse(status_code=400, content={"error": MISSING_FIELDS_ERROR})

    try:
        result = await orchestrator.analyze(
            team_name=request.teamName,
            league=request.league,
            keywords=request.keywords,
        )
    except AnalysisValidationError as e:
        return JSONResponse(status_code=400, content={"error": str(e)})
    except Exception as e:
        logger.exception(f"Analysis error: {e}")
        return JSONResponse(
            status_code=500,
            content={"error": "Analysis failed", "message": str(e)},
        )

    return result.to_dict()


# ============================================================================
# RUN SERVER
# ============================================================================

if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "api.analyze:app",
        host=settings.HOST,
        port=settings.PORT,
    )
