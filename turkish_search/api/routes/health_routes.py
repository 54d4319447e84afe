"""Health check endpoints"""
from fastapi import APIRouter
from datetime import datetime

from turkish_search.core.config import settings
from turkish_search.schemas.search_schema import HealthResponse
from turkish_search import __version__

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthResponse)
async def health_check():
    """Health check

    The service holds no connections, so being able to answer is enough.
    """
    return HealthResponse(
        status="ok",
        timestamp=datetime.now(),
        version=__version__
    )


@router.get("/")
async def root():
    """Root endpoint"""
    return {
        "service": settings.api_title,
        "version": __version__,
        "docs": "/docs"
    }
