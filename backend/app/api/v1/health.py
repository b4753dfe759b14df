from fastapi import APIRouter, HTTPException, status
from typing import Dict, Any
from datetime import datetime

from assistant.decision_engine import intent_classifier
from ...core.config import settings
from ...core.logging import get_logger

logger = get_logger(__name__)
router = APIRouter()


@router.get("/health", summary="Health Check")
async def health_check() -> Dict[str, Any]:
    """Basic health check endpoint."""
    return {
        "status": "healthy",
        "timestamp": datetime.utcnow().isoformat(),
        "service": settings.PROJECT_NAME,
        "version": settings.VERSION,
        "environment": settings.ENVIRONMENT
    }


@router.get("/ready", summary="Readiness Check")
async def readiness_check() -> Dict[str, Any]:
    """Readiness check: the intent lexicon is loaded and classifying."""
    classifier_health = intent_classifier.health_check()
    ready = classifier_health.get("healthy", False)
    if not ready:
        logger.error(f"Intent classifier not ready: {classifier_health}")

    response_data = {
        "status": "ready" if ready else "not_ready",
        "timestamp": datetime.utcnow().isoformat(),
        "checks": {
            "intent_classifier": ready,
            "patterns_loaded": classifier_health.get("patterns_loaded", 0),
        },
        "service": settings.PROJECT_NAME,
        "environment": settings.ENVIRONMENT
    }

    if not ready:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail=response_data
        )

    return response_data


@router.get("/version", summary="Version Information")
async def version_info() -> Dict[str, Any]:
    """Get version and build information."""
    return {
        "service": settings.PROJECT_NAME,
        "version": settings.VERSION,
        "api_version": settings.API_V1_STR,
        "environment": settings.ENVIRONMENT,
        "debug": settings.DEBUG,
        "timestamp": datetime.utcnow().isoformat()
    }
