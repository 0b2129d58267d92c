"""Health check and monitoring API endpoints."""

import time
from datetime import datetime

from fastapi import APIRouter, HTTPException
from fastapi.responses import JSONResponse

from ..core.fuzzy_matcher import fuzzy_match
from ..core.record_scorer import score_record
from ..models.record import SearchableRecord
from ..models.response import HealthResponse
from ..config import get_settings

router = APIRouter(prefix="/api/v1", tags=["health"])
settings = get_settings()

# Import the global search engine instance
from ..engine_instance import search_engine

# Track application start time
app_start_time = time.time()

_PROBE_RECORD = SearchableRecord(id="health-probe", name="health probe", tags=["status"])


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health check",
    description="Check the health status of the connection search service"
)
async def health_check() -> HealthResponse:
    """
    Perform a health check on the connection search service.

    Runs a probe match and a probe record score through the engine core.
    """
    try:
        uptime = time.time() - app_start_time

        dependencies = {
            "fuzzy_matcher": "healthy",
            "record_scorer": "healthy",
            "record_store": "healthy"
        }

        try:
            if fuzzy_match("health", "health").score != 1.0:
                dependencies["fuzzy_matcher"] = "degraded"
        except Exception:
            dependencies["fuzzy_matcher"] = "unhealthy"

        try:
            if score_record(_PROBE_RECORD, "helth status").total_score <= 0:
                dependencies["record_scorer"] = "degraded"
        except Exception:
            dependencies["record_scorer"] = "unhealthy"

        try:
            search_engine.store.get_stats()
        except Exception:
            dependencies["record_store"] = "unhealthy"

        # Determine overall status
        if all(status == "healthy" for status in dependencies.values()):
            status = "healthy"
        elif any(status == "unhealthy" for status in dependencies.values()):
            status = "unhealthy"
        else:
            status = "degraded"

        return HealthResponse(
            status=status,
            version=settings.app_version,
            uptime=uptime,
            dependencies=dependencies
        )

    except Exception as e:
        raise HTTPException(
            status_code=500,
            detail=f"Health check failed: {str(e)}"
        )


@router.get(
    "/health/ready",
    summary="Readiness check",
    description="Check if the service is ready to accept requests"
)
async def readiness_check() -> JSONResponse:
    """Check if the service is ready to accept requests."""
    try:
        stats = search_engine.get_stats()

        return JSONResponse(
            status_code=200,
            content={
                "status": "ready",
                "timestamp": datetime.utcnow().isoformat(),
                "store_stats": stats.get("store_stats", {})
            }
        )

    except Exception as e:
        return JSONResponse(
            status_code=503,
            content={
                "status": "not_ready",
                "error": str(e),
                "timestamp": datetime.utcnow().isoformat()
            }
        )


@router.get(
    "/health/live",
    summary="Liveness check",
    description="Check if the service is alive and responding"
)
async def liveness_check() -> JSONResponse:
    """Check if the service process is alive."""
    return JSONResponse(
        status_code=200,
        content={
            "status": "alive",
            "timestamp": datetime.utcnow().isoformat(),
            "uptime": time.time() - app_start_time
        }
    )


@router.get(
    "/status",
    summary="Service status",
    description="Get detailed status information about the service"
)
async def service_status() -> JSONResponse:
    """Get configuration and engine statistics."""
    try:
        stats = search_engine.get_stats()

        config_info = {
            "max_results": settings.max_results,
            "max_query_length": settings.max_query_length,
            "debug": settings.debug
        }

        return JSONResponse(
            status_code=200,
            content={
                "service": {
                    "name": settings.app_name,
                    "version": settings.app_version,
                    "status": "running",
                    "uptime": time.time() - app_start_time,
                    "start_time": datetime.fromtimestamp(app_start_time).isoformat()
                },
                "configuration": config_info,
                "statistics": stats,
                "timestamp": datetime.utcnow().isoformat()
            }
        )

    except Exception as e:
        raise HTTPException(
            status_code=500,
            detail=f"Failed to get service status: {str(e)}"
        )
