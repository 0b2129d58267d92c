"""Main FastAPI application for Connection Search."""

import json
import logging
import time
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import JSONResponse
import structlog

from .api import (
    search_router,
    records_router,
    health_router,
)
from .config import get_settings
from .engine_instance import search_engine
from .models.record import SearchableRecord
from .models.response import ErrorResponse

settings = get_settings()

# Configure structured logging
logging.basicConfig(format="%(message)s", level=settings.log_level.upper())

structlog.configure(
    processors=[
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
        structlog.dev.ConsoleRenderer()
        if settings.log_format == "console"
        else structlog.processors.JSONRenderer()
    ],
    context_class=dict,
    logger_factory=structlog.stdlib.LoggerFactory(),
    wrapper_class=structlog.stdlib.BoundLogger,
    cache_logger_on_first_use=True,
)

logger = structlog.get_logger()


def load_seed_records(path: str) -> int:
    """
    Load records from a JSON file of the form {"owner_id": [record, ...]}.

    Returns:
        Number of owners loaded
    """
    with open(path, 'r', encoding='utf-8') as f:
        seed = json.load(f)

    for owner_id, records in seed.items():
        search_engine.load_records(
            owner_id,
            [SearchableRecord(**record) for record in records],
            replace=True
        )

    return len(seed)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager."""
    # Startup
    logger.info("Starting Connection Search service", version=settings.app_version)

    if settings.seed_records_path:
        try:
            owners = load_seed_records(settings.seed_records_path)
            logger.info("Seed records loaded", path=settings.seed_records_path, total_owners=owners)
        except FileNotFoundError:
            logger.warning("Seed records file not found", path=settings.seed_records_path)
        except Exception as e:
            logger.error("Failed to load seed records", error=str(e))
            raise

    yield

    # Shutdown
    logger.info("Shutting down Connection Search service")


# Create FastAPI application
app = FastAPI(
    title=settings.app_name,
    description="Fuzzy search and relevance ranking over a user's connections",
    version=settings.app_version,
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json",
    lifespan=lifespan
)

# Add middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.add_middleware(GZipMiddleware, minimum_size=1000)


# Request logging middleware
@app.middleware("http")
async def log_requests(request: Request, call_next) -> Response:
    """Log all HTTP requests."""
    start_time = time.time()

    logger.info(
        "Request started",
        method=request.method,
        url=str(request.url),
        client_ip=request.client.host if request.client else None,
        user_agent=request.headers.get("user-agent")
    )

    response = await call_next(request)

    process_time = time.time() - start_time
    logger.info(
        "Request completed",
        method=request.method,
        url=str(request.url),
        status_code=response.status_code,
        process_time_ms=round(process_time * 1000, 2)
    )

    return response


# Global exception handler
@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle global exceptions."""
    logger.error(
        "Unhandled exception",
        method=request.method,
        url=str(request.url),
        error=str(exc),
        exc_info=True
    )

    return JSONResponse(
        status_code=500,
        content=ErrorResponse(
            error="Internal Server Error",
            message="An unexpected error occurred",
            details={"exception": str(exc)} if settings.debug else None
        ).model_dump(mode="json")
    )


# Include API routers
app.include_router(search_router)
app.include_router(records_router)
app.include_router(health_router)


# Root endpoint
@app.get("/", summary="Root endpoint", description="Get basic information about the API")
async def root() -> dict:
    """Root endpoint with basic API information."""
    return {
        "name": settings.app_name,
        "version": settings.app_version,
        "description": "Fuzzy search and relevance ranking over a user's connections",
        "docs_url": "/docs",
        "health_url": "/api/v1/health",
        "status": "running"
    }


# API info endpoint
@app.get("/api", summary="API information", description="Get detailed API information")
async def api_info() -> dict:
    """Get detailed API information."""
    return {
        "name": settings.app_name,
        "version": settings.app_version,
        "description": "Fuzzy search and relevance ranking over a user's connections",
        "endpoints": {
            "search": "/api/v1/owners/{owner_id}/search?query=...",
            "records": "/api/v1/owners/{owner_id}/records",
            "health": "/api/v1/health",
            "status": "/api/v1/status"
        },
        "features": [
            "Exact, whole-word and substring matching",
            "Typo-tolerant matching scaled to query length",
            "Case-insensitive searches",
            "Weighted name, tag and note fields",
            "Multi-word queries where every word must match",
            "Deterministic best-first ranking"
        ],
        "limits": {
            "max_query_length": settings.max_query_length,
            "max_results": settings.max_results
        }
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "connection_search.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
        workers=1 if settings.debug else settings.workers,
        log_level=settings.log_level.lower()
    )
