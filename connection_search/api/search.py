"""Search API endpoints."""

from typing import Optional

from fastapi import APIRouter, HTTPException, Query, Path

from ..models.response import SearchResponse
from ..models.request import SearchRequest
from ..config import get_settings

router = APIRouter(prefix="/api/v1", tags=["search"])
settings = get_settings()

# Import the global search engine instance
from ..engine_instance import search_engine


def _run_search(owner_id: str, query: str, max_results: Optional[int]) -> SearchResponse:
    """Validate the query length and run the search."""
    if len(query) > settings.max_query_length:
        raise HTTPException(
            status_code=400,
            detail=f"Query too long. Maximum length is {settings.max_query_length} characters"
        )

    try:
        return search_engine.search(
            owner_id=owner_id,
            query=query,
            max_results=max_results or settings.max_results
        )
    except Exception as e:
        raise HTTPException(
            status_code=500,
            detail=f"Search failed: {str(e)}"
        )


@router.get(
    "/owners/{owner_id}/search",
    response_model=SearchResponse,
    summary="Search connections",
    description="Search an owner's connections by name, tags and note with fuzzy matching"
)
async def search_connections(
    owner_id: str = Path(..., description="Owner whose connections are searched", min_length=1),
    query: str = Query("", description="Search query; empty returns all connections"),
    max_results: Optional[int] = Query(
        None,
        ge=1,
        le=1000,
        description="Maximum number of results to return"
    )
) -> SearchResponse:
    """
    Search an owner's connections.

    Every word of the query must match the connection's name, one of its
    tags or its note. Results are ordered best match first.
    """
    return _run_search(owner_id, query, max_results)


@router.post(
    "/owners/{owner_id}/search",
    response_model=SearchResponse,
    summary="Search with request body",
    description="Search an owner's connections using a structured request body"
)
async def search_with_body(
    request: SearchRequest,
    owner_id: str = Path(..., description="Owner whose connections are searched", min_length=1)
) -> SearchResponse:
    """Search an owner's connections using a JSON request body."""
    return _run_search(owner_id, request.query, request.max_results)
