"""Response models for API endpoints."""

from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field

from .record import SearchableRecord


class MatchedField(BaseModel):
    """Field in which the raw query matched."""

    field: str = Field(..., description="Field kind (name, tag, note)")
    match_type: str = Field(..., description="Type of match (exact, substring, fuzzy)")
    score: float = Field(..., ge=0.0, le=1.0, description="Weighted field score (0-1)")


class SearchResult(BaseModel):
    """Individual search result."""

    record: SearchableRecord = Field(..., description="The matched record")
    score: float = Field(..., ge=0.0, le=1.0, description="Relevance score (0-1)")
    matched_fields: List[MatchedField] = Field(
        default_factory=list, description="Fields matched by the full query"
    )


class SearchResponse(BaseModel):
    """Response for search queries."""

    owner_id: str = Field(..., description="Owner whose records were searched")
    query: str = Field(..., description="Trimmed search query")
    total_count: int = Field(..., description="Total number of matching records")
    results: List[SearchResult] = Field(..., description="Results, best first")
    execution_time_ms: float = Field(..., description="Query execution time in milliseconds")
    timestamp: datetime = Field(default_factory=datetime.utcnow, description="Response timestamp")


class LoadRecordsResponse(BaseModel):
    """Response for record loading."""

    owner_id: str = Field(..., description="Owner of the records")
    loaded: int = Field(..., description="Number of records in the request")
    total_records: int = Field(..., description="Records stored for the owner afterwards")


class ErrorResponse(BaseModel):
    """Error response model."""

    error: str = Field(..., description="Error type")
    message: str = Field(..., description="Error message")
    details: Optional[Dict[str, Any]] = Field(None, description="Additional error details")
    timestamp: datetime = Field(default_factory=datetime.utcnow, description="Error timestamp")


class HealthResponse(BaseModel):
    """Health check response."""

    status: str = Field(..., description="Service status")
    version: str = Field(..., description="Application version")
    uptime: float = Field(..., description="Service uptime in seconds")
    timestamp: datetime = Field(default_factory=datetime.utcnow, description="Check timestamp")
    dependencies: Dict[str, str] = Field(..., description="Dependency status")
