"""Request models for API endpoints."""

from typing import List, Optional

from pydantic import BaseModel, Field, field_validator

from .record import SearchableRecord


class SearchRequest(BaseModel):
    """Request model for search queries."""

    query: str = Field(default="", description="Search query; empty returns all records")
    max_results: Optional[int] = Field(
        None, ge=1, le=1000, description="Maximum number of results to return"
    )


class LoadRecordsRequest(BaseModel):
    """Request model for loading an owner's records."""

    records: List[SearchableRecord] = Field(..., description="Records to load")
    replace: bool = Field(default=True, description="Replace the owner's existing records")

    @field_validator('records')
    @classmethod
    def validate_unique_ids(cls, v: List[SearchableRecord]) -> List[SearchableRecord]:
        """Reject duplicate record identifiers."""
        ids = [record.id for record in v]
        if len(ids) != len(set(ids)):
            raise ValueError("Record ids must be unique")
        return v
