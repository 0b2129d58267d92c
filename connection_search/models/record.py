"""Searchable record model."""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class SearchableRecord(BaseModel):
    """A connection as seen by the search engine."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., min_length=1, description="Record identifier")
    name: str = Field(default="", description="Display name of the connected user")
    tags: List[str] = Field(default_factory=list, description="Free-form tags")
    note: Optional[str] = Field(None, description="Free-text note")
    connected_user_id: Optional[str] = Field(None, description="Identifier of the connected user")
    created_at: Optional[str] = Field(None, description="Creation timestamp (ISO 8601)")
    updated_at: Optional[str] = Field(None, description="Last update timestamp (ISO 8601)")
