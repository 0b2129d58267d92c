"""Record management API endpoints."""

from typing import List

from fastapi import APIRouter, HTTPException, Path
from fastapi.responses import JSONResponse

from ..models.record import SearchableRecord
from ..models.request import LoadRecordsRequest
from ..models.response import LoadRecordsResponse

router = APIRouter(prefix="/api/v1", tags=["records"])

# Import the global search engine instance
from ..engine_instance import search_engine


@router.put(
    "/owners/{owner_id}/records",
    response_model=LoadRecordsResponse,
    summary="Load connections",
    description="Load or replace the connections searched for an owner"
)
async def load_records(
    request: LoadRecordsRequest,
    owner_id: str = Path(..., description="Owner of the connections", min_length=1)
) -> LoadRecordsResponse:
    """
    Load an owner's connections into the search engine.

    The caller fetches connections from storage and joins in the connected
    user's display name before loading them here.
    """
    try:
        total = search_engine.load_records(owner_id, request.records, replace=request.replace)

        return LoadRecordsResponse(
            owner_id=owner_id,
            loaded=len(request.records),
            total_records=total
        )

    except Exception as e:
        raise HTTPException(
            status_code=500,
            detail=f"Failed to load records: {str(e)}"
        )


@router.get(
    "/owners/{owner_id}/records",
    response_model=List[SearchableRecord],
    summary="List connections",
    description="Get all connections loaded for an owner"
)
async def list_records(
    owner_id: str = Path(..., description="Owner of the connections", min_length=1)
) -> List[SearchableRecord]:
    """Get all connections loaded for an owner, in load order."""
    return search_engine.store.get_records(owner_id)


@router.delete(
    "/owners/{owner_id}/records/{record_id}",
    summary="Remove connection",
    description="Remove a single connection from an owner's searchable records"
)
async def remove_record(
    owner_id: str = Path(..., description="Owner of the connection", min_length=1),
    record_id: str = Path(..., description="Connection identifier", min_length=1)
) -> JSONResponse:
    """Remove a connection from the search engine."""
    try:
        success = search_engine.store.remove_record(owner_id, record_id)

        if success:
            return JSONResponse(
                status_code=200,
                content={"message": f"Record '{record_id}' removed successfully"}
            )
        else:
            raise HTTPException(
                status_code=404,
                detail=f"Record '{record_id}' not found for owner '{owner_id}'"
            )

    except HTTPException:
        raise
    except Exception as e:
        raise HTTPException(
            status_code=500,
            detail=f"Failed to remove record: {str(e)}"
        )
