"""
Catalog retrieve endpoint: synchronize the database with TMDB.
"""

from fastapi import APIRouter, Depends

from moviesync.api.dependencies import get_synchronizer
from moviesync.api.models.sync import SyncResponse, ErrorResponse
from moviesync.core.sync import MovieSynchronizer

router = APIRouter(prefix="/retrieve", tags=["retrieve"])


@router.get(
    "",
    response_model=SyncResponse,
    responses={
        400: {"model": ErrorResponse, "description": "TMDB returned unusable data"},
        500: {"model": ErrorResponse, "description": "Failed to update database"},
    },
)
def update_database(synchronizer: MovieSynchronizer = Depends(get_synchronizer)):
    """Update the local database with the latest high-rated movies from TMDB."""
    result = synchronizer.synchronize()
    return SyncResponse(message=result.message, updated_count=result.updated_count)
