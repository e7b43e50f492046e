"""
Pydantic schemas for the catalog retrieve endpoint and error bodies.
"""

from typing import Any

from pydantic import BaseModel, Field


class SyncResponse(BaseModel):
    """Result of a database synchronization run."""

    message: str
    updated_count: int = Field(..., alias="updatedCount")

    class Config:
        populate_by_name = True


class ErrorResponse(BaseModel):
    """Body returned for every error status."""

    statusCode: int
    timestamp: str
    path: str
    message: str
    errors: list[Any] | None = None
