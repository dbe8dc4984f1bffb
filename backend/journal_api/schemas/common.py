"""
Journal API: Shared Response Schemas
=====================================

What:  Error body used by every exception handler, and the MongoDB health body.
"""

from typing import Optional

from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """
    Standardized error response format for all API errors.

    Example:
        {
            "error": "validation_error",
            "message": "'abc' is not a valid id",
            "details": {"field": "id"},
            "request_id": "1f2e3d4c"
        }
    """
    error: str = Field(description="Machine-readable error code")
    message: str = Field(description="Human-readable error description")
    details: Optional[dict] = Field(default=None, description="Additional error context")
    request_id: Optional[str] = Field(default=None, description="Request correlation ID")


class MongoHealthResponse(BaseModel):
    """`{"status": "UP", "database": "Connected"}` or `{"status": "DOWN", "error": ...}`."""

    status: str = Field(description="UP or DOWN")
    database: Optional[str] = Field(default=None, description="Connected when UP")
    error: Optional[str] = Field(default=None, description="Driver error message when DOWN")
