"""
Common API Schemas

Shared Pydantic models used across all API routers.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class ErrorResponse(BaseModel):
    """
    Standard error response model for all API errors.

    Usually a human-readable sentence. A worker error is relayed as the
    worker sent it, so it may be any JSON value.

    Attributes:
        error: Error message (or the worker's error value)
    """

    model_config = ConfigDict(
        json_schema_extra={
            "example": {"error": "Please fill all fields and upload a CV."}
        }
    )

    error: Any = Field(description="Human-readable error message")
