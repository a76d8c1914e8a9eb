"""
FAQDesk Backend: Pydantic Response Schemas
============================================

What:  Pydantic models defining the JSON contract of the FAQ API.
How:   FastAPI serializes route return values through these models by
       alias, so Python attribute names stay snake_case while the wire
       format is camelCase.
Who:   Returned by FaqService; referenced by routes for OpenAPI docs.

Requests carry form fields (question, answer) and are read directly by the
route handlers, so there are no request body models here.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field


# ══════════════════════════════════════════════════════════════════════════
# Response Models
# ══════════════════════════════════════════════════════════════════════════


class FaqEntryResponse(BaseModel):
    """
    What:  Full representation of a FAQ entry.
    Who:   Returned by every read and write operation except DELETE.

    Example:
        {
            "id": 1,
            "question": "What is X?",
            "answer": null,
            "createdAt": "2024-01-15T12:00:00",
            "updatedAt": null
        }
    """
    id: int = Field(description="Store-generated identifier")
    question: str = Field(description="The question text")
    answer: Optional[str] = Field(
        default=None,
        description="The answer text, null when none was given",
    )
    created_at: datetime = Field(
        alias="createdAt",
        description="When the entry was inserted (store clock)",
    )
    updated_at: Optional[datetime] = Field(
        default=None,
        alias="updatedAt",
        description="When the entry was last updated, null if never",
    )

    # populate_by_name lets ORM rows (created_at) and JSON (createdAt) both validate
    model_config = {"from_attributes": True, "populate_by_name": True}


# ══════════════════════════════════════════════════════════════════════════
# Error Response Models
# ══════════════════════════════════════════════════════════════════════════


class ErrorResponse(BaseModel):
    """
    What:  Standardized error body for all API errors.

    Fields:
        error: Machine-readable code (validation_error, not_found, store_error)
        message: Human-readable description
        details: Optional extra context (e.g. which field failed validation)
        request_id: Correlation ID for tracing this error in server logs

    Example:
        {
            "error": "validation_error",
            "message": "Question is required.",
            "details": {"field": "question"},
            "request_id": "a1b2c3d4"
        }
    """
    error: str = Field(description="Machine-readable error code")
    message: str = Field(description="Human-readable error description")
    details: Optional[dict] = Field(default=None, description="Additional error context")
    request_id: Optional[str] = Field(default=None, description="Request correlation ID")


class HealthResponse(BaseModel):
    """Health check response showing service and store status."""
    status: str = Field(description="Overall service status: healthy, unhealthy")
    version: str = Field(description="Application version")
    database: str = Field(description="Store connectivity: connected, disconnected")
    uptime_seconds: float = Field(description="Seconds since service started")
