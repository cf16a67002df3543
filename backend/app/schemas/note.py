"""
Notedeck Backend — Pydantic Request/Response Schemas
=====================================================

What:  Pydantic models defining the API contract for notes, plus the shared
       message, error and health shapes.
How:   FastAPI uses these models to validate request bodies, serialize responses,
       and generate OpenAPI documentation automatically.

Design Decision:
    Schemas are separate from SQLAlchemy models so that we control exactly what
    data is exposed. Title rules (required, trimmed, max length) live in the
    service layer, not here, so every caller of the service gets them.
"""

import uuid
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field


# ══════════════════════════════════════════════════════════════════════════
# Request Models
# ══════════════════════════════════════════════════════════════════════════


class NoteCreate(BaseModel):
    title: Optional[str] = Field(default=None, description="Note title (required)")
    completed: Optional[bool] = Field(
        default=None, description="Completion flag; false when omitted"
    )


class NoteUpdate(BaseModel):
    """
    What:  Body of PUT/PATCH /api/notes/{id}.
    How:   Only fields present in the body are applied (model_dump(exclude_unset=True)).
    """
    title: Optional[str] = Field(default=None)
    completed: Optional[bool] = Field(default=None)


# ══════════════════════════════════════════════════════════════════════════
# Response Models
# ══════════════════════════════════════════════════════════════════════════


class NoteResponse(BaseModel):
    id: uuid.UUID = Field(description="Unique note identifier (UUID)")
    user_id: uuid.UUID = Field(description="Owner of the note")
    title: str
    completed: bool
    created_at: datetime = Field(description="When the note was created (UTC ISO 8601)")
    updated_at: datetime = Field(description="Last write (UTC ISO 8601)")

    model_config = {"from_attributes": True}


class MessageResponse(BaseModel):
    """Plain acknowledgement, e.g. after a delete."""
    message: str


class ErrorResponse(BaseModel):
    """
    What:  Standardized error response format for all API errors.

    Fields:
        error: Machine-readable error code (e.g., "validation_error", "not_found")
        message: Human-readable description for display to users
        details: Optional extra context (e.g., which field failed validation)
        request_id: Correlation ID for tracing this error in server logs
    """
    error: str = Field(description="Machine-readable error code")
    message: str = Field(description="Human-readable error description")
    details: Optional[dict] = Field(default=None, description="Additional error context")
    request_id: Optional[str] = Field(default=None, description="Request correlation ID")


class HealthResponse(BaseModel):
    status: str = Field(description="Overall service status: healthy, unhealthy")
    version: str = Field(description="Application version")
    database: str = Field(description="Database connectivity: connected, disconnected")
    uptime_seconds: float = Field(description="Seconds since service started")
    database_latency_ms: Optional[float] = Field(
        default=None, description="Round-trip time of the probe query; absent when unreachable"
    )
