"""
Rural Sports Backend: Shared Schema Building Blocks
====================================================

What:  The camelCase base model plus the response shapes every resource
       shares (success flag, error body, health report).

Design Decision:
    Schemas are separate from SQLAlchemy models because:
    1. We control exactly what is exposed (password_hash never leaves the DB layer)
    2. Validation rules differ from DB constraints (enum membership, 1-5 stars)
    3. OpenAPI docs are generated from schemas
"""

from typing import Optional

from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """
    Base for every API schema.

    alias_generator:   field `real_name` is `realName` on the wire
    populate_by_name:  requests may still send `real_name`
    from_attributes:   responses are built straight from ORM rows
    use_enum_values:   enums are stored as their plain values, so
                       model_dump() output can be assigned to ORM columns
    """

    model_config = {
        "alias_generator": to_camel,
        "populate_by_name": True,
        "from_attributes": True,
        "use_enum_values": True,
    }


class SuccessResponse(CamelModel):
    """Answer of the boolean operations (borrow, return, status, register)."""
    success: bool = Field(description="Whether the operation changed anything")


class ErrorResponse(BaseModel):
    """
    Standardized error response format for all API errors.

    Example:
        {
            "error": "not_found",
            "message": "event with ID '42' was not found",
            "request_id": "a1b2c3d4"
        }
    """
    error: str = Field(description="Machine-readable error code")
    message: str = Field(description="Human-readable error description")
    details: Optional[dict] = Field(default=None, description="Additional error context")
    request_id: Optional[str] = Field(default=None, description="Request correlation ID")


class HealthResponse(BaseModel):
    """Health check response showing service and dependency status."""
    status: str = Field(description="Overall service status: healthy, degraded, unhealthy")
    version: str = Field(description="Application version")
    database: str = Field(description="Database connectivity: connected, disconnected")
    gemini: str = Field(description="Gemini API status: available, unavailable, circuit_open")
    uptime_seconds: float = Field(description="Seconds since service started")
