"""
Rural Sports Backend: Material Schemas
=======================================
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from app.models.enums import MaterialStatus
from app.schemas.base import CamelModel


class MaterialDonateRequest(CamelModel):
    """Body of POST /api/materials/donate: { name, type, conditionLevel, donorId }."""
    name: str = Field(min_length=1, max_length=255)
    type: Optional[str] = Field(default=None, max_length=64)
    condition_level: Optional[int] = Field(default=None, ge=1, le=5, description="1-5 stars")
    donor_id: int


class MaterialBorrowRequest(CamelModel):
    """Body of POST /api/materials/{id}/borrow: { userId, duration }."""
    user_id: int
    duration: Optional[int] = Field(
        default=None, ge=1, le=365, description="Loan length in days"
    )


class MaterialStatusUpdate(CamelModel):
    """
    Body of PUT /api/materials/{id}/status.

    Kept as a plain string so an unknown status is answered with a 400 from
    MaterialService rather than a schema 422.
    """
    status: str = Field(min_length=1, max_length=20)


class MaterialResponse(CamelModel):
    id: int
    name: str
    type: Optional[str] = None
    condition_level: Optional[int] = None
    status: MaterialStatus
    donor_id: Optional[int] = None
    current_holder_id: Optional[int] = None
    due_back_at: Optional[datetime] = None
