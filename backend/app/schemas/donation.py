"""
Rural Sports Backend: Donation Schemas
=======================================
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from app.models.enums import DonationStatus
from app.schemas.base import CamelModel


class DonationCreate(CamelModel):
    material_type: Optional[str] = Field(default=None, max_length=64)
    condition: Optional[str] = Field(default=None, max_length=255)
    status: DonationStatus = DonationStatus.PENDING
    donator_id: int


class DonationUpdate(CamelModel):
    material_type: Optional[str] = Field(default=None, max_length=64)
    condition: Optional[str] = Field(default=None, max_length=255)
    status: Optional[DonationStatus] = None
    donator_id: Optional[int] = None


class DonationResponse(CamelModel):
    id: int
    material_type: Optional[str] = None
    condition: Optional[str] = None
    status: DonationStatus
    donator_id: Optional[int] = None
    created_at: Optional[datetime] = None
