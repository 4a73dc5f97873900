"""
Rural Sports Backend: Loan Schemas
===================================
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from app.models.enums import LoanStatus
from app.schemas.base import CamelModel


class LoanCreate(CamelModel):
    material_type: Optional[str] = Field(default=None, max_length=64)
    return_time: Optional[datetime] = None
    status: LoanStatus = LoanStatus.BORROWED
    borrower_id: int


class LoanUpdate(CamelModel):
    material_type: Optional[str] = Field(default=None, max_length=64)
    return_time: Optional[datetime] = None
    status: Optional[LoanStatus] = None
    borrower_id: Optional[int] = None


class LoanResponse(CamelModel):
    id: int
    material_type: Optional[str] = None
    return_time: Optional[datetime] = None
    status: LoanStatus
    borrower_id: Optional[int] = None
    created_at: Optional[datetime] = None
