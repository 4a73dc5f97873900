"""
Rural Sports Backend: Team Schemas
===================================
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from app.schemas.base import CamelModel


class TeamCreate(CamelModel):
    name: str = Field(min_length=1, max_length=128)
    sport: Optional[str] = Field(default=None, max_length=64)
    description: Optional[str] = None
    village_name: Optional[str] = Field(default=None, max_length=128)
    captain_id: Optional[int] = None


class TeamUpdate(CamelModel):
    name: Optional[str] = Field(default=None, min_length=1, max_length=128)
    sport: Optional[str] = Field(default=None, max_length=64)
    description: Optional[str] = None
    village_name: Optional[str] = Field(default=None, max_length=128)
    captain_id: Optional[int] = None


class TeamResponse(CamelModel):
    id: int
    name: str
    sport: Optional[str] = None
    description: Optional[str] = None
    village_name: Optional[str] = None
    captain_id: Optional[int] = None
    created_at: Optional[datetime] = None
