"""
Rural Sports Backend: User Schemas
===================================
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from app.models.enums import Role, UserStatus
from app.schemas.base import CamelModel


class UserCreate(CamelModel):
    """Body of POST /api/users and POST /api/users/register."""
    username: str = Field(min_length=1, max_length=64)
    password: str = Field(min_length=1, max_length=72)
    real_name: Optional[str] = Field(default=None, max_length=64)
    role: Role = Role.VILLAGER
    village_name: Optional[str] = Field(default=None, max_length=128)
    phone: Optional[str] = Field(default=None, max_length=32)
    exercise_pref: Optional[str] = Field(default=None, max_length=255)
    status: UserStatus = UserStatus.ACTIVE


class UserUpdate(CamelModel):
    """Body of PUT /api/users/{id}; only the fields sent are changed."""
    username: Optional[str] = Field(default=None, min_length=1, max_length=64)
    password: Optional[str] = Field(default=None, min_length=1, max_length=72)
    real_name: Optional[str] = Field(default=None, max_length=64)
    role: Optional[Role] = None
    village_name: Optional[str] = Field(default=None, max_length=128)
    phone: Optional[str] = Field(default=None, max_length=32)
    exercise_pref: Optional[str] = Field(default=None, max_length=255)
    status: Optional[UserStatus] = None


class UserStatusUpdate(CamelModel):
    """Body of PUT /api/users/{id}/status."""
    status: UserStatus


class UserResponse(CamelModel):
    """A user as returned by the API. The password hash is never included."""
    id: int
    username: str
    real_name: Optional[str] = None
    role: Role
    village_name: Optional[str] = None
    phone: Optional[str] = None
    exercise_pref: Optional[str] = None
    status: UserStatus
    created_at: Optional[datetime] = None
