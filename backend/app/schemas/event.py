"""
Rural Sports Backend: Event Schemas
====================================
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from app.models.enums import EventStatus
from app.schemas.base import CamelModel


class EventCreate(CamelModel):
    """Body of POST /api/events."""
    name: str = Field(min_length=1, max_length=255)
    description: Optional[str] = None
    rules: Optional[str] = None
    start_time: Optional[datetime] = None
    end_time: Optional[datetime] = None
    location: Optional[str] = Field(default=None, max_length=255)
    status: EventStatus = EventStatus.UPCOMING
    theme: Optional[str] = Field(default=None, max_length=255)
    img_url: Optional[str] = Field(default=None, max_length=512)
    organizer_id: Optional[int] = None


class EventUpdate(CamelModel):
    """Body of PUT /api/events/{id}; only the fields sent are changed."""
    name: Optional[str] = Field(default=None, min_length=1, max_length=255)
    description: Optional[str] = None
    rules: Optional[str] = None
    start_time: Optional[datetime] = None
    end_time: Optional[datetime] = None
    location: Optional[str] = Field(default=None, max_length=255)
    status: Optional[EventStatus] = None
    theme: Optional[str] = Field(default=None, max_length=255)
    img_url: Optional[str] = Field(default=None, max_length=512)
    organizer_id: Optional[int] = None


class EventResponse(CamelModel):
    id: int
    name: str
    description: Optional[str] = None
    rules: Optional[str] = None
    start_time: Optional[datetime] = None
    end_time: Optional[datetime] = None
    location: Optional[str] = None
    status: EventStatus
    theme: Optional[str] = None
    img_url: Optional[str] = None
    organizer_id: Optional[int] = None


class EventRegistrationRequest(CamelModel):
    """Body of POST /api/events/{id}/register: { userId, healthCondition }."""
    user_id: int
    health_condition: Optional[str] = None


class EventRegistrationResponse(CamelModel):
    id: int
    event_id: int
    user_id: int
    health_condition: Optional[str] = None
    created_at: Optional[datetime] = None
