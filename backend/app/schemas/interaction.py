"""
Rural Sports Backend: Interaction Schemas
==========================================
"""

from datetime import datetime
from typing import Optional

from pydantic import AliasChoices, Field

from app.models.enums import InteractionType
from app.schemas.base import CamelModel


class InteractionCreate(CamelModel):
    """Body of POST /api/interactions."""
    target_id: Optional[int] = None
    user_id: int
    type: InteractionType
    title: Optional[str] = Field(default=None, max_length=255)
    content: str = Field(min_length=1)


class InteractionUpdate(CamelModel):
    """Body of PUT /api/interactions/{id}; only title and content are editable."""
    title: Optional[str] = Field(default=None, max_length=255)
    content: str = Field(min_length=1)


class InteractionReplyRequest(CamelModel):
    """
    Body of POST /api/interactions/{id}/reply.

    The reply endpoint historically read `replyText` while the web client
    sends `replyContent`; both are accepted.
    """
    reply_text: str = Field(
        min_length=1,
        validation_alias=AliasChoices("replyText", "replyContent", "reply_text", "reply_content"),
    )


class InteractionResponse(CamelModel):
    id: int
    target_id: Optional[int] = None
    user_id: Optional[int] = None
    type: InteractionType
    title: Optional[str] = None
    content: str
    reply_content: Optional[str] = None
    created_at: Optional[datetime] = None
