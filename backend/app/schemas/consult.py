"""
Rural Sports Backend: Sports Expert Consultation Schemas
=========================================================
"""

from typing import Optional

from pydantic import Field, field_validator

from app.schemas.base import CamelModel
from app.schemas.interaction import InteractionResponse


class ConsultRequest(CamelModel):
    """Body of POST /api/consult."""
    prompt: str = Field(min_length=1, max_length=4000, description="Question for the sports expert")
    user_id: Optional[int] = Field(
        default=None,
        description="When given, the exchange is stored as a CONSULT interaction",
    )

    @field_validator("prompt")
    @classmethod
    def strip_prompt(cls, v: str) -> str:
        stripped = v.strip()
        if not stripped:
            raise ValueError("prompt must not be blank")
        return stripped


class ConsultResponse(CamelModel):
    answer: str
    interaction: Optional[InteractionResponse] = None
