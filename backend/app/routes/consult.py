"""
Rural Sports Backend: Sports Expert Consultation Route
=======================================================

POST /api/consult {prompt, userId?} → {answer, interaction?}

Gemini failures surface as 503 through the global handlers
(LLMServiceError, CircuitBreakerOpenError), with Retry-After when known.
"""

import logging

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db_session
from app.dependencies import get_current_user
from app.schemas.base import ErrorResponse
from app.schemas.consult import ConsultRequest, ConsultResponse
from app.schemas.interaction import InteractionResponse
from app.services.consult_service import consult_service

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/api",
    tags=["Consult"],
    dependencies=[Depends(get_current_user)],
    responses={401: {"description": "Not logged in", "model": ErrorResponse}},
)


@router.post(
    "/consult",
    response_model=ConsultResponse,
    responses={
        400: {"description": "Unknown user", "model": ErrorResponse},
        503: {"description": "AI service unavailable", "model": ErrorResponse},
    },
    summary="Ask the AI sports expert",
)
async def consult(
    payload: ConsultRequest,
    db: AsyncSession = Depends(get_db_session),
) -> ConsultResponse:
    answer, interaction = await consult_service.consult(db, payload.prompt, payload.user_id)
    return ConsultResponse(
        answer=answer,
        interaction=InteractionResponse.model_validate(interaction) if interaction else None,
    )
