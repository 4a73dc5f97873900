"""
Rural Sports Backend: Interaction Routes
=========================================

Route Inventory:
    GET    /api/interactions?types=BOARD,NOTICE   filtered, newest first
    POST   /api/interactions                      create
    PUT    /api/interactions/{id}                 edit title and content
    POST   /api/interactions/{id}/reply           {replyText} (or replyContent)
    DELETE /api/interactions/{id}                 204

`types` may be comma-separated, repeated (?types=A&types=B) or omitted.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, Query, Response
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db_session
from app.dependencies import get_current_user
from app.schemas.base import ErrorResponse
from app.schemas.interaction import (
    InteractionCreate,
    InteractionReplyRequest,
    InteractionResponse,
    InteractionUpdate,
)
from app.services.interaction_service import interaction_service, parse_types

router = APIRouter(
    prefix="/api/interactions",
    tags=["Interactions"],
    dependencies=[Depends(get_current_user)],
    responses={401: {"description": "Not logged in", "model": ErrorResponse}},
)


@router.get(
    "",
    response_model=List[InteractionResponse],
    responses={400: {"description": "Unknown interaction type", "model": ErrorResponse}},
    summary="List interactions by type",
)
async def list_interactions(
    types: Optional[List[str]] = Query(
        default=None,
        description="COMMENT, LIKE, CONSULT, BOARD, NOTICE; comma-separated or repeated",
    ),
    db: AsyncSession = Depends(get_db_session),
) -> List[InteractionResponse]:
    rows = await interaction_service.list_by_types(db, parse_types(types))
    return [InteractionResponse.model_validate(r) for r in rows]


@router.post(
    "",
    status_code=201,
    response_model=InteractionResponse,
    responses={400: {"description": "Unknown user", "model": ErrorResponse}},
    summary="Post an interaction",
)
async def create_interaction(
    payload: InteractionCreate,
    db: AsyncSession = Depends(get_db_session),
) -> InteractionResponse:
    interaction = await interaction_service.create(db, payload.model_dump())
    return InteractionResponse.model_validate(interaction)


@router.put(
    "/{interaction_id}",
    response_model=InteractionResponse,
    responses={404: {"description": "Interaction not found", "model": ErrorResponse}},
    summary="Edit an interaction",
)
async def update_interaction(
    interaction_id: int,
    payload: InteractionUpdate,
    db: AsyncSession = Depends(get_db_session),
) -> InteractionResponse:
    interaction = await interaction_service.edit(
        db, interaction_id, title=payload.title, content=payload.content
    )
    return InteractionResponse.model_validate(interaction)


@router.post(
    "/{interaction_id}/reply",
    response_model=InteractionResponse,
    responses={404: {"description": "Interaction not found", "model": ErrorResponse}},
    summary="Reply to an interaction",
)
async def reply_to_interaction(
    interaction_id: int,
    payload: InteractionReplyRequest,
    db: AsyncSession = Depends(get_db_session),
) -> InteractionResponse:
    interaction = await interaction_service.reply(db, interaction_id, payload.reply_text)
    return InteractionResponse.model_validate(interaction)


@router.delete(
    "/{interaction_id}",
    status_code=204,
    responses={404: {"description": "Interaction not found", "model": ErrorResponse}},
    summary="Delete an interaction",
)
async def delete_interaction(
    interaction_id: int,
    db: AsyncSession = Depends(get_db_session),
) -> Response:
    await interaction_service.delete(db, interaction_id)
    return Response(status_code=204)
