"""
Rural Sports Backend: Team Routes
==================================

CRUD under /api/teams. A captain, when given, must be an existing user.
"""

from typing import List

from fastapi import APIRouter, Depends, Response
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db_session
from app.dependencies import get_current_user
from app.schemas.base import ErrorResponse
from app.schemas.team import TeamCreate, TeamResponse, TeamUpdate
from app.services.team_service import team_service

router = APIRouter(
    prefix="/api/teams",
    tags=["Teams"],
    dependencies=[Depends(get_current_user)],
    responses={401: {"description": "Not logged in", "model": ErrorResponse}},
)


@router.get("", response_model=List[TeamResponse], summary="List teams")
async def list_teams(db: AsyncSession = Depends(get_db_session)) -> List[TeamResponse]:
    return [TeamResponse.model_validate(t) for t in await team_service.list_all(db)]


@router.get(
    "/{team_id}",
    response_model=TeamResponse,
    responses={404: {"description": "Team not found", "model": ErrorResponse}},
    summary="Get a team",
)
async def get_team(team_id: int, db: AsyncSession = Depends(get_db_session)) -> TeamResponse:
    return TeamResponse.model_validate(await team_service.get(db, team_id))


@router.post(
    "",
    status_code=201,
    response_model=TeamResponse,
    responses={400: {"description": "Unknown captain", "model": ErrorResponse}},
    summary="Create a team",
)
async def create_team(payload: TeamCreate, db: AsyncSession = Depends(get_db_session)) -> TeamResponse:
    return TeamResponse.model_validate(await team_service.create(db, payload.model_dump()))


@router.put(
    "/{team_id}",
    response_model=TeamResponse,
    responses={404: {"description": "Team not found", "model": ErrorResponse}},
    summary="Update a team",
)
async def update_team(
    team_id: int,
    payload: TeamUpdate,
    db: AsyncSession = Depends(get_db_session),
) -> TeamResponse:
    team = await team_service.update(db, team_id, payload.model_dump(exclude_unset=True))
    return TeamResponse.model_validate(team)


@router.delete(
    "/{team_id}",
    status_code=204,
    responses={404: {"description": "Team not found", "model": ErrorResponse}},
    summary="Delete a team",
)
async def delete_team(team_id: int, db: AsyncSession = Depends(get_db_session)) -> Response:
    await team_service.delete(db, team_id)
    return Response(status_code=204)
