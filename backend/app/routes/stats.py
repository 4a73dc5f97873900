"""
Rural Sports Backend: Statistics Routes
========================================

GET /api/stats/participation → [{"name": "<event>", "value": <sign-ups>}]
"""

from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db_session
from app.dependencies import get_current_user
from app.schemas.base import ErrorResponse
from app.schemas.stats import ParticipationStat
from app.services.stats_service import stats_service

router = APIRouter(
    prefix="/api/stats",
    tags=["Statistics"],
    dependencies=[Depends(get_current_user)],
    responses={401: {"description": "Not logged in", "model": ErrorResponse}},
)


@router.get(
    "/participation",
    response_model=List[ParticipationStat],
    summary="Registrations per event",
)
async def participation(db: AsyncSession = Depends(get_db_session)) -> List[ParticipationStat]:
    return await stats_service.participation(db)
