"""
Rural Sports Backend: User Routes
==================================

Route Inventory:
    GET    /api/users/me            current session user
    GET    /api/users               all users
    GET    /api/users/{id}          one user (404)
    POST   /api/users/register      public self-registration
    POST   /api/users               create (admin screens)
    PUT    /api/users/{id}          partial profile update
    PUT    /api/users/{id}/status   {status} → {"success": bool}
    DELETE /api/users/{id}          204
"""

import logging
from typing import List

from fastapi import APIRouter, Depends, Response
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db_session
from app.dependencies import get_current_user
from app.models.user import User
from app.schemas.base import ErrorResponse, SuccessResponse
from app.schemas.user import UserCreate, UserResponse, UserStatusUpdate, UserUpdate
from app.services.user_service import user_service

logger = logging.getLogger(__name__)

# Register is public, so auth is applied per endpoint here
router = APIRouter(prefix="/api/users", tags=["Users"])


@router.post(
    "/register",
    status_code=201,
    response_model=UserResponse,
    responses={409: {"description": "Username taken", "model": ErrorResponse}},
    summary="Register a new account",
)
async def register(
    payload: UserCreate,
    db: AsyncSession = Depends(get_db_session),
) -> UserResponse:
    user = await user_service.create(db, payload.model_dump())
    return UserResponse.model_validate(user)


@router.get("/me", response_model=UserResponse, summary="Current user")
async def me(current_user: User = Depends(get_current_user)) -> UserResponse:
    return UserResponse.model_validate(current_user)


@router.get(
    "",
    response_model=List[UserResponse],
    dependencies=[Depends(get_current_user)],
    summary="List users",
)
async def list_users(db: AsyncSession = Depends(get_db_session)) -> List[UserResponse]:
    users = await user_service.list_all(db)
    return [UserResponse.model_validate(u) for u in users]


@router.get(
    "/{user_id}",
    response_model=UserResponse,
    dependencies=[Depends(get_current_user)],
    responses={404: {"description": "User not found", "model": ErrorResponse}},
    summary="Get a user",
)
async def get_user(user_id: int, db: AsyncSession = Depends(get_db_session)) -> UserResponse:
    return UserResponse.model_validate(await user_service.get(db, user_id))


@router.post(
    "",
    status_code=201,
    response_model=UserResponse,
    dependencies=[Depends(get_current_user)],
    responses={409: {"description": "Username taken", "model": ErrorResponse}},
    summary="Create a user",
)
async def create_user(
    payload: UserCreate,
    db: AsyncSession = Depends(get_db_session),
) -> UserResponse:
    user = await user_service.create(db, payload.model_dump())
    return UserResponse.model_validate(user)


@router.put(
    "/{user_id}",
    response_model=UserResponse,
    dependencies=[Depends(get_current_user)],
    responses={
        404: {"description": "User not found", "model": ErrorResponse},
        409: {"description": "Username taken", "model": ErrorResponse},
    },
    summary="Update a user",
)
async def update_user(
    user_id: int,
    payload: UserUpdate,
    db: AsyncSession = Depends(get_db_session),
) -> UserResponse:
    user = await user_service.update(db, user_id, payload.model_dump(exclude_unset=True))
    return UserResponse.model_validate(user)


@router.put(
    "/{user_id}/status",
    response_model=SuccessResponse,
    dependencies=[Depends(get_current_user)],
    summary="Set a user's status (0 pending, 1 active, 2 banned)",
)
async def update_user_status(
    user_id: int,
    payload: UserStatusUpdate,
    db: AsyncSession = Depends(get_db_session),
) -> SuccessResponse:
    success = await user_service.update_status(db, user_id, payload.status)
    return SuccessResponse(success=success)


@router.delete(
    "/{user_id}",
    status_code=204,
    dependencies=[Depends(get_current_user)],
    responses={404: {"description": "User not found", "model": ErrorResponse}},
    summary="Delete a user",
)
async def delete_user(user_id: int, db: AsyncSession = Depends(get_db_session)) -> Response:
    await user_service.delete(db, user_id)
    return Response(status_code=204)
