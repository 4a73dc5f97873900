"""
Rural Sports Backend: Material Routes
======================================

Route Inventory:
    GET    /api/materials                 all materials
    POST   /api/materials/donate          {name, type, conditionLevel, donorId}
    POST   /api/materials/{id}/borrow     {userId, duration?} → {"success": bool}
    POST   /api/materials/{id}/return     → {"success": bool}
    PUT    /api/materials/{id}/status     {status} → {"success": bool}
    DELETE /api/materials/{id}            → {"success": bool}
"""

from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db_session
from app.dependencies import get_current_user
from app.schemas.base import ErrorResponse, SuccessResponse
from app.schemas.material import (
    MaterialBorrowRequest,
    MaterialDonateRequest,
    MaterialResponse,
    MaterialStatusUpdate,
)
from app.services.material_service import material_service

router = APIRouter(
    prefix="/api/materials",
    tags=["Materials"],
    dependencies=[Depends(get_current_user)],
    responses={401: {"description": "Not logged in", "model": ErrorResponse}},
)


@router.get("", response_model=List[MaterialResponse], summary="List materials")
async def list_materials(db: AsyncSession = Depends(get_db_session)) -> List[MaterialResponse]:
    materials = await material_service.list_all(db)
    return [MaterialResponse.model_validate(m) for m in materials]


@router.post(
    "/donate",
    status_code=201,
    response_model=MaterialResponse,
    responses={400: {"description": "Unknown donor", "model": ErrorResponse}},
    summary="Donate a piece of equipment",
)
async def donate_material(
    payload: MaterialDonateRequest,
    db: AsyncSession = Depends(get_db_session),
) -> MaterialResponse:
    material = await material_service.donate(
        db,
        name=payload.name,
        type=payload.type,
        condition_level=payload.condition_level,
        donor_id=payload.donor_id,
    )
    return MaterialResponse.model_validate(material)


@router.post("/{material_id}/borrow", response_model=SuccessResponse, summary="Borrow a material")
async def borrow_material(
    material_id: int,
    payload: MaterialBorrowRequest,
    db: AsyncSession = Depends(get_db_session),
) -> SuccessResponse:
    success = await material_service.borrow(
        db, material_id, payload.user_id, duration_days=payload.duration
    )
    return SuccessResponse(success=success)


@router.post("/{material_id}/return", response_model=SuccessResponse, summary="Return a material")
async def return_material(
    material_id: int,
    db: AsyncSession = Depends(get_db_session),
) -> SuccessResponse:
    return SuccessResponse(success=await material_service.return_material(db, material_id))


@router.put(
    "/{material_id}/status",
    response_model=SuccessResponse,
    summary="Set a material's status",
)
async def update_material_status(
    material_id: int,
    payload: MaterialStatusUpdate,
    db: AsyncSession = Depends(get_db_session),
) -> SuccessResponse:
    success = await material_service.update_status(db, material_id, payload.status)
    return SuccessResponse(success=success)


@router.delete("/{material_id}", response_model=SuccessResponse, summary="Delete a material")
async def delete_material(
    material_id: int,
    db: AsyncSession = Depends(get_db_session),
) -> SuccessResponse:
    return SuccessResponse(success=await material_service.delete_material(db, material_id))
