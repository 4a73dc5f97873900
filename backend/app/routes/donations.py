"""
Rural Sports Backend: Donation Routes
======================================

CRUD under /api/donations. The donator must be an existing user (400).
"""

from typing import List

from fastapi import APIRouter, Depends, Response
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db_session
from app.dependencies import get_current_user
from app.schemas.base import ErrorResponse
from app.schemas.donation import DonationCreate, DonationResponse, DonationUpdate
from app.services.donation_service import donation_service

router = APIRouter(
    prefix="/api/donations",
    tags=["Donations"],
    dependencies=[Depends(get_current_user)],
    responses={401: {"description": "Not logged in", "model": ErrorResponse}},
)


@router.get("", response_model=List[DonationResponse], summary="List donations")
async def list_donations(db: AsyncSession = Depends(get_db_session)) -> List[DonationResponse]:
    return [DonationResponse.model_validate(d) for d in await donation_service.list_all(db)]


@router.get(
    "/{donation_id}",
    response_model=DonationResponse,
    responses={404: {"description": "Donation not found", "model": ErrorResponse}},
    summary="Get a donation",
)
async def get_donation(donation_id: int, db: AsyncSession = Depends(get_db_session)) -> DonationResponse:
    return DonationResponse.model_validate(await donation_service.get(db, donation_id))


@router.post(
    "",
    status_code=201,
    response_model=DonationResponse,
    responses={400: {"description": "Unknown donator", "model": ErrorResponse}},
    summary="Record a donation",
)
async def create_donation(
    payload: DonationCreate,
    db: AsyncSession = Depends(get_db_session),
) -> DonationResponse:
    return DonationResponse.model_validate(await donation_service.create(db, payload.model_dump()))


@router.put(
    "/{donation_id}",
    response_model=DonationResponse,
    responses={404: {"description": "Donation not found", "model": ErrorResponse}},
    summary="Update a donation",
)
async def update_donation(
    donation_id: int,
    payload: DonationUpdate,
    db: AsyncSession = Depends(get_db_session),
) -> DonationResponse:
    donation = await donation_service.update(db, donation_id, payload.model_dump(exclude_unset=True))
    return DonationResponse.model_validate(donation)


@router.delete(
    "/{donation_id}",
    status_code=204,
    responses={404: {"description": "Donation not found", "model": ErrorResponse}},
    summary="Delete a donation",
)
async def delete_donation(donation_id: int, db: AsyncSession = Depends(get_db_session)) -> Response:
    await donation_service.delete(db, donation_id)
    return Response(status_code=204)
