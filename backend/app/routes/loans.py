"""
Rural Sports Backend: Loan Routes
==================================

CRUD under /api/loans; GET /api/loans?borrowerId= narrows to one borrower.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, Query, Response
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db_session
from app.dependencies import get_current_user
from app.schemas.base import ErrorResponse
from app.schemas.loan import LoanCreate, LoanResponse, LoanUpdate
from app.services.loan_service import loan_service

router = APIRouter(
    prefix="/api/loans",
    tags=["Loans"],
    dependencies=[Depends(get_current_user)],
    responses={401: {"description": "Not logged in", "model": ErrorResponse}},
)


@router.get("", response_model=List[LoanResponse], summary="List loans")
async def list_loans(
    borrower_id: Optional[int] = Query(default=None, alias="borrowerId"),
    db: AsyncSession = Depends(get_db_session),
) -> List[LoanResponse]:
    loans = await loan_service.list_loans(db, borrower_id=borrower_id)
    return [LoanResponse.model_validate(l) for l in loans]


@router.get(
    "/{loan_id}",
    response_model=LoanResponse,
    responses={404: {"description": "Loan not found", "model": ErrorResponse}},
    summary="Get a loan",
)
async def get_loan(loan_id: int, db: AsyncSession = Depends(get_db_session)) -> LoanResponse:
    return LoanResponse.model_validate(await loan_service.get(db, loan_id))


@router.post(
    "",
    status_code=201,
    response_model=LoanResponse,
    responses={400: {"description": "Unknown borrower", "model": ErrorResponse}},
    summary="Record a loan",
)
async def create_loan(payload: LoanCreate, db: AsyncSession = Depends(get_db_session)) -> LoanResponse:
    return LoanResponse.model_validate(await loan_service.create(db, payload.model_dump()))


@router.put(
    "/{loan_id}",
    response_model=LoanResponse,
    responses={404: {"description": "Loan not found", "model": ErrorResponse}},
    summary="Update a loan",
)
async def update_loan(
    loan_id: int,
    payload: LoanUpdate,
    db: AsyncSession = Depends(get_db_session),
) -> LoanResponse:
    loan = await loan_service.update(db, loan_id, payload.model_dump(exclude_unset=True))
    return LoanResponse.model_validate(loan)


@router.delete(
    "/{loan_id}",
    status_code=204,
    responses={404: {"description": "Loan not found", "model": ErrorResponse}},
    summary="Delete a loan",
)
async def delete_loan(loan_id: int, db: AsyncSession = Depends(get_db_session)) -> Response:
    await loan_service.delete(db, loan_id)
    return Response(status_code=204)
