"""
Rural Sports Backend: Loan Service
===================================

Loan records. Plain CRUD plus a per-borrower listing; the borrower must be an
existing user. Borrowing through /api/materials does not create loan rows.
"""

from typing import List, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from app.models.loan import Loan
from app.services.base import CrudService


class LoanService(CrudService[Loan]):
    model = Loan
    resource = "loan"
    user_refs = ("borrower_id",)

    async def list_loans(self, db: AsyncSession, borrower_id: Optional[int] = None) -> List[Loan]:
        if borrower_id is None:
            return await self.list_all(db)
        return await self.list_all(db, Loan.borrower_id == borrower_id)


loan_service = LoanService()
