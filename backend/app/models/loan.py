"""
Rural Sports Backend: Loan SQLAlchemy Model
============================================

What:  A record of equipment lent to a villager.
Values: status BORROWED → RETURNED (plain updates).
"""

from datetime import datetime, timezone
from typing import Optional

from sqlalchemy import DateTime, ForeignKey, Integer, String, text
from sqlalchemy.orm import Mapped, mapped_column

from app.database import Base
from app.models.enums import LoanStatus


class Loan(Base):
    __tablename__ = "loans"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    material_type: Mapped[Optional[str]] = mapped_column(String(64), nullable=True)
    return_time: Mapped[Optional[datetime]] = mapped_column(DateTime(timezone=True), nullable=True)
    status: Mapped[str] = mapped_column(
        String(20),
        nullable=False,
        default=LoanStatus.BORROWED.value,
        server_default=text("'BORROWED'"),
    )
    borrower_id: Mapped[Optional[int]] = mapped_column(
        Integer,
        ForeignKey("users.id", ondelete="SET NULL"),
        nullable=True,
        index=True,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
        server_default=text("CURRENT_TIMESTAMP"),
    )

    def __repr__(self) -> str:
        return f"<Loan(id={self.id}, borrower_id={self.borrower_id}, status='{self.status}')>"
