"""
Rural Sports Backend: Material SQLAlchemy Model
================================================

What:  Donated sports equipment that villagers can borrow.

Status transitions (each one a single-row update in MaterialService):
    donate          → PENDING
    admin approval  → IN_STOCK   (via PUT /status)
    borrow          IN_STOCK → BORROWED, current_holder_id set
    return          BORROWED → IN_STOCK, current_holder_id cleared
    PUT /status     any → any valid status (e.g. LOST)
"""

from datetime import datetime
from typing import Optional

from sqlalchemy import DateTime, ForeignKey, Integer, String, text
from sqlalchemy.orm import Mapped, mapped_column

from app.database import Base
from app.models.enums import MaterialStatus


class Material(Base):
    """One piece of equipment in the community stock."""

    __tablename__ = "materials"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    type: Mapped[Optional[str]] = mapped_column(
        String(64),
        nullable=True,
        comment="Free text category, e.g. equipment / clothing / other",
    )
    condition_level: Mapped[Optional[int]] = mapped_column(
        Integer,
        nullable=True,
        comment="1-5 stars",
    )

    status: Mapped[str] = mapped_column(
        String(20),
        nullable=False,
        default=MaterialStatus.PENDING.value,
        server_default=text("'PENDING'"),
    )

    donor_id: Mapped[Optional[int]] = mapped_column(
        Integer,
        ForeignKey("users.id", ondelete="SET NULL"),
        nullable=True,
    )
    current_holder_id: Mapped[Optional[int]] = mapped_column(
        Integer,
        ForeignKey("users.id", ondelete="SET NULL"),
        nullable=True,
    )

    # Set from the borrow request's duration; cleared on return
    due_back_at: Mapped[Optional[datetime]] = mapped_column(DateTime(timezone=True), nullable=True)

    def __repr__(self) -> str:
        return f"<Material(id={self.id}, name='{self.name}', status='{self.status}')>"
