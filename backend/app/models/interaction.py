"""
Rural Sports Backend: Interaction SQLAlchemy Model
===================================================

What:  Community posts: comments, likes, consultations, board messages and
       notices, with an optional single reply.

Query Patterns:
    - Filter by type list: SELECT ... WHERE type IN (...) ORDER BY created_at DESC
      → idx_interactions_type
    - target_id points at whatever the post is about (an event, a material);
      it is deliberately not a foreign key.
"""

from datetime import datetime, timezone
from typing import Optional

from sqlalchemy import DateTime, ForeignKey, Index, Integer, String, Text, text
from sqlalchemy.orm import Mapped, mapped_column

from app.database import Base


class Interaction(Base):
    __tablename__ = "interactions"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    target_id: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    user_id: Mapped[Optional[int]] = mapped_column(
        Integer,
        ForeignKey("users.id", ondelete="SET NULL"),
        nullable=True,
    )
    # COMMENT / LIKE / CONSULT / BOARD / NOTICE
    type: Mapped[str] = mapped_column(String(20), nullable=False)
    title: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    content: Mapped[str] = mapped_column(Text, nullable=False, default="")
    reply_content: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
        server_default=text("CURRENT_TIMESTAMP"),
    )

    __table_args__ = (
        Index("idx_interactions_type", "type"),
    )

    def __repr__(self) -> str:
        return f"<Interaction(id={self.id}, type='{self.type}', user_id={self.user_id})>"
