"""
Rural Sports Backend: Event and EventRegistration Models
=========================================================

What:  ORM models for sporting events and the sign-ups against them.

Lifecycle:
    Event.status moves UPCOMING → ONGOING → FINISHED through plain updates;
    nothing enforces the order.

Registrations:
    One row per (event, user), enforced by a unique constraint. EventService
    answers a second sign-up with {"success": false} before inserting.
"""

from datetime import datetime, timezone
from typing import Optional

from sqlalchemy import DateTime, ForeignKey, Integer, String, Text, UniqueConstraint, text
from sqlalchemy.orm import Mapped, mapped_column

from app.database import Base
from app.models.enums import EventStatus


class Event(Base):
    """A village sporting event organized by a user."""

    __tablename__ = "events"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    rules: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    start_time: Mapped[Optional[datetime]] = mapped_column(DateTime(timezone=True), nullable=True)
    end_time: Mapped[Optional[datetime]] = mapped_column(DateTime(timezone=True), nullable=True)
    location: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)

    # UPCOMING / ONGOING / FINISHED
    status: Mapped[str] = mapped_column(
        String(20),
        nullable=False,
        default=EventStatus.UPCOMING.value,
        server_default=text("'UPCOMING'"),
    )

    theme: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)

    # Relative URL of the uploaded cover image (/api/files/...)
    img_url: Mapped[Optional[str]] = mapped_column(String(512), nullable=True)

    organizer_id: Mapped[Optional[int]] = mapped_column(
        Integer,
        ForeignKey("users.id", ondelete="SET NULL"),
        nullable=True,
        index=True,
    )

    def __repr__(self) -> str:
        return f"<Event(id={self.id}, name='{self.name}', status='{self.status}')>"


class EventRegistration(Base):
    """A user's sign-up for an event, with their self-declared health condition."""

    __tablename__ = "event_registrations"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    event_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("events.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    user_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    )
    health_condition: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
        server_default=text("CURRENT_TIMESTAMP"),
    )

    __table_args__ = (
        UniqueConstraint("event_id", "user_id", name="uq_event_registrations_event_user"),
    )
