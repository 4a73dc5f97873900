"""
Rural Sports Backend: User SQLAlchemy Model
============================================

What:  ORM model for the `users` table: villagers, organizers and admins.
Who:   UserService for CRUD, the auth layer for login lookups, and every
       other service for foreign-key existence checks.

Table Design:
    - Integer identity primary key (ids appear in URLs and JSON bodies)
    - username is unique; login looks rows up by it
    - password_hash stores a bcrypt hash and is never serialized
    - status is an integer (0 pending, 1 active, 2 banned) to match the
      frontend's numeric enum
"""

from datetime import datetime, timezone
from typing import Optional

from sqlalchemy import DateTime, Integer, String, text
from sqlalchemy.orm import Mapped, mapped_column

from app.database import Base
from app.models.enums import Role, UserStatus


class User(Base):
    """A registered member of the village sports community."""

    __tablename__ = "users"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    username: Mapped[str] = mapped_column(
        String(64),
        nullable=False,
        unique=True,
        index=True,
        comment="Login name, unique across users",
    )
    password_hash: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        comment="bcrypt hash of the password",
    )

    real_name: Mapped[Optional[str]] = mapped_column(String(64), nullable=True)

    # VILLAGER / ORGANIZER / ADMIN
    role: Mapped[str] = mapped_column(
        String(20),
        nullable=False,
        default=Role.VILLAGER.value,
        server_default=text("'VILLAGER'"),
    )

    village_name: Mapped[Optional[str]] = mapped_column(String(128), nullable=True)
    phone: Mapped[Optional[str]] = mapped_column(String(32), nullable=True)
    exercise_pref: Mapped[Optional[str]] = mapped_column(
        String(255),
        nullable=True,
        comment="Free-text preferred sports / exercise",
    )

    status: Mapped[int] = mapped_column(
        Integer,
        nullable=False,
        default=int(UserStatus.ACTIVE),
        server_default=text("1"),
        comment="0 pending, 1 active, 2 banned",
    )

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
        server_default=text("CURRENT_TIMESTAMP"),
    )

    def __repr__(self) -> str:
        return f"<User(id={self.id}, username='{self.username}', role='{self.role}')>"
