"""
Rural Sports Backend: User Service
===================================

What:  Registration, profile CRUD and the status flag (pending/active/banned).
Who:   routes/users.py, AuthService (username lookup), dependencies.

Password handling:
    The plain password only ever exists inside create() and update(); the
    row stores the bcrypt hash and UserResponse never exposes it.

Uniqueness:
    Usernames are checked before insert/rename so the common case answers a
    clean 409. The unique index still guards concurrent registrations; the
    IntegrityError it raises is mapped to the same ConflictError.
"""

import logging
from typing import Any, Dict, Optional

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.exceptions import ConflictError, DatabaseError, ValidationError
from app.models.user import User
from app.repositories import Repository
from app.security import MAX_PASSWORD_BYTES, hash_password, password_too_long
from app.services.base import CrudService, translate_db_errors

logger = logging.getLogger(__name__)


class UserService(CrudService[User]):
    model = User
    resource = "user"

    @translate_db_errors("looking up a user")
    async def find_by_username(self, db: AsyncSession, username: str) -> Optional[User]:
        return await Repository(db, User).find_one(User.username == username)

    async def _ensure_username_free(
        self, db: AsyncSession, username: str, current_id: Optional[int] = None
    ) -> None:
        existing = await self.find_by_username(db, username)
        if existing is not None and existing.id != current_id:
            raise ConflictError(
                message=f"Username '{username}' is already taken",
                context={"username": username},
            )

    @staticmethod
    def _hash(password: str) -> str:
        if password_too_long(password):
            raise ValidationError(
                message=f"Password must be at most {MAX_PASSWORD_BYTES} bytes long",
                field="password",
                context={"max_bytes": MAX_PASSWORD_BYTES},
            )
        return hash_password(password)

    async def create(self, db: AsyncSession, data: Dict[str, Any]) -> User:
        """
        Create a user from a UserCreate dump.

        Raises:
            ConflictError: username already taken
            ValidationError: password longer than bcrypt accepts
        """
        data = dict(data)
        await self._ensure_username_free(db, data["username"])
        data["password_hash"] = self._hash(data.pop("password"))
        try:
            user = await self.repo(db).add(User(**data))
        except IntegrityError as e:
            raise ConflictError(
                message=f"Username '{data['username']}' is already taken",
                context={"username": data["username"]},
            ) from e
        except SQLAlchemyError as e:
            logger.error("Database error registering user: %s", str(e), exc_info=True)
            raise DatabaseError(
                message="Could not save the user. Please try again.",
                context={"error_type": type(e).__name__},
            ) from e
        logger.info("Registered user '%s' as %s", user.username, user.role)
        return user

    async def update(self, db: AsyncSession, entity_id: int, data: Dict[str, Any]) -> User:
        data = dict(data)
        await self.get(db, entity_id)
        if data.get("username") is not None:
            await self._ensure_username_free(db, data["username"], current_id=entity_id)
        password = data.pop("password", None)
        if password is not None:
            data["password_hash"] = self._hash(password)
        return await super().update(db, entity_id, data)

    @translate_db_errors("updating a user status")
    async def update_status(self, db: AsyncSession, user_id: int, status: int) -> bool:
        """Set the status flag; False when the user does not exist."""
        repo = Repository(db, User)
        user = await repo.get(user_id)
        if user is None:
            return False
        user.status = int(status)
        await repo.save(user)
        logger.info("User %s status set to %s", user_id, int(status))
        return True


# Module-level singleton
user_service = UserService()
