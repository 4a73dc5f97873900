"""
Rural Sports Backend: Generic CRUD Service
===========================================

What:  The shared service shape every resource follows: list, get, create,
       update, delete over one model, with foreign-key existence checks.
Why:   Every resource in this system is the same CRUD mapping; subclasses
       declare the model, a resource name for error messages, and which
       columns reference users. Resource-specific operations (borrow,
       register, reply) live on the subclasses.
How:   Each call builds a Repository over the request's session. Services
       flush, never commit: get_db_session commits once per request.

Error Handling Strategy:
    - Missing row                → NotFoundError (404)
    - Unknown referenced user id → ValidationError (400)
    - SQLAlchemy failure         → DatabaseError (500, details logged only)
    - Our own exceptions pass through untouched
"""

import functools
import logging
from typing import Any, Awaitable, Callable, Dict, Generic, List, Tuple, Type, TypeVar

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import Base
from app.exceptions import DatabaseError, NotFoundError, ValidationError
from app.models.user import User
from app.repositories import Repository

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=Base)
F = TypeVar("F", bound=Callable[..., Awaitable[Any]])


def translate_db_errors(action: str) -> Callable[[F], F]:
    """
    Wrap a service coroutine so SQLAlchemy errors surface as DatabaseError.

    Usage:
        @translate_db_errors("listing events")
        async def list_events(self, db): ...
    """

    def decorator(func: F) -> F:
        @functools.wraps(func)
        async def wrapper(*args: Any, **kwargs: Any) -> Any:
            try:
                return await func(*args, **kwargs)
            except SQLAlchemyError as e:
                logger.error("Database error while %s: %s", action, str(e), exc_info=True)
                raise DatabaseError(
                    message=f"A database error occurred while {action}. Please try again.",
                    context={"action": action, "error_type": type(e).__name__},
                ) from e

        return wrapper  # type: ignore[return-value]

    return decorator


class CrudService(Generic[ModelT]):
    """
    Base class for the one-to-one resource services.

    Subclasses set:
        model:      the ORM class
        resource:   name used in NotFoundError messages ("event")
        user_refs:  columns that must reference an existing user when set
    """

    model: Type[ModelT]
    resource: str = "resource"
    user_refs: Tuple[str, ...] = ()

    def repo(self, db: AsyncSession) -> Repository[ModelT]:
        return Repository(db, self.model)

    async def require_user(self, db: AsyncSession, user_id: Any, field: str) -> User:
        """Shared foreign-key lookup: the referenced user must exist."""
        user = await Repository(db, User).get(user_id)
        if user is None:
            raise ValidationError(
                message=f"User with ID '{user_id}' does not exist",
                field=field,
                context={"user_id": user_id},
            )
        return user

    async def check_user_refs(self, db: AsyncSession, data: Dict[str, Any]) -> None:
        for field in self.user_refs:
            if data.get(field) is not None:
                await self.require_user(db, data[field], field)

    async def list_all(self, db: AsyncSession, *where: Any, order_by: Any = None) -> List[ModelT]:
        try:
            return await self.repo(db).list(*where, order_by=order_by)
        except SQLAlchemyError as e:
            logger.error("Database error listing %ss: %s", self.resource, str(e), exc_info=True)
            raise DatabaseError(
                message=f"Could not retrieve {self.resource}s. Please try again.",
                context={"error_type": type(e).__name__},
            ) from e

    async def get(self, db: AsyncSession, entity_id: int) -> ModelT:
        try:
            instance = await self.repo(db).get(entity_id)
        except SQLAlchemyError as e:
            logger.error("Database error fetching %s %s: %s", self.resource, entity_id, str(e))
            raise DatabaseError(
                message=f"Could not retrieve the {self.resource}. Please try again.",
                context={"resource_id": entity_id},
            ) from e
        if instance is None:
            raise NotFoundError(resource=self.resource, resource_id=entity_id)
        return instance

    async def create(self, db: AsyncSession, data: Dict[str, Any]) -> ModelT:
        await self.check_user_refs(db, data)
        try:
            instance = await self.repo(db).add(self.model(**data))
        except SQLAlchemyError as e:
            logger.error("Database error creating %s: %s", self.resource, str(e), exc_info=True)
            raise DatabaseError(
                message=f"Could not save the {self.resource}. Please try again.",
                context={"error_type": type(e).__name__},
            ) from e
        logger.info("Created %s %s", self.resource, instance.id)
        return instance

    async def update(self, db: AsyncSession, entity_id: int, data: Dict[str, Any]) -> ModelT:
        """Apply only the keys present in `data` (callers pass exclude_unset dumps)."""
        instance = await self.get(db, entity_id)
        await self.check_user_refs(db, data)
        # An explicit null on a NOT NULL column leaves the value unchanged
        required = {c.name for c in self.model.__table__.columns if not c.nullable}
        data = {k: v for k, v in data.items() if v is not None or k not in required}
        for key, value in data.items():
            setattr(instance, key, value)
        try:
            instance = await self.repo(db).save(instance)
        except SQLAlchemyError as e:
            logger.error("Database error updating %s %s: %s", self.resource, entity_id, str(e))
            raise DatabaseError(
                message=f"Could not update the {self.resource}. Please try again.",
                context={"resource_id": entity_id},
            ) from e
        logger.info("Updated %s %s (%s)", self.resource, entity_id, ", ".join(sorted(data)))
        return instance

    async def delete(self, db: AsyncSession, entity_id: int) -> None:
        instance = await self.get(db, entity_id)
        try:
            await self.repo(db).delete(instance)
        except SQLAlchemyError as e:
            logger.error("Database error deleting %s %s: %s", self.resource, entity_id, str(e))
            raise DatabaseError(
                message=f"Could not delete the {self.resource}. Please try again.",
                context={"resource_id": entity_id},
            ) from e
        logger.info("Deleted %s %s", self.resource, entity_id)
