"""
Rural Sports Backend: Generic Async Repository
===============================================

What:  Thin CRUD accessor bound to one ORM model and one AsyncSession.
Who:   Constructed by services per call: Repository(db, Event).
When:  Inside a request; the session (and its transaction) belongs to the
       caller, so repositories flush but never commit.

Design:
    - add()/save() flush and refresh, so generated ids and server defaults
      are populated before the response is serialized
    - delete_by_id() reports whether a row existed, which the boolean
      endpoints (material delete, ...) return as {"success": ...}
    - SQLAlchemy errors propagate; services wrap them in DatabaseError
"""

from typing import Any, Generic, List, Optional, Type, TypeVar

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import Base

ModelT = TypeVar("ModelT", bound=Base)


class Repository(Generic[ModelT]):
    """Generic get / list / add / save / delete / count over one model."""

    def __init__(self, db: AsyncSession, model: Type[ModelT]):
        self.db = db
        self.model = model

    async def get(self, entity_id: Any) -> Optional[ModelT]:
        if entity_id is None:
            return None
        return await self.db.get(self.model, entity_id)

    async def exists(self, entity_id: Any) -> bool:
        return await self.get(entity_id) is not None

    async def list(
        self,
        *where: Any,
        order_by: Any = None,
        limit: Optional[int] = None,
    ) -> List[ModelT]:
        """
        Fetch rows matching every clause in `where`.

        Default order is primary key ascending, so "first N" is stable.
        `order_by` may be one clause or a tuple of clauses.
        """
        query = select(self.model)
        for clause in where:
            query = query.where(clause)
        if order_by is None:
            order_by = (self.model.id,)
        elif not isinstance(order_by, (list, tuple)):
            order_by = (order_by,)
        query = query.order_by(*order_by)
        if limit is not None:
            query = query.limit(limit)
        result = await self.db.execute(query)
        return list(result.scalars().all())

    async def find_one(self, *where: Any) -> Optional[ModelT]:
        query = select(self.model)
        for clause in where:
            query = query.where(clause)
        result = await self.db.execute(query.limit(1))
        return result.scalar_one_or_none()

    async def add(self, instance: ModelT) -> ModelT:
        self.db.add(instance)
        await self.db.flush()
        await self.db.refresh(instance)
        return instance

    async def save(self, instance: ModelT) -> ModelT:
        await self.db.flush()
        await self.db.refresh(instance)
        return instance

    async def delete(self, instance: ModelT) -> None:
        await self.db.delete(instance)
        await self.db.flush()

    async def delete_by_id(self, entity_id: Any) -> bool:
        instance = await self.get(entity_id)
        if instance is None:
            return False
        await self.delete(instance)
        return True

    async def count(self, *where: Any) -> int:
        query = select(func.count()).select_from(self.model)
        for clause in where:
            query = query.where(clause)
        result = await self.db.execute(query)
        return result.scalar() or 0
