"""
Rural Sports Backend: Material Service
=======================================

What:  The equipment pool: donate, borrow, return, status changes, delete.
Who:   routes/materials.py.

Every state change is a single-row update on `materials`; the boolean
operations answer False instead of raising when the row (or the borrowing
user) is missing or the material is not in the expected state.
"""

import logging
from datetime import datetime, timedelta, timezone
from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession

from app.exceptions import ValidationError
from app.models.enums import MaterialStatus
from app.models.material import Material
from app.models.user import User
from app.repositories import Repository
from app.services.base import CrudService, translate_db_errors

logger = logging.getLogger(__name__)


class MaterialService(CrudService[Material]):
    model = Material
    resource = "material"
    user_refs = ("donor_id", "current_holder_id")

    async def donate(
        self,
        db: AsyncSession,
        name: str,
        donor_id: int,
        type: Optional[str] = None,
        condition_level: Optional[int] = None,
    ) -> Material:
        """New donations wait in PENDING until an admin moves them to IN_STOCK."""
        return await self.create(
            db,
            {
                "name": name,
                "type": type,
                "condition_level": condition_level,
                "donor_id": donor_id,
                "status": MaterialStatus.PENDING.value,
            },
        )

    @translate_db_errors("borrowing a material")
    async def borrow(
        self,
        db: AsyncSession,
        material_id: int,
        user_id: int,
        duration_days: Optional[int] = None,
    ) -> bool:
        repo = self.repo(db)
        material = await repo.get(material_id)
        if material is None or material.status != MaterialStatus.IN_STOCK.value:
            return False
        if not await Repository(db, User).exists(user_id):
            return False

        material.status = MaterialStatus.BORROWED.value
        material.current_holder_id = user_id
        material.due_back_at = (
            datetime.now(timezone.utc) + timedelta(days=duration_days)
            if duration_days
            else None
        )
        await repo.save(material)
        logger.info("Material %s borrowed by user %s", material_id, user_id)
        return True

    @translate_db_errors("returning a material")
    async def return_material(self, db: AsyncSession, material_id: int) -> bool:
        repo = self.repo(db)
        material = await repo.get(material_id)
        if material is None or material.status != MaterialStatus.BORROWED.value:
            return False

        holder = material.current_holder_id
        material.status = MaterialStatus.IN_STOCK.value
        material.current_holder_id = None
        material.due_back_at = None
        await repo.save(material)
        logger.info("Material %s returned by user %s", material_id, holder)
        return True

    @translate_db_errors("updating a material status")
    async def update_status(self, db: AsyncSession, material_id: int, status: str) -> bool:
        """
        Move a material to any status, e.g. LOST.

        Raises:
            ValidationError: not a MaterialStatus name
        """
        try:
            new_status = MaterialStatus(status.strip().upper())
        except ValueError as e:
            raise ValidationError(
                message=(
                    f"Unknown material status '{status}'. "
                    f"Allowed: {', '.join(s.value for s in MaterialStatus)}"
                ),
                field="status",
                context={"value": status},
            ) from e

        repo = self.repo(db)
        material = await repo.get(material_id)
        if material is None:
            return False
        material.status = new_status.value
        await repo.save(material)
        logger.info("Material %s status set to %s", material_id, material.status)
        return True

    @translate_db_errors("deleting a material")
    async def delete_material(self, db: AsyncSession, material_id: int) -> bool:
        deleted = await self.repo(db).delete_by_id(material_id)
        if deleted:
            logger.info("Deleted material %s", material_id)
        return deleted


material_service = MaterialService()
