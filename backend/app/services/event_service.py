"""
Rural Sports Backend: Event Service
====================================

What:  Event CRUD, sign-ups, the recommendation stub and cover images.
Who:   routes/events.py.

Registration flow (POST /api/events/{id}/register):
    event missing      → False
    user missing       → False
    already registered → False
    otherwise          → insert EventRegistration, True

Recommendations:
    A placeholder until preference matching exists: any known user gets the
    first RECOMMENDED_LIMIT events by id, an unknown user gets nothing.
"""

import logging
from typing import List, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from app.models.event import Event, EventRegistration
from app.models.user import User
from app.repositories import Repository
from app.services.base import CrudService, translate_db_errors
from app.services.file_service import file_service

logger = logging.getLogger(__name__)

RECOMMENDED_LIMIT = 5


class EventService(CrudService[Event]):
    model = Event
    resource = "event"
    user_refs = ("organizer_id",)

    @translate_db_errors("loading recommended events")
    async def recommended(self, db: AsyncSession, user_id: Optional[int]) -> List[Event]:
        if not await Repository(db, User).exists(user_id):
            return []
        return await self.repo(db).list(limit=RECOMMENDED_LIMIT)

    @translate_db_errors("registering for an event")
    async def register(
        self,
        db: AsyncSession,
        event_id: int,
        user_id: int,
        health_condition: Optional[str] = None,
    ) -> bool:
        if not await self.repo(db).exists(event_id):
            logger.info("Registration rejected: event %s does not exist", event_id)
            return False
        if not await Repository(db, User).exists(user_id):
            logger.info("Registration rejected: user %s does not exist", user_id)
            return False

        registrations = Repository(db, EventRegistration)
        existing = await registrations.find_one(
            EventRegistration.event_id == event_id,
            EventRegistration.user_id == user_id,
        )
        if existing is not None:
            return False

        await registrations.add(
            EventRegistration(
                event_id=event_id,
                user_id=user_id,
                health_condition=health_condition,
            )
        )

        logger.info("User %s registered for event %s", user_id, event_id)
        return True

    @translate_db_errors("listing event registrations")
    async def registrations(self, db: AsyncSession, event_id: int) -> List[EventRegistration]:
        await self.get(db, event_id)
        return await Repository(db, EventRegistration).list(
            EventRegistration.event_id == event_id
        )

    async def set_cover_image(
        self,
        db: AsyncSession,
        event_id: int,
        filename: str,
        content: bytes,
        content_length: Optional[int] = None,
    ) -> Event:
        """
        Validate and store an uploaded image, then point img_url at it.

        The previous cover, when it was one of ours, is removed after the new
        URL is saved. A failed save removes the freshly stored file instead.
        """
        event = await self.get(db, event_id)
        previous = file_service.absolute_path_for_url(event.img_url)

        absolute_path, relative_path = await file_service.validate_and_store(
            filename=filename,
            content=content,
            content_length=content_length,
        )
        try:
            event = await self.update(db, event_id, {"img_url": file_service.public_url(relative_path)})
        except Exception:
            await file_service.cleanup_file(absolute_path)
            raise

        if previous:
            await file_service.cleanup_file(previous)
        return event


event_service = EventService()
