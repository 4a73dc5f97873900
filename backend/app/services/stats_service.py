"""
Rural Sports Backend: Statistics Service
=========================================

What:  Aggregates for the dashboard charts.

Query plan (participation):
    SELECT e.name, COUNT(r.id)
    FROM events e LEFT OUTER JOIN event_registrations r ON r.event_id = e.id
    GROUP BY e.id, e.name
    ORDER BY e.id
"""

import logging
from typing import List

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.event import Event, EventRegistration
from app.schemas.stats import ParticipationStat
from app.services.base import translate_db_errors

logger = logging.getLogger(__name__)


class StatsService:

    @translate_db_errors("computing participation statistics")
    async def participation(self, db: AsyncSession) -> List[ParticipationStat]:
        """Registration count per event; events nobody joined report 0."""
        query = (
            select(Event.name, func.count(EventRegistration.id))
            .select_from(Event)
            .outerjoin(EventRegistration, EventRegistration.event_id == Event.id)
            .group_by(Event.id, Event.name)
            .order_by(Event.id)
        )
        result = await db.execute(query)
        return [ParticipationStat(name=name, value=count) for name, count in result.all()]


stats_service = StatsService()
