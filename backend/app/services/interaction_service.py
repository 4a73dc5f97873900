"""
Rural Sports Backend: Interaction Service
==========================================

What:  Community posts (comments, likes, consultations, board messages,
       notices) with type filtering, edits and a single reply.
Who:   routes/interactions.py, ConsultService (stores CONSULT exchanges).

Query plan for the board view:
    SELECT * FROM interactions WHERE type IN (:types) ORDER BY created_at DESC, id DESC
    → idx_interactions_type
"""

import logging
from typing import Iterable, List, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from app.exceptions import ValidationError
from app.models.enums import InteractionType
from app.models.interaction import Interaction
from app.services.base import CrudService, translate_db_errors

logger = logging.getLogger(__name__)


def parse_types(raw: Optional[Iterable[str]]) -> List[InteractionType]:
    """
    Normalize the `types` query values: each may itself be comma-separated.

    Raises:
        ValidationError: an unknown type name
    """
    parsed: List[InteractionType] = []
    for value in raw or []:
        for name in value.split(","):
            name = name.strip().upper()
            if not name:
                continue
            try:
                parsed.append(InteractionType(name))
            except ValueError as e:
                raise ValidationError(
                    message=(
                        f"Unknown interaction type '{name}'. "
                        f"Allowed: {', '.join(t.value for t in InteractionType)}"
                    ),
                    field="types",
                    context={"value": name},
                ) from e
    return parsed


class InteractionService(CrudService[Interaction]):
    model = Interaction
    resource = "interaction"
    user_refs = ("user_id",)

    async def list_by_types(
        self, db: AsyncSession, types: Optional[List[InteractionType]] = None
    ) -> List[Interaction]:
        """Newest first; no types (or an empty list) means every type."""
        order = (Interaction.created_at.desc(), Interaction.id.desc())
        if not types:
            return await self.list_all(db, order_by=order)
        values = [InteractionType(t).value for t in types]
        return await self.list_all(db, Interaction.type.in_(values), order_by=order)

    async def edit(
        self, db: AsyncSession, interaction_id: int, title: Optional[str], content: str
    ) -> Interaction:
        """Replace title and content; other fields are not editable."""
        interaction = await self.get(db, interaction_id)
        interaction.title = title
        interaction.content = content
        return await self._save(db, interaction)

    async def reply(self, db: AsyncSession, interaction_id: int, reply_text: str) -> Interaction:
        interaction = await self.get(db, interaction_id)
        interaction.reply_content = reply_text
        interaction = await self._save(db, interaction)
        logger.info("Replied to interaction %s", interaction_id)
        return interaction

    @translate_db_errors("saving an interaction")
    async def _save(self, db: AsyncSession, interaction: Interaction) -> Interaction:
        return await self.repo(db).save(interaction)


interaction_service = InteractionService()
