"""
Rural Sports Backend: Sports Expert Consultation
=================================================

What:  Forwards a villager's question to the LLM and, when the asker is
       known, keeps the exchange on the community board as a CONSULT
       interaction (content = question, reply_content = answer).
Who:   routes/consult.py.

Order of operations:
    1. Validate userId (400 before spending an LLM call)
    2. llm.generate(prompt)   → LLMServiceError / CircuitBreakerOpenError → 503
    3. Store the interaction  (only with a userId)
"""

import logging
from typing import Optional, Tuple

from sqlalchemy.ext.asyncio import AsyncSession

from app.models.enums import InteractionType
from app.models.interaction import Interaction
from app.services.gemini_service import gemini_service
from app.services.interaction_service import interaction_service
from app.services.llm_base import LLMService

logger = logging.getLogger(__name__)

TITLE_MAX_LENGTH = 80


class ConsultService:

    def __init__(self, llm: LLMService):
        self.llm = llm

    async def consult(
        self,
        db: AsyncSession,
        prompt: str,
        user_id: Optional[int] = None,
    ) -> Tuple[str, Optional[Interaction]]:
        if user_id is not None:
            await interaction_service.require_user(db, user_id, "user_id")

        answer = await self.llm.generate(prompt)

        if user_id is None:
            return answer, None

        title = prompt if len(prompt) <= TITLE_MAX_LENGTH else prompt[: TITLE_MAX_LENGTH - 3] + "..."
        interaction = await interaction_service.create(
            db,
            {
                "user_id": user_id,
                "type": InteractionType.CONSULT.value,
                "title": title,
                "content": prompt,
                "reply_content": answer,
            },
        )
        logger.info("Stored consultation %s for user %s", interaction.id, user_id)
        return answer, interaction


consult_service = ConsultService(llm=gemini_service)
