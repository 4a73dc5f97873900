"""
Rural Sports Backend: Shared Route Dependencies
================================================

What:  get_current_user resolves the session cookie to a User row.
Who:   Attached to every protected router (router-level `dependencies=`) and
       injected directly where the handler needs the user (/api/users/me).

Failure modes (all → AuthenticationError → 401):
    - no session cookie
    - bad signature / expired / wrong token type
    - user deleted since login
    - user banned since login
"""

import logging

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from app.config import settings
from app.database import get_db_session
from app.exceptions import AuthenticationError
from app.models.enums import UserStatus
from app.models.user import User
from app.repositories import Repository
from app.security import SessionTokenError, decode_session_token

logger = logging.getLogger(__name__)


async def get_current_user(
    request: Request,
    db: AsyncSession = Depends(get_db_session),
) -> User:
    token = request.cookies.get(settings.session_cookie_name)
    if not token:
        raise AuthenticationError("Authentication required")

    try:
        payload = decode_session_token(token)
    except SessionTokenError as exc:
        raise AuthenticationError(str(exc)) from exc

    user = await Repository(db, User).get(int(payload["sub"]))
    if user is None:
        raise AuthenticationError("Session user no longer exists")
    if user.status == UserStatus.BANNED:
        logger.info("Rejected session of banned user %s", user.id)
        raise AuthenticationError("User account is disabled")

    request.state.user_id = user.id
    return user
