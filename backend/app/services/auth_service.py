"""
Rural Sports Backend: Authentication Service
=============================================

What:  Checks form-login credentials and issues the session token.
Who:   routes/auth.py (POST /api/login).

Failure reasons are deliberately coarse ("Bad credentials") so the login
response does not reveal which usernames exist. The one exception is a
banned account, which is reported as disabled.
"""

import logging
from typing import Tuple

from sqlalchemy.ext.asyncio import AsyncSession

from app.exceptions import AuthenticationError
from app.models.enums import UserStatus
from app.models.user import User
from app.security import build_session_token, verify_password
from app.services.user_service import user_service

logger = logging.getLogger(__name__)


class AuthService:

    async def authenticate(self, db: AsyncSession, username: str, password: str) -> User:
        """
        Resolve a username/password pair to an active user.

        Raises:
            AuthenticationError: unknown user, wrong password, or banned account
        """
        username = (username or "").strip()
        if not username or not password:
            raise AuthenticationError("Bad credentials")

        user = await user_service.find_by_username(db, username)
        if user is None or not verify_password(password, user.password_hash):
            logger.info("Failed login for username '%s'", username)
            raise AuthenticationError("Bad credentials")

        if user.status == UserStatus.BANNED:
            logger.info("Rejected login of banned user %s", user.id)
            raise AuthenticationError("User account is disabled")

        return user

    async def login(self, db: AsyncSession, username: str, password: str) -> Tuple[User, str]:
        """Authenticate and return the user together with a fresh session token."""
        user = await self.authenticate(db, username, password)
        token = build_session_token(user.id)
        logger.info("User '%s' logged in", user.username)
        return user, token


auth_service = AuthService()
