"""
Rural Sports Backend: Password and Session Token Helpers
=========================================================

What:  bcrypt password hashing and the signed session token carried in the
       session cookie.
How:   The cookie value is an HS256 JWT whose `sub` is the user id and whose
       `exp` bounds the session lifetime (settings.session_max_age).
Who:   AuthService (login), the get_current_user dependency, UserService
       (hashing on create/update).
"""

import time
from typing import Any, Dict

import bcrypt
import jwt

from app.config import settings


# bcrypt only hashes the first 72 bytes and newer releases reject longer input
MAX_PASSWORD_BYTES = 72


class SessionTokenError(RuntimeError):
    pass


def password_too_long(plain_password: str) -> bool:
    return len((plain_password or "").encode("utf-8")) > MAX_PASSWORD_BYTES


def hash_password(plain_password: str) -> str:
    password = (plain_password or "").encode("utf-8")
    if not password:
        raise ValueError("Password is empty.")
    if len(password) > MAX_PASSWORD_BYTES:
        raise ValueError(f"Password is longer than {MAX_PASSWORD_BYTES} bytes.")
    return bcrypt.hashpw(password, bcrypt.gensalt()).decode("utf-8")


def verify_password(plain_password: str, password_hash: str) -> bool:
    password = (plain_password or "").encode("utf-8")
    hashed = (password_hash or "").encode("utf-8")
    if not password or not hashed or len(password) > MAX_PASSWORD_BYTES:
        return False
    try:
        return bcrypt.checkpw(password, hashed)
    except ValueError:
        # Malformed hash in the database
        return False


def build_session_token(user_id: int) -> str:
    issued_at = int(time.time())
    payload = {
        "sub": str(user_id),
        "type": "session",
        "iat": issued_at,
        "exp": issued_at + settings.session_max_age,
    }
    return jwt.encode(payload, settings.session_secret, algorithm=settings.jwt_algorithm)


def decode_session_token(token: str) -> Dict[str, Any]:
    """
    Validate signature, expiry and token type.

    Raises:
        SessionTokenError: for any token that must not authenticate a request
    """
    raw = (token or "").strip()
    if not raw:
        raise SessionTokenError("Session token is empty.")

    try:
        payload = jwt.decode(raw, settings.session_secret, algorithms=[settings.jwt_algorithm])
    except jwt.ExpiredSignatureError as exc:
        raise SessionTokenError("Session has expired.") from exc
    except jwt.InvalidTokenError as exc:
        raise SessionTokenError("Invalid session token.") from exc

    if payload.get("type") != "session":
        raise SessionTokenError("Token is not a session token.")

    subject = str(payload.get("sub") or "").strip()
    if not subject.isdigit():
        raise SessionTokenError("Invalid session subject.")

    return payload
