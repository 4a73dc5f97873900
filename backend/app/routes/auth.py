"""
Rural Sports Backend: Login / Logout Routes
============================================

What:  Form login at POST /api/login and logout at POST /api/logout.
How:   Login takes `username` and `password` as
       application/x-www-form-urlencoded fields, answers with the user and
       sets the HttpOnly session cookie; logout deletes the cookie.

Response shapes kept for the web client:
    success → 200, UserResponse JSON, Set-Cookie
    failure → 401, {"message": "Authentication failed", "error": "<reason>"}
"""

import logging

from fastapi import APIRouter, Depends, Form, Response
from fastapi.responses import JSONResponse
from sqlalchemy.ext.asyncio import AsyncSession

from app.config import settings
from app.database import get_db_session
from app.exceptions import AuthenticationError
from app.schemas.base import ErrorResponse, SuccessResponse
from app.schemas.user import UserResponse
from app.services.auth_service import auth_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["Auth"])


@router.post(
    "/login",
    response_model=UserResponse,
    responses={401: {"description": "Bad credentials or disabled account", "model": ErrorResponse}},
    summary="Log in with a username and password",
)
async def login(
    response: Response,
    username: str = Form(...),
    password: str = Form(...),
    db: AsyncSession = Depends(get_db_session),
):
    try:
        user, token = await auth_service.login(db, username, password)
    except AuthenticationError as exc:
        return JSONResponse(
            status_code=401,
            content={"message": "Authentication failed", "error": exc.message},
        )

    response.set_cookie(
        key=settings.session_cookie_name,
        value=token,
        max_age=settings.session_max_age,
        httponly=True,
        samesite="lax",
        secure=settings.session_cookie_secure,
        path="/",
    )
    return UserResponse.model_validate(user)


@router.post(
    "/logout",
    response_model=SuccessResponse,
    summary="End the current session",
)
async def logout(response: Response) -> SuccessResponse:
    response.delete_cookie(
        key=settings.session_cookie_name,
        path="/",
        httponly=True,
        samesite="lax",
        secure=settings.session_cookie_secure,
    )
    return SuccessResponse(success=True)
