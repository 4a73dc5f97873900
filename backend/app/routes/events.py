"""
Rural Sports Backend: Event Routes
===================================

Route Inventory:
    GET    /api/events                       all events
    GET    /api/events/recommended?userId=   first five events for a known user
    GET    /api/events/{id}                  one event (404)
    POST   /api/events                       create
    PUT    /api/events/{id}                  partial update
    DELETE /api/events/{id}                  204
    POST   /api/events/{id}/register         {userId, healthCondition} → {"success": bool}
    GET    /api/events/{id}/registrations    sign-ups of one event
    POST   /api/events/{id}/image            multipart cover image upload

/recommended is declared before /{event_id} so it is not parsed as an id.
"""

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, File, Query, Response, UploadFile
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db_session
from app.dependencies import get_current_user
from app.schemas.base import ErrorResponse, SuccessResponse
from app.schemas.event import (
    EventCreate,
    EventRegistrationRequest,
    EventRegistrationResponse,
    EventResponse,
    EventUpdate,
)
from app.services.event_service import event_service

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/api/events",
    tags=["Events"],
    dependencies=[Depends(get_current_user)],
    responses={401: {"description": "Not logged in", "model": ErrorResponse}},
)


@router.get("", response_model=List[EventResponse], summary="List events")
async def list_events(db: AsyncSession = Depends(get_db_session)) -> List[EventResponse]:
    events = await event_service.list_all(db)
    return [EventResponse.model_validate(e) for e in events]


@router.get(
    "/recommended",
    response_model=List[EventResponse],
    summary="Recommended events for a user",
)
async def recommended_events(
    user_id: Optional[int] = Query(default=None, alias="userId"),
    db: AsyncSession = Depends(get_db_session),
) -> List[EventResponse]:
    events = await event_service.recommended(db, user_id)
    return [EventResponse.model_validate(e) for e in events]


@router.get(
    "/{event_id}",
    response_model=EventResponse,
    responses={404: {"description": "Event not found", "model": ErrorResponse}},
    summary="Get an event",
)
async def get_event(event_id: int, db: AsyncSession = Depends(get_db_session)) -> EventResponse:
    return EventResponse.model_validate(await event_service.get(db, event_id))


@router.post(
    "",
    status_code=201,
    response_model=EventResponse,
    responses={400: {"description": "Unknown organizer", "model": ErrorResponse}},
    summary="Create an event",
)
async def create_event(
    payload: EventCreate,
    db: AsyncSession = Depends(get_db_session),
) -> EventResponse:
    event = await event_service.create(db, payload.model_dump())
    return EventResponse.model_validate(event)


@router.put(
    "/{event_id}",
    response_model=EventResponse,
    responses={
        400: {"description": "Unknown organizer", "model": ErrorResponse},
        404: {"description": "Event not found", "model": ErrorResponse},
    },
    summary="Update an event",
)
async def update_event(
    event_id: int,
    payload: EventUpdate,
    db: AsyncSession = Depends(get_db_session),
) -> EventResponse:
    event = await event_service.update(db, event_id, payload.model_dump(exclude_unset=True))
    return EventResponse.model_validate(event)


@router.delete(
    "/{event_id}",
    status_code=204,
    responses={404: {"description": "Event not found", "model": ErrorResponse}},
    summary="Delete an event",
)
async def delete_event(event_id: int, db: AsyncSession = Depends(get_db_session)) -> Response:
    await event_service.delete(db, event_id)
    return Response(status_code=204)


@router.post(
    "/{event_id}/register",
    response_model=SuccessResponse,
    summary="Sign a user up for an event",
)
async def register_for_event(
    event_id: int,
    payload: EventRegistrationRequest,
    db: AsyncSession = Depends(get_db_session),
) -> SuccessResponse:
    success = await event_service.register(
        db,
        event_id=event_id,
        user_id=payload.user_id,
        health_condition=payload.health_condition,
    )
    return SuccessResponse(success=success)


@router.get(
    "/{event_id}/registrations",
    response_model=List[EventRegistrationResponse],
    responses={404: {"description": "Event not found", "model": ErrorResponse}},
    summary="List sign-ups for an event",
)
async def list_registrations(
    event_id: int,
    db: AsyncSession = Depends(get_db_session),
) -> List[EventRegistrationResponse]:
    rows = await event_service.registrations(db, event_id)
    return [EventRegistrationResponse.model_validate(r) for r in rows]


@router.post(
    "/{event_id}/image",
    response_model=EventResponse,
    responses={
        400: {"description": "Invalid file type or size", "model": ErrorResponse},
        404: {"description": "Event not found", "model": ErrorResponse},
    },
    summary="Upload an event cover image",
    description="PNG or JPEG, checked by extension, size and content sniffing.",
)
async def upload_event_image(
    event_id: int,
    file: UploadFile = File(..., description="Cover image (PNG, JPG or JPEG)"),
    db: AsyncSession = Depends(get_db_session),
) -> EventResponse:
    content = await file.read()
    logger.info(
        "Received cover image for event %s: filename=%s, size=%d bytes",
        event_id,
        file.filename or "unknown",
        len(content),
    )
    try:
        event = await event_service.set_cover_image(
            db,
            event_id=event_id,
            filename=file.filename or "upload.jpg",
            content=content,
            content_length=file.size,
        )
    finally:
        await file.close()
    return EventResponse.model_validate(event)
