"""
Rural Sports Backend: Stored File Route
========================================

GET /api/files/{path} serves uploaded cover images. Public, so plain <img>
tags can load them without the session cookie.
"""

from fastapi import APIRouter
from fastapi.responses import FileResponse

from app.schemas.base import ErrorResponse
from app.services.file_service import file_service

router = APIRouter(prefix="/api", tags=["Files"])


@router.get(
    "/files/{file_path:path}",
    summary="Serve an uploaded image",
    responses={
        200: {"description": "Image file"},
        400: {"description": "Path escapes the storage root", "model": ErrorResponse},
        404: {"description": "File not found", "model": ErrorResponse},
    },
)
async def serve_file(file_path: str) -> FileResponse:
    full_path = file_service.resolve_stored_path(file_path)
    return FileResponse(
        path=str(full_path),
        media_type=file_service.media_type_for(full_path),
        headers={"Cache-Control": "public, max-age=86400"},
    )
