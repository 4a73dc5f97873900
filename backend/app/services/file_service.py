"""
Rural Sports Backend: Image Storage Service
============================================

What:  Validates, stores, serves and removes uploaded event cover images.
Who:   EventService.set_cover_image (upload) and routes/files.py (serving).

Upload checks, cheapest first:
    1. Extension:  .png / .jpg / .jpeg
    2. Size:       non-empty, at most settings.max_file_size (Content-Length
                   header and actual byte count)
    3. Content:    python-magic sniffs the header bytes; a renamed file fails
    4. Storage:    STORAGE_ROOT/YYYY/MM/DD/<uuid>.<ext>, no user input in the
                   stored name

Serving resolves the requested relative path under the storage root and
refuses anything that escapes it.
"""

import logging
import os
import uuid
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional, Tuple

import aiofiles

from app.config import settings
from app.exceptions import FileStorageError, NotFoundError, ValidationError

logger = logging.getLogger(__name__)

# ── Allowed File Types ────────────────────────────────────────────────────
ALLOWED_MIME_TYPES = {
    "image/png": ".png",
    "image/jpeg": ".jpg",
    "image/jpg": ".jpg",
}

ALLOWED_EXTENSIONS = {".png", ".jpg", ".jpeg"}

MEDIA_TYPES = {".png": "image/png", ".jpg": "image/jpeg", ".jpeg": "image/jpeg"}

# Public URL prefix under which stored images are served
FILES_URL_PREFIX = "/api/files"


class FileService:
    """
    Stores images under a date-organized tree:

        storage/
        └── 2026/
            └── 05/
                └── 14/
                    ├── 1f0c...e2.jpg
                    └── 9a7b...41.png
    """

    def __init__(self, storage_root: Optional[str] = None):
        self.storage_root = Path(storage_root or settings.storage_root).resolve()
        self.storage_root.mkdir(parents=True, exist_ok=True)
        logger.info("FileService initialized with storage_root=%s", self.storage_root)

    def validate_extension(self, filename: str) -> str:
        """Return the normalized extension or raise ValidationError."""
        ext = Path(filename).suffix.lower()
        if ext not in ALLOWED_EXTENSIONS:
            raise ValidationError(
                message=(
                    f"File type '{ext}' is not supported. "
                    f"Allowed types: {', '.join(sorted(ALLOWED_EXTENSIONS))}"
                ),
                field="file",
                context={"extension": ext, "allowed": sorted(ALLOWED_EXTENSIONS)},
            )
        return ext

    def validate_size(self, content_length: Optional[int], actual_size: int) -> None:
        """
        Reject empty uploads and anything over the configured maximum.

        The Content-Length header is checked as well as the actual byte
        count, since clients can send a wrong header.
        """
        max_mb = settings.max_file_size / (1024 * 1024)

        if actual_size == 0:
            raise ValidationError(
                message="The uploaded file is empty.",
                field="file",
                context={"actual_size": 0},
            )

        if content_length and content_length > settings.max_file_size:
            raise ValidationError(
                message=f"File size exceeds maximum of {max_mb:.0f}MB. Please upload a smaller image.",
                field="file",
                context={"max_size_mb": max_mb, "reported_size": content_length},
            )

        if actual_size > settings.max_file_size:
            raise ValidationError(
                message=f"File size ({actual_size / (1024 * 1024):.1f}MB) exceeds maximum of {max_mb:.0f}MB.",
                field="file",
                context={"max_size_mb": max_mb, "actual_size": actual_size},
            )

    def validate_mime_type(self, file_content: bytes) -> str:
        """
        Detect the real content type from the file's magic bytes.

        Raises:
            ValidationError: content is not PNG or JPEG
            FileStorageError: libmagic could not inspect the buffer
        """
        import magic

        try:
            mime_type = magic.from_buffer(file_content, mime=True)
        except magic.MagicException as e:
            logger.error("MIME type detection failed: %s", str(e))
            raise FileStorageError(
                message="Could not verify file type. Please try again.",
                context={"error": str(e)},
            ) from e

        if mime_type not in ALLOWED_MIME_TYPES:
            raise ValidationError(
                message=(
                    f"File content type '{mime_type}' is not supported. "
                    f"The file must be a valid image (PNG or JPEG)."
                ),
                field="file",
                context={"detected_mime": mime_type, "allowed": list(ALLOWED_MIME_TYPES.keys())},
            )

        return mime_type

    def _generate_storage_path(self, extension: str) -> Tuple[Path, str]:
        now = datetime.now(timezone.utc)
        relative_path = f"{now.strftime('%Y/%m/%d')}/{uuid.uuid4()}{extension}"
        return self.storage_root / relative_path, relative_path

    async def store_file(self, content: bytes, extension: str) -> Tuple[str, str]:
        """Write bytes to a fresh path; returns (absolute_path, relative_path)."""
        absolute_path, relative_path = self._generate_storage_path(extension)

        try:
            absolute_path.parent.mkdir(parents=True, exist_ok=True)
            async with aiofiles.open(absolute_path, "wb") as f:
                await f.write(content)
        except OSError as e:
            logger.error("Failed to store file at %s: %s", absolute_path, str(e))
            raise FileStorageError(
                message="Failed to save uploaded image. Please try again.",
                context={"path": relative_path, "os_error": str(e)},
            ) from e

        logger.info("File stored: %s (%d bytes)", relative_path, len(content))
        return str(absolute_path), relative_path

    async def cleanup_file(self, file_path: str) -> None:
        """Best-effort removal of a stored file; failures are only logged."""
        path = Path(file_path)
        try:
            if path.exists():
                os.remove(path)
                logger.info("Cleaned up file: %s", path.name)
            else:
                logger.debug("Cleanup: file already gone: %s", path.name)
        except OSError as e:
            logger.warning("Failed to clean up file %s: %s", file_path, str(e))

    async def validate_and_store(
        self,
        filename: str,
        content: bytes,
        content_length: Optional[int] = None,
    ) -> Tuple[str, str]:
        """Run every upload check, then store. Returns (absolute_path, relative_path)."""
        ext = self.validate_extension(filename)
        self.validate_size(content_length, len(content))
        self.validate_mime_type(content)
        return await self.store_file(content, ext)

    def public_url(self, relative_path: str) -> str:
        return f"{FILES_URL_PREFIX}/{relative_path}"

    def _contained_path(self, relative_path: str) -> Optional[Path]:
        """Resolve under the storage root; None when the result escapes it."""
        full_path = (self.storage_root / relative_path).resolve()
        if self.storage_root not in full_path.parents:
            return None
        return full_path

    def absolute_path_for_url(self, url: Optional[str]) -> Optional[str]:
        """
        Map a /api/files/... URL back to its file on disk.

        None for foreign URLs and for paths that resolve outside the storage
        root, so cleanup never touches anything but stored uploads.
        """
        prefix = FILES_URL_PREFIX + "/"
        if not url or not url.startswith(prefix):
            return None
        full_path = self._contained_path(url[len(prefix):])
        if full_path is None:
            logger.warning("Ignoring stored image URL outside the storage root: %s", url)
            return None
        return str(full_path)

    def resolve_stored_path(self, relative_path: str) -> Path:
        """
        Resolve a relative path for serving.

        Raises:
            ValidationError: the path escapes the storage root
            NotFoundError: no such file
        """
        full_path = self._contained_path(relative_path)
        if full_path is None:
            raise ValidationError(message="Invalid file path", field="file_path")
        if not full_path.is_file():
            raise NotFoundError(resource="file", resource_id=relative_path)
        return full_path

    @staticmethod
    def media_type_for(path: Path) -> str:
        return MEDIA_TYPES.get(path.suffix.lower(), "application/octet-stream")


# ── Singleton Instance ────────────────────────────────────────────────────
file_service = FileService()
