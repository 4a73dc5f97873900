"""
Rural Sports Backend: File Service Unit Tests
==============================================

What:  Tests for FileService validation, storage, cleanup and serving paths.
Why:   Uploads and file serving are a security boundary.
How:   Every test gets its own storage root under pytest's tmp_path.

Test Strategy:
    ✅ Allowed extensions (.jpg, .jpeg, .png), case-insensitive
    ✅ Rejected extensions (.gif, .pdf, .exe, none)
    ✅ Size limits: empty, header, actual bytes
    ✅ Stored names are UUIDs under a date tree
    ✅ Path traversal refused when serving
    ✅ MIME sniffing (skipped when libmagic is not installed)
"""

from pathlib import Path

import pytest

from app.config import settings
from app.exceptions import NotFoundError, ValidationError
from app.services.file_service import FILES_URL_PREFIX, FileService


@pytest.fixture
def service(temp_storage):
    return FileService(storage_root=temp_storage)


class TestExtensionValidation:

    @pytest.mark.parametrize("filename", ["photo.jpg", "photo.jpeg", "photo.png", "photo.JPG", "x.Jpeg"])
    def test_allowed(self, service, filename):
        assert service.validate_extension(filename) in {".jpg", ".jpeg", ".png"}

    @pytest.mark.parametrize("filename", ["animation.gif", "rules.pdf", "setup.exe", "noextension"])
    def test_rejected(self, service, filename):
        with pytest.raises(ValidationError, match="not supported"):
            service.validate_extension(filename)

    def test_double_extension_uses_last(self, service):
        with pytest.raises(ValidationError):
            service.validate_extension("cover.jpg.exe")


class TestSizeValidation:

    def test_empty_upload_rejected(self, service):
        with pytest.raises(ValidationError, match="empty"):
            service.validate_size(None, 0)

    def test_at_limit_accepted(self, service):
        service.validate_size(settings.max_file_size, settings.max_file_size)

    def test_header_over_limit(self, service):
        with pytest.raises(ValidationError, match="exceeds maximum"):
            service.validate_size(settings.max_file_size + 1, 10)

    def test_actual_over_limit_with_lying_header(self, service):
        with pytest.raises(ValidationError, match="exceeds maximum"):
            service.validate_size(10, settings.max_file_size + 1)


class TestMimeValidation:

    def test_jpeg_detected(self, service, sample_image_bytes):
        pytest.importorskip("magic")
        assert service.validate_mime_type(sample_image_bytes) == "image/jpeg"

    def test_text_renamed_as_image_rejected(self, service):
        pytest.importorskip("magic")
        with pytest.raises(ValidationError, match="must be a valid image"):
            service.validate_mime_type(b"just some plain text pretending to be a photo")


class TestStorage:

    @pytest.mark.asyncio
    async def test_store_file_uses_date_tree_and_uuid(self, service, temp_storage):
        absolute, relative = await service.store_file(b"data", ".png")

        parts = relative.split("/")
        assert len(parts) == 4
        assert parts[-1].endswith(".png")
        assert len(Path(parts[-1]).stem) == 36
        assert Path(absolute).read_bytes() == b"data"
        assert Path(absolute).is_relative_to(Path(temp_storage).resolve())

    @pytest.mark.asyncio
    async def test_cleanup_removes_and_tolerates_missing(self, service):
        absolute, _ = await service.store_file(b"data", ".jpg")

        await service.cleanup_file(absolute)
        assert not Path(absolute).exists()

        await service.cleanup_file(absolute)

    @pytest.mark.asyncio
    async def test_validate_and_store_rejects_before_writing(self, service, temp_storage):
        with pytest.raises(ValidationError):
            await service.validate_and_store("notes.txt", b"hello")

        assert list(Path(temp_storage).rglob("*")) == []


class TestServingPaths:

    def test_public_url_round_trip(self, service):
        url = service.public_url("2026/05/14/abc.jpg")

        assert url == f"{FILES_URL_PREFIX}/2026/05/14/abc.jpg"
        assert service.absolute_path_for_url(url) == str(service.storage_root / "2026/05/14/abc.jpg")

    def test_foreign_url_has_no_local_path(self, service):
        assert service.absolute_path_for_url("https://example.com/a.jpg") is None
        assert service.absolute_path_for_url(None) is None

    def test_url_escaping_storage_root_has_no_local_path(self, service, tmp_path):
        outside = tmp_path / "keep.txt"
        outside.write_text("not an upload")

        assert service.absolute_path_for_url(f"{FILES_URL_PREFIX}/../keep.txt") is None
        assert service.absolute_path_for_url(f"{FILES_URL_PREFIX}/2026/../../keep.txt") is None
        assert service.absolute_path_for_url(f"{FILES_URL_PREFIX}/{outside}") is None

    @pytest.mark.asyncio
    async def test_resolve_existing_file(self, service):
        absolute, relative = await service.store_file(b"img", ".jpg")

        assert service.resolve_stored_path(relative) == Path(absolute).resolve()

    def test_resolve_missing_file(self, service):
        with pytest.raises(NotFoundError):
            service.resolve_stored_path("2026/01/01/missing.jpg")

    def test_traversal_refused(self, service):
        with pytest.raises(ValidationError, match="Invalid file path"):
            service.resolve_stored_path("../../etc/passwd")

    def test_media_type(self):
        assert FileService.media_type_for(Path("a.PNG")) == "image/png"
        assert FileService.media_type_for(Path("a.jpeg")) == "image/jpeg"
        assert FileService.media_type_for(Path("a.bin")) == "application/octet-stream"
