"""
Rural Sports Backend: Event Service Tests
==========================================

What we test:
    ✅ CRUD with organizer existence checks
    ✅ Registration outcomes (missing event/user, duplicate, success)
    ✅ Recommendation stub (unknown user → [], else first five)
    ✅ Cover image replacement (storage mocked)
"""

from unittest.mock import AsyncMock, patch

import pytest

from app.exceptions import NotFoundError, ValidationError
from app.models.user import User
from app.repositories import Repository
from app.services.event_service import RECOMMENDED_LIMIT, event_service


async def _make_user(db, username="organizer"):
    return await Repository(db, User).add(User(username=username, password_hash="x"))


class TestEventCrud:

    @pytest.mark.asyncio
    async def test_create_with_organizer(self, db_session):
        organizer = await _make_user(db_session)

        event = await event_service.create(
            db_session,
            {"name": "Harvest Games", "location": "Threshing ground", "organizer_id": organizer.id},
        )

        assert event.id is not None
        assert event.status == "UPCOMING"
        assert event.organizer_id == organizer.id

    @pytest.mark.asyncio
    async def test_create_with_unknown_organizer(self, db_session):
        with pytest.raises(ValidationError, match="does not exist"):
            await event_service.create(db_session, {"name": "Ghost Cup", "organizer_id": 77})

    @pytest.mark.asyncio
    async def test_update_status_and_missing(self, db_session):
        event = await event_service.create(db_session, {"name": "Dragon boat"})

        updated = await event_service.update(db_session, event.id, {"status": "ONGOING"})
        assert updated.status == "ONGOING"
        assert updated.name == "Dragon boat"

        with pytest.raises(NotFoundError):
            await event_service.update(db_session, 999, {"status": "FINISHED"})

    @pytest.mark.asyncio
    async def test_get_missing_event(self, mock_db_session):
        mock_db_session.get.return_value = None

        with pytest.raises(NotFoundError, match="event with ID '42'"):
            await event_service.get(mock_db_session, 42)


class TestEventRegistration:

    @pytest.mark.asyncio
    async def test_register_success_and_duplicate(self, db_session):
        user = await _make_user(db_session, "runner")
        event = await event_service.create(db_session, {"name": "5k run"})

        assert await event_service.register(db_session, event.id, user.id, "no issues") is True
        assert await event_service.register(db_session, event.id, user.id) is False

        rows = await event_service.registrations(db_session, event.id)
        assert len(rows) == 1
        assert rows[0].health_condition == "no issues"

    @pytest.mark.asyncio
    async def test_register_missing_event_or_user(self, db_session):
        user = await _make_user(db_session, "runner")
        event = await event_service.create(db_session, {"name": "5k run"})

        assert await event_service.register(db_session, 999, user.id) is False
        assert await event_service.register(db_session, event.id, 999) is False

    @pytest.mark.asyncio
    async def test_registrations_of_missing_event(self, db_session):
        with pytest.raises(NotFoundError):
            await event_service.registrations(db_session, 123)


class TestRecommended:

    @pytest.mark.asyncio
    async def test_unknown_user_gets_nothing(self, db_session):
        await event_service.create(db_session, {"name": "Any"})

        assert await event_service.recommended(db_session, 999) == []
        assert await event_service.recommended(db_session, None) == []

    @pytest.mark.asyncio
    async def test_known_user_gets_first_five_by_id(self, db_session):
        user = await _make_user(db_session)
        for i in range(RECOMMENDED_LIMIT + 2):
            await event_service.create(db_session, {"name": f"Event {i}"})

        events = await event_service.recommended(db_session, user.id)

        assert [e.name for e in events] == [f"Event {i}" for i in range(RECOMMENDED_LIMIT)]


class TestCoverImage:

    @pytest.mark.asyncio
    async def test_new_image_replaces_previous(self, db_session):
        event = await event_service.create(
            db_session, {"name": "Kite day", "img_url": "/api/files/2026/01/01/old.jpg"}
        )

        with patch("app.services.event_service.file_service") as mock_files:
            mock_files.absolute_path_for_url.return_value = "/storage/2026/01/01/old.jpg"
            mock_files.validate_and_store = AsyncMock(
                return_value=("/storage/2026/05/14/new.jpg", "2026/05/14/new.jpg")
            )
            mock_files.public_url.side_effect = lambda rel: f"/api/files/{rel}"
            mock_files.cleanup_file = AsyncMock()

            updated = await event_service.set_cover_image(
                db_session, event.id, "kite.jpg", b"\xff\xd8", content_length=2
            )

        assert updated.img_url == "/api/files/2026/05/14/new.jpg"
        mock_files.cleanup_file.assert_awaited_once_with("/storage/2026/01/01/old.jpg")

    @pytest.mark.asyncio
    async def test_missing_event_stores_nothing(self, db_session):
        with patch("app.services.event_service.file_service") as mock_files:
            mock_files.validate_and_store = AsyncMock()

            with pytest.raises(NotFoundError):
                await event_service.set_cover_image(db_session, 5, "x.jpg", b"data")

        mock_files.validate_and_store.assert_not_awaited()
