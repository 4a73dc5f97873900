"""
Rural Sports Backend: Generic Repository Tests
===============================================

Runs Repository against a real SQLite database (db_session fixture).
"""

import pytest

from app.models.event import Event
from app.models.user import User
from app.repositories import Repository


def _user(username: str) -> User:
    return User(username=username, password_hash="x")


class TestRepository:

    @pytest.mark.asyncio
    async def test_add_populates_id_and_defaults(self, db_session):
        repo = Repository(db_session, User)
        user = await repo.add(_user("wang"))

        assert user.id is not None
        assert user.role == "VILLAGER"
        assert user.status == 1
        assert user.created_at is not None

    @pytest.mark.asyncio
    async def test_get_and_exists(self, db_session):
        repo = Repository(db_session, User)
        user = await repo.add(_user("zhao"))

        assert (await repo.get(user.id)).username == "zhao"
        assert await repo.exists(user.id) is True
        assert await repo.get(9999) is None
        assert await repo.exists(9999) is False
        assert await repo.get(None) is None

    @pytest.mark.asyncio
    async def test_list_orders_by_id_and_filters(self, db_session):
        repo = Repository(db_session, Event)
        for name in ("Tug of war", "Village run", "Basketball"):
            await repo.add(Event(name=name))

        names = [e.name for e in await repo.list()]
        assert names == ["Tug of war", "Village run", "Basketball"]

        assert [e.name for e in await repo.list(limit=2)] == ["Tug of war", "Village run"]
        assert [e.name for e in await repo.list(Event.name == "Basketball")] == ["Basketball"]
        assert [e.name for e in await repo.list(order_by=Event.name)][0] == "Basketball"

    @pytest.mark.asyncio
    async def test_find_one(self, db_session):
        repo = Repository(db_session, User)
        await repo.add(_user("sun"))

        assert (await repo.find_one(User.username == "sun")).username == "sun"
        assert await repo.find_one(User.username == "nobody") is None

    @pytest.mark.asyncio
    async def test_save_persists_changes(self, db_session):
        repo = Repository(db_session, Event)
        event = await repo.add(Event(name="Chess"))

        event.location = "Community hall"
        await repo.save(event)

        assert (await repo.list(Event.location == "Community hall"))[0].id == event.id

    @pytest.mark.asyncio
    async def test_delete_by_id_reports_existence(self, db_session):
        repo = Repository(db_session, Event)
        event = await repo.add(Event(name="Kite flying"))

        assert await repo.delete_by_id(event.id) is True
        assert await repo.delete_by_id(event.id) is False
        assert await repo.count() == 0

    @pytest.mark.asyncio
    async def test_count_with_filter(self, db_session):
        repo = Repository(db_session, User)
        await repo.add(_user("a"))
        await repo.add(_user("b"))

        assert await repo.count() == 2
        assert await repo.count(User.username == "a") == 1
