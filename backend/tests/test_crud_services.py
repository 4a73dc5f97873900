"""
Rural Sports Backend: Plain CRUD Service Tests
===============================================

Donations, loans, teams and statistics. These share CrudService, so the
tests focus on the user-reference checks and the extra queries.
"""

import pytest

from app.exceptions import DatabaseError, NotFoundError, ValidationError
from app.models.user import User
from app.repositories import Repository
from app.services.donation_service import donation_service
from app.services.event_service import event_service
from app.services.loan_service import loan_service
from app.services.stats_service import stats_service
from app.services.team_service import team_service


async def _user(db, username):
    return await Repository(db, User).add(User(username=username, password_hash="x"))


class TestDonations:

    @pytest.mark.asyncio
    async def test_create_defaults_to_pending(self, db_session):
        donor = await _user(db_session, "donor")

        donation = await donation_service.create(
            db_session, {"material_type": "clothing", "condition": "like new", "donator_id": donor.id}
        )

        assert donation.status == "PENDING"
        assert donation.created_at is not None

    @pytest.mark.asyncio
    async def test_unknown_donator(self, db_session):
        with pytest.raises(ValidationError) as exc_info:
            await donation_service.create(db_session, {"donator_id": 3})

        assert exc_info.value.field == "donator_id"

    @pytest.mark.asyncio
    async def test_update_and_delete(self, db_session):
        donation = await donation_service.create(db_session, {"material_type": "equipment"})

        updated = await donation_service.update(db_session, donation.id, {"status": "APPROVED"})
        assert updated.status == "APPROVED"

        await donation_service.delete(db_session, donation.id)
        assert await donation_service.list_all(db_session) == []


class TestLoans:

    @pytest.mark.asyncio
    async def test_list_by_borrower(self, db_session):
        alice = await _user(db_session, "alice")
        bob = await _user(db_session, "bob")
        await loan_service.create(db_session, {"material_type": "ball", "borrower_id": alice.id})
        await loan_service.create(db_session, {"material_type": "racket", "borrower_id": bob.id})
        await loan_service.create(db_session, {"material_type": "net", "borrower_id": alice.id})

        mine = await loan_service.list_loans(db_session, borrower_id=alice.id)

        assert [loan.material_type for loan in mine] == ["ball", "net"]
        assert len(await loan_service.list_loans(db_session)) == 3

    @pytest.mark.asyncio
    async def test_loan_status_default(self, db_session):
        loan = await loan_service.create(db_session, {"material_type": "ball"})
        assert loan.status == "BORROWED"


class TestTeams:

    @pytest.mark.asyncio
    async def test_crud(self, db_session):
        captain = await _user(db_session, "captain")

        team = await team_service.create(
            db_session, {"name": "River Rovers", "sport": "football", "captain_id": captain.id}
        )
        renamed = await team_service.update(db_session, team.id, {"name": "River Rangers"})

        assert renamed.name == "River Rangers"
        assert renamed.captain_id == captain.id

        await team_service.delete(db_session, team.id)
        with pytest.raises(NotFoundError):
            await team_service.get(db_session, team.id)

    @pytest.mark.asyncio
    async def test_unknown_captain(self, db_session):
        team = await team_service.create(db_session, {"name": "Hill Hawks"})

        with pytest.raises(ValidationError):
            await team_service.update(db_session, team.id, {"captain_id": 99})


class TestStats:

    @pytest.mark.asyncio
    async def test_participation_counts(self, db_session):
        a = await _user(db_session, "a")
        b = await _user(db_session, "b")
        tug = await event_service.create(db_session, {"name": "Tug of war"})
        await event_service.create(db_session, {"name": "Chess"})
        await event_service.register(db_session, tug.id, a.id)
        await event_service.register(db_session, tug.id, b.id)

        stats = await stats_service.participation(db_session)

        assert [(s.name, s.value) for s in stats] == [("Tug of war", 2), ("Chess", 0)]

    @pytest.mark.asyncio
    async def test_database_failure_is_wrapped(self, mock_db_session):
        from sqlalchemy.exc import OperationalError

        mock_db_session.execute.side_effect = OperationalError("SELECT", {}, Exception("down"))

        with pytest.raises(DatabaseError):
            await stats_service.participation(mock_db_session)
