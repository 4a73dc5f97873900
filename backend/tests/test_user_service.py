"""
Rural Sports Backend: User and Auth Service Tests
==================================================

What we test:
    ✅ Registration hashes the password and enforces unique usernames
    ✅ Partial updates, password re-hash, rename conflicts
    ✅ Status flag returns False for unknown users
    ✅ Login: wrong password, unknown user, banned account
"""

import pytest

from app.exceptions import AuthenticationError, ConflictError, NotFoundError, ValidationError
from app.models.enums import UserStatus
from app.security import decode_session_token, verify_password
from app.services.auth_service import auth_service
from app.services.user_service import user_service


def _new_user(**overrides):
    data = {
        "username": "zhangsan",
        "password": "pw-123456",
        "real_name": "Zhang San",
        "role": "VILLAGER",
        "village_name": "Green Hill",
        "phone": None,
        "exercise_pref": "badminton",
        "status": int(UserStatus.ACTIVE),
    }
    data.update(overrides)
    return data


class TestUserCreate:

    @pytest.mark.asyncio
    async def test_create_hashes_password(self, db_session):
        user = await user_service.create(db_session, _new_user())

        assert user.id is not None
        assert user.password_hash != "pw-123456"
        assert verify_password("pw-123456", user.password_hash)

    @pytest.mark.asyncio
    async def test_duplicate_username_conflicts(self, db_session):
        await user_service.create(db_session, _new_user())

        with pytest.raises(ConflictError, match="already taken"):
            await user_service.create(db_session, _new_user(real_name="Someone else"))

    @pytest.mark.asyncio
    async def test_password_over_bcrypt_limit_rejected(self, db_session):
        with pytest.raises(ValidationError) as exc_info:
            await user_service.create(db_session, _new_user(password="a" * 100))

        assert exc_info.value.field == "password"
        assert await user_service.find_by_username(db_session, "zhangsan") is None

    @pytest.mark.asyncio
    async def test_multibyte_password_counted_in_bytes(self, db_session):
        user = await user_service.create(db_session, _new_user())

        with pytest.raises(ValidationError):
            await user_service.update(db_session, user.id, {"password": "é" * 40})

    @pytest.mark.asyncio
    async def test_find_by_username(self, db_session):
        created = await user_service.create(db_session, _new_user())

        assert (await user_service.find_by_username(db_session, "zhangsan")).id == created.id
        assert await user_service.find_by_username(db_session, "lisi") is None


class TestUserUpdate:

    @pytest.mark.asyncio
    async def test_partial_update_keeps_other_fields(self, db_session):
        user = await user_service.create(db_session, _new_user())

        updated = await user_service.update(db_session, user.id, {"phone": "13900000000"})

        assert updated.phone == "13900000000"
        assert updated.real_name == "Zhang San"
        assert updated.village_name == "Green Hill"

    @pytest.mark.asyncio
    async def test_password_is_rehashed(self, db_session):
        user = await user_service.create(db_session, _new_user())

        updated = await user_service.update(db_session, user.id, {"password": "new-pass"})

        assert verify_password("new-pass", updated.password_hash)
        assert not verify_password("pw-123456", updated.password_hash)

    @pytest.mark.asyncio
    async def test_null_on_required_column_is_ignored(self, db_session):
        user = await user_service.create(db_session, _new_user())

        updated = await user_service.update(db_session, user.id, {"role": None, "phone": None})

        assert updated.role == "VILLAGER"
        assert updated.phone is None

    @pytest.mark.asyncio
    async def test_rename_onto_taken_username_conflicts(self, db_session):
        await user_service.create(db_session, _new_user())
        other = await user_service.create(db_session, _new_user(username="lisi"))

        with pytest.raises(ConflictError):
            await user_service.update(db_session, other.id, {"username": "zhangsan"})

    @pytest.mark.asyncio
    async def test_keeping_own_username_is_allowed(self, db_session):
        user = await user_service.create(db_session, _new_user())

        updated = await user_service.update(db_session, user.id, {"username": "zhangsan"})
        assert updated.username == "zhangsan"

    @pytest.mark.asyncio
    async def test_update_missing_user_not_found(self, db_session):
        with pytest.raises(NotFoundError):
            await user_service.update(db_session, 404, {"phone": "1"})


class TestUserStatusAndDelete:

    @pytest.mark.asyncio
    async def test_update_status(self, db_session):
        user = await user_service.create(db_session, _new_user())

        assert await user_service.update_status(db_session, user.id, UserStatus.BANNED) is True
        assert (await user_service.get(db_session, user.id)).status == 2

    @pytest.mark.asyncio
    async def test_update_status_unknown_user(self, db_session):
        assert await user_service.update_status(db_session, 999, UserStatus.ACTIVE) is False

    @pytest.mark.asyncio
    async def test_delete(self, db_session):
        user = await user_service.create(db_session, _new_user())

        await user_service.delete(db_session, user.id)

        with pytest.raises(NotFoundError):
            await user_service.get(db_session, user.id)
        with pytest.raises(NotFoundError):
            await user_service.delete(db_session, user.id)


class TestAuthService:

    @pytest.mark.asyncio
    async def test_login_returns_user_and_token(self, db_session):
        created = await user_service.create(db_session, _new_user())

        user, token = await auth_service.login(db_session, "zhangsan", "pw-123456")

        assert user.id == created.id
        assert decode_session_token(token)["sub"] == str(created.id)

    @pytest.mark.asyncio
    async def test_wrong_password(self, db_session):
        await user_service.create(db_session, _new_user())

        with pytest.raises(AuthenticationError, match="Bad credentials"):
            await auth_service.login(db_session, "zhangsan", "wrong")

    @pytest.mark.asyncio
    async def test_unknown_user_gets_same_message(self, db_session):
        with pytest.raises(AuthenticationError, match="Bad credentials"):
            await auth_service.login(db_session, "ghost", "pw-123456")

    @pytest.mark.asyncio
    async def test_banned_user_rejected(self, db_session):
        await user_service.create(db_session, _new_user(status=int(UserStatus.BANNED)))

        with pytest.raises(AuthenticationError, match="disabled"):
            await auth_service.login(db_session, "zhangsan", "pw-123456")
