"""Unit tests for login, token resolution and the public user view."""

import pytest
from app.services import identity_service
from app.services.errors import Forbidden, InvalidCredentials, InvalidToken, Unauthenticated
from app.services.identity_service import authenticate, resolve_identity
from app.services.repositories import Store
from conftest import ADMIN, DISPATCHER, DRIVER


class TestResolveIdentity:
    def test_valid_token_resolves_user(self, db):
        user = resolve_identity(Store(db), DRIVER)
        assert user.id == DRIVER
        assert user.role == "driver"

    @pytest.mark.parametrize("token", [None, "", "   "])
    def test_missing_or_blank_token_is_unauthenticated(self, db, token):
        with pytest.raises(Unauthenticated):
            resolve_identity(Store(db), token)

    def test_unknown_token_is_invalid(self, db):
        with pytest.raises(InvalidToken):
            resolve_identity(Store(db), "u_nobody")

    def test_token_match_is_case_sensitive(self, db):
        with pytest.raises(InvalidToken):
            resolve_identity(Store(db), ADMIN.upper())


class TestAuthenticate:
    def test_username_is_case_insensitive(self, db):
        assert authenticate(Store(db), "ADMIN", "admin123").id == ADMIN

    def test_password_is_case_sensitive(self, db):
        with pytest.raises(InvalidCredentials):
            authenticate(Store(db), "admin", "ADMIN123")

    def test_unknown_user_and_wrong_password_look_identical(self, db):
        with pytest.raises(InvalidCredentials) as wrong_password:
            authenticate(Store(db), "admin", "nope")
        with pytest.raises(InvalidCredentials) as unknown_user:
            authenticate(Store(db), "ghost", "nope")
        assert wrong_password.value.detail == unknown_user.value.detail


class TestLogin:
    def test_login_issues_user_id_token_and_public_user(self, db):
        result = identity_service.login(db, "driver1", "driver123")
        assert result.access_token == DRIVER
        dumped = result.model_dump(by_alias=True)
        assert dumped["accessToken"] == DRIVER
        assert "password" not in dumped["user"]
        assert dumped["user"]["name"] == "Driver One"

    def test_get_me_returns_caller(self, db):
        me = identity_service.get_me(db, DISPATCHER)
        assert me.id == DISPATCHER
        assert "password" not in me.model_dump()


class TestListUsers:
    def test_staff_see_all_users_without_passwords(self, db):
        users = identity_service.list_users(db, ADMIN)
        assert [u.id for u in users] == [ADMIN, DISPATCHER, DRIVER]
        assert all("password" not in u.model_dump() for u in users)

    def test_driver_forbidden(self, db):
        with pytest.raises(Forbidden):
            identity_service.list_users(db, DRIVER)
