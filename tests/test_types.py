"""Tests for the credential value types."""

import uuid

import pytest
from pydantic import ValidationError

from credcheck import (
    HASH_LENGTH,
    MAX_ITERATIONS,
    Password,
    PasswordHash,
    PasswordSalt,
    Response,
    UserId,
    Username,
    UserRecord,
    username_key,
)


def _record(**kw) -> UserRecord:
    fields = dict(
        user_id=UserId.new(),
        password_iterations=4,
        password_salt=PasswordSalt(b"\x01\x02\x03\x04"),
        password_hash=PasswordHash(bytes(HASH_LENGTH)),
    )
    fields.update(kw)
    return UserRecord(**fields)


class TestPassword:
    def test_repr_is_redacted(self):
        pw = Password("hunter2")
        assert "hunter2" not in repr(pw)
        assert "********" in repr(pw)

    def test_str_and_format_are_placeholder(self):
        pw = Password("hunter2")
        assert str(pw) == "********"
        assert f"{pw}" == "********"

    def test_placeholder_independent_of_content(self):
        assert repr(Password("a")) == repr(Password("a much longer secret"))

    def test_response_repr_hides_password(self):
        resp = Response(username="steve", password="hunter2")
        assert "hunter2" not in repr(resp)
        assert "hunter2" not in str(resp)
        assert "steve" in repr(resp)

    def test_equality_by_value(self):
        assert Password("x") == Password("x")
        assert Password("x") != Password("y")


class TestIdentifiers:
    def test_user_id_new_is_unique(self):
        assert UserId.new() != UserId.new()

    def test_user_id_str_is_uuid(self):
        uid = UserId.new()
        assert uuid.UUID(str(uid)) == uid.root

    def test_user_id_from_string(self):
        raw = uuid.uuid4()
        assert UserId(str(raw)) == UserId(raw)

    def test_username_str(self):
        assert str(Username("steve")) == "steve"

    def test_values_are_hashable(self):
        assert len({Username("a"), Username("a"), Username("b")}) == 2

    def test_response_coerces_plain_strings(self):
        resp = Response(username="steve", password="hunter2")
        assert resp.username == Username("steve")
        assert resp.password == Password("hunter2")


class TestUserRecord:
    def test_valid_record(self):
        rec = _record()
        assert rec.password_iterations == 4

    def test_frozen(self):
        rec = _record()
        with pytest.raises(ValidationError):
            rec.password_salt = PasswordSalt(b"other")

    @pytest.mark.parametrize("iterations", [0, -1])
    def test_rejects_non_positive_iterations(self, iterations: int):
        with pytest.raises(ValidationError):
            _record(password_iterations=iterations)

    @pytest.mark.parametrize("length", [0, 16, HASH_LENGTH + 1])
    def test_rejects_wrong_hash_length(self, length: int):
        with pytest.raises(ValidationError):
            _record(password_hash=PasswordHash(bytes(length)))

    def test_accepts_pbkdf2_iteration_limit(self):
        assert _record(password_iterations=MAX_ITERATIONS).password_iterations == MAX_ITERATIONS

    @pytest.mark.parametrize("iterations", [MAX_ITERATIONS + 1, 2**40])
    def test_rejects_iterations_above_pbkdf2_limit(self, iterations: int):
        with pytest.raises(ValidationError):
            _record(password_iterations=iterations)


class TestUsernameKey:
    def test_from_username(self):
        assert username_key(Username("steve")) == "steve"

    def test_from_plain_string(self):
        assert username_key("steve") == "steve"
