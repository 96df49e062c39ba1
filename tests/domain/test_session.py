"""Unit tests for the AuthSession state machine."""

import pytest

from shopfront.domain.exceptions import ValidationError
from shopfront.domain.model.session import AuthSession, AuthState


class TestAuthSessionTransitions:

    def test_starts_logged_out(self):
        session = AuthSession()
        assert session.state == AuthState.LOGGED_OUT
        assert session.is_authenticated is False
        assert session.error is None

    def test_begin_then_succeed(self):
        session = AuthSession()
        session.begin("a@b.com", "pw")
        assert session.is_loading
        session.succeed()
        assert session.is_authenticated

    def test_fail_records_error_and_logs_out(self):
        session = AuthSession()
        session.begin("a@b.com", "")
        session.fail("Email and password are required")
        assert session.state == AuthState.LOGGED_OUT
        assert session.error == "Email and password are required"

    def test_begin_clears_previous_error(self):
        session = AuthSession(error="old")
        session.begin("a@b.com", "pw")
        assert session.error is None

    def test_reset_clears_everything(self):
        session = AuthSession()
        session.begin("a@b.com", "pw")
        session.succeed()
        session.reset()
        assert session == AuthSession()


class TestAuthSessionIllegalTransitions:

    def test_cannot_begin_twice(self):
        session = AuthSession()
        session.begin("a@b.com", "pw")
        with pytest.raises(ValidationError, match="expected LOGGED_OUT"):
            session.begin("a@b.com", "pw")

    def test_cannot_begin_when_logged_in(self):
        session = AuthSession(state=AuthState.LOGGED_IN)
        with pytest.raises(ValidationError, match="LOGGED_IN"):
            session.begin("a@b.com", "pw")

    def test_cannot_succeed_without_begin(self):
        with pytest.raises(ValidationError, match="No sign-in in progress"):
            AuthSession().succeed()
