"""AuthSession — the state machine behind the sign-in gate.

LOGGED_OUT --begin()--> AUTHENTICATING --succeed()--> LOGGED_IN
                                       --fail()-----> LOGGED_OUT (error set)
LOGGED_IN --reset()--> LOGGED_OUT
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from shopfront.domain.exceptions import ValidationError


class AuthState(Enum):
    LOGGED_OUT = "LOGGED_OUT"
    AUTHENTICATING = "AUTHENTICATING"
    LOGGED_IN = "LOGGED_IN"


@dataclass
class AuthSession:
    state: AuthState = AuthState.LOGGED_OUT
    email: str = ""
    password: str = ""
    error: str | None = None

    @property
    def is_authenticated(self) -> bool:
        return self.state == AuthState.LOGGED_IN

    @property
    def is_loading(self) -> bool:
        return self.state == AuthState.AUTHENTICATING

    # --- State transitions ----------------------------------------------------

    def begin(self, email: str, password: str) -> None:
        """Transition LOGGED_OUT -> AUTHENTICATING, clearing any old error."""
        if self.state != AuthState.LOGGED_OUT:
            raise ValidationError(
                f"Cannot start sign-in — current state is {self.state.value}, "
                f"expected LOGGED_OUT"
            )
        self.email = email
        self.password = password
        self.error = None
        self.state = AuthState.AUTHENTICATING

    def succeed(self) -> None:
        self._expect_authenticating()
        self.state = AuthState.LOGGED_IN

    def fail(self, message: str) -> None:
        self._expect_authenticating()
        self.error = message
        self.state = AuthState.LOGGED_OUT

    def reset(self) -> None:
        """Back to the initial state; credentials and error are dropped."""
        self.state = AuthState.LOGGED_OUT
        self.email = ""
        self.password = ""
        self.error = None

    def _expect_authenticating(self) -> None:
        if self.state != AuthState.AUTHENTICATING:
            raise ValidationError(
                f"No sign-in in progress — current state is {self.state.value}"
            )
