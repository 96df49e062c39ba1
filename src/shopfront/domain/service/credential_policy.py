"""Domain service: Credential Policy.

Decides pass/fail for a submitted email and password. Two policies
exist because the demo screens disagreed on the rule; the composition
root picks exactly one.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

EMPTY_FIELDS_MESSAGE = "Email and password are required"
INVALID_CREDENTIALS_MESSAGE = "Invalid credentials"


class CredentialPolicy(ABC):

    @abstractmethod
    def check(self, email: str, password: str) -> str | None:
        """Return None when accepted, otherwise a user-facing message."""


class NonEmptyCredentialPolicy(CredentialPolicy):
    """Accept any credentials as long as both fields are filled in."""

    def check(self, email: str, password: str) -> str | None:
        if not email.strip() or not password:
            return EMPTY_FIELDS_MESSAGE
        return None


class FixedCredentialPolicy(CredentialPolicy):
    """Accept exactly one demo account."""

    def __init__(self, email: str = "test@example.com", password: str = "password") -> None:
        self._email = email
        self._password = password

    def check(self, email: str, password: str) -> str | None:
        if not email.strip() or not password:
            return EMPTY_FIELDS_MESSAGE
        if email.strip() != self._email or password != self._password:
            return INVALID_CREDENTIALS_MESSAGE
        return None


POLICIES = {
    "non-empty": NonEmptyCredentialPolicy,
    "fixed": FixedCredentialPolicy,
}
