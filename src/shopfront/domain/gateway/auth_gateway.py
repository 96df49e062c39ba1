"""Abstract gateway for the credential check."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass(frozen=True)
class AuthResult:
    success: bool
    error: str | None = None


class AuthGateway(ABC):

    @abstractmethod
    async def verify(self, email: str, password: str) -> AuthResult:
        """Decide whether the credentials are accepted.

        A rejected credential is a normal ``AuthResult(success=False)``;
        only transport failures are raised, as ``GatewayError``.
        """
