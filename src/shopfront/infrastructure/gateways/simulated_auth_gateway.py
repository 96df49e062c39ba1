"""In-process AuthGateway that applies a CredentialPolicy after a delay."""

from __future__ import annotations

import asyncio

from shopfront.domain.gateway.auth_gateway import AuthGateway, AuthResult
from shopfront.domain.service.credential_policy import CredentialPolicy


class SimulatedAuthGateway(AuthGateway):

    def __init__(self, policy: CredentialPolicy, latency: float = 1.0) -> None:
        self._policy = policy
        self._latency = latency

    async def verify(self, email: str, password: str) -> AuthResult:
        if self._latency > 0:
            await asyncio.sleep(self._latency)

        error = self._policy.check(email, password)
        if error is not None:
            return AuthResult(success=False, error=error)
        return AuthResult(success=True)
