"""Application service: Auth Gate.

Decides whether the signed-in screens are shown. Drives the AuthSession
state machine around an ``AuthGateway`` call.

Only one sign-in may be in flight: a ``login()`` issued while another is
AUTHENTICATING is rejected without touching the session. Each attempt
carries a number; a result that arrives after ``logout()`` or a newer
attempt is discarded.
"""

from __future__ import annotations

import logging

from shopfront.application.observable import Observable
from shopfront.application.resilience import RetryPolicy, call_gateway
from shopfront.domain.exceptions import GatewayError
from shopfront.domain.gateway.auth_gateway import AuthGateway
from shopfront.domain.model.session import AuthSession, AuthState
from shopfront.domain.service.credential_policy import INVALID_CREDENTIALS_MESSAGE

logger = logging.getLogger(__name__)


class AuthGate(Observable):

    def __init__(
        self,
        gateway: AuthGateway,
        retry_policy: RetryPolicy | None = None,
    ) -> None:
        super().__init__()
        self._gateway = gateway
        # Sign-in is attempted once; only the timeout applies.
        self._retry_policy = retry_policy or RetryPolicy(max_attempts=1)
        self.session = AuthSession()
        self._attempt = 0

    @property
    def is_authenticated(self) -> bool:
        return self.session.is_authenticated

    @property
    def error(self) -> str | None:
        return self.session.error

    @property
    def state(self) -> AuthState:
        return self.session.state

    async def login(self, email: str, password: str) -> bool:
        """Check the credentials and update the session.

        Returns True when the gate ends up LOGGED_IN.
        """
        if self.session.state == AuthState.AUTHENTICATING:
            logger.warning("Sign-in already in progress; ignoring duplicate login()")
            return False
        if self.session.state == AuthState.LOGGED_IN:
            logger.debug("login() called while already signed in")
            return True

        self._attempt += 1
        attempt = self._attempt
        self.session.begin(email, password)
        self._notify()

        try:
            result = await call_gateway(
                lambda: self._gateway.verify(email, password),
                self._retry_policy,
                "Sign-in service",
            )
        except GatewayError as exc:
            if attempt != self._attempt:
                logger.debug("Dropping failure of abandoned sign-in for %s: %s", email, exc)
                return False
            logger.warning("Sign-in for %s failed: %s", email, exc)
            self.session.fail(str(exc))
        else:
            if attempt != self._attempt:
                logger.debug("Dropping result of abandoned sign-in for %s", email)
                return False
            if result.success:
                self.session.succeed()
                logger.info("Signed in as %s", email)
            else:
                self.session.fail(result.error or INVALID_CREDENTIALS_MESSAGE)
                logger.info("Sign-in rejected for %r: %s", email, self.session.error)

        self._notify()
        return self.session.is_authenticated

    def logout(self) -> None:
        self._attempt += 1
        self.session.reset()
        logger.info("Signed out")
        self._notify()
