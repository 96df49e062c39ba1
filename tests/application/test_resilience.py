"""Unit tests for gateway timeouts and retries."""

import asyncio

import pytest

from shopfront.application.resilience import RetryPolicy, call_gateway
from shopfront.domain.exceptions import GatewayError


class _Flaky:

    def __init__(self, failures: int, exc: Exception) -> None:
        self.failures = failures
        self.exc = exc
        self.attempts = 0

    async def __call__(self) -> str:
        self.attempts += 1
        if self.attempts <= self.failures:
            raise self.exc
        return "ok"


class TestCallGateway:

    async def test_success_first_try(self):
        op = _Flaky(0, GatewayError("x"))
        assert await call_gateway(op, RetryPolicy(backoff=0), "Test") == "ok"
        assert op.attempts == 1

    async def test_retries_gateway_errors(self):
        op = _Flaky(2, GatewayError("boom"))
        assert await call_gateway(op, RetryPolicy(max_attempts=3, backoff=0), "Test") == "ok"
        assert op.attempts == 3

    async def test_retries_connection_errors(self):
        op = _Flaky(1, ConnectionResetError())
        assert await call_gateway(op, RetryPolicy(max_attempts=2, backoff=0), "Test") == "ok"

    async def test_gives_up_after_max_attempts(self):
        op = _Flaky(5, GatewayError("boom"))
        with pytest.raises(GatewayError, match="Test is unavailable") as info:
            await call_gateway(op, RetryPolicy(max_attempts=2, backoff=0), "Test")
        assert op.attempts == 2
        assert isinstance(info.value.__cause__, GatewayError)

    async def test_timeout_counts_as_failure(self):
        async def hang():
            await asyncio.sleep(10)

        with pytest.raises(GatewayError, match="unavailable"):
            await call_gateway(hang, RetryPolicy(timeout=0.01, max_attempts=1), "Test")

    async def test_other_exceptions_propagate(self):
        op = _Flaky(1, ValueError("bug"))
        with pytest.raises(ValueError):
            await call_gateway(op, RetryPolicy(backoff=0), "Test")
        assert op.attempts == 1
