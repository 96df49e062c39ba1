"""Timeout and retry around gateway calls.

Every call to an external collaborator goes through ``call_gateway`` so
a slow or failing provider ends as a ``GatewayError`` that the store can
turn into a state field.
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from typing import Awaitable, Callable, TypeVar

from shopfront.domain.exceptions import GatewayError

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class RetryPolicy:
    timeout: float = 5.0
    max_attempts: int = 3
    backoff: float = 0.1  # seconds before the 2nd attempt, doubled after


async def call_gateway(
    operation: Callable[[], Awaitable[T]],
    policy: RetryPolicy,
    description: str,
) -> T:
    """Await ``operation()`` with a timeout, retrying transport failures.

    Raises GatewayError once ``policy.max_attempts`` attempts have failed.
    """
    last_error: Exception | None = None
    attempts = max(1, policy.max_attempts)

    for attempt in range(1, attempts + 1):
        try:
            return await asyncio.wait_for(operation(), timeout=policy.timeout)
        except asyncio.TimeoutError as exc:
            last_error = exc
            logger.warning(
                "%s timed out after %.1fs (attempt %d/%d)",
                description, policy.timeout, attempt, attempts,
            )
        except (GatewayError, ConnectionError) as exc:
            last_error = exc
            logger.warning(
                "%s failed (attempt %d/%d): %s", description, attempt, attempts, exc
            )

        if attempt < attempts:
            await asyncio.sleep(policy.backoff * 2 ** (attempt - 1))

    raise GatewayError(
        f"{description} is unavailable, please try again"
    ) from last_error
