"""Runtime settings for the composition root.

Defaults reproduce the demo client: ten products per page, half a second
of catalog latency and one second for sign-in.
"""

from __future__ import annotations

from dataclasses import dataclass

from shopfront.application.resilience import RetryPolicy


@dataclass(frozen=True)
class Settings:
    page_size: int = 10
    near_end_threshold: int = 5
    initial_load_size: int | None = None  # None = whole catalog in one batch
    catalog_latency: float = 0.5
    login_latency: float = 1.0
    request_timeout: float = 5.0
    max_attempts: int = 3
    retry_backoff: float = 0.1
    auth_policy: str = "non-empty"

    @property
    def catalog_retry_policy(self) -> RetryPolicy:
        return RetryPolicy(
            timeout=self.request_timeout,
            max_attempts=self.max_attempts,
            backoff=self.retry_backoff,
        )

    @property
    def auth_retry_policy(self) -> RetryPolicy:
        return RetryPolicy(timeout=self.request_timeout, max_attempts=1)
