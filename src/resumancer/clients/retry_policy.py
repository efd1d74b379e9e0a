"""Retry policy for provider calls."""

from __future__ import annotations

from dataclasses import dataclass

import anthropic
from tenacity import RetryCallState


@dataclass(frozen=True)
class RetryPolicy:
    """When to retry a provider call and how long to wait in between.

    Rate limits (429), server errors (5xx) and connection failures are
    transient. Anything else fails on the first attempt. Delays grow
    linearly: ``base_delay * attempt_number``.
    """

    max_attempts: int = 3
    base_delay: float = 1.0

    def is_retryable(self, exc: BaseException) -> bool:
        if isinstance(exc, anthropic.APIStatusError):
            return exc.status_code == 429 or exc.status_code >= 500
        # APITimeoutError is a subclass
        return isinstance(exc, anthropic.APIConnectionError)

    def delay(self, attempt_number: int) -> float:
        return self.base_delay * attempt_number

    def wait(self, retry_state: RetryCallState) -> float:
        """tenacity ``wait`` hook."""
        return self.delay(retry_state.attempt_number)
