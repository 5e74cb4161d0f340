from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence

from config import settings

# 400 is retried with the 5xx range; the platform hosts answer 400
# transiently under load.
TRANSIENT_STATUSES: frozenset[int] = frozenset({400, *range(500, 600)})
RATE_LIMIT_STATUSES: frozenset[int] = frozenset({429})


@dataclass(frozen=True, slots=True)
class RetryPolicy:
    """Fixed-delay retry rule for one class of failure.

    ``status`` of ``None`` stands for a transport failure (no response).
    """
    name: str
    max_attempts: int
    delay: float
    retryable_statuses: frozenset[int] = frozenset()
    retry_transport_errors: bool = False

    def applies_to(self, status: Optional[int]) -> bool:
        if status is None:
            return self.retry_transport_errors
        return status in self.retryable_statuses

    @classmethod
    def transient(cls, *, max_attempts: int | None = None, delay: float | None = None) -> "RetryPolicy":
        return cls(
            name="transient",
            max_attempts=settings.MAX_RETRIES if max_attempts is None else max_attempts,
            delay=settings.RETRY_DELAY if delay is None else delay,
            retryable_statuses=TRANSIENT_STATUSES,
            retry_transport_errors=True,
        )

    @classmethod
    def rate_limit(cls, *, max_attempts: int | None = None, delay: float | None = None) -> "RetryPolicy":
        return cls(
            name="rate-limit",
            max_attempts=settings.RATE_LIMIT_MAX_RETRIES if max_attempts is None else max_attempts,
            delay=settings.RETRY_DELAY if delay is None else delay,
            retryable_statuses=RATE_LIMIT_STATUSES,
        )

    @classmethod
    def defaults(cls, *, delay: float | None = None) -> tuple["RetryPolicy", ...]:
        return (cls.transient(delay=delay), cls.rate_limit(delay=delay))


class RetryBudget:
    """Attempt counters for a single call, one per policy.

    The first policy that matches a failure consumes one of its attempts;
    the others are untouched, so a call may be retried for 5xx and for 429
    independently.
    """

    def __init__(self, policies: Sequence[RetryPolicy]) -> None:
        self._policies = tuple(policies)
        self._attempts = [1] * len(self._policies)

    def next_retry(self, status: Optional[int]) -> Optional[tuple[RetryPolicy, int]]:
        """Return the matching policy and the upcoming attempt number, or None to give up."""
        for i, policy in enumerate(self._policies):
            if not policy.applies_to(status):
                continue
            if self._attempts[i] >= policy.max_attempts:
                return None
            self._attempts[i] += 1
            return policy, self._attempts[i]
        return None
