from __future__ import annotations

import functools
import threading
import time
from typing import Any, Callable, TypeVar, cast

from ..core.errors import RateLimitError, ValidationError
from ..logging import get_logger


F = TypeVar("F", bound=Callable[..., Any])

logger = get_logger(__name__)


class TokenBucket:
    """Continuous token bucket.

    Tokens refill lazily: every operation first tops the balance up by
    ``refill_rate * elapsed`` (capped at ``capacity``) and moves the update
    timestamp to now, so no background timer is needed.

    A caller that has to wait debits its tokens up front, letting the balance
    go negative, and sleeps with the lock released until the refill has paid
    the debt back. Later waiters see the outstanding debt and wait behind it;
    :meth:`try_acquire` never blocks on a sleeping waiter.
    """

    def __init__(
        self,
        capacity: int,
        refill_rate: float,
        *,
        initial_tokens: float = 0.0,
        clock: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        if capacity <= 0:
            raise ValidationError(f"capacity must be positive, got {capacity}")
        if refill_rate <= 0:
            raise ValidationError(f"refill_rate must be positive, got {refill_rate}")
        self.capacity = capacity
        self.refill_rate = float(refill_rate)
        self._clock = clock
        self._sleep = sleep
        self._tokens = min(float(capacity), max(0.0, float(initial_tokens)))
        self._last_update = clock()
        self._lock = threading.Lock()

    @property
    def available(self) -> float:
        """Tokens that could be taken right now; 0 while waiters are in debt."""
        with self._lock:
            self._refill()
            return max(0.0, self._tokens)

    def _refill(self) -> None:
        now = self._clock()
        elapsed = now - self._last_update
        self._tokens = min(float(self.capacity), self._tokens + self.refill_rate * elapsed)
        self._last_update = now

    def _check(self, n: float) -> None:
        if n < 0:
            raise ValidationError(f"token count must be non-negative, got {n}")

    def try_acquire(self, n: float = 1) -> bool:
        """Take ``n`` tokens if they are available right now."""

        self._check(n)
        with self._lock:
            self._refill()
            if self._tokens >= n:
                self._tokens -= n
                return True
            return False

    def acquire(self, n: float = 1) -> None:
        """Take ``n`` tokens, sleeping until the bucket has refilled enough."""

        self._check(n)
        if n > self.capacity:
            raise RateLimitError(n, self.capacity)
        with self._lock:
            self._refill()
            wait_seconds = self._reserve(n)
        self._wait(wait_seconds, n)

    def acquire_with_timeout(self, n: float, timeout: float) -> bool:
        """Like :meth:`acquire` but gives up when the wait would exceed ``timeout``."""

        self._check(n)
        if n > self.capacity:
            raise RateLimitError(n, self.capacity)
        with self._lock:
            self._refill()
            if (n - self._tokens) / self.refill_rate > timeout:
                return False
            wait_seconds = self._reserve(n)
        self._wait(wait_seconds, n)
        return True

    def _reserve(self, n: float) -> float:
        # Caller holds the lock. Returns how long until the debt is repaid.
        self._tokens -= n
        return max(0.0, -self._tokens / self.refill_rate)

    def _wait(self, wait_seconds: float, n: float) -> None:
        if wait_seconds <= 0:
            return
        logger.debug("Rate limited: waiting %.3fs for %s token(s)", wait_seconds, n)
        self._sleep(wait_seconds)

    def __repr__(self) -> str:
        return f"TokenBucket(capacity={self.capacity}, refill_rate={self.refill_rate})"


def rate_limited(bucket: TokenBucket, *, cost: float = 1) -> Callable[[F], F]:
    """Decorator builder that takes ``cost`` tokens from ``bucket`` before each call."""

    def decorator(func: F) -> F:
        @functools.wraps(func)
        def wrapped(*args: Any, **kwargs: Any) -> Any:
            bucket.acquire(cost)
            return func(*args, **kwargs)

        return cast(F, wrapped)

    return decorator
