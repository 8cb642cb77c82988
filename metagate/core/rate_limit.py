"""metagate — Per-client Request Rate Limiting.

Fixed window keyed by client address, counted by the ``limits`` library in
process memory.
"""

import time
from dataclasses import dataclass
from typing import Optional

from limits import RateLimitItemPerSecond
from limits.storage import MemoryStorage, Storage
from limits.strategies import FixedWindowRateLimiter

RATE_LIMIT_MESSAGE = "Too many requests from this IP, please try again later."
NAMESPACE = "metagate"


@dataclass(frozen=True)
class RateLimitDecision:
    allowed: bool
    limit: int
    remaining: int
    reset_after: float


class ClientRateLimiter:
    """At most ``max_requests`` per ``window_seconds`` for each client key."""

    def __init__(
        self,
        window_seconds: int,
        max_requests: int,
        storage: Optional[Storage] = None,
    ):
        self.item = RateLimitItemPerSecond(
            max_requests, max(1, int(window_seconds)), namespace=NAMESPACE
        )
        self.storage = storage or MemoryStorage()
        self._strategy = FixedWindowRateLimiter(self.storage)

    @property
    def max_requests(self) -> int:
        return self.item.amount

    def hit(self, key: str) -> RateLimitDecision:
        """Count one request for ``key`` and report whether it may proceed."""
        allowed = self._strategy.hit(self.item, key)
        stats = self._strategy.get_window_stats(self.item, key)
        return RateLimitDecision(
            allowed=allowed,
            limit=self.item.amount,
            remaining=stats.remaining,
            reset_after=max(0.0, stats.reset_time - time.time()),
        )
