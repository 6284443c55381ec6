from __future__ import annotations

import threading
import time
from collections import OrderedDict
from dataclasses import dataclass
from typing import Callable

from app.core.config import settings


class RateLimitExceeded(Exception):
    def __init__(self, retry_after_ms: int):
        super().__init__(f"Rate limit exceeded; retry after {retry_after_ms} ms")
        self.retry_after_ms = retry_after_ms


@dataclass(frozen=True)
class RateLimitDecision:
    allowed: bool
    remaining: int
    retry_after_ms: int


def _now_ms() -> int:
    return int(time.time() * 1000)


class SlidingWindowRateLimiter:
    """Per-key sliding-window admission control held in process memory.

    Every admission check records the current timestamp, including checks that
    end up rejected, so a client hammering the endpoint while throttled keeps
    its window full.

    The key table is bounded: the least recently checked key is evicted once
    ``max_keys`` is reached, and ``sweep()`` drops keys whose timestamps have
    all aged out of their window.
    """

    def __init__(self, max_keys: int = 10_000, clock: Callable[[], int] = _now_ms):
        if max_keys < 1:
            raise ValueError("max_keys must be at least 1")
        self._max_keys = max_keys
        self._clock = clock
        self._lock = threading.Lock()
        self._entries: OrderedDict[str, list[int]] = OrderedDict()
        self._windows: dict[str, int] = {}

    def admit(self, key: str, window_ms: int, max_requests: int) -> RateLimitDecision:
        with self._lock:
            now = self._clock()
            window_start = now - window_ms
            timestamps = [ts for ts in self._entries.get(key, []) if ts > window_start]
            timestamps.append(now)

            self._entries[key] = timestamps
            self._entries.move_to_end(key)
            self._windows[key] = window_ms
            while len(self._entries) > self._max_keys:
                evicted, _ = self._entries.popitem(last=False)
                self._windows.pop(evicted, None)

            count = len(timestamps)
            oldest = timestamps[0] if timestamps else now
            return RateLimitDecision(
                allowed=count <= max_requests,
                remaining=max(0, max_requests - count),
                retry_after_ms=max(0, window_ms - (now - oldest)),
            )

    def enforce(self, key: str, window_ms: int, max_requests: int) -> RateLimitDecision:
        decision = self.admit(key, window_ms, max_requests)
        if not decision.allowed:
            raise RateLimitExceeded(decision.retry_after_ms)
        return decision

    def sweep(self) -> int:
        with self._lock:
            now = self._clock()
            expired = [
                key
                for key, timestamps in self._entries.items()
                if not timestamps or timestamps[-1] <= now - self._windows.get(key, 0)
            ]
            for key in expired:
                del self._entries[key]
                self._windows.pop(key, None)
            return len(expired)

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()
            self._windows.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)


chat_rate_limiter = SlidingWindowRateLimiter(max_keys=settings.rate_limit_max_keys)
job_fit_rate_limiter = SlidingWindowRateLimiter(max_keys=settings.rate_limit_max_keys)


def clear_client_rate_limits() -> None:
    chat_rate_limiter.clear()
    job_fit_rate_limiter.clear()


def sweep_client_rate_limits() -> int:
    return chat_rate_limiter.sweep() + job_fit_rate_limiter.sweep()
