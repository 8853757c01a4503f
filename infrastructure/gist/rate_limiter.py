import math
import time
from threading import Lock
from typing import Any, Callable, Mapping, Optional

# Fallback pause when GitHub reports exhaustion without a usable reset time.
EXHAUSTED_BACKOFF = 60.0
MAX_SLEEP_SLICE = 2.0


def _header(headers: Mapping[str, Any], name: str) -> Optional[str]:
    value = headers.get(name)
    if value is None:
        value = headers.get(name.lower())
    return None if value is None else str(value)


def _as_float(value: Optional[str]) -> Optional[float]:
    if value is None:
        return None
    try:
        parsed = float(value)
    except ValueError:
        return None
    return parsed if math.isfinite(parsed) else None


class RateLimiter:
    """Thread-safe gate shared by every request to the gist API.

    `update` reads the GitHub rate-limit headers of each response and pushes
    the next allowed request time forward; `acquire` sleeps until then.
    """

    def __init__(
        self,
        clock: Callable[[], float] = time.time,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self._lock = Lock()
        self._clock = clock
        self._sleep = sleep
        self._next_ts = 0.0
        self.last_remaining: Optional[int] = None
        self.last_reset_epoch: Optional[float] = None

    @property
    def wait_time(self) -> float:
        with self._lock:
            return max(0.0, self._next_ts - self._clock())

    def acquire(self) -> None:
        while True:
            wait = self.wait_time
            if wait <= 0:
                return
            self._sleep(min(wait, MAX_SLEEP_SLICE))

    def pause(self, seconds: float) -> None:
        with self._lock:
            self._next_ts = max(self._next_ts, self._clock() + seconds)

    def update(self, headers: Mapping[str, Any]) -> None:
        retry_after = _as_float(_header(headers, "Retry-After"))
        remaining = _as_float(_header(headers, "X-RateLimit-Remaining"))
        reset = _as_float(_header(headers, "X-RateLimit-Reset"))
        with self._lock:
            now = self._clock()
            if retry_after is not None:
                self._next_ts = max(self._next_ts, now + retry_after)
            if reset is not None:
                self.last_reset_epoch = reset
            if remaining is None:
                return
            self.last_remaining = int(remaining)
            if self.last_remaining > 0:
                return
            if reset is not None and reset > now:
                self._next_ts = max(self._next_ts, reset)
            else:
                self._next_ts = max(self._next_ts, now + EXHAUSTED_BACKOFF)


__all__ = ["RateLimiter"]
