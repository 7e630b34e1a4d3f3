"""
Request pacing for the Sleeper API.

Sleeper throttles clients that call too quickly but does not publish a limit,
so every outbound request waits until a fixed interval has passed since the
previous one.
"""

import asyncio
import time
from collections.abc import Awaitable, Callable


class RequestPacer:
    """
    Enforces a minimum gap between consecutive upstream calls.

    ``wait()`` returns no earlier than ``interval`` seconds after the previous
    ``wait()`` returned. Concurrent waiters are spaced relative to each other:
    the read-sleep-update sequence runs under a lock so two callers never
    compute the same wait.
    """

    def __init__(
        self,
        interval: float = 0.1,
        clock: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ):
        self.interval = interval
        self._clock = clock
        self._sleep = sleep
        self._last_call: float | None = None
        self._lock = asyncio.Lock()

    async def wait(self) -> None:
        """Wait until the next request is allowed."""
        async with self._lock:
            if self._last_call is not None:
                remaining = self.interval - (self._clock() - self._last_call)
                if remaining > 0:
                    await self._sleep(remaining)
            self._last_call = self._clock()
