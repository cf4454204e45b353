"""Fixed-interval rate limiting between consecutive API requests."""

import logging
import time
from collections.abc import Callable

logger = logging.getLogger(__name__)

# Documented on 25.04.19: 225 calls per 15 minute window per API token, i.e.
# one call every 4 seconds.
DEFAULT_REQUEST_INTERVAL = 4.0


class RateLimiter:
    """Enforce a minimum interval between calls to ``wait``.

    The first call returns immediately; every later call blocks until
    ``min_interval`` seconds have passed since the previous one. There is no
    adaptive backoff.

    Args:
        min_interval: Minimum number of seconds between requests.
        clock: Monotonic clock returning seconds.
        sleep: Function used to block for a number of seconds.
    """

    def __init__(
        self,
        min_interval: float = DEFAULT_REQUEST_INTERVAL,
        *,
        clock: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        if min_interval < 0:
            raise ValueError(f"min_interval cannot be negative, got {min_interval}")
        self._min_interval = min_interval
        self._clock = clock
        self._sleep = sleep
        self._last_call: float | None = None

    @property
    def min_interval(self) -> float:
        return self._min_interval

    def wait(self) -> float:
        """Block until the next request may be issued.

        Returns:
            Seconds slept.
        """
        slept = 0.0
        if self._last_call is not None:
            remaining = self._min_interval - (self._clock() - self._last_call)
            if remaining > 0:
                logger.debug(f"Rate limiting: sleeping {remaining:.2f}s")
                self._sleep(remaining)
                slept = remaining
        self._last_call = self._clock()
        return slept
