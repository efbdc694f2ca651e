import logging
import random
import threading
import time
from typing import Callable, Optional

logger = logging.getLogger("BenchLatencySimulator")

NANOS_PER_MILLI = 1_000_000


class LatencySimulator:
    """
    Simulates storage round-trip delays to mimic real-world I/O lag.

    Each call to delay() blocks the calling thread for either exactly
    delay_ms milliseconds, or a uniform draw from [0, delay_ms) when
    randomize is set. The wait can be cut short from another thread
    with interrupt().
    """
    def __init__(
        self,
        delay_ms: int = 0,
        randomize: bool = True,
        rng: Optional[random.Random] = None,
        clock: Callable[[], int] = time.monotonic_ns,
    ):
        if delay_ms < 0:
            raise ValueError(f"delay_ms must be >= 0, got {delay_ms}")
        self.delay_ms = delay_ms
        self.randomize = randomize
        self.rng = rng or random.Random()
        self._clock = clock
        self._interrupted = threading.Event()

    def next_delay_ns(self) -> int:
        """Draw the delay for one call, in nanoseconds."""
        if self.delay_ms <= 0:
            return 0
        if self.randomize:
            return self.rng.randrange(self.delay_ms) * NANOS_PER_MILLI
        return self.delay_ms * NANOS_PER_MILLI

    def delay(self) -> int:
        """
        Block until the drawn delay has elapsed or interrupt() is called.

        Returns the number of nanoseconds actually spent waiting.
        """
        delay_ns = self.next_delay_ns()
        if delay_ns == 0:
            return 0

        start = now = self._clock()
        deadline = now + delay_ns
        while True:
            # Event.wait may return before the timeout; re-arm for what is left.
            interrupted = self._interrupted.wait((deadline - now) / 1e9)
            now = self._clock()
            if interrupted:
                self._interrupted.clear()
                logger.debug(f"Delay interrupted after {(now - start) / 1e6:.2f}ms of {delay_ns / 1e6:.0f}ms")
                break
            if now >= deadline:
                break
        return now - start

    def interrupt(self) -> None:
        """Wake a pending delay() early. Safe to call from any thread."""
        self._interrupted.set()
