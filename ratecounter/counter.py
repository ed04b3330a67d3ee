"""Thread-safe events-per-second gauge."""

from __future__ import annotations

import logging
import time
from threading import Lock
from typing import Callable

from .config import RateCounterConfig, WindowLike

logger = logging.getLogger(__name__)

Clock = Callable[[], float]


class RateCounter:
    """Count events and report their rate over a fixed window.

    The rate is recomputed whenever a ``tick()`` finds that the window has
    elapsed, and stays at ``0.0`` until the first window completes. Typical use
    is frame rates, message throughput or request rates::

        fps = RateCounter()
        while running:
            render()
            fps.tick()
        print(f"FPS: {fps}")

    A short lock guards the event count and the rollover; the clock
    check on the fast path and ``rate()`` never wait on it.
    """

    def __init__(
        self,
        window: WindowLike | None = None,
        *,
        clock: Clock = time.monotonic,
        config: RateCounterConfig | None = None,
    ) -> None:
        if window is not None and config is not None:
            raise TypeError("pass either window or config, not both")
        if config is None:
            config = (
                RateCounterConfig()
                if window is None
                else RateCounterConfig(window=window)
            )

        self._window = config.window
        self._clock = clock
        self._count_lock = Lock()
        self._count = 0
        self._rate = 0.0
        self._started = clock()

    @property
    def window(self) -> float:
        """Window length in seconds."""
        return self._window

    def tick(self) -> "RateCounter":
        """Record one event, closing the window if it has elapsed."""

        with self._count_lock:
            self._count += 1

        now = self._clock()
        if now - self._started < self._window:
            return self
        self._roll_over(now)
        return self

    def _roll_over(self, now: float) -> None:
        with self._count_lock:
            # Re-check against the current start: a concurrent caller may
            # already have closed this window and restarted the timer.
            elapsed = now - self._started
            if elapsed < self._window or elapsed <= 0 or self._count == 0:
                return
            captured, self._count = self._count, 0
            rate = captured / elapsed
            self._rate = rate
            self._started = now

        logger.debug(
            "Rate window closed after %.3fs with %d events: %.3f/s",
            elapsed,
            captured,
            rate,
        )

    def increment(self) -> "RateCounter":
        """Same as :meth:`tick`; returns the counter for chaining."""
        return self.tick()

    def rate(self) -> float:
        """Events per second over the last completed window."""
        return self._rate

    def as_float(self) -> float:
        return self.rate()

    def reset(self) -> None:
        """Forget all events and the last rate.

        A ``tick()`` running concurrently may land either side of the reset;
        its event is then kept or dropped accordingly.
        """

        with self._count_lock:
            self._count = 0
            self._rate = 0.0
            self._started = self._clock()
        logger.debug("Rate counter reset (window=%.3fs)", self._window)

    def __float__(self) -> float:
        return self._rate

    def __str__(self) -> str:
        return f"{self._rate:.1f}/s"

    def __repr__(self) -> str:
        return f"RateCounter(window={self._window!r}, rate={self._rate:.1f}/s)"
