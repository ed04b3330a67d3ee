"""Named rate counters shared across an application."""

from __future__ import annotations

import logging
import time
from threading import Lock
from typing import Dict, List

from .config import RateCounterConfig, WindowLike
from .counter import Clock, RateCounter

logger = logging.getLogger(__name__)


class RateCounterRegistry:
    """Thread-safe collection of counters keyed by name."""

    def __init__(
        self,
        config: RateCounterConfig | None = None,
        *,
        clock: Clock = time.monotonic,
    ) -> None:
        self.config = config or RateCounterConfig()
        self._clock = clock
        self._counters: Dict[str, RateCounter] = {}
        self._lock = Lock()

    def counter(self, name: str, window: WindowLike | None = None) -> RateCounter:
        """Return the counter called ``name``, creating it on first use.

        ``window`` only matters when the counter does not exist yet.
        """

        counter = self._counters.get(name)
        if counter is not None:
            return counter

        with self._lock:
            counter = self._counters.get(name)
            if counter is None:
                config = (
                    self.config
                    if window is None
                    else RateCounterConfig(window=window)
                )
                counter = RateCounter(config=config, clock=self._clock)
                self._counters[name] = counter
                logger.debug(
                    "Registered rate counter %r (window=%.3fs)", name, counter.window
                )
            return counter

    def tick(self, name: str) -> RateCounter:
        return self.counter(name).tick()

    def names(self) -> List[str]:
        with self._lock:
            return list(self._counters.keys())

    def snapshot(self) -> Dict[str, float]:
        with self._lock:
            counters = dict(self._counters)
        return {name: counter.rate() for name, counter in counters.items()}

    def reset(self) -> None:
        with self._lock:
            counters = list(self._counters.values())
        for counter in counters:
            counter.reset()

    def __contains__(self, name: object) -> bool:
        with self._lock:
            return name in self._counters

    def __len__(self) -> int:
        with self._lock:
            return len(self._counters)
