"""Configuration for rate counters."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta
from typing import Union

DEFAULT_WINDOW_SECONDS = 5.0

WindowLike = Union[float, int, timedelta]


def window_seconds(window: WindowLike) -> float:
    """Normalise a window given as seconds or a ``timedelta``."""

    if isinstance(window, timedelta):
        return window.total_seconds()
    return float(window)


@dataclass(slots=True)
class RateCounterConfig:
    """Settings shared by every counter built from this config."""

    # Zero or negative: every tick attempts a rollover once time has moved.
    window: float = DEFAULT_WINDOW_SECONDS

    def __post_init__(self) -> None:
        self.window = window_seconds(self.window)
