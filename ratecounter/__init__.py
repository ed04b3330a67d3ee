"""Lock-light events-per-second counters."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .config import DEFAULT_WINDOW_SECONDS, RateCounterConfig
from .counter import RateCounter
from .registry import RateCounterRegistry

if TYPE_CHECKING:  # pragma: no cover - imported for type checking only
    from flask import Flask


def init_app(app: "Flask", registry: RateCounterRegistry | None = None, **kwargs):
    from .web import init_app as register

    return register(app, registry, **kwargs)


__all__ = [
    "DEFAULT_WINDOW_SECONDS",
    "RateCounter",
    "RateCounterConfig",
    "RateCounterRegistry",
    "init_app",
]
