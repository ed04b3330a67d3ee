"""Flask integration exposing request rates."""

from __future__ import annotations

import json

from flask import Blueprint, Flask

from .registry import RateCounterRegistry

EXTENSION_KEY = "ratecounter"


def _json_ok(data: dict):
    data = {"ok": True, **data}
    return (
        json.dumps(data, ensure_ascii=False),
        200,
        {
            "Content-Type": "application/json; charset=utf-8",
            "Cache-Control": "no-store",
        },
    )


def create_blueprint(
    registry: RateCounterRegistry,
    counter_name: str = "requests",
    url_prefix: str | None = None,
    name: str | None = None,
) -> Blueprint:
    """Return a blueprint counting every request and serving ``/rates``.

    The request hook is registered app-wide so traffic to other blueprints is
    measured too. The blueprint is named after ``counter_name`` unless
    ``name`` is given, so several can be registered on one app.
    """

    if name is None:
        name = "ratecounter_" + counter_name.replace(".", "_")
    bp = Blueprint(name, __name__, url_prefix=url_prefix)
    # Create eagerly so the counter's first window starts with the app.
    registry.counter(counter_name)

    @bp.before_app_request
    def _track_requests():
        registry.tick(counter_name)

    @bp.route("/rates")
    def rates():
        snapshot = registry.snapshot()
        display = {name: f"{rate:.1f}/s" for name, rate in snapshot.items()}
        return _json_ok({"rates": snapshot, "display": display})

    return bp


def init_app(
    app: Flask,
    registry: RateCounterRegistry | None = None,
    **kwargs,
) -> RateCounterRegistry:
    """Register request-rate tracking on ``app`` and return its registry."""

    if registry is None:
        registry = RateCounterRegistry()
    app.register_blueprint(create_blueprint(registry, **kwargs))
    app.extensions[EXTENSION_KEY] = registry
    return registry
