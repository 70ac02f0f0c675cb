"""Read-only endpoint exposing registered custom locales.

GET /custom-locales returns the registered language codes, the locale
entries of the custom cultures and the outcome of the last registration
cycle.
"""
from __future__ import annotations

from typing import Any

from flask import Blueprint, current_app, jsonify

from custom_locales.host.runtime import HostRuntime, get_runtime
from custom_locales.utils.logging import get_logger

LOG = get_logger("routes.custom_locales")

EXTENSION_KEY = "custom_locales"

bp = Blueprint("custom_locales", __name__)


def _runtime() -> HostRuntime:
    runtime = current_app.extensions.get(EXTENSION_KEY)
    return runtime or get_runtime()


@bp.route("/custom-locales", methods=["GET"])
def list_custom_locales():
    runtime = _runtime()
    report = runtime.last_report
    registered = runtime.language_provider.registered_languages()
    locales = [runtime.locale_cache.get(code).as_dict() for code in registered]
    return jsonify(
        {
            "registered": registered,
            "locales": locales,
            "last_cycle": report.as_dict() if report is not None else None,
        }
    )


def locale_display_name(code: Any) -> str:
    """Jinja filter: display name of a locale code from the locale-name cache."""
    if not code:
        return ""
    return _runtime().locale_cache.get(str(code)).display_name


def register_custom_locales_routes(app: Any) -> None:
    if getattr(app, "_custom_locales_bp", None):  # idempotent
        return
    app.register_blueprint(bp)
    setattr(app, "_custom_locales_bp", bp)
    LOG.debug("custom_locales blueprint registered")


def register_locale_filters(app: Any) -> None:
    env = getattr(app, "jinja_env", None)
    if not env:
        return
    filters = getattr(env, "filters", None)
    if not isinstance(filters, dict):
        return
    if "locale_display_name" not in filters:
        filters["locale_display_name"] = locale_display_name


__all__ = ["register_custom_locales_routes", "register_locale_filters", "locale_display_name", "EXTENSION_KEY"]
