"""Application initialization / wiring.

Orchestrates: host runtime binding, the language registration pipeline,
route and template filter registration.
"""
from __future__ import annotations

from typing import Any, Optional

from custom_locales.host.runtime import HostRuntime, get_runtime
from custom_locales.pipelines import PipelineArgs, run_pipeline
from custom_locales.pipelines.register_languages import RegisterLanguages
from custom_locales.routes.custom_locales import (
    EXTENSION_KEY,
    register_custom_locales_routes,
    register_locale_filters,
)
from custom_locales.utils.logging import get_logger

LOG = get_logger("startup")


def init_app(app: Any, runtime: Optional[HostRuntime] = None) -> None:
    if getattr(app, "_custom_locales_initialized", False):
        return
    LOG.debug("init_app starting")
    runtime = runtime or get_runtime()
    app.extensions[EXTENSION_KEY] = runtime
    run_pipeline([RegisterLanguages(runtime)], PipelineArgs())
    register_custom_locales_routes(app)
    register_locale_filters(app)
    setattr(app, "_custom_locales_initialized", True)
    LOG.info("Custom locales startup wiring complete.")


__all__ = ["init_app"]
