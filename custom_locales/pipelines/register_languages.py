"""Startup processor registering the custom languages."""
from __future__ import annotations

from typing import Optional

from custom_locales.host.runtime import HostRuntime
from custom_locales.pipelines import PipelineArgs
from custom_locales.services import custom_language_manager
from custom_locales.utils.logging import get_logger

LOG = get_logger("pipelines.register_languages")

REPORT_KEY = "custom_locales.report"


class RegisterLanguages:
    """Registers the custom languages in the language registry and clears language caches.

    Failures are logged and never stop startup; the host keeps serving with
    whatever locale names it already has.
    """

    def __init__(self, runtime: Optional[HostRuntime] = None):
        self.runtime = runtime

    def process(self, args: PipelineArgs) -> None:
        try:
            report = custom_language_manager.register_custom_languages_and_clear_cache(self.runtime)
        except Exception:
            LOG.exception("Custom language registration failed")
            return
        args.custom_data[REPORT_KEY] = report


__all__ = ["RegisterLanguages", "REPORT_KEY"]
