"""Process-wide host runtime.

Bundles the host collaborators the registration cycle reads and mutates so
they can be injected (tests build their own `HostRuntime`).
"""
from __future__ import annotations

import threading
from dataclasses import dataclass, field
from typing import Callable, Optional, Sequence

from custom_locales import config as app_config
from custom_locales.host.caches import CacheManager
from custom_locales.host.cultures import BabelLocaleNames, CultureCatalog, LocaleNameCache
from custom_locales.host.databases import DatabaseFactory, build_database_factory
from custom_locales.host.languages import LanguageProvider
from custom_locales.models import LanguageDefinition
from custom_locales.services.definitions_service import load_definitions
from custom_locales.utils.logging import get_logger

LOG = get_logger("host.runtime")

_LOCK = threading.Lock()
_RUNTIME: Optional["HostRuntime"] = None


@dataclass
class HostRuntime:
    cache_manager: CacheManager
    catalog: CultureCatalog
    language_provider: LanguageProvider
    database_factory: DatabaseFactory
    locale_cache: LocaleNameCache
    definitions_loader: Callable[[], Sequence[LanguageDefinition]]
    role: Callable[[], str] = field(default=app_config.server_role)
    cd_database_name: Callable[[], str] = field(default=app_config.cd_database_name)
    last_report: Optional[object] = None


def build_runtime() -> HostRuntime:
    cache_manager = CacheManager()
    catalog = CultureCatalog()
    return HostRuntime(
        cache_manager=cache_manager,
        catalog=catalog,
        language_provider=LanguageProvider(cache_manager, catalog),
        database_factory=build_database_factory(),
        locale_cache=LocaleNameCache(BabelLocaleNames(app_config.display_locale())),
        definitions_loader=load_definitions,
    )


def get_runtime() -> HostRuntime:
    global _RUNTIME
    if _RUNTIME is not None:
        return _RUNTIME
    with _LOCK:
        if _RUNTIME is None:
            _RUNTIME = build_runtime()
            LOG.debug("Host runtime built: %s", app_config.summarize_runtime_config())
        return _RUNTIME


def reset_runtime_for_tests(runtime: Optional[HostRuntime] = None) -> None:
    global _RUNTIME
    with _LOCK:
        _RUNTIME = runtime


__all__ = ["HostRuntime", "build_runtime", "get_runtime", "reset_runtime_for_tests"]
