"""Host language registry.

A language name is valid for content when the culture catalog knows it or it
has been explicitly marked as registered. `language_registered` reads through
the named cache "LanguageProvider - Languages", so after marking new
languages that cache must be cleared.
"""
from __future__ import annotations

import threading
from typing import List, Set

from custom_locales.host.caches import CacheManager
from custom_locales.host.cultures import CultureCatalog, normalize_locale_code
from custom_locales.host.databases import Database

LANGUAGE_CACHE_NAME = "LanguageProvider - Languages"


class LanguageProvider:
    def __init__(self, cache_manager: CacheManager, catalog: CultureCatalog):
        self.cache_manager = cache_manager
        self.catalog = catalog
        self._registered: Set[str] = set()
        self._lock = threading.Lock()

    def _is_registered(self, key: str) -> bool:
        with self._lock:
            return key in self._registered

    def language_registered(self, name: str) -> bool:
        key = normalize_locale_code(name)
        cache = self.cache_manager.get_named_cache(LANGUAGE_CACHE_NAME)
        cached = cache.get(key)
        if cached is not None:
            return bool(cached)
        registered = self._is_registered(key)
        cache.set(key, registered)
        return registered

    def mark_language_as_registered(self, name: str) -> None:
        key = normalize_locale_code(name)
        if not key:
            raise ValueError("language_name_required")
        with self._lock:
            self._registered.add(key)

    def registered_languages(self) -> List[str]:
        with self._lock:
            return sorted(self._registered)

    def is_valid_language_name(self, name: str) -> bool:
        return self.catalog.contains(name) or self.language_registered(name)

    def get_languages(self, database: Database) -> List[str]:
        return database.get_languages(self.is_valid_language_name)


__all__ = ["LANGUAGE_CACHE_NAME", "LanguageProvider"]
