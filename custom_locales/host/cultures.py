"""Locale catalog and the process-wide locale-name cache.

Babel's CLDR data plays the role of the operating environment's locale
database. Codes it does not know still get a cache entry on first lookup, but
with the generic "Unknown Locale (code)" placeholder names. The patcher in
`custom_locales.services.custom_language_manager` replaces those placeholders
through the narrow `LocaleCacheWriter` protocol.
"""
from __future__ import annotations

import threading
from dataclasses import dataclass
from typing import Callable, Dict, FrozenSet, Iterable, List, Optional, Protocol, Tuple

from babel import Locale, UnknownLocaleError
from babel.localedata import locale_identifiers

from custom_locales.utils.logging import get_logger

LOG = get_logger("host.cultures")

PLACEHOLDER_TEMPLATE = "Unknown Locale ({code})"

# (english, native, display)
NameTriple = Tuple[str, str, str]
NameLoader = Callable[[str], Optional[NameTriple]]


def normalize_locale_code(code: object) -> str:
    return str(code or "").strip().replace("_", "-").lower()


class CultureCatalog:
    """All locale codes known to the environment, normalized."""

    def __init__(self, names: Iterable[str] | None = None):
        self._names: FrozenSet[str] | None = (
            None if names is None else frozenset(normalize_locale_code(n) for n in names)
        )
        self._lock = threading.Lock()

    def names(self) -> FrozenSet[str]:
        if self._names is not None:
            return self._names
        with self._lock:
            if self._names is None:
                self._names = frozenset(normalize_locale_code(i) for i in locale_identifiers())
                LOG.debug("Culture catalog loaded with %s locales", len(self._names))
            return self._names

    def contains(self, code: str) -> bool:
        return normalize_locale_code(code) in self.names()


class BabelLocaleNames:
    """Name loader backed by CLDR data.

    Display names are rendered in ``display_locale``; native names in the
    locale itself.
    """

    def __init__(self, display_locale: str = "en"):
        self.display_locale = display_locale

    def __call__(self, code: str) -> Optional[NameTriple]:
        try:
            locale = Locale.parse(code, sep="-")
            display = Locale.parse(self.display_locale.replace("-", "_"))
        except (UnknownLocaleError, ValueError):
            return None
        english = locale.english_name or code
        native = locale.get_display_name(locale) or english
        shown = locale.get_display_name(display) or english
        return english, native, shown


@dataclass
class LocaleEntry:
    code: str
    english_name: str
    native_name: str
    display_name: str
    placeholder: bool = False

    def as_dict(self) -> dict:
        return {
            "code": self.code,
            "english_name": self.english_name,
            "native_name": self.native_name,
            "display_name": self.display_name,
        }


class LocaleCacheWriter(Protocol):
    def set_names(self, code: str, english: str, native: str, display: str) -> LocaleEntry:
        ...


class LocaleNameCache:
    """Process-wide cache of locale names keyed by normalized code.

    Entries are created lazily by `get`. `set_names` only overwrites the
    string fields of an entry; readers on other threads may briefly observe a
    partially updated entry.
    """

    def __init__(self, loader: NameLoader | None = None):
        self._loader: NameLoader = loader or BabelLocaleNames()
        self._entries: Dict[str, LocaleEntry] = {}
        self._lock = threading.Lock()

    def _create(self, key: str) -> LocaleEntry:
        names = self._loader(key)
        if names is None:
            placeholder = PLACEHOLDER_TEMPLATE.format(code=key)
            return LocaleEntry(key, placeholder, placeholder, placeholder, placeholder=True)
        english, native, display = names
        return LocaleEntry(key, english, native, display)

    def get(self, code: str) -> LocaleEntry:
        key = normalize_locale_code(code)
        entry = self._entries.get(key)
        if entry is not None:
            return entry
        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                entry = self._create(key)
                self._entries[key] = entry
            return entry

    def set_names(self, code: str, english: str, native: str, display: str) -> LocaleEntry:
        entry = self.get(code)
        entry.display_name = display
        entry.english_name = english
        entry.native_name = native
        entry.placeholder = False
        return entry

    def snapshot(self) -> List[LocaleEntry]:
        with self._lock:
            return sorted(self._entries.values(), key=lambda e: e.code)


def parent_code(code: str) -> str:
    """Everything before the last subtag: ``zh-hant-tw`` -> ``zh-hant``."""
    return normalize_locale_code(code).rsplit("-", 1)[0]


__all__ = [
    "PLACEHOLDER_TEMPLATE",
    "CultureCatalog",
    "BabelLocaleNames",
    "LocaleEntry",
    "LocaleCacheWriter",
    "LocaleNameCache",
    "normalize_locale_code",
    "parent_code",
]
