"""Region name lookup.

Resolves a region code to English, native and display names using CLDR
territory data from Babel:
- English name: territory name in English.
- Native name: territory name in the territory's first official language,
  falling back to the English name.
- Display name: territory name in the configured display locale.

Unknown codes, including CLDR placeholder and private-use territories, degrade
to the raw code for all three names.
"""

from __future__ import annotations

from typing import Optional, Protocol

from babel import Locale, UnknownLocaleError
from babel.languages import get_official_languages

from custom_locales import config as app_config
from custom_locales.errors import InvalidRegionError
from custom_locales.models import RegionNames
from custom_locales.utils.logging import get_logger

LOG = get_logger("region_names_service")


class RegionSource(Protocol):
    def lookup(self, region_code: str) -> RegionNames:
        """Return names for ``region_code`` or raise InvalidRegionError."""
        ...


def _parse_locale(identifier: str) -> Optional[Locale]:
    try:
        return Locale.parse(identifier.replace("-", "_"))
    except (UnknownLocaleError, ValueError):
        return None


# CLDR placeholder and private-use territory codes; XK (Kosovo) is a real region.
_UNKNOWN_TERRITORY = "ZZ"
_PRIVATE_USE_PREFIXES = {"Q": ("M", "Z"), "X": ("A", "Z")}
_ASSIGNED_PRIVATE_USE = {"XK"}


def _is_placeholder_territory(territory: str) -> bool:
    if territory == _UNKNOWN_TERRITORY:
        return True
    if len(territory) != 2 or territory in _ASSIGNED_PRIVATE_USE:
        return False
    bounds = _PRIVATE_USE_PREFIXES.get(territory[0])
    return bounds is not None and bounds[0] <= territory[1] <= bounds[1]


class BabelRegionSource:
    def __init__(self, display_locale: Optional[str] = None):
        self.display_locale = display_locale or app_config.display_locale()

    def _native_locale(self, territory: str) -> Optional[Locale]:
        for language in get_official_languages(territory, de_facto=True):
            locale = _parse_locale(f"{language}_{territory}") or _parse_locale(language)
            if locale is not None:
                return locale
        return None

    def lookup(self, region_code: str) -> RegionNames:
        territory = (region_code or "").strip().upper()
        english_locale = Locale("en")
        english = english_locale.territories.get(territory) if territory else None
        if not english or _is_placeholder_territory(territory):
            raise InvalidRegionError(region_code)

        native_locale = self._native_locale(territory)
        native = native_locale.territories.get(territory) if native_locale else None

        display_locale = _parse_locale(self.display_locale) or english_locale
        display = display_locale.territories.get(territory)

        return RegionNames(
            english_name=english,
            native_name=native or english,
            display_name=display or english,
        )


def resolve_region_names(region_code: str, *, source: Optional[RegionSource] = None) -> RegionNames:
    """Return the names of ``region_code``, or the code itself when unknown.

    Blank codes have no name to fall back to and raise InvalidRegionError.
    """
    if not (region_code or "").strip():
        raise InvalidRegionError("empty_region_code")
    source = source or BabelRegionSource()
    try:
        return source.lookup(region_code)
    except InvalidRegionError:
        LOG.debug("Unknown region %r; using the code as its name", region_code)
        return RegionNames.from_code(region_code)


__all__ = ["RegionSource", "BabelRegionSource", "resolve_region_names"]
