"""Tests for the culture catalog and the locale-name cache."""
from __future__ import annotations

from custom_locales.host.cultures import (
    BabelLocaleNames,
    CultureCatalog,
    LocaleNameCache,
    normalize_locale_code,
    parent_code,
)


def test_normalize_locale_code():
    assert normalize_locale_code(" en_US ") == "en-us"
    assert normalize_locale_code(None) == ""
    assert parent_code("du-MY") == "du"
    assert parent_code("zh-Hant-XX") == "zh-hant"


def test_babel_catalog_contains_builtin_locales_only():
    catalog = CultureCatalog()

    assert catalog.contains("en-US")
    assert catalog.contains("lv_lv")
    assert not catalog.contains("du-my")


def test_explicit_catalog_is_normalized():
    catalog = CultureCatalog(["en_US", "DA"])

    assert catalog.names() == frozenset({"en-us", "da"})
    assert catalog.contains("EN-us")


def test_babel_names_for_known_locale():
    assert BabelLocaleNames("en")("de") == ("German", "Deutsch", "German")
    assert BabelLocaleNames("de")("lv")[2] == "Lettisch"


def test_babel_names_for_unknown_locale():
    assert BabelLocaleNames("en")("du-my") is None


def test_unknown_locale_gets_placeholder_entry():
    cache = LocaleNameCache(BabelLocaleNames("en"))

    entry = cache.get("du-MY")

    assert entry.code == "du-my"
    assert entry.placeholder is True
    assert entry.display_name == "Unknown Locale (du-my)"
    assert cache.get("du-my") is entry


def test_set_names_overwrites_existing_entry():
    cache = LocaleNameCache(lambda code: None)
    placeholder = cache.get("du-my")

    updated = cache.set_names("DU-MY", "Dummy (Malaysia)", "Dummy (Malaysia)", "Dummy (Malaysia)")

    assert updated is placeholder
    assert updated.placeholder is False
    assert updated.as_dict() == {
        "code": "du-my",
        "english_name": "Dummy (Malaysia)",
        "native_name": "Dummy (Malaysia)",
        "display_name": "Dummy (Malaysia)",
    }
    assert [e.code for e in cache.snapshot()] == ["du-my"]
