"""Tests for region name resolution."""
from __future__ import annotations

import pytest

from custom_locales.errors import InvalidRegionError
from custom_locales.models import RegionNames
from custom_locales.services.region_names_service import BabelRegionSource, resolve_region_names


def test_source_triple_returned_verbatim(region_source):
    names = resolve_region_names("LV", source=region_source)

    assert names == RegionNames(english_name="Latvia", native_name="Latvija", display_name="Lettland")


@pytest.mark.parametrize("code", ["zzz", "QQ-1"])
def test_unknown_region_degrades_to_code(region_source, code):
    names = resolve_region_names(code, source=region_source)

    assert names == RegionNames(code, code, code)


def test_babel_source_malaysia():
    names = resolve_region_names("my", source=BabelRegionSource("en"))

    assert names.english_name == "Malaysia"
    assert names.native_name == "Malaysia"
    assert names.display_name == "Malaysia"


def test_babel_source_uses_display_locale_and_native_language():
    names = BabelRegionSource("de").lookup("lv")

    assert names.english_name == "Latvia"
    assert names.native_name == "Latvija"
    assert names.display_name == "Lettland"


def test_babel_source_display_locale_from_environment(monkeypatch):
    monkeypatch.setenv("CUSTOM_LOCALES_DISPLAY_LOCALE", "de")

    assert BabelRegionSource().lookup("DE").display_name == "Deutschland"


def test_babel_source_rejects_unknown_code():
    with pytest.raises(InvalidRegionError):
        BabelRegionSource("en").lookup("zzz")


def test_babel_fallback_through_resolver():
    assert resolve_region_names("zzz", source=BabelRegionSource("en")) == RegionNames("zzz", "zzz", "zzz")


@pytest.mark.parametrize("code", ["", "   ", None])
def test_blank_region_code_is_rejected(region_source, code):
    with pytest.raises(InvalidRegionError):
        resolve_region_names(code, source=region_source)

    assert region_source.calls == []


@pytest.mark.parametrize("code", ["zz", "xa", "xb", "qo", "QM"])
def test_babel_placeholder_territories_degrade_to_code(code):
    assert resolve_region_names(code, source=BabelRegionSource("en")) == RegionNames(code, code, code)


def test_babel_kosovo_is_a_real_region():
    assert BabelRegionSource("en").lookup("xk").english_name == "Kosovo"
