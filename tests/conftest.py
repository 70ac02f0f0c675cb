"""Shared fakes for building isolated host runtimes."""
from __future__ import annotations

from typing import Dict, Iterable, Optional, Tuple

import pytest

from custom_locales.db import get_engine, reset_for_tests
from custom_locales.db.repositories import languages_repo
from custom_locales.errors import InvalidRegionError
from custom_locales.host.caches import CacheManager
from custom_locales.host.cultures import CultureCatalog, LocaleNameCache
from custom_locales.host.databases import Database, DatabaseFactory, DataProvider, SqlDataProvider
from custom_locales.host.languages import LanguageProvider
from custom_locales.host.runtime import HostRuntime, reset_runtime_for_tests
from custom_locales.models import LanguageDefinition, RegionNames

DEFAULT_NAMES: Dict[str, Tuple[str, str, str]] = {
    "en": ("English", "English", "English"),
    "du": ("Dummy", "Dummy", "Dummy"),
    "xx": ("Xlang", "Xlang native", "Xlang display"),
}

DEFAULT_REGIONS = {
    "MY": RegionNames(english_name="Malaysia", native_name="Malaysia", display_name="Malaysia"),
    "LV": RegionNames(english_name="Latvia", native_name="Latvija", display_name="Lettland"),
}


class FakeRegionSource:
    def __init__(self, regions: Optional[Dict[str, RegionNames]] = None):
        self.regions = {k.upper(): v for k, v in (regions or DEFAULT_REGIONS).items()}
        self.calls: list[str] = []

    def lookup(self, region_code: str) -> RegionNames:
        self.calls.append(region_code)
        try:
            return self.regions[region_code.upper()]
        except KeyError:
            raise InvalidRegionError(region_code) from None


def static_names(mapping: Dict[str, Tuple[str, str, str]]):
    def _loader(code: str):
        return mapping.get(code)

    return _loader


@pytest.fixture(autouse=True)
def isolated_engines():
    reset_for_tests()
    reset_runtime_for_tests()
    yield
    reset_for_tests(drop=True)
    reset_runtime_for_tests()


@pytest.fixture
def make_runtime(tmp_path):
    def _make(
        *,
        definitions: Iterable[str] = ("du-my",),
        content_languages: Iterable[str] = ("en", "du-my"),
        catalog: Iterable[str] = ("en", "en-US", "da", "de"),
        names: Optional[Dict[str, Tuple[str, str, str]]] = None,
        role: str = "Standalone",
        cd_name: str = "web",
        include_web: bool = True,
    ) -> HostRuntime:
        cache_manager = CacheManager()
        culture_catalog = CultureCatalog(catalog)
        content_languages = list(content_languages)

        engine = get_engine(f"sqlite:///{tmp_path / 'master.db'}")
        for name in content_languages:
            languages_repo.add_language(engine, name)
        databases = [Database("master", [SqlDataProvider(engine)])]
        if include_web:
            databases.append(Database("web", [DataProvider(content_languages)]))
        databases.append(Database("core"))

        definition_set = tuple(LanguageDefinition(name=n) for n in definitions)
        return HostRuntime(
            cache_manager=cache_manager,
            catalog=culture_catalog,
            language_provider=LanguageProvider(cache_manager, culture_catalog),
            database_factory=DatabaseFactory(databases),
            locale_cache=LocaleNameCache(static_names(names or DEFAULT_NAMES)),
            definitions_loader=lambda: definition_set,
            role=lambda: role,
            cd_database_name=lambda: cd_name,
        )

    return _make


@pytest.fixture
def region_source():
    return FakeRegionSource()
