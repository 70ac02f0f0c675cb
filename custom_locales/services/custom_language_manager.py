"""Custom language registration and locale display-name patching.

Runs once at startup, in this order:

1. register_languages     mark every defined custom language as registered
2. clear_provider_caches  reset the private language list of SQL providers
3. clear_language_cache   clear the "LanguageProvider - Languages" cache
4. patch_culture_names    give custom locales readable names

Unregistered cultures otherwise show "Unknown Locale (code)" as their name.
Step 4 overwrites the cached names so later lookups return
"{parent language} ({region})" instead.

A failure in step 1 aborts the whole cycle: a partially registered set with
cleared caches is worse than no registration at all.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional, Sequence

from custom_locales import config as app_config
from custom_locales.errors import (
    ConfigurationResolutionError,
    RegistryMarkingError,
    UnexpectedLocaleFormatError,
)
from custom_locales.host.cultures import LocaleCacheWriter, LocaleEntry, normalize_locale_code, parent_code
from custom_locales.host.databases import Database
from custom_locales.host.languages import LANGUAGE_CACHE_NAME
from custom_locales.host.runtime import HostRuntime, get_runtime
from custom_locales.models import LanguageDefinition
from custom_locales.services.region_names_service import RegionSource, resolve_region_names
from custom_locales.utils.logging import get_logger

LOG = get_logger("custom_language_manager")

STAGE_REGISTER = "register_languages"
STAGE_CLEAR_PROVIDERS = "clear_provider_caches"
STAGE_CLEAR_LANGUAGE_CACHE = "clear_language_cache"
STAGE_PATCH = "patch_culture_names"
STAGES = (STAGE_REGISTER, STAGE_CLEAR_PROVIDERS, STAGE_CLEAR_LANGUAGE_CACHE, STAGE_PATCH)


class NativeNameStrategy(str, Enum):
    # Native name repeats the English composition (historical behavior).
    MIRROR_ENGLISH = "mirrorEnglish"
    USE_REGION_NATIVE = "useRegionNative"

    @classmethod
    def parse(cls, raw: object) -> "NativeNameStrategy":
        if isinstance(raw, cls):
            return raw
        value = str(raw or "").strip()
        for member in cls:
            if member.value.lower() == value.lower():
                return member
        if value:
            LOG.warning("Unknown native name strategy %r; using %s", value, cls.MIRROR_ENGLISH.value)
        return cls.MIRROR_ENGLISH


@dataclass
class RegistrationCycleReport:
    stages_completed: List[str] = field(default_factory=list)
    registered: List[str] = field(default_factory=list)
    providers_reset: int = 0
    language_cache_cleared: bool = False
    database: Optional[str] = None
    patched: Dict[str, dict] = field(default_factory=dict)
    errors: Dict[str, str] = field(default_factory=dict)

    def as_dict(self) -> dict:
        return {
            "stages_completed": list(self.stages_completed),
            "registered": list(self.registered),
            "providers_reset": self.providers_reset,
            "language_cache_cleared": self.language_cache_cleared,
            "database": self.database,
            "patched": dict(self.patched),
            "errors": dict(self.errors),
        }


class CustomLanguageManager:
    def __init__(
        self,
        runtime: HostRuntime,
        *,
        region_source: Optional[RegionSource] = None,
        native_name_strategy: object = None,
        writer: Optional[LocaleCacheWriter] = None,
    ):
        self.runtime = runtime
        self.region_source = region_source
        if native_name_strategy is None:
            native_name_strategy = app_config.native_name_strategy()
        self.native_name_strategy = NativeNameStrategy.parse(native_name_strategy)
        self.writer: LocaleCacheWriter = writer or runtime.locale_cache

    # -- registry bridge -------------------------------------------------

    def register_custom_languages_from_definitions(
        self, definitions: Optional[Sequence[LanguageDefinition]] = None
    ) -> List[str]:
        """Mark every definition not yet known to the registry as registered.

        Returns the names that were newly marked.
        """
        if definitions is None:
            definitions = self.runtime.definitions_loader()
        provider = self.runtime.language_provider
        marked: List[str] = []
        for definition in definitions:
            if provider.language_registered(definition.name):
                continue
            try:
                provider.mark_language_as_registered(definition.name)
            except Exception as exc:
                raise RegistryMarkingError(f"mark_language_failed: {definition.name}") from exc
            marked.append(definition.name)
        LOG.debug("Registered %s custom languages: %s", len(marked), marked)
        return marked

    def clear_database_provider_language_cache(self) -> int:
        """Reset the language list of every provider that keeps one.

        Setting the list back to None is how the provider itself invalidates
        it; the next read re-derives it including newly registered languages.
        """
        reset = 0
        for database in self.runtime.database_factory.get_databases():
            providers = getattr(database, "data_providers", None) or ()
            for provider in providers:
                reset_cache = getattr(provider, "reset_language_cache", None)
                if not callable(reset_cache):
                    continue
                try:
                    reset_cache()
                except Exception:
                    LOG.warning(
                        "Could not reset language cache of %s in database %s",
                        type(provider).__name__,
                        getattr(database, "name", "?"),
                        exc_info=True,
                    )
                    continue
                reset += 1
        LOG.debug("Reset %s data provider language caches", reset)
        return reset

    def clear_language_cache(self) -> bool:
        try:
            cache = self.runtime.cache_manager.find_cache_by_name(LANGUAGE_CACHE_NAME)
            if cache is None:
                LOG.debug("Language cache %r not created yet; nothing to clear", LANGUAGE_CACHE_NAME)
                return False
            cache.clear()
        except Exception:
            LOG.warning("Could not clear language cache %r", LANGUAGE_CACHE_NAME, exc_info=True)
            return False
        return True

    # -- culture name patcher --------------------------------------------

    def resolve_content_database(self) -> Database:
        """Database whose languages are patched: master, or the CD database on delivery servers."""
        factory = self.runtime.database_factory
        try:
            role = self.runtime.role()
            name = self.runtime.cd_database_name() if role == app_config.ROLE_CONTENT_DELIVERY else app_config.MASTER_DATABASE
            return factory.get_database(name)
        except Exception:
            LOG.warning("Could not resolve content database from role; using delivery database", exc_info=True)
        try:
            return factory.get_database(self.runtime.cd_database_name())
        except Exception as exc:
            raise ConfigurationResolutionError("content_database_unresolved") from exc

    def find_custom_culture_names(self, database: Database) -> List[str]:
        catalog = self.runtime.catalog
        names: List[str] = []
        for language in self.runtime.language_provider.get_languages(database):
            if catalog.contains(language):
                continue
            code = normalize_locale_code(language)
            if code not in names:
                names.append(code)
        return names

    def initialize_custom_culture(self, culture_name: str) -> LocaleEntry:
        parts = culture_name.split("-")
        if len(parts) < 2 or not all(parts):
            raise UnexpectedLocaleFormatError(f"unexpected_locale_format: {culture_name}")

        region = resolve_region_names(parts[-1], source=self.region_source)
        parent = self.runtime.locale_cache.get(parent_code(culture_name))

        display_name = f"{parent.display_name} ({region.display_name})"
        english_name = f"{parent.english_name} ({region.english_name})"
        if self.native_name_strategy is NativeNameStrategy.USE_REGION_NATIVE:
            native_name = f"{parent.native_name} ({region.native_name})"
        else:
            native_name = english_name

        return self.writer.set_names(culture_name, english_name, native_name, display_name)

    def build_and_initialize_culture_info_cache(
        self, report: Optional[RegistrationCycleReport] = None
    ) -> RegistrationCycleReport:
        report = report or RegistrationCycleReport()
        database = self.resolve_content_database()
        report.database = database.name
        for culture_name in self.find_custom_culture_names(database):
            try:
                entry = self.initialize_custom_culture(culture_name)
            except UnexpectedLocaleFormatError as exc:
                LOG.error("Skipping custom culture %s: %s", culture_name, exc)
                report.errors[culture_name] = str(exc)
                continue
            report.patched[culture_name] = entry.as_dict()
        LOG.info(
            "Initialized %s custom cultures from database %s (%s skipped)",
            len(report.patched),
            database.name,
            len(report.errors),
        )
        return report

    # -- full cycle --------------------------------------------------------

    def register_custom_languages_and_clear_cache(self) -> RegistrationCycleReport:
        report = RegistrationCycleReport()

        report.registered = self.register_custom_languages_from_definitions()
        report.stages_completed.append(STAGE_REGISTER)

        report.providers_reset = self.clear_database_provider_language_cache()
        report.stages_completed.append(STAGE_CLEAR_PROVIDERS)

        report.language_cache_cleared = self.clear_language_cache()
        report.stages_completed.append(STAGE_CLEAR_LANGUAGE_CACHE)

        self.build_and_initialize_culture_info_cache(report)
        report.stages_completed.append(STAGE_PATCH)

        self.runtime.last_report = report
        return report


def register_custom_languages_and_clear_cache(runtime: Optional[HostRuntime] = None) -> RegistrationCycleReport:
    """Register custom languages, clear language caches and patch culture names."""
    return CustomLanguageManager(runtime or get_runtime()).register_custom_languages_and_clear_cache()


def build_and_initialize_culture_info_cache(runtime: Optional[HostRuntime] = None) -> RegistrationCycleReport:
    return CustomLanguageManager(runtime or get_runtime()).build_and_initialize_culture_info_cache()


__all__ = [
    "STAGES",
    "NativeNameStrategy",
    "RegistrationCycleReport",
    "CustomLanguageManager",
    "register_custom_languages_and_clear_cache",
    "build_and_initialize_culture_info_cache",
]
