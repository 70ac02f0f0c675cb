"""Content databases and their data providers.

A `Database` aggregates data providers. `SqlDataProvider` keeps a private
list of valid language names derived from its `languages` table; the list is
derived once and reused until `reset_language_cache()` sets it back to None.
Other providers have no such cache.
"""
from __future__ import annotations

import threading
from typing import Callable, Dict, Iterable, List, Optional, Sequence

from sqlalchemy.engine import Engine

from custom_locales import config as app_config
from custom_locales.db import get_engine
from custom_locales.db.repositories import languages_repo
from custom_locales.errors import DatabaseNotFoundError
from custom_locales.utils.logging import get_logger

LOG = get_logger("host.databases")

LanguageFilter = Callable[[str], bool]


class DataProvider:
    """Provider without a language cache; contributes a fixed list."""

    def __init__(self, languages: Iterable[str] = ()):
        self._static = list(languages)

    def get_languages(self, is_valid: LanguageFilter) -> List[str]:
        return [name for name in self._static if is_valid(name)]


class SqlDataProvider(DataProvider):
    def __init__(self, engine: Engine):
        super().__init__()
        self.engine = engine
        self._languages: Optional[List[str]] = None

    def get_languages(self, is_valid: LanguageFilter) -> List[str]:
        cached = self._languages
        if cached is not None:
            return list(cached)
        names = [name for name in languages_repo.list_language_names(self.engine) if is_valid(name)]
        self._languages = names
        return list(names)

    def reset_language_cache(self) -> None:
        self._languages = None


class Database:
    def __init__(self, name: str, data_providers: Sequence[DataProvider] = ()):
        self.name = name
        self.data_providers: List[DataProvider] = list(data_providers)

    def get_languages(self, is_valid: LanguageFilter) -> List[str]:
        seen: List[str] = []
        lowered: set[str] = set()
        for provider in self.data_providers:
            for name in provider.get_languages(is_valid):
                if name.lower() not in lowered:
                    lowered.add(name.lower())
                    seen.append(name)
        return seen

    def __repr__(self) -> str:  # pragma: no cover - debug helper
        return f"Database({self.name!r})"


class DatabaseFactory:
    def __init__(self, databases: Iterable[Database] = ()):
        self._databases: Dict[str, Database] = {}
        self._lock = threading.Lock()
        for database in databases:
            self.add(database)

    def add(self, database: Database) -> None:
        with self._lock:
            self._databases[database.name.lower()] = database

    def get_databases(self) -> List[Database]:
        with self._lock:
            return list(self._databases.values())

    def get_database(self, name: str) -> Database:
        with self._lock:
            database = self._databases.get((name or "").lower())
        if database is None:
            raise DatabaseNotFoundError(name)
        return database


def build_database_factory() -> DatabaseFactory:
    """Create databases from CUSTOM_LOCALES_DATABASES and their connection strings.

    A database without a connection string has no providers.
    """
    databases: List[Database] = []
    names = list(app_config.database_names())
    alternate = app_config.CD_ALTERNATE_DATABASE
    if alternate not in names and app_config.connection_string(alternate):
        names.append(alternate)
    for name in names:
        url = app_config.connection_string(name)
        if url:
            databases.append(Database(name, [SqlDataProvider(get_engine(url))]))
        else:
            LOG.debug("No connection string for database %s; registering without providers", name)
            databases.append(Database(name))
    return DatabaseFactory(databases)


__all__ = [
    "DataProvider",
    "SqlDataProvider",
    "Database",
    "DatabaseFactory",
    "build_database_factory",
]
