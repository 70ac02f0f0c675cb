"""Configuration accessors for the custom locales integration.

Centralizes environment variable parsing & defaults. Values are read on every
call so startup code and tests always observe the current environment.
"""
from __future__ import annotations

import os
from typing import List

DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_ROLE = "Standalone"
DEFAULT_DATABASES = ("master", "web")
DEFAULT_DISPLAY_LOCALE = "en"
DEFAULT_NATIVE_NAME_STRATEGY = "mirrorEnglish"

ROLE_CONTENT_DELIVERY = "ContentDelivery"

MASTER_DATABASE = "master"
CD_DATABASE = "web"
CD_ALTERNATE_DATABASE = "web2"


def _raw_env(name: str, default: str | None = None) -> str | None:
    val = os.getenv(name)
    return val if val is not None else default


def _split_list(raw: str | None) -> List[str]:
    if not raw:
        return []
    return [part.strip() for part in raw.split(",") if part.strip()]


def log_level_name() -> str:
    return _raw_env("CUSTOM_LOCALES_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()  # type: ignore[union-attr]


def server_role() -> str:
    """Role of the current process (equivalent of ``role:define``).

    Environment Variable: CUSTOM_LOCALES_ROLE
    One of ContentManagement, ContentDelivery or Standalone.
    """
    value = (_raw_env("CUSTOM_LOCALES_ROLE") or "").strip()
    return value or DEFAULT_ROLE


def custom_language_codes() -> List[str]:
    """Custom language codes listed inline (CUSTOM_LOCALES_LANGUAGES)."""
    return _split_list(_raw_env("CUSTOM_LOCALES_LANGUAGES"))


def definitions_path() -> str | None:
    """Optional JSON definitions file (CUSTOM_LOCALES_DEFINITIONS_PATH)."""
    value = _raw_env("CUSTOM_LOCALES_DEFINITIONS_PATH")
    if value is None:
        return None
    value = value.strip()
    return value or None


def database_names() -> List[str]:
    names = _split_list(_raw_env("CUSTOM_LOCALES_DATABASES"))
    return names or list(DEFAULT_DATABASES)


def connection_string(database_name: str) -> str | None:
    """SQLAlchemy URL configured for ``database_name``.

    Environment Variable: CUSTOM_LOCALES_CONNECTION_<NAME> (upper-cased name).
    """
    value = _raw_env(f"CUSTOM_LOCALES_CONNECTION_{database_name.upper()}")
    if value is None:
        return None
    value = value.strip()
    return value or None


def cd_database_name() -> str:
    """Content delivery database name.

    Some delivery servers use a differently named database; when a ``web2``
    connection string is configured it wins over the default ``web``.
    """
    return CD_ALTERNATE_DATABASE if connection_string(CD_ALTERNATE_DATABASE) else CD_DATABASE


def display_locale() -> str:
    value = (_raw_env("CUSTOM_LOCALES_DISPLAY_LOCALE") or "").strip()
    return value or DEFAULT_DISPLAY_LOCALE


def native_name_strategy() -> str:
    value = (_raw_env("CUSTOM_LOCALES_NATIVE_NAME_STRATEGY") or "").strip()
    return value or DEFAULT_NATIVE_NAME_STRATEGY


def summarize_runtime_config() -> dict:
    return {
        "role": server_role(),
        "databases": database_names(),
        "cd_database": cd_database_name(),
        "display_locale": display_locale(),
        "native_name_strategy": native_name_strategy(),
        "log_level": log_level_name(),
    }


__all__ = [
    "ROLE_CONTENT_DELIVERY",
    "MASTER_DATABASE",
    "CD_DATABASE",
    "CD_ALTERNATE_DATABASE",
    "log_level_name",
    "server_role",
    "custom_language_codes",
    "definitions_path",
    "database_names",
    "connection_string",
    "cd_database_name",
    "display_locale",
    "native_name_strategy",
    "summarize_runtime_config",
]
