"""Exceptions raised by the custom locales integration."""
from __future__ import annotations


class CustomLocalesError(RuntimeError):
    pass


class ConfigurationResolutionError(CustomLocalesError):
    """Role or database name could not be resolved from configuration."""


class DatabaseNotFoundError(CustomLocalesError, KeyError):
    def __init__(self, name: str):
        super().__init__(name)
        self.name = name

    def __str__(self) -> str:
        return f"database_not_found: {self.name}"


class InvalidRegionError(CustomLocalesError, ValueError):
    """Region code is not known to the region source."""


class UnexpectedLocaleFormatError(CustomLocalesError, ValueError):
    """Locale code lacks the ``lang-REGION`` shape."""


class RegistryMarkingError(CustomLocalesError):
    """Marking a language as registered failed; the cycle is aborted."""


class DefinitionsLoadError(CustomLocalesError):
    pass


__all__ = [
    "CustomLocalesError",
    "ConfigurationResolutionError",
    "DatabaseNotFoundError",
    "InvalidRegionError",
    "UnexpectedLocaleFormatError",
    "RegistryMarkingError",
    "DefinitionsLoadError",
]
