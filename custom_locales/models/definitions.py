"""Language definitions: the set of custom codes to register."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class LanguageDefinition:
    name: str


__all__ = ["LanguageDefinition"]
