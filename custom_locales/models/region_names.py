"""English, native and display names of a region."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class RegionNames:
    english_name: str
    native_name: str
    display_name: str

    @classmethod
    def from_code(cls, code: str) -> "RegionNames":
        """Degraded triple using the raw region code for every name."""
        return cls(english_name=code, native_name=code, display_name=code)


__all__ = ["RegionNames"]
