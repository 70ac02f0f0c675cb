"""Value objects shared by services and host adapters."""
from .region_names import RegionNames  # noqa: F401
from .definitions import LanguageDefinition  # noqa: F401

__all__ = [
    "RegionNames",
    "LanguageDefinition",
]
