"""Host runtime adapters.

The registration core only talks to the host through these objects: named
caches, the language registry, content databases and the locale-name cache.
"""
from .runtime import HostRuntime, get_runtime, reset_runtime_for_tests  # noqa: F401

__all__ = [
    "HostRuntime",
    "get_runtime",
    "reset_runtime_for_tests",
]
