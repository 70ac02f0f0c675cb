"""Named in-process caches owned by the host runtime."""
from __future__ import annotations

import threading
from typing import Any, Dict, Generic, Optional, TypeVar

V = TypeVar("V")


class NamedCache(Generic[V]):
    """String keyed cache, cleared wholesale."""

    def __init__(self, name: str):
        self.name = name
        self._items: Dict[str, V] = {}
        self._lock = threading.Lock()

    def get(self, key: str, default: Any = None) -> Any:
        with self._lock:
            return self._items.get(key, default)

    def set(self, key: str, value: V) -> None:
        with self._lock:
            self._items[key] = value

    def clear(self) -> None:
        with self._lock:
            self._items.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._items)


class CacheManager:
    def __init__(self) -> None:
        self._caches: Dict[str, NamedCache[Any]] = {}
        self._lock = threading.Lock()

    def get_named_cache(self, name: str) -> NamedCache[Any]:
        """Return the cache called ``name``, creating it on first use."""
        with self._lock:
            cache = self._caches.get(name)
            if cache is None:
                cache = NamedCache(name)
                self._caches[name] = cache
            return cache

    def find_cache_by_name(self, name: str) -> Optional[NamedCache[Any]]:
        with self._lock:
            return self._caches.get(name)


__all__ = ["NamedCache", "CacheManager"]
