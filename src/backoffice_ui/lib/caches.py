"""
On-disk store for UI preferences.

Wraps a diskcache.Cache so list screens can keep small per-user settings
(column visibility today) across restarts. Keys may be grouped under a
namespace, and every value is stored with the time it was written.
"""

import time
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import diskcache


@dataclass
class CacheEntry:
    """
    A stored preference value.

    Attributes:
        value: The stored value.
        stored_at: Unix time the value was written.
    """

    value: Any
    stored_at: float = 0.0


class DiskCache:
    """
    Namespaced diskcache-backed store.

    Attributes:
        cache_dir: Directory holding the cache files.
        namespace: Prefix applied to every key, empty for none.
    """

    def __init__(self, cache_dir: str | Path, namespace: str = "") -> None:
        self.cache_dir = Path(cache_dir)
        self.namespace = namespace
        self._cache = diskcache.Cache(str(self.cache_dir))

    def get(self, key: str) -> CacheEntry | None:
        """Return the entry stored under key, or None."""
        stored = self._cache.get(self._key(key), default=None)
        if not isinstance(stored, dict) or "value" not in stored:
            return None
        return CacheEntry(value=stored["value"], stored_at=stored.get("stored_at", 0.0))

    def set(self, key: str, value: Any, expire: int | None = None) -> None:
        """
        Store a value.

        Args:
            key: Preference key.
            value: Picklable value.
            expire: Seconds until the value is dropped, None to keep it.
        """
        record = {"value": value, "stored_at": time.time()}
        self._cache.set(self._key(key), record, expire=expire)

    def close(self) -> None:
        self._cache.close()

    def _key(self, key: str) -> str:
        return f"{self.namespace}:{key}" if self.namespace else key
