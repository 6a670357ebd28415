# core/cache.py
from __future__ import annotations
from dataclasses import dataclass
import json
import logging
import math
import time
from typing import Callable, Dict, Optional, Protocol

logger = logging.getLogger(__name__)


class KeyValueStore(Protocol):
    """Minimal string key/value persistence (localStorage-like)."""

    def get(self, key: str) -> Optional[str]: ...

    def set(self, key: str, value: str) -> None: ...


class MemoryStore:
    """In-process KeyValueStore. No expiry of its own; TimedCache checks age on read."""

    def __init__(self, maxsize: int = 1000):
        self.maxsize = maxsize
        self._store: Dict[str, str] = {}

    def get(self, key: str) -> Optional[str]:
        return self._store.get(key)

    def set(self, key: str, value: str) -> None:
        if key not in self._store and len(self._store) >= self.maxsize:
            # simple eviction: pop oldest
            old_key = next(iter(self._store))
            self._store.pop(old_key, None)
        self._store[key] = value

    def __len__(self) -> int:
        return len(self._store)


def now_ms() -> int:
    return int(time.time() * 1000)


@dataclass(frozen=True)
class CacheEntry:
    value: float
    inserted_at_ms: int


class TimedCache:
    """
    Numeric values with an insertion timestamp on top of a KeyValueStore.
    Entries are stored as JSON {"ts": <epoch ms>, "m": <value>}.
    An entry is fresh while (now - ts) < ttl_ms; stale or undecodable
    entries read as absent.
    """

    def __init__(
        self,
        store: KeyValueStore,
        ttl_ms: int,
        clock: Callable[[], int] = now_ms,
    ):
        self.store = store
        self.ttl_ms = ttl_ms
        self.clock = clock

    @staticmethod
    def _decode(raw: str) -> Optional[CacheEntry]:
        try:
            parsed = json.loads(raw)
        except (TypeError, ValueError):
            return None
        if not isinstance(parsed, dict):
            return None
        ts, val = parsed.get("ts"), parsed.get("m")
        for x in (ts, val):
            if isinstance(x, bool) or not isinstance(x, (int, float)):
                return None
            if math.isnan(x) or math.isinf(x):
                return None
        return CacheEntry(value=float(val), inserted_at_ms=int(ts))

    def get(self, key: str) -> Optional[CacheEntry]:
        """Return the stored entry regardless of age, or None if missing/corrupt."""
        raw = self.store.get(key)
        if raw is None:
            return None
        entry = self._decode(raw)
        if entry is None:
            logger.debug("Ignoring corrupt cache entry for %s", key)
        return entry

    def is_fresh(self, entry: CacheEntry) -> bool:
        return self.clock() - entry.inserted_at_ms < self.ttl_ms

    def get_fresh(self, key: str) -> Optional[CacheEntry]:
        entry = self.get(key)
        if entry is None or not self.is_fresh(entry):
            return None
        return entry

    def put(self, key: str, value: float) -> CacheEntry:
        entry = CacheEntry(value=float(value), inserted_at_ms=self.clock())
        self.store.set(key, json.dumps({"ts": entry.inserted_at_ms, "m": entry.value}))
        return entry
