"""Bounded in-memory cache that forgets its least recently used entry."""

from __future__ import annotations

import logging
from threading import RLock
from typing import Dict, Generic, Hashable, List, Optional, TypeVar

from .config import LRUCacheConfig, validate_capacity
from .errors import InvalidArgumentError
from .recency import RecencyList

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")

logger = logging.getLogger(__name__)


class Cache(Generic[K, V]):
    """Minimal bounded cache interface."""

    def add(self, key: K, value: V) -> None:  # pragma: no cover - interface
        raise NotImplementedError

    def find(self, key: K) -> Optional[V]:  # pragma: no cover - interface
        raise NotImplementedError

    @property
    def capacity(self) -> int:  # pragma: no cover - interface
        raise NotImplementedError

    @property
    def size(self) -> int:  # pragma: no cover - interface
        raise NotImplementedError


class LRUCache(Cache[K, V]):
    """Thread-safe LRU cache with a capacity fixed at construction.

    Keys map to slots of a :class:`RecencyList`. Both ``add`` and ``find``
    count as a use and move the entry to the front; when a new key arrives
    while the cache is full, the entry at the back is evicted first.

    Every method touching the index or the list runs under one exclusive lock.
    ``find`` takes the same lock as ``add`` because it reorders the list.
    """

    def __init__(self, capacity: int) -> None:
        self._capacity = validate_capacity(capacity)
        self._index: Dict[K, int] = {}
        self._recency: RecencyList[K, V] = RecencyList()
        self._lock = RLock()
        logger.debug("Created LRUCache capacity=%d", self._capacity)

    @classmethod
    def from_config(cls, config: LRUCacheConfig | None = None) -> "LRUCache[K, V]":
        cfg = config or LRUCacheConfig()
        return cls(cfg.capacity)

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def size(self) -> int:
        with self._lock:
            return len(self._index)

    def add(self, key: K, value: V) -> None:
        """Store ``value`` under ``key`` and mark it most recently used.

        Raises:
            InvalidArgumentError: if ``key`` or ``value`` is ``None``.
        """

        if key is None or value is None:
            logger.warning("Rejected add with key=%r value=%r", key, value)
            raise InvalidArgumentError("Key and value cannot be None")

        with self._lock:
            slot = self._index.get(key)
            if slot is not None:
                self._recency.set_value(slot, value)
                self._recency.move_to_front(slot)
                return

            if len(self._index) == self._capacity:
                evicted = self._recency.pop_back()
                del self._index[evicted]
                logger.debug("Evicted key=%r capacity=%d", evicted, self._capacity)

            self._index[key] = self._recency.push_front(key, value)

    def find(self, key: K) -> Optional[V]:
        """Return the value for ``key`` and mark it most recently used.

        Returns ``None`` when the key is absent; the cache is then unchanged.
        """

        with self._lock:
            slot = self._index.get(key)
            if slot is None:
                return None
            self._recency.move_to_front(slot)
            return self._recency.value_at(slot)

    def snapshot(self) -> List[K]:
        """Keys ordered from most to least recently used, without touching them."""

        with self._lock:
            return list(self._recency)

    def __len__(self) -> int:
        return self.size

    def __repr__(self) -> str:
        return f"{type(self).__name__}(capacity={self._capacity}, size={self.size})"
