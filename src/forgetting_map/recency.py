"""Arena-backed doubly linked list ordering entries by recency of use.

Nodes live in parallel lists addressed by integer slot numbers instead of
object references. Slots 0 and 1 are permanent head and tail sentinels, so
every real node always has two real neighbours and splicing never needs to
special-case an empty list or an end of the chain. Freed slots are pushed on a
free list and reused by later inserts.
"""

from __future__ import annotations

from typing import Generic, Iterator, List, Optional, TypeVar

K = TypeVar("K")
V = TypeVar("V")

HEAD = 0
TAIL = 1


class RecencyList(Generic[K, V]):
    """Ordered entries, front = most recently used, back = least recently used.

    Not thread-safe on its own; :class:`~forgetting_map.cache.LRUCache` guards
    it together with its index under a single lock.
    """

    __slots__ = ("_keys", "_values", "_prev", "_next", "_free", "_len")

    def __init__(self) -> None:
        self._keys: List[Optional[K]] = [None, None]
        self._values: List[Optional[V]] = [None, None]
        self._prev: List[int] = [HEAD, HEAD]
        self._next: List[int] = [TAIL, TAIL]
        self._free: List[int] = []
        self._len = 0

    def __len__(self) -> int:
        return self._len

    def __iter__(self) -> Iterator[K]:
        """Yield keys from front to back."""

        slot = self._next[HEAD]
        while slot != TAIL:
            yield self._keys[slot]  # type: ignore[misc]
            slot = self._next[slot]

    def key_at(self, slot: int) -> K:
        return self._keys[slot]  # type: ignore[return-value]

    def value_at(self, slot: int) -> V:
        return self._values[slot]  # type: ignore[return-value]

    def set_value(self, slot: int, value: V) -> None:
        self._values[slot] = value

    def push_front(self, key: K, value: V) -> int:
        """Store a new entry right after the head sentinel and return its slot."""

        if self._free:
            slot = self._free.pop()
            self._keys[slot] = key
            self._values[slot] = value
        else:
            slot = len(self._keys)
            self._keys.append(key)
            self._values.append(value)
            self._prev.append(HEAD)
            self._next.append(TAIL)
        self._link_front(slot)
        self._len += 1
        return slot

    def move_to_front(self, slot: int) -> None:
        if self._next[HEAD] == slot:
            return
        self._unlink(slot)
        self._link_front(slot)

    def back(self) -> int:
        """Return the slot of the least recently used entry."""

        slot = self._prev[TAIL]
        if slot == HEAD:
            raise IndexError("back() on empty RecencyList")
        return slot

    def pop_back(self) -> K:
        """Unlink the least recently used entry, free its slot, return its key."""

        slot = self.back()
        key = self._keys[slot]
        self._unlink(slot)
        self._keys[slot] = None
        self._values[slot] = None
        self._free.append(slot)
        self._len -= 1
        return key  # type: ignore[return-value]

    def _link_front(self, slot: int) -> None:
        first = self._next[HEAD]
        self._prev[slot] = HEAD
        self._next[slot] = first
        self._prev[first] = slot
        self._next[HEAD] = slot

    def _unlink(self, slot: int) -> None:
        before = self._prev[slot]
        after = self._next[slot]
        self._next[before] = after
        self._prev[after] = before
