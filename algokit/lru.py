"""Least-recently-used caches with a fixed capacity."""

from __future__ import annotations

from collections import OrderedDict
from collections.abc import Hashable, Iterator
from dataclasses import dataclass
from typing import Any


def _check_capacity(capacity: int) -> int:
    if capacity < 1:
        raise ValueError(f"cache capacity must be at least 1, got {capacity}")
    return capacity


class LRUCache:
    """An LRU cache kept in an ordered mapping.

    Iterating over the cache yields keys from most to least recently used.
    """

    def __init__(self, capacity: int) -> None:
        self.capacity = _check_capacity(capacity)
        self._entries: OrderedDict[Hashable, Any] = OrderedDict()

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def __iter__(self) -> Iterator[Hashable]:
        return reversed(self._entries)

    def get(self, key: Hashable) -> Any:
        """Return the value for key and mark it most recently used, or None."""
        try:
            value = self._entries[key]
        except KeyError:
            return None
        self._entries.move_to_end(key)
        return value

    def put(self, key: Hashable, value: Any) -> None:
        """Store value under key, evicting the least recently used key if full."""
        if key in self._entries:
            self._entries.move_to_end(key)
        elif len(self._entries) >= self.capacity:
            self._entries.popitem(last=False)
        self._entries[key] = value


@dataclass(eq=False)
class _Link:
    key: Hashable = None
    value: Any = None
    prev: _Link | None = None
    next: _Link | None = None


class LinkedLRUCache:
    """An LRU cache built on a doubly linked list and a key index.

    Iterating over the cache yields keys from most to least recently used.
    """

    def __init__(self, capacity: int) -> None:
        self.capacity = _check_capacity(capacity)
        self._head = _Link()
        self._tail = _Link()
        self._head.next = self._tail
        self._tail.prev = self._head
        self._index: dict[Hashable, _Link] = {}

    def __len__(self) -> int:
        return len(self._index)

    def __contains__(self, key: object) -> bool:
        return key in self._index

    def __iter__(self) -> Iterator[Hashable]:
        link = self._head.next
        while link is not self._tail:
            yield link.key
            link = link.next

    def _push_front(self, link: _Link) -> None:
        first = self._head.next
        link.prev = self._head
        link.next = first
        self._head.next = link
        first.prev = link

    @staticmethod
    def _unlink(link: _Link) -> None:
        link.prev.next = link.next
        link.next.prev = link.prev

    def get(self, key: Hashable) -> Any:
        """Return the value for key and mark it most recently used, or None."""
        link = self._index.get(key)
        if link is None:
            return None
        self._unlink(link)
        self._push_front(link)
        return link.value

    def put(self, key: Hashable, value: Any) -> None:
        """Store value under key, evicting the least recently used key if full."""
        link = self._index.get(key)
        if link is not None:
            link.value = value
            self._unlink(link)
            self._push_front(link)
            return
        if len(self._index) >= self.capacity:
            oldest = self._tail.prev
            self._unlink(oldest)
            del self._index[oldest.key]
        link = _Link(key, value)
        self._push_front(link)
        self._index[key] = link