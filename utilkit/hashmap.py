"""A fixed-capacity hash map from integer keys to integer data, using chaining."""

from __future__ import annotations

from collections.abc import Iterator
from typing import TypeVar

INITIAL_CAPACITY = 24

_WORD_MASK = (1 << 64) - 1

D = TypeVar("D")


class DuplicateKeyError(KeyError):
    """Raised when adding a key that the map already holds."""


def hash_index(key: int, capacity: int) -> int:
    """Return the bucket index of ``key`` in a table of ``capacity`` buckets.

    The key is taken as an unsigned 64-bit word, so negative keys wrap around.
    """
    if capacity <= 0:
        raise ValueError("capacity must be positive")
    return (key & _WORD_MASK) % capacity


class HashMap:
    """Hash map with a fixed number of buckets; colliding entries are chained in insertion order."""

    def __init__(self, capacity: int = INITIAL_CAPACITY) -> None:
        if capacity <= 0:
            raise ValueError("capacity must be positive")
        self._buckets: list[list[tuple[int, int]]] = [[] for _ in range(capacity)]
        self._length = 0

    @property
    def capacity(self) -> int:
        """Number of buckets."""
        return len(self._buckets)

    def __len__(self) -> int:
        return self._length

    def __contains__(self, key: object) -> bool:
        if not isinstance(key, int):
            return False
        return any(k == key for k, _ in self._bucket(key))

    def __iter__(self) -> Iterator[int]:
        for bucket in self._buckets:
            for key, _ in bucket:
                yield key

    def _bucket(self, key: int) -> list[tuple[int, int]]:
        return self._buckets[hash_index(key, self.capacity)]

    def add_entry(self, key: int, data: int) -> None:
        """Add ``key`` with ``data``; raise ``DuplicateKeyError`` if the key exists."""
        bucket = self._bucket(key)
        if any(k == key for k, _ in bucket):
            raise DuplicateKeyError(key)
        bucket.append((key, data))
        self._length += 1

    def get(self, key: int, default: D | None = None) -> int | D | None:
        """Return the data stored under ``key``, or ``default`` if absent."""
        for k, data in self._bucket(key):
            if k == key:
                return data
        return default

    def clear(self) -> None:
        """Remove every entry."""
        for bucket in self._buckets:
            bucket.clear()
        self._length = 0