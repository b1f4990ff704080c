"""A growable vector that tracks a doubling/halving capacity."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Generic, TypeVar

T = TypeVar("T")

INITIAL_CAPACITY = 10


class Vector(Generic[T]):
    """Ordered sequence with an initial capacity of ten that doubles when full."""

    def __init__(self) -> None:
        self._capacity = INITIAL_CAPACITY
        self._items: list[T] = []

    @property
    def capacity(self) -> int:
        """Number of slots reserved before the next growth."""
        return self._capacity

    def __len__(self) -> int:
        return len(self._items)

    def __getitem__(self, index: int) -> T:
        if not 0 <= index < len(self._items):
            raise IndexError("Index out of bounds!")
        return self._items[index]

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"Vector({self._items!r}, capacity={self._capacity})"

    def push(self, element: T) -> None:
        """Append ``element``, doubling the capacity when full."""
        if len(self._items) == self._capacity:
            self._capacity *= 2
        self._items.append(element)

    def pop(self) -> T:
        """Remove and return the last element; halve the capacity when sparse.

        Raises ``IndexError`` when the vector is empty.
        """
        if not self._items:
            raise IndexError("Vector has no elements to remove!")
        element = self._items.pop()
        if len(self._items) < self._capacity // 4 and self._capacity > INITIAL_CAPACITY:
            self._capacity //= 2
        return element

    def format(self) -> str:
        """Return the size, capacity and elements as a printable report."""
        body = ", ".join(str(item) for item in self._items)
        return (
            "\n"
            f"Vector Size    : {len(self._items)}\n"
            f"Vector Capacity: {self._capacity}\n"
            f"[{body}]\n"
        )