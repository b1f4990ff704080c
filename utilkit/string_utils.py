"""A growable array of strings and small string helpers."""

from __future__ import annotations

from collections.abc import Iterator

INITIAL_CAPACITY = 24


class StringArray:
    """Ordered collection of strings that tracks a doubling/halving capacity."""

    def __init__(self, capacity: int = INITIAL_CAPACITY) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self._capacity = capacity or INITIAL_CAPACITY
        self._items: list[str] = []

    @property
    def capacity(self) -> int:
        """Number of slots reserved before the next growth."""
        return self._capacity

    def __len__(self) -> int:
        return len(self._items)

    def __getitem__(self, index: int) -> str:
        return self._items[index]

    def __iter__(self) -> Iterator[str]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"StringArray({self._items!r}, capacity={self._capacity})"

    def append(self, element: str) -> None:
        """Add ``element`` at the end, doubling the capacity when full."""
        if not isinstance(element, str):
            raise TypeError("StringArray holds only strings")
        if len(self._items) == self._capacity:
            self._capacity *= 2
        self._items.append(element)

    def pop(self) -> str:
        """Remove and return the last element; halve the capacity when sparse.

        Raises ``IndexError`` when the array is empty.
        """
        if not self._items:
            raise IndexError("Array has no elements to remove!")
        element = self._items.pop()
        if len(self._items) < self._capacity // 4 and self._capacity > 5:
            self._capacity //= 2
        return element

    def format(self) -> str:
        """Return the size, capacity and elements as a printable report."""
        return (
            "\n"
            f"Array size    : {len(self._items)}\n"
            f"Array capacity: {self._capacity}\n"
            f"[{', '.join(self._items)}]"
            "\n\n"
        )


def _check_delim(delim: str) -> None:
    if len(delim) != 1:
        raise ValueError("delimiter must be a single character")


def strip(text: str, delim: str) -> str:
    """Return ``text`` with every occurrence of the character ``delim`` removed."""
    _check_delim(delim)
    return "".join(ch for ch in text if ch != delim)


def split_at(text: str, delim: str) -> tuple[str, str]:
    """Split ``text`` at the first ``delim``.

    Returns the part before it and the part after it; when ``delim`` is
    absent the whole text is the first part and the second is empty.
    The split position is always ``len(head)``.
    """
    _check_delim(delim)
    head, _, tail = text.partition(delim)
    return head, tail


def get_token_index(text: str, delim: str) -> int:
    """Return the index of the first ``delim`` in ``text``, or -1 if absent."""
    _check_delim(delim)
    return text.find(delim)