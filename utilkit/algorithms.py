"""Sorting algorithms."""

from __future__ import annotations

from collections.abc import Iterable
from typing import TypeVar

T = TypeVar("T")


def bubble_sort(values: Iterable[T]) -> list[T]:
    """Return a new list holding ``values`` in ascending order, sorted by bubble sort."""
    items = list(values)
    size = len(items)
    for passes in range(size):
        for j in range(size - passes - 1):
            if items[j] > items[j + 1]:
                items[j], items[j + 1] = items[j + 1], items[j]
    return items