"""Comparison sorts: insertion, merge and selection."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any


def insertion_sort(values: Iterable[Any]) -> list[Any]:
    """Return a new list with values in ascending order, built by insertion.

    Each element is shifted left past every larger element before it, so
    equal elements keep their original order.
    """
    items = list(values)
    for end in range(1, len(items)):
        current = items[end]
        pos = end
        while pos > 0 and items[pos - 1] > current:
            items[pos] = items[pos - 1]
            pos -= 1
        items[pos] = current
    return items


def _merge(left: list[Any], right: list[Any]) -> list[Any]:
    merged: list[Any] = []
    li = ri = 0
    while li < len(left) and ri < len(right):
        if left[li] <= right[ri]:
            merged.append(left[li])
            li += 1
        else:
            merged.append(right[ri])
            ri += 1
    merged.extend(left[li:])
    merged.extend(right[ri:])
    return merged


def merge_sort(values: Iterable[Any]) -> list[Any]:
    """Return a new list with values in ascending order, by divide and conquer.

    Ties are taken from the left half first, so the sort is stable.
    """
    items = list(values)
    if len(items) < 2:
        return items
    middle = (len(items) - 1) // 2 + 1
    return _merge(merge_sort(items[:middle]), merge_sort(items[middle:]))


def selection_sort(values: Iterable[Any]) -> list[Any]:
    """Return a new list with values in ascending order, by repeated selection.

    At each position the smallest remaining element is swapped into place.
    """
    items = list(values)
    for start in range(len(items)):
        smallest = min(range(start, len(items)), key=items.__getitem__)
        items[start], items[smallest] = items[smallest], items[start]
    return items