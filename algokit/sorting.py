"""Comparison and distribution sorts.

Every function takes an iterable and returns a new sorted list. The input
is left unchanged.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import TypeVar

T = TypeVar("T")


def _is_power_of_two(n: int) -> bool:
    return n > 0 and n & (n - 1) == 0


def _bitonic_merge(items: list, low: int, count: int, ascending: bool) -> None:
    if count <= 1:
        return
    half = count // 2
    for i in range(low, low + half):
        if (items[i] > items[i + half]) == ascending:
            items[i], items[i + half] = items[i + half], items[i]
    _bitonic_merge(items, low, half, ascending)
    _bitonic_merge(items, low + half, half, ascending)


def _bitonic(items: list, low: int, count: int, ascending: bool) -> None:
    if count <= 1:
        return
    half = count // 2
    _bitonic(items, low, half, True)
    _bitonic(items, low + half, half, False)
    _bitonic_merge(items, low, count, ascending)


def bitonic_sort(values: Iterable[T], ascending: bool = True) -> list[T]:
    """Sort with a bitonic network; the length must be a power of two."""
    items = list(values)
    if not items:
        return items
    if not _is_power_of_two(len(items)):
        raise ValueError(
            f"bitonic sort needs a power-of-two length, got {len(items)}"
        )
    _bitonic(items, 0, len(items), ascending)
    return items


def bucket_sort(values: Iterable[float]) -> list[float]:
    """Sort numbers in the half-open range [0, 1) by distributing them into buckets."""
    items = list(values)
    count = len(items)
    buckets: list[list[float]] = [[] for _ in range(count)]
    for value in items:
        if not 0 <= value < 1:
            raise ValueError(f"bucket sort needs values in [0, 1), got {value!r}")
        buckets[int(count * value)].append(value)
    return [value for bucket in buckets for value in sorted(bucket)]


def _sift_down(items: list, size: int, index: int) -> None:
    while True:
        largest = index
        left, right = 2 * index + 1, 2 * index + 2
        if left < size and items[left] > items[largest]:
            largest = left
        if right < size and items[right] > items[largest]:
            largest = right
        if largest == index:
            return
        items[index], items[largest] = items[largest], items[index]
        index = largest


def heap_sort(values: Iterable[T]) -> list[T]:
    """Sort by building a max-heap and repeatedly moving its top to the end."""
    items = list(values)
    size = len(items)
    for index in reversed(range(size // 2)):
        _sift_down(items, size, index)
    for end in reversed(range(1, size)):
        items[0], items[end] = items[end], items[0]
        _sift_down(items, end, 0)
    return items


def _merge(first: list, second: list) -> list:
    merged = []
    i = j = 0
    while i < len(first) and j < len(second):
        if second[j] < first[i]:
            merged.append(second[j])
            j += 1
        else:
            merged.append(first[i])
            i += 1
    merged.extend(first[i:])
    merged.extend(second[j:])
    return merged


def merge_sort(values: Iterable[T]) -> list[T]:
    """Sort by recursively splitting in halves and merging them."""
    items = list(values)
    if len(items) <= 1:
        return items
    mid = (len(items) + 1) // 2
    return _merge(merge_sort(items[:mid]), merge_sort(items[mid:]))


def bubble_sort(values: Iterable[T]) -> list[T]:
    """Sort by repeatedly swapping adjacent out-of-order pairs."""
    items = list(values)
    for step in range(len(items)):
        swapped = False
        for i in range(len(items) - step - 1):
            if items[i] > items[i + 1]:
                items[i], items[i + 1] = items[i + 1], items[i]
                swapped = True
        if not swapped:
            break
    return items


def _partition(items: list, start: int, end: int) -> int:
    pivot = items[start]
    pivot_index = start + sum(1 for value in items[start + 1 : end + 1] if value <= pivot)
    items[pivot_index], items[start] = items[start], items[pivot_index]

    i, j = start, end
    while i < pivot_index and j > pivot_index:
        while items[i] <= pivot:
            i += 1
        while items[j] > pivot:
            j -= 1
        if i < pivot_index and j > pivot_index:
            items[i], items[j] = items[j], items[i]
            i += 1
            j -= 1
    return pivot_index


def quick_sort(values: Iterable[T]) -> list[T]:
    """Sort by partitioning around the first element of each range."""
    items = list(values)
    pending = [(0, len(items) - 1)]
    while pending:
        start, end = pending.pop()
        if start >= end:
            continue
        pivot_index = _partition(items, start, end)
        pending.append((start, pivot_index - 1))
        pending.append((pivot_index + 1, end))
    return items


def insertion_sort(values: Iterable[T]) -> list[T]:
    """Sort by inserting each element into the sorted prefix before it."""
    items = list(values)
    for i in range(1, len(items)):
        key = items[i]
        j = i
        while j > 0 and items[j - 1] > key:
            items[j] = items[j - 1]
            j -= 1
        items[j] = key
    return items