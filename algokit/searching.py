"""Searches over sorted sequences.

Each search returns the index of the target, or None when it is absent.
"""

from __future__ import annotations

import math
from collections.abc import Sequence


def binary_search(
    values: Sequence, target, low: int = 0, high: int | None = None
) -> int | None:
    """Find target within values[low..high] (inclusive) by halving the range."""
    if high is None:
        high = len(values) - 1
    while low <= high:
        mid = low + (high - low) // 2
        if values[mid] == target:
            return mid
        if values[mid] > target:
            high = mid - 1
        else:
            low = mid + 1
    return None


def exponential_search(values: Sequence, target) -> int | None:
    """Find a range by repeated doubling, then binary-search it."""
    size = len(values)
    if size == 0:
        return None
    if values[0] == target:
        return 0
    bound = 1
    while bound < size and values[bound] <= target:
        bound *= 2
    return binary_search(values, target, bound // 2, min(bound, size - 1))


def fibonacci_search(values: Sequence, target) -> int | None:
    """Narrow the range using Fibonacci-number offsets."""
    size = len(values)
    if size == 0:
        return None

    fib_m2, fib_m1 = 0, 1
    fib_m = fib_m2 + fib_m1
    while fib_m < size:
        fib_m2, fib_m1 = fib_m1, fib_m
        fib_m = fib_m2 + fib_m1

    offset = -1
    while fib_m > 1:
        i = min(offset + fib_m2, size - 1)
        if values[i] < target:
            fib_m = fib_m1
            fib_m1 = fib_m2
            fib_m2 = fib_m - fib_m1
            offset = i
        elif values[i] > target:
            fib_m = fib_m2
            fib_m1 = fib_m1 - fib_m2
            fib_m2 = fib_m - fib_m1
        else:
            return i

    if fib_m1 and offset + 1 < size and values[offset + 1] == target:
        return offset + 1
    return None


def interpolation_search(values: Sequence, target) -> int | None:
    """Probe positions estimated from a uniform distribution of values."""
    low, high = 0, len(values) - 1
    while low <= high and values[low] <= target <= values[high]:
        if low == high or values[low] == values[high]:
            return low if values[low] == target else None
        pos = low + int(
            (high - low) / (values[high] - values[low]) * (target - values[low])
        )
        if values[pos] == target:
            return pos
        if values[pos] < target:
            low = pos + 1
        else:
            high = pos - 1
    return None


def jump_search(values: Sequence, target) -> int | None:
    """Jump ahead in blocks of about sqrt(n), then scan the block linearly."""
    size = len(values)
    if size == 0:
        return None
    jump = math.isqrt(size)
    step = jump
    prev = 0
    while values[min(step, size) - 1] < target:
        prev = step
        step += jump
        if prev >= size:
            return None

    while values[prev] < target:
        prev += 1
        if prev == min(step, size):
            return None
    return prev if values[prev] == target else None