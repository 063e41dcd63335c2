"""Small number-theory helpers."""

from __future__ import annotations

import math


def factorial(n: int) -> int:
    """Product of 1..n; 1 when n is below 1."""
    return math.prod(range(1, n + 1))


def fibonacci(n: int) -> int:
    """The n-th Fibonacci number counted from 1, where fibonacci(1) is 0."""
    if n < 1:
        raise ValueError(f"fibonacci position must be at least 1, got {n}")
    previous, current = 0, 1
    for _ in range(n - 1):
        previous, current = current, previous + current
    return previous


def fibonacci_series(count: int) -> list[int]:
    """The first count Fibonacci numbers, starting with 0."""
    series: list[int] = []
    previous, current = 0, 1
    for _ in range(count):
        series.append(previous)
        previous, current = current, previous + current
    return series


def prime_factors(n: int) -> list[int]:
    """Prime factors of n in non-decreasing order, with multiplicity."""
    factors: list[int] = []
    candidate = 2
    while candidate * candidate <= n:
        while n % candidate == 0:
            factors.append(candidate)
            n //= candidate
        candidate += 1
    if n > 1:
        factors.append(n)
    return factors


def divisors(n: int) -> list[int]:
    """All positive divisors of n in increasing order."""
    return [i for i in range(1, n + 1) if n % i == 0]


def floor_sqrt(x: int) -> int:
    """Largest integer whose square does not exceed x."""
    if x < 0:
        raise ValueError(f"square root of a negative number: {x}")
    return math.isqrt(x)