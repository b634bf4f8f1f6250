"""Three ways to add the integers from 1 to n."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterator

MIN_COUNT = 1
MAX_COUNT = 10000
MIN_VALUE = 1
MAX_VALUE = 100000


def sum_iterative(n: int) -> int:
    """Add 1..n one term at a time."""
    total = 0
    for term in range(1, n + 1):
        total += term
    return total


def _range_sum(low: int, high: int) -> int:
    if low > high:
        return 0
    if low == high:
        return low
    middle = (low + high) // 2
    return _range_sum(low, middle) + _range_sum(middle + 1, high)


def sum_recursive(n: int) -> int:
    """Add 1..n recursively, splitting the range in halves to keep the recursion shallow."""
    if n < 0:
        raise ValueError("n must not be negative")
    return _range_sum(1, n)


def sum_direct(n: int) -> int:
    """Add 1..n with the closed formula n(n+1)/2."""
    return n * (n + 1) // 2


def _next_in_range(tokens: Iterator[str], low: int, high: int, message: str) -> int:
    value = int(next(tokens))
    while not low <= value <= high:
        print(message)
        value = int(next(tokens))
    return value


def main(argv: list[str] | None = None) -> int:
    """Read k and k integers from standard input; print the three sums for each."""
    parser = argparse.ArgumentParser(
        description="Print the iterative, recursive and direct sums of 1..n for each n read."
    )
    parser.parse_args(argv)

    tokens = iter(sys.stdin.read().split())
    try:
        count = _next_in_range(
            tokens, MIN_COUNT, MAX_COUNT, "'k' fuera del rango, intente de nuevo"
        )
        numbers = [
            _next_in_range(
                tokens, MIN_VALUE, MAX_VALUE, "'n' fuera de rango, intente de nuevo"
            )
            for _ in range(count)
        ]
    except (StopIteration, ValueError):
        print("entrada incompleta o invalida", file=sys.stderr)
        return 1

    for n in numbers:
        print(sum_iterative(n), sum_recursive(n), sum_direct(n))
    return 0


if __name__ == "__main__":
    sys.exit(main())