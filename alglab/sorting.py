"""Merge sort and a command that lists real numbers from largest to smallest."""

from __future__ import annotations

import argparse
import heapq
import sys
from collections.abc import Iterable
from typing import Any


def merge_sort(values: Iterable[Any]) -> list[Any]:
    """Return the values in ascending order, sorted with a stable merge sort."""
    items = list(values)
    if len(items) <= 1:
        return items
    middle = (len(items) + 1) // 2
    left = merge_sort(items[:middle])
    right = merge_sort(items[middle:])
    # heapq.merge takes equal items from the left run first, keeping the sort stable.
    return list(heapq.merge(left, right))


def sort_descending(values: Iterable[Any]) -> list[Any]:
    """Return the values ordered from largest to smallest."""
    return merge_sort(values)[::-1]


def _format_number(value: float) -> str:
    return f"{value:g}"


def main(argv: list[str] | None = None) -> int:
    """Read N and then N real numbers from standard input and print them largest first."""
    parser = argparse.ArgumentParser(
        description="Read a count followed by that many real numbers and list them "
        "from largest to smallest."
    )
    parser.parse_args(argv)

    tokens = iter(sys.stdin.read().split())
    try:
        print("Cantidad de elementos: ", end="")
        count = int(next(tokens))
        values = []
        for position in range(1, count + 1):
            print(f"Elemento {position} : ", end="")
            values.append(float(next(tokens)))
    except (StopIteration, ValueError):
        print("\nentrada incompleta o invalida", file=sys.stderr)
        return 1

    print("\n----------Elementos ordenados de mayor a menor--------- \n")
    for value in sort_descending(values):
        print(_format_number(value))
    return 0


if __name__ == "__main__":
    sys.exit(main())