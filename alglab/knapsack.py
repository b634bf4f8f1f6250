"""The 0/1 knapsack problem solved with a dynamic-programming table."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Iterator


def knapsack_table(
    values: Iterable[int], weights: Iterable[int], capacity: int
) -> list[list[int]]:
    """Build the benefit table.

    Row i holds the best benefit using the first i items for every capacity
    from 0 to capacity; row 0 is all zeros.
    """
    values = list(values)
    weights = list(weights)
    if len(values) != len(weights):
        raise ValueError("values and weights must have the same length")
    if capacity < 0:
        raise ValueError("capacity must not be negative")
    if any(weight < 0 for weight in weights):
        raise ValueError("weights must not be negative")

    table = [[0] * (capacity + 1)]
    for value, weight in zip(values, weights):
        previous = table[-1]
        table.append(
            [
                previous[room]
                if room < weight
                else max(previous[room], previous[room - weight] + value)
                for room in range(capacity + 1)
            ]
        )
    return table


def knapsack(values: Iterable[int], weights: Iterable[int], capacity: int) -> int:
    """Return the best total benefit that fits within the capacity."""
    table = knapsack_table(values, weights, capacity)
    return max(max(row) for row in table)


def _read_positive(tokens: Iterator[str]) -> int:
    value = int(next(tokens))
    while value <= 0:
        print("No puedes ingresar números negativos o menores que 0, vuelve a intentarlo")
        value = int(next(tokens))
    return value


def main(argv: list[str] | None = None) -> int:
    """Read items and a capacity from standard input; print the table and the best benefit."""
    parser = argparse.ArgumentParser(
        description="Solve the 0/1 knapsack problem and print the benefit table."
    )
    parser.parse_args(argv)

    tokens = iter(sys.stdin.read().split())
    try:
        print("Ingrese la cantidad de elmentos")
        count = _read_positive(tokens)
        print("Ingrese el beneficio de cada uno de los elementos")
        values = [int(next(tokens)) for _ in range(count)]
        print("Ingrese el peso de cada uno de los elementos")
        weights = [int(next(tokens)) for _ in range(count)]
        print("Ingrese el peso maximo")
        capacity = int(next(tokens))
    except (StopIteration, ValueError):
        print("entrada incompleta o invalida", file=sys.stderr)
        return 1

    print("\nPeso/Beneficio")
    for weight, value in zip([0, *weights], [0, *values]):
        print(f"[ {weight} {value} ] \n")

    try:
        table = knapsack_table(values, weights, capacity)
    except ValueError as error:
        print(error, file=sys.stderr)
        return 1

    print("\n\nMatriz Generada\n\n")
    for column in zip(*table):
        print("".join(f"[ {cell} ]" for cell in column))
    best = max(max(row) for row in table)
    print(f"\n\nBeneficio Óptimo: {best}")
    return 0


if __name__ == "__main__":
    sys.exit(main())