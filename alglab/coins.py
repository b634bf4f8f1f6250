"""Making change with dynamic programming and with a greedy algorithm."""

from __future__ import annotations

import argparse
import sys
from collections import Counter
from collections.abc import Iterable, Iterator, Sequence

TABLE_HEADER = "Monedas                    Cambio"
TABLE_GAP = " " * 30
EXACT_HEADER = "Moneda           Cambio"
EXACT_GAP = " " * 20


def _ordered_coins(coins: Iterable[int]) -> list[int]:
    ordered = sorted(coins)
    if any(coin <= 0 for coin in ordered):
        raise ValueError("coin denominations must be positive")
    return ordered


def greedy_change(coins: Iterable[int], change: int) -> list[int]:
    """Give the largest coin that still fits, repeatedly; return the coins given.

    Any remainder that no coin fits is left ungiven.
    """
    given = []
    for coin in reversed(_ordered_coins(coins)):
        while change >= coin:
            change -= coin
            given.append(coin)
    return given


def dynamic_change(coins: Iterable[int], change: int) -> list[int]:
    """Return a fewest-coins way to make the change exactly.

    Among choices with equal counts the smallest denomination is taken.
    Raises ValueError if the amount cannot be made.
    """
    ordered = _ordered_coins(coins)
    if change < 0:
        raise ValueError("change must not be negative")
    best: list[int | None] = [0] + [None] * change
    choice = [0] * (change + 1)
    for amount in range(1, change + 1):
        candidates = [
            (best[amount - coin] + 1, coin)
            for coin in ordered
            if coin <= amount and best[amount - coin] is not None
        ]
        if candidates:
            best[amount], choice[amount] = min(candidates, key=lambda pair: pair[0])
    if best[change] is None:
        raise ValueError(f"cannot make change of {change} with coins {ordered}")

    given = []
    remaining = change
    while remaining > 0:
        coin = choice[remaining]
        given.append(coin)
        remaining -= coin
    return given


def count_coins(solution: Iterable[int], coins: Sequence[int]) -> list[int]:
    """Count how many times each denomination appears in a solution, in the order of coins."""
    counts = Counter(solution)
    return [counts[coin] for coin in coins]


def format_table(coins: Sequence[int], counts: Sequence[int]) -> str:
    """Render denominations and counts, last denomination first, under a header."""
    lines = [TABLE_HEADER]
    lines.extend(
        f"{coin}{TABLE_GAP}{count}" for coin, count in reversed(list(zip(coins, counts)))
    )
    return "\n".join(lines)


def _read_change(tokens: Iterator[str]) -> tuple[list[int], int, int]:
    print("Cantidad de denominaciones disponibles de las monedas: ", end="")
    count = int(next(tokens))
    coins = []
    for position in range(1, count + 1):
        print(f"Moneda {position} : ", end="")
        coins.append(int(next(tokens)))
    print("Precio del producto : ", end="")
    price = int(next(tokens))
    print("Cantidad con la que se pago : ", end="")
    paid = int(next(tokens))
    while price > paid:
        print("No es suficiente dinero")
        print("Cantidad con la que se va a pagar : ", end="")
        paid = int(next(tokens))
    return sorted(coins), price, paid


def main(argv: list[str] | None = None) -> int:
    """Read coins, a price and a payment from standard input and print the change tables."""
    parser = argparse.ArgumentParser(
        description="Compute change with dynamic programming and with a greedy algorithm."
    )
    parser.parse_args(argv)

    tokens = iter(sys.stdin.read().split())
    try:
        coins, price, paid = _read_change(tokens)
    except (StopIteration, ValueError):
        print("\nentrada incompleta o invalida", file=sys.stderr)
        return 1

    if price == paid:
        print(EXACT_HEADER)
        for coin in coins:
            print(f"{coin}{EXACT_GAP}0")
        return 0

    change = paid - price
    try:
        print("\n\t\t\t\tDinamica")
        print(format_table(coins, count_coins(dynamic_change(coins, change), coins)))
        print("\n\t\t\t\tAvaro")
        print(format_table(coins, count_coins(greedy_change(coins, change), coins)))
    except ValueError as error:
        print(error, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())