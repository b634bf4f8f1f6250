"""A column-sum hash of a text file, printed as groups of hexadecimal digits."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Iterable, Iterator, Sequence
from itertools import islice

MIN_WIDTH = 16
MAX_WIDTH = 64
GROUPS = 4

INVALID_INPUT = ".:Entrada Invalida:."
ASK_AGAIN = "Ingrese un valor para dato: "


def _is_valid_width(n: int) -> bool:
    return n % 4 == 0 and MIN_WIDTH <= n <= MAX_WIDTH


def prepare_text(lines: Iterable[str]) -> str:
    """Drop the spaces of every line and end each one with a newline."""
    return "".join(line.replace(" ", "") + "\n" for line in lines)


def _payload(text: str) -> bytes:
    # The final character of the prepared text, its closing newline, is never placed.
    data = text.encode("utf-8")
    return data[:-1]


def build_table(text: str, n: int) -> list[list[int]]:
    """Lay the bytes of a prepared text into rows of n columns.

    The last character of the text is left out, the table has len(text) // n + 1
    rows, and every cell that no character fills holds the value n.
    """
    if n < 1:
        raise ValueError("the number of columns must be positive")
    data = _payload(text)
    rows = len(text.encode("utf-8")) // n + 1
    table = []
    for start in range(0, rows * n, n):
        chunk = list(data[start:start + n])
        table.append(chunk + [n] * (n - len(chunk)))
    return table


def column_sums(table: Sequence[Sequence[int]], n: int) -> list[int]:
    """Return the sum of each of the first n columns, modulo 256."""
    return [sum(column) % 256 for column in islice(zip(*table), n)]


def hex_groups(sums: Sequence[int], n: int) -> list[str]:
    """Write each sum in upper-case hexadecimal and join them n // 4 at a time."""
    size = n // GROUPS
    if size < 1:
        raise ValueError("the number of columns must be at least 4")
    digits = [f"{value:X}" for value in sums]
    return ["".join(digits[start:start + size]) for start in range(0, len(digits), size)]


def hash_text(text: str, n: int) -> str:
    """Hash the raw contents of a file with n columns; groups are separated by spaces."""
    if not _is_valid_width(n):
        raise ValueError(f"n must be a multiple of 4 between {MIN_WIDTH} and {MAX_WIDTH}")
    table = build_table(prepare_text(text.split("\n")), n)
    return " ".join(hex_groups(column_sums(table, n), n))


def _read_valid(tokens: Iterator[str], accept: Callable[[int], bool]) -> int:
    while True:
        token = next(tokens)
        try:
            value = int(token)
        except ValueError:
            value = None
        if value is not None and accept(value):
            return value
        print(INVALID_INPUT)
        print(ASK_AGAIN, end="")


def _text_rows(text: str, n: int, rows: int) -> list[list[str]]:
    data = _payload(text)
    result = []
    for start in range(0, rows * n, n):
        chunk = [chr(byte) for byte in data[start:start + n]]
        result.append(chunk + [str(n)] * (n - len(chunk)))
    return result


def main(argv: list[str] | None = None) -> int:
    """Read n and a file name (without .txt) from standard input and print the hash."""
    parser = argparse.ArgumentParser(
        description="Hash a text file by summing the columns of a table of its characters."
    )
    parser.parse_args(argv)

    tokens = iter(sys.stdin.read().split())
    try:
        print("Ingresa el valor de N")
        n = _read_valid(tokens, _is_valid_width)
        print("Ingresa el nombre del archivo de texto")
        name = next(tokens) + ".txt"
    except StopIteration:
        print("entrada incompleta", file=sys.stderr)
        return 1

    try:
        with open(name, encoding="utf-8", newline="") as handle:
            content = handle.read()
    except OSError:
        print("No se encontró el archivo")
        return 1

    lines = [line.replace(" ", "") for line in content.split("\n")]
    print()
    print("Lectura del texto ")
    for line in lines:
        print(f" {line} ")
    print()

    text = prepare_text(lines)
    table = build_table(text, n)

    print("Arreglo ASCII :", end="")
    for row in table:
        print()
        print("".join(f"[{value}] " for value in row), end="")
    print("\n")

    print("Arreglo texto :", end="")
    for row in _text_rows(text, n, len(table)):
        print()
        print("".join(f"[{cell}] " for cell in row), end="")
    print()

    sums = column_sums(table, n)
    print()
    print()
    print("Representación hexadecimal")
    print("".join(f"[ {value:X} ] " for value in sums), end="")
    print("\n")
    print("Concatenación")
    print("".join(group + " " for group in hex_groups(sums, n)))
    return 0


if __name__ == "__main__":
    sys.exit(main())