"""Sorting a log by date and listing the entries of one day."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Sequence

from alglab.sorting import merge_sort

MONTHS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun",
          "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")
KEY_LENGTH = 5


def month_to_number(lines: Iterable[str]) -> list[str]:
    """Replace the three-letter month that starts each line with its two-digit number."""
    result = []
    for line in lines:
        name = line[:3]
        if name not in MONTHS:
            raise ValueError(f"line does not start with a month name: {line!r}")
        result.append(f"{MONTHS.index(name) + 1:02d}{line[3:]}")
    return result


def number_to_month(lines: Iterable[str]) -> list[str]:
    """Replace the two-digit month that starts each line with its three-letter name."""
    result = []
    for line in lines:
        prefix = line[:2]
        if len(prefix) != 2 or not prefix.isdigit() or not 1 <= int(prefix) <= 12:
            raise ValueError(f"line does not start with a month number: {line!r}")
        result.append(MONTHS[int(prefix) - 1] + line[2:])
    return result


def _pad(value: int) -> str:
    return f"0{value}" if value < 10 else str(value)


def date_key(day: int, month: int) -> str:
    """Return the 'MM DD' prefix that numbered lines of that date start with."""
    return f"{_pad(month)} {_pad(day)}"


def search_date(lines: Sequence[str], key: str) -> list[int]:
    """Return the indices of the lines whose first five characters equal the key."""
    return [index for index, line in enumerate(lines) if line[:KEY_LENGTH] == key]


def _read_lines(path: str) -> list[str]:
    with open(path, encoding="utf-8", newline="") as handle:
        lines = handle.read().split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return lines


def main(argv: list[str] | None = None) -> int:
    """Sort the log, write it newest first, then print the entries of a day read from stdin."""
    parser = argparse.ArgumentParser(
        description="Sort a log by date and list the entries of a given day and month."
    )
    parser.add_argument("--input", default="bitacora.txt", help="log file to read")
    parser.add_argument("--output", default="sortedData.txt", help="sorted file to write")
    args = parser.parse_args(argv)

    try:
        raw = _read_lines(args.input)
    except OSError as error:
        print(error, file=sys.stderr)
        return 1

    try:
        numbered = merge_sort(month_to_number(raw))
        named = number_to_month(numbered)
    except ValueError as error:
        print(error, file=sys.stderr)
        return 1

    with open(args.output, "w", encoding="utf-8") as out:
        out.writelines(f"{line}\n" for line in reversed(named))

    tokens = sys.stdin.read().split()
    try:
        day, month = int(tokens[0]), int(tokens[1])
    except (IndexError, ValueError):
        print("entrada incompleta o invalida", file=sys.stderr)
        return 1

    for index in search_date(numbered, date_key(day, month)):
        print(named[index])
    return 0


if __name__ == "__main__":
    sys.exit(main())