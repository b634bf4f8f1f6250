"""Searching transmissions for malicious code and for their longest shared substring."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from pathlib import Path

TRANSMISSIONS = ("transmission1.txt", "transmission2.txt")
MCODES = ("mcode1.txt", "mcode2.txt", "mcode3.txt")


def prefix_table(pattern: Sequence[str]) -> list[int]:
    """Return, for each prefix, the length of its longest proper border."""
    table = [0] * len(pattern)
    border = 0
    for index in range(1, len(pattern)):
        symbol = pattern[index]
        while border and pattern[border] != symbol:
            border = table[border - 1]
        if pattern[border] == symbol:
            border += 1
        table[index] = border
    return table


def kmp_search(text: Sequence[str], pattern: Sequence[str]) -> list[int]:
    """Return the start index of every occurrence of pattern in text, overlaps included."""
    if not pattern:
        raise ValueError("the pattern must not be empty")
    table = prefix_table(pattern)
    matches = []
    matched = 0
    for index, symbol in enumerate(text):
        while matched and pattern[matched] != symbol:
            matched = table[matched - 1]
        if pattern[matched] == symbol:
            matched += 1
        if matched == len(pattern):
            matches.append(index - matched + 1)
            matched = table[matched - 1]
    return matches


def suffixes(lines: Iterable[str]) -> list[tuple[str, int]]:
    """Return every suffix of every line with its position in the whole text.

    Positions count one separator character between lines.
    """
    result = []
    position = 0
    for line in lines:
        result.extend((line[offset:], position + offset) for offset in range(len(line)))
        position += len(line) + 1
    return result


@dataclass(frozen=True)
class CommonSubstring:
    """The longest suffix shared by lines of both texts and where it starts in each."""

    text: str
    first_positions: list[int]
    second_positions: list[int]


def longest_common_substring(
    lines1: Iterable[str], lines2: Iterable[str]
) -> CommonSubstring | None:
    """Find the longest line suffix that appears in both texts, or None.

    Among equally long candidates the first one in the first text wins.
    """
    first = suffixes(lines1)
    second = suffixes(lines2)
    second_texts = {text for text, _ in second}
    best = ""
    for text, _ in first:
        if len(text) > len(best) and text in second_texts:
            best = text
    if not best:
        return None
    return CommonSubstring(
        best,
        [position for text, position in first if text == best],
        [position for text, position in second if text == best],
    )


def read_chars(path: str | Path) -> str:
    """Return the characters of a file with all whitespace removed."""
    with open(path, encoding="utf-8") as handle:
        return "".join(handle.read().split())


def _load_chars(path: Path) -> str:
    try:
        return read_chars(path)
    except OSError:
        print("No se encontró el archivo")
        return ""


def _load_lines(path: Path) -> list[str]:
    try:
        with open(path, encoding="utf-8", newline="") as handle:
            return handle.read().split("\n")
    except OSError:
        return []


def _report_matches(text: str, pattern: str) -> None:
    if not pattern:
        print("Archivo mcode no válido")
        return
    if len(text) < len(pattern):
        print("Archivo transmission no válido")
        return
    print()
    starts = kmp_search(text, pattern)
    for start in starts:
        # The reported end adds the pattern length twice past the start.
        end = start + 2 * len(pattern)
        print(f"(true) Posición inicial: {start} Posición final: {end}")
    if not starts:
        print("(false) Cadena no encontrada en la transmision")


def main(argv: list[str] | None = None) -> int:
    """Analyse the fixed transmission and mcode files in a directory."""
    parser = argparse.ArgumentParser(
        description="Look for malicious code in transmissions and find their longest "
        "common substring."
    )
    parser.add_argument(
        "--dir", default=".", help="directory holding the transmission and mcode files"
    )
    args = parser.parse_args(argv)
    folder = Path(args.dir)

    transmissions = []
    transmission_lines = []
    for name in TRANSMISSIONS:
        transmissions.append(_load_chars(folder / name))
        transmission_lines.append(_load_lines(folder / name))
    mcodes = [_load_chars(folder / name) for name in MCODES]

    for number, lines in enumerate(transmission_lines, start=1):
        print(f"\n\nArchivo transmission{number}")
        print("".join(lines), end="")
    for number, code in enumerate(mcodes, start=1):
        print(f"\n\nArchivo mcode{number}")
        print(code, end="")

    print("\n\n T R A N S M I S S I O N   1")
    for number, code in enumerate(mcodes, start=1):
        print(f"\nmcode {number} ", end="")
        _report_matches(transmissions[0], code)
    print("\n T R A N S M I S S I O N   2")
    for number, code in enumerate(mcodes, start=1):
        print(f"\nmcode {number} ", end="")
        _report_matches(transmissions[1], code)

    common = longest_common_substring(*transmission_lines)
    if common is None:
        print("\n\nNo se encontró un substring compartido en ambas transmisiciones")
        return 0
    size = len(common.text)
    print(f"\n\n\nSub-String más largo: {common.text}")
    for number, positions in enumerate(
        (common.first_positions, common.second_positions), start=1
    ):
        print(f"\nPosiciones en la Transmission{number}: ")
        for position in positions:
            print(
                f"Posición inicial: {position + 1} Posición final: {position + size + 1}"
            )
    return 0


if __name__ == "__main__":
    sys.exit(main())