"""Parsing, sorting and searching a log of connection attempts by IP address."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

MONTHS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun",
          "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")
OCTET_WIDTH = 3


@dataclass(frozen=True)
class LogEntry:
    """One line of the log: date, time, address, port and message."""

    month: str
    day: str
    time: str
    ip: str
    port: int
    error: str

    def format(self) -> str:
        """Render the entry the way it appears in the log file."""
        return f"{self.month} {self.day} {self.time} {self.ip}:{self.port} {self.error}"

    def _ip_key(self) -> str:
        return f"{self.ip}{self.port}{self.day}{self.time}{self.error}"


def pad_octet(octet: str) -> str:
    """Left-pad a one- or two-character octet with zeros to three characters."""
    if 0 < len(octet) < OCTET_WIDTH:
        return octet.rjust(OCTET_WIDTH, "0")
    return octet


def normalize_ip(ip: str) -> str:
    """Pad every octet of a dotted address to three digits so addresses sort as text."""
    parts = ip.split(".", 3)
    if len(parts) != 4:
        raise ValueError(f"not a dotted IPv4 address: {ip!r}")
    parts[3] = parts[3].split("\n", 1)[0]
    return ".".join(pad_octet(part) for part in parts)


def month_number(name: str) -> int:
    """Return the number of a three-letter month; any unknown name counts as December."""
    if name in MONTHS:
        return MONTHS.index(name) + 1
    return 12


def parse_entry(line: str) -> LogEntry:
    """Parse 'Mon DD HH:MM:SS a.b.c.d:port message' into a LogEntry with a padded address."""
    fields = line.rstrip("\r\n").split(" ", 4)
    if len(fields) != 5:
        raise ValueError(f"malformed log line: {line!r}")
    month, day, time, address, error = fields
    ip, colon, port = address.partition(":")
    if not colon:
        raise ValueError(f"log line has no port: {line!r}")
    try:
        port_number = int(port)
    except ValueError:
        raise ValueError(f"invalid port in log line: {line!r}") from None
    return LogEntry(month, day, time, normalize_ip(ip), port_number, error)


def sort_by_ip(entries: Iterable[LogEntry]) -> list[LogEntry]:
    """Sort entries from the highest address to the lowest.

    Ties on the address are ordered by port, day, time and message, compared as text.
    """
    return sorted(entries, key=LogEntry._ip_key, reverse=True)


def search_range(entries: Sequence[LogEntry], high: str, low: str) -> list[LogEntry]:
    """Return the run of entries from the first with address high to the next with low.

    Both ends are included. If high never appears the result is empty; if low does
    not follow it, ValueError is raised.
    """
    high = normalize_ip(high)
    low = normalize_ip(low)
    for start, entry in enumerate(entries):
        if entry.ip != high:
            continue
        for end in range(start, len(entries)):
            if entries[end].ip == low:
                return list(entries[start:end + 1])
        raise ValueError(f"address {low} does not follow {high}")
    return []


def sort_by_month(entries: Iterable[LogEntry], descending: bool = False) -> list[LogEntry]:
    """Sort entries by month only, ascending unless descending is set."""
    return sorted(entries, key=lambda entry: month_number(entry.month), reverse=descending)


def _read_entries(path: str) -> list[LogEntry]:
    with open(path, encoding="utf-8") as handle:
        return [parse_entry(line) for line in handle if line.strip()]


def main(argv: list[str] | None = None) -> int:
    """Sort the log by address, print a range read from stdin, write it sorted by month."""
    parser = argparse.ArgumentParser(
        description="List log entries between two IP addresses and write the log "
        "sorted by month."
    )
    parser.add_argument("--input", default="bitacora.txt", help="log file to read")
    parser.add_argument("--output", default="SortedData.txt", help="sorted file to write")
    args = parser.parse_args(argv)

    try:
        entries = sort_by_ip(_read_entries(args.input))
    except (OSError, ValueError) as error:
        print(error, file=sys.stderr)
        return 1

    tokens = sys.stdin.read().split()
    if len(tokens) < 2:
        print("entrada incompleta", file=sys.stderr)
        return 1
    try:
        found = search_range(entries, tokens[0], tokens[1])
    except ValueError as error:
        print(error, file=sys.stderr)
        return 1

    for entry in sort_by_month(found, descending=True):
        print(entry.format())

    with open(args.output, "w", encoding="utf-8") as out:
        out.writelines(f"{entry.format()}\n" for entry in sort_by_month(entries))
    return 0


if __name__ == "__main__":
    sys.exit(main())