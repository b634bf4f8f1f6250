"""A singly linked list of integers with a command loop and a list comparison."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Iterator
from dataclasses import dataclass


@dataclass(slots=True)
class _Node:
    value: int
    next: _Node | None = None


class LinkedList:
    """A singly linked list that can grow and shrink at both ends."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._head: _Node | None = None
        self._tail: _Node | None = None
        self._size = 0
        for value in values:
            self.push_back(value)

    def push_front(self, value: int) -> None:
        """Insert a value at the start of the list."""
        node = _Node(value, self._head)
        self._head = node
        if self._tail is None:
            self._tail = node
        self._size += 1

    def push_back(self, value: int) -> None:
        """Insert a value at the end of the list."""
        node = _Node(value)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1

    def pop_front(self) -> int:
        """Remove and return the first value; raise IndexError if the list is empty."""
        if self._head is None:
            raise IndexError("pop from an empty list")
        node = self._head
        self._head = node.next
        if self._head is None:
            self._tail = None
        self._size -= 1
        return node.value

    def pop_back(self) -> int:
        """Remove and return the last value; raise IndexError if the list is empty."""
        if self._head is None or self._tail is None:
            raise IndexError("pop from an empty list")
        value = self._tail.value
        if self._head is self._tail:
            self._head = self._tail = None
        else:
            node = self._head
            while node.next is not self._tail:
                node = node.next
            node.next = None
            self._tail = node
        self._size -= 1
        return value

    def reverse(self) -> None:
        """Reverse the order of the list in place."""
        previous = None
        node = self._head
        self._tail = node
        while node is not None:
            following = node.next
            node.next = previous
            previous = node
            node = following
        self._head = previous

    def concat(self, other: Iterable[int]) -> None:
        """Append the values of another list to the end of this one."""
        for value in list(other):
            self.push_back(value)

    def equals(self, other: LinkedList) -> bool:
        """Return True if both lists hold the same values in the same order."""
        if len(self) != len(other):
            return False
        return all(mine == theirs for mine, theirs in zip(self, other))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LinkedList):
            return NotImplemented
        return self.equals(other)

    __hash__ = None  # type: ignore[assignment]

    def __iter__(self) -> Iterator[int]:
        node = self._head
        while node is not None:
            yield node.value
            node = node.next

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"


def _next_int(tokens: Iterator[str]) -> int:
    try:
        return int(next(tokens))
    except StopIteration:
        raise ValueError("a value was expected but the input ended") from None


def run_commands(tokens: Iterable[str]) -> list[str]:
    """Run list commands and return the lines they print.

    1 x inserts x at the start, 2 x at the end, 3 removes the first value,
    4 the last, 5 prints every value and 0 stops. Removing from an empty list
    prints ERROR; unknown commands are ignored.
    """
    items = LinkedList()
    output: list[str] = []
    stream = iter(tokens)
    for token in stream:
        command = int(token)
        if command == 0:
            break
        if command == 1:
            items.push_front(_next_int(stream))
        elif command == 2:
            items.push_back(_next_int(stream))
        elif command in (3, 4):
            try:
                items.pop_front() if command == 3 else items.pop_back()
            except IndexError:
                output.append("ERROR")
        elif command == 5:
            output.extend(str(value) for value in items)
    return output


@dataclass(frozen=True)
class ListComparison:
    """Both lists reversed, the second followed by the first, and the equality check."""

    first: list[int]
    second: list[int]
    combined: list[int]
    equal: bool


def compare_lists(first: Iterable[int], second: Iterable[int]) -> ListComparison:
    """Reverse both lists, join the first onto the second and compare the results.

    The equality check compares the reversed first list with the second list
    after the join; an empty second list takes part in no join.
    """
    head = LinkedList(first)
    tail = LinkedList(second)
    head.reverse()
    tail.reverse()
    combined = LinkedList(tail)
    combined.concat(head)
    target = combined if len(tail) else tail
    return ListComparison(list(head), list(tail), list(combined), head.equals(target))


def _read_count(tokens: Iterator[str]) -> int:
    count = _next_int(tokens)
    while count < 0:
        count = _next_int(tokens)
    return count


def main(argv: list[str] | None = None) -> int:
    """Run list commands, or compare two lists, reading from standard input."""
    parser = argparse.ArgumentParser(
        description="Operate a linked list with numbered commands, or reverse, join "
        "and compare two lists."
    )
    parser.add_argument(
        "mode", nargs="?", default="commands", choices=("commands", "compare")
    )
    args = parser.parse_args(argv)

    tokens = iter(sys.stdin.read().split())
    try:
        if args.mode == "commands":
            for line in run_commands(tokens):
                print(line)
            return 0
        first = [_next_int(tokens) for _ in range(_read_count(tokens))]
        second = [_next_int(tokens) for _ in range(_read_count(tokens))]
    except ValueError as error:
        print(error, file=sys.stderr)
        return 1

    result = compare_lists(first, second)
    for value in (*result.first, *result.second, *result.combined):
        print(value)
    print("true" if result.equal else "false")
    return 0


if __name__ == "__main__":
    sys.exit(main())