"""A trie of lower-case words with depth-first listing and lookups."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterator
from dataclasses import dataclass, field

ALPHABET = "abcdefghijklmnopqrstuvwxyz"


@dataclass
class _Node:
    children: dict[str, _Node] = field(default_factory=dict)
    terminal: bool = False


def _is_storable(word: str) -> bool:
    return all(letter in ALPHABET for letter in word)


class Trie:
    """A prefix tree over the letters a to z."""

    def __init__(self) -> None:
        self._root = _Node()

    def insert(self, word: str) -> None:
        """Add a word; only the letters a to z are allowed."""
        if not _is_storable(word):
            raise ValueError(f"only lower-case letters a-z can be stored: {word!r}")
        node = self._root
        for letter in word:
            node = node.children.setdefault(letter, _Node())
        node.terminal = True

    def contains(self, word: str) -> bool:
        """Return True if the word was inserted as a whole word."""
        node = self._root
        for letter in word:
            child = node.children.get(letter)
            if child is None:
                return False
            node = child
        return node.terminal

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and self.contains(word)

    def dfs(self) -> list[str]:
        """Return the letter of every edge in depth-first order, branches alphabetically."""
        letters = []
        stack = [iter(sorted(self._root.children.items()))]
        while stack:
            entry = next(stack[-1], None)
            if entry is None:
                stack.pop()
                continue
            letter, child = entry
            letters.append(letter)
            stack.append(iter(sorted(child.children.items())))
        return letters


def _read_count(tokens: Iterator[str], upper: int | None) -> int:
    value = int(next(tokens))
    while value < -1 or value == 0 or (upper is not None and value > upper):
        print("Vuelve a ingresar el valor ")
        value = int(next(tokens))
    return value


def main(argv: list[str] | None = None) -> int:
    """Read words to store and words to look up; print the DFS and the lookups."""
    parser = argparse.ArgumentParser(
        description="Store words in a trie, list it depth first and look words up."
    )
    parser.parse_args(argv)

    tokens = iter(sys.stdin.read().split())
    trie = Trie()
    try:
        print("Ingrese la cantidad de datos en la estructura")
        stored = _read_count(tokens, None)
        print("Ingrese las palabras a colocar")
        for _ in range(stored):
            trie.insert(next(tokens))
        print("Ingresa la cantidad a palabras a buscar")
        wanted = _read_count(tokens, stored)
        print("Ingresa las palabras a buscar")
        queries = [next(tokens) for _ in range(wanted)]
    except (StopIteration, ValueError) as error:
        print(f"entrada incompleta o invalida {error}".rstrip(), file=sys.stderr)
        return 1

    print("\n----------Salida DFS----------")
    print("".join(f"{letter} " for letter in trie.dfs()), end="")
    print("\n------------------------------")

    print("\nBuscando palabras")
    for word in queries:
        print(f"{word} {'true' if trie.contains(word) else 'false'}")
    return 0


if __name__ == "__main__":
    sys.exit(main())