"""A binary search tree of integers with traversals, ancestors and levels."""

from __future__ import annotations

import argparse
import sys
from collections import deque
from collections.abc import Iterable, Iterator
from dataclasses import dataclass


@dataclass(slots=True)
class _Node:
    value: int
    left: _Node | None = None
    right: _Node | None = None


class BinarySearchTree:
    """A binary search tree that ignores duplicate values."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._root: _Node | None = None
        for value in values:
            self.insert(value)

    def insert(self, value: int) -> None:
        """Add a value; a value already in the tree is ignored."""
        if self._root is None:
            self._root = _Node(value)
            return
        node = self._root
        while True:
            if value < node.value:
                if node.left is None:
                    node.left = _Node(value)
                    return
                node = node.left
            elif value > node.value:
                if node.right is None:
                    node.right = _Node(value)
                    return
                node = node.right
            else:
                return

    def delete(self, value: int) -> bool:
        """Remove a value and return True, or return False if it is not in the tree.

        A node with two children takes the value of its in-order successor.
        """
        parent: _Node | None = None
        node = self._root
        while node is not None and node.value != value:
            parent = node
            node = node.left if value < node.value else node.right
        if node is None:
            return False
        if node.left is not None and node.right is not None:
            successor_parent, successor = node, node.right
            while successor.left is not None:
                successor_parent, successor = successor, successor.left
            node.value = successor.value
            parent, node = successor_parent, successor
        child = node.left if node.left is not None else node.right
        if parent is None:
            self._root = child
        elif parent.left is node:
            parent.left = child
        else:
            parent.right = child
        return True

    def __contains__(self, value: object) -> bool:
        node = self._root
        while node is not None:
            if value == node.value:
                return True
            node = node.left if value < node.value else node.right  # type: ignore[operator]
        return False

    def preorder(self) -> list[int]:
        """Return the values root first, then the left and right subtrees."""
        result = []
        stack = [self._root] if self._root else []
        while stack:
            node = stack.pop()
            result.append(node.value)
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)
        return result

    def inorder(self) -> list[int]:
        """Return the values in ascending order."""
        result = []
        stack: list[_Node] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            result.append(node.value)
            node = node.right
        return result

    def postorder(self) -> list[int]:
        """Return the values of both subtrees before their root."""
        result = []
        stack = [self._root] if self._root else []
        while stack:
            node = stack.pop()
            result.append(node.value)
            if node.left is not None:
                stack.append(node.left)
            if node.right is not None:
                stack.append(node.right)
        return result[::-1]

    def _levels(self) -> Iterator[list[_Node]]:
        level = [self._root] if self._root else []
        while level:
            yield level
            level = [
                child
                for node in level
                for child in (node.left, node.right)
                if child is not None
            ]

    def level_order(self) -> list[int]:
        """Return the values level by level, left to right."""
        result = []
        queue = deque([self._root] if self._root else [])
        while queue:
            node = queue.popleft()
            result.append(node.value)
            queue.extend(child for child in (node.left, node.right) if child is not None)
        return result

    def height(self) -> int:
        """Return the number of levels; an empty tree has height 0."""
        return sum(1 for _ in self._levels())

    def ancestors(self, value: int) -> list[int]:
        """Return the values on the path from the root down to value, root first.

        Raises ValueError if the value is not in the tree.
        """
        path = []
        node = self._root
        while node is not None:
            if node.value == value:
                return path
            path.append(node.value)
            node = node.left if value < node.value else node.right
        raise ValueError(f"{value} is not in the tree")

    def level_of(self, value: int) -> int:
        """Return the depth of value, the root being level 0, or -1 if it is absent."""
        try:
            return len(self.ancestors(value))
        except ValueError:
            return -1


def _read_values(tokens: Iterator[str]) -> list[int]:
    count = int(next(tokens))
    return [int(next(tokens)) for _ in range(max(count, 0))]


def main(argv: list[str] | None = None) -> int:
    """Build a tree from standard input and print traversals, height, ancestors and levels."""
    parser = argparse.ArgumentParser(
        description="Insert and delete values in a binary search tree and report on it."
    )
    parser.parse_args(argv)

    tokens = iter(sys.stdin.read().split())
    tree = BinarySearchTree()
    try:
        for value in _read_values(tokens):
            tree.insert(value)
        for value in _read_values(tokens):
            tree.delete(value)
        traversals = (tree.preorder(), tree.inorder(), tree.postorder())
        if tree.height() == 0:
            print("\n\n\n")
        else:
            for values in traversals:
                print("".join(f"{value} " for value in values))
            print("".join(f"{value} " for value in tree.level_order()), end="")
        print(f"\n{tree.height()}")

        for value in _read_values(tokens):
            if value in tree:
                print("".join(f"{ancestor} " for ancestor in tree.ancestors(value)))
        for value in _read_values(tokens):
            print(tree.level_of(value))
    except (StopIteration, ValueError):
        print("entrada incompleta o invalida", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())