"""Rat in a maze: backtracking and a step-bounded branch-and-bound search."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Iterator, Sequence

Grid = list[list[int]]

# Right, down, left, up: the order in which moves are tried.
MOVES = ((0, 1), (1, 0), (0, -1), (-1, 0))

INVALID_INPUT = ".:Entrada Invalida:."
ASK_AGAIN = "Ingrese un valor para dato: "


def _check_square(maze: Sequence[Sequence[int]]) -> int:
    size = len(maze)
    if size == 0:
        raise ValueError("maze must not be empty")
    if any(len(row) != size for row in maze):
        raise ValueError("maze must be square")
    return size


def _search(maze: Sequence[Sequence[int]], max_steps: int | None) -> Grid | None:
    size = _check_square(maze)

    def within_steps(steps: int, *, at_goal: bool) -> bool:
        if max_steps is None:
            return True
        return steps <= max_steps if at_goal else steps < max_steps

    def is_goal(row: int, col: int, steps: int) -> bool:
        return (
            row == size - 1
            and col == size - 1
            and maze[row][col] == 1
            and within_steps(steps, at_goal=True)
        )

    def is_open(row: int, col: int, steps: int) -> bool:
        return (
            0 <= row < size
            and 0 <= col < size
            and maze[row][col] == 1
            and within_steps(steps, at_goal=False)
        )

    def solution(cells: set[tuple[int, int]]) -> Grid:
        return [
            [1 if (row, col) in cells else 0 for col in range(size)]
            for row in range(size)
        ]

    if is_goal(0, 0, 0):
        return solution({(0, 0)})
    if not is_open(0, 0, 0):
        return None

    # Cells are only excluded while they lie on the current path.
    on_path = {(0, 0)}
    stack: list[tuple[tuple[int, int], int, Iterator[tuple[int, int]]]] = [
        ((0, 0), 1, iter(MOVES))
    ]
    while stack:
        (row, col), steps, moves = stack[-1]
        for d_row, d_col in moves:
            target = (row + d_row, col + d_col)
            if is_goal(*target, steps):
                return solution(on_path | {target})
            if is_open(*target, steps) and target not in on_path:
                on_path.add(target)
                stack.append((target, steps + 1, iter(MOVES)))
                break
        else:
            stack.pop()
            on_path.discard((row, col))
    return None


def find_path(maze: Sequence[Sequence[int]]) -> Grid | None:
    """Find a path from the top-left to the bottom-right cell by backtracking.

    Returns a grid with 1 on the path's cells, or None if there is no path.
    """
    return _search(maze, None)


def branch_and_bound(maze: Sequence[Sequence[int]], max_steps: int) -> Grid | None:
    """Like find_path, but prune any path longer than max_steps steps."""
    return _search(maze, max_steps)


def format_grid(grid: Sequence[Sequence[int]]) -> str:
    """Render a grid one row per line, each cell as ' [ v ] '."""
    return "\n".join("".join(f" [ {cell} ] " for cell in row) for row in grid)


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


def main(argv: list[str] | None = None) -> int:
    """Read a maze from standard input and print the paths both searches find."""
    parser = argparse.ArgumentParser(
        description="Solve a square 0/1 maze by backtracking and by branch and bound."
    )
    parser.parse_args(argv)

    tokens = iter(sys.stdin.read().split())
    try:
        print("Inserte número de filas y columnas: ", end="")
        size = _read_valid(tokens, lambda value: value > 0)
        print("Ingresa los pasos maximo: ", end="")
        max_steps = _read_valid(tokens, lambda value: value > 0)
        maze = []
        for row in range(size):
            cells = []
            for col in range(size):
                print(f"[{row}][{col}]: ", end="")
                cells.append(_read_valid(tokens, lambda value: value in (0, 1)))
            maze.append(cells)
    except StopIteration:
        print("\nentrada incompleta", file=sys.stderr)
        return 1

    print()
    print("Laberinto ")
    print(format_grid(maze))

    path = find_path(maze)
    if path is not None:
        print("Backtracking")
        print(format_grid(path))
    print()
    bounded = branch_and_bound(maze, max_steps)
    if bounded is not None:
        print("Ramificación y Poda")
        print(format_grid(bounded))
    return 0


if __name__ == "__main__":
    sys.exit(main())