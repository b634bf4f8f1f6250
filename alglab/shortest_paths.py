"""All-pairs shortest paths with Dijkstra's algorithm and with Floyd-Warshall."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

INF = 999
NO_EDGE = -1

Matrix = list[list[int]]


def _check_square(matrix: Sequence[Sequence[int]]) -> int:
    size = len(matrix)
    if any(len(row) != size for row in matrix):
        raise ValueError("the weight matrix must be square")
    return size


def from_input(matrix: Sequence[Sequence[int]]) -> Matrix:
    """Replace every missing edge, written as -1, with the INF weight."""
    _check_square(matrix)
    return [[INF if weight == NO_EDGE else weight for weight in row] for row in matrix]


def dijkstra(matrix: Sequence[Sequence[int]], source: int) -> list[int]:
    """Return the shortest distance from source to every node.

    Weights of INF mean there is no edge; a node that cannot be reached keeps INF.
    """
    size = _check_square(matrix)
    if not 0 <= source < size:
        raise ValueError(f"source {source} is not a node of a {size}-node graph")

    distances = list(matrix[source])
    visited = {source}
    for _ in range(size - 1):
        candidates = [
            (distances[node], node)
            for node in range(size)
            if node not in visited and distances[node] < INF
        ]
        if not candidates:
            break
        best, nearest = min(candidates)
        visited.add(nearest)
        for node in range(size):
            if node not in visited:
                distances[node] = min(distances[node], best + matrix[nearest][node])
    return distances


def floyd_warshall(matrix: Sequence[Sequence[int]]) -> Matrix:
    """Return the matrix of shortest distances between every pair of nodes."""
    size = _check_square(matrix)
    result = [list(row) for row in matrix]
    for middle in range(size):
        through = result[middle]
        for row in result:
            to_middle = row[middle]
            for target in range(size):
                candidate = to_middle + through[target]
                if candidate < row[target]:
                    row[target] = candidate
    return result


def _format_row(row: Sequence[int], *, show_missing: bool) -> str:
    return "".join(
        "[ -1 ] " if show_missing and weight == INF else f"[ {weight} ] " for weight in row
    )


def main(argv: list[str] | None = None) -> int:
    """Read a weight matrix from standard input and print both kinds of shortest paths."""
    parser = argparse.ArgumentParser(
        description="Print Dijkstra distances for every node and the Floyd-Warshall matrix."
    )
    parser.parse_args(argv)

    tokens = iter(sys.stdin.read().split())
    try:
        print("Inserte número de filas y columnas: ", end="")
        size = int(next(tokens))
        while size <= 0:
            print(
                "No puedes ingresar números negativos o menores que 0, vuelve a intentarlo"
            )
            size = int(next(tokens))
        print("Ingresa los valores de la matriz ")
        raw = [[int(next(tokens)) for _ in range(size)] for _ in range(size)]
    except (StopIteration, ValueError):
        print("\nentrada incompleta o invalida", file=sys.stderr)
        return 1

    matrix = from_input(raw)
    print()
    print("Entrada")
    for row in matrix:
        print(_format_row(row, show_missing=True))

    print("\nDijkstra\n")
    for source in range(size):
        for target, distance in enumerate(dijkstra(matrix, source), start=1):
            print(f"node {source + 1} to node {target}: {distance}")
        print()

    print("Floyd")
    for row in floyd_warshall(matrix):
        print(_format_row(row, show_missing=False))
    return 0


if __name__ == "__main__":
    sys.exit(main())