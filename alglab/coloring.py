"""Colouring an undirected graph with at most three colours by backtracking."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

MAX_COLORS = 3
UNCOLORED = 0
IMPOSSIBLE = "No es posible asignar colores a los nodos"


def _check_square(adjacency: Sequence[Sequence[int]]) -> int:
    size = len(adjacency)
    if any(len(row) != size for row in adjacency):
        raise ValueError("the adjacency matrix must be square")
    return size


def is_safe(
    adjacency: Sequence[Sequence[int]], node: int, color: int, colors: Sequence[int]
) -> bool:
    """Return True if no neighbour of node already has the given colour."""
    return not any(
        edge == 1 and assigned == color for edge, assigned in zip(adjacency[node], colors)
    )


def color_graph(adjacency: Sequence[Sequence[int]]) -> list[int] | None:
    """Return the first colouring found, colours 1 to 3 tried in order, or None."""
    size = _check_square(adjacency)
    colors = [UNCOLORED] * size

    def assign(node: int) -> bool:
        if node == size:
            return True
        for color in range(1, MAX_COLORS + 1):
            if is_safe(adjacency, node, color, colors):
                colors[node] = color
                if assign(node + 1):
                    return True
        colors[node] = UNCOLORED
        return False

    return colors if assign(0) else None


def main(argv: list[str] | None = None) -> int:
    """Read an adjacency matrix from standard input and print a colouring."""
    parser = argparse.ArgumentParser(
        description="Colour a graph given as an adjacency matrix with at most three colours."
    )
    parser.parse_args(argv)

    tokens = iter(sys.stdin.read().split())
    try:
        print("Nodos: ", end="")
        size = int(next(tokens))
        while size <= 0:
            print(
                "No puedes ingresar números negativos o iguales que 0, vuelve a intentarlo"
            )
            print("\nNodos: ", end="")
            size = int(next(tokens))
        print("Ingresa los valores de la matriz de adyacencias ")
        adjacency = []
        for _ in range(size):
            row = []
            for _ in range(size):
                value = int(next(tokens))
                while value not in (0, 1):
                    print("Solo puedes ingresar 1 ó 0, vuelve a intentarlo")
                    value = int(next(tokens))
                row.append(value)
            adjacency.append(row)
    except (StopIteration, ValueError):
        print("\nentrada incompleta o invalida", file=sys.stderr)
        return 1

    print("\nEntrada")
    for row in adjacency:
        print("".join(f"[ {value} ] " for value in row))

    print("\nSalida")
    colors = color_graph(adjacency)
    if colors is None:
        print(IMPOSSIBLE)
        return 0
    for node, color in enumerate(colors):
        print(f"Nodo: {node} Color asignado {color}")
    return 0


if __name__ == "__main__":
    sys.exit(main())