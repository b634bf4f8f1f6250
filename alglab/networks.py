"""City network analysis: distances, a greedy tour, maximum flow and the nearest central."""

from __future__ import annotations

import argparse
import math
import sys
from collections import deque
from collections.abc import Sequence
from pathlib import Path
from typing import NamedTuple, TextIO

from alglab.shortest_paths import INF, dijkstra

COLONIES = 4
LARGE_NETWORK = 6
OUTPUT_NAME = "Equipo_07_Salida_Y.txt"


class Tour(NamedTuple):
    """A closed route through every node, starting and ending at node 0."""

    route: list[int]
    cost: int


class Nearest(NamedTuple):
    """The central closest to a point, its distance and every central's distance."""

    index: int
    distance: float
    distances: list[float]


def _check_square(matrix: Sequence[Sequence[int]]) -> int:
    size = len(matrix)
    if any(len(row) != size for row in matrix):
        raise ValueError("the matrix must be square")
    return size


def travelling_salesman(matrix: Sequence[Sequence[int]]) -> Tour:
    """Build a tour from node 0 by always moving to the nearest unvisited node.

    Among equally near nodes the lowest-numbered one is taken; the tour closes
    with the edge from the last node back to node 0.
    """
    size = _check_square(matrix)
    if size < 2:
        raise ValueError("a tour needs at least two nodes")
    route = [0]
    visited = {0}
    cost = 0
    current = 0
    for _ in range(size - 1):
        best = INF
        nearest = None
        for node, weight in enumerate(matrix[current]):
            if node != current and node not in visited and weight < best:
                best, nearest = weight, node
        if nearest is None:
            raise ValueError(f"no unvisited node can be reached from node {current}")
        cost += best
        visited.add(nearest)
        route.append(nearest)
        current = nearest
    cost += matrix[current][0]
    route.append(0)
    return Tour(route, cost)


def _augmenting_path(
    residual: Sequence[Sequence[int]], source: int, sink: int
) -> dict[int, int] | None:
    parents: dict[int, int] = {}
    seen = {source}
    queue = deque([source])
    while queue:
        node = queue.popleft()
        for target, capacity in enumerate(residual[node]):
            if target not in seen and capacity > 0:
                seen.add(target)
                parents[target] = node
                queue.append(target)
    return parents if sink in seen else None


def max_flow(matrix: Sequence[Sequence[int]], source: int, sink: int) -> int:
    """Return the maximum flow from source to sink over a capacity matrix."""
    size = _check_square(matrix)
    for node in (source, sink):
        if not 0 <= node < size:
            raise ValueError(f"node {node} is not in a {size}-node network")
    if source == sink:
        raise ValueError("source and sink must be different nodes")

    residual = [list(row) for row in matrix]
    total = 0
    while (parents := _augmenting_path(residual, source, sink)) is not None:
        path = []
        node = sink
        while node != source:
            parent = parents[node]
            path.append((parent, node))
            node = parent
        bottleneck = min(residual[start][end] for start, end in path)
        for start, end in path:
            residual[start][end] -= bottleneck
            residual[end][start] += bottleneck
        total += bottleneck
    return total


def nearest_central(
    centrals: Sequence[Sequence[float]], point: Sequence[float]
) -> Nearest:
    """Find the central nearest to a point; the first one wins a tie."""
    if not centrals:
        raise ValueError("there must be at least one central")
    x, y = point[0], point[1]
    distances = [math.hypot(central[0] - x, central[1] - y) for central in centrals]
    index = min(range(len(distances)), key=distances.__getitem__)
    return Nearest(index, distances[index], distances)


def read_matrix(path: str | Path, rows: int, cols: int) -> list[list[int]]:
    """Read one integer per line and fill a rows x cols matrix in row order.

    Blank lines are skipped, extra values are ignored and missing ones stay 0.
    """
    if rows < 0 or cols < 0:
        raise ValueError("matrix dimensions must not be negative")
    with open(path, encoding="utf-8") as handle:
        values = [int(line) for line in handle if line.strip()]
    remaining = iter(values)
    return [[next(remaining, 0) for _ in range(cols)] for _ in range(rows)]


class _Report:
    """Writes to the console, to the report file, or to both."""

    def __init__(self, path: str | Path) -> None:
        self._handle: TextIO | None
        try:
            self._handle = open(path, "w", encoding="utf-8")
        except OSError:
            print("No se abrió un archivo")
            self._handle = None

    def __enter__(self) -> _Report:
        return self

    def __exit__(self, *exc_info: object) -> None:
        if self._handle is not None:
            self._handle.close()

    def console(self, text: str) -> None:
        sys.stdout.write(text)

    def file(self, text: str) -> None:
        if self._handle is not None:
            self._handle.write(text)

    def both(self, text: str) -> None:
        self.console(text)
        self.file(text)

    def matrix(self, title: str, matrix: Sequence[Sequence[int]], cols: int) -> None:
        self.both(f"\n{title}\n\n")
        for row in matrix:
            self.both("".join(f"[ {value} ] " for value in row[:cols]) + "\n")


def _section(report: _Report, number: int) -> None:
    report.file(f"~~~~~~~~~~~~~ {number} ~~~~~~~~~~~~~\n")


def _report_flow(report: _Report, matrix: Sequence[Sequence[int]], sink: int) -> None:
    flow = max_flow(matrix, 0, sink)
    report.file(f"Flujo Máximo {flow}\n")
    report.console(f"\nFlujo Máximo: {flow}\n")


def main(argv: list[str] | None = None) -> int:
    """Analyse the network files of a directory and write the report file."""
    parser = argparse.ArgumentParser(
        description="Shortest distances, a greedy tour, maximum flows and the nearest "
        "central for a small city network."
    )
    parser.add_argument("--dir", default=".", help="directory holding the input files")
    parser.add_argument("--output", default=OUTPUT_NAME, help="report file to write")
    args = parser.parse_args(argv)
    folder = Path(args.dir)

    try:
        distances = read_matrix(folder / "archivo.txt", COLONIES, COLONIES)
        capacities = read_matrix(folder / "archivo2.txt", COLONIES, COLONIES)
        large = read_matrix(folder / "archivo5.txt", LARGE_NETWORK, LARGE_NETWORK)
        centrals = read_matrix(folder / "archivo3.txt", COLONIES, 2)
        point = read_matrix(folder / "archivo4.txt", 1, 2)[0]
    except (OSError, ValueError) as error:
        print(error, file=sys.stderr)
        return 1

    with _Report(args.output) as report:
        try:
            _section(report, 1)
            report.matrix("Guardando matriz 1", distances, COLONIES)
            report.console("\n~~~~~~~~~~~~~~   1    ~~~~~~~~~~~~~~\n\n")
            for source in range(COLONIES):
                for target, distance in enumerate(dijkstra(distances, source), start=1):
                    report.both(f"node {source + 1} to node {target}: {distance}\n")
                report.console("\n")

            report.console("\n~~~~~~~~~~~~~~   2    ~~~~~~~~~~~~~~\n")
            _section(report, 2)
            tour = travelling_salesman(distances)
            report.console("\nRuta a seguir: 1 ")
            for node in tour.route[1:-1]:
                report.both(f"{node + 1} ")
            report.file("1\n")
            report.console("1\n")
            report.both(f"El costo mínimo es: {tour.cost}\n")

            report.console("\n~~~~~~~~~~~~~~   3    ~~~~~~~~~~~~~~\n\n")
            _section(report, 3)
            report.matrix("Guardando matriz 2", capacities, COLONIES)
            _report_flow(report, capacities, COLONIES - 1)
            report.matrix("Guardando matriz 2.1", large, LARGE_NETWORK)
            _report_flow(report, large, LARGE_NETWORK - 1)

            report.console("\n~~~~~~~~~~~~~~   4    ~~~~~~~~~~~~~~\n\n")
            _section(report, 4)
            report.matrix("Guardando matriz 3", centrals, 2)
            report.matrix("Guardando matriz 3.1", [point], 2)
            report.both("\n")

            nearest = nearest_central(centrals, point)
            report.both("Distancia de cada central con respecto a la nueva central\n")
            for number, distance in enumerate(nearest.distances, start=1):
                report.both(f"Central {number}  [ {distance:g} ] \n")
            report.both(
                f"\nLa central más cercana es la número: {nearest.index + 1}"
                f"\nSe encuentra a una distancia de: {nearest.distance:g}\n"
            )
        except ValueError as error:
            print(error, file=sys.stderr)
            return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())