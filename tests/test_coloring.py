import io

import pytest

from alglab.coloring import IMPOSSIBLE, MAX_COLORS, color_graph, is_safe, main

TRIANGLE = [[0, 1, 1], [1, 0, 1], [1, 1, 0]]
COMPLETE_FOUR = [[0 if i == j else 1 for j in range(4)] for i in range(4)]
CYCLE_FOUR = [
    [0, 1, 0, 1],
    [1, 0, 1, 0],
    [0, 1, 0, 1],
    [1, 0, 1, 0],
]
WHEEL = [
    [0, 1, 1, 1, 1],
    [1, 0, 1, 0, 1],
    [1, 1, 0, 1, 0],
    [1, 0, 1, 0, 1],
    [1, 1, 0, 1, 0],
]


def _assert_proper(adjacency, colors):
    assert len(colors) == len(adjacency)
    assert all(1 <= color <= MAX_COLORS for color in colors)
    for i, row in enumerate(adjacency):
        for j, edge in enumerate(row):
            if edge == 1 and i != j:
                assert colors[i] != colors[j]


def test_triangle_uses_three_colours():
    assert color_graph(TRIANGLE) == [1, 2, 3]


def test_complete_four_is_impossible():
    assert color_graph(COMPLETE_FOUR) is None


def test_graph_without_edges_uses_first_colour():
    colors = color_graph([[0] * 3 for _ in range(3)])
    assert set(colors) == {1}


@pytest.mark.parametrize("adjacency", [TRIANGLE, CYCLE_FOUR, WHEEL])
def test_colouring_is_proper(adjacency):
    _assert_proper(adjacency, color_graph(adjacency))


def test_even_cycle_needs_only_two_colours():
    assert max(color_graph(CYCLE_FOUR)) <= 2


def test_is_safe_checks_neighbours():
    colors = [1, 0, 0]
    assert not is_safe(TRIANGLE, 1, 1, colors)
    assert is_safe(TRIANGLE, 1, 2, colors)


def test_non_square_matrix_rejected():
    with pytest.raises(ValueError):
        color_graph([[0, 1], [1]])


def test_main_prints_colouring(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("3\n0 1 1\n1 0 1\n1 1 0\n"))
    assert main([]) == 0
    out = capsys.readouterr().out
    colors = color_graph(TRIANGLE)
    for node, color in enumerate(colors):
        assert f"Nodo: {node} Color asignado {color}" in out


def test_main_reports_impossible(monkeypatch, capsys):
    values = " ".join(str(value) for row in COMPLETE_FOUR for value in row)
    monkeypatch.setattr("sys.stdin", io.StringIO(f"4\n{values}\n"))
    assert main([]) == 0
    assert IMPOSSIBLE in capsys.readouterr().out


def test_main_incomplete_input(monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("2\n0 1\n"))
    assert main([]) == 1