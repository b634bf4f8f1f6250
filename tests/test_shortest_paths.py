import io

import pytest

from alglab.shortest_paths import INF, dijkstra, floyd_warshall, from_input, main

RAW = [
    [0, 4, -1],
    [-1, 0, 1],
    [2, -1, 0],
]

LARGER = [
    [0, 3, -1, 7, -1],
    [8, 0, 2, -1, -1],
    [5, -1, 0, 1, 6],
    [2, -1, -1, 0, 4],
    [-1, 1, -1, -1, 0],
]


def test_from_input_replaces_missing_edges():
    assert from_input([[0, -1], [3, 0]]) == [[0, INF], [3, 0]]


def test_from_input_rejects_non_square():
    with pytest.raises(ValueError):
        from_input([[0, 1], [1]])


def test_dijkstra_small_graph():
    assert dijkstra(from_input(RAW), 0) == [0, 4, 5]


@pytest.mark.parametrize("raw", [RAW, LARGER])
def test_dijkstra_agrees_with_floyd(raw):
    matrix = from_input(raw)
    floyd = floyd_warshall(matrix)
    for source in range(len(matrix)):
        assert dijkstra(matrix, source) == floyd[source]


def test_distances_never_exceed_direct_edge():
    matrix = from_input(LARGER)
    for source, row in enumerate(matrix):
        for distance, direct in zip(dijkstra(matrix, source), row):
            assert distance <= direct


def test_floyd_satisfies_triangle_inequality():
    result = floyd_warshall(from_input(LARGER))
    size = len(result)
    for i in range(size):
        for j in range(size):
            for k in range(size):
                assert result[i][j] <= result[i][k] + result[k][j]


def test_unreachable_node_stays_infinite():
    matrix = from_input([[0, -1], [-1, 0]])
    assert dijkstra(matrix, 0) == [0, INF]
    assert floyd_warshall(matrix) == [[0, INF], [INF, 0]]


def test_floyd_does_not_modify_input():
    matrix = from_input(RAW)
    snapshot = [list(row) for row in matrix]
    floyd_warshall(matrix)
    assert matrix == snapshot


def test_dijkstra_rejects_bad_source():
    with pytest.raises(ValueError):
        dijkstra(from_input(RAW), 3)


def test_main_prints_both_algorithms(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("3\n0 4 -1\n-1 0 1\n2 -1 0\n"))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "[ 0 ] [ 4 ] [ -1 ] " in out
    assert "node 1 to node 3: 5" in out
    assert "Floyd" in out


def test_main_rejects_incomplete_input(monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("2\n0 1\n"))
    assert main([]) == 1