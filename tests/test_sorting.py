import io

import pytest

from alglab.sorting import main, merge_sort, sort_descending


@pytest.mark.parametrize(
    "values",
    [
        [],
        [1.0],
        [3.0, 1.0, 2.0],
        [5, 4, 3, 2, 1],
        [2, 2, 1, 1, 3, 3],
        [0.5, -1.25, 7.0, 7.0, -3.0, 2.5, 0.0],
    ],
)
def test_merge_sort_matches_sorted(values):
    assert merge_sort(values) == sorted(values)


def test_merge_sort_strings():
    lines = ["08 10 b", "01 02 a", "08 10 a", "12 31 z"]
    assert merge_sort(lines) == sorted(lines)


def test_merge_sort_does_not_modify_input():
    values = [4, 1, 3]
    result = merge_sort(values)
    assert values == [4, 1, 3]
    assert result == [1, 3, 4]


def test_sort_descending_is_reverse_of_ascending():
    values = [1.5, -2.0, 4.0, 0.0, 4.0]
    assert sort_descending(values) == sorted(values, reverse=True)


def test_sort_descending_accepts_iterators():
    assert sort_descending(iter([2, 9, 5])) == [9, 5, 2]


def test_main_prints_largest_first(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("3\n1.5\n-2\n4\n"))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "Elementos ordenados de mayor a menor" in out
    assert out.rstrip("\n").splitlines()[-3:] == ["4", "1.5", "-2"]


def test_main_reports_incomplete_input(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("3\n1.0\n"))
    assert main([]) == 1