import io

import pytest

from alglab.sums import main, sum_direct, sum_iterative, sum_recursive


@pytest.mark.parametrize("n", [0, 1, 2, 7, 10, 99, 1000, 12345])
def test_three_methods_agree(n):
    assert sum_iterative(n) == sum_recursive(n) == sum_direct(n)


def test_known_value():
    assert sum_direct(100) == 5050


def test_recursive_handles_upper_limit():
    assert sum_recursive(100000) == sum_direct(100000)


def test_each_step_adds_n():
    for n in range(1, 50):
        assert sum_iterative(n) - sum_iterative(n - 1) == n


def test_recursive_rejects_negative():
    with pytest.raises(ValueError):
        sum_recursive(-1)


def test_iterative_of_negative_is_zero():
    assert sum_iterative(-5) == 0


def test_main_reprompts_and_prints(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("0\n2\n3\n0\n4\n"))
    assert main([]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out[0] == "'k' fuera del rango, intente de nuevo"
    assert out[1] == "'n' fuera de rango, intente de nuevo"
    assert out[2] == f"{sum_direct(3)} {sum_direct(3)} {sum_direct(3)}"
    assert out[3] == f"{sum_direct(4)} {sum_direct(4)} {sum_direct(4)}"


def test_main_incomplete_input(monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("2\n5\n"))
    assert main([]) == 1