import io

import pytest

from alglab.logs import (
    MONTHS,
    date_key,
    main,
    month_to_number,
    number_to_month,
    search_date,
)

SAMPLE = [
    "Oct 01 10:00:01 192.168.0.1:80 Failed password",
    "Feb 10 08:30:00 10.0.0.2:22 Illegal user",
    "Oct 01 23:59:59 10.0.0.3:443 Failed password",
]


def test_month_to_number_example():
    assert month_to_number(["Aug 05 10:00:01 x"]) == ["08 05 10:00:01 x"]


def test_round_trip_every_month():
    lines = [f"{name} 15 rest" for name in MONTHS]
    assert number_to_month(month_to_number(lines)) == lines


def test_numbers_follow_calendar_order():
    numbered = month_to_number([f"{name} x" for name in MONTHS])
    assert numbered == sorted(numbered)


def test_month_to_number_rejects_unknown():
    with pytest.raises(ValueError):
        month_to_number(["Foo 01 rest"])


@pytest.mark.parametrize("line", ["13 01 rest", "00 01 rest", "ab 01 rest", "1"])
def test_number_to_month_rejects_bad_prefix(line):
    with pytest.raises(ValueError):
        number_to_month([line])


def test_date_key_pads_small_numbers():
    assert date_key(5, 8) == "08 05"


def test_date_key_matches_numbered_line():
    assert month_to_number(["Oct 15 rest"])[0][:5] == date_key(15, 10)


def test_search_date_finds_all_matches():
    numbered = month_to_number(SAMPLE)
    assert search_date(numbered, date_key(1, 10)) == [0, 2]


def test_search_date_no_match_is_empty():
    numbered = month_to_number(SAMPLE)
    assert search_date(numbered, date_key(2, 3)) == []


def test_main_sorts_and_searches(tmp_path, monkeypatch, capsys):
    source = tmp_path / "bitacora.txt"
    source.write_text("\n".join(SAMPLE) + "\n", encoding="utf-8")
    output = tmp_path / "sorted.txt"
    monkeypatch.setattr("sys.stdin", io.StringIO("1 10\n"))

    assert main(["--input", str(source), "--output", str(output)]) == 0

    written = output.read_text(encoding="utf-8").splitlines()
    assert written == [SAMPLE[2], SAMPLE[0], SAMPLE[1]]
    printed = capsys.readouterr().out.splitlines()
    assert printed == [SAMPLE[0], SAMPLE[2]]


def test_main_missing_file(tmp_path, monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("1 10\n"))
    result = main(["--input", str(tmp_path / "absent.txt"),
                   "--output", str(tmp_path / "out.txt")])
    assert result == 1