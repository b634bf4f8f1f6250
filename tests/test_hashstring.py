import io
import sys

import pytest

from alglab.hashstring import (
    build_table,
    column_sums,
    hash_text,
    hex_groups,
    main,
    prepare_text,
)


def test_prepare_text_removes_spaces_and_ends_lines():
    assert prepare_text(["a b", "c"]) == "ab\nc\n"


def test_prepare_text_keeps_empty_lines():
    assert prepare_text(["", "x"]) == "\nx\n"


def test_build_table_skips_last_character_and_pads_with_n():
    table = build_table("ab\n", 16)
    assert table == [[ord("a"), ord("b")] + [16] * 14]


def test_build_table_row_count_and_full_padding_row():
    text = "x" * 31 + "\n"
    table = build_table(text, 16)
    assert len(table) == len(text) // 16 + 1
    assert all(len(row) == 16 for row in table)
    assert table[0] == [ord("x")] * 16
    assert table[1] == [ord("x")] * 15 + [16]
    assert table[2] == [16] * 16


def test_build_table_rejects_zero_columns():
    with pytest.raises(ValueError):
        build_table("abc", 0)


def test_column_sums_are_reduced_modulo_256():
    assert column_sums([[128] * 16, [128] * 16], 16) == [0] * 16


def test_column_sums_unchanged_by_row_of_256():
    table = build_table(prepare_text(["hello world", "more text here"]), 16)
    assert column_sums(table + [[256] * 16], 16) == column_sums(table, 16)
    assert all(0 <= value < 256 for value in column_sums(table, 16))


def test_hex_groups_uppercase_in_four_groups():
    assert hex_groups([10] * 16, 16) == ["AAAA"] * 4


def test_hex_groups_no_zero_padding():
    groups = hex_groups([5] * 32, 32)
    assert len(groups) == 4
    assert "".join(groups) == "5" * 32


def test_hex_groups_full_byte():
    groups = hex_groups([255] * 16, 16)
    assert "".join(groups) == "FF" * 16


@pytest.mark.parametrize("n", [12, 15, 18, 68])
def test_hash_text_rejects_invalid_width(n):
    with pytest.raises(ValueError):
        hash_text("abc", n)


def test_hash_text_ignores_spaces():
    assert hash_text("a b c\nd e", 16) == hash_text("abc\nde", 16)


def test_hash_text_has_four_groups():
    result = hash_text("some sample\ntext", 24)
    assert len(result.split(" ")) == 4


def test_hash_text_matches_pipeline():
    text = "line one\nline two\n"
    table = build_table(prepare_text(text.split("\n")), 16)
    expected = " ".join(hex_groups(column_sums(table, 16), 16))
    assert hash_text(text, 16) == expected


def test_main_prints_hash(tmp_path, monkeypatch, capsys):
    content = "hola mundo\nsegunda linea\n"
    (tmp_path / "sample.txt").write_text(content, encoding="utf-8")
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr(sys, "stdin", io.StringIO("16\nsample\n"))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "Concatenación" in out
    assert hash_text(content, 16) in out


def test_main_reasks_invalid_n(tmp_path, monkeypatch, capsys):
    (tmp_path / "sample.txt").write_text("abc", encoding="utf-8")
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr(sys, "stdin", io.StringIO("15 16 sample"))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert ".:Entrada Invalida:." in out


def test_main_missing_file(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr(sys, "stdin", io.StringIO("16 missing"))
    assert main([]) == 1
    assert "No se encontró el archivo" in capsys.readouterr().out