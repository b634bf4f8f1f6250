import io
import sys

import pytest

from alglab.trie import Trie, main


@pytest.fixture
def trie():
    built = Trie()
    for word in ["hola", "hoja", "casa"]:
        built.insert(word)
    return built


def test_contains_inserted_words(trie):
    assert trie.contains("hola")
    assert trie.contains("hoja")
    assert trie.contains("casa")


def test_prefix_is_not_a_word(trie):
    assert not trie.contains("ho")
    assert not trie.contains("cas")


def test_missing_word(trie):
    assert not trie.contains("perro")
    assert not trie.contains("holas")


def test_in_operator(trie):
    assert "casa" in trie
    assert "cas" not in trie


def test_prefix_becomes_word_after_insert(trie):
    trie.insert("ho")
    assert trie.contains("ho")
    assert trie.contains("hola")


def test_dfs_alphabetical_preorder():
    built = Trie()
    built.insert("ba")
    built.insert("ab")
    assert built.dfs() == ["a", "b", "b", "a"]


def test_dfs_shares_prefixes(trie):
    letters = trie.dfs()
    assert letters == list("casa") + ["h", "o", "j", "a", "l", "a"]


def test_empty_trie_dfs():
    assert Trie().dfs() == []


def test_empty_word():
    built = Trie()
    assert not built.contains("")
    built.insert("")
    assert built.contains("")


@pytest.mark.parametrize("word", ["Hola", "ho la", "ñu", "a1"])
def test_insert_rejects_other_characters(word):
    with pytest.raises(ValueError):
        Trie().insert(word)


def test_main_output(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO("2\nhola\nhoja\n2\nhola\nhoy\n"))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "h o j a l a " in out
    assert "hola true" in out
    assert "hoy false" in out


def test_main_reasks_zero_count(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO("0 1 sol 1 sol"))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "Vuelve a ingresar el valor" in out
    assert "sol true" in out