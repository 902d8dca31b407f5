import sys
import os

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

import pytest

from src.navigatex.structures.trie import Trie

def test_trie_suggestions():
    print("--- Iniciando Teste da Trie ---")
    trie = Trie()
    for city in ["Mumbai", "Delhi", "Bangalore", "Chennai", "Mysore"]:
        trie.insert(city)

    suggestions = trie.suggest("M")
    print(f"Sugestões para 'M': {suggestions}")
    assert suggestions == ["mumbai", "mysore"], "Sugestões devem sair em minúsculas e em ordem alfabética"
    assert trie.suggest("Ban") == ["bangalore"]
    assert trie.suggest("x") == []
    assert trie.suggest("") == ["bangalore", "chennai", "delhi", "mumbai", "mysore"]
    print(">> SUCESSO: Auto-completar funcionando.")

def test_non_letters_are_skipped():
    trie = Trie()
    trie.insert("New Delhi")
    trie.insert("Navi-Mumbai 2")

    assert trie.contains("newdelhi")
    assert trie.contains("NEW DELHI")
    assert trie.suggest("n") == ["navimumbai", "newdelhi"]

def test_prefix_is_not_a_word_until_inserted():
    trie = Trie()
    trie.insert("Mysore")
    assert not trie.contains("My")
    assert trie.word_count() == 1

    trie.insert("my")
    trie.insert("MY")
    assert trie.contains("my")
    assert trie.word_count() == 2, "Palavra repetida não conta duas vezes"
    assert trie.suggest("my") == ["my", "mysore"]

def test_word_without_letters_is_rejected():
    trie = Trie()
    with pytest.raises(ValueError):
        trie.insert("123 -")
    with pytest.raises(ValueError):
        trie.insert("")
    assert trie.is_empty()

def test_clear():
    trie = Trie()
    trie.insert("Chennai")
    trie.clear()
    assert trie.is_empty()
    assert trie.suggest("c") == []

if __name__ == "__main__":
    test_trie_suggestions()
