import os, sys
sys.path.insert(0, os.path.dirname(os.path.dirname(__file__)))

import pytest

from errors import TableCollisionError
from symbol_tree import SymbolTree, default_tree
from tables import CODE_TABLE


def test_every_code_looks_up_its_character():
    tree = SymbolTree.build(CODE_TABLE)
    for ch, code in CODE_TABLE.items():
        assert tree.lookup(code) == ch


def test_lookup_independent_of_table_order():
    reversed_table = dict(reversed(list(CODE_TABLE.items())))
    tree = SymbolTree.build(reversed_table)
    for ch, code in CODE_TABLE.items():
        assert tree.lookup(code) == ch


def test_paths_are_exactly_the_table_codes():
    tree = SymbolTree.build(CODE_TABLE)
    assert dict(tree.iter_codes()) == {code: ch for ch, code in CODE_TABLE.items()}
    assert len(tree) == len(CODE_TABLE)
    assert tree.max_depth == 5


def test_iter_codes_dots_before_dashes():
    tree = SymbolTree.build({'E': '.', 'T': '-', 'I': '..'})
    assert list(tree.iter_codes()) == [('.', 'E'), ('..', 'I'), ('-', 'T')]


def test_lookup_misses():
    tree = SymbolTree.build(CODE_TABLE)
    assert tree.lookup('') is None
    # runs off the tree
    assert tree.lookup('......') is None
    # valid prefix of '..---' but not a code itself
    assert tree.lookup('..--') is None
    assert tree.lookup('..---') == '2'
    assert tree.lookup('.x') is None


def test_collision_raises():
    with pytest.raises(TableCollisionError) as exc:
        SymbolTree.build({'A': '.-', 'B': '.-'})
    assert exc.value.code == '.-'
    assert (exc.value.first, exc.value.second) == ('A', 'B')
    with pytest.raises(ValueError):
        SymbolTree.build({'A': '.-', 'Z': '.-'})


def test_invalid_code_raises():
    with pytest.raises(ValueError):
        SymbolTree.build({'A': '.x'})
    with pytest.raises(ValueError):
        SymbolTree.build({'A': ''})


def test_default_tree_is_shared():
    assert default_tree() is default_tree()
    assert default_tree().lookup('--.-') == 'Q'
