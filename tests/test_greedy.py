import os, sys
sys.path.insert(0, os.path.dirname(os.path.dirname(__file__)))

import pytest

from greedy import greedy_decode, greedy_scan
from symbol_tree import SymbolTree


def test_shortest_match_wins():
    # '.' (E) is tried before '.-' (A)
    assert greedy_decode('.-') == 'ET'
    assert greedy_decode('...') == 'EEE'


def test_empty_group():
    assert greedy_scan('') == ('', None)


def test_longer_codes_used_when_short_ones_missing():
    tree = SymbolTree.build({'A': '.-', 'N': '-.'})
    assert greedy_scan('.--.', tree) == ('AN', None)


def test_stops_at_first_unmatched_position():
    tree = SymbolTree.build({'A': '.-', 'N': '-.'})
    assert greedy_scan('.-..-.', tree) == ('A?', 2)
    assert greedy_scan('--', tree) == ('?', 0)
    assert greedy_decode('--.-', tree) == '?'


def test_match_bounded_by_longest_code():
    tree = SymbolTree.build({'H': '....', 'E': '.'})
    assert tree.max_depth == 4
    assert greedy_decode('....', tree) == 'EEEE'
    tree = SymbolTree.build({'H': '....'})
    assert greedy_scan('.....', tree) == ('H?', 4)
