import os, sys
sys.path.insert(0, os.path.dirname(os.path.dirname(__file__)))

import pytest

from decoder import LineDecoder, TokenResult, decode_line, encode_line
from errors import ErrorKind
from qcode import Strategy
from symbol_tree import SymbolTree
from tables import CODE_TABLE


def test_basic_lines():
    assert decode_line('.-') == 'A'
    assert decode_line('.- -...') == 'AB'
    assert decode_line('.-  -...') == 'A B'
    assert decode_line('.-   -...') == 'A B'


def test_plain_text_decodes_to_nothing():
    assert decode_line('HELLO WORLD') == ''
    assert decode_line('') == ''


def test_foreign_symbols_dropped():
    assert decode_line('.-x -...') == 'AB'


@pytest.mark.parametrize('ch', sorted(CODE_TABLE))
def test_round_trip_single_character(ch):
    assert decode_line(encode_line(ch)) == ch


def test_round_trip_text():
    text = 'CQ DE 73'
    assert encode_line(text) == '-.-. --.-  -.. .  --... ...--'
    assert decode_line(encode_line(text)) == text


def test_encode_unknown_character():
    with pytest.raises(KeyError):
        encode_line('A!')


def test_fixed_q_codes_in_line():
    assert decode_line('--.---.-.') == 'QTC'
    assert decode_line('--.---.-..-') == 'QTCET'
    assert decode_line('.-  --.---.-.  -.-') == 'A QTC K'
    assert decode_line('--.-....-.--') == 'QUW'


def test_failures_are_placeholders():
    assert decode_line('..-- .-') == '?A'
    assert decode_line('...... .-') == '?A'
    assert decode_line('--.------') == '?'


def test_error_kinds():
    decoder = LineDecoder()
    assert decoder.decode_token('..--') == TokenResult('..--', '?', ErrorKind.UNMATCHED_SYMBOL)
    assert decoder.decode_token('......').error is ErrorKind.UNMATCHED_SYMBOL
    assert decoder.decode_token('--.------').error is ErrorKind.INCOMPLETE_QCODE
    assert decoder.decode_token('--.---.-') == TokenResult('--.---.-', '?', ErrorKind.INCOMPLETE_QCODE)
    assert decoder.decode_token(' ') == TokenResult(' ', ' ')
    assert decoder.decode_token('--.---.-.') == TokenResult('--.---.-.', 'QTC')


def test_trailing_failure_keeps_q_code():
    decoder = LineDecoder(tree=SymbolTree.build({'A': '.-'}))
    result = decoder.decode_token('--.---.-.-')
    assert result.text == 'QTC?'
    assert result.error is ErrorKind.UNMATCHED_SYMBOL


def test_decode_tokens_order():
    results = LineDecoder().decode_tokens('.-  ..-- -')
    assert [r.text for r in results] == ['A', ' ', '?', 'T']


def test_spaceless_strategy_in_line():
    assert decode_line('--.-.-.-', Strategy.SPACELESS) == 'QRT'
    assert decode_line('.-  --.-.-.-', Strategy.SPACELESS) == 'A QRT'
    # the fixed tables have no family for this prefix
    assert decode_line('--.-.-.-') == '?'


def test_spaceless_strategy_failures():
    decoder = LineDecoder(strategy=Strategy.SPACELESS)
    assert decoder.decode_token('--.-.-----').error is ErrorKind.INCOMPLETE_QCODE
    assert decoder.decode_token('......').error is ErrorKind.UNMATCHED_SYMBOL
    assert decoder.decode_line('.- --.-.-----') == 'A?'
