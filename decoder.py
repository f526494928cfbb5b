# decoder.py

from typing import Dict, List, NamedTuple, Optional

from errors import ErrorKind
from greedy import greedy_scan
from qcode import QCodeResolver, Strategy
from symbol_tree import SymbolTree, default_tree
from tables import CODE_TABLE, Q_PREFIX
from tokenizer import SPACE, tokenize
from utils import FAILURE, FIXED_PREFIX_LEN, vlog


class TokenResult(NamedTuple):
    token: str
    text: str
    error: Optional[ErrorKind] = None


class LineDecoder:
    """Decodes whole lines of space-separated code-groups.

    Tokens shorter than a fixed-family prefix must match a code exactly.
    Longer tokens can only be Q-codes and go through the resolver with the
    configured strategy.
    """

    def __init__(
        self,
        tree: Optional[SymbolTree] = None,
        resolver: Optional[QCodeResolver] = None,
        strategy: Strategy = Strategy.FIXED,
    ):
        self.tree = tree if tree is not None else default_tree()
        self.resolver = resolver if resolver is not None else QCodeResolver(self.tree)
        self.strategy = strategy

    def decode_token(self, token: str) -> TokenResult:
        if token == SPACE:
            return TokenResult(token, SPACE)

        if len(token) < FIXED_PREFIX_LEN:
            ch = self.tree.lookup(token)
            if ch is None:
                vlog(f"No code matches {token!r}")
                return TokenResult(token, FAILURE, ErrorKind.UNMATCHED_SYMBOL)
            return TokenResult(token, ch)

        if self.strategy is Strategy.SPACELESS:
            return self._decode_spaceless(token)
        return self._decode_fixed(token)

    def _decode_fixed(self, token):
        if not self.resolver.is_q_shaped(token):
            vlog(f"{token!r} is too long for a character and has no Q family prefix")
            return TokenResult(token, FAILURE, ErrorKind.UNMATCHED_SYMBOL)
        match = self.resolver.match_fixed(token)
        if match is None:
            return TokenResult(token, FAILURE, ErrorKind.INCOMPLETE_QCODE)
        code, rest = match
        tail, stopped = greedy_scan(rest, self.tree)
        error = ErrorKind.UNMATCHED_SYMBOL if stopped is not None else None
        return TokenResult(token, code + tail, error)

    def _decode_spaceless(self, token):
        if not token.startswith(Q_PREFIX):
            vlog(f"{token!r} is too long for a character and does not start with Q")
            return TokenResult(token, FAILURE, ErrorKind.UNMATCHED_SYMBOL)
        code = self.resolver.resolve(token, Strategy.SPACELESS)
        if code is None:
            vlog(f"No registered Q-code splits {token!r}")
            return TokenResult(token, FAILURE, ErrorKind.INCOMPLETE_QCODE)
        return TokenResult(token, code)

    def decode_tokens(self, line: str) -> List[TokenResult]:
        return [self.decode_token(token) for token in tokenize(line)]

    def decode_line(self, line: str) -> str:
        return ''.join(result.text for result in self.decode_tokens(line))


def default_decoder(strategy: Strategy = Strategy.FIXED) -> LineDecoder:
    cache = getattr(default_decoder, "_cache", None)
    if cache is None:
        cache = {}
        default_decoder._cache = cache
    if strategy not in cache:
        cache[strategy] = LineDecoder(strategy=strategy)
    return cache[strategy]


def decode_line(text: str, strategy: Strategy = Strategy.FIXED) -> str:
    """Decode one line; undecodable tokens come back as '?'."""
    return default_decoder(strategy).decode_line(text)


def encode_line(text: str, table: Dict[str, str] = CODE_TABLE) -> str:
    """Encode text as code-groups: one space between letters, two between words.

    Raises KeyError for characters the table does not cover.
    """
    words = text.upper().split()
    return '  '.join(' '.join(table[ch] for ch in word) for word in words)
