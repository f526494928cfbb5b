# qcode.py
# Q-code recovery. Two strategies share one registry and one tree:
#   FIXED     - 6-symbol family prefix + family-specific suffix table
#   SPACELESS - strip the Q code and search split points of the remainder

from enum import Enum
from typing import Dict, Iterable, Iterator, Optional, Tuple

from greedy import greedy_decode
from symbol_tree import SymbolTree, default_tree
from tables import Q_CODES, Q_FAMILIES, Q_PREFIX, QFamily
from utils import FIXED_PREFIX_LEN, MIN_SPACELESS_LEN, SUFFIX_CHUNK, vlog


class Strategy(Enum):
    FIXED = "fixed"
    SPACELESS = "spaceless"


class QCodeResolver:
    def __init__(
        self,
        tree: Optional[SymbolTree] = None,
        registry: Iterable[str] = Q_CODES,
        families: Dict[str, QFamily] = Q_FAMILIES,
    ):
        self.tree = tree if tree is not None else default_tree()
        self.registry = frozenset(registry)
        self.families = dict(families)
        self._by_prefix: Dict[str, QFamily] = {}
        for fam in self.families.values():
            if len(fam.prefix) != FIXED_PREFIX_LEN:
                raise ValueError(f"family {fam.tag}: prefix must be {FIXED_PREFIX_LEN} symbols")
            if fam.width <= 0 or fam.width % SUFFIX_CHUNK:
                raise ValueError(f"family {fam.tag}: width must be a positive multiple of {SUFFIX_CHUNK}")
            if fam.prefix in self._by_prefix:
                raise ValueError(f"families {self._by_prefix[fam.prefix].tag} and {fam.tag} share a prefix")
            self._by_prefix[fam.prefix] = fam

    def resolve(self, token: str, strategy: Strategy = Strategy.FIXED) -> Optional[str]:
        if strategy is Strategy.FIXED:
            return self.resolve_fixed(token)
        if strategy is Strategy.SPACELESS:
            return self.resolve_spaceless(token)
        raise ValueError(f"unknown strategy: {strategy!r}")

    # ---------- Fixed tables ----------
    def is_q_shaped(self, token: str) -> bool:
        return len(token) >= FIXED_PREFIX_LEN and token[:FIXED_PREFIX_LEN] in self._by_prefix

    def match_fixed(self, token: str) -> Optional[Tuple[str, str]]:
        """Return (Q-code, trailing symbols) or None if the token does not resolve."""
        if len(token) < FIXED_PREFIX_LEN:
            return None
        fam = self._by_prefix.get(token[:FIXED_PREFIX_LEN])
        if fam is None:
            return None
        end = FIXED_PREFIX_LEN + fam.width
        if len(token) < end:
            vlog(f"Q{fam.tag} token {token!r} is shorter than its {fam.width}-symbol suffix")
            return None
        chunks = [token[i:i + SUFFIX_CHUNK] for i in range(FIXED_PREFIX_LEN, end, SUFFIX_CHUNK)]
        if any(chunk not in fam.suffixes for chunk in chunks):
            vlog(f"Q{fam.tag} suffix {token[FIXED_PREFIX_LEN:end]!r} not in table")
            return None
        code = 'Q' + fam.tag + fam.suffixes[chunks[-1]]
        if code not in self.registry:
            vlog(f"{code} is not a registered Q-code")
            return None
        return code, token[end:]

    def resolve_fixed(self, token: str) -> Optional[str]:
        match = self.match_fixed(token)
        if match is None:
            return None
        code, rest = match
        return code + greedy_decode(rest, self.tree)

    # ---------- Spaceless split search ----------
    def iter_splits(self, buffer: str) -> Iterator[Tuple[int, str]]:
        """
        Yield (split point, candidate code) for every split of the post-Q
        remainder whose halves both decode, in ascending split order.
        Candidates are not filtered against the registry.
        """
        if len(buffer) < MIN_SPACELESS_LEN or not buffer.startswith(Q_PREFIX):
            return
        remainder = buffer[len(Q_PREFIX):]
        for i in range(1, len(remainder)):
            first = self.tree.lookup(remainder[:i])
            if first is None:
                continue
            second = self.tree.lookup(remainder[i:])
            if second is None:
                continue
            yield i, 'Q' + first + second

    def resolve_spaceless(self, buffer: str) -> Optional[str]:
        """First registered candidate by ascending split point; None means keep waiting."""
        for i, code in self.iter_splits(buffer):
            if code in self.registry:
                return code
            vlog(f"Split {i} of {buffer!r} gives unregistered {code}")
        return None
