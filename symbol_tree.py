# symbol_tree.py
# Binary trie over the dot/dash alphabet, stored as an arena of nodes.

from typing import Dict, Iterable, List, Optional, Tuple

from errors import TableCollisionError
from tables import CODE_TABLE
from utils import SYMBOLS


class SymbolTree:
    """
    Morse code trie with the API the decoders want:
      - SymbolTree.build(table) -> SymbolTree
      - lookup(code) -> Optional[str]
      - iter_codes() -> Iterable[(code, char)]
    Internals:
      nodes: List[{'char': Optional[str], 'edges': Dict[symbol, child_index]}]
      node 0 is the root and never carries a character.
    The tree is never mutated after build(), so one instance can be shared.
    """

    __slots__ = ("_nodes", "max_depth")

    def __init__(self, nodes: List[Dict], max_depth: int):
        self._nodes = nodes
        self.max_depth = max_depth

    # ---------- Public API ----------
    @classmethod
    def build(cls, table: Dict[str, str] = CODE_TABLE) -> "SymbolTree":
        """
        Build the trie from a {char: code} table. Raises TableCollisionError
        if two characters share a code.
        """
        nodes: List[Dict[str, object]] = [{"char": None, "edges": {}}]  # root at 0
        max_depth = 0

        for ch, code in table.items():
            if not code or any(sym not in SYMBOLS for sym in code):
                raise ValueError(f"invalid code for {ch!r}: {code!r}")
            cur = 0
            for sym in code:
                edges = nodes[cur]["edges"]
                nxt = edges.get(sym)
                if nxt is None:
                    nodes.append({"char": None, "edges": {}})
                    nxt = len(nodes) - 1
                    edges[sym] = nxt
                cur = nxt
            if nodes[cur]["char"] is not None:
                raise TableCollisionError(code, nodes[cur]["char"], ch)
            nodes[cur]["char"] = ch
            max_depth = max(max_depth, len(code))

        return cls(nodes, max_depth)

    def lookup(self, segment: str) -> Optional[str]:
        """Character whose code is exactly ``segment``, or None."""
        if not segment:
            return None
        idx = self._walk(segment)
        if idx is None:
            return None
        return self._nodes[idx]["char"]

    def iter_codes(self) -> Iterable[Tuple[str, str]]:
        """Yield (code, char) for every labeled node, dots before dashes."""
        stack = [(0, "")]
        while stack:
            idx, path = stack.pop()
            node = self._nodes[idx]
            if node["char"] is not None:
                yield path, node["char"]
            for sym in reversed(SYMBOLS):
                child = node["edges"].get(sym)
                if child is not None:
                    stack.append((child, path + sym))

    def __len__(self) -> int:
        return sum(1 for node in self._nodes if node["char"] is not None)

    # ---------- Helpers ----------
    def _walk(self, s: str) -> Optional[int]:
        """Return node index after consuming s, or None if no such path."""
        idx = 0
        nodes = self._nodes
        for sym in s:
            edges: Dict[str, int] = nodes[idx]["edges"]  # type: ignore[assignment]
            nxt = edges.get(sym)
            if nxt is None:
                return None
            idx = nxt
        return idx


def default_tree() -> SymbolTree:
    """Tree for the standard table, built on first use and shared afterwards."""
    tree = getattr(default_tree, "_tree", None)
    if tree is None:
        tree = SymbolTree.build(CODE_TABLE)
        default_tree._tree = tree
    return tree
