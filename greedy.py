# greedy.py

from typing import Optional, Tuple

from symbol_tree import SymbolTree, default_tree
from utils import FAILURE, vlog


def greedy_scan(group: str, tree: Optional[SymbolTree] = None) -> Tuple[str, Optional[int]]:
    """Decode ``group`` left to right, shortest matching code first.

    Returns the decoded text and the position where decoding stopped, or None
    if the whole group decoded. On a position with no match a single FAILURE
    is appended and the rest of the group is abandoned.
    """
    tree = tree if tree is not None else default_tree()
    out = []
    i = 0
    n = len(group)
    while i < n:
        for length in range(1, min(tree.max_depth, n - i) + 1):
            ch = tree.lookup(group[i:i + length])
            if ch is not None:
                out.append(ch)
                i += length
                break
        else:
            vlog(f"Unmatched symbol at {i} in {group!r}")
            out.append(FAILURE)
            return ''.join(out), i
    return ''.join(out), None


def greedy_decode(group: str, tree: Optional[SymbolTree] = None) -> str:
    text, _ = greedy_scan(group, tree)
    return text
