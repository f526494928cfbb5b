# tokenizer.py

from typing import List

from utils import SYMBOLS

SPACE = ' '


def sanitize(line: str) -> str:
    """Drop everything except dots, dashes and spaces."""
    return ''.join(ch for ch in line if ch in SYMBOLS or ch == SPACE)


def tokenize(line: str) -> List[str]:
    """Split ``line`` into code-groups and literal-space tokens.

    A single space only closes the current code-group. The second space of a
    run also emits one ``' '`` token; any further spaces in the same run are
    absorbed, so 2+ spaces always collapse to a single space token.
    """
    tokens = []
    cur = []
    spaces = 0
    for ch in sanitize(line):
        if ch == SPACE:
            spaces += 1
            if spaces == 1:
                if cur:
                    tokens.append(''.join(cur))
                    cur = []
            elif spaces == 2:
                tokens.append(SPACE)
        else:
            spaces = 0
            cur.append(ch)
    if cur:
        tokens.append(''.join(cur))
    return tokens
