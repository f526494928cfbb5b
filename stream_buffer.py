# stream_buffer.py
# Accumulates a spaceless symbol stream until it resolves to a Q-code or is
# given up on. Every buffer lifecycle ends in RESOLVED or DISCARDED.

from enum import Enum
from typing import Iterable, List, NamedTuple, Optional

from errors import ErrorKind
from qcode import QCodeResolver, Strategy
from tables import Q_PREFIX
from utils import MAX_SPACELESS_LEN, MIN_SPACELESS_LEN, SYMBOLS, vlog


class BufferState(Enum):
    EMPTY = "empty"
    FILLING = "filling"


class EventKind(Enum):
    WAITING = "waiting"
    RESOLVED = "resolved"
    DISCARDED = "discarded"


class DecodeEvent(NamedTuple):
    kind: EventKind
    code: Optional[str] = None
    reason: Optional[ErrorKind] = None
    symbols: str = ''


class StreamBuffer:
    """One per input session; not shared between sessions."""

    def __init__(self, resolver: Optional[QCodeResolver] = None, max_len: int = MAX_SPACELESS_LEN):
        self.resolver = resolver if resolver is not None else QCodeResolver()
        self.max_len = max_len
        self._symbols: List[str] = []

    @property
    def state(self) -> BufferState:
        return BufferState.FILLING if self._symbols else BufferState.EMPTY

    @property
    def symbols(self) -> str:
        return ''.join(self._symbols)

    def __len__(self) -> int:
        return len(self._symbols)

    def reset(self):
        self._symbols = []

    def append(self, symbol: str) -> DecodeEvent:
        if symbol not in SYMBOLS:
            vlog(f"Ignoring {symbol!r}")
            return DecodeEvent(EventKind.WAITING, symbols=self.symbols)
        self._symbols.append(symbol)
        return self._evaluate()

    def extend(self, symbols: Iterable[str]) -> DecodeEvent:
        """Append a whole input segment, then evaluate once."""
        self._symbols.extend(sym for sym in symbols if sym in SYMBOLS)
        return self._evaluate()

    def _evaluate(self) -> DecodeEvent:
        current = self.symbols
        if len(current) < MIN_SPACELESS_LEN:
            return DecodeEvent(EventKind.WAITING, symbols=current)

        if not current.startswith(Q_PREFIX):
            return self._discard(ErrorKind.NOT_Q_PREFIXED)

        code = self.resolver.resolve(current, Strategy.SPACELESS)
        if code is not None:
            self.reset()
            return DecodeEvent(EventKind.RESOLVED, code=code, symbols=current)

        if len(current) > self.max_len:
            return self._discard(ErrorKind.OVERSIZED_BUFFER)
        return DecodeEvent(EventKind.WAITING, symbols=current)

    def flush(self) -> Optional[DecodeEvent]:
        """End of input: discard whatever is still buffered. None if nothing was."""
        if not self._symbols:
            return None
        return self._discard(ErrorKind.INCOMPLETE_QCODE)

    def _discard(self, reason: ErrorKind) -> DecodeEvent:
        current = self.symbols
        vlog(f"Discarding {current!r}: {reason.value}")
        self.reset()
        return DecodeEvent(EventKind.DISCARDED, reason=reason, symbols=current)


def feed_symbol(buffer: StreamBuffer, symbol: str) -> DecodeEvent:
    return buffer.append(symbol)
