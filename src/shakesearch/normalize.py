from __future__ import annotations
from enum import Enum
from typing import List

# ASCII A-Z -> a-z, every other byte (including UTF-8 multi-byte sequences) untouched
_FOLD_TABLE = bytes.maketrans(b"ABCDEFGHIJKLMNOPQRSTUVWXYZ", b"abcdefghijklmnopqrstuvwxyz")

_CR = 0x0D
_LF = 0x0A


def fold(data: bytes) -> bytes:
    """
    Lowercase ASCII letters byte-wise.
    The result has the same length as the input and byte k of the result
    always comes from byte k of the input, so offsets stay valid in both.
    Not Unicode-aware: 'É' (two bytes in UTF-8) is left as is.
    """
    return data.translate(_FOLD_TABLE)


def fold_query(query: str) -> bytes:
    """UTF-8 encode a query and fold it with the same rule as the corpus."""
    return fold(query.encode("utf-8"))


class _State(Enum):
    NORMAL = "normal"
    SAW_CR = "saw_cr"


class BreakScanner:
    """
    Finds paragraph starts while the corpus is streamed, without lookahead.

    A break is a CR followed by any run of CR/LF bytes (CRLF, lone CR, or a
    blank line such as CRLF CRLF). The first byte after the run starts a new
    paragraph and its offset is committed as a boundary. A lone LF is not a
    break. Chunks may split a break anywhere; state carries across feed() calls.
    """

    def __init__(self) -> None:
        self._state = _State.NORMAL
        self.boundaries: List[int] = [0]

    def feed(self, chunk: bytes, base: int) -> None:
        """Scan `chunk`, whose first byte sits at corpus offset `base`."""
        pos, n = 0, len(chunk)
        while pos < n:
            if self._state is _State.SAW_CR:
                b = chunk[pos]
                if b != _CR and b != _LF:
                    self._commit(base + pos)
                    self._state = _State.NORMAL
                pos += 1
            else:
                # nothing to track until the next CR
                cr = chunk.find(b"\r", pos)
                if cr < 0:
                    return
                self._state = _State.SAW_CR
                pos = cr + 1

    def _commit(self, offset: int) -> None:
        if offset > self.boundaries[-1]:
            self.boundaries.append(offset)
