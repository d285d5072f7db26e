from __future__ import annotations
import bisect
import logging
import time
from array import array
from typing import List

import numpy as np
from pydivsufsort import divsufsort

log = logging.getLogger(__name__)


def build_suffix_array(data: bytes) -> array:
    """Suffix array of `data` (libdivsufsort) as a compact array('q') of offsets."""
    sa = array("q")
    if not data:
        return sa
    sa.frombytes(divsufsort(np.frombuffer(data, dtype=np.uint8).copy()).astype(np.int64).tobytes())
    return sa


class SuffixArrayIndex:
    """
    Full-text index over one immutable byte string.
    lookup(pattern) finds every start offset of `pattern` with two binary
    searches over the sorted suffixes: O(m log n + k).
    Pickles as the data plus a compact array('q') of suffix offsets.
    """

    def __init__(self, data: bytes) -> None:
        t0 = time.perf_counter()
        self._data = bytes(data)
        self._sa = build_suffix_array(self._data)
        log.info("Suffix array built: %d suffixes in %.2fs", len(self._sa), time.perf_counter() - t0)

    @property
    def data(self) -> bytes:
        return self._data

    def __len__(self) -> int:
        return len(self._sa)

    def lookup(self, pattern: bytes, n: int = -1) -> List[int]:
        """
        Return start offsets of `pattern`, ascending. n >= 0 caps the count
        (the first n occurrences in corpus order); n < 0 returns all.
        """
        m = len(pattern)
        if m == 0 or n == 0:
            return []
        data = self._data
        prefix = lambda p: data[p:p + m]
        lo = bisect.bisect_left(self._sa, pattern, key=prefix)
        hi = bisect.bisect_right(self._sa, pattern, lo=lo, key=prefix)
        offsets = sorted(self._sa[lo:hi])
        if n > 0:
            del offsets[n:]
        return offsets
