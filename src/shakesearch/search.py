from __future__ import annotations
import bisect
from typing import List, Sequence, Tuple

from .config import WINDOW_BYTES
from .index import SuffixArrayIndex
from .models import Hit, LoadedCorpus
from .normalize import fold_query

# Excerpt markup: a separator row around a preformatted block
EXCERPT_OPEN = "<tr>" + "=" * 44 + "<pre>"
EXCERPT_CLOSE = "</pre></tr>"
HIGHLIGHT_OPEN = "<b>"
HIGHLIGHT_CLOSE = "</b>"

CONTEXT_MODES = ("paragraph", "window")


def resolve(boundaries: Sequence[int], idx: int, corpus_len: int) -> Tuple[int, int]:
    """
    Enclosing paragraph [open, close) of offset `idx`.
      open  = greatest boundary <= idx
      close = next boundary, or corpus_len for the last paragraph
    Offsets outside [0, corpus_len) or an empty boundary list give (0, 0).
    """
    if not boundaries or idx < 0 or idx >= corpus_len:
        return 0, 0
    i = bisect.bisect_right(boundaries, idx)
    if i == 0:
        return 0, 0
    close = boundaries[i] if i < len(boundaries) else corpus_len
    return boundaries[i - 1], close


def window(idx: int, length: int, corpus_len: int, size: int = WINDOW_BYTES) -> Tuple[int, int]:
    """Fixed context of `size` bytes either side of a match, clamped to the corpus."""
    return max(0, idx - size), min(corpus_len, idx + length + size)


def render_excerpt(original: bytes, hit: Hit) -> str:
    """Context before, highlighted match, context after; degraded hits keep only the match."""
    end = hit.offset + hit.length
    if hit.degraded:
        head = tail = b""
    else:
        head = original[hit.open:hit.offset]
        tail = original[end:hit.close]
    parts = [
        EXCERPT_OPEN,
        head.decode("utf-8", errors="replace"),
        HIGHLIGHT_OPEN,
        original[hit.offset:end].decode("utf-8", errors="replace"),
        HIGHLIGHT_CLOSE,
        tail.decode("utf-8", errors="replace"),
        EXCERPT_CLOSE,
    ]
    return "".join(parts)


def find_hits(query: str, corpus: LoadedCorpus, index: SuffixArrayIndex,
              *, limit: int = -1, context: str = "paragraph") -> List[Hit]:
    if context not in CONTEXT_MODES:
        raise ValueError(f"unknown context mode {context!r}; expected one of {CONTEXT_MODES}")
    needle = fold_query(query)
    if not needle:
        return []
    n = len(corpus)
    hits: List[Hit] = []
    for idx in index.lookup(needle, limit):
        if context == "window":
            open_, close = window(idx, len(needle), n)
        else:
            open_, close = resolve(corpus.boundaries, idx, n)
        hits.append(Hit(offset=idx, length=len(needle), open=open_, close=close))
    return hits


def search_query(query: str, corpus: LoadedCorpus, index: SuffixArrayIndex,
                 *, limit: int = -1, context: str = "paragraph") -> List[str]:
    """One rendered excerpt per occurrence of `query`, in index order."""
    hits = find_hits(query, corpus, index, limit=limit, context=context)
    return [render_excerpt(corpus.original, h) for h in hits]
