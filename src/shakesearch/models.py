from __future__ import annotations
from dataclasses import dataclass
from typing import Tuple

@dataclass(frozen=True)
class LoadedCorpus:
    original: bytes               # raw corpus, used for excerpts only
    lowered: bytes                # ASCII-folded copy, same length/offsets as original
    boundaries: Tuple[int, ...]   # paragraph starts, strictly increasing, boundaries[0] == 0

    def __len__(self) -> int:
        return len(self.original)

@dataclass(frozen=True)
class Hit:
    offset: int                   # match start in the corpus
    length: int                   # match length in bytes
    open: int                     # enclosing context [open, close)
    close: int

    @property
    def degraded(self) -> bool:
        """True when no enclosing paragraph was found for this match."""
        return self.close <= self.offset
