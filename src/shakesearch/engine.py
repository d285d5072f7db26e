# shakesearch/engine.py
from __future__ import annotations

import logging
import os
import time
from typing import List, Optional

from . import config as CFG
from .index import SuffixArrayIndex
from .loader import Source, load
from .models import Hit, LoadedCorpus
from .search import find_hits, search_query
from .storage import load_index, save_index

log = logging.getLogger(__name__)


class Engine:
    """
    Thin orchestration layer that glues together:
      - the corpus loader (original bytes, folded bytes, paragraph starts),
      - the suffix-array index over the folded bytes,
      - paragraph resolution + excerpt rendering (search.search_query).

    Public API (used by CLI/Flask):
      * build(source, ...): load corpus -> build index -> (optional) write cache
      * load(cache):        restore corpus + index from a cache file
      * search(query, ...): rendered excerpts, one per occurrence
      * hits(query, ...):   the same matches as Hit records (offsets, context)
      * shutdown():         drop the corpus and index

    build()/load() run once, before any query; afterwards the engine is
    read-only and may be shared by concurrent request handlers.
    """

    # ------------- lifecycle -------------

    def __init__(self) -> None:
        self._corpus: Optional[LoadedCorpus] = None
        self._index: Optional[SuffixArrayIndex] = None

    # /* ~~~ Load the corpus file and index its folded copy ~~~ */
    def build(
        self,
        source: Source,
        *,
        cache: Optional[str] = None,       # write a pickle cache here after building
        verbose: bool = False,
    ) -> None:
        if verbose:
            logging.basicConfig(level=logging.INFO)
            CFG.VERBOSE = True
        self._check_unbuilt()

        t0 = time.perf_counter()
        log.info("Loading corpus from %s", getattr(source, "name", source))
        corpus = load(source)  # LoadError propagates: nothing to serve without it

        log.info("Building suffix array over %d bytes", len(corpus))
        index = SuffixArrayIndex(corpus.lowered)

        if cache:
            log.info("Saving index cache to %s", cache)
            save_index(corpus, index, cache)

        self._corpus, self._index = corpus, index
        log.info("Engine build() complete in %.2fs: bytes=%d paragraphs=%d",
                 time.perf_counter() - t0, len(corpus), len(corpus.boundaries))

    # /* ~~~ Restore an engine written by build(cache=...) ~~~ */
    def load(self, cache: str, *, verbose: bool = False) -> None:
        if verbose:
            logging.basicConfig(level=logging.INFO)
        self._check_unbuilt()
        if not os.path.exists(cache):
            raise FileNotFoundError(cache)

        log.info("Loading index cache from %s", cache)
        self._corpus, self._index = load_index(cache)
        log.info("Engine load() complete: bytes=%d paragraphs=%d",
                 len(self._corpus), len(self._corpus.boundaries))

    # ------------- query -------------

    # /* ~~~ One excerpt per case-insensitive occurrence of the query ~~~ */
    def search(self, query: str, *, limit: int = CFG.DEFAULT_LIMIT,
               context: str = CFG.CONTEXT_MODE) -> List[str]:
        corpus, index = self._require()
        return search_query(query, corpus, index, limit=limit, context=context)

    def hits(self, query: str, *, limit: int = CFG.DEFAULT_LIMIT,
             context: str = CFG.CONTEXT_MODE) -> List[Hit]:
        corpus, index = self._require()
        return find_hits(query, corpus, index, limit=limit, context=context)

    @property
    def corpus(self) -> LoadedCorpus:
        return self._require()[0]

    def stats(self) -> dict:
        corpus = self.corpus
        return {"bytes": len(corpus), "paragraphs": len(corpus.boundaries)}

    # ------------- teardown -------------

    def shutdown(self) -> None:
        self._corpus = None
        self._index = None
        log.info("Engine shutdown complete")

    # ------------- internals -------------

    def _require(self):
        if self._corpus is None or self._index is None:
            raise RuntimeError("Engine not initialized. Call build() or load() first.")
        return self._corpus, self._index

    def _check_unbuilt(self) -> None:
        if self._index is not None:
            raise RuntimeError("Engine already initialized; create a new Engine to rebuild.")
