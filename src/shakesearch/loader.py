from __future__ import annotations
import logging
import os
import time
from typing import BinaryIO, Union

from . import config as CFG
from .config import CHUNK_SIZE
from .errors import LoadError
from .models import LoadedCorpus
from .normalize import BreakScanner, fold

log = logging.getLogger(__name__)

Source = Union[str, "os.PathLike[str]", BinaryIO]


def _scan(stream: BinaryIO, chunk_size: int) -> LoadedCorpus:
    original = bytearray()
    lowered = bytearray()
    scanner = BreakScanner()
    verbose = CFG.VERBOSE
    every = CFG.PROGRESS_EVERY_BYTES
    next_progress = every

    while True:
        chunk = stream.read(chunk_size)
        if not chunk:
            break
        base = len(original)
        original += chunk
        lowered += fold(chunk)
        scanner.feed(chunk, base)
        if verbose and len(original) >= next_progress:
            log.info("[scanned] bytes=%s paragraphs=%s", f"{len(original):,}", f"{len(scanner.boundaries):,}")
            next_progress += every

    return LoadedCorpus(
        original=bytes(original),
        lowered=bytes(lowered),
        boundaries=tuple(scanner.boundaries),
    )


def load(source: Source, *, chunk_size: int = CHUNK_SIZE) -> LoadedCorpus:
    """
    Stream the corpus once and return (original, lowered, boundaries).
    `source` is a file path or an already-open binary stream (left open).
    Any failure to open or fully read the source raises LoadError.
    """
    if chunk_size <= 0:
        raise ValueError("load(): chunk_size must be positive")

    t0 = time.perf_counter()
    name = getattr(source, "name", None) if hasattr(source, "read") else os.fspath(source)
    try:
        if hasattr(source, "read"):
            corpus = _scan(source, chunk_size)  # type: ignore[arg-type]
        else:
            with open(source, "rb") as f:
                corpus = _scan(f, chunk_size)
    except OSError as exc:
        raise LoadError(f"load: couldn't read corpus {name!r}: {exc}") from exc

    log.info(
        "Loaded corpus %s: bytes=%d paragraphs=%d in %.2fs",
        name, len(corpus), len(corpus.boundaries), time.perf_counter() - t0,
    )
    return corpus
