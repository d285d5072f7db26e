from __future__ import annotations
import os
import pickle
from typing import Tuple

from .errors import LoadError
from .index import SuffixArrayIndex
from .models import LoadedCorpus

_FORMAT = "shakesearch-cache/1"

def save_index(corpus: LoadedCorpus, index: SuffixArrayIndex, path: str) -> None:
    """Pickle corpus + index; written to a temp file then swapped in."""
    tmp = f"{path}.tmp"
    os.makedirs(os.path.dirname(os.path.abspath(path)), exist_ok=True)
    with open(tmp, "wb") as f:
        pickle.dump((_FORMAT, corpus, index), f, protocol=pickle.HIGHEST_PROTOCOL)
    os.replace(tmp, path)

def load_index(path: str) -> Tuple[LoadedCorpus, SuffixArrayIndex]:
    """Unpickle a cache written by save_index(). Only load caches you wrote yourself."""
    try:
        with open(path, "rb") as f:
            payload = pickle.load(f)
    except (OSError, pickle.UnpicklingError, EOFError, AttributeError, ImportError) as exc:
        raise LoadError(f"load_index: couldn't read cache {path!r}: {exc}") from exc

    if not (isinstance(payload, tuple) and len(payload) == 3 and payload[0] == _FORMAT):
        raise LoadError(f"load_index: {path!r} is not a {_FORMAT} cache")
    _, corpus, index = payload
    if not isinstance(corpus, LoadedCorpus) or not isinstance(index, SuffixArrayIndex):
        raise LoadError(f"load_index: {path!r} holds unexpected objects")
    if index.data != corpus.lowered:
        raise LoadError(f"load_index: {path!r} index does not match its corpus")
    return corpus, index
