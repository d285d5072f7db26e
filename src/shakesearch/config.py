from __future__ import annotations
import os


def env_int(name: str, default: int) -> int:
    """Integer from the environment; unset or empty -> default."""
    raw = os.environ.get(name)
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None

# Corpus read once at startup
CORPUS_PATH: str = os.environ.get("SHAKESEARCH_CORPUS") or "completeworks.txt"

# Static assets served by the web layer
STATIC_DIR: str = os.environ.get("SHAKESEARCH_STATIC") or "static"

# Listening address (PORT unset or empty -> 3001)
HOST: str = os.environ.get("HOST") or "0.0.0.0"
PORT: int = env_int("PORT", 3001)

# Loader: bytes read per chunk while streaming the corpus
CHUNK_SIZE: int = 1 << 20

# Excerpt context: "paragraph" (default) or "window"
CONTEXT_MODE: str = "paragraph"
WINDOW_BYTES: int = 250          # bytes of context either side in "window" mode

# Max results per query (-1 = unbounded)
DEFAULT_LIMIT: int = -1

# Progress logging (set SHAKESEARCH_VERBOSE=1 to enable)
VERBOSE: bool = os.environ.get("SHAKESEARCH_VERBOSE") == "1"
PROGRESS_EVERY_BYTES: int = 8 << 20
