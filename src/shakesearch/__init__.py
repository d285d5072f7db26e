"""
ShakeSearch Engine Module

Case-insensitive substring search over one static text corpus. Each match is
returned as an excerpt: the enclosing paragraph from the original text with
the matched span highlighted.

The module is split the same way the work is:
- Corpus loading: original bytes, ASCII-folded copy, paragraph starts
- Indexing: suffix array over the folded copy
- Search: paragraph resolution and excerpt rendering
- Configuration and errors

Example Usage:
    from shakesearch import Engine

    eng = Engine()
    eng.build("completeworks.txt")
    for excerpt in eng.search("to be"):
        print(excerpt)
"""

# src/shakesearch/__init__.py
from .engine import Engine  # re-export
from .errors import LoadError, SerializationError, ShakeSearchError, ValidationError
from .loader import load
from .normalize import fold

__version__ = "1.0.0"
__all__ = [
    "Engine",
    "load",
    "fold",
    "ShakeSearchError",
    "LoadError",
    "ValidationError",
    "SerializationError",
]
