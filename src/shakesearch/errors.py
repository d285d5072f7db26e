from __future__ import annotations


class ShakeSearchError(Exception):
    """Base class for everything this package raises on purpose."""


class LoadError(ShakeSearchError, OSError):
    """The corpus (or a cached engine) could not be opened or fully read."""


class ValidationError(ShakeSearchError, ValueError):
    """A request carried a missing or malformed parameter."""


class SerializationError(ShakeSearchError):
    """Search results could not be encoded for transport."""
