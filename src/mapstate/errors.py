"""Errors raised by MapConfigStore and FeatureWalker.

All of these are local, synchronous, and recoverable: the store rejects the
offending action and leaves its state exactly as it was.
"""

from __future__ import annotations


class MapStateError(Exception):
    """Base class for rejected map-configuration actions."""


class InvalidCoordinateError(MapStateError, ValueError):
    """Raised when a center/coordinate or zoom is outside its valid range."""


class DuplicateKeyError(MapStateError, ValueError):
    """Raised when a source or layer key is already in use."""


class UnknownSourceError(MapStateError, KeyError):
    """Raised when an action references a source that does not exist."""

    def __str__(self) -> str:
        # KeyError quotes its argument; keep the message readable.
        return str(self.args[0]) if self.args else ""


class WrongSourceKindError(MapStateError, ValueError):
    """Raised when features are added to a non-geojson source."""


class EmptyCollectionError(MapStateError, LookupError):
    """Raised when walking a source that has no features yet."""
