"""Error and warning types raised while loading map data.

Fatal errors (TransportError, MalformedInputError) abort a single fetch and
are turned into a fallback by the loader. Warnings are per-record and never
abort a batch.
"""

from typing import Optional


class WorldMapError(Exception):
    """Base class for all worldmapidentity errors."""


class TransportError(WorldMapError):
    """A fetch failed: connection error or non-success HTTP status."""

    def __init__(self, message: str, url: Optional[str] = None, status: Optional[int] = None):
        super().__init__(message)
        self.url = url
        self.status = status


class MalformedInputError(WorldMapError):
    """A payload was fetched but does not have the expected structure."""


class NoMatchWarning(UserWarning):
    """An annotation could not be matched to any map shape."""


class EmptyResultFallback(UserWarning):
    """No usable annotations were left, so the default list was used."""


__all__ = [
    "WorldMapError",
    "TransportError",
    "MalformedInputError",
    "NoMatchWarning",
    "EmptyResultFallback",
]
