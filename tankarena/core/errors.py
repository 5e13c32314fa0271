"""Exception hierarchy for map ingestion and match initialization.

Every error here is fatal to the match being built: nothing in the
pipeline retries. Asset errors carry the offending path so the top level
can report a single line naming it.
"""

from __future__ import annotations

from pathlib import Path


class ArenaError(Exception):
    """Base class for all tankarena errors."""


class AssetError(ArenaError):
    """An asset could not be located, read or decoded."""

    def __init__(self, path: str | Path, reason: str) -> None:
        self.path = str(path)
        self.reason = reason
        super().__init__(f"{reason} ({self.path})")


class AssetsDirectoryUnreadable(AssetError):
    """The maps directory is missing, unreadable, or holds no map files."""


class MapNotFound(AssetError):
    """A map file that was asked for does not exist."""


class MapParseError(AssetError):
    """A map file is not a well-formed map document."""


class MapInvalidGeometry(AssetError):
    """A map document parsed, but its coordinates are inconsistent with it."""


class EmptySpawnSet(AssetError):
    """A map provides no usable spawn points."""


class InsufficientSpawnPoints(EmptySpawnSet):
    """A map provides fewer than two distinct spawn points."""


class AssetLoadError(AssetError):
    """A non-map asset (texture, ...) failed to load."""


class ConfigError(ArenaError):
    """A match configuration value is out of range."""


class InternalStateViolation(ArenaError):
    """A pipeline component ran in a state it must never observe."""
