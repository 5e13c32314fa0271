"""Enumerations used throughout the engine."""

from __future__ import annotations

from enum import IntEnum, unique


@unique
class Step(IntEnum):
    """Match-initialization pipeline states, in transition order."""

    LOAD_MAP = 0
    GENERATE_MAP = 1
    FINISHED = 2


@unique
class Domain(IntEnum):
    """RNG domains for deterministic randomness isolation."""

    MAP_SELECT = 0
    SPAWN = 1


@unique
class Visibility(IntEnum):
    """User-controlled visibility of a rendered entity."""

    INHERITED = 0
    HIDDEN = 1
    VISIBLE = 2


@unique
class PollResult(IntEnum):
    """Outcome of polling a deferred pipeline stage."""

    PENDING = 0
    DONE = 1


@unique
class LoadState(IntEnum):
    """Progress of an asset requested from the asset server."""

    NOT_LOADED = 0
    LOADING = 1
    LOADED = 2
