"""Choosing two maximally separated tank spawn points."""

from __future__ import annotations

from typing import Protocol, Sequence

from tankarena.core.enums import Domain
from tankarena.core.errors import EmptySpawnSet
from tankarena.core.models import Coord, squared_distance


class IndexPicker(Protocol):
    def pick_index(self, domain: Domain, length: int, key: int = 0) -> int: ...


def farthest_from(origin: Coord, points: Sequence[Coord]) -> Coord:
    """Return the point farthest from *origin*, or *origin* if none differs.

    Points equal to *origin* are skipped. Ties keep the earliest point in
    *points* order: the best is replaced only on a strictly greater
    squared distance.
    """
    best = origin
    best_dist = 0
    for point in points:
        if point == origin:
            continue
        dist = squared_distance(origin, point)
        if dist > best_dist:
            best, best_dist = point, dist
    return best


def choose_spawns(points: Sequence[Coord], rng: IndexPicker) -> tuple[Coord, Coord]:
    """Pick player 0's spawn at random and player 1's as far from it as possible."""
    if not points:
        raise EmptySpawnSet("<spawn points>", "cannot choose spawns from an empty set")
    first = tuple(points[rng.pick_index(Domain.SPAWN, len(points))])
    second = farthest_from(first, [tuple(p) for p in points])
    return first, second
