"""JSON dump of a materialized match, for offline inspection."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from tankarena.engine.snapshot import MatchSnapshot

logger = logging.getLogger(__name__)


class WorldDumpWriter:
    """Writes one match snapshot, tagged with its seed, to a JSON file."""

    __slots__ = ("_path", "_seed")

    def __init__(self, path: str | Path, seed: int) -> None:
        self._path = Path(path)
        self._seed = seed

    @property
    def path(self) -> Path:
        return self._path

    def write(self, snapshot: MatchSnapshot) -> None:
        payload = {
            "version": "1.0",
            "seed": self._seed,
            "fingerprint": snapshot.fingerprint(),
            "match": snapshot.to_dict(),
        }
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._path.write_text(json.dumps(payload, indent=2), encoding="utf-8")
        logger.info(
            "World dump saved to %s (%d walls, %d tanks)",
            self._path, len(snapshot.walls), len(snapshot.tanks),
        )
