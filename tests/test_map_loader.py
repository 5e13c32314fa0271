"""Tests for MapLoader error reporting and the single-spawn policy."""

from __future__ import annotations

import json
import logging
import os
import sys

import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))


from tankarena.core.errors import (
    EmptySpawnSet,
    InsufficientSpawnPoints,
    MapInvalidGeometry,
    MapNotFound,
    MapParseError,
)
from tankarena.systems.map_loader import MapLoader


def _write(tmp_path, name="arena.map", **fields):
    data = {"dim": [4, 4], "walls": [[0, 0], [3, 3]], "spawn_points": [[1, 1], [2, 2]]}
    data.update(fields)
    path = tmp_path / name
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


class TestMapLoader:

    def test_loads_valid_map(self, tmp_path):
        m = MapLoader().load(_write(tmp_path))
        assert m.dim == (4, 4)
        assert len(m.walls) == 2

    def test_missing_file(self, tmp_path):
        with pytest.raises(MapNotFound) as info:
            MapLoader().load(tmp_path / "ghost.map")
        assert info.value.path.endswith("ghost.map")

    def test_directory_is_not_a_map(self, tmp_path):
        (tmp_path / "folder.map").mkdir()
        with pytest.raises(MapNotFound):
            MapLoader().load(tmp_path / "folder.map")

    def test_malformed_json(self, tmp_path):
        path = tmp_path / "broken.map"
        path.write_text("{ not json", encoding="utf-8")
        with pytest.raises(MapParseError) as info:
            MapLoader().load(path)
        assert "broken.map" in str(info.value)

    def test_unknown_field_is_parse_error(self, tmp_path):
        path = _write(tmp_path, music="battle.ogg")
        with pytest.raises(MapParseError, match="music"):
            MapLoader().load(path)

    @pytest.mark.parametrize("fields", [
        {"dim": ["4", "4"]},
        {"dim": [4.0, 4]},
        {"walls": [[True, False]]},
        {"spawn_points": [[1, 1], [2.0, 2]]},
    ])
    def test_wrong_scalar_types_are_parse_errors(self, tmp_path, fields):
        path = _write(tmp_path, **fields)
        with pytest.raises(MapParseError, match="malformed map"):
            MapLoader().load(path)

    def test_out_of_bounds_is_geometry_error(self, tmp_path):
        path = _write(tmp_path, walls=[[7, 7]])
        with pytest.raises(MapInvalidGeometry):
            MapLoader().load(path)

    def test_no_spawn_points(self, tmp_path):
        path = _write(tmp_path, spawn_points=[])
        with pytest.raises(EmptySpawnSet):
            MapLoader().load(path)

    def test_single_spawn_accepted_with_warning(self, tmp_path, caplog):
        path = _write(tmp_path, spawn_points=[[2, 2]])
        with caplog.at_level(logging.WARNING, logger="tankarena.systems.map_loader"):
            m = MapLoader().load(path)
        assert m.spawn_points == ((2, 2),)
        assert "single spawn point" in caplog.text

    def test_single_spawn_rejected_when_strict(self, tmp_path):
        path = _write(tmp_path, spawn_points=[[2, 2]])
        with pytest.raises(InsufficientSpawnPoints):
            MapLoader(reject_single_spawn=True).load(path)

    def test_insufficient_spawns_is_an_empty_spawn_set_kind(self):
        assert issubclass(InsufficientSpawnPoints, EmptySpawnSet)
