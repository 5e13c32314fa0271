"""Tests for the Map descriptor: parsing, geometry checks, serialization."""

from __future__ import annotations

import json
import os
import sys
import unittest

import pytest
from pydantic import ValidationError

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from tankarena.core.errors import EmptySpawnSet, MapInvalidGeometry
from tankarena.core.map_data import Map


def _doc(**overrides) -> str:
    data = {"dim": [4, 4], "walls": [[0, 0], [3, 3]], "spawn_points": [[1, 1], [2, 2]]}
    data.update(overrides)
    return json.dumps(data)


class TestMapParsing(unittest.TestCase):

    def test_parses_all_fields(self):
        m = Map.from_json(_doc())
        self.assertEqual(m.dim, (4, 4))
        self.assertEqual(m.walls, ((0, 0), (3, 3)))
        self.assertEqual(m.spawn_points, ((1, 1), (2, 2)))
        self.assertEqual(m.width, 4)
        self.assertEqual(m.height, 4)

    def test_unknown_field_rejected(self):
        with self.assertRaises(ValidationError):
            Map.from_json(_doc(theme="desert"))

    def test_missing_field_rejected(self):
        with self.assertRaises(ValidationError):
            Map.from_json(json.dumps({"dim": [4, 4], "walls": []}))

    def test_non_positive_dim_rejected(self):
        with self.assertRaises(ValidationError):
            Map.from_json(_doc(dim=[0, 4]))

    def test_negative_coordinate_rejected(self):
        with self.assertRaises(ValidationError):
            Map.from_json(_doc(walls=[[-1, 0]]))

    def test_coordinate_pair_must_have_two_items(self):
        with self.assertRaises(ValidationError):
            Map.from_json(_doc(walls=[[1, 2, 3]]))

    def test_string_dim_rejected(self):
        with self.assertRaises(ValidationError):
            Map.from_json(_doc(dim=["4", "4"]))

    def test_float_dim_rejected(self):
        with self.assertRaises(ValidationError):
            Map.from_json(_doc(dim=[4.0, 4]))

    def test_bool_coordinates_rejected(self):
        with self.assertRaises(ValidationError):
            Map.from_json(_doc(walls=[[True, False]]))
        with self.assertRaises(ValidationError):
            Map.from_json(_doc(spawn_points=[[1, 1], ["2", 2]]))

    def test_not_json(self):
        with self.assertRaises(ValidationError):
            Map.from_json("dim: [4, 4]")

    def test_descriptor_is_immutable(self):
        m = Map.from_json(_doc())
        with self.assertRaises(ValidationError):
            m.dim = (8, 8)

    def test_world_size(self):
        m = Map.from_json(_doc(dim=[10, 8]))
        self.assertEqual(m.world_size, (320.0, 256.0))


class TestMapGeometry:

    def test_valid_geometry_passes(self):
        Map.from_json(_doc()).check_geometry("arena.map")

    def test_wall_outside_dim(self):
        m = Map.from_json(_doc(walls=[[4, 0]]))
        with pytest.raises(MapInvalidGeometry) as info:
            m.check_geometry("arena.map")
        assert info.value.path == "arena.map"

    def test_spawn_outside_dim(self):
        m = Map.from_json(_doc(spawn_points=[[1, 1], [0, 9]]))
        with pytest.raises(MapInvalidGeometry):
            m.check_geometry("arena.map")

    def test_wall_and_spawn_overlap(self):
        m = Map.from_json(_doc(spawn_points=[[0, 0], [2, 2]]))
        with pytest.raises(MapInvalidGeometry, match="also walls"):
            m.check_geometry("arena.map")

    def test_empty_spawn_set(self):
        m = Map.from_json(_doc(spawn_points=[]))
        with pytest.raises(EmptySpawnSet):
            m.check_geometry("arena.map")

    def test_distinct_spawn_count_ignores_duplicates(self):
        m = Map.from_json(_doc(spawn_points=[[1, 1], [1, 1]]))
        assert m.distinct_spawn_count() == 1


class TestMapRoundTrip:

    def test_parse_serialize_parse(self):
        original = Map.from_json(_doc(walls=[[3, 3], [0, 0], [1, 3]]))
        again = Map.from_json(original.to_json())
        assert again == original
        assert again.same_layout(original)

    def test_same_layout_ignores_wall_order(self):
        a = Map.from_json(_doc(walls=[[0, 0], [3, 3]]))
        b = Map.from_json(_doc(walls=[[3, 3], [0, 0]]))
        assert a != b
        assert a.same_layout(b)

    def test_same_layout_respects_spawn_order(self):
        a = Map.from_json(_doc(spawn_points=[[1, 1], [2, 2]]))
        b = Map.from_json(_doc(spawn_points=[[2, 2], [1, 1]]))
        assert not a.same_layout(b)
