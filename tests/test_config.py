"""Tests for ArenaConfig defaults and range checks."""

import os
import sys
import unittest
from dataclasses import replace

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from tankarena.config import SEED_MAX, SEED_MIN, ArenaConfig
from tankarena.core.enums import Domain
from tankarena.core.errors import ArenaError, ConfigError
from tankarena.systems.rng import DeterministicRNG


class TestArenaConfig(unittest.TestCase):

    def test_defaults(self):
        cfg = ArenaConfig()
        self.assertEqual(cfg.world_seed, 42)
        self.assertEqual(cfg.asset_root, "assets")
        self.assertIsNone(cfg.selected_map)
        self.assertFalse(cfg.render_mode)

    def test_seed_bounds_accepted(self):
        for seed in (SEED_MIN, -1, 0, SEED_MAX):
            cfg = ArenaConfig(world_seed=seed)
            rng = DeterministicRNG(cfg.world_seed)
            self.assertIn(rng.pick_index(Domain.MAP_SELECT, 3), (0, 1, 2))

    def test_seed_above_range_rejected(self):
        with self.assertRaises(ConfigError):
            ArenaConfig(world_seed=SEED_MAX + 1)

    def test_seed_below_range_rejected(self):
        with self.assertRaises(ConfigError):
            ArenaConfig(world_seed=SEED_MIN - 1)

    def test_replace_revalidates(self):
        with self.assertRaises(ConfigError):
            replace(ArenaConfig(), world_seed=2 ** 64)

    def test_non_positive_max_frames_rejected(self):
        with self.assertRaises(ConfigError):
            ArenaConfig(max_frames=0)

    def test_config_error_is_arena_error(self):
        self.assertTrue(issubclass(ConfigError, ArenaError))
