"""Tests for the match inspection API: map, state, config and reset endpoints."""

import os
import sys

import pytest
from fastapi.testclient import TestClient

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from tankarena.api.app import create_app
from tankarena.api.dependencies import set_match_manager
from tankarena.api.match_manager import MatchManager
from tankarena.config import ArenaConfig
from tankarena.core.errors import MapNotFound
from tests.helpers.match_arena import MatchArena


def _arena(tmp_path):
    arena = MatchArena(tmp_path)
    arena.write_map("arena.map", dim=[4, 4], walls=[[0, 0], [3, 3]], spawn_points=[[1, 1], [2, 2]])
    arena.write_map("crossfire.map", dim=[12, 10], walls=[[0, 0], [11, 9], [5, 4]],
                    spawn_points=[[2, 2], [9, 7], [2, 7], [9, 2]])
    return arena


@pytest.fixture
def client(tmp_path):
    arena = _arena(tmp_path)
    config = ArenaConfig(asset_root=str(arena.root), selected_map="arena.map")
    with TestClient(create_app(config, configure_logging=False)) as c:
        yield c


@pytest.fixture
def render_client(tmp_path):
    arena = _arena(tmp_path)
    config = ArenaConfig(asset_root=str(arena.root), selected_map="crossfire.map", render_mode=True)
    with TestClient(create_app(config, configure_logging=False)) as c:
        yield c


class TestMapEndpoint:
    def test_returns_selected_map(self, client):
        resp = client.get("/api/v1/map")
        assert resp.status_code == 200
        data = resp.json()
        assert data["path"] == "maps/arena.map"
        assert data["width"] == 4
        assert data["height"] == 4
        assert data["walls"] == [[0, 0], [3, 3]]
        assert data["spawn_points"] == [[1, 1], [2, 2]]


class TestStateEndpoint:
    def test_finished_with_entities(self, client):
        data = client.get("/api/v1/state").json()
        assert data["step"] == "FINISHED"
        assert data["settled"] is True
        assert data["frame"] == 2
        assert sorted((w["x"], w["y"]) for w in data["walls"]) == [(0.0, 0.0), (96.0, 96.0)]
        assert all(w["half_extent"] == 4.0 for w in data["walls"])
        assert data["cameras"] == []

    def test_tanks_tagged_per_player(self, client):
        tanks = client.get("/api/v1/state").json()["tanks"]
        assert sorted(t["player"] for t in tanks) == [0, 1]
        assert all(t["tagged"] for t in tanks)
        assert {(t["x"], t["y"]) for t in tanks} == {(32.0, 32.0), (64.0, 64.0)}

    def test_render_mode_adds_camera_and_colors(self, render_client):
        data = render_client.get("/api/v1/state").json()
        assert data["cameras"] == [{"x": 192.0, "y": 160.0, "z": 1.0}]
        assert all(w["textured"] and w["half_extent"] == 16.0 for w in data["walls"])
        colors = {t["player"]: t["color"] for t in data["tanks"]}
        assert colors[0] == [1.0, 0.0, 0.0, 1.0]
        assert colors[1] == [0.0, 0.0, 1.0, 1.0]


class TestConfigEndpoint:
    def test_reports_config(self, client):
        data = client.get("/api/v1/config").json()
        assert data["world_seed"] == 42
        assert data["selected_map"] == "arena.map"
        assert data["render_mode"] is False
        assert data["max_frames"] == 600


class TestResetEndpoint:
    def test_reset_keeps_fingerprint(self, client):
        before = client.get("/api/v1/state").json()["fingerprint"]
        resp = client.post("/api/v1/control/reset")
        assert resp.status_code == 200
        assert resp.json()["step"] == "FINISHED"
        assert client.get("/api/v1/state").json()["fingerprint"] == before

    def test_reset_with_seed(self, client):
        resp = client.post("/api/v1/control/reset", params={"seed": 7})
        assert resp.status_code == 200
        assert "seed 7" in resp.json()["message"]
        assert client.get("/api/v1/config").json()["world_seed"] == 7


    def test_reset_rejects_out_of_range_seed(self, client):
        before = client.get("/api/v1/state").json()["fingerprint"]
        resp = client.post("/api/v1/control/reset", params={"seed": 2 ** 63})
        assert resp.status_code == 422
        assert client.get("/api/v1/config").json()["world_seed"] == 42
        assert client.get("/api/v1/state").json()["fingerprint"] == before

    def test_failed_reset_keeps_config(self, tmp_path):
        arena = _arena(tmp_path)
        config = ArenaConfig(asset_root=str(arena.root), selected_map="arena.map")
        with TestClient(create_app(config, configure_logging=False)) as c:
            before = c.get("/api/v1/state").json()["fingerprint"]
            (arena.root / "maps" / "arena.map").unlink()
            resp = c.post("/api/v1/control/reset", params={"seed": 9})
            assert resp.status_code == 500
            assert "map does not exist" in resp.json()["detail"]
            assert c.get("/api/v1/config").json()["world_seed"] == 42
            assert c.get("/api/v1/state").json()["fingerprint"] == before


class TestStartupErrors:
    def test_missing_map_fails_startup(self, tmp_path):
        arena = _arena(tmp_path)
        config = ArenaConfig(asset_root=str(arena.root), selected_map="ghost.map")
        with pytest.raises(MapNotFound):
            with TestClient(create_app(config, configure_logging=False)):
                pass

    def test_503_before_build(self, tmp_path):
        arena = _arena(tmp_path)
        app = create_app(ArenaConfig(asset_root=str(arena.root)), configure_logging=False)
        set_match_manager(MatchManager(ArenaConfig(asset_root=str(arena.root))))
        try:
            # No lifespan: the manager above never built a match.
            c = TestClient(app)
            assert c.get("/api/v1/map").status_code == 503
            assert c.get("/api/v1/state").status_code == 503
        finally:
            set_match_manager(None)
