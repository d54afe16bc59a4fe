"""Tests for the HTTP bot server."""

import sys
import os

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import pytest
from fastapi.testclient import TestClient

from kutulu_bot.api.app import create_app
from kutulu_bot.config import BotConfig

SETUP = {
    "width": 3,
    "height": 3,
    "rows": ["#.#", "#.#", "#.#"],
    "constants": {
        "sanity_loss_lonely": 3,
        "sanity_loss_group": 1,
        "hostile_spawn_time": 2,
        "hostile_life_time": 3,
    },
}

ME = {"type": "EXPLORER", "id": 0, "x": 1, "y": 1, "param0": 250, "param1": 2, "param2": 0}
HOSTILE = {"type": "WANDERER", "id": 5, "x": 1, "y": 0, "param0": 40, "param1": 1, "param2": 0}


@pytest.fixture()
def client():
    with TestClient(create_app(BotConfig(diagnostics=False))) as c:
        yield c


@pytest.fixture()
def ready_client(client):
    resp = client.post("/api/v1/setup", json=SETUP)
    assert resp.status_code == 200
    return client


class TestBeforeSetup:
    def test_turn_requires_map(self, client):
        resp = client.post("/api/v1/turn", json={"entities": [ME]})
        assert resp.status_code == 503

    def test_map_requires_setup(self, client):
        assert client.get("/api/v1/map").status_code == 503

    def test_config_without_constants(self, client):
        body = client.get("/api/v1/config").json()
        assert body["constants"] is None
        assert body["turns_played"] == 0


class TestSetup:
    def test_setup_echoes_map(self, client):
        body = client.post("/api/v1/setup", json=SETUP).json()
        assert body == {"width": 3, "height": 3, "rows": ["#.#", "#.#", "#.#"]}

    def test_map_after_setup(self, ready_client):
        assert ready_client.get("/api/v1/map").json()["rows"] == SETUP["rows"]

    def test_bad_cell_rejected(self, client):
        bad = dict(SETUP, rows=["#.#", "#?#", "#.#"])
        resp = client.post("/api/v1/setup", json=bad)
        assert resp.status_code == 422
        assert "unrecognized cell" in resp.json()["detail"]

    def test_row_count_mismatch_rejected(self, client):
        bad = dict(SETUP, rows=["#.#"])
        assert client.post("/api/v1/setup", json=bad).status_code == 422

    def test_constants_exposed_in_config(self, ready_client):
        body = ready_client.get("/api/v1/config").json()
        assert body["constants"]["hostile_life_time"] == 3


class TestTurns:
    def test_evades_active_hostile(self, ready_client):
        resp = ready_client.post("/api/v1/turn", json={"entities": [ME, HOSTILE]})
        assert resp.status_code == 200
        assert resp.json() == {"command": "MOVE 1 2", "turn": 1}

    def test_waits_without_hostiles(self, ready_client):
        resp = ready_client.post("/api/v1/turn", json={"entities": [ME]})
        assert resp.json()["command"] == "WAIT"

    def test_turn_counter_advances(self, ready_client):
        ready_client.post("/api/v1/turn", json={"entities": [ME]})
        resp = ready_client.post("/api/v1/turn", json={"entities": [ME]})
        assert resp.json()["turn"] == 2
        assert ready_client.get("/api/v1/config").json()["turns_played"] == 2

    def test_unknown_type_rejected(self, ready_client):
        ghost = dict(ME, type="GHOST")
        resp = ready_client.post("/api/v1/turn", json={"entities": [ghost]})
        assert resp.status_code == 422
        assert "GHOST" in resp.json()["detail"]

    def test_missing_controlled_unit_rejected(self, ready_client):
        resp = ready_client.post("/api/v1/turn", json={"entities": [HOSTILE]})
        assert resp.status_code == 422
