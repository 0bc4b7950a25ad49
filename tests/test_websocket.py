"""WebSocket integration tests for real-time play."""

from __future__ import annotations

import json

import pytest
from starlette.testclient import TestClient

from snake_game.config import GameConfig
from snake_game.server.app import create_app
from snake_game.snake import Direction


@pytest.fixture()
def tc():
    """TestClient as a context manager so the lifespan starts the game."""
    application = create_app(GameConfig(tick_interval_ms=20, seed=0))
    with TestClient(application) as client:
        yield client


class TestLifespan:
    def test_controller_running(self, tc):
        controller = tc.app.state.controller
        assert controller.running

    def test_controller_stopped_on_shutdown(self):
        application = create_app(GameConfig(tick_interval_ms=20, seed=0))
        with TestClient(application):
            controller = application.state.controller
        assert not controller.running


class TestPlayWebSocket:
    def test_initial_state_on_connect(self, tc):
        with tc.websocket_connect("/game/play") as ws:
            state = json.loads(ws.receive_text())
            assert "snake" in state
            assert "food" in state
            assert "grid" in state

    def test_receives_tick_updates(self, tc):
        with tc.websocket_connect("/game/play") as ws:
            first = json.loads(ws.receive_text())
            second = json.loads(ws.receive_text())
            assert second["tick"] > first["tick"] or second["game_over"]

    def test_key_message_sets_direction(self, tc):
        controller = tc.app.state.controller
        with tc.websocket_connect("/game/play") as ws:
            ws.receive_text()
            ws.send_text(json.dumps({"key": "ArrowDown"}))
            for _ in range(50):
                state = json.loads(ws.receive_text())
                if state["direction"] == [0, 1]:
                    break
            assert state["direction"] == [0, 1]
        assert controller.engine.direction == Direction.DOWN

    def test_command_message(self, tc):
        controller = tc.app.state.controller
        with tc.websocket_connect("/game/play") as ws:
            ws.receive_text()
            ws.send_text(json.dumps({"command": "move_up"}))
            for _ in range(50):
                state = json.loads(ws.receive_text())
                if state["direction"] == [0, -1]:
                    break
            assert state["direction"] == [0, -1]
        assert controller.engine.direction == Direction.UP

    def test_reset_message_replies_with_state(self, tc):
        with tc.websocket_connect("/game/play") as ws:
            ws.receive_text()
            ws.send_text(json.dumps({"action": "reset"}))
            for _ in range(50):
                state = json.loads(ws.receive_text())
                if state["tick"] == 0:
                    break
            assert state["tick"] == 0
            assert state["snake"] == [[10, 10]]

    def test_invalid_messages_ignored(self, tc):
        with tc.websocket_connect("/game/play") as ws:
            ws.receive_text()
            ws.send_text("not-json")
            ws.send_text("[]")
            ws.send_text("123")
            ws.send_text(json.dumps({"key": 5}))
            ws.send_text(json.dumps({"command": "jump"}))
            ws.send_text(json.dumps({"something": True}))
            # The socket is still alive and streaming.
            state = json.loads(ws.receive_text())
            assert "tick" in state

    def test_disconnect_unsubscribes(self, tc):
        controller = tc.app.state.controller
        with tc.websocket_connect("/game/play") as ws:
            ws.receive_text()
            assert len(controller._listeners) == 1
        for _ in range(50):
            if not controller._listeners:
                break
            tc.get("/game")
        assert controller._listeners == []
