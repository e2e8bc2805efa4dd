"""
Unit tests for the dashboard WebSocketManager and NotificationService.
"""
import asyncio
import json

import pytest
from starlette.websockets import WebSocketState

from face_detection_backend.infrastructure.notifications import NotificationService, WebSocketManager


class FakeWebSocket:
    """Stands in for an accepted starlette WebSocket."""

    def __init__(self, fail_on_send: bool = False):
        self.client_state = WebSocketState.CONNECTED
        self.application_state = WebSocketState.CONNECTED
        self.fail_on_send = fail_on_send
        self.stall = False
        self.sent = []
        self.closed = False

    async def send_text(self, data: str) -> None:
        if self.fail_on_send:
            raise RuntimeError("connection reset")
        if self.stall:
            await asyncio.sleep(60)
        self.sent.append(json.loads(data))

    async def close(self, code: int = 1000, reason: str = None) -> None:
        self.closed = True
        self.client_state = WebSocketState.DISCONNECTED

    def disconnect(self) -> None:
        self.client_state = WebSocketState.DISCONNECTED


@pytest.fixture
def manager():
    return WebSocketManager()


class TestConnections:

    @pytest.mark.asyncio
    async def test_add_sends_connection_message(self, manager):
        ws = FakeWebSocket()
        await manager.add_connection(ws)

        assert manager.get_total_connections() == 1
        assert ws.sent[0]["type"] == "connection"
        assert ws.sent[0]["data"]["message"] == "connected to face detection dashboard"
        assert ws.sent[0]["data"]["timestamp"].endswith("Z")

    @pytest.mark.asyncio
    async def test_remove_is_idempotent(self, manager):
        ws = FakeWebSocket()
        await manager.add_connection(ws)
        await manager.remove_connection(ws)
        await manager.remove_connection(ws)
        assert manager.get_total_connections() == 0


class TestBroadcast:

    @pytest.mark.asyncio
    async def test_broadcast_reaches_every_open_client(self, manager):
        clients = [FakeWebSocket(), FakeWebSocket()]
        for ws in clients:
            await manager.add_connection(ws)

        sent = await manager.broadcast_camera_status("cam-1", True)

        assert sent == 2
        for ws in clients:
            message = ws.sent[-1]
            assert message["type"] == "camera_status"
            assert message["data"]["cameraId"] == "cam-1"
            assert message["data"]["isStreaming"] is True

    @pytest.mark.asyncio
    async def test_closed_connection_is_evicted_without_raising(self, manager):
        alive, closed = FakeWebSocket(), FakeWebSocket()
        await manager.add_connection(alive)
        await manager.add_connection(closed)
        closed.disconnect()

        sent = await manager.broadcast({"type": "system_stats", "data": {}})

        assert sent == 1
        assert manager.get_total_connections() == 1
        assert len(closed.sent) == 1  # only the greeting

        # And it stays out of later broadcasts
        assert await manager.broadcast({"type": "system_stats", "data": {}}) == 1
        assert len(closed.sent) == 1

    @pytest.mark.asyncio
    async def test_failing_send_is_evicted(self, manager):
        healthy = FakeWebSocket()
        await manager.add_connection(healthy)
        broken = FakeWebSocket()
        await manager.add_connection(broken)
        broken.fail_on_send = True

        sent = await manager.broadcast_alert({"id": "alt-1", "cameraId": "cam-1"})

        assert sent == 1
        assert manager.get_total_connections() == 1
        assert healthy.sent[-1]["type"] == "new_alert"

    @pytest.mark.asyncio
    async def test_stalled_client_does_not_block_others(self):
        manager = WebSocketManager(send_timeout=0.05)
        stalled, fast = FakeWebSocket(), FakeWebSocket()
        await manager.add_connection(stalled)
        await manager.add_connection(fast)
        stalled.stall = True

        sent = await asyncio.wait_for(manager.broadcast_camera_status("cam-1", True), timeout=2)

        assert sent == 1
        assert fast.sent[-1]["type"] == "camera_status"
        assert manager.get_total_connections() == 1
        assert manager.ping_clients()["total"] == 1

    @pytest.mark.asyncio
    async def test_unserializable_message_returns_zero(self, manager):
        ws = FakeWebSocket()
        await manager.add_connection(ws)
        assert await manager.broadcast({"type": "system_stats", "data": {"bad": object()}}) == 0
        assert manager.get_total_connections() == 1

    @pytest.mark.asyncio
    async def test_broadcast_with_no_clients(self, manager):
        assert await manager.broadcast_system_stats({"totalCameras": 0}) == 0


class TestStatus:

    @pytest.mark.asyncio
    async def test_ping_clients_counts_states(self, manager):
        a, b = FakeWebSocket(), FakeWebSocket()
        await manager.add_connection(a)
        await manager.add_connection(b)
        b.disconnect()

        assert manager.ping_clients() == {"total": 2, "active": 1, "inactive": 1}

    @pytest.mark.asyncio
    async def test_running_flag_and_shutdown(self, manager):
        assert manager.get_server_status() == {"running": False}
        manager.mark_running()
        assert manager.get_server_status() == {"running": True}

        ws = FakeWebSocket()
        await manager.add_connection(ws)
        await manager.shutdown()

        assert ws.closed is True
        assert manager.get_total_connections() == 0
        assert manager.get_server_status() == {"running": False}


class TestNotificationService:

    def test_alert_message_keeps_detection_time(self):
        message = NotificationService.alert_message(
            {"id": "alt-1", "timestamp": "2025-03-01T08:30:00.000Z"}
        )
        assert message["type"] == "new_alert"
        assert message["data"]["detectedAt"] == "2025-03-01T08:30:00.000Z"
        assert message["data"]["timestamp"] != "2025-03-01T08:30:00.000Z"

    def test_system_stats_message(self):
        message = NotificationService.system_stats_message({"totalCameras": 3})
        assert message["type"] == "system_stats"
        assert message["data"]["totalCameras"] == 3
        assert "timestamp" in message["data"]

    def test_unknown_type_rejected(self):
        with pytest.raises(ValueError):
            NotificationService.build_message("bogus", {})
