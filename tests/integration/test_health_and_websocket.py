"""
Integration tests for health endpoints and the dashboard WebSocket channel.
"""
import pytest

pytestmark = pytest.mark.integration


class TestHealth:

    def test_service_info(self, client):
        data = client.get("/").json()
        assert data["message"] == "Face Detection Backend API"
        assert data["status"] == "running"
        assert data["websocket"].startswith("ws://")

    def test_health_reports_services(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "ok"
        assert data["services"]["database"] == {"status": "connected", "connected": True}
        assert data["services"]["websocket"]["server_running"] is True
        assert data["services"]["websocket"]["clients_total"] == 0
        assert data["services"]["api"]["status"] == "running"
        assert data["database"] == "connected"
        assert data["websocket"] == "0/0 clients active"

    def test_websocket_health_counts_clients(self, client):
        with client.websocket_connect("/") as ws:
            ws.receive_json()
            data = client.get("/health/websocket").json()["websocket"]
            assert data["server_running"] is True
            assert data["clients_total"] == 1
            assert data["clients_active"] == 1
            assert data["last_check"].endswith("Z")

    def test_unknown_route_uses_error_shape(self, client):
        response = client.get("/does-not-exist")
        assert response.status_code == 404
        assert "error" in response.json()


class TestDashboardWebSocket:

    def test_greeting_and_ping(self, client):
        with client.websocket_connect("/") as ws:
            greeting = ws.receive_json()
            assert greeting["type"] == "connection"
            assert greeting["data"]["message"] == "connected to face detection dashboard"

            ws.send_text("ping")
            assert ws.receive_text() == "pong"

    def test_start_broadcasts_camera_status(self, client, create_user, login):
        create_user("alice")
        headers = login("alice")
        camera = client.post(
            "/api/cameras",
            json={"name": "Lobby", "rtspUrl": "rtsp://10.0.0.7/live"},
            headers=headers,
        ).json()["camera"]

        with client.websocket_connect("/") as ws:
            ws.receive_json()

            response = client.post(f"/api/cameras/{camera['id']}/start", headers=headers)
            assert response.status_code == 200

            message = ws.receive_json()
            assert message["type"] == "camera_status"
            assert message["data"]["cameraId"] == camera["id"]
            assert message["data"]["isStreaming"] is True

    def test_new_alert_is_broadcast(self, client, create_user, login):
        create_user("alice")
        headers = login("alice")
        camera = client.post(
            "/api/cameras",
            json={"name": "Lobby", "rtspUrl": "rtsp://10.0.0.7/live", "location": "Hall"},
            headers=headers,
        ).json()["camera"]

        with client.websocket_connect("/") as ws:
            ws.receive_json()

            client.post("/api/alerts", json={"cameraId": camera["id"], "faceCount": 2}, headers=headers)

            message = ws.receive_json()
            assert message["type"] == "new_alert"
            assert message["data"]["faceCount"] == 2
            assert message["data"]["camera"] == {"id": camera["id"], "name": "Lobby", "location": "Hall"}

