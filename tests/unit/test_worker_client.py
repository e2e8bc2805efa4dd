"""
Unit tests for ProcessingWorkerClient using httpx's mock transport.
"""
import json
from unittest.mock import patch

import httpx
import pytest

from face_detection_backend.domain.models.camera import Camera
from face_detection_backend.infrastructure.external import worker_client as worker_client_module
from face_detection_backend.infrastructure.external.worker_client import ProcessingWorkerClient

_RealAsyncClient = httpx.AsyncClient


def _camera() -> Camera:
    return Camera(id="CAM-1", owner_user_id="usr-1", name="Lobby", rtsp_url="rtsp://host/live")


def _patched_client(handler):
    def factory(**kwargs):
        return _RealAsyncClient(transport=httpx.MockTransport(handler), **kwargs)

    return patch.object(worker_client_module.httpx, "AsyncClient", side_effect=factory)


class TestProcessingWorkerClient:

    @pytest.mark.asyncio
    async def test_unconfigured_client_is_a_noop(self, mock_settings):
        client = ProcessingWorkerClient()
        assert client.is_configured is False
        assert await client.start_processing(_camera()) is False
        assert await client.stop_processing(_camera()) is False

    @pytest.mark.asyncio
    async def test_start_posts_camera_payload(self, mock_settings):
        requests = []

        def handler(request: httpx.Request) -> httpx.Response:
            requests.append(request)
            return httpx.Response(202, json={"accepted": True})

        client = ProcessingWorkerClient(base_url="http://worker:9000/", timeout=1.0)
        with _patched_client(handler):
            assert await client.start_processing(_camera()) is True

        assert str(requests[0].url) == "http://worker:9000/cameras/CAM-1/start"
        assert json.loads(requests[0].content) == {
            "id": "CAM-1",
            "name": "Lobby",
            "rtspUrl": "rtsp://host/live",
        }

    @pytest.mark.asyncio
    async def test_stop_posts_to_stop_endpoint(self, mock_settings):
        requests = []

        def handler(request: httpx.Request) -> httpx.Response:
            requests.append(request)
            return httpx.Response(200)

        client = ProcessingWorkerClient(base_url="http://worker:9000", timeout=1.0)
        with _patched_client(handler):
            assert await client.stop_processing(_camera()) is True

        assert requests[0].url.path == "/cameras/CAM-1/stop"

    @pytest.mark.asyncio
    async def test_http_error_is_swallowed(self, mock_settings):
        client = ProcessingWorkerClient(base_url="http://worker:9000", timeout=1.0)
        with _patched_client(lambda request: httpx.Response(500, text="boom")):
            assert await client.start_processing(_camera()) is False

    @pytest.mark.asyncio
    async def test_connection_error_is_swallowed(self, mock_settings):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("refused", request=request)

        client = ProcessingWorkerClient(base_url="http://worker:9000", timeout=1.0)
        with _patched_client(handler):
            assert await client.stop_processing(_camera()) is False
