"""
Unit tests for alert and system stats use cases.
"""
from datetime import datetime, timezone
from unittest.mock import AsyncMock, MagicMock

import pytest
from face_detection_backend.application.use_cases.alert.create_alert import CreateAlertUseCase
from face_detection_backend.application.use_cases.alert.list_camera_alerts import ListCameraAlertsUseCase
from face_detection_backend.application.use_cases.system.collect_system_stats import CollectSystemStatsUseCase
from face_detection_backend.application.dto.alert_dto import AlertCreateRequest
from face_detection_backend.domain.exceptions import CameraNotFoundError
from face_detection_backend.domain.models.alert import Alert
from face_detection_backend.domain.models.camera import Camera

DETECTED_AT = datetime(2025, 3, 1, 8, 30, tzinfo=timezone.utc)


def _camera() -> Camera:
    return Camera(
        id="cam-1",
        owner_user_id="user-1",
        name="Front Door",
        rtsp_url="rtsp://localhost/front",
        location="Main Entrance",
    )


def _stamped(alert: Alert) -> Alert:
    alert.timestamp = DETECTED_AT
    return alert


class TestCreateAlertUseCase:

    @pytest.mark.asyncio
    async def test_alert_saved_and_broadcast_with_camera_summary(self):
        alert_repo = AsyncMock()
        alert_repo.save.side_effect = _stamped
        camera_repo = AsyncMock()
        camera_repo.find_by_id.return_value = _camera()
        manager = AsyncMock()

        use_case = CreateAlertUseCase(alert_repo, camera_repo, manager)
        result = await use_case.execute(
            AlertCreateRequest(camera_id="cam-1", face_count=2, confidence=0.91),
            owner_user_id="user-1",
        )

        assert result.id.startswith("ALT-")
        assert result.face_count == 2
        manager.broadcast_alert.assert_awaited_once()
        payload = manager.broadcast_alert.call_args.args[0]
        assert payload["cameraId"] == "cam-1"
        assert payload["faceCount"] == 2
        assert payload["camera"] == {"id": "cam-1", "name": "Front Door", "location": "Main Entrance"}

    @pytest.mark.asyncio
    async def test_foreign_camera_rejected_without_broadcast(self):
        alert_repo = AsyncMock()
        camera_repo = AsyncMock()
        camera_repo.find_by_id.return_value = None
        manager = AsyncMock()

        use_case = CreateAlertUseCase(alert_repo, camera_repo, manager)
        with pytest.raises(CameraNotFoundError):
            await use_case.execute(AlertCreateRequest(camera_id="cam-9"), owner_user_id="user-1")

        alert_repo.save.assert_not_called()
        manager.broadcast_alert.assert_not_called()


class TestListCameraAlertsUseCase:

    @pytest.mark.asyncio
    async def test_pagination_math(self):
        alert_repo = AsyncMock()
        alert_repo.find_by_camera.return_value = (
            45,
            [Alert(id=f"alt-{i}", camera_id="cam-1", timestamp=DETECTED_AT) for i in range(20)],
        )
        camera_repo = AsyncMock()
        camera_repo.find_by_id.return_value = _camera()

        use_case = ListCameraAlertsUseCase(alert_repo, camera_repo)
        result = await use_case.execute("cam-1", "user-1", page=2, limit=20)

        assert len(result.alerts) == 20
        assert result.pagination.total == 45
        assert result.pagination.pages == 3
        alert_repo.find_by_camera.assert_awaited_once_with(
            camera_id="cam-1", owner_user_id="user-1", limit=20, skip=20
        )

    @pytest.mark.asyncio
    async def test_unknown_camera_raises(self):
        camera_repo = AsyncMock()
        camera_repo.find_by_id.return_value = None
        use_case = ListCameraAlertsUseCase(AsyncMock(), camera_repo)
        with pytest.raises(CameraNotFoundError):
            await use_case.execute("cam-x", "user-1")

    @pytest.mark.asyncio
    @pytest.mark.parametrize("page, limit", [(0, 20), (1_000_001, 20), (1, 0), (1, 101)])
    async def test_out_of_range_paging_rejected_before_query(self, page, limit):
        alert_repo = AsyncMock()
        use_case = ListCameraAlertsUseCase(alert_repo, AsyncMock())
        with pytest.raises(ValueError):
            await use_case.execute("cam-1", "user-1", page=page, limit=limit)
        alert_repo.find_by_camera.assert_not_awaited()


class TestCollectSystemStatsUseCase:

    @pytest.mark.asyncio
    async def test_collects_counts(self):
        camera_repo = AsyncMock()
        camera_repo.count.side_effect = lambda is_streaming=None: 1 if is_streaming else 4
        alert_repo = AsyncMock()
        alert_repo.count.return_value = 12
        manager = MagicMock()
        manager.get_total_connections.return_value = 2

        stats = await CollectSystemStatsUseCase(camera_repo, alert_repo, manager).execute()

        assert stats == {
            "totalCameras": 4,
            "streamingCameras": 1,
            "totalAlerts": 12,
            "connectedClients": 2,
        }
