"""Conversions from domain models to response DTOs"""

from ..domain.models.alert import Alert
from ..domain.models.camera import Camera
from ..domain.models.user import User
from .dto.alert_dto import AlertResponse
from .dto.camera_dto import CameraDetailResponse, CameraResponse, CameraSummaryResponse
from .dto.user_dto import UserResponse


def user_to_response(user: User) -> UserResponse:
    return UserResponse(
        id=user.id or "",
        username=user.username,
        created_at=user.created_at,
    )


def alert_to_response(alert: Alert) -> AlertResponse:
    return AlertResponse(
        id=alert.id or "",
        camera_id=alert.camera_id,
        timestamp=alert.timestamp,
        face_count=alert.face_count,
        confidence=alert.confidence,
        snapshot_url=alert.snapshot_url,
        metadata=alert.metadata,
    )


def _camera_fields(camera: Camera) -> dict:
    return dict(
        id=camera.id or "",
        name=camera.name,
        rtsp_url=camera.rtsp_url,
        location=camera.location,
        enabled=camera.enabled,
        is_streaming=camera.is_streaming,
        user_id=camera.owner_user_id,
        created_at=camera.created_at,
        updated_at=camera.updated_at,
    )


def camera_to_response(camera: Camera) -> CameraResponse:
    return CameraResponse(**_camera_fields(camera))


def camera_to_summary(camera: Camera) -> CameraSummaryResponse:
    return CameraSummaryResponse(**_camera_fields(camera), alert_count=camera.alert_count or 0)


def camera_to_detail(camera: Camera) -> CameraDetailResponse:
    return CameraDetailResponse(
        **_camera_fields(camera),
        alerts=[alert_to_response(alert) for alert in camera.recent_alerts],
    )
