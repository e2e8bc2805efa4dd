from typing import TYPE_CHECKING
from ...domain.repositories.alert_repository import AlertRepository
from ...domain.repositories.camera_repository import CameraRepository
from ...application.use_cases.alert.create_alert import CreateAlertUseCase
from ...application.use_cases.alert.list_camera_alerts import ListCameraAlertsUseCase
from ...infrastructure.notifications.websocket_manager import WebSocketManager

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class AlertProvider:
    """Alert use case provider - registers all alert-related use cases"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        container.register_factory(
            CreateAlertUseCase,
            lambda: CreateAlertUseCase(
                alert_repository=container.get(AlertRepository),
                camera_repository=container.get(CameraRepository),
                websocket_manager=container.get(WebSocketManager)
            )
        )

        container.register_factory(
            ListCameraAlertsUseCase,
            lambda: ListCameraAlertsUseCase(
                alert_repository=container.get(AlertRepository),
                camera_repository=container.get(CameraRepository)
            )
        )
