from typing import TYPE_CHECKING
from ...domain.repositories.alert_repository import AlertRepository
from ...domain.repositories.camera_repository import CameraRepository
from ...application.use_cases.system.collect_system_stats import CollectSystemStatsUseCase
from ...infrastructure.notifications.websocket_manager import WebSocketManager

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class SystemProvider:
    """System use case provider - registers the periodic stats collector"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        container.register_factory(
            CollectSystemStatsUseCase,
            lambda: CollectSystemStatsUseCase(
                camera_repository=container.get(CameraRepository),
                alert_repository=container.get(AlertRepository),
                websocket_manager=container.get(WebSocketManager)
            )
        )
