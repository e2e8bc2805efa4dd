# Standard library imports
from typing import Any, Dict, TYPE_CHECKING

# Local application imports
from ....domain.repositories.alert_repository import AlertRepository
from ....domain.repositories.camera_repository import CameraRepository

if TYPE_CHECKING:
    from ....infrastructure.notifications.websocket_manager import WebSocketManager


class CollectSystemStatsUseCase:
    """Use case for gathering the numbers shown in ``system_stats`` broadcasts"""

    def __init__(
        self,
        camera_repository: CameraRepository,
        alert_repository: AlertRepository,
        websocket_manager: "WebSocketManager",
    ) -> None:
        self.camera_repository = camera_repository
        self.alert_repository = alert_repository
        self.websocket_manager = websocket_manager

    async def execute(self) -> Dict[str, Any]:
        return {
            "totalCameras": await self.camera_repository.count(),
            "streamingCameras": await self.camera_repository.count(is_streaming=True),
            "totalAlerts": await self.alert_repository.count(),
            "connectedClients": self.websocket_manager.get_total_connections(),
        }
