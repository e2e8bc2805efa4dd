# Standard library imports
import logging
import secrets
from typing import TYPE_CHECKING

# Local application imports
from ....domain.repositories.alert_repository import AlertRepository
from ....domain.repositories.camera_repository import CameraRepository
from ....domain.models.alert import Alert
from ....domain.exceptions import CameraNotFoundError
from ...dto.alert_dto import AlertCreateRequest, AlertResponse
from ...mappers import alert_to_response

if TYPE_CHECKING:
    from ....infrastructure.notifications.websocket_manager import WebSocketManager

logger = logging.getLogger(__name__)


class CreateAlertUseCase:
    """Use case for recording a face detection alert and pushing it to dashboards"""

    def __init__(
        self,
        alert_repository: AlertRepository,
        camera_repository: CameraRepository,
        websocket_manager: "WebSocketManager",
    ) -> None:
        self.alert_repository = alert_repository
        self.camera_repository = camera_repository
        self.websocket_manager = websocket_manager

    async def execute(self, request: AlertCreateRequest, owner_user_id: str) -> AlertResponse:
        """
        Persist an alert for one of the caller's cameras and broadcast ``new_alert``

        Raises:
            CameraNotFoundError: If camera not found or doesn't belong to user
        """
        camera = await self.camera_repository.find_by_id(request.camera_id, owner_user_id)
        if camera is None:
            raise CameraNotFoundError()

        alert = Alert(
            id=f"ALT-{secrets.token_hex(8).upper()}",
            camera_id=camera.id or request.camera_id,
            face_count=request.face_count,
            confidence=request.confidence,
            snapshot_url=request.snapshot_url,
            metadata=request.metadata,
        )
        saved_alert = await self.alert_repository.save(alert)
        response = alert_to_response(saved_alert)

        payload = response.model_dump(mode="json", by_alias=True)
        payload["camera"] = {
            "id": camera.id,
            "name": camera.name,
            "location": camera.location,
        }
        await self.websocket_manager.broadcast_alert(payload)

        logger.info(
            f"Alert {saved_alert.id} recorded for camera {camera.name}: {saved_alert.face_count} face(s)"
        )
        return response
