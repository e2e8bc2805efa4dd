# Standard library imports
import logging
from typing import Optional, TYPE_CHECKING

# Local application imports
from ....domain.repositories.camera_repository import CameraRepository
from ....domain.constants import CameraFields
from ....domain.exceptions import CameraNotFoundError
from ...dto.camera_dto import CameraResponse
from ...mappers import camera_to_response

if TYPE_CHECKING:
    from ....infrastructure.notifications.websocket_manager import WebSocketManager
    from ....infrastructure.external.worker_client import ProcessingWorkerClient

logger = logging.getLogger(__name__)


class SetCameraStreamingUseCase:
    """
    Use case behind the start/stop endpoints.

    Flips the streaming flag, hands the camera to the processing worker
    (when one is configured) and broadcasts exactly one ``camera_status``
    message to every connected dashboard.
    """

    def __init__(
        self,
        camera_repository: CameraRepository,
        websocket_manager: "WebSocketManager",
        worker_client: Optional["ProcessingWorkerClient"] = None,
    ) -> None:
        self.camera_repository = camera_repository
        self.websocket_manager = websocket_manager
        self.worker_client = worker_client

    async def execute(
        self,
        camera_id: str,
        owner_user_id: str,
        is_streaming: bool,
    ) -> CameraResponse:
        """
        Start or stop streaming for the caller's camera

        Args:
            camera_id: ID of the camera
            owner_user_id: ID of the user (for authorization check)
            is_streaming: True to start, False to stop

        Returns:
            CameraResponse with the new streaming flag

        Raises:
            CameraNotFoundError: If camera not found or doesn't belong to user
        """
        action = "start" if is_streaming else "stop"
        logger.info(f"Request to {action} streaming for camera: {camera_id}")

        camera = await self.camera_repository.update(
            camera_id, owner_user_id, {CameraFields.IS_STREAMING: is_streaming}
        )
        if camera is None:
            raise CameraNotFoundError()

        if self.worker_client is not None:
            if is_streaming:
                await self.worker_client.start_processing(camera)
            else:
                await self.worker_client.stop_processing(camera)

        await self.websocket_manager.broadcast_camera_status(camera.id or camera_id, is_streaming)

        logger.info(f"Camera streaming {'started' if is_streaming else 'stopped'}: {camera.name}")
        return camera_to_response(camera)
