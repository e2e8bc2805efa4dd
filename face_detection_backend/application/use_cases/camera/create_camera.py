# Standard library imports
import secrets
import logging

# Local application imports
from ....domain.repositories.camera_repository import CameraRepository
from ....domain.models.camera import Camera
from ...dto.camera_dto import CameraCreateRequest, CameraResponse
from ...mappers import camera_to_response

logger = logging.getLogger(__name__)


class CreateCameraUseCase:
    """Use case for creating a new camera"""

    def __init__(self, camera_repository: CameraRepository) -> None:
        self.camera_repository = camera_repository

    def _generate_camera_id(self) -> str:
        """
        Generate a unique camera ID

        Returns:
            Unique camera ID string in format CAM-XXXXXXXXXXXX
        """
        return f"CAM-{secrets.token_hex(6).upper()}"

    async def execute(
        self,
        request: CameraCreateRequest,
        owner_user_id: str,
    ) -> CameraResponse:
        """
        Create a new camera owned by the caller

        Args:
            request: Camera creation request
            owner_user_id: ID of the user creating the camera

        Returns:
            CameraResponse with created camera information
        """
        new_camera = Camera(
            id=self._generate_camera_id(),
            owner_user_id=owner_user_id,
            name=request.name,
            rtsp_url=request.rtsp_url,
            location=request.location or "",
        )

        saved_camera = await self.camera_repository.save(new_camera)
        logger.info(f"Camera created: {saved_camera.name} (ID: {saved_camera.id}) for user {owner_user_id}")

        return camera_to_response(saved_camera)
