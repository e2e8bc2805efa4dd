# Standard library imports
import logging

# Local application imports
from ....domain.repositories.camera_repository import CameraRepository
from ....domain.exceptions import CameraNotFoundError
from ...dto.camera_dto import CameraUpdateRequest, CameraResponse
from ...mappers import camera_to_response

logger = logging.getLogger(__name__)


class UpdateCameraUseCase:
    """Use case for partially updating a camera"""

    def __init__(self, camera_repository: CameraRepository) -> None:
        self.camera_repository = camera_repository

    async def execute(
        self,
        camera_id: str,
        request: CameraUpdateRequest,
        owner_user_id: str,
    ) -> CameraResponse:
        """
        Apply the fields present in the request to the caller's camera

        Raises:
            CameraNotFoundError: If camera not found or doesn't belong to user
        """
        changes = request.model_dump(exclude_unset=True, exclude_none=True)

        camera = await self.camera_repository.update(camera_id, owner_user_id, changes)
        if camera is None:
            raise CameraNotFoundError()

        logger.info(f"Camera updated: {camera.name} (ID: {camera.id}), fields: {sorted(changes)}")
        return camera_to_response(camera)
