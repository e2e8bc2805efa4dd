# Standard library imports
import logging

# Local application imports
from ....domain.repositories.camera_repository import CameraRepository
from ....domain.exceptions import CameraNotFoundError

logger = logging.getLogger(__name__)


class DeleteCameraUseCase:
    """Use case for deleting a camera (its alerts go with it)"""

    def __init__(self, camera_repository: CameraRepository) -> None:
        self.camera_repository = camera_repository

    async def execute(self, camera_id: str, owner_user_id: str) -> None:
        deleted = await self.camera_repository.delete(camera_id, owner_user_id)
        if not deleted:
            raise CameraNotFoundError()
        logger.info(f"Camera deleted: {camera_id}")
