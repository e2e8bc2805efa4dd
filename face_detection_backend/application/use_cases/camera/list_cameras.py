# Standard library imports
from typing import List

# Local application imports
from ....domain.repositories.camera_repository import CameraRepository
from ...dto.camera_dto import CameraSummaryResponse
from ...mappers import camera_to_summary


class ListCamerasUseCase:
    """Use case for listing cameras for a user"""

    def __init__(self, camera_repository: CameraRepository) -> None:
        self.camera_repository = camera_repository

    async def execute(self, owner_user_id: str) -> List[CameraSummaryResponse]:
        """
        List all cameras owned by a user, newest first, with their alert counts

        Args:
            owner_user_id: ID of the user

        Returns:
            List of CameraSummaryResponse objects
        """
        cameras = await self.camera_repository.find_by_owner(owner_user_id)
        return [camera_to_summary(camera) for camera in cameras]
