# Local application imports
from ....domain.repositories.camera_repository import CameraRepository
from ....domain.exceptions import CameraNotFoundError
from ...dto.camera_dto import CameraDetailResponse
from ...mappers import camera_to_detail

RECENT_ALERTS_LIMIT = 10


class GetCameraUseCase:
    """Use case for getting a camera by ID"""

    def __init__(self, camera_repository: CameraRepository) -> None:
        self.camera_repository = camera_repository

    async def execute(self, camera_id: str, owner_user_id: str) -> CameraDetailResponse:
        """
        Get a camera by ID together with its most recent alerts

        Args:
            camera_id: ID of the camera
            owner_user_id: ID of the user (for authorization check)

        Returns:
            CameraDetailResponse with camera information

        Raises:
            CameraNotFoundError: If camera not found or doesn't belong to user
        """
        camera = await self.camera_repository.find_by_id(
            camera_id, owner_user_id, recent_alerts_limit=RECENT_ALERTS_LIMIT
        )

        if camera is None or camera.owner_user_id != owner_user_id:
            raise CameraNotFoundError()

        return camera_to_detail(camera)
