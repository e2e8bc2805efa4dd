# Standard library imports
import math

# Local application imports
from ....domain.repositories.alert_repository import AlertRepository
from ....domain.repositories.camera_repository import CameraRepository
from ....domain.exceptions import CameraNotFoundError
from ...dto.alert_dto import AlertListResponse, PaginationInfo
from ...mappers import alert_to_response

MAX_PAGE = 1_000_000
MAX_PAGE_SIZE = 100


class ListCameraAlertsUseCase:
    """Use case for paging through a camera's alerts, newest first"""

    def __init__(self, alert_repository: AlertRepository, camera_repository: CameraRepository) -> None:
        self.alert_repository = alert_repository
        self.camera_repository = camera_repository

    async def execute(
        self,
        camera_id: str,
        owner_user_id: str,
        page: int = 1,
        limit: int = 20,
    ) -> AlertListResponse:
        if not 1 <= page <= MAX_PAGE:
            raise ValueError(f"Page must be between 1 and {MAX_PAGE}")
        if not 1 <= limit <= MAX_PAGE_SIZE:
            raise ValueError(f"Limit must be between 1 and {MAX_PAGE_SIZE}")

        camera = await self.camera_repository.find_by_id(camera_id, owner_user_id)
        if camera is None:
            raise CameraNotFoundError()

        total, alerts = await self.alert_repository.find_by_camera(
            camera_id=camera_id,
            owner_user_id=owner_user_id,
            limit=limit,
            skip=(page - 1) * limit,
        )
        return AlertListResponse(
            alerts=[alert_to_response(alert) for alert in alerts],
            pagination=PaginationInfo(
                page=page,
                limit=limit,
                total=total,
                pages=math.ceil(total / limit) if limit else 0,
            ),
        )
