# External package imports
from fastapi import APIRouter, Depends, HTTPException, status

# Local application imports
from ..application.dto.alert_dto import AlertCreateRequest, AlertEnvelope
from ..application.dto.user_dto import UserResponse
from ..application.use_cases.alert.create_alert import CreateAlertUseCase
from ..domain.exceptions import CameraNotFoundError
from ..di.container import get_container
from .dependencies import get_current_user


router = APIRouter(tags=["alerts"])


@router.post(
    "",
    response_model=AlertEnvelope,
    response_model_by_alias=True,
    status_code=status.HTTP_201_CREATED,
)
async def create_alert(
    request: AlertCreateRequest,
    current_user: UserResponse = Depends(get_current_user),
) -> AlertEnvelope:
    """
    Record a face detection alert and push it to connected dashboards

    Args:
        request: Alert creation request
        current_user: Current authenticated user (from dependency)

    Returns:
        AlertEnvelope with the stored alert
    """
    container = get_container()
    create_alert_use_case = container.get(CreateAlertUseCase)

    try:
        alert = await create_alert_use_case.execute(request=request, owner_user_id=current_user.id)
        return AlertEnvelope(alert=alert)
    except CameraNotFoundError as exception:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exception))
    except ValueError as exception:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exception))
