# External package imports
from fastapi import APIRouter, Depends, HTTPException, Query, status

# Local application imports
from ..application.dto.camera_dto import (
    CameraCreateRequest,
    CameraUpdateRequest,
    CameraEnvelope,
    CameraDetailEnvelope,
    CameraListResponse,
)
from ..application.dto.alert_dto import AlertListResponse
from ..application.dto.common_dto import MessageResponse
from ..application.dto.user_dto import UserResponse
from ..application.use_cases.camera.create_camera import CreateCameraUseCase
from ..application.use_cases.camera.list_cameras import ListCamerasUseCase
from ..application.use_cases.camera.get_camera import GetCameraUseCase
from ..application.use_cases.camera.update_camera import UpdateCameraUseCase
from ..application.use_cases.camera.delete_camera import DeleteCameraUseCase
from ..application.use_cases.camera.set_camera_streaming import SetCameraStreamingUseCase
from ..application.use_cases.alert.list_camera_alerts import (
    ListCameraAlertsUseCase,
    MAX_PAGE,
    MAX_PAGE_SIZE,
)
from ..domain.exceptions import CameraNotFoundError
from ..di.container import get_container
from .dependencies import get_current_user


router = APIRouter(tags=["cameras"])


def _to_http_error(exception: ValueError) -> HTTPException:
    if isinstance(exception, CameraNotFoundError):
        return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exception))
    return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exception))


@router.get("", response_model=CameraListResponse, response_model_by_alias=True)
async def list_cameras(
    current_user: UserResponse = Depends(get_current_user),
) -> CameraListResponse:
    """
    List all cameras for the current user, newest first, with alert counts

    Args:
        current_user: Current authenticated user (from dependency)

    Returns:
        CameraListResponse wrapping the cameras
    """
    container = get_container()
    list_cameras_use_case = container.get(ListCamerasUseCase)

    cameras = await list_cameras_use_case.execute(owner_user_id=current_user.id)
    return CameraListResponse(cameras=cameras)


@router.post(
    "",
    response_model=CameraEnvelope,
    response_model_by_alias=True,
    status_code=status.HTTP_201_CREATED,
)
async def create_camera(
    request: CameraCreateRequest,
    current_user: UserResponse = Depends(get_current_user),
) -> CameraEnvelope:
    """
    Create a new camera

    Args:
        request: Camera creation request
        current_user: Current authenticated user (from dependency)

    Returns:
        CameraEnvelope with created camera information
    """
    container = get_container()
    create_camera_use_case = container.get(CreateCameraUseCase)

    try:
        camera = await create_camera_use_case.execute(
            request=request,
            owner_user_id=current_user.id,
        )
        return CameraEnvelope(camera=camera)
    except ValueError as exception:
        raise _to_http_error(exception)


@router.get("/{camera_id}", response_model=CameraDetailEnvelope, response_model_by_alias=True)
async def get_camera(
    camera_id: str,
    current_user: UserResponse = Depends(get_current_user),
) -> CameraDetailEnvelope:
    """
    Get a camera by ID together with its most recent alerts

    Args:
        camera_id: ID of the camera
        current_user: Current authenticated user (from dependency)

    Returns:
        CameraDetailEnvelope with camera information
    """
    container = get_container()
    get_camera_use_case = container.get(GetCameraUseCase)

    try:
        camera = await get_camera_use_case.execute(
            camera_id=camera_id,
            owner_user_id=current_user.id,
        )
        return CameraDetailEnvelope(camera=camera)
    except ValueError as exception:
        raise _to_http_error(exception)


@router.put("/{camera_id}", response_model=CameraEnvelope, response_model_by_alias=True)
async def update_camera(
    camera_id: str,
    request: CameraUpdateRequest,
    current_user: UserResponse = Depends(get_current_user),
) -> CameraEnvelope:
    container = get_container()
    update_camera_use_case = container.get(UpdateCameraUseCase)

    try:
        camera = await update_camera_use_case.execute(
            camera_id=camera_id,
            request=request,
            owner_user_id=current_user.id,
        )
        return CameraEnvelope(camera=camera)
    except ValueError as exception:
        raise _to_http_error(exception)


@router.delete("/{camera_id}", response_model=MessageResponse)
async def delete_camera(
    camera_id: str,
    current_user: UserResponse = Depends(get_current_user),
) -> MessageResponse:
    container = get_container()
    delete_camera_use_case = container.get(DeleteCameraUseCase)

    try:
        await delete_camera_use_case.execute(
            camera_id=camera_id,
            owner_user_id=current_user.id,
        )
    except ValueError as exception:
        raise _to_http_error(exception)
    return MessageResponse(message="Camera deleted successfully")


async def _set_streaming(camera_id: str, owner_user_id: str, is_streaming: bool) -> CameraEnvelope:
    container = get_container()
    set_streaming_use_case = container.get(SetCameraStreamingUseCase)

    try:
        camera = await set_streaming_use_case.execute(
            camera_id=camera_id,
            owner_user_id=owner_user_id,
            is_streaming=is_streaming,
        )
        return CameraEnvelope(camera=camera)
    except ValueError as exception:
        raise _to_http_error(exception)


@router.post("/{camera_id}/start", response_model=CameraEnvelope, response_model_by_alias=True)
async def start_camera(
    camera_id: str,
    current_user: UserResponse = Depends(get_current_user),
) -> CameraEnvelope:
    """
    Start streaming; connected dashboards receive one ``camera_status`` message

    Args:
        camera_id: ID of the camera
        current_user: Current authenticated user (from dependency)
    """
    return await _set_streaming(camera_id, current_user.id, is_streaming=True)


@router.post("/{camera_id}/stop", response_model=CameraEnvelope, response_model_by_alias=True)
async def stop_camera(
    camera_id: str,
    current_user: UserResponse = Depends(get_current_user),
) -> CameraEnvelope:
    """Stop streaming; mirrors the start endpoint"""
    return await _set_streaming(camera_id, current_user.id, is_streaming=False)


@router.get("/{camera_id}/alerts", response_model=AlertListResponse, response_model_by_alias=True)
async def list_camera_alerts(
    camera_id: str,
    page: int = Query(default=1, ge=1, le=MAX_PAGE),
    limit: int = Query(default=20, ge=1, le=MAX_PAGE_SIZE),
    current_user: UserResponse = Depends(get_current_user),
) -> AlertListResponse:
    """
    Page through a camera's alerts, newest first

    Args:
        camera_id: ID of the camera
        page: 1-based page number
        limit: Page size (max 100)
        current_user: Current authenticated user (from dependency)

    Returns:
        AlertListResponse with alerts and pagination info
    """
    container = get_container()
    list_alerts_use_case = container.get(ListCameraAlertsUseCase)

    try:
        return await list_alerts_use_case.execute(
            camera_id=camera_id,
            owner_user_id=current_user.id,
            page=page,
            limit=limit,
        )
    except ValueError as exception:
        raise _to_http_error(exception)
