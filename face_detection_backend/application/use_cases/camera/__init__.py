from .create_camera import CreateCameraUseCase
from .list_cameras import ListCamerasUseCase
from .get_camera import GetCameraUseCase
from .update_camera import UpdateCameraUseCase
from .delete_camera import DeleteCameraUseCase
from .set_camera_streaming import SetCameraStreamingUseCase

__all__ = [
    "CreateCameraUseCase",
    "ListCamerasUseCase",
    "GetCameraUseCase",
    "UpdateCameraUseCase",
    "DeleteCameraUseCase",
    "SetCameraStreamingUseCase",
]
