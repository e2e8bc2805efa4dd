from .auth import (
    LoginUserUseCase,
    GetCurrentUserUseCase,
    CreateUserUseCase,
)
from .camera import (
    CreateCameraUseCase,
    ListCamerasUseCase,
    GetCameraUseCase,
    UpdateCameraUseCase,
    DeleteCameraUseCase,
    SetCameraStreamingUseCase,
)
from .alert import (
    CreateAlertUseCase,
    ListCameraAlertsUseCase,
)
from .system import CollectSystemStatsUseCase

__all__ = [
    "LoginUserUseCase",
    "GetCurrentUserUseCase",
    "CreateUserUseCase",
    "CreateCameraUseCase",
    "ListCamerasUseCase",
    "GetCameraUseCase",
    "UpdateCameraUseCase",
    "DeleteCameraUseCase",
    "SetCameraStreamingUseCase",
    "CreateAlertUseCase",
    "ListCameraAlertsUseCase",
    "CollectSystemStatsUseCase",
]
