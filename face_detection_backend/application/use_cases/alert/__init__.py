from .create_alert import CreateAlertUseCase
from .list_camera_alerts import ListCameraAlertsUseCase

__all__ = [
    "CreateAlertUseCase",
    "ListCameraAlertsUseCase",
]
