from .database_provider import DatabaseProvider
from .repository_provider import RepositoryProvider
from .notification_provider import NotificationProvider
from .auth_provider import AuthProvider
from .camera_provider import CameraProvider
from .alert_provider import AlertProvider
from .system_provider import SystemProvider


__all__ = [
    "DatabaseProvider",
    "RepositoryProvider",
    "NotificationProvider",
    "AuthProvider",
    "CameraProvider",
    "AlertProvider",
    "SystemProvider",
]
