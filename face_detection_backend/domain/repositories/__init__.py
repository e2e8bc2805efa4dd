from .user_repository import UserRepository
from .camera_repository import CameraRepository
from .alert_repository import AlertRepository

__all__ = ["UserRepository", "CameraRepository", "AlertRepository"]
