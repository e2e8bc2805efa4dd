from .user import User
from .camera import Camera
from .alert import Alert

__all__ = ["User", "Camera", "Alert"]
