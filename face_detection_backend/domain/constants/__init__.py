"""Constants for domain model field names"""

from .user_fields import UserFields
from .camera_fields import CameraFields
from .message_types import MessageTypes

__all__ = [
    "UserFields",
    "CameraFields",
    "MessageTypes",
]
