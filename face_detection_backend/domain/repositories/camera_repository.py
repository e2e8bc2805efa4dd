from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional
from ..models.camera import Camera


class CameraRepository(ABC):
    """
    Repository interface - defines contract for camera data access.

    Every lookup and mutation takes the caller's user ID and filters on it,
    so a camera owned by another user behaves exactly like a missing one.
    """

    @abstractmethod
    async def find_by_id(
        self, camera_id: str, owner_user_id: str, recent_alerts_limit: int = 0
    ) -> Optional[Camera]:
        """Find a camera owned by the user, optionally with its most recent alerts"""
        pass

    @abstractmethod
    async def find_by_owner(self, owner_user_id: str) -> List[Camera]:
        """Find all cameras owned by a user, newest first, with alert counts"""
        pass

    @abstractmethod
    async def save(self, camera: Camera) -> Camera:
        """Create a camera"""
        pass

    @abstractmethod
    async def update(
        self, camera_id: str, owner_user_id: str, changes: Dict[str, Any]
    ) -> Optional[Camera]:
        """Apply field changes; returns None if the camera is not found"""
        pass

    @abstractmethod
    async def delete(self, camera_id: str, owner_user_id: str) -> bool:
        """Delete a camera and its alerts; returns False if not found"""
        pass

    @abstractmethod
    async def count(self, is_streaming: Optional[bool] = None) -> int:
        """Count cameras across all users, optionally by streaming flag"""
        pass
