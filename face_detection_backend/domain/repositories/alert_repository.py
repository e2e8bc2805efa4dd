from abc import ABC, abstractmethod
from typing import List, Optional, Tuple
from ..models.alert import Alert


class AlertRepository(ABC):
    """Repository interface - defines contract for alert data access"""

    @abstractmethod
    async def save(self, alert: Alert) -> Alert:
        """Create an alert"""
        pass

    @abstractmethod
    async def find_by_camera(
        self, camera_id: str, owner_user_id: str, limit: int, skip: int = 0
    ) -> Tuple[int, List[Alert]]:
        """Return (total, page) of a camera's alerts, newest first, scoped to the owner"""
        pass

    @abstractmethod
    async def count(self, camera_id: Optional[str] = None) -> int:
        """Count alerts, optionally for a single camera"""
        pass
