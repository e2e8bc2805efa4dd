# Standard library imports
from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from .alert import Alert


RTSP_SCHEME = "rtsp://"


@dataclass
class Camera:
    """
    Pure domain model for Camera entity - no external dependencies.

    A camera is owned by exactly one user. ``alert_count`` and ``recent_alerts``
    are read-side projections filled in by the repository when requested.
    """
    id: Optional[str]
    owner_user_id: str
    name: str
    rtsp_url: str
    location: Optional[str] = ""
    enabled: bool = True
    is_streaming: bool = False
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    alert_count: Optional[int] = None
    recent_alerts: List["Alert"] = field(default_factory=list)

    def __post_init__(self) -> None:
        """Business validations"""
        if not self.owner_user_id:
            raise ValueError("Owner user ID is required")
        if not self.name or len(self.name.strip()) < 1:
            raise ValueError("Camera name is required")
        if not self.rtsp_url or not self.rtsp_url.startswith(RTSP_SCHEME):
            raise ValueError("URL must be an RTSP stream (rtsp://...)")
