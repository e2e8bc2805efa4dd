from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, Optional


@dataclass
class Alert:
    """Domain model for a face detection alert raised against a camera"""

    id: Optional[str]
    camera_id: str
    face_count: int = 1
    confidence: Optional[float] = None
    snapshot_url: Optional[str] = None
    metadata: Optional[Dict[str, Any]] = None
    timestamp: Optional[datetime] = None

    def __post_init__(self) -> None:
        if not self.camera_id:
            raise ValueError("Camera ID is required")
        if self.face_count < 0:
            raise ValueError("Face count cannot be negative")
        if self.confidence is not None and not 0 <= self.confidence <= 1:
            raise ValueError("Confidence must be between 0 and 1")
