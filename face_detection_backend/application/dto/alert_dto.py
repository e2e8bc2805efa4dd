from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import Field, field_validator

from .base import ApiModel, validate_url_scheme


class AlertCreateRequest(ApiModel):
    """DTO for alert creation (posted by the processing worker)"""
    camera_id: str = Field(min_length=1)
    face_count: int = Field(default=1, ge=0)
    confidence: Optional[float] = Field(default=None, ge=0, le=1)
    snapshot_url: Optional[str] = None
    metadata: Optional[Dict[str, Any]] = None

    @field_validator("snapshot_url")
    @classmethod
    def check_snapshot_url(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return value
        return validate_url_scheme(value, None, "Snapshot URL must be a valid absolute URL")


class AlertResponse(ApiModel):
    """DTO for alert response"""
    id: str
    camera_id: str
    timestamp: datetime
    face_count: int
    confidence: Optional[float] = None
    snapshot_url: Optional[str] = None
    metadata: Optional[Dict[str, Any]] = None


class AlertEnvelope(ApiModel):
    alert: AlertResponse


class PaginationInfo(ApiModel):
    page: int
    limit: int
    total: int
    pages: int


class AlertListResponse(ApiModel):
    alerts: List[AlertResponse] = Field(default_factory=list)
    pagination: PaginationInfo
