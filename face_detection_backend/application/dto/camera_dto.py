from datetime import datetime
from typing import Annotated, List, Optional

from pydantic import AfterValidator, Field

from .alert_dto import AlertResponse
from ...domain.models.camera import RTSP_SCHEME
from .base import ApiModel, validate_url_scheme

RTSP_URL_MESSAGE = "URL must be an RTSP stream (rtsp://...)"


def _check_rtsp_url(value: str) -> str:
    # the scheme must be lowercase; urlparse would normalize it
    if not value.startswith(RTSP_SCHEME):
        raise ValueError(RTSP_URL_MESSAGE)
    return validate_url_scheme(value, ("rtsp",), RTSP_URL_MESSAGE)


RtspUrl = Annotated[str, AfterValidator(_check_rtsp_url)]


class CameraCreateRequest(ApiModel):
    """DTO for camera creation request"""
    name: str = Field(min_length=1, max_length=100)
    rtsp_url: RtspUrl
    location: Optional[str] = Field(default=None, max_length=200)


class CameraUpdateRequest(ApiModel):
    """DTO for partial camera update; omitted fields are left unchanged"""
    name: Optional[str] = Field(default=None, min_length=1, max_length=100)
    rtsp_url: Optional[RtspUrl] = None
    location: Optional[str] = Field(default=None, max_length=200)
    enabled: Optional[bool] = None


class CameraResponse(ApiModel):
    """DTO for camera response"""
    id: str
    name: str
    rtsp_url: str
    location: Optional[str] = None
    enabled: bool
    is_streaming: bool
    user_id: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class CameraSummaryResponse(CameraResponse):
    """Camera as listed on the dashboard"""
    alert_count: int = 0


class CameraDetailResponse(CameraResponse):
    """Camera with its most recent alerts"""
    alerts: List[AlertResponse] = Field(default_factory=list)


class CameraEnvelope(ApiModel):
    camera: CameraResponse


class CameraDetailEnvelope(ApiModel):
    camera: CameraDetailResponse


class CameraListResponse(ApiModel):
    cameras: List[CameraSummaryResponse] = Field(default_factory=list)
