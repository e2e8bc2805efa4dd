from .base import ApiModel
from .common_dto import ErrorResponse, ValidationErrorDetail, ValidationErrorResponse, MessageResponse
from .auth_dto import UserLoginRequest, LoginResponse, LogoutResponse, TokenVerifyResponse
from .user_dto import UserResponse
from .camera_dto import (
    CameraCreateRequest,
    CameraUpdateRequest,
    CameraResponse,
    CameraSummaryResponse,
    CameraDetailResponse,
    CameraEnvelope,
    CameraDetailEnvelope,
    CameraListResponse,
)
from .alert_dto import (
    AlertCreateRequest,
    AlertResponse,
    AlertEnvelope,
    AlertListResponse,
    PaginationInfo,
)

__all__ = [
    "ApiModel",
    "ErrorResponse",
    "ValidationErrorDetail",
    "ValidationErrorResponse",
    "MessageResponse",
    "UserLoginRequest",
    "LoginResponse",
    "LogoutResponse",
    "TokenVerifyResponse",
    "UserResponse",
    "CameraCreateRequest",
    "CameraUpdateRequest",
    "CameraResponse",
    "CameraSummaryResponse",
    "CameraDetailResponse",
    "CameraEnvelope",
    "CameraDetailEnvelope",
    "CameraListResponse",
    "AlertCreateRequest",
    "AlertResponse",
    "AlertEnvelope",
    "AlertListResponse",
    "PaginationInfo",
]
