from pydantic import Field

from .base import ApiModel
from .user_dto import UserResponse


class UserLoginRequest(ApiModel):
    """DTO for user login request"""
    username: str = Field(min_length=1, max_length=50)
    password: str = Field(min_length=1, max_length=100)


class LoginResponse(ApiModel):
    """DTO for a successful login: bearer token plus the user record"""
    token: str
    user: UserResponse


class LogoutResponse(ApiModel):
    message: str = "Logged out successfully"
    action: str = "remove_token"


class TokenVerifyResponse(ApiModel):
    valid: bool = True
    message: str = "Token is valid"
    user: UserResponse
