from datetime import datetime
from typing import Optional

from .base import ApiModel


class UserResponse(ApiModel):
    """DTO for user response (no password)"""
    id: str
    username: str
    created_at: Optional[datetime] = None
