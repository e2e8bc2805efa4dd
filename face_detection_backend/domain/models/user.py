from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass
class User:
    """Pure domain model for User entity - no external dependencies"""
    id: Optional[str]
    username: str
    hashed_password: str
    created_at: Optional[datetime] = None

    def __post_init__(self):
        """Business validations"""
        if not self.username or not self.username.strip():
            raise ValueError("Username is required")
        if len(self.username) > 50:
            raise ValueError("Username too long")
        if not self.hashed_password:
            raise ValueError("Password hash is required")
