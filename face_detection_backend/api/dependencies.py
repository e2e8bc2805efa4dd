# Standard library imports
import logging
from typing import Optional

# External package imports
from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

# Local application imports
from ..application.use_cases.auth.get_current_user import GetCurrentUserUseCase
from ..application.dto.user_dto import UserResponse
from ..domain.exceptions import AuthenticationError
from ..di.container import get_container

logger = logging.getLogger(__name__)

# auto_error=False so a missing header yields 401 rather than FastAPI's default 403
security_scheme = HTTPBearer(auto_error=False)


async def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security_scheme),
) -> UserResponse:
    """
    FastAPI dependency to get current authenticated user from JWT token

    Args:
        credentials: HTTP Bearer token credentials, None when the header is absent

    Returns:
        UserResponse with user information

    Raises:
        HTTPException: 401 if the token is missing, invalid or its user is gone
    """
    if credentials is None or not credentials.credentials:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="No token provided",
            headers={"WWW-Authenticate": "Bearer"},
        )

    container = get_container()
    get_current_user_use_case = container.get(GetCurrentUserUseCase)

    try:
        return await get_current_user_use_case.execute(credentials.credentials)
    except AuthenticationError as exception:
        logger.warning(f"Rejected bearer token: {exception}")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or expired token",
            headers={"WWW-Authenticate": "Bearer"},
        )
