# Standard library imports
import logging
from functools import lru_cache
from typing import Optional

# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ....domain.constants import UserFields
from ....core.security import hash_password, verify_password, create_jwt_token
from ...dto.auth_dto import UserLoginRequest, LoginResponse
from ...mappers import user_to_response

logger = logging.getLogger(__name__)


@lru_cache(maxsize=1)
def _dummy_password_hash() -> str:
    """Hash verified against when the username is unknown"""
    return hash_password("unknown-user-placeholder")


class LoginUserUseCase:
    """Use case for authenticating a user and generating JWT token"""

    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository

    async def execute(self, request: UserLoginRequest) -> Optional[LoginResponse]:
        """
        Authenticate user and generate access token

        Unknown usernames and wrong passwords both yield None so callers
        cannot tell which one failed.

        Args:
            request: Login request with username and password

        Returns:
            LoginResponse if authentication successful, None otherwise
        """
        user = await self.user_repository.find_by_username(request.username)
        if user is None:
            verify_password(request.password, _dummy_password_hash())
            logger.warning(f"Login failed: user '{request.username}' not found")
            return None

        if not verify_password(request.password, user.hashed_password):
            logger.warning(f"Login failed: invalid password for '{request.username}'")
            return None

        token = create_jwt_token({
            UserFields.TOKEN_SUBJECT: user.id or "",
            UserFields.USERNAME: user.username,
        })

        logger.info(f"Login successful for user: {user.username}")
        return LoginResponse(token=token, user=user_to_response(user))
