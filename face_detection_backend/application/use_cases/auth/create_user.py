# Standard library imports
import logging
import secrets
from typing import Tuple

# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ....domain.models.user import User
from ....core.security import hash_password
from ...dto.user_dto import UserResponse
from ...mappers import user_to_response

logger = logging.getLogger(__name__)


class CreateUserUseCase:
    """Use case for creating a user at setup time (there is no self-service signup)"""

    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository

    @staticmethod
    def _generate_user_id() -> str:
        return f"USR-{secrets.token_hex(6).upper()}"

    async def execute(self, username: str, password: str) -> Tuple[UserResponse, bool]:
        """
        Create a user unless one with the same username exists

        Returns:
            (user, created) where created is False if the user already existed
        """
        existing_user = await self.user_repository.find_by_username(username)
        if existing_user is not None:
            logger.info(f"User {username} already exists (ID: {existing_user.id}), skipping")
            return user_to_response(existing_user), False

        new_user = User(
            id=self._generate_user_id(),
            username=username,
            hashed_password=hash_password(password),
        )
        saved_user = await self.user_repository.save(new_user)
        logger.info(f"User created: {saved_user.username} (ID: {saved_user.id})")
        return user_to_response(saved_user), True
