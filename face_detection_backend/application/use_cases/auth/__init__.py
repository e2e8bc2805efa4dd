from .login_user import LoginUserUseCase
from .get_current_user import GetCurrentUserUseCase
from .create_user import CreateUserUseCase

__all__ = [
    "LoginUserUseCase",
    "GetCurrentUserUseCase",
    "CreateUserUseCase",
]
