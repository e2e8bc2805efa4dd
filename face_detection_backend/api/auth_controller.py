# Standard library imports
import logging

# External package imports
from fastapi import APIRouter, Depends, HTTPException, status

# Local application imports
from ..application.dto.auth_dto import UserLoginRequest, LoginResponse, LogoutResponse, TokenVerifyResponse
from ..application.dto.user_dto import UserResponse
from ..application.use_cases.auth.login_user import LoginUserUseCase
from ..di.container import get_container
from .dependencies import get_current_user

logger = logging.getLogger(__name__)

router = APIRouter(tags=["authentication"])


@router.post("/login", response_model=LoginResponse, response_model_by_alias=True)
async def login_user(request: UserLoginRequest) -> LoginResponse:
    """
    Authenticate user and get access token

    Args:
        request: User login request

    Returns:
        LoginResponse with bearer token and user record
    """
    container = get_container()
    login_use_case = container.get(LoginUserUseCase)

    login_response = await login_use_case.execute(request)
    if login_response is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid username or password"
        )
    return login_response


@router.post("/logout", response_model=LogoutResponse)
async def logout_user() -> LogoutResponse:
    """
    Tokens are stateless; the client is told to discard its copy.
    """
    logger.info("User logout request received")
    return LogoutResponse()


@router.get("/verify", response_model=TokenVerifyResponse, response_model_by_alias=True)
async def verify_token(current_user: UserResponse = Depends(get_current_user)) -> TokenVerifyResponse:
    """
    Check that the bearer token is valid and still maps to a user

    Args:
        current_user: Current authenticated user (from dependency)

    Returns:
        TokenVerifyResponse echoing the user
    """
    return TokenVerifyResponse(user=current_user)
