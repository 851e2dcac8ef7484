"""Authentication endpoints for user registration, login, and token management."""

from fastapi import APIRouter, Depends, status

from osfinder.api.deps import get_auth_service, get_current_user
from osfinder.models.user import User
from osfinder.schemas.auth import (
    LoginRequest,
    RefreshRequest,
    TokenPair,
    UserRegister,
    UserResponse,
)
from osfinder.services.auth import AuthService

router = APIRouter(prefix="/auth", tags=["authentication"])


@router.post(
    "/register",
    response_model=UserResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Register new user",
)
async def register(
    data: UserRegister,
    auth_service: AuthService = Depends(get_auth_service),
) -> UserResponse:
    """
    Register a new user account.

    Raises:
        400: Email already registered or invalid input
    """
    user = await auth_service.register(
        email=data.email,
        password=data.password,
        full_name=data.full_name,
    )
    return UserResponse.model_validate(user)


@router.post("/login", response_model=TokenPair, summary="User login")
async def login(
    data: LoginRequest,
    auth_service: AuthService = Depends(get_auth_service),
) -> TokenPair:
    """
    Authenticate with email and password.

    Raises:
        401: Invalid credentials
        403: User account deactivated
    """
    return await auth_service.login(email=data.email, password=data.password)


@router.post("/refresh", response_model=TokenPair, summary="Refresh tokens")
async def refresh(
    data: RefreshRequest,
    auth_service: AuthService = Depends(get_auth_service),
) -> TokenPair:
    return await auth_service.refresh_tokens(data.refresh_token)


@router.get("/me", response_model=UserResponse, summary="Current user")
async def me(current_user: User = Depends(get_current_user)) -> UserResponse:
    return UserResponse.model_validate(current_user)
