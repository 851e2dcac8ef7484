"""Authentication service with business logic."""

from uuid import UUID

from fastapi import HTTPException, status
from jose import JWTError

from osfinder.core.security import (
    create_access_token,
    create_refresh_token,
    get_user_id_from_token,
    hash_password,
    verify_password,
)
from osfinder.models.user import User
from osfinder.repositories.user import UserRepository
from osfinder.schemas.auth import TokenPair


class AuthService:
    """Service for authentication operations."""

    def __init__(self, user_repo: UserRepository):
        self.user_repo = user_repo

    async def register(self, email: str, password: str, full_name: str) -> User:
        """
        Register a new user.

        Raises:
            HTTPException: If email already exists
        """
        if await self.user_repo.email_exists(email):
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="Email already registered",
            )

        user = User(
            email=email,
            password_hash=hash_password(password),
            full_name=full_name,
        )
        return await self.user_repo.create(user)

    async def login(self, email: str, password: str) -> TokenPair:
        """
        Authenticate user and return JWT tokens.

        Raises:
            HTTPException: If credentials are invalid or the account is deactivated
        """
        user = await self.user_repo.get_by_email(email)
        if user is None or not verify_password(password, user.password_hash):
            raise HTTPException(
                status_code=status.HTTP_401_UNAUTHORIZED,
                detail="Incorrect email or password",
            )

        if not user.is_active:
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail="User account is deactivated",
            )

        return self._issue(user)

    async def refresh_tokens(self, refresh_token: str) -> TokenPair:
        """
        Generate new token pair using refresh token.

        Access tokens are rejected here; only a refresh token can mint a new pair.
        """
        try:
            user_id = get_user_id_from_token(refresh_token, expected_type="refresh")
        except (JWTError, ValueError):
            raise HTTPException(
                status_code=status.HTTP_401_UNAUTHORIZED,
                detail="Invalid or expired refresh token",
            )

        user = await self.get_current_user(user_id)
        return self._issue(user)

    async def get_current_user(self, user_id: UUID) -> User:
        """
        Get user by ID for authenticated requests.

        Raises:
            HTTPException: If user not found or inactive
        """
        user = await self.user_repo.get_by_id(user_id)
        if user is None:
            raise HTTPException(
                status_code=status.HTTP_401_UNAUTHORIZED,
                detail="User not found",
            )

        if not user.is_active:
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail="User account is deactivated",
            )

        return user

    @staticmethod
    def _issue(user: User) -> TokenPair:
        return TokenPair(
            access_token=create_access_token(user.id),
            refresh_token=create_refresh_token(user.id),
        )
