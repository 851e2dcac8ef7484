"""FastAPI dependency injection for authentication, database and outbound HTTP."""

from collections.abc import AsyncIterator
from typing import Annotated

import httpx
from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import JWTError
from sqlalchemy.ext.asyncio import AsyncSession

from osfinder.config import settings
from osfinder.core.security import get_user_id_from_token
from osfinder.db.session import get_db
from osfinder.models.user import User
from osfinder.repositories.user import UserRepository
from osfinder.services.auth import AuthService
from osfinder.services.backlink import BacklinkVerifier
from osfinder.services.claims import ClaimService
from osfinder.services.drafts import DraftService
from osfinder.services.github import GitHubContent
from osfinder.services.submission import SubmissionService

# Bearer token scheme; the optional variant lets anonymous requests through.
security = HTTPBearer()
optional_security = HTTPBearer(auto_error=False)


async def get_user_repository(
    db: AsyncSession = Depends(get_db),
) -> UserRepository:
    return UserRepository(db)


async def get_auth_service(
    user_repo: UserRepository = Depends(get_user_repository),
) -> AuthService:
    return AuthService(user_repo)


async def get_http_client() -> AsyncIterator[httpx.AsyncClient]:
    """Per-request client for GitHub lookups (overridden in tests)."""
    async with httpx.AsyncClient(timeout=settings.http_timeout_seconds) as client:
        yield client


async def get_github_content(
    http: httpx.AsyncClient = Depends(get_http_client),
) -> GitHubContent:
    return GitHubContent(http)


async def get_backlink_verifier(
    github: GitHubContent = Depends(get_github_content),
) -> BacklinkVerifier:
    return BacklinkVerifier(github)


async def get_claim_service(
    db: AsyncSession = Depends(get_db),
    github: GitHubContent = Depends(get_github_content),
) -> ClaimService:
    return ClaimService(db, github)


async def get_submission_service(db: AsyncSession = Depends(get_db)) -> SubmissionService:
    return SubmissionService(db)


async def get_draft_service(db: AsyncSession = Depends(get_db)) -> DraftService:
    return DraftService(db)


async def _resolve_user(token: str, user_repo: UserRepository) -> User:
    credentials_exception = HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Could not validate credentials",
        headers={"WWW-Authenticate": "Bearer"},
    )

    try:
        user_id = get_user_id_from_token(token, expected_type="access")
    except (JWTError, ValueError):
        raise credentials_exception

    user = await user_repo.get_by_id(user_id)
    if user is None:
        raise credentials_exception

    if not user.is_active:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="User account is deactivated",
        )

    return user


async def get_current_user(
    credentials: Annotated[HTTPAuthorizationCredentials, Depends(security)],
    user_repo: UserRepository = Depends(get_user_repository),
) -> User:
    """
    Extract and validate user from JWT token.

    Raises:
        HTTPException: If token is invalid, expired, or user not found
    """
    return await _resolve_user(credentials.credentials, user_repo)


async def get_optional_user(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(optional_security)],
    user_repo: UserRepository = Depends(get_user_repository),
) -> User | None:
    """Signed-in user if a bearer token is present, else None.

    A token that is present but invalid is still rejected with 401.
    """
    if credentials is None:
        return None
    return await _resolve_user(credentials.credentials, user_repo)
