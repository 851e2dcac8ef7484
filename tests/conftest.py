import os
import sys
from pathlib import Path

import httpx
import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

sys.path.append(str(Path(__file__).parents[1] / "src"))

# Settings are read at import time.
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite://")
os.environ.setdefault("JWT_SECRET", "test-secret-key-not-for-production")

from osfinder.api.deps import get_http_client  # noqa: E402
from osfinder.db.session import get_db  # noqa: E402
from osfinder.main import app  # noqa: E402

TEST_DATABASE_URL = os.getenv("TEST_DATABASE_URL", "sqlite+aiosqlite://")

if TEST_DATABASE_URL.startswith("sqlite"):
    test_engine = create_async_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
else:
    test_engine = create_async_engine(TEST_DATABASE_URL, echo=False)

TestSessionLocal = async_sessionmaker(test_engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture(scope="function")
async def setup_database():
    """Create tables for tests that need the database, and drop them after.

    Not autouse: pure unit tests (matcher, payments, workflow) run without it.
    """
    from osfinder.models.base import Base

    async with test_engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield

    async with test_engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)


@pytest.fixture
async def db_session(setup_database):
    """Provide test database session with fresh connection per test."""
    async with TestSessionLocal() as session:
        yield session
        await session.rollback()


async def _make_user(db_session: AsyncSession, email: str, full_name: str):
    from osfinder.core.security import hash_password
    from osfinder.models.user import User
    from osfinder.repositories.user import UserRepository

    repo = UserRepository(db_session)
    user = User(
        email=email,
        password_hash=hash_password("password123"),
        full_name=full_name,
    )
    return await repo.create(user)


@pytest.fixture
async def test_user(db_session: AsyncSession):
    """Create a test user for authentication tests."""
    return await _make_user(db_session, "testuser@example.com", "Test User")


@pytest.fixture
async def other_user(db_session: AsyncSession):
    return await _make_user(db_session, "other@example.com", "Other User")


@pytest.fixture
async def auth_headers(test_user):
    """Provide authentication headers with valid JWT token."""
    from osfinder.core.security import create_access_token

    token = create_access_token(user_id=test_user.id)
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
async def other_headers(other_user):
    from osfinder.core.security import create_access_token

    return {"Authorization": f"Bearer {create_access_token(user_id=other_user.id)}"}


@pytest.fixture
def github_files() -> dict[str, str]:
    """URL -> body served by the fake GitHub. Unknown URLs answer 404."""
    return {}


@pytest.fixture
def github_transport(github_files: dict[str, str]) -> httpx.MockTransport:
    def handler(request: httpx.Request) -> httpx.Response:
        body = github_files.get(str(request.url))
        if body is None:
            return httpx.Response(404, text="404: Not Found")
        if isinstance(body, dict):
            return httpx.Response(200, json=body)
        return httpx.Response(200, text=body)

    return httpx.MockTransport(handler)


@pytest.fixture
async def client(db_session: AsyncSession, github_transport: httpx.MockTransport):
    """Provide test client with database and outbound HTTP overrides."""

    async def override_get_db():
        yield db_session

    async def override_get_http_client():
        async with httpx.AsyncClient(transport=github_transport) as http:
            yield http

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_http_client] = override_get_http_client

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


@pytest.fixture
async def seeded_labels(db_session: AsyncSession):
    """A few categories and proprietary products to submit against."""
    from osfinder.models.category import Category
    from osfinder.models.proprietary import ProprietarySoftware

    categories = [
        Category(name="Project Management", slug="project-management"),
        Category(name="Task Management", slug="task-management"),
        Category(name="Productivity", slug="productivity"),
    ]
    trello = ProprietarySoftware(name="Trello", slug="trello", description="Kanban boards")
    db_session.add_all([*categories, trello])
    await db_session.commit()
    return {"categories": categories, "trello": trello}
