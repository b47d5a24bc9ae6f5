"""Shared fixtures for API tests."""
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession

from core.config import Settings
from models.user import User
from schemas.auth import AuthCredentials
from services.auth_service import create_access_token, signup


@asynccontextmanager
async def create_token_client(
    db_session: AsyncSession,
    settings: Settings,
    token: str | None = None,
) -> AsyncGenerator[AsyncClient]:
    """
    Create an AsyncClient against the app with dev mode disabled.

    When `token` is given it is sent as the bearer token on every request.
    Cleans up dependency overrides on exit.
    """
    from api.main import app  # noqa: PLC0415
    from core.config import get_settings  # noqa: PLC0415
    from db.session import get_async_session  # noqa: PLC0415

    get_settings.cache_clear()

    async def override_get_async_session() -> AsyncGenerator[AsyncSession]:
        yield db_session

    def override_get_settings() -> Settings:
        return settings

    app.dependency_overrides[get_async_session] = override_get_async_session
    app.dependency_overrides[get_settings] = override_get_settings

    headers = {"Authorization": f"Bearer {token}"} if token else {}
    try:
        async with AsyncClient(
            transport=ASGITransport(app=app),
            base_url="http://test",
            headers=headers,
        ) as token_client:
            yield token_client
    finally:
        app.dependency_overrides.clear()


async def create_user_with_token(
    db_session: AsyncSession,
    settings: Settings,
    email: str,
    password: str = "pass",
) -> tuple[User, str]:
    """Register a user through the service layer and mint an access token for it."""
    user = await signup(db_session, AuthCredentials(email=email, password=password))
    return user, create_access_token(user, settings)


@pytest.fixture
async def anon_client(
    db_session: AsyncSession,
    token_settings: Settings,
) -> AsyncGenerator[AsyncClient]:
    """Client with token verification enabled and no credentials."""
    async with create_token_client(db_session, token_settings) as c:
        yield c


@pytest.fixture
async def user_a(db_session: AsyncSession, token_settings: Settings) -> tuple[User, str]:
    """First registered user and their access token."""
    return await create_user_with_token(db_session, token_settings, "user-a@example.com")


@pytest.fixture
async def user_b(db_session: AsyncSession, token_settings: Settings) -> tuple[User, str]:
    """Second registered user and their access token."""
    return await create_user_with_token(db_session, token_settings, "user-b@example.com")


@pytest.fixture
async def client_as_user_a(
    db_session: AsyncSession,
    token_settings: Settings,
    user_a: tuple[User, str],
) -> AsyncGenerator[AsyncClient]:
    """Client authenticated as user A."""
    async with create_token_client(db_session, token_settings, user_a[1]) as c:
        yield c


@pytest.fixture
async def client_as_user_b(
    db_session: AsyncSession,
    token_settings: Settings,
    user_b: tuple[User, str],
) -> AsyncGenerator[AsyncClient]:
    """Client authenticated as user B."""
    async with create_token_client(db_session, token_settings, user_b[1]) as c:
        yield c
