"""Tests for user profile endpoints."""
from httpx import AsyncClient
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from models.user import User


async def test_get_me_in_dev_mode_returns_dev_user(client: AsyncClient) -> None:
    """Test that /users/me returns dev user when DEV_MODE=true."""
    response = await client.get("/users/me")
    assert response.status_code == 200
    assert response.json()["email"] == "dev@localhost"


async def test_get_me_creates_dev_user_on_first_request(
    client: AsyncClient,
    db_session: AsyncSession,
) -> None:
    """Test that the dev user is created in the database on first request."""
    response = await client.get("/users/me")
    assert response.status_code == 200

    result = await db_session.execute(select(User).where(User.email == "dev@localhost"))
    assert result.scalar_one_or_none() is not None


async def test_get_me_returns_same_user_on_subsequent_requests(client: AsyncClient) -> None:
    """Test that the same user is returned on multiple requests."""
    response1 = await client.get("/users/me")
    response2 = await client.get("/users/me")
    assert response1.json()["id"] == response2.json()["id"]


async def test_get_me_response_excludes_password_hash(
    client_as_user_a: AsyncClient,
) -> None:
    """Test that /users/me never exposes credentials."""
    response = await client_as_user_a.get("/users/me")
    assert response.status_code == 200

    data = response.json()
    assert set(data) == {"id", "email", "first_name", "last_name", "created_at", "updated_at"}
    assert data["email"] == "user-a@example.com"


async def test_get_me_requires_token(anon_client: AsyncClient) -> None:
    """Test that /users/me rejects anonymous requests."""
    response = await anon_client.get("/users/me")
    assert response.status_code == 401


async def test_edit_user(client_as_user_a: AsyncClient) -> None:
    """Test editing email and first name."""
    response = await client_as_user_a.patch(
        "/users",
        json={"email": "evan@gmail.com", "first_name": "Evan"},
    )
    assert response.status_code == 200

    data = response.json()
    assert data["email"] == "evan@gmail.com"
    assert data["first_name"] == "Evan"
    assert data["last_name"] is None


async def test_edit_user_partial_keeps_other_fields(client_as_user_a: AsyncClient) -> None:
    """Test that omitted fields are left unchanged."""
    await client_as_user_a.patch("/users", json={"first_name": "Evan", "last_name": "Smith"})

    response = await client_as_user_a.patch("/users", json={"last_name": "Jones"})
    data = response.json()
    assert data["first_name"] == "Evan"
    assert data["last_name"] == "Jones"
    assert data["email"] == "user-a@example.com"


async def test_edit_user_email_taken_returns_403(
    client_as_user_a: AsyncClient,
    user_b: tuple[User, str],
) -> None:
    """Test that a user cannot take another account's email."""
    response = await client_as_user_a.patch("/users", json={"email": user_b[0].email})
    assert response.status_code == 403
    assert response.json()["detail"] == "Credentials taken"


async def test_edit_user_invalid_email_returns_400(client_as_user_a: AsyncClient) -> None:
    """Test that email format is validated."""
    response = await client_as_user_a.patch("/users", json={"email": "nope"})
    assert response.status_code == 400
