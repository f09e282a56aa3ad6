"""Shared fixtures for API tests."""
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

import pytest
from httpx import ASGITransport, AsyncClient


TEST_EMAIL = "test@test.com"
TEST_PASSWORD = "test12345678"


async def signup_and_signin(client: AsyncClient, email: str, password: str) -> str:
    """Create an account through the API and return a bearer token for it."""
    response = await client.post("/auth/signup", json={"email": email, "password": password})
    assert response.status_code == 201, response.text

    response = await client.post("/auth/signin", json={"email": email, "password": password})
    assert response.status_code == 200, response.text
    return response.json()["access_token"]


@asynccontextmanager
async def create_user2_client(
    client: AsyncClient,
    email: str = "user2@test.com",
    password: str = "user2-password",
) -> AsyncGenerator[AsyncClient]:
    """
    Create an AsyncClient authenticated as a second user.

    Uses the same app (and so the same dependency overrides) as `client`.
    """
    from api.main import app

    token = await signup_and_signin(client, email, password)
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url=str(client.base_url),
        headers={"Authorization": f"Bearer {token}"},
    ) as user2_client:
        yield user2_client


@pytest.fixture
async def access_token(client: AsyncClient) -> str:
    """Bearer token for the default test user."""
    return await signup_and_signin(client, TEST_EMAIL, TEST_PASSWORD)


@pytest.fixture
async def auth_client(client: AsyncClient, access_token: str) -> AsyncClient:
    """The test client with the default user's bearer token attached."""
    client.headers["Authorization"] = f"Bearer {access_token}"
    return client
