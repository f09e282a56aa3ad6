"""Tests for signup and signin endpoints."""
import jwt
import pytest
from httpx import AsyncClient

from core.config import Settings
from tests.api.conftest import TEST_EMAIL, TEST_PASSWORD


@pytest.mark.parametrize(
    "body",
    [
        {"password": TEST_PASSWORD},
        {"email": TEST_EMAIL},
        {"email": TEST_PASSWORD},
        {"email": TEST_EMAIL, "password": ""},
        {"email": "not-an-email", "password": TEST_PASSWORD},
    ],
)
async def test__signup__invalid_body_returns_400(client: AsyncClient, body: dict) -> None:
    """Missing or malformed email/password is rejected before reaching the service."""
    response = await client.post("/auth/signup", json=body)
    assert response.status_code == 400
    assert "detail" in response.json()


async def test__signup__no_body_returns_400(client: AsyncClient) -> None:
    response = await client.post("/auth/signup")
    assert response.status_code == 400


async def test__signup__returns_201_without_hash(client: AsyncClient) -> None:
    """Signup returns the new user and never the password hash."""
    response = await client.post(
        "/auth/signup", json={"email": TEST_EMAIL, "password": TEST_PASSWORD},
    )
    assert response.status_code == 201

    data = response.json()
    assert data["email"] == TEST_EMAIL
    assert isinstance(data["id"], int)
    assert data["first_name"] is None
    assert data["last_name"] is None
    assert "hash" not in data
    assert "password" not in data
    assert TEST_PASSWORD not in response.text


async def test__signup__duplicate_email_returns_403(client: AsyncClient) -> None:
    body = {"email": TEST_EMAIL, "password": TEST_PASSWORD}
    first = await client.post("/auth/signup", json=body)
    assert first.status_code == 201

    second = await client.post("/auth/signup", json={**body, "password": "another-one"})
    assert second.status_code == 403
    assert second.json()["detail"] == "Email already in use"


async def test__signup__duplicate_does_not_affect_existing_account(client: AsyncClient) -> None:
    """The original credentials still work after a rejected duplicate signup."""
    body = {"email": TEST_EMAIL, "password": TEST_PASSWORD}
    await client.post("/auth/signup", json=body)
    await client.post("/auth/signup", json={**body, "password": "another-one"})

    response = await client.post("/auth/signin", json=body)
    assert response.status_code == 200


@pytest.mark.parametrize(
    "body",
    [
        {"password": TEST_PASSWORD},
        {"email": TEST_EMAIL},
        {"email": TEST_PASSWORD},
    ],
)
async def test__signin__invalid_body_returns_400(client: AsyncClient, body: dict) -> None:
    response = await client.post("/auth/signin", json=body)
    assert response.status_code == 400


async def test__signin__no_body_returns_400(client: AsyncClient) -> None:
    response = await client.post("/auth/signin")
    assert response.status_code == 400


async def test__signin__returns_token_with_identity_claims(
    client: AsyncClient,
    settings: Settings,
) -> None:
    """Signin returns a signed token whose sub/email identify the user."""
    signup = await client.post(
        "/auth/signup", json={"email": TEST_EMAIL, "password": TEST_PASSWORD},
    )
    user_id = signup.json()["id"]

    response = await client.post(
        "/auth/signin", json={"email": TEST_EMAIL, "password": TEST_PASSWORD},
    )
    assert response.status_code == 200
    assert set(response.json()) == {"access_token"}

    claims = jwt.decode(
        response.json()["access_token"],
        settings.jwt_secret,
        algorithms=[settings.jwt_algorithm],
    )
    assert claims["sub"] == str(user_id)
    assert claims["email"] == TEST_EMAIL
    assert claims["exp"] - claims["iat"] == 15 * 60


async def test__signin__wrong_password_and_unknown_email_are_indistinguishable(
    client: AsyncClient,
) -> None:
    """Both failure modes return the same status and body."""
    await client.post("/auth/signup", json={"email": TEST_EMAIL, "password": TEST_PASSWORD})

    wrong_password = await client.post(
        "/auth/signin", json={"email": TEST_EMAIL, "password": "wrong-password"},
    )
    unknown_email = await client.post(
        "/auth/signin", json={"email": "nobody@test.com", "password": TEST_PASSWORD},
    )

    assert wrong_password.status_code == 403
    assert unknown_email.status_code == 403
    assert wrong_password.json() == unknown_email.json() == {"detail": "Invalid credentials"}
