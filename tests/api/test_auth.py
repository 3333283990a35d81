"""Tests for auth endpoints over the in-memory Firestore."""

from httpx import AsyncClient

from app.infrastructure.security.jwt import create_password_reset_token
from tests.conftest import TEST_PASSWORD, register_and_login


async def test_register_returns_user_whose_id_is_the_tenant(client: AsyncClient) -> None:
    response = await client.post(
        "/api/v1/auth/register",
        json={
            "email": "Owner@Example.com",
            "password": TEST_PASSWORD,
            "confirm_password": TEST_PASSWORD,
        },
    )
    assert response.status_code == 201
    data = response.json()
    assert data["email"] == "owner@example.com"
    assert data["tenant_id"] == data["id"]
    assert "hashed_password" not in data


async def test_register_mismatched_passwords_returns_422(client: AsyncClient) -> None:
    response = await client.post(
        "/api/v1/auth/register",
        json={
            "email": "owner@example.com",
            "password": TEST_PASSWORD,
            "confirm_password": "different",
        },
    )
    assert response.status_code == 422
    assert response.json()["error"] == "VALIDATION_ERROR"


async def test_register_short_password_returns_422(client: AsyncClient) -> None:
    response = await client.post(
        "/api/v1/auth/register",
        json={"email": "owner@example.com", "password": "123", "confirm_password": "123"},
    )
    assert response.status_code == 422


async def test_register_same_email_twice_returns_409(client: AsyncClient) -> None:
    await register_and_login(client)
    response = await client.post(
        "/api/v1/auth/register",
        json={
            "email": "owner@example.com",
            "password": TEST_PASSWORD,
            "confirm_password": TEST_PASSWORD,
        },
    )
    assert response.status_code == 409
    assert response.json()["error"] == "EMAIL_ALREADY_REGISTERED"


async def test_login_wrong_password_returns_401(client: AsyncClient) -> None:
    await register_and_login(client)
    response = await client.post(
        "/api/v1/auth/login",
        json={"email": "owner@example.com", "password": "wrong-password"},
    )
    assert response.status_code == 401


async def test_login_unknown_email_returns_401(client: AsyncClient) -> None:
    response = await client.post(
        "/api/v1/auth/login",
        json={"email": "nobody@example.com", "password": TEST_PASSWORD},
    )
    assert response.status_code == 401


async def test_me_returns_current_user(client: AsyncClient, auth_headers) -> None:
    response = await client.get("/api/v1/auth/me", headers=auth_headers)
    assert response.status_code == 200
    assert response.json()["email"] == "owner@example.com"


async def test_tenant_routes_require_token(client: AsyncClient) -> None:
    response = await client.get("/api/v1/materials")
    assert response.status_code == 401
    assert response.headers.get("www-authenticate") == "Bearer"


async def test_invalid_token_returns_401(client: AsyncClient) -> None:
    response = await client.get(
        "/api/v1/materials", headers={"Authorization": "Bearer not-a-jwt"}
    )
    assert response.status_code == 401


async def test_forgot_password_is_202_for_unknown_email(client: AsyncClient) -> None:
    response = await client.post(
        "/api/v1/auth/forgot-password", json={"email": "nobody@example.com"}
    )
    assert response.status_code == 202


async def test_reset_password_with_token_changes_password(
    client: AsyncClient, auth_headers
) -> None:
    me = (await client.get("/api/v1/auth/me", headers=auth_headers)).json()
    token = create_password_reset_token(me["id"], me["email"])

    response = await client.post(
        "/api/v1/auth/reset-password",
        json={"token": token, "password": "nueva-clave", "confirm_password": "nueva-clave"},
    )
    assert response.status_code == 200

    old = await client.post(
        "/api/v1/auth/login",
        json={"email": "owner@example.com", "password": TEST_PASSWORD},
    )
    new = await client.post(
        "/api/v1/auth/login",
        json={"email": "owner@example.com", "password": "nueva-clave"},
    )
    assert old.status_code == 401
    assert new.status_code == 200


async def test_reset_password_with_access_token_is_rejected(
    client: AsyncClient, auth_headers
) -> None:
    access_token = auth_headers["Authorization"].removeprefix("Bearer ")
    response = await client.post(
        "/api/v1/auth/reset-password",
        json={"token": access_token, "password": "nueva-clave", "confirm_password": "nueva-clave"},
    )
    assert response.status_code == 401


async def test_reset_token_cannot_be_used_twice(
    client: AsyncClient, auth_headers
) -> None:
    me = (await client.get("/api/v1/auth/me", headers=auth_headers)).json()
    token = create_password_reset_token(me["id"], me["email"])

    first = await client.post(
        "/api/v1/auth/reset-password",
        json={"token": token, "password": "nueva-clave", "confirm_password": "nueva-clave"},
    )
    replay = await client.post(
        "/api/v1/auth/reset-password",
        json={"token": token, "password": "otra-clave", "confirm_password": "otra-clave"},
    )

    assert first.status_code == 200
    assert replay.status_code == 401
    login = await client.post(
        "/api/v1/auth/login",
        json={"email": "owner@example.com", "password": "nueva-clave"},
    )
    assert login.status_code == 200
