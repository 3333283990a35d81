"""Pytest configuration and fixtures for zycle.

Environment is set before app.main is imported so the rate limiter and
settings pick it up. HTTP tests run against app.main:app with Firestore
and the generative model replaced through dependency_overrides.
"""

import os

os.environ.setdefault("SECRET_KEY", "test-secret-key-for-pytest-only")
os.environ["RATE_LIMIT_ENABLED"] = "false"
os.environ["TELEMETRY_ENABLED"] = "false"
os.environ.pop("GEMINI_API_KEY", None)

from unittest.mock import AsyncMock  # noqa: E402

import pytest  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402

from app.api.v1.dependencies import get_firestore, get_generative_model  # noqa: E402
from app.application.interfaces.services import GenerationResult  # noqa: E402
from app.core.config import get_settings  # noqa: E402
from app.main import app  # noqa: E402
from tests.fakes import FakeFirestore  # noqa: E402

get_settings.cache_clear()

TEST_PASSWORD = "secret123"


def text_result(text: str | None) -> GenerationResult:
    """A model turn with text and no tool calls."""
    content = {"role": "model", "parts": [{"text": text}] if text else []}
    return GenerationResult(text=text, function_calls=[], content=content)


@pytest.fixture
def firestore() -> FakeFirestore:
    return FakeFirestore()


@pytest.fixture
def model() -> AsyncMock:
    """Generative model double; tests set generate_content/generate_text results."""
    mock = AsyncMock()
    mock.generate_content.return_value = text_result("Hola")
    mock.generate_text.return_value = "Asunto: PQS"
    return mock


@pytest.fixture
async def client(firestore: FakeFirestore, model: AsyncMock) -> AsyncClient:
    """Async HTTP client against the FastAPI app (ASGI)."""
    app.dependency_overrides[get_firestore] = lambda: firestore
    app.dependency_overrides[get_generative_model] = lambda: model
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()


async def register_and_login(
    client: AsyncClient, email: str = "owner@example.com"
) -> dict[str, str]:
    """Register an owner and return Authorization headers for it."""
    resp = await client.post(
        "/api/v1/auth/register",
        json={
            "email": email,
            "password": TEST_PASSWORD,
            "confirm_password": TEST_PASSWORD,
        },
    )
    assert resp.status_code == 201, resp.text
    login = await client.post(
        "/api/v1/auth/login", json={"email": email, "password": TEST_PASSWORD}
    )
    assert login.status_code == 200, login.text
    return {"Authorization": f"Bearer {login.json()['access_token']}"}


@pytest.fixture
async def auth_headers(client: AsyncClient) -> dict[str, str]:
    return await register_and_login(client)


@pytest.fixture
async def profile_headers(
    client: AsyncClient, auth_headers: dict[str, str]
) -> dict[str, str]:
    """Auth headers for a tenant whose company profile exists."""
    resp = await client.put(
        "/api/v1/company-profile",
        json={
            "company_name": "Reciclajes Andes",
            "nit": "900123456",
            "phone": "3001234567",
            "address": "Calle 10 # 20-30",
        },
        headers=auth_headers,
    )
    assert resp.status_code == 200, resp.text
    return auth_headers
