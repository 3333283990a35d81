"""ZIA chat and PQS endpoints with the generative model mocked."""

from unittest.mock import AsyncMock

import httpx
from httpx import AsyncClient

from app.api.v1.dependencies import get_generative_model
from app.main import app
from tests.conftest import text_result


async def test_zia_chat_returns_model_answer(
    client: AsyncClient, auth_headers, model: AsyncMock
) -> None:
    model.generate_content.return_value = text_result("Tienes 3 materiales.")

    response = await client.post(
        "/api/v1/zia/chat",
        json={
            "query": "¿Cuántos materiales tengo?",
            "history": [
                {"role": "user", "content": "hola"},
                {"role": "assistant", "content": "¡Hola!"},
            ],
        },
        headers=auth_headers,
    )

    assert response.status_code == 200
    assert response.json() == {"response": "Tienes 3 materiales."}
    contents = model.generate_content.call_args.args[0]
    assert [c["role"] for c in contents] == ["user", "model", "user"]


async def test_zia_chat_requires_auth(client: AsyncClient) -> None:
    response = await client.post("/api/v1/zia/chat", json={"query": "hola"})
    assert response.status_code == 401


async def test_zia_chat_rejects_unknown_role(client: AsyncClient, auth_headers) -> None:
    response = await client.post(
        "/api/v1/zia/chat",
        json={"query": "hola", "history": [{"role": "system", "content": "x"}]},
        headers=auth_headers,
    )
    assert response.status_code == 422


async def test_zia_upstream_failure_returns_502(
    client: AsyncClient, auth_headers, model: AsyncMock
) -> None:
    request = httpx.Request("POST", "https://gemini.test")
    model.generate_content.side_effect = httpx.HTTPStatusError(
        "boom", request=request, response=httpx.Response(500, request=request)
    )

    response = await client.post(
        "/api/v1/zia/chat", json={"query": "hola"}, headers=auth_headers
    )

    assert response.status_code == 502
    assert response.json()["error"] == "UPSTREAM_ERROR"


async def test_assistant_without_api_key_returns_503(
    client: AsyncClient, auth_headers
) -> None:
    app.dependency_overrides.pop(get_generative_model)

    response = await client.post(
        "/api/v1/zia/chat", json={"query": "hola"}, headers=auth_headers
    )

    assert response.status_code == 503


async def test_pqs_returns_success(
    client: AsyncClient, auth_headers, model: AsyncMock
) -> None:
    response = await client.post(
        "/api/v1/pqs",
        json={
            "collaborator_name": "Luis Gómez",
            "collaborator_email": "luis@example.com",
            "subject": "Dotación",
            "message": "Solicito la entrega de guantes nuevos para la bodega.",
            "company_email": "rrhh@example.com",
        },
        headers=auth_headers,
    )

    assert response.status_code == 200
    assert response.json() == {"success": True}
    prompt = model.generate_text.call_args.args[0]
    assert "Nueva PQS Recibida: Dotación" in prompt


async def test_pqs_short_message_returns_422(client: AsyncClient, auth_headers) -> None:
    response = await client.post(
        "/api/v1/pqs",
        json={
            "collaborator_name": "Luis",
            "collaborator_email": "luis@example.com",
            "subject": "Dotación",
            "message": "corto",
            "company_email": "rrhh@example.com",
        },
        headers=auth_headers,
    )
    assert response.status_code == 422
