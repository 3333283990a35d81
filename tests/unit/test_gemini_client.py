"""GeminiClient tests against httpx.MockTransport."""

import json

import httpx
import pytest

from app.infrastructure.ai import GeminiClient
from app.infrastructure.ai.gemini_client import parse_candidate


def _client(handler) -> GeminiClient:
    http = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return GeminiClient(
        api_key="k-123",
        model="gemini-2.0-flash",
        base_url="https://gemini.test/",
        http_client=http,
    )


def test_parse_candidate_text_and_function_calls() -> None:
    body = {
        "candidates": [
            {
                "content": {
                    "role": "model",
                    "parts": [
                        {"text": "Consultando "},
                        {"functionCall": {"name": "get_inventory", "args": {}}},
                        {"text": "inventario"},
                    ],
                }
            }
        ]
    }
    result = parse_candidate(body)
    assert result.text == "Consultando inventario"
    assert [c.name for c in result.function_calls] == ["get_inventory"]
    assert result.content["role"] == "model"
    assert len(result.content["parts"]) == 3


def test_parse_candidate_without_candidates() -> None:
    result = parse_candidate({})
    assert result.text is None
    assert result.function_calls == []
    assert result.content == {"role": "model", "parts": []}


async def test_generate_content_request_shape() -> None:
    seen: dict = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["url"] = str(request.url)
        seen["key"] = request.headers.get("x-goog-api-key")
        seen["body"] = json.loads(request.content)
        return httpx.Response(
            200,
            json={"candidates": [{"content": {"role": "model", "parts": [{"text": "Hola"}]}}]},
        )

    client = _client(handler)
    tools = [{"name": "get_inventory", "description": "stock"}]
    result = await client.generate_content(
        [{"role": "user", "parts": [{"text": "hola"}]}],
        system_instruction="Responde en español",
        tools=tools,
    )

    assert result.text == "Hola"
    assert seen["url"] == (
        "https://gemini.test/v1beta/models/gemini-2.0-flash:generateContent"
    )
    assert seen["key"] == "k-123"
    assert seen["body"]["systemInstruction"] == {
        "parts": [{"text": "Responde en español"}]
    }
    assert seen["body"]["tools"] == [{"functionDeclarations": tools}]


async def test_generate_text_omits_tools() -> None:
    seen: dict = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["body"] = json.loads(request.content)
        return httpx.Response(200, json={"candidates": []})

    assert await _client(handler).generate_text("prompt") is None
    assert "tools" not in seen["body"]
    assert "systemInstruction" not in seen["body"]


async def test_http_error_propagates() -> None:
    client = _client(lambda request: httpx.Response(500, json={"error": "boom"}))
    with pytest.raises(httpx.HTTPStatusError):
        await client.generate_text("prompt")
