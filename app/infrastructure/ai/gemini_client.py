"""Gemini REST client (``v1beta/models/{model}:generateContent``).

Uses httpx.AsyncClient; HTTP errors propagate as httpx exceptions and are
mapped to 502 by the API layer. No retries.
"""

from __future__ import annotations

import logging
from typing import Any

import httpx

from app.application.interfaces.services import FunctionCall, GenerationResult

logger = logging.getLogger(__name__)


def parse_candidate(body: dict[str, Any]) -> GenerationResult:
    """Extract text and function calls from the first candidate of a response."""
    candidates = body.get("candidates") or []
    content = (candidates[0].get("content") if candidates else None) or {}
    content = {"role": content.get("role", "model"), "parts": content.get("parts", [])}
    texts: list[str] = []
    calls: list[FunctionCall] = []
    for part in content["parts"]:
        if "functionCall" in part:
            call = part["functionCall"]
            calls.append(FunctionCall(name=call.get("name", ""), args=call.get("args") or {}))
        elif part.get("text"):
            texts.append(part["text"])
    text = "".join(texts).strip() or None
    return GenerationResult(text=text, function_calls=calls, content=content)


class GeminiClient:
    """Minimal async client for Gemini content generation with function calling."""

    def __init__(
        self,
        api_key: str,
        model: str,
        base_url: str = "https://generativelanguage.googleapis.com",
        timeout: float = 60.0,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        self._api_key = api_key
        self._model = model
        self._url = f"{base_url.rstrip('/')}/v1beta/models/{model}:generateContent"
        self._owns_http = http_client is None
        self._http = http_client if http_client is not None else httpx.AsyncClient(timeout=timeout)

    async def aclose(self) -> None:
        if self._owns_http:
            await self._http.aclose()

    async def _post(self, body: dict[str, Any]) -> dict[str, Any]:
        r = await self._http.post(
            self._url,
            json=body,
            headers={"x-goog-api-key": self._api_key},
        )
        r.raise_for_status()
        return r.json()

    async def generate_content(
        self,
        contents: list[dict[str, Any]],
        system_instruction: str | None = None,
        tools: list[dict[str, Any]] | None = None,
    ) -> GenerationResult:
        body: dict[str, Any] = {"contents": contents}
        if system_instruction:
            body["systemInstruction"] = {"parts": [{"text": system_instruction}]}
        if tools:
            body["tools"] = [{"functionDeclarations": tools}]
        result = parse_candidate(await self._post(body))
        logger.debug(
            "Gemini %s returned %d function call(s)",
            self._model,
            len(result.function_calls),
        )
        return result

    async def generate_text(self, prompt: str) -> str | None:
        result = await self.generate_content(
            [{"role": "user", "parts": [{"text": prompt}]}]
        )
        return result.text
