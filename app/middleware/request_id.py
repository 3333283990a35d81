"""Request ID middleware.

Generates or forwards X-Request-ID, exposes it to log records and sets it on
the response. Client-provided values are sanitized (length + character set)
to prevent log injection. Raw ASGI (no BaseHTTPMiddleware).
"""

import re
import uuid
from typing import Callable

from app.shared.telemetry.logging import request_id_var

REQUEST_ID_MAX_LENGTH = 64
REQUEST_ID_ALLOWED_PATTERN = re.compile(
    r"^[a-zA-Z0-9_-]{1," + str(REQUEST_ID_MAX_LENGTH) + r"}$"
)


def _get_header(scope: dict, name: str) -> str | None:
    """Return first header value for name (case-insensitive)."""
    want = name.lower().encode()
    for k, v in scope.get("headers", []):
        if k.lower() == want:
            return v.decode("utf-8", errors="replace")
    return None


def sanitize_request_id(raw: str | None) -> str:
    """Return raw if valid and safe; otherwise a new UUID4 hex."""
    value = (raw or "").strip()
    if not REQUEST_ID_ALLOWED_PATTERN.match(value):
        return uuid.uuid4().hex
    return value


def RequestIDMiddleware(app: Callable, header_name: str = "X-Request-ID") -> Callable:
    """Add or forward the request ID on each HTTP request and response."""
    header_bytes = header_name.lower().encode()

    async def asgi_app(scope: dict, receive: Callable, send: Callable) -> None:
        if scope["type"] != "http":
            await app(scope, receive, send)
            return
        request_id = sanitize_request_id(_get_header(scope, header_name))
        scope.setdefault("state", {})["request_id"] = request_id
        token = request_id_var.set(request_id)

        async def send_wrapper(message: dict) -> None:
            if message["type"] == "http.response.start":
                headers = [
                    h for h in message.get("headers", []) if h[0].lower() != header_bytes
                ]
                headers.append((header_bytes, request_id.encode()))
                message["headers"] = headers
            await send(message)

        try:
            await app(scope, receive, send_wrapper)
        finally:
            request_id_var.reset(token)

    return asgi_app
