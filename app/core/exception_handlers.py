"""Centralized exception handlers for the FastAPI app.

Register with register_exception_handlers(app). Maps domain, upstream HTTP
and framework exceptions to JSON responses.
"""

import logging
from typing import Any

import httpx
from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.core.config import get_settings
from app.domain.exceptions import ZycleException

logger = logging.getLogger(__name__)

# Map domain error_code to HTTP status when applicable
_ERROR_CODE_STATUS: dict[str, int] = {
    "VALIDATION_ERROR": 400,
    "MISSING_TENANT": 400,
    "AUTHENTICATION_ERROR": 401,
    "RESOURCE_NOT_FOUND": 404,
    "EMAIL_ALREADY_REGISTERED": 409,
    "INSUFFICIENT_STOCK": 409,
    "CASH_BOX_STATE": 409,
    "LOAN_STATE": 409,
    "PROFILE_REQUIRED": 409,
}


def _zycle_exception_handler(request: Request, exc: ZycleException) -> JSONResponse:
    """Return JSON from ZycleException.to_dict() with the mapped status code."""
    status = _ERROR_CODE_STATUS.get(exc.error_code, 400)
    return JSONResponse(
        status_code=status,
        content=exc.to_dict(),
    )


def _validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Return 422 with validation error details."""
    return JSONResponse(
        status_code=422,
        content={
            "error": "VALIDATION_ERROR",
            "message": "Request validation failed",
            "details": jsonable_encoder(exc.errors()),
        },
    )


def _http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    """Return JSON for Starlette HTTP exceptions (status + detail)."""
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": "HTTP_ERROR", "message": exc.detail},
        headers=getattr(exc, "headers", None),
    )


def _upstream_exception_handler(request: Request, exc: httpx.HTTPError) -> JSONResponse:
    """Return 502 when Firestore or the model API fails or is unreachable."""
    logger.error("Upstream request failed: %s", exc)
    settings = get_settings()
    detail: Any = str(exc) if settings.debug else "Upstream service unavailable"
    return JSONResponse(
        status_code=502,
        content={"error": "UPSTREAM_ERROR", "message": detail},
    )


def _generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Return 500; include detail only when debug is True."""
    logger.exception("Unhandled exception: %s", exc)
    settings = get_settings()
    detail: Any = str(exc) if settings.debug else "Internal server error"
    return JSONResponse(
        status_code=500,
        content={"error": "INTERNAL_ERROR", "message": detail},
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers on the FastAPI app.

    Call once after creating the app. Handlers: ZycleException (and
    subclasses), RequestValidationError, StarletteHTTPException, httpx.HTTPError,
    generic Exception.
    """
    app.add_exception_handler(ZycleException, _zycle_exception_handler)
    app.add_exception_handler(RequestValidationError, _validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, _http_exception_handler)
    app.add_exception_handler(httpx.HTTPError, _upstream_exception_handler)
    app.add_exception_handler(Exception, _generic_exception_handler)
