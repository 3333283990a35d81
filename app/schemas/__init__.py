"""Pydantic request/response schemas for the API."""

from app.schemas.auth import LoginRequest, RegisterRequest, TokenResponse
from app.schemas.health import HealthResponse
from app.schemas.user import UserResponse

__all__ = [
    "HealthResponse",
    "LoginRequest",
    "RegisterRequest",
    "TokenResponse",
    "UserResponse",
]
