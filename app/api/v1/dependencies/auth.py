"""Auth, token and current-user dependencies (composition root)."""

from __future__ import annotations

from typing import Annotated, Any

from fastapi import Depends, HTTPException
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from app.application.dtos.cash_box import Actor
from app.application.dtos.user import UserResult
from app.application.use_cases.accounts import AuthService
from app.infrastructure.firebase import FirestoreRESTClient
from app.infrastructure.firebase.repositories import FirestoreUserRepository
from app.infrastructure.security import (
    create_access_token,
    create_password_reset_token,
    hash_password_async,
    verify_password_async,
    verify_password_reset_token,
    verify_token,
)

from .db import get_firestore


class AuthSecurity:
    """Token and password hashing provided via DI (no direct infra imports in services)."""

    def create_access_token(self, data: dict[str, Any]) -> str:
        return create_access_token(data)

    def create_password_reset_token(self, user_id: str, email: str) -> str:
        return create_password_reset_token(user_id, email)

    def verify_password_reset_token(self, token: str) -> dict[str, Any]:
        return verify_password_reset_token(token)

    async def hash_password(self, password: str) -> str:
        return await hash_password_async(password)

    async def verify_password(self, password: str, hashed: str | None) -> bool:
        return await verify_password_async(password, hashed)


def get_auth_security() -> AuthSecurity:
    """Auth token creation and password hashing (composition root)."""
    return AuthSecurity()


def get_user_repo(
    client: Annotated[FirestoreRESTClient, Depends(get_firestore)],
) -> FirestoreUserRepository:
    return FirestoreUserRepository(client)


def get_auth_service(
    user_repo: Annotated[FirestoreUserRepository, Depends(get_user_repo)],
    auth_security: Annotated[AuthSecurity, Depends(get_auth_security)],
) -> AuthService:
    return AuthService(user_repo, auth_security)


_http_bearer = HTTPBearer(auto_error=False)


async def get_current_user_optional(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(_http_bearer)],
    user_repo: Annotated[FirestoreUserRepository, Depends(get_user_repo)],
) -> UserResult | None:
    """Return current user from JWT if present and valid; else None."""
    if not credentials:
        return None
    try:
        payload = verify_token(credentials.credentials)
    except ValueError:
        return None
    user = await user_repo.get_by_id(payload["sub"])
    if user is None or not user.is_active:
        return None
    if payload.get("tenant_id") != user.tenant_id:
        return None
    return user


async def get_current_user(
    current_user: Annotated[UserResult | None, Depends(get_current_user_optional)],
) -> UserResult:
    """Return current user from JWT; raise 401 if missing or invalid."""
    if current_user is None:
        raise HTTPException(
            status_code=401,
            detail="Not authenticated",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return current_user


async def get_tenant_id(
    current_user: Annotated[UserResult, Depends(get_current_user)],
) -> str:
    """Tenant of the authenticated user; never taken from the request."""
    return current_user.tenant_id


async def get_current_actor(
    current_user: Annotated[UserResult, Depends(get_current_user)],
) -> Actor:
    """Authenticated user as recorded on cash-box movements."""
    return Actor(uid=current_user.id, email=current_user.email)
