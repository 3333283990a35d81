"""Account operations: register, login, password reset."""

from __future__ import annotations

import logging

from app.application.dtos.user import TokenResult, UserResult
from app.application.interfaces.repositories import IUserRepository
from app.application.interfaces.services import IAuthSecurity
from app.core.config import get_settings
from app.domain.exceptions import (
    AuthenticationException,
    ResourceNotFoundException,
)

logger = logging.getLogger(__name__)

_INVALID_CREDENTIALS = "Invalid email or password"


class AuthService:
    """Owner accounts. The tenant of a registered owner is their own user ID."""

    def __init__(self, user_repo: IUserRepository, auth_security: IAuthSecurity) -> None:
        self._user_repo = user_repo
        self._auth_security = auth_security

    async def register(self, email: str, password: str) -> UserResult:
        """Create an owner account; raises EmailAlreadyRegisteredException on duplicates."""
        hashed = await self._auth_security.hash_password(password)
        user = await self._user_repo.create_user(email, hashed)
        logger.info("Registered user %s", user.id)
        return user

    async def login(self, email: str, password: str) -> TokenResult:
        """Verify credentials and issue an access token."""
        creds = await self._user_repo.get_credentials_by_email(email.strip().lower())
        stored_hash = creds.hashed_password if creds else None
        if not await self._auth_security.verify_password(password, stored_hash):
            raise AuthenticationException(_INVALID_CREDENTIALS)
        if creds is None or not creds.user.is_active:
            raise AuthenticationException(_INVALID_CREDENTIALS)
        user = creds.user
        token = self._auth_security.create_access_token(
            {"sub": user.id, "tenant_id": user.tenant_id, "email": user.email}
        )
        return TokenResult(
            access_token=token,
            token_type="bearer",
            expires_in=get_settings().access_token_expire_minutes * 60,
            user=user,
        )

    async def request_password_reset(self, email: str) -> str | None:
        """Issue a reset token for a known email and log it (no mail delivery).

        Returns the token, or None when the email is unknown. Callers must
        answer the same way in both cases.
        """
        creds = await self._user_repo.get_credentials_by_email(email.strip().lower())
        if creds is None or not creds.user.is_active:
            logger.info("Password reset requested for unknown or inactive email")
            return None
        token = self._auth_security.create_password_reset_token(
            creds.user.id, creds.user.email
        )
        logger.info(
            "Password reset token issued for user %s: %s", creds.user.id, token
        )
        return token

    async def reset_password(self, token: str, new_password: str) -> None:
        """Set a new password using a reset token; each token works once."""
        try:
            claims = self._auth_security.verify_password_reset_token(token)
        except ValueError as e:
            raise AuthenticationException("Invalid or expired reset token") from e
        user_id = claims["sub"]
        hashed = await self._auth_security.hash_password(new_password)
        if not await self._user_repo.reset_password(user_id, hashed, claims["jti"]):
            raise ResourceNotFoundException("user", user_id)
        logger.info("Password reset for user %s", user_id)
