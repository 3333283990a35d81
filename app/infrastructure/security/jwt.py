"""JWT token creation and verification.

Access tokens carry ``sub`` (user ID), ``tenant_id`` and ``email``. Password
reset tokens carry ``purpose=password_reset``, a short expiry and a ``jti``
that the user repository burns on first use, so they can never be used as
access tokens or replayed.
"""

from datetime import UTC, datetime, timedelta
from typing import Any, cast

from jose import JWTError, jwt

from app.core.config import get_settings
from app.shared.utils.generators import generate_cuid

PASSWORD_RESET_PURPOSE = "password_reset"


def create_access_token(
    data: dict[str, Any],
    expires_delta: timedelta | None = None,
) -> str:
    """Create a signed JWT with the given claims.

    Args:
        data: Claims to encode (sub, tenant_id, email).
        expires_delta: Optional TTL; else uses settings.access_token_expire_minutes.

    Returns:
        Encoded JWT string.
    """
    settings = get_settings()
    to_encode = data.copy()
    if expires_delta is None:
        expires_delta = timedelta(minutes=settings.access_token_expire_minutes)
    to_encode["exp"] = datetime.now(UTC) + expires_delta
    encoded = jwt.encode(
        to_encode,
        settings.secret_key.get_secret_value(),
        algorithm=settings.algorithm,
    )
    return cast(str, encoded)


def verify_token(token: str) -> dict[str, Any]:
    """Verify and decode an access token.

    Raises:
        ValueError: If token is invalid, expired, missing ``sub``, or is a
            password reset token.
    """
    payload = _decode(token)
    if payload.get("purpose"):
        raise ValueError("Token is not an access token")
    return payload


def create_password_reset_token(user_id: str, email: str) -> str:
    """Return a short-lived token that authorizes one password change."""
    settings = get_settings()
    return create_access_token(
        {
            "sub": user_id,
            "email": email,
            "purpose": PASSWORD_RESET_PURPOSE,
            "jti": generate_cuid(),
        },
        expires_delta=timedelta(minutes=settings.password_reset_token_expire_minutes),
    )


def verify_password_reset_token(token: str) -> dict[str, Any]:
    """Decode a reset token; raises ValueError unless purpose is password_reset."""
    payload = _decode(token)
    if payload.get("purpose") != PASSWORD_RESET_PURPOSE:
        raise ValueError("Token is not a password reset token")
    if not payload.get("jti"):
        raise ValueError("Token missing required claim: jti")
    return payload


def _decode(token: str) -> dict[str, Any]:
    settings = get_settings()
    try:
        payload = jwt.decode(
            token,
            settings.secret_key.get_secret_value(),
            algorithms=[settings.algorithm],
            options={"require_exp": True, "require_sub": True},
        )
    except JWTError as e:
        raise ValueError(f"Invalid token: {e!s}") from e
    if "sub" not in payload:
        raise ValueError("Token missing required claim: sub")
    return payload
