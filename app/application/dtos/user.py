"""DTOs for user and authentication use cases."""

from dataclasses import dataclass


@dataclass(frozen=True)
class UserResult:
    """User read-model. No password hash."""

    id: str
    tenant_id: str
    email: str
    is_active: bool


@dataclass(frozen=True)
class UserCredentials:
    """User plus stored hash; only the auth service sees this."""

    user: UserResult
    hashed_password: str


@dataclass(frozen=True)
class TokenResult:
    access_token: str
    token_type: str
    expires_in: int
    user: UserResult
