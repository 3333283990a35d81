"""Firestore-backed user repository (implements IUserRepository)."""

from __future__ import annotations

from app.application.dtos.user import UserCredentials, UserResult
from app.domain.exceptions import (
    AuthenticationException,
    EmailAlreadyRegisteredException,
)
from app.infrastructure.firebase._rest_client import (
    DocumentExistsError,
    DocumentMissingError,
    FirestoreRESTClient,
)
from app.infrastructure.firebase.collections import (
    COLLECTION_USED_RESET_TOKENS,
    COLLECTION_USER_EMAILS,
    COLLECTION_USERS,
)
from app.shared.utils.datetime import utc_now
from app.shared.utils.generators import generate_cuid


def _email_key(email: str) -> str:
    """Marker document ID for an email (lower-cased, no '/')."""
    return email.strip().lower().replace("/", "_")


class FirestoreUserRepository:
    """Users in the root ``users`` collection; emails are unique via ``user_emails`` markers."""

    def __init__(self, client: FirestoreRESTClient) -> None:
        self._client = client
        self._coll = client.collection(COLLECTION_USERS)
        self._emails = client.collection(COLLECTION_USER_EMAILS)
        self._used_reset_tokens = client.collection(COLLECTION_USED_RESET_TOKENS)

    def _to_result(self, doc_id: str, data: dict) -> UserResult:
        return UserResult(
            id=doc_id,
            tenant_id=data.get("tenant_id", doc_id),
            email=data.get("email", ""),
            is_active=data.get("is_active", True),
        )

    async def get_by_id(self, user_id: str) -> UserResult | None:
        """Return user by ID."""
        doc = await self._coll.document(user_id).get()
        if not doc:
            return None
        return self._to_result(doc.id, doc.to_dict())

    async def get_credentials_by_email(self, email: str) -> UserCredentials | None:
        """Return user and stored hash for login, or None if the email is unknown."""
        marker = await self._emails.document(_email_key(email)).get()
        if not marker:
            return None
        user_id = marker.to_dict().get("user_id")
        if not user_id:
            return None
        doc = await self._coll.document(user_id).get()
        if not doc:
            return None
        data = doc.to_dict()
        return UserCredentials(
            user=self._to_result(doc.id, data),
            hashed_password=data.get("hashed_password", ""),
        )

    async def create_user(self, email: str, hashed_password: str) -> UserResult:
        """Create an owner account; its tenant is the new user ID.

        The email marker is created first with create-if-absent semantics so
        two concurrent registrations of one email cannot both succeed.
        """
        user_id = generate_cuid()
        now = utc_now()
        normalized = email.strip().lower()
        try:
            await self._emails.create(
                _email_key(normalized), {"user_id": user_id, "created_at": now}
            )
        except DocumentExistsError:
            raise EmailAlreadyRegisteredException(normalized) from None
        await self._coll.document(user_id).set({
            "tenant_id": user_id,
            "email": normalized,
            "hashed_password": hashed_password,
            "is_active": True,
            "created_at": now,
            "updated_at": now,
        })
        return UserResult(
            id=user_id, tenant_id=user_id, email=normalized, is_active=True
        )

    async def reset_password(
        self, user_id: str, hashed_password: str, token_id: str
    ) -> bool:
        """Replace the stored hash and burn the reset token in one commit.

        Returns False if the user does not exist. A token ID that was already
        used fails the marker's create precondition, so nothing is written.
        """
        now = utc_now()
        batch = self._client.batch()
        batch.create(
            self._used_reset_tokens.document(token_id),
            {"user_id": user_id, "used_at": now},
        )
        batch.update(
            self._coll.document(user_id),
            {"hashed_password": hashed_password, "updated_at": now},
        )
        try:
            await batch.commit()
        except DocumentExistsError:
            raise AuthenticationException("Reset token already used") from None
        except DocumentMissingError:
            return False
        return True
