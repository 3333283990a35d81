"""Base for repositories over a per-tenant subcollection of companyProfiles."""

from __future__ import annotations

from typing import Any, Generic, TypeVar

from app.infrastructure.firebase._rest_client import (
    CollectionReference,
    DocumentMissingError,
    FirestoreRESTClient,
)
from app.infrastructure.firebase.collections import COLLECTION_COMPANY_PROFILES
from app.shared.utils.datetime import utc_now

T = TypeVar("T")


def tenant_collection(
    client: FirestoreRESTClient, tenant_id: str, collection_id: str
) -> CollectionReference:
    """Return companyProfiles/{tenant_id}/{collection_id}."""
    return (
        client.collection(COLLECTION_COMPANY_PROFILES)
        .document(tenant_id)
        .collection(collection_id)
    )


def as_float(value: Any, default: float = 0.0) -> float:
    """Firestore returns integerValue for whole numbers; normalize to float."""
    if value is None:
        return default
    return float(value)


class FirestoreTenantScopedRepository(Generic[T]):
    """Create/get/list/update for one tenant subcollection.

    Subclasses set ``collection_id`` and ``order_field`` and implement
    ``_to_result``. Every method takes the tenant ID first; documents of
    other tenants are unreachable because the path is built from it.
    """

    collection_id: str = ""
    order_field: str = "created_at"
    order_direction: str = "ASCENDING"

    def __init__(self, client: FirestoreRESTClient) -> None:
        self._client = client

    def _coll(self, tenant_id: str) -> CollectionReference:
        return tenant_collection(self._client, tenant_id, self.collection_id)

    def _to_result(self, doc_id: str, data: dict) -> T:
        raise NotImplementedError

    async def create(self, tenant_id: str, data: dict[str, Any]) -> T:
        """Create a document with a generated ID and timestamps."""
        now = utc_now()
        doc_ref = self._coll(tenant_id).document()
        payload = {**data, "created_at": now, "updated_at": now}
        await doc_ref.set(payload)
        return self._to_result(doc_ref.id, payload)

    async def get(self, tenant_id: str, doc_id: str) -> T | None:
        """Return the document, or None if absent."""
        doc = await self._coll(tenant_id).document(doc_id).get()
        if not doc:
            return None
        return self._to_result(doc.id, doc.to_dict())

    async def list_all(self, tenant_id: str, limit: int | None = None) -> list[T]:
        """Return documents ordered by ``order_field``."""
        q = self._coll(tenant_id).order_by(self.order_field, self.order_direction)
        if limit:
            q = q.limit(limit)
        return [self._to_result(s.id, s.to_dict()) async for s in q.stream()]

    async def update(
        self, tenant_id: str, doc_id: str, data: dict[str, Any]
    ) -> T | None:
        """Update fields of an existing document; return None if not found."""
        doc_ref = self._coll(tenant_id).document(doc_id)
        updates = {**data, "updated_at": utc_now()}
        try:
            await doc_ref.update(updates)
        except DocumentMissingError:
            return None
        return await self.get(tenant_id, doc_id)
