"""Firestore-backed company profile repository (one document per tenant)."""

from __future__ import annotations

from app.application.dtos.company_profile import CompanyProfileResult
from app.infrastructure.firebase._rest_client import FirestoreRESTClient
from app.infrastructure.firebase.collections import COLLECTION_COMPANY_PROFILES
from app.shared.utils.datetime import utc_now


class FirestoreCompanyProfileRepository:
    """Reads and upserts ``companyProfiles/{tenant_id}``."""

    def __init__(self, client: FirestoreRESTClient) -> None:
        self._client = client
        self._coll = client.collection(COLLECTION_COMPANY_PROFILES)

    def _to_result(self, doc_id: str, data: dict) -> CompanyProfileResult:
        return CompanyProfileResult(
            tenant_id=doc_id,
            company_name=data.get("company_name", ""),
            nit=data.get("nit", ""),
            phone=data.get("phone", ""),
            address=data.get("address", ""),
            created_at=data.get("created_at"),
            updated_at=data.get("updated_at"),
        )

    async def get(self, tenant_id: str) -> CompanyProfileResult | None:
        doc = await self._coll.document(tenant_id).get()
        if not doc or not doc.to_dict().get("company_name"):
            return None
        return self._to_result(doc.id, doc.to_dict())

    async def upsert(
        self,
        tenant_id: str,
        company_name: str,
        nit: str,
        phone: str,
        address: str,
    ) -> CompanyProfileResult:
        """Create or update the profile; created_at is kept on updates."""
        existing = await self.get(tenant_id)
        now = utc_now()
        data = {
            "user_id": tenant_id,
            "company_name": company_name,
            "nit": nit,
            "phone": phone,
            "address": address,
            "updated_at": now,
        }
        if existing is None:
            data["created_at"] = now
        await self._coll.document(tenant_id).set(data, merge=True)
        return self._to_result(
            tenant_id,
            {**data, "created_at": existing.created_at if existing else now},
        )
