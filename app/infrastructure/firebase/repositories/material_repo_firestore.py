"""Firestore-backed material repository (catalog + inventory)."""

from __future__ import annotations

from app.application.dtos.material import MaterialResult
from app.infrastructure.firebase.collections import COLLECTION_MATERIALS
from app.infrastructure.firebase.repositories.base import (
    FirestoreTenantScopedRepository,
    as_float,
)


class FirestoreMaterialRepository(FirestoreTenantScopedRepository[MaterialResult]):
    """Materials under ``companyProfiles/{tenant}/materials``; stock in kg."""

    collection_id = COLLECTION_MATERIALS
    order_field = "name"

    def _to_result(self, doc_id: str, data: dict) -> MaterialResult:
        return MaterialResult(
            id=doc_id,
            name=data.get("name", ""),
            price=as_float(data.get("price")),
            code=data.get("code"),
            stock=as_float(data.get("stock")),
            created_at=data.get("created_at"),
            updated_at=data.get("updated_at"),
        )

    async def list_by_stock(self, tenant_id: str) -> list[MaterialResult]:
        """Return all materials, highest stock first."""
        q = self._coll(tenant_id).order_by("stock", "DESCENDING")
        return [self._to_result(s.id, s.to_dict()) async for s in q.stream()]

    async def get_many(
        self, tenant_id: str, material_ids: set[str]
    ) -> dict[str, MaterialResult]:
        """Return the materials that exist, keyed by ID."""
        found: dict[str, MaterialResult] = {}
        for material_id in sorted(material_ids):
            material = await self.get(tenant_id, material_id)
            if material is not None:
                found[material_id] = material
        return found
