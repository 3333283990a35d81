"""Firestore-backed repository for collections made at source points."""

from __future__ import annotations

from datetime import datetime

from app.application.dtos.source import CollectionItem, SourceCollectionResult
from app.infrastructure.firebase.collections import COLLECTION_SOURCE_COLLECTIONS
from app.infrastructure.firebase.repositories.base import (
    FirestoreTenantScopedRepository,
    as_float,
)


class FirestoreSourceCollectionRepository(
    FirestoreTenantScopedRepository[SourceCollectionResult]
):
    collection_id = COLLECTION_SOURCE_COLLECTIONS
    order_field = "date"
    order_direction = "DESCENDING"

    def _to_result(self, doc_id: str, data: dict) -> SourceCollectionResult:
        return SourceCollectionResult(
            id=doc_id,
            source_id=data.get("source_id", ""),
            source_name=data.get("source_name", ""),
            contact_name=data.get("contact_name", ""),
            vehicle_id=data.get("vehicle_id"),
            vehicle_plate=data.get("vehicle_plate"),
            registered_by=data.get("registered_by"),
            date=data.get("date"),
            items=[
                CollectionItem(
                    material_id=i.get("material_id", ""),
                    material_name=i.get("material_name", ""),
                    weight=as_float(i.get("weight")),
                    unit_price=as_float(i.get("unit_price")),
                    subtotal=as_float(i.get("subtotal")),
                )
                for i in data.get("items") or []
            ],
            total_weight=as_float(data.get("total_weight")),
            total_value=as_float(data.get("total_value")),
            signature_data_url=data.get("signature_data_url", ""),
            notes=data.get("notes"),
            created_at=data.get("created_at"),
            updated_at=data.get("updated_at"),
        )

    async def list_for_source_between(
        self, tenant_id: str, source_id: str, start: datetime, end: datetime
    ) -> list[SourceCollectionResult]:
        """Return one source point's collections dated within [start, end], oldest first."""
        q = (
            self._coll(tenant_id)
            .where("source_id", "==", source_id)
            .where("date", ">=", start)
            .where("date", "<=", end)
            .order_by("date", "ASCENDING")
        )
        return [self._to_result(s.id, s.to_dict()) async for s in q.stream()]
