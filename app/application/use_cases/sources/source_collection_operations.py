"""Collections made at source points (recolecciones en fuente)."""

from __future__ import annotations

import logging
from datetime import datetime

from app.application.dtos.hr import VehicleResult
from app.application.dtos.source import (
    CollectionItem,
    CollectionLine,
    SourceCollectionCreate,
    SourceCollectionResult,
    SourcePointResult,
)
from app.application.interfaces.repositories import (
    IMaterialRepository,
    ITenantScopedRepository,
)
from app.core.constants import DEFAULT_LIST_LIMIT, MIN_SIGNATURE_LENGTH
from app.domain.exceptions import ResourceNotFoundException, ValidationException
from app.shared.utils.datetime import utc_now

logger = logging.getLogger(__name__)


class SourceCollectionService:
    def __init__(
        self,
        collection_repo: ITenantScopedRepository[SourceCollectionResult],
        source_repo: ITenantScopedRepository[SourcePointResult],
        material_repo: IMaterialRepository,
        vehicle_repo: ITenantScopedRepository[VehicleResult],
    ) -> None:
        self._collection_repo = collection_repo
        self._source_repo = source_repo
        self._material_repo = material_repo
        self._vehicle_repo = vehicle_repo

    async def _items(
        self, tenant_id: str, lines: list[CollectionLine]
    ) -> list[CollectionItem]:
        if not lines:
            raise ValidationException("At least one item is required", field="items")
        materials = await self._material_repo.get_many(
            tenant_id, {line.material_id for line in lines}
        )
        items = []
        for line in lines:
            material = materials.get(line.material_id)
            if material is None:
                raise ResourceNotFoundException("material", line.material_id)
            items.append(
                CollectionItem(
                    material_id=material.id,
                    material_name=material.name,
                    weight=line.weight,
                    unit_price=line.unit_price,
                    subtotal=round(line.weight * line.unit_price, 2),
                )
            )
        return items

    async def _vehicle_plate(self, tenant_id: str, vehicle_id: str | None) -> str | None:
        if not vehicle_id:
            return None
        vehicle = await self._vehicle_repo.get(tenant_id, vehicle_id)
        if vehicle is None:
            raise ResourceNotFoundException("vehicle", vehicle_id)
        return vehicle.plate

    @staticmethod
    def _totals(items: list[CollectionItem]) -> dict:
        return {
            "items": [
                {
                    "material_id": i.material_id,
                    "material_name": i.material_name,
                    "weight": i.weight,
                    "unit_price": i.unit_price,
                    "subtotal": i.subtotal,
                }
                for i in items
            ],
            "total_weight": round(sum(i.weight for i in items), 2),
            "total_value": round(sum(i.subtotal for i in items), 2),
        }

    async def create_collection(
        self,
        tenant_id: str,
        payload: SourceCollectionCreate,
        registered_by: str | None = None,
    ) -> SourceCollectionResult:
        """Register a signed pickup; totals are always computed here."""
        source = await self._source_repo.get(tenant_id, payload.source_id)
        if source is None:
            raise ResourceNotFoundException("source", payload.source_id)
        if len(payload.signature_data_url or "") < MIN_SIGNATURE_LENGTH:
            raise ValidationException(
                "A signature is required", field="signature_data_url"
            )
        items = await self._items(tenant_id, payload.items)
        data = {
            "source_id": source.id,
            "source_name": source.name,
            "contact_name": source.contact_name,
            "vehicle_id": payload.vehicle_id,
            "vehicle_plate": await self._vehicle_plate(tenant_id, payload.vehicle_id),
            "registered_by": registered_by,
            "date": payload.date or utc_now(),
            "signature_data_url": payload.signature_data_url,
            "notes": payload.notes,
            **self._totals(items),
        }
        collection = await self._collection_repo.create(tenant_id, data)
        logger.info(
            "Source collection %s registered at %s (%.2f kg)",
            collection.id,
            source.name,
            collection.total_weight,
        )
        return collection

    async def update_collection(
        self,
        tenant_id: str,
        collection_id: str,
        items: list[CollectionLine] | None = None,
        vehicle_id: str | None = None,
        notes: str | None = None,
        date: datetime | None = None,
    ) -> SourceCollectionResult:
        await self.get_collection(tenant_id, collection_id)
        updates: dict = {}
        if items is not None:
            updates.update(self._totals(await self._items(tenant_id, items)))
        if vehicle_id is not None:
            updates["vehicle_id"] = vehicle_id
            updates["vehicle_plate"] = await self._vehicle_plate(tenant_id, vehicle_id)
        if notes is not None:
            updates["notes"] = notes
        if date is not None:
            updates["date"] = date
        if not updates:
            raise ValidationException("No fields to update")
        updated = await self._collection_repo.update(tenant_id, collection_id, updates)
        if updated is None:
            raise ResourceNotFoundException("source_collection", collection_id)
        return updated

    async def get_collection(
        self, tenant_id: str, collection_id: str
    ) -> SourceCollectionResult:
        collection = await self._collection_repo.get(tenant_id, collection_id)
        if collection is None:
            raise ResourceNotFoundException("source_collection", collection_id)
        return collection

    async def list_collections(
        self, tenant_id: str, limit: int = DEFAULT_LIST_LIMIT
    ) -> list[SourceCollectionResult]:
        return await self._collection_repo.list_all(tenant_id, limit=limit)
