"""Generic create/get/list/update for per-tenant catalogs.

Used for source points, associates, vehicles, positions and collaborators,
which have no rules beyond field validation done at the API boundary.
"""

from __future__ import annotations

from typing import Any, Generic, TypeVar

from app.application.interfaces.repositories import ITenantScopedRepository
from app.core.constants import DEFAULT_LIST_LIMIT
from app.domain.exceptions import ResourceNotFoundException, ValidationException

T = TypeVar("T")


class CatalogService(Generic[T]):
    """Tenant-scoped CRUD (no delete) over one catalog repository."""

    def __init__(self, repo: ITenantScopedRepository[T], resource_type: str) -> None:
        self._repo = repo
        self.resource_type = resource_type

    async def create(self, tenant_id: str, data: dict[str, Any]) -> T:
        return await self._repo.create(tenant_id, data)

    async def get(self, tenant_id: str, item_id: str) -> T:
        """Return the item or raise ResourceNotFoundException."""
        item = await self._repo.get(tenant_id, item_id)
        if item is None:
            raise ResourceNotFoundException(self.resource_type, item_id)
        return item

    async def list_items(
        self, tenant_id: str, limit: int = DEFAULT_LIST_LIMIT
    ) -> list[T]:
        return await self._repo.list_all(tenant_id, limit=limit)

    async def update(self, tenant_id: str, item_id: str, data: dict[str, Any]) -> T:
        """Apply a partial update; keys with None values are ignored."""
        updates = {k: v for k, v in data.items() if v is not None}
        if not updates:
            raise ValidationException("At least one field is required")
        updated = await self._repo.update(tenant_id, item_id, updates)
        if updated is None:
            raise ResourceNotFoundException(self.resource_type, item_id)
        return updated
