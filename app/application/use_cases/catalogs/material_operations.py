"""Material catalog and inventory operations."""

from __future__ import annotations

from app.application.dtos.material import MaterialResult
from app.application.interfaces.repositories import IMaterialRepository
from app.application.use_cases.catalogs.catalog_operations import CatalogService


class MaterialService(CatalogService[MaterialResult]):
    """Materials start with zero stock; stock only changes through invoices."""

    def __init__(self, material_repo: IMaterialRepository) -> None:
        super().__init__(material_repo, "material")
        self._material_repo = material_repo

    async def create_material(
        self,
        tenant_id: str,
        name: str,
        price: float,
        code: str | None = None,
    ) -> MaterialResult:
        return await self.create(
            tenant_id,
            {
                "name": name.strip(),
                "price": price,
                "code": (code or "").strip() or None,
                "stock": 0.0,
            },
        )

    async def update_material(
        self,
        tenant_id: str,
        material_id: str,
        name: str | None = None,
        price: float | None = None,
        code: str | None = None,
    ) -> MaterialResult:
        return await self.update(
            tenant_id,
            material_id,
            {
                "name": name.strip() if name is not None else None,
                "price": price,
                "code": code.strip() if code is not None else None,
            },
        )

    async def list_inventory(self, tenant_id: str) -> list[MaterialResult]:
        """All materials, highest stock first."""
        return await self._material_repo.list_by_stock(tenant_id)
