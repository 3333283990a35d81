"""Read-only business data exposed to the assistant's tools.

Every function is scoped to one tenant; an empty tenant ID yields no data.
"""

from __future__ import annotations

from app.application.dtos.invoice import PurchaseInvoiceResult, SaleInvoiceResult
from app.application.dtos.material import MaterialResult
from app.application.interfaces.repositories import (
    IMaterialRepository,
    IPurchaseInvoiceRepository,
    ISaleInvoiceRepository,
)
from app.shared.telemetry import traced

RECENT_LIMIT = 5


class DataService:
    def __init__(
        self,
        material_repo: IMaterialRepository,
        purchase_repo: IPurchaseInvoiceRepository,
        sale_repo: ISaleInvoiceRepository,
    ) -> None:
        self._material_repo = material_repo
        self._purchase_repo = purchase_repo
        self._sale_repo = sale_repo

    @traced("data.get_inventory")
    async def get_inventory(self, tenant_id: str) -> list[MaterialResult]:
        """Return the tenant's materials, highest stock first."""
        if not tenant_id:
            return []
        return await self._material_repo.list_by_stock(tenant_id)

    @traced("data.get_recent_purchases")
    async def get_recent_purchases(
        self, tenant_id: str, limit: int = RECENT_LIMIT
    ) -> list[PurchaseInvoiceResult]:
        """Return at most ``limit`` purchase invoices, newest first."""
        if not tenant_id:
            return []
        return await self._purchase_repo.list_all(tenant_id, limit=limit)

    @traced("data.get_recent_sales")
    async def get_recent_sales(
        self, tenant_id: str, limit: int = RECENT_LIMIT
    ) -> list[SaleInvoiceResult]:
        """Return at most ``limit`` sale invoices, newest first."""
        if not tenant_id:
            return []
        return await self._sale_repo.list_all(tenant_id, limit=limit)
