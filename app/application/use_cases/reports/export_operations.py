"""Flat tables of a tenant's records for spreadsheet download.

Invoices are written one row per item; the invoice columns repeat on each
of its rows.
"""

from __future__ import annotations

from datetime import datetime

from app.application.dtos.hr import AssociateResult, CollaboratorResult
from app.application.dtos.report import ExportTable
from app.application.dtos.source import SourcePointResult
from app.application.interfaces.repositories import (
    IMaterialRepository,
    IPurchaseInvoiceRepository,
    ISaleInvoiceRepository,
    ITenantScopedRepository,
)
from app.domain.enums import ExportDataset
from app.shared.utils.datetime import ensure_utc

DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _when(value: datetime | None) -> str:
    return ensure_utc(value).strftime(DATE_FORMAT) if value else ""


class ExportService:
    def __init__(
        self,
        collaborator_repo: ITenantScopedRepository[CollaboratorResult],
        associate_repo: ITenantScopedRepository[AssociateResult],
        source_repo: ITenantScopedRepository[SourcePointResult],
        material_repo: IMaterialRepository,
        purchase_repo: IPurchaseInvoiceRepository,
        sale_repo: ISaleInvoiceRepository,
    ) -> None:
        self._collaborator_repo = collaborator_repo
        self._associate_repo = associate_repo
        self._source_repo = source_repo
        self._material_repo = material_repo
        self._purchase_repo = purchase_repo
        self._sale_repo = sale_repo

    async def table(self, tenant_id: str, dataset: ExportDataset) -> ExportTable:
        """Build the headers and rows for one dataset."""
        builders = {
            ExportDataset.COLLABORATORS: self._collaborators,
            ExportDataset.ASSOCIATES: self._associates,
            ExportDataset.SOURCES: self._sources,
            ExportDataset.MATERIALS: self._materials,
            ExportDataset.PURCHASES: self._purchases,
            ExportDataset.SALES: self._sales,
        }
        return await builders[dataset](tenant_id)

    async def _collaborators(self, tenant_id: str) -> ExportTable:
        rows = [
            [c.name, c.email, c.role]
            for c in await self._collaborator_repo.list_all(tenant_id)
        ]
        return ExportTable(
            title=ExportDataset.COLLABORATORS.value,
            headers=["Nombre Completo", "Email", "Cargo"],
            rows=rows,
        )

    async def _associates(self, tenant_id: str) -> ExportTable:
        rows = [
            [
                a.name,
                a.id_type,
                a.id_number,
                a.phone,
                a.address,
                a.vehicle_plate,
                a.numacro,
                a.nueca,
            ]
            for a in await self._associate_repo.list_all(tenant_id)
        ]
        return ExportTable(
            title=ExportDataset.ASSOCIATES.value,
            headers=[
                "Nombre",
                "Tipo ID",
                "Numero ID",
                "Telefono",
                "Direccion",
                "Placa Vehiculo",
                "NUMACRO",
                "NUECA",
            ],
            rows=rows,
        )

    async def _sources(self, tenant_id: str) -> ExportTable:
        rows = [
            [s.name, s.address, s.type, s.contact_name, s.contact_phone, s.contact_email]
            for s in await self._source_repo.list_all(tenant_id)
        ]
        return ExportTable(
            title=ExportDataset.SOURCES.value,
            headers=[
                "Nombre Fuente",
                "Direccion",
                "Tipo",
                "Nombre Encargado",
                "Telefono Encargado",
                "Email Encargado",
            ],
            rows=rows,
        )

    async def _materials(self, tenant_id: str) -> ExportTable:
        rows = [
            [m.name, m.code, m.price, m.stock]
            for m in await self._material_repo.list_all(tenant_id)
        ]
        return ExportTable(
            title=ExportDataset.MATERIALS.value,
            headers=[
                "Nombre Material",
                "Codigo",
                "Precio Base (COP)",
                "Stock Actual (kg)",
            ],
            rows=rows,
        )

    async def _purchases(self, tenant_id: str) -> ExportTable:
        rows = []
        for invoice in await self._purchase_repo.list_all(tenant_id):
            for item in invoice.items:
                rows.append(
                    [
                        invoice.invoice_number,
                        _when(invoice.date),
                        invoice.supplier_name or "",
                        invoice.supplier_type,
                        item.material_name,
                        item.material_code,
                        item.weight,
                        item.unit_price,
                        item.subtotal,
                        invoice.payment_method,
                        invoice.loan_payment or 0,
                        invoice.net_paid,
                        invoice.notes or "",
                    ]
                )
        return ExportTable(
            title=ExportDataset.PURCHASES.value,
            headers=[
                "N Factura",
                "Fecha",
                "Proveedor",
                "Tipo Proveedor",
                "Material",
                "Codigo Material",
                "Peso (kg)",
                "Precio Unitario (COP)",
                "Subtotal (COP)",
                "Forma de Pago",
                "Abono Prestamo",
                "Neto Pagado",
                "Observaciones",
            ],
            rows=rows,
        )

    async def _sales(self, tenant_id: str) -> ExportTable:
        rows = []
        for invoice in await self._sale_repo.list_all(tenant_id):
            for item in invoice.items:
                rows.append(
                    [
                        invoice.invoice_number,
                        _when(invoice.date),
                        invoice.customer_name or "",
                        item.material_name,
                        item.material_code,
                        item.weight,
                        item.unit_price,
                        item.subtotal,
                        invoice.payment_method,
                        invoice.notes or "",
                    ]
                )
        return ExportTable(
            title=ExportDataset.SALES.value,
            headers=[
                "N Factura",
                "Fecha",
                "Cliente",
                "Material",
                "Codigo Material",
                "Peso (kg)",
                "Precio Unitario (COP)",
                "Subtotal (COP)",
                "Forma de Pago",
                "Observaciones",
            ],
            rows=rows,
        )
