"""Tonnage, mass-balance (SUI), collection-certificate and inventory reports."""

from __future__ import annotations

import calendar
from collections import defaultdict
from datetime import UTC, date, datetime

from app.application.dtos.hr import AssociateResult
from app.application.dtos.report import (
    CertificateMaterial,
    CollectionCertificate,
    InventorySummary,
    MassBalanceRow,
    MaterialTonnage,
    TonnageReport,
)
from app.application.dtos.source import SourcePointResult
from app.application.interfaces.repositories import (
    IMaterialRepository,
    IPurchaseInvoiceRepository,
    ISourceCollectionRepository,
    ITenantScopedRepository,
)
from app.core.constants import KG_PER_TONNE
from app.domain.enums import IdentificationType, ReportPeriod, SupplierType
from app.domain.exceptions import ResourceNotFoundException, ValidationException
from app.shared.utils.datetime import (
    end_of_day,
    ensure_utc,
    start_of_day,
    start_of_week,
    utc_now,
    week_of_month,
)

_EPOCH = datetime(1970, 1, 1, tzinfo=UTC)


def period_start(period: ReportPeriod, today: date) -> datetime:
    if period == ReportPeriod.WEEK:
        return start_of_day(start_of_week(today))
    if period == ReportPeriod.MONTH:
        return start_of_day(today.replace(day=1))
    if period == ReportPeriod.YEAR:
        return start_of_day(today.replace(month=1, day=1))
    return _EPOCH


def _id_label(id_type: str) -> str:
    try:
        return IdentificationType(id_type).label
    except ValueError:
        return id_type


class ReportService:
    def __init__(
        self,
        purchase_repo: IPurchaseInvoiceRepository,
        associate_repo: ITenantScopedRepository[AssociateResult],
        material_repo: IMaterialRepository,
        source_repo: ITenantScopedRepository[SourcePointResult],
        collection_repo: ISourceCollectionRepository,
    ) -> None:
        self._purchase_repo = purchase_repo
        self._associate_repo = associate_repo
        self._material_repo = material_repo
        self._source_repo = source_repo
        self._collection_repo = collection_repo

    async def tonnage(
        self, tenant_id: str, period: ReportPeriod, today: date | None = None
    ) -> TonnageReport:
        """Kilograms bought per material from the period start to end of today."""
        today = today or utc_now().date()
        start, end = period_start(period, today), end_of_day(today)
        invoices = await self._purchase_repo.list_between(tenant_id, start, end)
        names: dict[str, str] = {}
        totals: dict[str, float] = defaultdict(float)
        for invoice in invoices:
            for item in invoice.items:
                names[item.material_id] = item.material_name
                totals[item.material_id] += item.weight
        materials = sorted(
            (
                MaterialTonnage(
                    material_id=material_id,
                    material_name=names[material_id],
                    total_kg=round(kg, 2),
                )
                for material_id, kg in totals.items()
            ),
            key=lambda m: m.total_kg,
            reverse=True,
        )
        return TonnageReport(
            period=period.value,
            start=start,
            end=end,
            materials=materials,
            total_kg=round(sum(totals.values()), 2),
        )

    async def mass_balance(
        self, tenant_id: str, start: date, end: date
    ) -> list[MassBalanceRow]:
        """Tonnes bought from each associate per material code and week of month.

        Items without a material code and invoices whose associate no longer
        exists are left out.
        """
        if end < start:
            raise ValidationException("end must not be before start", field="end")
        invoices = await self._purchase_repo.list_between(
            tenant_id,
            start_of_day(start),
            end_of_day(end),
            supplier_type=SupplierType.ASSOCIATE.value,
        )
        associates = {
            a.id: a for a in await self._associate_repo.list_all(tenant_id)
        }
        kg: dict[tuple[int, str, str], float] = defaultdict(float)
        for invoice in invoices:
            associate = associates.get(invoice.supplier_id or "")
            if associate is None:
                continue
            week = week_of_month(ensure_utc(invoice.date).date())
            for item in invoice.items:
                if not item.material_code:
                    continue
                kg[(week, associate.id, item.material_code)] += item.weight

        rows = []
        for (week, associate_id, code), weight in kg.items():
            associate = associates[associate_id]
            rows.append(
                MassBalanceRow(
                    week=week,
                    id_type=_id_label(associate.id_type),
                    id_number=associate.id_number,
                    vehicle_plate=associate.vehicle_plate or "",
                    material_code=code,
                    tonnes=round(weight / KG_PER_TONNE, 3),
                )
            )
        rows.sort(key=lambda r: (r.week, r.id_number, r.material_code))
        return rows

    async def collection_certificate(
        self, tenant_id: str, source_id: str, year: int, month: int
    ) -> CollectionCertificate:
        """Kilograms collected at one source point during a calendar month.

        Materials are grouped by the name recorded on each collection and
        listed heaviest first.
        """
        if not 1 <= month <= 12:
            raise ValidationException("month must be between 1 and 12", field="month")
        source = await self._source_repo.get(tenant_id, source_id)
        if source is None:
            raise ResourceNotFoundException("source", source_id)
        last_day = calendar.monthrange(year, month)[1]
        start = start_of_day(date(year, month, 1))
        end = end_of_day(date(year, month, last_day))
        collections = await self._collection_repo.list_for_source_between(
            tenant_id, source_id, start, end
        )
        totals: dict[str, float] = defaultdict(float)
        for collection in collections:
            for item in collection.items:
                totals[item.material_name] += item.weight
        materials = [
            CertificateMaterial(material_name=name, total_kg=round(kg, 2))
            for name, kg in sorted(totals.items(), key=lambda t: t[1], reverse=True)
        ]
        return CollectionCertificate(
            source_id=source.id,
            source_name=source.name,
            source_address=source.address,
            year=year,
            month=month,
            start=start,
            end=end,
            materials=materials,
            total_kg=round(sum(totals.values()), 2),
        )

    async def inventory_summary(self, tenant_id: str) -> InventorySummary:
        materials = await self._material_repo.list_by_stock(tenant_id)
        return InventorySummary(
            materials=materials,
            total_kg=round(sum(m.stock for m in materials), 2),
        )
