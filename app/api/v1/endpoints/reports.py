"""Reports API: tonnage, SUI mass balance, source certificates, inventory and exports."""

from datetime import date
from typing import Annotated

from fastapi import APIRouter, Depends, Query, Response

from app.api.v1.dependencies import (
    get_export_service,
    get_report_service,
    get_tenant_id,
    get_workbook_writer,
)
from app.application.interfaces.services import IWorkbookWriter
from app.application.use_cases.reports import ExportService, ReportService
from app.domain.enums import ExportDataset, ReportPeriod
from app.schemas.report import (
    CollectionCertificateResponse,
    InventorySummaryResponse,
    MassBalanceRowResponse,
    TonnageReportResponse,
)

router = APIRouter()

Reports = Annotated[ReportService, Depends(get_report_service)]


@router.get("/tonnage", response_model=TonnageReportResponse)
async def get_tonnage(
    tenant_id: Annotated[str, Depends(get_tenant_id)],
    report_service: Reports,
    period: ReportPeriod = Query(ReportPeriod.MONTH),
):
    """Kilograms purchased per material, largest first."""
    report = await report_service.tonnage(tenant_id, period)
    return TonnageReportResponse.model_validate(report)


@router.get("/mass-balance", response_model=list[MassBalanceRowResponse])
async def get_mass_balance(
    tenant_id: Annotated[str, Depends(get_tenant_id)],
    report_service: Reports,
    start: date = Query(...),
    end: date = Query(...),
):
    rows = await report_service.mass_balance(tenant_id, start, end)
    return [MassBalanceRowResponse.model_validate(r) for r in rows]


@router.get("/certificate", response_model=CollectionCertificateResponse)
async def get_collection_certificate(
    tenant_id: Annotated[str, Depends(get_tenant_id)],
    report_service: Reports,
    source_id: str = Query(...),
    year: int = Query(..., ge=2000, le=9999),
    month: int = Query(..., ge=1, le=12),
):
    """Kilograms collected at one source point in a calendar month."""
    certificate = await report_service.collection_certificate(
        tenant_id, source_id, year, month
    )
    return CollectionCertificateResponse.model_validate(certificate)


@router.get("/inventory", response_model=InventorySummaryResponse)
async def get_inventory_summary(
    tenant_id: Annotated[str, Depends(get_tenant_id)],
    report_service: Reports,
):
    """Stock per material and the total kilograms in the warehouse."""
    summary = await report_service.inventory_summary(tenant_id)
    return InventorySummaryResponse.model_validate(summary)


@router.get("/export/{dataset}")
async def export_dataset(
    dataset: ExportDataset,
    tenant_id: Annotated[str, Depends(get_tenant_id)],
    export_service: Annotated[ExportService, Depends(get_export_service)],
    writer: Annotated[IWorkbookWriter, Depends(get_workbook_writer)],
):
    """Download one dataset as a spreadsheet."""
    table = await export_service.table(tenant_id, dataset)
    filename = f"{dataset.value}.{writer.extension}"
    return Response(
        content=writer.write(table),
        media_type=writer.media_type,
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )
