"""ExportService tables and the xlsx writer."""

from datetime import datetime, timezone
from io import BytesIO

import pytest
from openpyxl import load_workbook

from app.application.dtos.report import ExportTable
from app.application.use_cases.reports import ExportService
from app.domain.enums import ExportDataset
from app.infrastructure.firebase.repositories import (
    FirestoreAssociateRepository,
    FirestoreCollaboratorRepository,
    FirestoreMaterialRepository,
    FirestorePurchaseInvoiceRepository,
    FirestoreSaleInvoiceRepository,
    FirestoreSourcePointRepository,
)
from app.infrastructure.services import XlsxWorkbookWriter
from tests.fakes import FakeFirestore

TENANT = "tenant1"
WHEN = datetime(2025, 3, 10, 15, 30, 5, tzinfo=timezone.utc)


@pytest.fixture
def store() -> FakeFirestore:
    return FakeFirestore()


@pytest.fixture
def service(store: FakeFirestore) -> ExportService:
    return ExportService(
        FirestoreCollaboratorRepository(store),
        FirestoreAssociateRepository(store),
        FirestoreSourcePointRepository(store),
        FirestoreMaterialRepository(store),
        FirestorePurchaseInvoiceRepository(store),
        FirestoreSaleInvoiceRepository(store),
    )


def _line(name: str, code: str, weight: float, price: float) -> dict:
    return {
        "material_id": name.lower(),
        "material_name": name,
        "material_code": code,
        "weight": weight,
        "unit_price": price,
        "subtotal": weight * price,
    }


async def test_purchases_are_one_row_per_item(
    service: ExportService, store: FakeFirestore
) -> None:
    await FirestorePurchaseInvoiceRepository(store).create(
        TENANT,
        {
            "invoice_number": 4,
            "date": WHEN,
            "payment_method": "efectivo",
            "supplier_type": "asociado",
            "supplier_name": "Ana Pérez",
            "items": [_line("Cartón", "101", 10, 500), _line("PET", "201", 2, 900)],
            "total": 6800.0,
            "loan_payment": 1000.0,
            "net_paid": 5800.0,
        },
    )

    table = await service.table(TENANT, ExportDataset.PURCHASES)

    assert table.headers[0] == "N Factura"
    assert len(table.headers) == 13
    assert table.rows == [
        [4, "2025-03-10 15:30:05", "Ana Pérez", "asociado", "Cartón", "101",
         10.0, 500.0, 5000.0, "efectivo", 1000.0, 5800.0, ""],
        [4, "2025-03-10 15:30:05", "Ana Pérez", "asociado", "PET", "201",
         2.0, 900.0, 1800.0, "efectivo", 1000.0, 5800.0, ""],
    ]


async def test_sales_without_customer_export_blank_cells(
    service: ExportService, store: FakeFirestore
) -> None:
    await FirestoreSaleInvoiceRepository(store).create(
        TENANT,
        {
            "invoice_number": 1,
            "date": WHEN,
            "payment_method": "cheque",
            "items": [_line("Vidrio", "301", 50, 120)],
            "total": 6000.0,
        },
    )

    table = await service.table(TENANT, ExportDataset.SALES)

    assert table.rows == [
        [1, "2025-03-10 15:30:05", "", "Vidrio", "301", 50.0, 120.0, 6000.0,
         "cheque", ""],
    ]


async def test_materials_table_is_tenant_scoped(
    service: ExportService, store: FakeFirestore
) -> None:
    materials = FirestoreMaterialRepository(store)
    await materials.create(
        TENANT, {"name": "Cartón", "price": 500.0, "code": "101", "stock": 3.5}
    )
    await materials.create("other", {"name": "PET", "price": 900.0, "stock": 8.0})

    table = await service.table(TENANT, ExportDataset.MATERIALS)

    assert table.title == "materiales"
    assert table.rows == [["Cartón", "101", 500.0, 3.5]]


async def test_empty_dataset_has_headers_only(service: ExportService) -> None:
    table = await service.table(TENANT, ExportDataset.COLLABORATORS)

    assert table.headers == ["Nombre Completo", "Email", "Cargo"]
    assert table.rows == []


def test_xlsx_writer_puts_headers_then_rows_on_one_sheet() -> None:
    table = ExportTable(
        title="materiales",
        headers=["Nombre Material", "Stock Actual (kg)"],
        rows=[["Cartón", 3.5], ["PET", None]],
    )

    content = XlsxWorkbookWriter().write(table)

    wb = load_workbook(BytesIO(content))
    assert wb.sheetnames == ["Datos"]
    assert list(wb["Datos"].values) == [
        ("Nombre Material", "Stock Actual (kg)"),
        ("Cartón", 3.5),
        ("PET", None),
    ]
