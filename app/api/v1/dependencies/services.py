"""Use-case service dependencies (composition root).

Services are built per request from the Firestore repositories; routes
depend only on these.
"""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends

from app.application.interfaces.services import IWorkbookWriter
from app.application.services import DataService
from app.application.use_cases import (
    AttendanceService,
    CashBoxService,
    CatalogService,
    CompanyProfileService,
    ExportService,
    InvoiceService,
    LoanService,
    MaterialService,
    ReportService,
    SourceCollectionService,
)
from app.infrastructure.firebase.repositories import (
    FirestoreAssociateRepository,
    FirestoreAttendanceRepository,
    FirestoreCashBoxRepository,
    FirestoreCollaboratorRepository,
    FirestoreCompanyProfileRepository,
    FirestoreLoanRepository,
    FirestoreMaterialRepository,
    FirestorePositionRepository,
    FirestorePurchaseInvoiceRepository,
    FirestoreSaleInvoiceRepository,
    FirestoreSourceCollectionRepository,
    FirestoreSourcePointRepository,
    FirestoreVehicleRepository,
)
from app.infrastructure.services import XlsxWorkbookWriter

from . import repositories as repos

Materials = Annotated[FirestoreMaterialRepository, Depends(repos.get_material_repo)]
Purchases = Annotated[
    FirestorePurchaseInvoiceRepository, Depends(repos.get_purchase_repo)
]
Sales = Annotated[FirestoreSaleInvoiceRepository, Depends(repos.get_sale_repo)]
Loans = Annotated[FirestoreLoanRepository, Depends(repos.get_loan_repo)]
Associates = Annotated[FirestoreAssociateRepository, Depends(repos.get_associate_repo)]
Collaborators = Annotated[
    FirestoreCollaboratorRepository, Depends(repos.get_collaborator_repo)
]
Vehicles = Annotated[FirestoreVehicleRepository, Depends(repos.get_vehicle_repo)]
SourcePoints = Annotated[
    FirestoreSourcePointRepository, Depends(repos.get_source_point_repo)
]
SourceCollections = Annotated[
    FirestoreSourceCollectionRepository, Depends(repos.get_source_collection_repo)
]


def get_company_profile_service(
    repo: Annotated[
        FirestoreCompanyProfileRepository, Depends(repos.get_company_profile_repo)
    ],
) -> CompanyProfileService:
    return CompanyProfileService(repo)


def get_material_service(material_repo: Materials) -> MaterialService:
    return MaterialService(material_repo)


def get_source_point_service(repo: SourcePoints) -> CatalogService:
    return CatalogService(repo, "source")


def get_associate_service(repo: Associates) -> CatalogService:
    return CatalogService(repo, "associate")


def get_vehicle_service(repo: Vehicles) -> CatalogService:
    return CatalogService(repo, "vehicle")


def get_position_service(
    repo: Annotated[FirestorePositionRepository, Depends(repos.get_position_repo)],
) -> CatalogService:
    return CatalogService(repo, "position")


def get_collaborator_service(repo: Collaborators) -> CatalogService:
    return CatalogService(repo, "collaborator")


def get_invoice_service(
    profile_service: Annotated[
        CompanyProfileService, Depends(get_company_profile_service)
    ],
    material_repo: Materials,
    purchase_repo: Purchases,
    sale_repo: Sales,
    loan_repo: Loans,
    associate_repo: Associates,
) -> InvoiceService:
    return InvoiceService(
        profile_service,
        material_repo,
        purchase_repo,
        sale_repo,
        loan_repo,
        associate_repo,
    )


def get_source_collection_service(
    collection_repo: SourceCollections,
    source_repo: SourcePoints,
    material_repo: Materials,
    vehicle_repo: Vehicles,
) -> SourceCollectionService:
    return SourceCollectionService(
        collection_repo, source_repo, material_repo, vehicle_repo
    )


def get_loan_service(
    loan_repo: Loans,
    associate_repo: Associates,
    collaborator_repo: Collaborators,
) -> LoanService:
    return LoanService(loan_repo, associate_repo, collaborator_repo)


def get_attendance_service(
    attendance_repo: Annotated[
        FirestoreAttendanceRepository, Depends(repos.get_attendance_repo)
    ],
    collaborator_repo: Collaborators,
) -> AttendanceService:
    return AttendanceService(attendance_repo, collaborator_repo)


def get_cash_box_service(
    cash_box_repo: Annotated[
        FirestoreCashBoxRepository, Depends(repos.get_cash_box_repo)
    ],
    purchase_repo: Purchases,
    sale_repo: Sales,
) -> CashBoxService:
    return CashBoxService(cash_box_repo, purchase_repo, sale_repo)


def get_report_service(
    purchase_repo: Purchases,
    associate_repo: Associates,
    material_repo: Materials,
    source_repo: SourcePoints,
    collection_repo: SourceCollections,
) -> ReportService:
    return ReportService(
        purchase_repo, associate_repo, material_repo, source_repo, collection_repo
    )


def get_export_service(
    collaborator_repo: Collaborators,
    associate_repo: Associates,
    source_repo: SourcePoints,
    material_repo: Materials,
    purchase_repo: Purchases,
    sale_repo: Sales,
) -> ExportService:
    return ExportService(
        collaborator_repo,
        associate_repo,
        source_repo,
        material_repo,
        purchase_repo,
        sale_repo,
    )


def get_data_service(
    material_repo: Materials, purchase_repo: Purchases, sale_repo: Sales
) -> DataService:
    return DataService(material_repo, purchase_repo, sale_repo)


def get_workbook_writer() -> IWorkbookWriter:
    return XlsxWorkbookWriter()
