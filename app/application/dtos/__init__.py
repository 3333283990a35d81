"""Application DTOs (plain dataclasses, no storage dependency)."""

from app.application.dtos.assistant import ChatTurn, PQSSubmission
from app.application.dtos.cash_box import Actor, CashBoxResult, CashMovement
from app.application.dtos.company_profile import CompanyProfileResult
from app.application.dtos.hr import (
    AssociateResult,
    AttendanceResult,
    CollaboratorPermissions,
    CollaboratorResult,
    PositionResult,
    VehicleResult,
)
from app.application.dtos.invoice import (
    InvoiceItem,
    InvoiceLine,
    LoanPaymentWrite,
    PurchaseInvoiceCreate,
    PurchaseInvoiceResult,
    SaleInvoiceCreate,
    SaleInvoiceResult,
    StockChange,
)
from app.application.dtos.loan import LoanPayment, LoanResult
from app.application.dtos.material import MaterialResult
from app.application.dtos.report import (
    CertificateMaterial,
    CollectionCertificate,
    ExportTable,
    InventorySummary,
    MassBalanceRow,
    MaterialTonnage,
    TonnageReport,
)
from app.application.dtos.source import (
    CollectionItem,
    CollectionLine,
    SourceCollectionCreate,
    SourceCollectionResult,
    SourcePointResult,
)
from app.application.dtos.user import TokenResult, UserCredentials, UserResult

__all__ = [
    "Actor",
    "AssociateResult",
    "AttendanceResult",
    "CashBoxResult",
    "CashMovement",
    "CertificateMaterial",
    "ChatTurn",
    "CollaboratorPermissions",
    "CollaboratorResult",
    "CollectionCertificate",
    "CollectionItem",
    "CollectionLine",
    "CompanyProfileResult",
    "ExportTable",
    "InventorySummary",
    "InvoiceItem",
    "InvoiceLine",
    "LoanPayment",
    "LoanPaymentWrite",
    "LoanResult",
    "MassBalanceRow",
    "MaterialResult",
    "MaterialTonnage",
    "PQSSubmission",
    "PositionResult",
    "PurchaseInvoiceCreate",
    "PurchaseInvoiceResult",
    "SaleInvoiceCreate",
    "SaleInvoiceResult",
    "SourceCollectionCreate",
    "SourceCollectionResult",
    "SourcePointResult",
    "StockChange",
    "TokenResult",
    "TonnageReport",
    "UserCredentials",
    "UserResult",
    "VehicleResult",
]
