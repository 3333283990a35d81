"""Application use cases: one service per business area."""

from app.application.use_cases.accounts import AuthService, CompanyProfileService
from app.application.use_cases.assistant import PQSFlow, ZiaFlow
from app.application.use_cases.cash_box import CashBoxService
from app.application.use_cases.catalogs import CatalogService, MaterialService
from app.application.use_cases.hr import AttendanceService, LoanService
from app.application.use_cases.invoices import InvoiceService
from app.application.use_cases.reports import ExportService, ReportService
from app.application.use_cases.sources import SourceCollectionService

__all__ = [
    "AttendanceService",
    "AuthService",
    "CashBoxService",
    "CatalogService",
    "CompanyProfileService",
    "ExportService",
    "InvoiceService",
    "LoanService",
    "MaterialService",
    "PQSFlow",
    "ReportService",
    "SourceCollectionService",
    "ZiaFlow",
]
