"""Report use cases."""

from app.application.use_cases.reports.export_operations import ExportService
from app.application.use_cases.reports.report_operations import (
    ReportService,
    period_start,
)

__all__ = ["ExportService", "ReportService", "period_start"]
