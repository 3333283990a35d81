"""Infrastructure implementations of application service interfaces."""

from app.infrastructure.services.pqs_template_renderer import PQSTemplateRenderer
from app.infrastructure.services.xlsx_workbook_writer import XlsxWorkbookWriter

__all__ = ["PQSTemplateRenderer", "XlsxWorkbookWriter"]
