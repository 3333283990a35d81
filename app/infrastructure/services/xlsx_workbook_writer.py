"""Excel writer for export tables (openpyxl)."""

from __future__ import annotations

from io import BytesIO

from openpyxl import Workbook

from app.application.dtos.report import ExportTable

SHEET_TITLE = "Datos"


class XlsxWorkbookWriter:
    """Writes one table to a single-sheet .xlsx workbook in memory."""

    media_type = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"
    extension = "xlsx"

    def write(self, table: ExportTable) -> bytes:
        wb = Workbook()
        ws = wb.active
        ws.title = SHEET_TITLE
        ws.append(table.headers)
        for row in table.rows:
            ws.append(row)
        buffer = BytesIO()
        wb.save(buffer)
        return buffer.getvalue()
