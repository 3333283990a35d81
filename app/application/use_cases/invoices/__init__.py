"""Invoice use cases."""

from app.application.use_cases.invoices.invoice_operations import InvoiceService

__all__ = ["InvoiceService"]
