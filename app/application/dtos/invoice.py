"""DTOs for purchase and sale invoices."""

from dataclasses import dataclass
from datetime import datetime

from app.application.dtos.loan import LoanPayment
from app.domain.enums import PaymentMethod, SupplierType


@dataclass(frozen=True)
class InvoiceLine:
    """Requested line: material and weight; unit_price only honored on sales."""

    material_id: str
    weight: float
    unit_price: float | None = None


@dataclass(frozen=True)
class InvoiceItem:
    """Stored line with material name, code and price denormalized at write time."""

    material_id: str
    material_name: str
    material_code: str | None
    weight: float
    unit_price: float
    subtotal: float


@dataclass(frozen=True)
class PurchaseInvoiceCreate:
    date: datetime
    payment_method: PaymentMethod
    items: list[InvoiceLine]
    supplier_type: SupplierType = SupplierType.GENERAL
    supplier_id: str | None = None
    supplier_name: str | None = None
    supplier_identification: str | None = None
    loan_id: str | None = None
    loan_payment: float | None = None
    notes: str | None = None


@dataclass(frozen=True)
class SaleInvoiceCreate:
    date: datetime
    payment_method: PaymentMethod
    items: list[InvoiceLine]
    customer_name: str | None = None
    notes: str | None = None


@dataclass(frozen=True)
class PurchaseInvoiceResult:
    """Purchase invoice read-model. net_paid is the total minus any loan payment."""

    id: str
    invoice_number: int
    date: datetime
    payment_method: str
    supplier_type: str
    supplier_id: str | None
    supplier_name: str | None
    supplier_identification: str | None
    items: list[InvoiceItem]
    total: float
    loan_payment: float | None
    loan_id: str | None
    net_paid: float
    notes: str | None
    created_at: datetime | None = None
    updated_at: datetime | None = None


@dataclass(frozen=True)
class SaleInvoiceResult:
    id: str
    invoice_number: int
    date: datetime
    payment_method: str
    customer_name: str | None
    items: list[InvoiceItem]
    total: float
    notes: str | None
    created_at: datetime | None = None
    updated_at: datetime | None = None


@dataclass(frozen=True)
class StockChange:
    """Signed change to a material's stock in kilograms."""

    material_id: str
    delta_kg: float


@dataclass(frozen=True)
class LoanPaymentWrite:
    """Payment to append to a loan in the same commit as the invoice."""

    loan_id: str
    payment: LoanPayment
    outstanding_balance: float
    status: str
