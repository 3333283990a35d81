"""Purchase and sale invoice API schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, model_validator

from app.domain.enums import PaymentMethod, SupplierType


class InvoiceLineRequest(BaseModel):
    material_id: str = Field(..., min_length=1)
    weight: float = Field(..., gt=0, description="Weight in kg")


class SaleLineRequest(InvoiceLineRequest):
    unit_price: float | None = Field(
        default=None, gt=0, description="Defaults to the material price"
    )


class PurchaseInvoiceCreateRequest(BaseModel):
    date: datetime
    payment_method: PaymentMethod = Field(..., description="efectivo or nequi")
    items: list[InvoiceLineRequest] = Field(..., min_length=1)
    supplier_type: SupplierType = SupplierType.GENERAL
    supplier_id: str | None = None
    supplier_name: str | None = Field(default=None, max_length=100)
    supplier_identification: str | None = Field(default=None, max_length=50)
    loan_id: str | None = None
    loan_payment: float | None = Field(default=None, ge=0)
    notes: str | None = Field(default=None, max_length=500)

    @model_validator(mode="after")
    def loan_payment_needs_loan(self) -> "PurchaseInvoiceCreateRequest":
        if self.loan_payment and not self.loan_id:
            raise ValueError("loan_id is required when loan_payment is set")
        return self


class SaleInvoiceCreateRequest(BaseModel):
    date: datetime
    payment_method: PaymentMethod
    items: list[SaleLineRequest] = Field(..., min_length=1)
    customer_name: str | None = Field(default=None, max_length=100)
    notes: str | None = Field(default=None, max_length=500)


class InvoiceItemResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    material_id: str
    material_name: str
    material_code: str | None = None
    weight: float
    unit_price: float
    subtotal: float


class PurchaseInvoiceResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    invoice_number: int
    date: datetime
    payment_method: str
    supplier_type: str
    supplier_id: str | None = None
    supplier_name: str | None = None
    supplier_identification: str | None = None
    items: list[InvoiceItemResponse]
    total: float
    loan_payment: float | None = None
    loan_id: str | None = None
    net_paid: float
    notes: str | None = None
    created_at: datetime | None = None


class SaleInvoiceResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    invoice_number: int
    date: datetime
    payment_method: str
    customer_name: str | None = None
    items: list[InvoiceItemResponse]
    total: float
    notes: str | None = None
    created_at: datetime | None = None
