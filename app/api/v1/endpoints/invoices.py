"""Invoice API: purchase invoices (compras) and sale invoices (ventas)."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, Request

from app.api.v1.dependencies import get_invoice_service, get_tenant_id
from app.application.dtos.invoice import (
    InvoiceLine,
    PurchaseInvoiceCreate,
    SaleInvoiceCreate,
)
from app.application.use_cases.invoices import InvoiceService
from app.core.constants import DEFAULT_LIST_LIMIT, MAX_LIST_LIMIT
from app.core.limiter import limit_writes
from app.schemas.invoice import (
    PurchaseInvoiceCreateRequest,
    PurchaseInvoiceResponse,
    SaleInvoiceCreateRequest,
    SaleInvoiceResponse,
)

purchases_router = APIRouter()
sales_router = APIRouter()


@purchases_router.post("", response_model=PurchaseInvoiceResponse, status_code=201)
@limit_writes
async def create_purchase(
    request: Request,
    body: PurchaseInvoiceCreateRequest,
    tenant_id: Annotated[str, Depends(get_tenant_id)],
    invoice_service: Annotated[InvoiceService, Depends(get_invoice_service)],
):
    """Register a purchase: adds stock and optionally applies a loan payment."""
    invoice = await invoice_service.create_purchase(
        tenant_id,
        PurchaseInvoiceCreate(
            date=body.date,
            payment_method=body.payment_method,
            items=[
                InvoiceLine(material_id=i.material_id, weight=i.weight)
                for i in body.items
            ],
            supplier_type=body.supplier_type,
            supplier_id=body.supplier_id,
            supplier_name=body.supplier_name,
            supplier_identification=body.supplier_identification,
            loan_id=body.loan_id,
            loan_payment=body.loan_payment,
            notes=body.notes,
        ),
    )
    return PurchaseInvoiceResponse.model_validate(invoice)


@purchases_router.get("", response_model=list[PurchaseInvoiceResponse])
async def list_purchases(
    tenant_id: Annotated[str, Depends(get_tenant_id)],
    invoice_service: Annotated[InvoiceService, Depends(get_invoice_service)],
    limit: int = Query(DEFAULT_LIST_LIMIT, ge=1, le=MAX_LIST_LIMIT),
):
    """List purchase invoices, newest first."""
    invoices = await invoice_service.list_purchases(tenant_id, limit=limit)
    return [PurchaseInvoiceResponse.model_validate(i) for i in invoices]


@purchases_router.get("/{invoice_id}", response_model=PurchaseInvoiceResponse)
async def get_purchase(
    invoice_id: str,
    tenant_id: Annotated[str, Depends(get_tenant_id)],
    invoice_service: Annotated[InvoiceService, Depends(get_invoice_service)],
):
    invoice = await invoice_service.get_purchase(tenant_id, invoice_id)
    return PurchaseInvoiceResponse.model_validate(invoice)


@sales_router.post("", response_model=SaleInvoiceResponse, status_code=201)
@limit_writes
async def create_sale(
    request: Request,
    body: SaleInvoiceCreateRequest,
    tenant_id: Annotated[str, Depends(get_tenant_id)],
    invoice_service: Annotated[InvoiceService, Depends(get_invoice_service)],
):
    """Register a sale: removes stock; 409 if any material would go negative."""
    invoice = await invoice_service.create_sale(
        tenant_id,
        SaleInvoiceCreate(
            date=body.date,
            payment_method=body.payment_method,
            items=[
                InvoiceLine(
                    material_id=i.material_id, weight=i.weight, unit_price=i.unit_price
                )
                for i in body.items
            ],
            customer_name=body.customer_name,
            notes=body.notes,
        ),
    )
    return SaleInvoiceResponse.model_validate(invoice)


@sales_router.get("", response_model=list[SaleInvoiceResponse])
async def list_sales(
    tenant_id: Annotated[str, Depends(get_tenant_id)],
    invoice_service: Annotated[InvoiceService, Depends(get_invoice_service)],
    limit: int = Query(DEFAULT_LIST_LIMIT, ge=1, le=MAX_LIST_LIMIT),
):
    """List sale invoices, newest first."""
    invoices = await invoice_service.list_sales(tenant_id, limit=limit)
    return [SaleInvoiceResponse.model_validate(i) for i in invoices]


@sales_router.get("/{invoice_id}", response_model=SaleInvoiceResponse)
async def get_sale(
    invoice_id: str,
    tenant_id: Annotated[str, Depends(get_tenant_id)],
    invoice_service: Annotated[InvoiceService, Depends(get_invoice_service)],
):
    invoice = await invoice_service.get_sale(tenant_id, invoice_id)
    return SaleInvoiceResponse.model_validate(invoice)
