"""Firestore-backed purchase and sale invoice repositories.

Creating an invoice commits the invoice, the material stock changes and
(for purchases) the loan payment in one ``documents:commit`` so they either
all apply or none do.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, TypeVar

from app.application.dtos.invoice import (
    InvoiceItem,
    LoanPaymentWrite,
    PurchaseInvoiceResult,
    SaleInvoiceResult,
    StockChange,
)
from app.infrastructure.firebase._rest_encoding import ArrayUnion, Increment
from app.infrastructure.firebase.collections import (
    COLLECTION_LOANS,
    COLLECTION_MATERIALS,
    COLLECTION_PURCHASE_INVOICES,
    COLLECTION_SALE_INVOICES,
)
from app.infrastructure.firebase.repositories.base import (
    FirestoreTenantScopedRepository,
    as_float,
    tenant_collection,
)
from app.infrastructure.firebase.repositories.loan_repo_firestore import (
    payment_to_dict,
)
from app.shared.utils.datetime import utc_now

T = TypeVar("T")


def items_from_data(raw: list[dict] | None) -> list[InvoiceItem]:
    return [
        InvoiceItem(
            material_id=i.get("material_id", ""),
            material_name=i.get("material_name", ""),
            material_code=i.get("material_code"),
            weight=as_float(i.get("weight")),
            unit_price=as_float(i.get("unit_price")),
            subtotal=as_float(i.get("subtotal")),
        )
        for i in raw or []
    ]


class _FirestoreInvoiceRepository(FirestoreTenantScopedRepository[T]):
    """Shared invoice queries; newest first by invoice date."""

    order_field = "date"
    order_direction = "DESCENDING"

    async def last_invoice_number(self, tenant_id: str) -> int:
        """Return the highest invoice number, 0 when the tenant has none."""
        q = (
            self._coll(tenant_id)
            .order_by("invoice_number", "DESCENDING")
            .limit(1)
        )
        async for snapshot in q.stream():
            return int(snapshot.to_dict().get("invoice_number") or 0)
        return 0

    async def list_between(
        self,
        tenant_id: str,
        start: datetime,
        end: datetime,
        supplier_type: str | None = None,
    ) -> list[T]:
        """Return invoices dated within [start, end], oldest first."""
        q = self._coll(tenant_id).where("date", ">=", start).where("date", "<=", end)
        if supplier_type is not None:
            q = q.where("supplier_type", "==", supplier_type)
        q = q.order_by("date", "ASCENDING")
        return [self._to_result(s.id, s.to_dict()) async for s in q.stream()]

    async def create_with_stock(
        self,
        tenant_id: str,
        data: dict[str, Any],
        stock_changes: list[StockChange],
        loan_payment: LoanPaymentWrite | None = None,
    ) -> T:
        """Write the invoice, stock increments and optional loan payment atomically."""
        now = utc_now()
        payload = {**data, "created_at": now, "updated_at": now}
        batch = self._client.batch()
        invoice_ref = self._coll(tenant_id).document()
        batch.create(invoice_ref, payload)
        materials = tenant_collection(self._client, tenant_id, COLLECTION_MATERIALS)
        for change in stock_changes:
            batch.update(
                materials.document(change.material_id),
                {"stock": Increment(change.delta_kg), "updated_at": now},
            )
        if loan_payment is not None:
            loans = tenant_collection(self._client, tenant_id, COLLECTION_LOANS)
            batch.update(
                loans.document(loan_payment.loan_id),
                {
                    "outstanding_balance": loan_payment.outstanding_balance,
                    "status": loan_payment.status,
                    "payments": ArrayUnion((payment_to_dict(loan_payment.payment),)),
                    "updated_at": now,
                },
            )
        await batch.commit()
        return self._to_result(invoice_ref.id, payload)


class FirestorePurchaseInvoiceRepository(
    _FirestoreInvoiceRepository[PurchaseInvoiceResult]
):
    collection_id = COLLECTION_PURCHASE_INVOICES

    def _to_result(self, doc_id: str, data: dict) -> PurchaseInvoiceResult:
        total = as_float(data.get("total"))
        loan_payment = data.get("loan_payment")
        return PurchaseInvoiceResult(
            id=doc_id,
            invoice_number=int(data.get("invoice_number") or 0),
            date=data.get("date"),
            payment_method=data.get("payment_method", ""),
            supplier_type=data.get("supplier_type", "general"),
            supplier_id=data.get("supplier_id"),
            supplier_name=data.get("supplier_name"),
            supplier_identification=data.get("supplier_identification"),
            items=items_from_data(data.get("items")),
            total=total,
            loan_payment=as_float(loan_payment) if loan_payment is not None else None,
            loan_id=data.get("loan_id"),
            net_paid=as_float(data.get("net_paid"), default=total),
            notes=data.get("notes"),
            created_at=data.get("created_at"),
            updated_at=data.get("updated_at"),
        )


class FirestoreSaleInvoiceRepository(_FirestoreInvoiceRepository[SaleInvoiceResult]):
    collection_id = COLLECTION_SALE_INVOICES

    def _to_result(self, doc_id: str, data: dict) -> SaleInvoiceResult:
        return SaleInvoiceResult(
            id=doc_id,
            invoice_number=int(data.get("invoice_number") or 0),
            date=data.get("date"),
            payment_method=data.get("payment_method", ""),
            customer_name=data.get("customer_name"),
            items=items_from_data(data.get("items")),
            total=as_float(data.get("total")),
            notes=data.get("notes"),
            created_at=data.get("created_at"),
            updated_at=data.get("updated_at"),
        )
