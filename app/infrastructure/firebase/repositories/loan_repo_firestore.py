"""Firestore-backed loan repository (payments stored as an array on the loan)."""

from __future__ import annotations

from typing import Any

from app.application.dtos.loan import LoanPayment, LoanResult
from app.infrastructure.firebase._rest_encoding import ArrayUnion
from app.infrastructure.firebase.collections import COLLECTION_LOANS
from app.infrastructure.firebase.repositories.base import (
    FirestoreTenantScopedRepository,
    as_float,
)


def payment_to_dict(payment: LoanPayment) -> dict[str, Any]:
    return {
        "id": payment.id,
        "amount": payment.amount,
        "date": payment.date,
        "note": payment.note,
    }


class FirestoreLoanRepository(FirestoreTenantScopedRepository[LoanResult]):
    collection_id = COLLECTION_LOANS
    order_field = "date"
    order_direction = "DESCENDING"

    def _to_result(self, doc_id: str, data: dict) -> LoanResult:
        return LoanResult(
            id=doc_id,
            beneficiary_type=data.get("beneficiary_type", ""),
            beneficiary_id=data.get("beneficiary_id", ""),
            beneficiary_name=data.get("beneficiary_name", ""),
            amount=as_float(data.get("amount")),
            date=data.get("date"),
            status=data.get("status", ""),
            payments=[
                LoanPayment(
                    id=p.get("id", ""),
                    amount=as_float(p.get("amount")),
                    date=p.get("date"),
                    note=p.get("note"),
                )
                for p in data.get("payments") or []
            ],
            outstanding_balance=as_float(data.get("outstanding_balance")),
            notes=data.get("notes"),
            created_at=data.get("created_at"),
            updated_at=data.get("updated_at"),
        )

    async def list_by_status(
        self, tenant_id: str, status: str, limit: int | None = None
    ) -> list[LoanResult]:
        """Return loans in the given status, newest first."""
        q = (
            self._coll(tenant_id)
            .where("status", "==", status)
            .order_by(self.order_field, self.order_direction)
        )
        if limit:
            q = q.limit(limit)
        return [self._to_result(s.id, s.to_dict()) async for s in q.stream()]

    async def add_payment(
        self,
        tenant_id: str,
        loan_id: str,
        payment: LoanPayment,
        outstanding_balance: float,
        status: str,
    ) -> LoanResult | None:
        """Append a payment and store the new balance and status."""
        return await self.update(
            tenant_id,
            loan_id,
            {
                "payments": ArrayUnion((payment_to_dict(payment),)),
                "outstanding_balance": outstanding_balance,
                "status": status,
            },
        )
