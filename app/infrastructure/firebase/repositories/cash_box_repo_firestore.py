"""Firestore-backed cash-box repository; one document per UTC day (ID YYYY-MM-DD)."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from app.application.dtos.cash_box import Actor, CashBoxResult, CashMovement
from app.domain.enums import CashBoxStatus
from app.domain.exceptions import CashBoxStateException
from app.infrastructure.firebase._rest_client import DocumentExistsError
from app.infrastructure.firebase._rest_encoding import ArrayUnion, Increment
from app.infrastructure.firebase.collections import COLLECTION_CASH_BOXES
from app.infrastructure.firebase.repositories.base import (
    FirestoreTenantScopedRepository,
    as_float,
)
from app.shared.utils.datetime import utc_now


def actor_to_dict(actor: Actor) -> dict[str, Any]:
    return {"uid": actor.uid, "email": actor.email}


def _actor(raw: dict | None) -> Actor | None:
    if not raw:
        return None
    return Actor(uid=raw.get("uid", ""), email=raw.get("email"))


def movement_to_dict(movement: CashMovement) -> dict[str, Any]:
    data = {
        "id": movement.id,
        "amount": movement.amount,
        "date": movement.date,
        "note": movement.note,
        "recorded_by": actor_to_dict(movement.recorded_by),
    }
    if movement.category is not None:
        data["category"] = movement.category
    return data


def _movements(raw: list[dict] | None) -> list[CashMovement]:
    return [
        CashMovement(
            id=m.get("id", ""),
            amount=as_float(m.get("amount")),
            date=m.get("date"),
            note=m.get("note"),
            recorded_by=_actor(m.get("recorded_by")) or Actor(uid="", email=None),
            category=m.get("category"),
        )
        for m in raw or []
    ]


class FirestoreCashBoxRepository(FirestoreTenantScopedRepository[CashBoxResult]):
    collection_id = COLLECTION_CASH_BOXES
    order_field = "date"
    order_direction = "DESCENDING"

    def _to_result(self, doc_id: str, data: dict) -> CashBoxResult:
        actual = data.get("actual_balance")
        difference = data.get("difference")
        return CashBoxResult(
            id=doc_id,
            date=data.get("date"),
            opening_balance=as_float(data.get("opening_balance")),
            cash_sales_total=as_float(data.get("cash_sales_total")),
            cash_purchases_total=as_float(data.get("cash_purchases_total")),
            incomes_total=as_float(data.get("incomes_total")),
            incomes=_movements(data.get("incomes")),
            expenses_total=as_float(data.get("expenses_total")),
            expenses=_movements(data.get("expenses")),
            expected_balance=as_float(data.get("expected_balance")),
            actual_balance=as_float(actual) if actual is not None else None,
            difference=as_float(difference) if difference is not None else None,
            status=data.get("status", ""),
            notes=data.get("notes"),
            opened_by=_actor(data.get("opened_by")) or Actor(uid="", email=None),
            closed_by=_actor(data.get("closed_by")),
            created_at=data.get("created_at"),
            updated_at=data.get("updated_at"),
        )

    async def create_for_day(
        self, tenant_id: str, box_id: str, data: dict[str, Any]
    ) -> CashBoxResult:
        """Create the day's box; CashBoxStateException if it was already opened."""
        now = utc_now()
        payload = {**data, "created_at": now, "updated_at": now}
        try:
            await self._coll(tenant_id).create(box_id, payload)
        except DocumentExistsError:
            raise CashBoxStateException(box_id, "already opened today") from None
        return self._to_result(box_id, payload)

    async def add_movement(
        self,
        tenant_id: str,
        box_id: str,
        kind: str,
        movement: CashMovement,
    ) -> CashBoxResult | None:
        """Append an income or expense and bump its running total server-side.

        ``kind`` is ``incomes`` or ``expenses``.
        """
        return await self.update(
            tenant_id,
            box_id,
            {
                kind: ArrayUnion((movement_to_dict(movement),)),
                f"{kind}_total": Increment(movement.amount),
            },
        )

    async def list_between(
        self, tenant_id: str, start: datetime, end: datetime
    ) -> list[CashBoxResult]:
        """Return boxes dated within [start, end], newest first."""
        q = (
            self._coll(tenant_id)
            .where("date", ">=", start)
            .where("date", "<=", end)
            .order_by("date", "DESCENDING")
        )
        return [self._to_result(s.id, s.to_dict()) async for s in q.stream()]

    async def latest_open(self, tenant_id: str) -> CashBoxResult | None:
        """Return the newest box still open, if any."""
        q = (
            self._coll(tenant_id)
            .where("status", "==", CashBoxStatus.OPEN.value)
            .order_by("date", "DESCENDING")
            .limit(1)
        )
        async for snapshot in q.stream():
            return self._to_result(snapshot.id, snapshot.to_dict())
        return None
