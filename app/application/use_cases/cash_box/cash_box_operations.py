"""Daily cash-box reconciliation (arqueo de caja).

One box per UTC day. While open, cash sales and purchases are recomputed
from the day's ``efectivo`` invoices on every read; closing freezes them.
A box left open past midnight keeps taking movements until it is closed or
the new day's box is opened.
"""

from __future__ import annotations

import logging
from dataclasses import asdict, replace
from datetime import date

from app.application.dtos.cash_box import Actor, CashBoxResult, CashMovement
from app.application.interfaces.repositories import (
    ICashBoxRepository,
    IPurchaseInvoiceRepository,
    ISaleInvoiceRepository,
)
from app.domain.enums import CashBoxStatus, ExpenseCategory, PaymentMethod
from app.domain.exceptions import CashBoxStateException
from app.shared.utils.datetime import day_id, end_of_day, start_of_day, utc_now
from app.shared.utils.generators import generate_cuid

logger = logging.getLogger(__name__)


def expected_balance(
    opening: float,
    cash_sales: float,
    incomes: float,
    cash_purchases: float,
    expenses: float,
) -> float:
    return round(opening + cash_sales + incomes - cash_purchases - expenses, 2)


class CashBoxService:
    def __init__(
        self,
        cash_box_repo: ICashBoxRepository,
        purchase_repo: IPurchaseInvoiceRepository,
        sale_repo: ISaleInvoiceRepository,
    ) -> None:
        self._cash_box_repo = cash_box_repo
        self._purchase_repo = purchase_repo
        self._sale_repo = sale_repo

    async def _cash_totals(self, tenant_id: str, day: date) -> tuple[float, float]:
        """Return (cash sales, cash purchases net of loan payments) for the day."""
        start, end = start_of_day(day), end_of_day(day)
        sales = await self._sale_repo.list_between(tenant_id, start, end)
        purchases = await self._purchase_repo.list_between(tenant_id, start, end)
        cash = PaymentMethod.CASH.value
        sales_total = sum(s.total for s in sales if s.payment_method == cash)
        purchases_total = sum(p.net_paid for p in purchases if p.payment_method == cash)
        return round(sales_total, 2), round(purchases_total, 2)

    async def _open_box(self, tenant_id: str) -> CashBoxResult:
        """Return today's box, or the most recent one still open if today has none."""
        box_id = day_id(utc_now())
        box = await self._cash_box_repo.get(tenant_id, box_id)
        if box is None:
            box = await self._cash_box_repo.latest_open(tenant_id)
        if box is None:
            raise CashBoxStateException(box_id, "no open cash box")
        if box.status != CashBoxStatus.OPEN.value:
            raise CashBoxStateException(box_id, "cash box is already closed")
        return box

    async def open_box(
        self,
        tenant_id: str,
        opening_balance: float,
        actor: Actor,
        notes: str | None = None,
    ) -> CashBoxResult:
        now = utc_now()
        box_id = day_id(now)
        box = await self._cash_box_repo.create_for_day(
            tenant_id,
            box_id,
            {
                "date": now,
                "opening_balance": opening_balance,
                "cash_sales_total": 0.0,
                "cash_purchases_total": 0.0,
                "incomes": [],
                "incomes_total": 0.0,
                "expenses": [],
                "expenses_total": 0.0,
                "expected_balance": opening_balance,
                "actual_balance": None,
                "difference": None,
                "status": CashBoxStatus.OPEN.value,
                "notes": notes,
                "opened_by": asdict(actor),
                "closed_by": None,
            },
        )
        logger.info("Cash box %s opened for tenant %s", box_id, tenant_id)
        return box

    async def _add_movement(
        self,
        tenant_id: str,
        kind: str,
        amount: float,
        actor: Actor,
        note: str | None,
        category: str | None = None,
    ) -> CashBoxResult:
        box = await self._open_box(tenant_id)
        movement = CashMovement(
            id=generate_cuid(),
            amount=amount,
            date=utc_now(),
            note=note,
            recorded_by=actor,
            category=category,
        )
        updated = await self._cash_box_repo.add_movement(
            tenant_id, box.id, kind, movement
        )
        if updated is None:
            raise CashBoxStateException(box.id, "cash box no longer exists")
        return await self._with_live_totals(tenant_id, updated)

    async def add_income(
        self, tenant_id: str, amount: float, actor: Actor, note: str | None = None
    ) -> CashBoxResult:
        return await self._add_movement(tenant_id, "incomes", amount, actor, note)

    async def add_expense(
        self,
        tenant_id: str,
        amount: float,
        actor: Actor,
        category: ExpenseCategory = ExpenseCategory.GENERAL,
        note: str | None = None,
    ) -> CashBoxResult:
        return await self._add_movement(
            tenant_id, "expenses", amount, actor, note, category=category.value
        )

    async def _with_live_totals(
        self, tenant_id: str, box: CashBoxResult
    ) -> CashBoxResult:
        if box.status != CashBoxStatus.OPEN.value:
            return box
        sales, purchases = await self._cash_totals(
            tenant_id, date.fromisoformat(box.id)
        )
        return replace(
            box,
            cash_sales_total=sales,
            cash_purchases_total=purchases,
            expected_balance=expected_balance(
                box.opening_balance,
                sales,
                box.incomes_total,
                purchases,
                box.expenses_total,
            ),
        )

    async def today(self, tenant_id: str) -> CashBoxResult | None:
        """Return today's box with live cash totals, or None if not opened."""
        box = await self._cash_box_repo.get(tenant_id, day_id(utc_now()))
        if box is None:
            return None
        return await self._with_live_totals(tenant_id, box)

    async def close_box(
        self,
        tenant_id: str,
        actual_balance: float,
        actor: Actor,
        notes: str | None = None,
    ) -> CashBoxResult:
        """Close the open box, freezing totals and the counted difference."""
        box = await self._with_live_totals(tenant_id, await self._open_box(tenant_id))
        difference = round(actual_balance - box.expected_balance, 2)
        updates = {
            "cash_sales_total": box.cash_sales_total,
            "cash_purchases_total": box.cash_purchases_total,
            "expected_balance": box.expected_balance,
            "actual_balance": actual_balance,
            "difference": difference,
            "status": CashBoxStatus.CLOSED.value,
            "closed_by": asdict(actor),
        }
        if notes is not None:
            updates["notes"] = notes
        closed = await self._cash_box_repo.update(tenant_id, box.id, updates)
        if closed is None:
            raise CashBoxStateException(box.id, "cash box no longer exists")
        logger.info(
            "Cash box %s closed for tenant %s (difference %.2f)",
            box.id,
            tenant_id,
            difference,
        )
        return closed

    async def history(
        self, tenant_id: str, start: date, end: date
    ) -> list[CashBoxResult]:
        return await self._cash_box_repo.list_between(
            tenant_id, start_of_day(start), end_of_day(end)
        )
