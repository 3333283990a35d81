"""CashBoxService tests over the in-memory Firestore double."""

from datetime import timedelta

import pytest

from app.application.dtos.cash_box import Actor
from app.application.use_cases.cash_box import CashBoxService, expected_balance
from app.domain.enums import ExpenseCategory
from app.domain.exceptions import CashBoxStateException
from app.infrastructure.firebase.repositories import (
    FirestoreCashBoxRepository,
    FirestorePurchaseInvoiceRepository,
    FirestoreSaleInvoiceRepository,
)
from app.shared.utils.datetime import day_id, utc_now
from tests.fakes import FakeFirestore

TENANT = "tenant1"
ACTOR = Actor(uid="u1", email="owner@example.com")


@pytest.fixture
def store() -> FakeFirestore:
    return FakeFirestore()


@pytest.fixture
def service(store: FakeFirestore) -> CashBoxService:
    return CashBoxService(
        FirestoreCashBoxRepository(store),
        FirestorePurchaseInvoiceRepository(store),
        FirestoreSaleInvoiceRepository(store),
    )


async def _invoices_today(store: FakeFirestore) -> None:
    now = utc_now()
    purchases = FirestorePurchaseInvoiceRepository(store)
    sales = FirestoreSaleInvoiceRepository(store)
    await purchases.create(
        TENANT,
        {
            "invoice_number": 1,
            "date": now,
            "payment_method": "efectivo",
            "items": [],
            "total": 300.0,
            "net_paid": 200.0,
        },
    )
    await purchases.create(
        TENANT,
        {
            "invoice_number": 2,
            "date": now,
            "payment_method": "nequi",
            "items": [],
            "total": 999.0,
            "net_paid": 999.0,
        },
    )
    await sales.create(
        TENANT,
        {
            "invoice_number": 1,
            "date": now,
            "payment_method": "efectivo",
            "items": [],
            "total": 500.0,
        },
    )


def test_expected_balance_formula() -> None:
    assert expected_balance(100, 500, 50, 200, 30) == 420


async def test_open_twice_the_same_day_fails(service: CashBoxService) -> None:
    await service.open_box(TENANT, 100.0, ACTOR)
    with pytest.raises(CashBoxStateException):
        await service.open_box(TENANT, 100.0, ACTOR)


async def test_movements_require_an_open_box(service: CashBoxService) -> None:
    with pytest.raises(CashBoxStateException):
        await service.add_income(TENANT, 10.0, ACTOR)


async def test_today_is_none_before_opening(service: CashBoxService) -> None:
    assert await service.today(TENANT) is None


async def test_today_recomputes_cash_totals(
    service: CashBoxService, store: FakeFirestore
) -> None:
    await service.open_box(TENANT, 100.0, ACTOR)
    await _invoices_today(store)
    await service.add_income(TENANT, 50.0, ACTOR, note="cambio")
    await service.add_expense(TENANT, 30.0, ACTOR, category=ExpenseCategory.FUEL)

    box = await service.today(TENANT)

    assert box.cash_sales_total == 500.0
    assert box.cash_purchases_total == 200.0
    assert box.incomes_total == 50.0
    assert box.expenses_total == 30.0
    assert box.expenses[0].category == "combustible"
    assert box.expected_balance == 420.0


async def test_close_freezes_totals_and_difference(
    service: CashBoxService, store: FakeFirestore
) -> None:
    await service.open_box(TENANT, 100.0, ACTOR)
    await _invoices_today(store)

    closed = await service.close_box(TENANT, 390.0, ACTOR, notes="faltante")

    assert closed.status == "Cerrada"
    assert closed.expected_balance == 400.0
    assert closed.difference == -10.0
    assert closed.closed_by == ACTOR
    with pytest.raises(CashBoxStateException):
        await service.add_expense(TENANT, 5.0, ACTOR)


async def test_history_returns_boxes_in_range(service: CashBoxService) -> None:
    await service.open_box(TENANT, 100.0, ACTOR)
    today = utc_now().date()

    boxes = await service.history(TENANT, today, today)

    assert [b.id for b in boxes] == [today.isoformat()]


async def _box_left_open_yesterday(store: FakeFirestore) -> str:
    yesterday = utc_now() - timedelta(days=1)
    box_id = day_id(yesterday)
    await FirestoreCashBoxRepository(store).create_for_day(
        TENANT,
        box_id,
        {
            "date": yesterday,
            "opening_balance": 100.0,
            "incomes": [],
            "incomes_total": 0.0,
            "expenses": [],
            "expenses_total": 0.0,
            "status": "Abierta",
            "opened_by": {"uid": "u1", "email": "owner@example.com"},
        },
    )
    return box_id


async def test_box_left_open_past_midnight_can_still_be_closed(
    service: CashBoxService, store: FakeFirestore
) -> None:
    box_id = await _box_left_open_yesterday(store)

    with_income = await service.add_income(TENANT, 25.0, ACTOR, note="sobrante")
    closed = await service.close_box(TENANT, 125.0, ACTOR)

    assert with_income.id == box_id
    assert closed.id == box_id
    assert closed.status == "Cerrada"
    assert closed.difference == 0
    with pytest.raises(CashBoxStateException):
        await service.add_expense(TENANT, 5.0, ACTOR)


async def test_todays_box_takes_precedence_over_a_stale_open_one(
    service: CashBoxService, store: FakeFirestore
) -> None:
    stale_id = await _box_left_open_yesterday(store)
    await service.open_box(TENANT, 50.0, ACTOR)

    closed = await service.close_box(TENANT, 50.0, ACTOR)

    assert closed.id == day_id(utc_now())
    stale = await FirestoreCashBoxRepository(store).get(TENANT, stale_id)
    assert stale.status == "Abierta"
