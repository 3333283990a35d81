"""DTOs for daily cash-box reconciliation (arqueo de caja)."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class Actor:
    """Who opened, closed or recorded a movement."""

    uid: str
    email: str | None


@dataclass(frozen=True)
class CashMovement:
    """Additional income or expense; category is set on expenses only."""

    id: str
    amount: float
    date: datetime
    note: str | None
    recorded_by: Actor
    category: str | None = None


@dataclass(frozen=True)
class CashBoxResult:
    id: str
    date: datetime
    opening_balance: float
    cash_sales_total: float
    cash_purchases_total: float
    incomes_total: float
    incomes: list[CashMovement]
    expenses_total: float
    expenses: list[CashMovement]
    expected_balance: float
    actual_balance: float | None
    difference: float | None
    status: str
    notes: str | None
    opened_by: Actor
    closed_by: Actor | None
    created_at: datetime | None = None
    updated_at: datetime | None = None
