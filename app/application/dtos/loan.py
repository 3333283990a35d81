"""DTOs for loans and their payments (abonos)."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class LoanPayment:
    id: str
    amount: float
    date: datetime
    note: str | None = None


@dataclass(frozen=True)
class LoanResult:
    """Loan read-model; outstanding_balance = amount - sum(payments)."""

    id: str
    beneficiary_type: str
    beneficiary_id: str
    beneficiary_name: str
    amount: float
    date: datetime
    status: str
    payments: list[LoanPayment]
    outstanding_balance: float
    notes: str | None
    created_at: datetime | None = None
    updated_at: datetime | None = None
