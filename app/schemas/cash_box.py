"""Cash-box (arqueo de caja) API schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from app.domain.enums import ExpenseCategory


class CashBoxOpenRequest(BaseModel):
    opening_balance: float = Field(..., ge=0)
    notes: str | None = Field(default=None, max_length=500)


class CashIncomeRequest(BaseModel):
    amount: float = Field(..., gt=0)
    note: str | None = Field(default=None, max_length=100)


class CashExpenseRequest(CashIncomeRequest):
    category: ExpenseCategory


class CashBoxCloseRequest(BaseModel):
    actual_balance: float = Field(..., ge=0, description="Counted cash")
    notes: str | None = Field(default=None, max_length=500)


class ActorResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    uid: str
    email: str | None = None


class CashMovementResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    amount: float
    date: datetime
    note: str | None = None
    recorded_by: ActorResponse
    category: str | None = None


class CashBoxResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    date: datetime
    opening_balance: float
    cash_sales_total: float
    cash_purchases_total: float
    incomes_total: float
    incomes: list[CashMovementResponse]
    expenses_total: float
    expenses: list[CashMovementResponse]
    expected_balance: float
    actual_balance: float | None = None
    difference: float | None = None
    status: str
    notes: str | None = None
    opened_by: ActorResponse
    closed_by: ActorResponse | None = None
