"""Loan API schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from app.domain.enums import BeneficiaryType


class LoanCreate(BaseModel):
    beneficiary_type: BeneficiaryType
    beneficiary_id: str = Field(..., min_length=1)
    amount: float = Field(..., ge=1)
    date: datetime
    notes: str | None = Field(default=None, max_length=500)


class LoanUpdate(BaseModel):
    """Partial update of a pending loan."""

    beneficiary_type: BeneficiaryType | None = None
    beneficiary_id: str | None = Field(default=None, min_length=1)
    amount: float | None = Field(default=None, ge=1)
    date: datetime | None = None
    notes: str | None = Field(default=None, max_length=500)


class LoanPaymentRequest(BaseModel):
    amount: float = Field(..., gt=0)
    date: datetime | None = None
    note: str | None = Field(default=None, max_length=200)


class LoanPaymentResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    amount: float
    date: datetime
    note: str | None = None


class LoanResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    beneficiary_type: str
    beneficiary_id: str
    beneficiary_name: str
    amount: float
    date: datetime
    status: str
    payments: list[LoanPaymentResponse]
    outstanding_balance: float
    notes: str | None = None
    created_at: datetime | None = None
