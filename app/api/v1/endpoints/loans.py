"""Loans API: loans to associates and collaborators, and their payments (abonos)."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, Request

from app.api.v1.dependencies import get_loan_service, get_tenant_id
from app.application.use_cases.hr import LoanService
from app.core.constants import DEFAULT_LIST_LIMIT, MAX_LIST_LIMIT
from app.core.limiter import limit_writes
from app.domain.enums import LoanStatus
from app.schemas.loan import (
    LoanCreate,
    LoanPaymentRequest,
    LoanResponse,
    LoanUpdate,
)

router = APIRouter()

Loans = Annotated[LoanService, Depends(get_loan_service)]


@router.post("", response_model=LoanResponse, status_code=201)
@limit_writes
async def create_loan(
    request: Request,
    body: LoanCreate,
    tenant_id: Annotated[str, Depends(get_tenant_id)],
    loan_service: Loans,
):
    loan = await loan_service.create_loan(
        tenant_id,
        beneficiary_type=body.beneficiary_type,
        beneficiary_id=body.beneficiary_id,
        amount=body.amount,
        date=body.date,
        notes=body.notes,
    )
    return LoanResponse.model_validate(loan)


@router.get("", response_model=list[LoanResponse])
async def list_loans(
    tenant_id: Annotated[str, Depends(get_tenant_id)],
    loan_service: Loans,
    status: LoanStatus | None = Query(None, description="Pendiente or Pagado"),
    limit: int = Query(DEFAULT_LIST_LIMIT, ge=1, le=MAX_LIST_LIMIT),
):
    """List loans, newest first, optionally filtered by status."""
    loans = await loan_service.list_loans(tenant_id, status=status, limit=limit)
    return [LoanResponse.model_validate(loan) for loan in loans]


@router.get("/{loan_id}", response_model=LoanResponse)
async def get_loan(
    loan_id: str,
    tenant_id: Annotated[str, Depends(get_tenant_id)],
    loan_service: Loans,
):
    loan = await loan_service.get_loan(tenant_id, loan_id)
    return LoanResponse.model_validate(loan)


@router.patch("/{loan_id}", response_model=LoanResponse)
@limit_writes
async def update_loan(
    request: Request,
    loan_id: str,
    body: LoanUpdate,
    tenant_id: Annotated[str, Depends(get_tenant_id)],
    loan_service: Loans,
):
    """Edit a pending loan; 409 if it is paid or the amount drops below payments."""
    loan = await loan_service.update_loan(
        tenant_id,
        loan_id,
        beneficiary_type=body.beneficiary_type,
        beneficiary_id=body.beneficiary_id,
        amount=body.amount,
        date=body.date,
        notes=body.notes,
    )
    return LoanResponse.model_validate(loan)


@router.post("/{loan_id}/payments", response_model=LoanResponse, status_code=201)
@limit_writes
async def register_payment(
    request: Request,
    loan_id: str,
    body: LoanPaymentRequest,
    tenant_id: Annotated[str, Depends(get_tenant_id)],
    loan_service: Loans,
):
    """Register a payment; it may not exceed the outstanding balance."""
    loan = await loan_service.register_payment(
        tenant_id, loan_id, amount=body.amount, date=body.date, note=body.note
    )
    return LoanResponse.model_validate(loan)
