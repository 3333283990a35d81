"""Loan operations: create, edit, register payments (abonos), list."""

from __future__ import annotations

import logging
from datetime import datetime

from app.application.dtos.hr import AssociateResult, CollaboratorResult
from app.application.dtos.loan import LoanPayment, LoanResult
from app.application.interfaces.repositories import (
    ILoanRepository,
    ITenantScopedRepository,
)
from app.core.constants import DEFAULT_LIST_LIMIT
from app.domain.enums import BeneficiaryType, LoanStatus
from app.domain.exceptions import (
    LoanStateException,
    ResourceNotFoundException,
)
from app.shared.utils.datetime import utc_now
from app.shared.utils.generators import generate_cuid

logger = logging.getLogger(__name__)


def _status_for(balance: float) -> LoanStatus:
    return LoanStatus.PAID if balance <= 0 else LoanStatus.PENDING


class LoanService:
    """Loans to associates or collaborators; balance = amount minus payments."""

    def __init__(
        self,
        loan_repo: ILoanRepository,
        associate_repo: ITenantScopedRepository[AssociateResult],
        collaborator_repo: ITenantScopedRepository[CollaboratorResult],
    ) -> None:
        self._loan_repo = loan_repo
        self._associate_repo = associate_repo
        self._collaborator_repo = collaborator_repo

    async def _beneficiary_name(
        self, tenant_id: str, beneficiary_type: BeneficiaryType, beneficiary_id: str
    ) -> str:
        if beneficiary_type == BeneficiaryType.ASSOCIATE:
            beneficiary = await self._associate_repo.get(tenant_id, beneficiary_id)
        else:
            beneficiary = await self._collaborator_repo.get(tenant_id, beneficiary_id)
        if beneficiary is None:
            raise ResourceNotFoundException(beneficiary_type.value, beneficiary_id)
        return beneficiary.name

    async def get_loan(self, tenant_id: str, loan_id: str) -> LoanResult:
        loan = await self._loan_repo.get(tenant_id, loan_id)
        if loan is None:
            raise ResourceNotFoundException("loan", loan_id)
        return loan

    async def list_loans(
        self,
        tenant_id: str,
        status: LoanStatus | None = None,
        limit: int = DEFAULT_LIST_LIMIT,
    ) -> list[LoanResult]:
        if status is None:
            return await self._loan_repo.list_all(tenant_id, limit=limit)
        return await self._loan_repo.list_by_status(tenant_id, status.value, limit=limit)

    async def create_loan(
        self,
        tenant_id: str,
        beneficiary_type: BeneficiaryType,
        beneficiary_id: str,
        amount: float,
        date: datetime,
        notes: str | None = None,
    ) -> LoanResult:
        name = await self._beneficiary_name(tenant_id, beneficiary_type, beneficiary_id)
        loan = await self._loan_repo.create(
            tenant_id,
            {
                "beneficiary_type": beneficiary_type.value,
                "beneficiary_id": beneficiary_id,
                "beneficiary_name": name,
                "amount": amount,
                "date": date,
                "status": LoanStatus.PENDING.value,
                "payments": [],
                "outstanding_balance": amount,
                "notes": notes,
            },
        )
        logger.info("Loan %s created for tenant %s", loan.id, tenant_id)
        return loan

    async def update_loan(
        self,
        tenant_id: str,
        loan_id: str,
        beneficiary_type: BeneficiaryType | None = None,
        beneficiary_id: str | None = None,
        amount: float | None = None,
        date: datetime | None = None,
        notes: str | None = None,
    ) -> LoanResult:
        """Edit a pending loan; the balance is recomputed from payments already made."""
        loan = await self.get_loan(tenant_id, loan_id)
        if loan.status == LoanStatus.PAID.value:
            raise LoanStateException(loan_id, "A paid loan cannot be edited")
        updates: dict = {}
        if beneficiary_id is not None or beneficiary_type is not None:
            new_type = beneficiary_type or BeneficiaryType(loan.beneficiary_type)
            new_id = beneficiary_id or loan.beneficiary_id
            updates["beneficiary_type"] = new_type.value
            updates["beneficiary_id"] = new_id
            updates["beneficiary_name"] = await self._beneficiary_name(
                tenant_id, new_type, new_id
            )
        if amount is not None:
            paid = round(sum(p.amount for p in loan.payments), 2)
            balance = round(amount - paid, 2)
            if balance < 0:
                raise LoanStateException(
                    loan_id, "New amount is lower than the payments already made"
                )
            updates["amount"] = amount
            updates["outstanding_balance"] = balance
            updates["status"] = _status_for(balance).value
        if date is not None:
            updates["date"] = date
        if notes is not None:
            updates["notes"] = notes
        if not updates:
            return loan
        updated = await self._loan_repo.update(tenant_id, loan_id, updates)
        if updated is None:
            raise ResourceNotFoundException("loan", loan_id)
        return updated

    async def register_payment(
        self,
        tenant_id: str,
        loan_id: str,
        amount: float,
        date: datetime | None = None,
        note: str | None = None,
    ) -> LoanResult:
        """Apply a payment; it may not exceed the outstanding balance."""
        loan = await self.get_loan(tenant_id, loan_id)
        if loan.status == LoanStatus.PAID.value:
            raise LoanStateException(loan_id, "Loan is already paid")
        if amount > loan.outstanding_balance:
            raise LoanStateException(
                loan_id, "Payment exceeds the outstanding balance"
            )
        balance = max(round(loan.outstanding_balance - amount, 2), 0.0)
        payment = LoanPayment(
            id=generate_cuid(), amount=amount, date=date or utc_now(), note=note
        )
        updated = await self._loan_repo.add_payment(
            tenant_id, loan_id, payment, balance, _status_for(balance).value
        )
        if updated is None:
            raise ResourceNotFoundException("loan", loan_id)
        logger.info(
            "Payment of %.2f registered on loan %s (balance %.2f)",
            amount,
            loan_id,
            balance,
        )
        return updated
