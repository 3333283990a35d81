"""LoanService unit tests with mocked repositories."""

from datetime import datetime, timezone
from unittest.mock import AsyncMock

import pytest

from app.application.dtos.hr import AssociateResult
from app.application.dtos.loan import LoanPayment, LoanResult
from app.application.use_cases.hr import LoanService
from app.domain.enums import BeneficiaryType, LoanStatus
from app.domain.exceptions import LoanStateException, ResourceNotFoundException

WHEN = datetime(2025, 2, 1, tzinfo=timezone.utc)


def _loan(
    amount: float = 1000.0,
    outstanding: float = 1000.0,
    status: str = LoanStatus.PENDING.value,
    payments: list[LoanPayment] | None = None,
) -> LoanResult:
    return LoanResult(
        id="loan1",
        beneficiary_type="asociado",
        beneficiary_id="a1",
        beneficiary_name="Ana",
        amount=amount,
        date=WHEN,
        status=status,
        payments=payments or [],
        outstanding_balance=outstanding,
        notes=None,
    )


@pytest.fixture
def repos():
    loan_repo = AsyncMock()
    associate_repo = AsyncMock()
    associate_repo.get = AsyncMock(
        return_value=AssociateResult(
            id="a1",
            name="Ana",
            id_type="1",
            id_number="123",
            phone="300",
            address="Calle 1",
            vehicle_plate=None,
            numacro=None,
            nueca=None,
        )
    )
    collaborator_repo = AsyncMock()
    collaborator_repo.get = AsyncMock(return_value=None)
    service = LoanService(loan_repo, associate_repo, collaborator_repo)
    return service, loan_repo


async def test_create_loan_starts_pending_with_full_balance(repos) -> None:
    service, loan_repo = repos
    loan_repo.create = AsyncMock(return_value=_loan())

    await service.create_loan("t1", BeneficiaryType.ASSOCIATE, "a1", 1000.0, WHEN)

    data = loan_repo.create.call_args.args[1]
    assert data["status"] == "Pendiente"
    assert data["outstanding_balance"] == 1000.0
    assert data["payments"] == []
    assert data["beneficiary_name"] == "Ana"


async def test_create_loan_for_unknown_collaborator_raises(repos) -> None:
    service, loan_repo = repos
    with pytest.raises(ResourceNotFoundException):
        await service.create_loan(
            "t1", BeneficiaryType.COLLABORATOR, "c404", 1000.0, WHEN
        )
    loan_repo.create.assert_not_called()


async def test_register_payment_updates_balance(repos) -> None:
    service, loan_repo = repos
    loan_repo.get = AsyncMock(return_value=_loan())
    loan_repo.add_payment = AsyncMock(return_value=_loan(outstanding=600.0))

    await service.register_payment("t1", "loan1", 400.0, note="abono")

    _, _, payment, balance, status = loan_repo.add_payment.call_args.args
    assert payment.amount == 400.0
    assert payment.note == "abono"
    assert balance == 600.0
    assert status == "Pendiente"


async def test_final_payment_marks_loan_paid(repos) -> None:
    service, loan_repo = repos
    loan_repo.get = AsyncMock(return_value=_loan(outstanding=250.0))
    loan_repo.add_payment = AsyncMock(return_value=_loan(outstanding=0.0))

    await service.register_payment("t1", "loan1", 250.0)

    assert loan_repo.add_payment.call_args.args[3:] == (0.0, "Pagado")


async def test_payment_above_balance_is_rejected(repos) -> None:
    service, loan_repo = repos
    loan_repo.get = AsyncMock(return_value=_loan(outstanding=100.0))
    with pytest.raises(LoanStateException):
        await service.register_payment("t1", "loan1", 100.01)
    loan_repo.add_payment.assert_not_called()


async def test_payment_on_paid_loan_is_rejected(repos) -> None:
    service, loan_repo = repos
    loan_repo.get = AsyncMock(
        return_value=_loan(outstanding=0.0, status=LoanStatus.PAID.value)
    )
    with pytest.raises(LoanStateException):
        await service.register_payment("t1", "loan1", 1.0)


async def test_update_amount_recomputes_balance_from_payments(repos) -> None:
    service, loan_repo = repos
    paid = [LoanPayment(id="p1", amount=300.0, date=WHEN)]
    loan_repo.get = AsyncMock(return_value=_loan(outstanding=700.0, payments=paid))
    loan_repo.update = AsyncMock(return_value=_loan(amount=1500.0))

    await service.update_loan("t1", "loan1", amount=1500.0)

    updates = loan_repo.update.call_args.args[2]
    assert updates["outstanding_balance"] == 1200.0
    assert updates["status"] == "Pendiente"


async def test_update_amount_below_payments_is_rejected(repos) -> None:
    service, loan_repo = repos
    paid = [LoanPayment(id="p1", amount=300.0, date=WHEN)]
    loan_repo.get = AsyncMock(return_value=_loan(outstanding=700.0, payments=paid))
    with pytest.raises(LoanStateException):
        await service.update_loan("t1", "loan1", amount=200.0)


async def test_update_paid_loan_is_rejected(repos) -> None:
    service, loan_repo = repos
    loan_repo.get = AsyncMock(
        return_value=_loan(outstanding=0.0, status=LoanStatus.PAID.value)
    )
    with pytest.raises(LoanStateException):
        await service.update_loan("t1", "loan1", notes="x")


async def test_list_loans_by_status_uses_status_query(repos) -> None:
    service, loan_repo = repos
    loan_repo.list_by_status = AsyncMock(return_value=[])

    await service.list_loans("t1", status=LoanStatus.PAID, limit=10)

    loan_repo.list_by_status.assert_awaited_once_with("t1", "Pagado", limit=10)
