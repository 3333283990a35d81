"""Repository interfaces (ports) for the application layer.

Protocols define contracts that infrastructure implementations must fulfill (DIP).
All types reference application DTOs only; no infrastructure imports. Every
tenant-scoped method takes the tenant ID first.
"""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING, Any, Protocol, TypeVar

if TYPE_CHECKING:
    from app.application.dtos.cash_box import CashBoxResult, CashMovement
    from app.application.dtos.company_profile import CompanyProfileResult
    from app.application.dtos.invoice import (
        LoanPaymentWrite,
        PurchaseInvoiceResult,
        SaleInvoiceResult,
        StockChange,
    )
    from app.application.dtos.loan import LoanPayment, LoanResult
    from app.application.dtos.material import MaterialResult
    from app.application.dtos.source import SourceCollectionResult
    from app.application.dtos.user import UserCredentials, UserResult

T = TypeVar("T")


class IUserRepository(Protocol):
    """Protocol for user accounts."""

    async def get_by_id(self, user_id: str) -> UserResult | None:
        """Return user by ID."""

    async def get_credentials_by_email(self, email: str) -> UserCredentials | None:
        """Return user and password hash for login."""

    async def create_user(self, email: str, hashed_password: str) -> UserResult:
        """Create an owner account; raise EmailAlreadyRegisteredException on duplicates."""

    async def reset_password(
        self, user_id: str, hashed_password: str, token_id: str
    ) -> bool:
        """Replace the hash and consume the reset token ID; False if no such user.

        Raises AuthenticationException when the token ID was already used.
        """


class ICompanyProfileRepository(Protocol):
    """Protocol for the one-per-tenant company profile."""

    async def get(self, tenant_id: str) -> CompanyProfileResult | None:
        """Return the profile, or None if not set up yet."""

    async def upsert(
        self,
        tenant_id: str,
        company_name: str,
        nit: str,
        phone: str,
        address: str,
    ) -> CompanyProfileResult:
        """Create or update the profile."""


class ITenantScopedRepository(Protocol[T]):
    """Protocol for create/get/list/update over one tenant subcollection."""

    async def create(self, tenant_id: str, data: dict[str, Any]) -> T:
        """Create a document with a generated ID."""

    async def get(self, tenant_id: str, doc_id: str) -> T | None:
        """Return a document of this tenant, or None."""

    async def list_all(self, tenant_id: str, limit: int | None = None) -> list[T]:
        """Return documents in the repository's default order."""

    async def update(
        self, tenant_id: str, doc_id: str, data: dict[str, Any]
    ) -> T | None:
        """Update fields; None if the document does not exist."""


class IMaterialRepository(ITenantScopedRepository["MaterialResult"], Protocol):
    """Protocol for materials (catalog + stock)."""

    async def list_by_stock(self, tenant_id: str) -> list[MaterialResult]:
        """Return all materials, highest stock first."""

    async def get_many(
        self, tenant_id: str, material_ids: set[str]
    ) -> dict[str, MaterialResult]:
        """Return existing materials keyed by ID."""


class IInvoiceRepository(ITenantScopedRepository[T], Protocol[T]):
    """Protocol for purchase or sale invoices."""

    async def last_invoice_number(self, tenant_id: str) -> int:
        """Return the highest invoice number (0 if none)."""

    async def list_between(
        self,
        tenant_id: str,
        start: datetime,
        end: datetime,
        supplier_type: str | None = None,
    ) -> list[T]:
        """Return invoices dated within [start, end], oldest first."""

    async def create_with_stock(
        self,
        tenant_id: str,
        data: dict[str, Any],
        stock_changes: list[StockChange],
        loan_payment: LoanPaymentWrite | None = None,
    ) -> T:
        """Atomically write the invoice, stock changes and optional loan payment."""


IPurchaseInvoiceRepository = IInvoiceRepository["PurchaseInvoiceResult"]
ISaleInvoiceRepository = IInvoiceRepository["SaleInvoiceResult"]


class ILoanRepository(ITenantScopedRepository["LoanResult"], Protocol):
    """Protocol for loans."""

    async def list_by_status(
        self, tenant_id: str, status: str, limit: int | None = None
    ) -> list[LoanResult]:
        """Return loans with the given status, newest first."""

    async def add_payment(
        self,
        tenant_id: str,
        loan_id: str,
        payment: LoanPayment,
        outstanding_balance: float,
        status: str,
    ) -> LoanResult | None:
        """Append a payment and store the new balance and status."""


class ICashBoxRepository(ITenantScopedRepository["CashBoxResult"], Protocol):
    """Protocol for daily cash boxes (document ID = YYYY-MM-DD)."""

    async def create_for_day(
        self, tenant_id: str, box_id: str, data: dict[str, Any]
    ) -> CashBoxResult:
        """Create the day's box; CashBoxStateException if it exists."""

    async def add_movement(
        self, tenant_id: str, box_id: str, kind: str, movement: CashMovement
    ) -> CashBoxResult | None:
        """Append an income or expense and bump its total."""

    async def list_between(
        self, tenant_id: str, start: datetime, end: datetime
    ) -> list[CashBoxResult]:
        """Return boxes dated within [start, end], newest first."""

    async def latest_open(self, tenant_id: str) -> CashBoxResult | None:
        """Return the newest box still open, if any."""


class ISourceCollectionRepository(
    ITenantScopedRepository["SourceCollectionResult"], Protocol
):
    """Protocol for collections made at source points."""

    async def list_for_source_between(
        self, tenant_id: str, source_id: str, start: datetime, end: datetime
    ) -> list[SourceCollectionResult]:
        """Return one source point's collections dated within [start, end]."""
