"""Purchase and sale invoicing.

Invoices are numbered per tenant (last + 1). Line prices are denormalized
from the material at write time. The invoice, the stock changes and any
loan payment are committed together by the repository.
"""

from __future__ import annotations

import logging
from collections import defaultdict

from app.application.dtos.hr import AssociateResult
from app.application.dtos.invoice import (
    InvoiceItem,
    InvoiceLine,
    LoanPaymentWrite,
    PurchaseInvoiceCreate,
    PurchaseInvoiceResult,
    SaleInvoiceCreate,
    SaleInvoiceResult,
    StockChange,
)
from app.application.dtos.loan import LoanPayment
from app.application.dtos.material import MaterialResult
from app.application.interfaces.repositories import (
    ILoanRepository,
    IMaterialRepository,
    IPurchaseInvoiceRepository,
    ISaleInvoiceRepository,
    ITenantScopedRepository,
)
from app.application.use_cases.accounts.company_profile_operations import (
    CompanyProfileService,
)
from app.core.constants import DEFAULT_LIST_LIMIT
from app.domain.enums import LoanStatus, PaymentMethod, SupplierType
from app.domain.exceptions import (
    InsufficientStockException,
    LoanStateException,
    ResourceNotFoundException,
    ValidationException,
)
from app.shared.utils.generators import generate_cuid

logger = logging.getLogger(__name__)


def _money(value: float) -> float:
    return round(value, 2)


def _kg(value: float) -> float:
    # Stock is a double summed by server-side increments; compare to the gram.
    return round(value, 3)


def _weights_by_material(lines: list[InvoiceLine]) -> dict[str, float]:
    totals: dict[str, float] = defaultdict(float)
    for line in lines:
        totals[line.material_id] += line.weight
    return {mid: _kg(kg) for mid, kg in totals.items()}


class InvoiceService:
    """Create and query purchase and sale invoices for a tenant."""

    def __init__(
        self,
        profile_service: CompanyProfileService,
        material_repo: IMaterialRepository,
        purchase_repo: IPurchaseInvoiceRepository,
        sale_repo: ISaleInvoiceRepository,
        loan_repo: ILoanRepository,
        associate_repo: ITenantScopedRepository[AssociateResult],
    ) -> None:
        self._profile_service = profile_service
        self._material_repo = material_repo
        self._purchase_repo = purchase_repo
        self._sale_repo = sale_repo
        self._loan_repo = loan_repo
        self._associate_repo = associate_repo

    async def _resolve_materials(
        self, tenant_id: str, lines: list[InvoiceLine]
    ) -> dict[str, MaterialResult]:
        if not lines:
            raise ValidationException("At least one item is required", field="items")
        ids = {line.material_id for line in lines}
        materials = await self._material_repo.get_many(tenant_id, ids)
        for material_id in sorted(ids):
            if material_id not in materials:
                raise ResourceNotFoundException("material", material_id)
        return materials

    @staticmethod
    def _build_items(
        lines: list[InvoiceLine],
        materials: dict[str, MaterialResult],
        allow_price_override: bool,
    ) -> list[InvoiceItem]:
        items = []
        for line in lines:
            material = materials[line.material_id]
            unit_price = material.price
            if allow_price_override and line.unit_price is not None:
                unit_price = line.unit_price
            items.append(
                InvoiceItem(
                    material_id=material.id,
                    material_name=material.name,
                    material_code=material.code,
                    weight=line.weight,
                    unit_price=unit_price,
                    subtotal=_money(line.weight * unit_price),
                )
            )
        return items

    async def _resolve_supplier(
        self, tenant_id: str, cmd: PurchaseInvoiceCreate
    ) -> tuple[str | None, str | None, str | None]:
        """Return (supplier_id, name, identification); associates are denormalized."""
        if cmd.supplier_type != SupplierType.ASSOCIATE:
            return None, cmd.supplier_name, cmd.supplier_identification
        if not cmd.supplier_id:
            raise ValidationException(
                "An associate must be selected", field="supplier_id"
            )
        associate = await self._associate_repo.get(tenant_id, cmd.supplier_id)
        if associate is None:
            raise ResourceNotFoundException("associate", cmd.supplier_id)
        return associate.id, associate.name, associate.id_number

    async def _build_loan_payment(
        self,
        tenant_id: str,
        cmd: PurchaseInvoiceCreate,
        supplier_id: str | None,
        total: float,
        invoice_number: int,
    ) -> LoanPaymentWrite | None:
        amount = cmd.loan_payment or 0
        if amount <= 0:
            return None
        if not cmd.loan_id:
            raise ValidationException(
                "A loan must be selected to apply a payment", field="loan_id"
            )
        if amount > total:
            raise ValidationException(
                "Loan payment cannot exceed the invoice total", field="loan_payment"
            )
        loan = await self._loan_repo.get(tenant_id, cmd.loan_id)
        if loan is None:
            raise ResourceNotFoundException("loan", cmd.loan_id)
        if loan.status != LoanStatus.PENDING.value:
            raise LoanStateException(loan.id, "Loan is already paid")
        if supplier_id is None or loan.beneficiary_id != supplier_id:
            raise LoanStateException(loan.id, "Loan does not belong to the supplier")
        if amount > loan.outstanding_balance:
            raise LoanStateException(
                loan.id, "Loan payment exceeds the outstanding balance"
            )
        balance = _money(loan.outstanding_balance - amount)
        status = LoanStatus.PAID if balance <= 0 else LoanStatus.PENDING
        return LoanPaymentWrite(
            loan_id=loan.id,
            payment=LoanPayment(
                id=generate_cuid(),
                amount=amount,
                date=cmd.date,
                note=f"Abono desde factura de compra #{invoice_number}",
            ),
            outstanding_balance=max(balance, 0.0),
            status=status.value,
        )

    async def create_purchase(
        self, tenant_id: str, cmd: PurchaseInvoiceCreate
    ) -> PurchaseInvoiceResult:
        """Record a purchase: stock goes up by each item's weight."""
        if cmd.payment_method == PaymentMethod.CHECK:
            raise ValidationException(
                "Purchases are paid in cash or Nequi", field="payment_method"
            )
        await self._profile_service.require_profile(tenant_id)
        materials = await self._resolve_materials(tenant_id, cmd.items)
        items = self._build_items(cmd.items, materials, allow_price_override=False)
        total = _money(sum(i.subtotal for i in items))
        supplier_id, supplier_name, supplier_identification = (
            await self._resolve_supplier(tenant_id, cmd)
        )
        invoice_number = await self._purchase_repo.last_invoice_number(tenant_id) + 1
        loan_write = await self._build_loan_payment(
            tenant_id, cmd, supplier_id, total, invoice_number
        )
        loan_payment = loan_write.payment.amount if loan_write else None
        data = {
            "invoice_number": invoice_number,
            "date": cmd.date,
            "payment_method": cmd.payment_method.value,
            "supplier_type": cmd.supplier_type.value,
            "supplier_id": supplier_id,
            "supplier_name": supplier_name,
            "supplier_identification": supplier_identification,
            "items": [_item_dict(i) for i in items],
            "total": total,
            "loan_payment": loan_payment,
            "loan_id": loan_write.loan_id if loan_write else None,
            "net_paid": _money(total - (loan_payment or 0)),
            "notes": cmd.notes,
        }
        stock_changes = [
            StockChange(material_id=mid, delta_kg=kg)
            for mid, kg in _weights_by_material(cmd.items).items()
        ]
        invoice = await self._purchase_repo.create_with_stock(
            tenant_id, data, stock_changes, loan_write
        )
        logger.info(
            "Purchase invoice #%d created for tenant %s (total=%.2f)",
            invoice_number,
            tenant_id,
            total,
        )
        return invoice

    async def create_sale(
        self, tenant_id: str, cmd: SaleInvoiceCreate
    ) -> SaleInvoiceResult:
        """Record a sale: stock goes down and may never go below zero."""
        await self._profile_service.require_profile(tenant_id)
        materials = await self._resolve_materials(tenant_id, cmd.items)
        requested = _weights_by_material(cmd.items)
        for material_id, kg in requested.items():
            material = materials[material_id]
            available = _kg(material.stock)
            if kg > available:
                raise InsufficientStockException(
                    material_id, material.name, available, kg
                )
        items = self._build_items(cmd.items, materials, allow_price_override=True)
        total = _money(sum(i.subtotal for i in items))
        invoice_number = await self._sale_repo.last_invoice_number(tenant_id) + 1
        data = {
            "invoice_number": invoice_number,
            "date": cmd.date,
            "payment_method": cmd.payment_method.value,
            "customer_name": cmd.customer_name,
            "items": [_item_dict(i) for i in items],
            "total": total,
            "notes": cmd.notes,
        }
        stock_changes = [
            StockChange(material_id=mid, delta_kg=-kg) for mid, kg in requested.items()
        ]
        invoice = await self._sale_repo.create_with_stock(tenant_id, data, stock_changes)
        logger.info(
            "Sale invoice #%d created for tenant %s (total=%.2f)",
            invoice_number,
            tenant_id,
            total,
        )
        return invoice

    async def get_purchase(self, tenant_id: str, invoice_id: str) -> PurchaseInvoiceResult:
        invoice = await self._purchase_repo.get(tenant_id, invoice_id)
        if invoice is None:
            raise ResourceNotFoundException("purchase_invoice", invoice_id)
        return invoice

    async def get_sale(self, tenant_id: str, invoice_id: str) -> SaleInvoiceResult:
        invoice = await self._sale_repo.get(tenant_id, invoice_id)
        if invoice is None:
            raise ResourceNotFoundException("sale_invoice", invoice_id)
        return invoice

    async def list_purchases(
        self, tenant_id: str, limit: int = DEFAULT_LIST_LIMIT
    ) -> list[PurchaseInvoiceResult]:
        return await self._purchase_repo.list_all(tenant_id, limit=limit)

    async def list_sales(
        self, tenant_id: str, limit: int = DEFAULT_LIST_LIMIT
    ) -> list[SaleInvoiceResult]:
        return await self._sale_repo.list_all(tenant_id, limit=limit)


def _item_dict(item: InvoiceItem) -> dict:
    return {
        "material_id": item.material_id,
        "material_name": item.material_name,
        "material_code": item.material_code,
        "weight": item.weight,
        "unit_price": item.unit_price,
        "subtotal": item.subtotal,
    }
