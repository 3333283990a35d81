"""Cash-box API: open, move money, view and close today's box (arqueo de caja)."""

from datetime import date
from typing import Annotated

from fastapi import APIRouter, Depends, Query, Request

from app.api.v1.dependencies import (
    get_cash_box_service,
    get_current_actor,
    get_tenant_id,
)
from app.application.dtos.cash_box import Actor
from app.application.use_cases.cash_box import CashBoxService
from app.core.limiter import limit_writes
from app.schemas.cash_box import (
    CashBoxCloseRequest,
    CashBoxOpenRequest,
    CashBoxResponse,
    CashExpenseRequest,
    CashIncomeRequest,
)

router = APIRouter()

CashBoxes = Annotated[CashBoxService, Depends(get_cash_box_service)]
TenantId = Annotated[str, Depends(get_tenant_id)]
CurrentActor = Annotated[Actor, Depends(get_current_actor)]


@router.post("/open", response_model=CashBoxResponse, status_code=201)
@limit_writes
async def open_cash_box(
    request: Request,
    body: CashBoxOpenRequest,
    tenant_id: TenantId,
    actor: CurrentActor,
    cash_box_service: CashBoxes,
):
    """Open today's box; 409 if it was already opened."""
    box = await cash_box_service.open_box(
        tenant_id, body.opening_balance, actor, notes=body.notes
    )
    return CashBoxResponse.model_validate(box)


@router.post("/incomes", response_model=CashBoxResponse)
@limit_writes
async def add_income(
    request: Request,
    body: CashIncomeRequest,
    tenant_id: TenantId,
    actor: CurrentActor,
    cash_box_service: CashBoxes,
):
    box = await cash_box_service.add_income(
        tenant_id, body.amount, actor, note=body.note
    )
    return CashBoxResponse.model_validate(box)


@router.post("/expenses", response_model=CashBoxResponse)
@limit_writes
async def add_expense(
    request: Request,
    body: CashExpenseRequest,
    tenant_id: TenantId,
    actor: CurrentActor,
    cash_box_service: CashBoxes,
):
    box = await cash_box_service.add_expense(
        tenant_id, body.amount, actor, category=body.category, note=body.note
    )
    return CashBoxResponse.model_validate(box)


@router.get("/today", response_model=CashBoxResponse | None)
async def get_today(tenant_id: TenantId, cash_box_service: CashBoxes):
    """Today's box with live cash totals; null when it has not been opened."""
    box = await cash_box_service.today(tenant_id)
    return CashBoxResponse.model_validate(box) if box is not None else None


@router.post("/close", response_model=CashBoxResponse)
@limit_writes
async def close_cash_box(
    request: Request,
    body: CashBoxCloseRequest,
    tenant_id: TenantId,
    actor: CurrentActor,
    cash_box_service: CashBoxes,
):
    """Close today's box with the counted cash."""
    box = await cash_box_service.close_box(
        tenant_id, body.actual_balance, actor, notes=body.notes
    )
    return CashBoxResponse.model_validate(box)


@router.get("/history", response_model=list[CashBoxResponse])
async def get_history(
    tenant_id: TenantId,
    cash_box_service: CashBoxes,
    start: date = Query(..., description="First day, inclusive"),
    end: date = Query(..., description="Last day, inclusive"),
):
    boxes = await cash_box_service.history(tenant_id, start, end)
    return [CashBoxResponse.model_validate(b) for b in boxes]
