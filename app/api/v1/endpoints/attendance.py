"""Attendance API: entry and exit records of collaborators."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, Request

from app.api.v1.dependencies import get_attendance_service, get_tenant_id
from app.application.use_cases.hr import AttendanceService
from app.core.constants import DEFAULT_LIST_LIMIT, MAX_LIST_LIMIT
from app.core.limiter import limit_writes
from app.schemas.hr import AttendanceCreate, AttendanceResponse

router = APIRouter()


@router.post("", response_model=AttendanceResponse, status_code=201)
@limit_writes
async def register_attendance(
    request: Request,
    body: AttendanceCreate,
    tenant_id: Annotated[str, Depends(get_tenant_id)],
    attendance_service: Annotated[AttendanceService, Depends(get_attendance_service)],
):
    record = await attendance_service.register(
        tenant_id,
        collaborator_id=body.collaborator_id,
        type=body.type,
        method=body.method,
        latitude=body.latitude,
        longitude=body.longitude,
        date=body.date,
    )
    return AttendanceResponse.model_validate(record)


@router.get("", response_model=list[AttendanceResponse])
async def list_attendance(
    tenant_id: Annotated[str, Depends(get_tenant_id)],
    attendance_service: Annotated[AttendanceService, Depends(get_attendance_service)],
    limit: int = Query(DEFAULT_LIST_LIMIT, ge=1, le=MAX_LIST_LIMIT),
):
    """Most recent records first."""
    records = await attendance_service.list_recent(tenant_id, limit=limit)
    return [AttendanceResponse.model_validate(r) for r in records]
