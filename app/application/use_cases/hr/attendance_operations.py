"""Attendance control: entry/exit records for collaborators."""

from __future__ import annotations

from datetime import datetime

from app.application.dtos.hr import AttendanceResult, CollaboratorResult
from app.application.interfaces.repositories import ITenantScopedRepository
from app.core.constants import DEFAULT_LIST_LIMIT
from app.domain.enums import AttendanceMethod, AttendanceType
from app.domain.exceptions import ResourceNotFoundException, ValidationException
from app.shared.utils.datetime import utc_now


class AttendanceService:
    def __init__(
        self,
        attendance_repo: ITenantScopedRepository[AttendanceResult],
        collaborator_repo: ITenantScopedRepository[CollaboratorResult],
    ) -> None:
        self._attendance_repo = attendance_repo
        self._collaborator_repo = collaborator_repo

    async def register(
        self,
        tenant_id: str,
        collaborator_id: str,
        type: AttendanceType,
        method: AttendanceMethod,
        latitude: float | None = None,
        longitude: float | None = None,
        date: datetime | None = None,
    ) -> AttendanceResult:
        """Record an entry or exit; GPS records must carry coordinates."""
        collaborator = await self._collaborator_repo.get(tenant_id, collaborator_id)
        if collaborator is None:
            raise ResourceNotFoundException("collaborator", collaborator_id)
        has_coords = latitude is not None and longitude is not None
        if method == AttendanceMethod.GPS and not has_coords:
            raise ValidationException(
                "GPS records require latitude and longitude", field="coordinates"
            )
        return await self._attendance_repo.create(
            tenant_id,
            {
                "collaborator_id": collaborator.id,
                "collaborator_name": collaborator.name,
                "date": date or utc_now(),
                "type": type.value,
                "method": method.value,
                "coordinates": (
                    {"latitude": latitude, "longitude": longitude}
                    if has_coords
                    else None
                ),
            },
        )

    async def list_recent(
        self, tenant_id: str, limit: int = DEFAULT_LIST_LIMIT
    ) -> list[AttendanceResult]:
        return await self._attendance_repo.list_all(tenant_id, limit=limit)
