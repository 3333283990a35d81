"""Firestore-backed repositories for the simple per-tenant catalogs."""

from __future__ import annotations

from app.application.dtos.hr import (
    AssociateResult,
    AttendanceResult,
    CollaboratorPermissions,
    CollaboratorResult,
    PositionResult,
    VehicleResult,
)
from app.application.dtos.source import SourcePointResult
from app.infrastructure.firebase.collections import (
    COLLECTION_ASSOCIATES,
    COLLECTION_ATTENDANCE,
    COLLECTION_COLLABORATORS,
    COLLECTION_POSITIONS,
    COLLECTION_SOURCES,
    COLLECTION_VEHICLES,
)
from app.infrastructure.firebase.repositories.base import (
    FirestoreTenantScopedRepository,
)


def _optional_int(value) -> int | None:
    return int(value) if value is not None else None


class FirestoreSourcePointRepository(FirestoreTenantScopedRepository[SourcePointResult]):
    collection_id = COLLECTION_SOURCES
    order_field = "name"

    def _to_result(self, doc_id: str, data: dict) -> SourcePointResult:
        return SourcePointResult(
            id=doc_id,
            name=data.get("name", ""),
            address=data.get("address", ""),
            type=data.get("type", ""),
            contact_name=data.get("contact_name", ""),
            contact_phone=data.get("contact_phone", ""),
            contact_email=data.get("contact_email"),
            created_at=data.get("created_at"),
            updated_at=data.get("updated_at"),
        )


class FirestoreAssociateRepository(FirestoreTenantScopedRepository[AssociateResult]):
    collection_id = COLLECTION_ASSOCIATES
    order_field = "name"

    def _to_result(self, doc_id: str, data: dict) -> AssociateResult:
        return AssociateResult(
            id=doc_id,
            name=data.get("name", ""),
            id_type=data.get("id_type", ""),
            id_number=data.get("id_number", ""),
            phone=data.get("phone", ""),
            address=data.get("address", ""),
            vehicle_plate=data.get("vehicle_plate"),
            numacro=_optional_int(data.get("numacro")),
            nueca=_optional_int(data.get("nueca")),
            created_at=data.get("created_at"),
            updated_at=data.get("updated_at"),
        )


class FirestoreVehicleRepository(FirestoreTenantScopedRepository[VehicleResult]):
    collection_id = COLLECTION_VEHICLES
    order_field = "plate"

    def _to_result(self, doc_id: str, data: dict) -> VehicleResult:
        return VehicleResult(
            id=doc_id,
            plate=data.get("plate", ""),
            brand=data.get("brand", ""),
            model=data.get("model", ""),
            type=data.get("type", ""),
            created_at=data.get("created_at"),
            updated_at=data.get("updated_at"),
        )


class FirestorePositionRepository(FirestoreTenantScopedRepository[PositionResult]):
    collection_id = COLLECTION_POSITIONS
    order_field = "name"

    def _to_result(self, doc_id: str, data: dict) -> PositionResult:
        return PositionResult(
            id=doc_id,
            name=data.get("name", ""),
            created_at=data.get("created_at"),
            updated_at=data.get("updated_at"),
        )


class FirestoreCollaboratorRepository(
    FirestoreTenantScopedRepository[CollaboratorResult]
):
    collection_id = COLLECTION_COLLABORATORS
    order_field = "name"

    def _to_result(self, doc_id: str, data: dict) -> CollaboratorResult:
        perms = data.get("permissions") or {}
        return CollaboratorResult(
            id=doc_id,
            name=data.get("name", ""),
            email=data.get("email", ""),
            role=data.get("role", ""),
            permissions=CollaboratorPermissions(
                material_management=bool(perms.get("material_management", False)),
                transport=bool(perms.get("transport", False)),
                reports=bool(perms.get("reports", False)),
                sui=bool(perms.get("sui", False)),
                human_talent=bool(perms.get("human_talent", False)),
                team=bool(perms.get("team", False)),
            ),
            created_at=data.get("created_at"),
            updated_at=data.get("updated_at"),
        )


class FirestoreAttendanceRepository(FirestoreTenantScopedRepository[AttendanceResult]):
    collection_id = COLLECTION_ATTENDANCE
    order_field = "date"
    order_direction = "DESCENDING"

    def _to_result(self, doc_id: str, data: dict) -> AttendanceResult:
        coords = data.get("coordinates") or {}
        return AttendanceResult(
            id=doc_id,
            collaborator_id=data.get("collaborator_id", ""),
            collaborator_name=data.get("collaborator_name", ""),
            date=data.get("date"),
            type=data.get("type", ""),
            method=data.get("method", ""),
            latitude=coords.get("latitude"),
            longitude=coords.get("longitude"),
        )
