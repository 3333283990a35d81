"""DTOs for HR catalogs: associates, vehicles, positions, collaborators, attendance."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class AssociateResult:
    """Associate (registered supplier) identified for the SUI mass-balance report."""

    id: str
    name: str
    id_type: str
    id_number: str
    phone: str
    address: str
    vehicle_plate: str | None
    numacro: int | None
    nueca: int | None
    created_at: datetime | None = None
    updated_at: datetime | None = None


@dataclass(frozen=True)
class VehicleResult:
    id: str
    plate: str
    brand: str
    model: str
    type: str
    created_at: datetime | None = None
    updated_at: datetime | None = None


@dataclass(frozen=True)
class PositionResult:
    id: str
    name: str
    created_at: datetime | None = None
    updated_at: datetime | None = None


@dataclass(frozen=True)
class CollaboratorPermissions:
    """Per-module access flags."""

    material_management: bool = False
    transport: bool = False
    reports: bool = False
    sui: bool = False
    human_talent: bool = False
    team: bool = False


@dataclass(frozen=True)
class CollaboratorResult:
    id: str
    name: str
    email: str
    role: str
    permissions: CollaboratorPermissions
    created_at: datetime | None = None
    updated_at: datetime | None = None


@dataclass(frozen=True)
class AttendanceResult:
    id: str
    collaborator_id: str
    collaborator_name: str
    date: datetime
    type: str
    method: str
    latitude: float | None = None
    longitude: float | None = None
