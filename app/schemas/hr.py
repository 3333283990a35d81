"""HR API schemas: associates, vehicles, positions, collaborators, attendance."""

from datetime import datetime
from typing import Annotated

from pydantic import AfterValidator, BaseModel, ConfigDict, EmailStr, Field

from app.domain.enums import (
    AttendanceMethod,
    AttendanceType,
    IdentificationType,
    VehicleType,
)


def _upper(v: str) -> str:
    return v.strip().upper()


Plate = Annotated[str, AfterValidator(_upper)]


class AssociateCreate(BaseModel):
    name: str = Field(..., min_length=3, max_length=100)
    id_type: IdentificationType
    id_number: str = Field(..., min_length=5, max_length=20)
    phone: str = Field(..., min_length=7, max_length=15)
    address: str = Field(..., min_length=5, max_length=200)
    vehicle_plate: Plate | None = Field(default=None, max_length=10)
    numacro: int | None = None
    nueca: int | None = None


class AssociateUpdate(BaseModel):
    name: str | None = Field(default=None, min_length=3, max_length=100)
    id_type: IdentificationType | None = None
    id_number: str | None = Field(default=None, min_length=5, max_length=20)
    phone: str | None = Field(default=None, min_length=7, max_length=15)
    address: str | None = Field(default=None, min_length=5, max_length=200)
    vehicle_plate: Plate | None = Field(default=None, max_length=10)
    numacro: int | None = None
    nueca: int | None = None


class AssociateResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    id_type: str
    id_number: str
    phone: str
    address: str
    vehicle_plate: str | None = None
    numacro: int | None = None
    nueca: int | None = None
    created_at: datetime | None = None


class VehicleCreate(BaseModel):
    plate: Plate = Field(..., min_length=3, max_length=10)
    brand: str = Field(..., min_length=2, max_length=50)
    model: str = Field(..., min_length=2, max_length=50)
    type: VehicleType


class VehicleUpdate(BaseModel):
    plate: Plate | None = Field(default=None, min_length=3, max_length=10)
    brand: str | None = Field(default=None, min_length=2, max_length=50)
    model: str | None = Field(default=None, min_length=2, max_length=50)
    type: VehicleType | None = None


class VehicleResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    plate: str
    brand: str
    model: str
    type: str
    created_at: datetime | None = None


class PositionRequest(BaseModel):
    name: str = Field(..., min_length=2, max_length=50)


class PositionResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    created_at: datetime | None = None


class CollaboratorPermissionsSchema(BaseModel):
    """Module access flags."""

    model_config = ConfigDict(from_attributes=True)

    material_management: bool = False
    transport: bool = False
    reports: bool = False
    sui: bool = False
    human_talent: bool = False
    team: bool = False


class CollaboratorCreate(BaseModel):
    name: str = Field(..., min_length=3, max_length=100)
    email: EmailStr
    role: str = Field(..., min_length=1, description="Position name")
    permissions: CollaboratorPermissionsSchema = Field(
        default_factory=CollaboratorPermissionsSchema
    )


class CollaboratorUpdate(BaseModel):
    name: str | None = Field(default=None, min_length=3, max_length=100)
    email: EmailStr | None = None
    role: str | None = Field(default=None, min_length=1)
    permissions: CollaboratorPermissionsSchema | None = None


class CollaboratorResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    email: str
    role: str
    permissions: CollaboratorPermissionsSchema
    created_at: datetime | None = None


class AttendanceCreate(BaseModel):
    collaborator_id: str = Field(..., min_length=1)
    type: AttendanceType
    method: AttendanceMethod = AttendanceMethod.MANUAL
    latitude: float | None = Field(default=None, ge=-90, le=90)
    longitude: float | None = Field(default=None, ge=-180, le=180)
    date: datetime | None = None


class AttendanceResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    collaborator_id: str
    collaborator_name: str
    date: datetime
    type: str
    method: str
    latitude: float | None = None
    longitude: float | None = None
