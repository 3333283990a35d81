"""Source point and source collection API schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, EmailStr, Field

from app.core.constants import MIN_SIGNATURE_LENGTH
from app.domain.enums import SourceType


class SourcePointCreate(BaseModel):
    name: str = Field(..., min_length=3, max_length=100)
    address: str = Field(..., min_length=5, max_length=200)
    type: SourceType
    contact_name: str = Field(..., min_length=3, max_length=100)
    contact_phone: str = Field(..., min_length=7, max_length=15)
    contact_email: EmailStr | None = None


class SourcePointUpdate(BaseModel):
    name: str | None = Field(default=None, min_length=3, max_length=100)
    address: str | None = Field(default=None, min_length=5, max_length=200)
    type: SourceType | None = None
    contact_name: str | None = Field(default=None, min_length=3, max_length=100)
    contact_phone: str | None = Field(default=None, min_length=7, max_length=15)
    contact_email: EmailStr | None = None


class SourcePointResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    address: str
    type: str
    contact_name: str
    contact_phone: str
    contact_email: str | None = None
    created_at: datetime | None = None


class CollectionLineRequest(BaseModel):
    material_id: str = Field(..., min_length=1)
    weight: float = Field(..., gt=0)
    unit_price: float = Field(default=0.0, ge=0)


class SourceCollectionCreateRequest(BaseModel):
    source_id: str = Field(..., min_length=1)
    items: list[CollectionLineRequest] = Field(..., min_length=1)
    signature_data_url: str = Field(
        ...,
        min_length=MIN_SIGNATURE_LENGTH,
        description="Signature of the source contact as a data URL",
    )
    vehicle_id: str | None = None
    date: datetime | None = None
    notes: str | None = Field(default=None, max_length=500)


class SourceCollectionUpdateRequest(BaseModel):
    items: list[CollectionLineRequest] | None = Field(default=None, min_length=1)
    vehicle_id: str | None = None
    date: datetime | None = None
    notes: str | None = Field(default=None, max_length=500)


class CollectionItemResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    material_id: str
    material_name: str
    weight: float
    unit_price: float
    subtotal: float


class SourceCollectionResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    source_id: str
    source_name: str
    contact_name: str
    vehicle_id: str | None = None
    vehicle_plate: str | None = None
    registered_by: str | None = None
    date: datetime
    items: list[CollectionItemResponse]
    total_weight: float
    total_value: float
    signature_data_url: str
    notes: str | None = None
    created_at: datetime | None = None
