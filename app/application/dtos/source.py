"""DTOs for source points and the collections made at them."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class SourcePointResult:
    id: str
    name: str
    address: str
    type: str
    contact_name: str
    contact_phone: str
    contact_email: str | None
    created_at: datetime | None = None
    updated_at: datetime | None = None


@dataclass(frozen=True)
class CollectionLine:
    material_id: str
    weight: float
    unit_price: float = 0.0


@dataclass(frozen=True)
class CollectionItem:
    material_id: str
    material_name: str
    weight: float
    unit_price: float
    subtotal: float


@dataclass(frozen=True)
class SourceCollectionCreate:
    source_id: str
    items: list[CollectionLine]
    signature_data_url: str
    vehicle_id: str | None = None
    date: datetime | None = None
    notes: str | None = None


@dataclass(frozen=True)
class SourceCollectionResult:
    """A pickup at a source point, signed by the source's contact."""

    id: str
    source_id: str
    source_name: str
    contact_name: str
    vehicle_id: str | None
    vehicle_plate: str | None
    registered_by: str | None
    date: datetime
    items: list[CollectionItem]
    total_weight: float
    total_value: float
    signature_data_url: str
    notes: str | None
    created_at: datetime | None = None
    updated_at: datetime | None = None
