"""Report API schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict

from app.schemas.material import MaterialResponse


class MaterialTonnageResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    material_id: str
    material_name: str
    total_kg: float


class TonnageReportResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    period: str
    start: datetime
    end: datetime
    materials: list[MaterialTonnageResponse]
    total_kg: float


class MassBalanceRowResponse(BaseModel):
    """One SUI row; ``tonnes`` is kg / 1000."""

    model_config = ConfigDict(from_attributes=True)

    week: int
    id_type: str
    id_number: str
    vehicle_plate: str
    material_code: str
    tonnes: float


class CertificateMaterialResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    material_name: str
    total_kg: float


class CollectionCertificateResponse(BaseModel):
    """Monthly certificate of material a source point delivered for recovery."""

    model_config = ConfigDict(from_attributes=True)

    source_id: str
    source_name: str
    source_address: str
    year: int
    month: int
    start: datetime
    end: datetime
    materials: list[CertificateMaterialResponse]
    total_kg: float


class InventorySummaryResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    materials: list[MaterialResponse]
    total_kg: float
