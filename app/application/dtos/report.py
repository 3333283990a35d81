"""DTOs for tonnage, mass-balance, certificate, inventory and export reports."""

from dataclasses import dataclass
from datetime import datetime

from app.application.dtos.material import MaterialResult


@dataclass(frozen=True)
class MaterialTonnage:
    material_id: str
    material_name: str
    total_kg: float


@dataclass(frozen=True)
class TonnageReport:
    period: str
    start: datetime
    end: datetime
    materials: list[MaterialTonnage]
    total_kg: float


@dataclass(frozen=True)
class MassBalanceRow:
    """One row per (week of month, associate, material code); quantity in tonnes."""

    week: int
    id_type: str
    id_number: str
    vehicle_plate: str
    material_code: str
    tonnes: float


@dataclass(frozen=True)
class CertificateMaterial:
    material_name: str
    total_kg: float


@dataclass(frozen=True)
class CollectionCertificate:
    """Material a source point handed over for recovery in one calendar month."""

    source_id: str
    source_name: str
    source_address: str
    year: int
    month: int
    start: datetime
    end: datetime
    materials: list[CertificateMaterial]
    total_kg: float


@dataclass(frozen=True)
class InventorySummary:
    """Current stock per material, largest first, with the overall weight."""

    materials: list[MaterialResult]
    total_kg: float


@dataclass(frozen=True)
class ExportTable:
    """A flat sheet: column headers and one list of cell values per row."""

    title: str
    headers: list[str]
    rows: list[list[str | float | int | None]]
