"""DTOs for the material catalog and inventory."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class MaterialResult:
    """Material read-model; stock is in kilograms."""

    id: str
    name: str
    price: float
    code: str | None
    stock: float
    created_at: datetime | None = None
    updated_at: datetime | None = None
