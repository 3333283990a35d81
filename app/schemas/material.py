"""Material and inventory API schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class MaterialCreate(BaseModel):
    name: str = Field(..., min_length=2, max_length=100)
    price: float = Field(..., gt=0, description="Purchase price per kg")
    code: str | None = Field(default=None, max_length=50)


class MaterialUpdate(BaseModel):
    """Partial update; stock is only changed by invoices."""

    name: str | None = Field(default=None, min_length=2, max_length=100)
    price: float | None = Field(default=None, gt=0)
    code: str | None = Field(default=None, max_length=50)


class MaterialResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    price: float
    code: str | None = None
    stock: float = Field(..., description="Current stock in kg")
    created_at: datetime | None = None
    updated_at: datetime | None = None
