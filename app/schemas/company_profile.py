"""Company profile API schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class CompanyProfileRequest(BaseModel):
    """Request body for creating or replacing the company profile."""

    company_name: str = Field(..., min_length=2, max_length=100)
    nit: str = Field(..., min_length=5, max_length=20)
    phone: str = Field(..., min_length=7, max_length=15)
    address: str = Field(..., min_length=5, max_length=200)


class CompanyProfileResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    tenant_id: str
    company_name: str
    nit: str
    phone: str
    address: str
    created_at: datetime | None = None
    updated_at: datetime | None = None
