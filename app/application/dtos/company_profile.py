"""DTOs for the company profile."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class CompanyProfileResult:
    """Company profile; its ID is the tenant ID."""

    tenant_id: str
    company_name: str
    nit: str
    phone: str
    address: str
    created_at: datetime | None = None
    updated_at: datetime | None = None
