"""Company profile operations."""

from __future__ import annotations

from app.application.dtos.company_profile import CompanyProfileResult
from app.application.interfaces.repositories import ICompanyProfileRepository
from app.domain.exceptions import (
    CompanyProfileRequiredException,
    ResourceNotFoundException,
)


class CompanyProfileService:
    """Read and save the tenant's company profile."""

    def __init__(self, profile_repo: ICompanyProfileRepository) -> None:
        self._profile_repo = profile_repo

    async def get_profile(self, tenant_id: str) -> CompanyProfileResult:
        profile = await self._profile_repo.get(tenant_id)
        if profile is None:
            raise ResourceNotFoundException("company_profile", tenant_id)
        return profile

    async def save_profile(
        self,
        tenant_id: str,
        company_name: str,
        nit: str,
        phone: str,
        address: str,
    ) -> CompanyProfileResult:
        return await self._profile_repo.upsert(
            tenant_id,
            company_name=company_name.strip(),
            nit=nit.strip(),
            phone=phone.strip(),
            address=address.strip(),
        )

    async def require_profile(self, tenant_id: str) -> CompanyProfileResult:
        """Return the profile or raise CompanyProfileRequiredException."""
        profile = await self._profile_repo.get(tenant_id)
        if profile is None:
            raise CompanyProfileRequiredException(tenant_id)
        return profile
