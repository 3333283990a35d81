"""Company profile API: one profile per tenant, required before invoicing."""

from typing import Annotated

from fastapi import APIRouter, Depends, Request

from app.api.v1.dependencies import get_company_profile_service, get_tenant_id
from app.application.use_cases.accounts import CompanyProfileService
from app.core.limiter import limit_writes
from app.schemas.company_profile import CompanyProfileRequest, CompanyProfileResponse

router = APIRouter()


@router.get("", response_model=CompanyProfileResponse)
async def get_profile(
    tenant_id: Annotated[str, Depends(get_tenant_id)],
    profile_service: Annotated[
        CompanyProfileService, Depends(get_company_profile_service)
    ],
):
    """Return the tenant's company profile (404 until it is set up)."""
    profile = await profile_service.get_profile(tenant_id)
    return CompanyProfileResponse.model_validate(profile)


@router.put("", response_model=CompanyProfileResponse)
@limit_writes
async def save_profile(
    request: Request,
    body: CompanyProfileRequest,
    tenant_id: Annotated[str, Depends(get_tenant_id)],
    profile_service: Annotated[
        CompanyProfileService, Depends(get_company_profile_service)
    ],
):
    """Create or replace the company profile."""
    profile = await profile_service.save_profile(
        tenant_id,
        company_name=body.company_name,
        nit=body.nit,
        phone=body.phone,
        address=body.address,
    )
    return CompanyProfileResponse.model_validate(profile)
