"""Materials API: catalog (create, get, list, update) and inventory levels."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, Request

from app.api.v1.dependencies import get_material_service, get_tenant_id
from app.application.use_cases.catalogs import MaterialService
from app.core.constants import DEFAULT_LIST_LIMIT, MAX_LIST_LIMIT
from app.core.limiter import limit_writes
from app.schemas.material import MaterialCreate, MaterialResponse, MaterialUpdate

router = APIRouter()
inventory_router = APIRouter()


@router.post("", response_model=MaterialResponse, status_code=201)
@limit_writes
async def create_material(
    request: Request,
    body: MaterialCreate,
    tenant_id: Annotated[str, Depends(get_tenant_id)],
    material_service: Annotated[MaterialService, Depends(get_material_service)],
):
    """Create a material with zero stock."""
    material = await material_service.create_material(
        tenant_id, name=body.name, price=body.price, code=body.code
    )
    return MaterialResponse.model_validate(material)


@router.get("", response_model=list[MaterialResponse])
async def list_materials(
    tenant_id: Annotated[str, Depends(get_tenant_id)],
    material_service: Annotated[MaterialService, Depends(get_material_service)],
    limit: int = Query(DEFAULT_LIST_LIMIT, ge=1, le=MAX_LIST_LIMIT),
):
    """List materials by name."""
    materials = await material_service.list_items(tenant_id, limit=limit)
    return [MaterialResponse.model_validate(m) for m in materials]


@router.get("/{material_id}", response_model=MaterialResponse)
async def get_material(
    material_id: str,
    tenant_id: Annotated[str, Depends(get_tenant_id)],
    material_service: Annotated[MaterialService, Depends(get_material_service)],
):
    material = await material_service.get(tenant_id, material_id)
    return MaterialResponse.model_validate(material)


@router.patch("/{material_id}", response_model=MaterialResponse)
@limit_writes
async def update_material(
    request: Request,
    material_id: str,
    body: MaterialUpdate,
    tenant_id: Annotated[str, Depends(get_tenant_id)],
    material_service: Annotated[MaterialService, Depends(get_material_service)],
):
    """Update name, price or code. Stock only changes through invoices."""
    material = await material_service.update_material(
        tenant_id,
        material_id,
        name=body.name,
        price=body.price,
        code=body.code,
    )
    return MaterialResponse.model_validate(material)


@inventory_router.get("", response_model=list[MaterialResponse])
async def get_inventory(
    tenant_id: Annotated[str, Depends(get_tenant_id)],
    material_service: Annotated[MaterialService, Depends(get_material_service)],
):
    """Current stock of every material, highest first."""
    materials = await material_service.list_inventory(tenant_id)
    return [MaterialResponse.model_validate(m) for m in materials]
