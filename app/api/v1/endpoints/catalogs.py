"""Simple per-tenant catalogs: source points, associates, vehicles, positions,
collaborators. Each gets create, list, get and partial update.
"""

from collections.abc import Callable
from typing import Annotated

from fastapi import APIRouter, Depends, Query, Request
from pydantic import BaseModel

from app.api.v1.dependencies import (
    get_associate_service,
    get_collaborator_service,
    get_position_service,
    get_source_point_service,
    get_tenant_id,
    get_vehicle_service,
)
from app.application.use_cases.catalogs import CatalogService
from app.core.constants import DEFAULT_LIST_LIMIT, MAX_LIST_LIMIT
from app.core.limiter import limit_writes
from app.schemas.hr import (
    AssociateCreate,
    AssociateResponse,
    AssociateUpdate,
    CollaboratorCreate,
    CollaboratorResponse,
    CollaboratorUpdate,
    PositionRequest,
    PositionResponse,
    VehicleCreate,
    VehicleResponse,
    VehicleUpdate,
)
from app.schemas.source import (
    SourcePointCreate,
    SourcePointResponse,
    SourcePointUpdate,
)


def build_catalog_router(
    name: str,
    get_service: Callable[..., CatalogService],
    create_model: type[BaseModel],
    update_model: type[BaseModel],
    response_model: type[BaseModel],
) -> APIRouter:
    """Return a router exposing CRUD (no delete) for one catalog service.

    Handlers are renamed per catalog: slowapi keys limits and FastAPI keys
    operation IDs by function name.
    """
    router = APIRouter()
    Service = Annotated[CatalogService, Depends(get_service)]
    TenantId = Annotated[str, Depends(get_tenant_id)]

    async def create_item(
        request: Request,
        body: create_model,
        tenant_id: TenantId,
        service: Service,
    ):
        item = await service.create(tenant_id, body.model_dump(mode="json"))
        return response_model.model_validate(item)

    async def list_items(
        tenant_id: TenantId,
        service: Service,
        limit: int = Query(DEFAULT_LIST_LIMIT, ge=1, le=MAX_LIST_LIMIT),
    ):
        items = await service.list_items(tenant_id, limit=limit)
        return [response_model.model_validate(i) for i in items]

    async def get_item(item_id: str, tenant_id: TenantId, service: Service):
        item = await service.get(tenant_id, item_id)
        return response_model.model_validate(item)

    async def update_item(
        request: Request,
        item_id: str,
        body: update_model,
        tenant_id: TenantId,
        service: Service,
    ):
        data = body.model_dump(mode="json", exclude_unset=True)
        item = await service.update(tenant_id, item_id, data)
        return response_model.model_validate(item)

    for handler, verb in (
        (create_item, "create"),
        (list_items, "list"),
        (get_item, "get"),
        (update_item, "update"),
    ):
        handler.__name__ = handler.__qualname__ = f"{verb}_{name}"

    router.post("", response_model=response_model, status_code=201)(
        limit_writes(create_item)
    )
    router.get("", response_model=list[response_model])(list_items)
    router.get("/{item_id}", response_model=response_model)(get_item)
    router.patch("/{item_id}", response_model=response_model)(
        limit_writes(update_item)
    )
    return router


sources_router = build_catalog_router(
    "source_point",
    get_source_point_service,
    SourcePointCreate,
    SourcePointUpdate,
    SourcePointResponse,
)
associates_router = build_catalog_router(
    "associate",
    get_associate_service,
    AssociateCreate,
    AssociateUpdate,
    AssociateResponse,
)
vehicles_router = build_catalog_router(
    "vehicle", get_vehicle_service, VehicleCreate, VehicleUpdate, VehicleResponse
)
positions_router = build_catalog_router(
    "position", get_position_service, PositionRequest, PositionRequest, PositionResponse
)
collaborators_router = build_catalog_router(
    "collaborator",
    get_collaborator_service,
    CollaboratorCreate,
    CollaboratorUpdate,
    CollaboratorResponse,
)
