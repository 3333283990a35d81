"""Source collections API: signed pickups at source points."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, Request

from app.api.v1.dependencies import (
    get_current_user,
    get_source_collection_service,
    get_tenant_id,
)
from app.application.dtos.source import CollectionLine, SourceCollectionCreate
from app.application.dtos.user import UserResult
from app.application.use_cases.sources import SourceCollectionService
from app.core.constants import DEFAULT_LIST_LIMIT, MAX_LIST_LIMIT
from app.core.limiter import limit_writes
from app.schemas.source import (
    CollectionLineRequest,
    SourceCollectionCreateRequest,
    SourceCollectionResponse,
    SourceCollectionUpdateRequest,
)

router = APIRouter()

CollectionService = Annotated[
    SourceCollectionService, Depends(get_source_collection_service)
]


def _lines(items: list[CollectionLineRequest]) -> list[CollectionLine]:
    return [
        CollectionLine(
            material_id=i.material_id, weight=i.weight, unit_price=i.unit_price
        )
        for i in items
    ]


@router.post("", response_model=SourceCollectionResponse, status_code=201)
@limit_writes
async def create_collection(
    request: Request,
    body: SourceCollectionCreateRequest,
    tenant_id: Annotated[str, Depends(get_tenant_id)],
    current_user: Annotated[UserResult, Depends(get_current_user)],
    service: CollectionService,
):
    """Register a pickup; totals are computed server-side."""
    collection = await service.create_collection(
        tenant_id,
        SourceCollectionCreate(
            source_id=body.source_id,
            items=_lines(body.items),
            signature_data_url=body.signature_data_url,
            vehicle_id=body.vehicle_id,
            date=body.date,
            notes=body.notes,
        ),
        registered_by=current_user.email,
    )
    return SourceCollectionResponse.model_validate(collection)


@router.get("", response_model=list[SourceCollectionResponse])
async def list_collections(
    tenant_id: Annotated[str, Depends(get_tenant_id)],
    service: CollectionService,
    limit: int = Query(DEFAULT_LIST_LIMIT, ge=1, le=MAX_LIST_LIMIT),
):
    """Collection history, newest first."""
    collections = await service.list_collections(tenant_id, limit=limit)
    return [SourceCollectionResponse.model_validate(c) for c in collections]


@router.get("/{collection_id}", response_model=SourceCollectionResponse)
async def get_collection(
    collection_id: str,
    tenant_id: Annotated[str, Depends(get_tenant_id)],
    service: CollectionService,
):
    collection = await service.get_collection(tenant_id, collection_id)
    return SourceCollectionResponse.model_validate(collection)


@router.patch("/{collection_id}", response_model=SourceCollectionResponse)
@limit_writes
async def update_collection(
    request: Request,
    collection_id: str,
    body: SourceCollectionUpdateRequest,
    tenant_id: Annotated[str, Depends(get_tenant_id)],
    service: CollectionService,
):
    """Replace items, vehicle, date or notes; totals are recomputed."""
    collection = await service.update_collection(
        tenant_id,
        collection_id,
        items=_lines(body.items) if body.items is not None else None,
        vehicle_id=body.vehicle_id,
        notes=body.notes,
        date=body.date,
    )
    return SourceCollectionResponse.model_validate(collection)
