"""API v1 router aggregation.

Includes all endpoint modules with consistent prefix and tags. All routes
use dependencies from app.api.v1.dependencies (no manual repo/service construction).
"""

from fastapi import APIRouter

from app.api.v1.endpoints import (
    attendance,
    auth,
    cash_box,
    catalogs,
    company_profile,
    health,
    invoices,
    loans,
    materials,
    pqs,
    reports,
    source_collections,
    zia,
)

api_router = APIRouter()

api_router.include_router(health.router, prefix="/health", tags=["health"])
api_router.include_router(auth.router, prefix="/auth", tags=["auth"])
api_router.include_router(
    company_profile.router, prefix="/company-profile", tags=["company-profile"]
)
api_router.include_router(materials.router, prefix="/materials", tags=["materials"])
api_router.include_router(
    materials.inventory_router, prefix="/inventory", tags=["materials"]
)
api_router.include_router(
    invoices.purchases_router, prefix="/purchases", tags=["purchases"]
)
api_router.include_router(invoices.sales_router, prefix="/sales", tags=["sales"])
api_router.include_router(catalogs.sources_router, prefix="/sources", tags=["sources"])
api_router.include_router(
    source_collections.router,
    prefix="/source-collections",
    tags=["source-collections"],
)
api_router.include_router(
    catalogs.associates_router, prefix="/associates", tags=["associates"]
)
api_router.include_router(catalogs.vehicles_router, prefix="/vehicles", tags=["vehicles"])
api_router.include_router(
    catalogs.positions_router, prefix="/positions", tags=["positions"]
)
api_router.include_router(
    catalogs.collaborators_router, prefix="/collaborators", tags=["collaborators"]
)
api_router.include_router(loans.router, prefix="/loans", tags=["loans"])
api_router.include_router(cash_box.router, prefix="/cash-box", tags=["cash-box"])
api_router.include_router(attendance.router, prefix="/attendance", tags=["attendance"])
api_router.include_router(reports.router, prefix="/reports", tags=["reports"])
api_router.include_router(zia.router, prefix="/zia", tags=["zia"])
api_router.include_router(pqs.router, prefix="/pqs", tags=["pqs"])
