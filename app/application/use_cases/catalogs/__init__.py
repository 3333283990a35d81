"""Catalog use cases: materials and the simple per-tenant catalogs."""

from app.application.use_cases.catalogs.catalog_operations import CatalogService
from app.application.use_cases.catalogs.material_operations import MaterialService

__all__ = ["CatalogService", "MaterialService"]
