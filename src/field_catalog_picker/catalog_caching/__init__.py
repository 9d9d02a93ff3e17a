"""Catalog caching exports."""

from .catalog_cache import CatalogBuilder, CatalogCache, CatalogCacheRecord
from .catalog_service import CatalogService, SchemaSavedSignal

__all__ = [
    "CatalogBuilder",
    "CatalogCache",
    "CatalogCacheRecord",
    "CatalogService",
    "SchemaSavedSignal",
]
