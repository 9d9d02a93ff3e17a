"""Catalog building exports."""

from .catalog_models import CatalogEntry, CatalogPayloadError, FieldGroup, RawFieldNode
from .catalog_projection import LABEL_SEPARATOR, NAME_SEPARATOR, build_catalog, sanitize_text

__all__ = [
    "CatalogEntry",
    "CatalogPayloadError",
    "FieldGroup",
    "RawFieldNode",
    "LABEL_SEPARATOR",
    "NAME_SEPARATOR",
    "build_catalog",
    "sanitize_text",
]
