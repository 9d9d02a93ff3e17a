"""Schema source exports."""

from .schema_export_reader import (
    FileSchemaProvider,
    SchemaError,
    SchemaProvider,
    StaticSchemaProvider,
    build_catalog_from_provider,
    parse_field_groups,
)

__all__ = [
    "FileSchemaProvider",
    "SchemaError",
    "SchemaProvider",
    "StaticSchemaProvider",
    "build_catalog_from_provider",
    "parse_field_groups",
]
