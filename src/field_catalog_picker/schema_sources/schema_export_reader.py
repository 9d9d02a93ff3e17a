"""Field schema export loading service."""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any, Protocol

import yaml

from field_catalog_picker.catalog_building import (
    CatalogEntry,
    FieldGroup,
    RawFieldNode,
    build_catalog,
)

_LOGGER = logging.getLogger(__name__)


class SchemaError(Exception):
    """Raised for schema export parsing failures."""


class SchemaProvider(Protocol):  # pylint: disable=too-few-public-methods
    """Supplies the raw hierarchical field definitions grouped by field group."""

    def field_groups(self) -> Sequence[FieldGroup]: ...


class StaticSchemaProvider:  # pylint: disable=too-few-public-methods
    """Provider serving an already parsed set of field groups."""

    def __init__(self, groups: Sequence[FieldGroup]) -> None:
        self._groups = tuple(groups)

    def field_groups(self) -> Sequence[FieldGroup]:
        return self._groups


class FileSchemaProvider:  # pylint: disable=too-few-public-methods
    """Provider re-reading a JSON/YAML field group export on every call."""

    def __init__(self, export_path: Path | str) -> None:
        self._export_path = Path(export_path)

    def field_groups(self) -> Sequence[FieldGroup]:
        if not self._export_path.exists():
            raise SchemaError(f"Schema export not found: {self._export_path}")
        return parse_field_groups(self._export_path.read_text(encoding="utf-8"))


def parse_field_groups(text: str) -> tuple[FieldGroup, ...]:
    """Parse field group export text (JSON or YAML) into field groups."""
    try:
        root = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise SchemaError(f"Invalid schema export: {exc}") from exc

    if root is None:
        return ()
    if isinstance(root, Mapping):
        root = root.get("field_groups", [root])
    if not isinstance(root, Sequence) or isinstance(root, str):
        raise SchemaError("Schema export must be a list of field groups.")
    return tuple(_parse_group(group) for group in root)


def build_catalog_from_provider(provider: SchemaProvider | None) -> tuple[CatalogEntry, ...]:
    """Build the catalog, treating a missing provider as an empty schema."""
    if provider is None:
        _LOGGER.info("No schema provider available; building an empty catalog.")
        return ()
    return build_catalog(provider.field_groups())


def _parse_group(value: Any) -> FieldGroup:
    if not isinstance(value, Mapping):
        raise SchemaError("Field group definitions must be objects.")
    title = value.get("title")
    if not isinstance(title, str):
        raise SchemaError("Field group definitions must include a title.")
    fields = value.get("fields") or []
    if not isinstance(fields, Sequence) or isinstance(fields, str):
        raise SchemaError(f"Field group '{title}' fields must be a list.")
    key = value.get("key") or ""
    return FieldGroup(
        title=title,
        fields=tuple(_parse_node(node) for node in fields),
        key=str(key),
    )


def _parse_node(value: Any) -> RawFieldNode:
    if not isinstance(value, Mapping) or "name" not in value:
        raise SchemaError("Field definitions must include a name.")
    kind = value.get("type", value.get("kind"))
    if not isinstance(kind, str):
        raise SchemaError(f"Field '{value['name']}' must declare a type.")
    label = value.get("label")
    sub_fields = value.get("sub_fields")
    children: tuple[RawFieldNode, ...] | None = None
    if isinstance(sub_fields, Sequence) and not isinstance(sub_fields, str):
        children = tuple(_parse_node(child) for child in sub_fields)
    return RawFieldNode(
        name=str(value["name"]),
        label=label if isinstance(label, str) else "",
        kind=kind,
        sub_fields=children,
    )
