"""Catalog building entities."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import asdict, dataclass
from typing import Any


class CatalogPayloadError(Exception):
    """Raised when a transported catalog entry cannot be decoded."""


@dataclass(frozen=True)
class RawFieldNode:
    """One node of the hierarchical field schema as supplied by the host."""

    name: str
    label: str
    kind: str
    sub_fields: tuple[RawFieldNode, ...] | None = None

    @property
    def has_children(self) -> bool:
        return self.sub_fields is not None


@dataclass(frozen=True)
class FieldGroup:
    """Named collection of top-level field definitions."""

    title: str
    fields: tuple[RawFieldNode, ...]
    key: str = ""


@dataclass(frozen=True)
class CatalogEntry:  # pylint: disable=too-many-instance-attributes
    """Flat, addressable catalog entry."""

    name: str
    label: str
    kind: str
    group: str
    parent: str
    base_name: str
    is_subfield_of_repeater: bool

    def to_payload(self) -> dict[str, Any]:
        return asdict(self)

    @staticmethod
    def from_payload(payload: Any) -> CatalogEntry:
        """Decode one wire entry, rejecting anything that is not a complete entry mapping."""
        if not isinstance(payload, Mapping):
            raise CatalogPayloadError("Catalog entry must be an object.")
        values: dict[str, str] = {}
        for key in ("name", "label", "kind", "group", "parent", "base_name"):
            value = payload.get(key, "")
            if value is None:
                value = ""
            if not isinstance(value, str):
                raise CatalogPayloadError(f"Catalog entry field '{key}' must be a string.")
            values[key] = value
        flag = payload.get("is_subfield_of_repeater", False)
        if not isinstance(flag, bool):
            raise CatalogPayloadError("Catalog entry field 'is_subfield_of_repeater' must be a bool.")
        return CatalogEntry(is_subfield_of_repeater=flag, **values)
