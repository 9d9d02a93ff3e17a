"""Hierarchical field schema to flat catalog projection."""

from __future__ import annotations

import re
from collections.abc import Iterable, Iterator, Sequence

from field_catalog_picker.configuration.defaults import (
    LAYOUT_ONLY_KINDS,
    TRANSPARENT_CONTAINER_KIND,
)

from .catalog_models import CatalogEntry, FieldGroup, RawFieldNode

NAME_SEPARATOR = "_"
LABEL_SEPARATOR = " → "

_TAG_PATTERN = re.compile(r"<[^>]*>")
_WHITESPACE_PATTERN = re.compile(r"\s+")


def build_catalog(
    groups: Iterable[FieldGroup],
    *,
    layout_only_kinds: frozenset[str] = LAYOUT_ONLY_KINDS,
) -> tuple[CatalogEntry, ...]:
    """Return catalog entries for every addressable field, in depth-first document order."""
    entries: list[CatalogEntry] = []
    for group in groups:
        for node in group.fields:
            entries.extend(
                _project_node(
                    node,
                    group_title=group.title,
                    name_chain=(),
                    label_chain=(),
                    under_repeater=False,
                    layout_only_kinds=layout_only_kinds,
                )
            )
    return tuple(entries)


def sanitize_text(value: str | None) -> str:
    """Strip markup and collapse whitespace the way the host sanitizes text fields."""
    if not value:
        return ""
    without_tags = _TAG_PATTERN.sub("", value)
    return _WHITESPACE_PATTERN.sub(" ", without_tags).strip()


def _project_node(
    node: RawFieldNode,
    *,
    group_title: str,
    name_chain: tuple[str, ...],
    label_chain: tuple[str, ...],
    under_repeater: bool,
    layout_only_kinds: frozenset[str],
) -> Iterator[CatalogEntry]:
    if node.kind in layout_only_kinds:
        return

    if node.kind == TRANSPARENT_CONTAINER_KIND:
        yield from _project_children(
            node.sub_fields or (),
            group_title=group_title,
            name_chain=(*name_chain, node.name),
            label_chain=(*label_chain, node.label),
            under_repeater=under_repeater,
            layout_only_kinds=layout_only_kinds,
        )
        return

    yield _build_entry(node, group_title, name_chain, label_chain, under_repeater)

    if node.has_children:
        # Children of a repeater-like container are addressed by their own names.
        yield from _project_children(
            node.sub_fields or (),
            group_title=group_title,
            name_chain=(),
            label_chain=(*label_chain, node.label),
            under_repeater=True,
            layout_only_kinds=layout_only_kinds,
        )


def _project_children(
    children: Sequence[RawFieldNode],
    *,
    group_title: str,
    name_chain: tuple[str, ...],
    label_chain: tuple[str, ...],
    under_repeater: bool,
    layout_only_kinds: frozenset[str],
) -> Iterator[CatalogEntry]:
    for child in children:
        yield from _project_node(
            child,
            group_title=group_title,
            name_chain=name_chain,
            label_chain=label_chain,
            under_repeater=under_repeater,
            layout_only_kinds=layout_only_kinds,
        )


def _build_entry(
    node: RawFieldNode,
    group_title: str,
    name_chain: tuple[str, ...],
    label_chain: tuple[str, ...],
    under_repeater: bool,
) -> CatalogEntry:
    return CatalogEntry(
        name=sanitize_text(NAME_SEPARATOR.join((*name_chain, node.name))),
        label=sanitize_text(LABEL_SEPARATOR.join((*label_chain, node.label))),
        kind=sanitize_text(node.kind),
        group=sanitize_text(group_title),
        parent=sanitize_text(name_chain[-1]) if name_chain else "",
        base_name=sanitize_text(node.name),
        is_subfield_of_repeater=under_repeater,
    )
