"""Context-driven filtering, grouping and search over a catalog snapshot."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping, Sequence
from dataclasses import dataclass

from field_catalog_picker.catalog_building import CatalogEntry
from field_catalog_picker.configuration.defaults import (
    FALLBACK_GROUP_NAME,
    LAYOUT_ONLY_KINDS,
    REPEATER_KIND,
)

EntryPredicate = Callable[[CatalogEntry], bool]


def _kind_is(kind: str) -> EntryPredicate:
    return lambda entry: entry.kind == kind


def _kind_in(*kinds: str) -> EntryPredicate:
    allowed = frozenset(kinds)
    return lambda entry: entry.kind in allowed


def _not_repeater(entry: CatalogEntry) -> bool:
    return entry.kind != REPEATER_KIND


def _under_repeater(entry: CatalogEntry) -> bool:
    return entry.is_subfield_of_repeater


FILTER_PREDICATES: Mapping[str, EntryPredicate] = {
    "all": _not_repeater,
    "acf_image": _kind_is("image"),
    "acf_text": _kind_in("text", "textarea", "wysiwyg"),
    "acf_number": _kind_is("number"),
    "acf_repeater_sub_field": _under_repeater,
    "subfield": _under_repeater,
    "repeater": _kind_is(REPEATER_KIND),
    "relationship": _kind_is("relationship"),
}


@dataclass(frozen=True)
class EntryBucket:
    """Entries sharing one field group, in catalog order."""

    title: str
    entries: tuple[CatalogEntry, ...]


def predicate_for(kind: str) -> EntryPredicate:
    return FILTER_PREDICATES.get(kind, _not_repeater)


def is_selectable(
    entry: CatalogEntry, layout_only_kinds: frozenset[str] = LAYOUT_ONLY_KINDS
) -> bool:
    return bool(entry.name) and entry.kind not in layout_only_kinds


def filter_catalog(
    entries: Iterable[CatalogEntry],
    kind: str,
    *,
    layout_only_kinds: frozenset[str] = LAYOUT_ONLY_KINDS,
) -> tuple[CatalogEntry, ...]:
    predicate = predicate_for(kind)
    return tuple(
        entry for entry in entries if is_selectable(entry, layout_only_kinds) and predicate(entry)
    )


def group_entries(entries: Iterable[CatalogEntry]) -> tuple[EntryBucket, ...]:
    """Bucket entries by group title, keeping first-seen bucket order."""
    buckets: dict[str, list[CatalogEntry]] = {}
    for entry in entries:
        buckets.setdefault(entry.group or FALLBACK_GROUP_NAME, []).append(entry)
    return tuple(EntryBucket(title=title, entries=tuple(items)) for title, items in buckets.items())


def display_name(entry: CatalogEntry, *, is_subfield: bool) -> str:
    if is_subfield:
        return entry.base_name or entry.name
    return entry.name


def matches_search(entry: CatalogEntry, query: str, *, is_subfield: bool) -> bool:
    term = query.lower()
    if not term:
        return True
    shown = display_name(entry, is_subfield=is_subfield)
    return term in shown.lower() or term in entry.label.lower()


def search_buckets(
    buckets: Sequence[EntryBucket], query: str, *, is_subfield: bool
) -> tuple[EntryBucket, ...]:
    """Narrow each bucket to matching entries and hide buckets left empty."""
    visible: list[EntryBucket] = []
    for bucket in buckets:
        matching = tuple(
            entry for entry in bucket.entries if matches_search(entry, query, is_subfield=is_subfield)
        )
        if matching:
            visible.append(EntryBucket(title=bucket.title, entries=matching))
    return tuple(visible)


def visible_entries(
    entries: Iterable[CatalogEntry],
    kind: str,
    query: str = "",
    *,
    is_subfield: bool = False,
    layout_only_kinds: frozenset[str] = LAYOUT_ONLY_KINDS,
) -> tuple[EntryBucket, ...]:
    buckets = group_entries(filter_catalog(entries, kind, layout_only_kinds=layout_only_kinds))
    return search_buckets(buckets, query, is_subfield=is_subfield)
