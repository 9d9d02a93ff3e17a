"""Per-input selector widget state and write-back."""

from __future__ import annotations

from collections.abc import Sequence

from field_catalog_picker.catalog_building import CatalogEntry
from field_catalog_picker.configuration.defaults import LAYOUT_ONLY_KINDS
from field_catalog_picker.page_observation import ClientContext, TargetInput

from .catalog_filtering import (
    EntryBucket,
    display_name,
    filter_catalog,
    group_entries,
    search_buckets,
)
from .panel_coordinator import PanelCoordinator

WRITE_BACK_EVENTS = ("change", "input")


class SelectorWidget:
    """Trigger plus collapsible search panel bound to one target input."""

    def __init__(
        self,
        element: TargetInput,
        context: ClientContext,
        entries: Sequence[CatalogEntry],
        coordinator: PanelCoordinator,
        *,
        layout_only_kinds: frozenset[str] = LAYOUT_ONLY_KINDS,
    ) -> None:
        self._element = element
        self._context = context
        self._coordinator = coordinator
        self._buckets = group_entries(
            filter_catalog(entries, context.kind, layout_only_kinds=layout_only_kinds)
        )
        self._query = ""
        self._open = False
        coordinator.register(self)

    @property
    def context(self) -> ClientContext:
        return self._context

    @property
    def trigger_label(self) -> str:
        return self._context.trigger_label

    @property
    def is_open(self) -> bool:
        return self._open

    @property
    def query(self) -> str:
        return self._query

    @property
    def buckets(self) -> tuple[EntryBucket, ...]:
        """All filtered buckets, regardless of the search text."""
        return self._buckets

    def visible_buckets(self) -> tuple[EntryBucket, ...]:
        return search_buckets(self._buckets, self._query, is_subfield=self._context.is_subfield)

    def display_name(self, entry: CatalogEntry) -> str:
        return display_name(entry, is_subfield=self._context.is_subfield)

    def toggle(self) -> None:
        was_open = self._open
        self._coordinator.close_all()
        if not was_open:
            self._open = True

    def close(self) -> None:
        self._open = False

    def search(self, text: str) -> tuple[EntryBucket, ...]:
        self._query = text
        return self.visible_buckets()

    def select(self, entry: CatalogEntry) -> str:
        """Write the entry into the bound input and notify the host form framework."""
        value = self.display_name(entry)
        self._element.value = value
        for event_type in WRITE_BACK_EVENTS:
            self._element.dispatch_event(event_type)
        self.close()
        return value
