"""Catalog service wiring the schema provider, builder and cache."""

from __future__ import annotations

import logging
from collections.abc import Callable

from field_catalog_picker.catalog_building import CatalogEntry
from field_catalog_picker.configuration.runtime_settings import CacheSettings
from field_catalog_picker.schema_sources import SchemaProvider, build_catalog_from_provider

from .catalog_cache import CatalogCache

_LOGGER = logging.getLogger(__name__)

SaveListener = Callable[[str], None]


class SchemaSavedSignal:
    """Notification hook fired by the host after a field schema was saved."""

    def __init__(self) -> None:
        self._listeners: list[SaveListener] = []

    def connect(self, listener: SaveListener) -> None:
        self._listeners.append(listener)

    def emit(self, source_id: str = "") -> None:
        for listener in list(self._listeners):
            listener(source_id)


class CatalogService:
    """Serves the cached catalog and drops it whenever the schema is saved."""

    def __init__(
        self,
        provider: SchemaProvider | None,
        *,
        cache: CatalogCache | None = None,
        settings: CacheSettings | None = None,
        saved_signal: SchemaSavedSignal | None = None,
    ) -> None:
        resolved_settings = settings or CacheSettings()
        self._provider = provider
        self._cache = cache or CatalogCache(
            ttl_seconds=resolved_settings.ttl_seconds,
            key=resolved_settings.key,
        )
        if saved_signal is not None:
            saved_signal.connect(self.on_schema_saved)

    @property
    def cache(self) -> CatalogCache:
        return self._cache

    def catalog(self) -> tuple[CatalogEntry, ...]:
        return self._cache.get_or_build(lambda: build_catalog_from_provider(self._provider))

    def on_schema_saved(self, source_id: str = "") -> None:
        _LOGGER.debug("Schema saved (%s); invalidating catalog cache.", source_id or "unknown")
        self._cache.invalidate()
