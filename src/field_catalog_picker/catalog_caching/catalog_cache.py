"""Single-key TTL cache wrapping the catalog builder."""

from __future__ import annotations

import logging
import time
from collections.abc import Callable, Sequence
from dataclasses import dataclass

from field_catalog_picker.catalog_building import CatalogEntry
from field_catalog_picker.configuration.defaults import (
    DEFAULT_CACHE_KEY,
    DEFAULT_CACHE_TTL_SECONDS,
)

_LOGGER = logging.getLogger(__name__)

CatalogBuilder = Callable[[], Sequence[CatalogEntry]]


@dataclass(frozen=True)
class CatalogCacheRecord:
    """Stored catalog payload with its lifetime."""

    key: str
    payload: tuple[CatalogEntry, ...]
    created_at: float
    ttl_seconds: float

    def is_expired(self, now: float) -> bool:
        return now - self.created_at >= self.ttl_seconds


class CatalogCache:
    """Process-wide catalog cache with lazy expiry and explicit invalidation.

    An empty build result is stored for the full TTL like any other result, so a
    host that has no schema provider keeps answering with an empty catalog until
    the record expires or is invalidated.
    """

    def __init__(
        self,
        *,
        ttl_seconds: float = DEFAULT_CACHE_TTL_SECONDS,
        key: str = DEFAULT_CACHE_KEY,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self._ttl_seconds = ttl_seconds
        self._key = key
        self._clock = clock
        self._record: CatalogCacheRecord | None = None

    @property
    def key(self) -> str:
        return self._key

    def peek(self) -> CatalogCacheRecord | None:
        """Return the live record, dropping it first when it has expired."""
        record = self._record
        if record is not None and record.is_expired(self._clock()):
            _LOGGER.debug("Catalog cache record '%s' expired.", self._key)
            self._record = None
            return None
        return record

    def get_or_build(self, build_fn: CatalogBuilder) -> tuple[CatalogEntry, ...]:
        record = self.peek()
        if record is not None:
            _LOGGER.debug("Catalog cache hit for '%s'.", self._key)
            return record.payload

        _LOGGER.debug("Catalog cache miss for '%s'; rebuilding.", self._key)
        payload = tuple(build_fn())
        self._record = CatalogCacheRecord(
            key=self._key,
            payload=payload,
            created_at=self._clock(),
            ttl_seconds=self._ttl_seconds,
        )
        return payload

    def invalidate(self) -> None:
        if self._record is not None:
            _LOGGER.debug("Catalog cache record '%s' invalidated.", self._key)
        self._record = None
