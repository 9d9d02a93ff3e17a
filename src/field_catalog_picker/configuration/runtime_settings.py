"""Configuration domain entities."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path

from .defaults import (
    DEFAULT_ACTION,
    DEFAULT_CACHE_KEY,
    DEFAULT_CACHE_TTL_SECONDS,
    DEFAULT_DEBOUNCE_MS,
    DEFAULT_HEADING_KINDS,
    DEFAULT_HEADING_SELECTOR,
    DEFAULT_INPUT_KINDS,
    DEFAULT_INPUT_LABELS,
    DEFAULT_KIND_LABELS,
    DEFAULT_NONCE_LIFETIME_SECONDS,
    DEFAULT_REQUIRED_CAPABILITY,
    DEFAULT_SUBFIELD_KINDS,
    DEFAULT_TARGET_SELECTORS,
    DEFAULT_WRAPPER_SELECTOR,
    LAYOUT_ONLY_KINDS,
)


@dataclass(frozen=True)
class CacheSettings:
    """Server-side catalog cache settings."""

    ttl_seconds: int = DEFAULT_CACHE_TTL_SECONDS
    key: str = DEFAULT_CACHE_KEY


@dataclass(frozen=True)
class TransportSettings:
    """Catalog endpoint request contract."""

    action: str = DEFAULT_ACTION
    required_capability: str = DEFAULT_REQUIRED_CAPABILITY
    nonce_lifetime_seconds: int = DEFAULT_NONCE_LIFETIME_SECONDS


@dataclass(frozen=True)
class ObserverSettings:
    """Page observer timing."""

    debounce_ms: int = DEFAULT_DEBOUNCE_MS


@dataclass(frozen=True)
class DomContract:  # pylint: disable=too-many-instance-attributes
    """Static selectors and lookup tables shared with the page-building surface."""

    target_selectors: tuple[str, ...] = DEFAULT_TARGET_SELECTORS
    wrapper_selector: str = DEFAULT_WRAPPER_SELECTOR
    heading_selector: str = DEFAULT_HEADING_SELECTOR
    input_kinds: Mapping[str, str] = field(default_factory=lambda: dict(DEFAULT_INPUT_KINDS))
    input_labels: Mapping[str, str] = field(default_factory=lambda: dict(DEFAULT_INPUT_LABELS))
    heading_kinds: Mapping[str, str] = field(default_factory=lambda: dict(DEFAULT_HEADING_KINDS))
    kind_labels: Mapping[str, str] = field(default_factory=lambda: dict(DEFAULT_KIND_LABELS))
    subfield_kinds: frozenset[str] = DEFAULT_SUBFIELD_KINDS
    layout_only_kinds: frozenset[str] = LAYOUT_ONLY_KINDS

    @property
    def target_selector(self) -> str:
        """Selector list joined the way a document query expects it."""
        return ", ".join(self.target_selectors)


@dataclass(frozen=True)
class PickerConfiguration:
    """Top-level configuration aggregate."""

    path: Path | None = None
    cache: CacheSettings = field(default_factory=CacheSettings)
    transport: TransportSettings = field(default_factory=TransportSettings)
    observer: ObserverSettings = field(default_factory=ObserverSettings)
    dom: DomContract = field(default_factory=DomContract)
