"""Configuration loader service."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any

import yaml

from .runtime_settings import (
    CacheSettings,
    DomContract,
    ObserverSettings,
    PickerConfiguration,
    TransportSettings,
)


class ConfigurationError(Exception):
    """Raised when the configuration file is invalid."""


def load_configuration(config_path: Path | str) -> PickerConfiguration:
    """Load and validate the configuration file, overlaying it on the defaults."""
    path = Path(config_path)
    if not path.exists():
        raise ConfigurationError(f"Configuration file not found: {path}")

    text = path.read_text(encoding="utf-8")
    try:
        parsed = yaml.safe_load(text)
    except yaml.YAMLError as exc:  # pragma: no cover - exercised indirectly
        raise ConfigurationError(f"Failed to parse configuration file: {exc}") from exc

    if parsed is None:
        parsed = {}

    if not isinstance(parsed, Mapping):
        raise ConfigurationError("Configuration root must be a mapping.")

    return PickerConfiguration(
        path=path,
        cache=_parse_cache_section(parsed.get("cache")),
        transport=_parse_transport_section(parsed.get("transport")),
        observer=_parse_observer_section(parsed.get("observer")),
        dom=_parse_dom_section(parsed.get("dom")),
    )


def _parse_cache_section(value: Any) -> CacheSettings:
    defaults = CacheSettings()
    section = _optional_mapping(value, "cache")
    ttl_seconds = _require_positive_int(
        section.get("ttl_seconds", defaults.ttl_seconds), "cache.ttl_seconds"
    )
    key = _require_non_empty_string(section.get("key", defaults.key), "cache.key")
    return CacheSettings(ttl_seconds=ttl_seconds, key=key)


def _parse_transport_section(value: Any) -> TransportSettings:
    defaults = TransportSettings()
    section = _optional_mapping(value, "transport")
    action = _require_non_empty_string(section.get("action", defaults.action), "transport.action")
    capability = _require_non_empty_string(
        section.get("required_capability", defaults.required_capability),
        "transport.required_capability",
    )
    lifetime = _require_positive_int(
        section.get("nonce_lifetime_seconds", defaults.nonce_lifetime_seconds),
        "transport.nonce_lifetime_seconds",
    )
    return TransportSettings(
        action=action,
        required_capability=capability,
        nonce_lifetime_seconds=lifetime,
    )


def _parse_observer_section(value: Any) -> ObserverSettings:
    defaults = ObserverSettings()
    section = _optional_mapping(value, "observer")
    debounce_ms = _require_positive_int(
        section.get("debounce_ms", defaults.debounce_ms), "observer.debounce_ms"
    )
    return ObserverSettings(debounce_ms=debounce_ms)


def _parse_dom_section(value: Any) -> DomContract:
    defaults = DomContract()
    section = _optional_mapping(value, "dom")
    target_selectors = defaults.target_selectors
    if "target_selectors" in section:
        target_selectors = _normalize_string_sequence(
            section["target_selectors"], "dom.target_selectors"
        )
        if not target_selectors:
            raise ConfigurationError("dom.target_selectors must contain at least one selector.")
    return DomContract(
        target_selectors=target_selectors,
        wrapper_selector=_require_non_empty_string(
            section.get("wrapper_selector", defaults.wrapper_selector), "dom.wrapper_selector"
        ),
        heading_selector=_require_non_empty_string(
            section.get("heading_selector", defaults.heading_selector), "dom.heading_selector"
        ),
        input_kinds=_string_mapping(section, "input_kinds", defaults.input_kinds),
        input_labels=_string_mapping(section, "input_labels", defaults.input_labels),
        heading_kinds=_string_mapping(section, "heading_kinds", defaults.heading_kinds),
        kind_labels=_string_mapping(section, "kind_labels", defaults.kind_labels),
        subfield_kinds=_string_set(section, "subfield_kinds", defaults.subfield_kinds),
        layout_only_kinds=_string_set(section, "layout_only_kinds", defaults.layout_only_kinds),
    )


def _string_mapping(
    section: Mapping[str, Any], key: str, default: Mapping[str, str]
) -> dict[str, str]:
    if key not in section:
        return dict(default)
    value = section[key]
    if not isinstance(value, Mapping):
        raise ConfigurationError(f"dom.{key} must be a mapping.")
    normalized: dict[str, str] = {}
    for raw_key, raw_value in value.items():
        if not isinstance(raw_key, str) or not isinstance(raw_value, str):
            raise ConfigurationError(f"dom.{key} keys and values must be strings.")
        normalized[raw_key.strip()] = raw_value.strip()
    return normalized


def _string_set(section: Mapping[str, Any], key: str, default: frozenset[str]) -> frozenset[str]:
    if key not in section:
        return default
    return frozenset(_normalize_string_sequence(section[key], f"dom.{key}"))


def _normalize_string_sequence(value: Any, field_name: str) -> tuple[str, ...]:
    if value is None:
        return ()
    if isinstance(value, str):
        stripped = value.strip()
        return (stripped,) if stripped else ()
    if isinstance(value, Sequence):
        normalized = []
        for item in value:
            if not isinstance(item, str):
                raise ConfigurationError(f"{field_name} entries must be strings.")
            stripped = item.strip()
            if stripped:
                normalized.append(stripped)
        return tuple(normalized)
    raise ConfigurationError(f"{field_name} must be a string or list of strings.")


def _optional_mapping(value: Any, section_name: str) -> Mapping[str, Any]:
    if value is None:
        return {}
    if not isinstance(value, Mapping):
        raise ConfigurationError(f"Configuration section '{section_name}' must be a mapping.")
    return value


def _require_non_empty_string(value: Any, field_name: str) -> str:
    if not isinstance(value, str):
        raise ConfigurationError(f"{field_name} must be a string.")
    stripped = value.strip()
    if not stripped:
        raise ConfigurationError(f"{field_name} must not be empty.")
    return stripped


def _require_positive_int(value: Any, field_name: str) -> int:
    if isinstance(value, bool):
        raise ConfigurationError(f"{field_name} must be an integer.")
    if not isinstance(value, int):
        raise ConfigurationError(f"{field_name} must be an integer.")
    if value <= 0:
        raise ConfigurationError(f"{field_name} must be greater than zero.")
    return value
