"""Configuration loader tests."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from field_catalog_picker.configuration import DomContract
from field_catalog_picker.configuration.loader import ConfigurationError, load_configuration


def _write_file(path: Path, contents: str) -> Path:
    path.write_text(contents, encoding="utf-8")
    return path


def test_empty_yaml_configuration_uses_host_defaults(tmp_path: Path) -> None:
    config_path = _write_file(tmp_path / "config.yaml", "")

    configuration = load_configuration(config_path)

    assert configuration.path == config_path
    assert configuration.cache.ttl_seconds == 3600
    assert configuration.cache.key == "field_catalog_cache"
    assert configuration.transport.action == "get_catalog_fields"
    assert configuration.transport.required_capability == "edit_posts"
    assert configuration.observer.debounce_ms == 300
    assert configuration.dom == DomContract()
    assert configuration.dom.layout_only_kinds == frozenset({"tab", "message", "accordion"})
    assert 'input[name="sub_field"]' in configuration.dom.target_selector


def test_loads_yaml_overrides(tmp_path: Path) -> None:
    config_path = _write_file(
        tmp_path / "config.yaml",
        """
cache:
  ttl_seconds: 120
transport:
  action: "fetch_fields"
observer:
  debounce_ms: 50
dom:
  target_selectors: 'input[name="acf_key"]'
  input_kinds:
    acf_key: " all "
  subfield_kinds: ["subfield", "nested"]
""",
    )

    configuration = load_configuration(config_path)

    assert configuration.cache.ttl_seconds == 120
    assert configuration.transport.action == "fetch_fields"
    assert configuration.transport.nonce_lifetime_seconds == 86400
    assert configuration.observer.debounce_ms == 50
    assert configuration.dom.target_selectors == ('input[name="acf_key"]',)
    assert configuration.dom.input_kinds == {"acf_key": "all"}
    assert configuration.dom.subfield_kinds == frozenset({"subfield", "nested"})
    assert configuration.dom.heading_kinds == DomContract().heading_kinds


def test_loads_json_configuration(tmp_path: Path) -> None:
    config_path = _write_file(
        tmp_path / "config.json", json.dumps({"cache": {"key": "alt_cache"}})
    )

    assert load_configuration(config_path).cache.key == "alt_cache"


def test_missing_file_raises(tmp_path: Path) -> None:
    with pytest.raises(ConfigurationError, match="not found"):
        load_configuration(tmp_path / "missing.yaml")


@pytest.mark.parametrize(
    ("contents", "message"),
    [
        ("- not\n- a mapping\n", "root must be a mapping"),
        ("cache: 5\n", "'cache' must be a mapping"),
        ("cache:\n  ttl_seconds: 0\n", "greater than zero"),
        ("cache:\n  ttl_seconds: true\n", "must be an integer"),
        ("transport:\n  action: '  '\n", "must not be empty"),
        ("dom:\n  target_selectors: []\n", "at least one selector"),
        ("dom:\n  input_kinds: [a]\n", "must be a mapping"),
        ("dom:\n  heading_kinds:\n    Title: 3\n", "must be strings"),
        ("dom:\n  subfield_kinds: [1]\n", "entries must be strings"),
    ],
)
def test_invalid_configuration_is_rejected(tmp_path: Path, contents: str, message: str) -> None:
    config_path = _write_file(tmp_path / "config.yaml", contents)

    with pytest.raises(ConfigurationError, match=message):
        load_configuration(config_path)
