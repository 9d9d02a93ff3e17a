"""Configuration scaffold generation helpers."""

from __future__ import annotations

from pathlib import Path

DEFAULT_CONFIG_FILENAME = "field-catalog-picker.yaml"

_CONFIG_SCAFFOLD_TEMPLATE = """# Configuration template for field-catalog-picker.
# Every section is optional. Omitted values fall back to the built-in host contract.

cache:
  # Seconds a built catalog is served before it is rebuilt.
  ttl_seconds: 3600
  key: "field_catalog_cache"

transport:
  # Action identifier the catalog endpoint answers to.
  action: "get_catalog_fields"
  # Capability the requesting editor must hold.
  required_capability: "edit_posts"
  nonce_lifetime_seconds: 86400

observer:
  # Quiet period before a burst of page mutations triggers one scan.
  debounce_ms: 300

dom:
  # target_selectors:
  #   - 'input[name="custom_field_name"]'
  # wrapper_selector: ".dynamic-wrapper, .option-details"
  # heading_selector: ".dynamic-title :is(h2, h3, h4)"
  # input_kinds:
  #   custom_field_name: "all"
  # heading_kinds:
  #   "Custom Field": "all"
  # subfield_kinds:
  #   - "subfield"
  # layout_only_kinds:
  #   - "tab"
  #   - "message"
  #   - "accordion"
"""


def build_placeholder_configuration() -> str:
    """Build a YAML configuration template with inline guidance."""
    return _CONFIG_SCAFFOLD_TEMPLATE


def write_placeholder_configuration(output_path: Path | str) -> Path:
    """Write the configuration template to the requested output path.

    Args:
      output_path: Destination file path for the scaffold.

    Returns:
      The resolved destination path.

    Raises:
      FileExistsError: If the destination file already exists.
      OSError: If writing the scaffold fails.
    """
    destination = Path(output_path)
    if destination.exists():
        raise FileExistsError(f"Configuration file already exists: {destination.resolve()}")
    destination.write_text(build_placeholder_configuration(), encoding="utf-8")
    return destination.resolve()
