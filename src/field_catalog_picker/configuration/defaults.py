"""Default host contract values for the page-building surface."""

from __future__ import annotations

DEFAULT_CACHE_KEY = "field_catalog_cache"
DEFAULT_CACHE_TTL_SECONDS = 3600

DEFAULT_ACTION = "get_catalog_fields"
DEFAULT_REQUIRED_CAPABILITY = "edit_posts"
DEFAULT_NONCE_LIFETIME_SECONDS = 86400

DEFAULT_DEBOUNCE_MS = 300

LAYOUT_ONLY_KINDS = frozenset({"tab", "message", "accordion"})
TRANSPARENT_CONTAINER_KIND = "group"
REPEATER_KIND = "repeater"

DEFAULT_TARGET_SELECTORS = (
    'input[name="key"]',
    'input[name="field"]',
    'input[name="sub_field"]',
    'input[name="custom_field_name"]',
    'input[name="acf_repeater_field"]',
    'input[name="acf_relationship_field"]',
)
DEFAULT_WRAPPER_SELECTOR = ".dynamic-wrapper, .option-details"
DEFAULT_HEADING_SELECTOR = (
    ".dynamic-title :is(h2, h3, h4), .option-details :is(h2, h3, h4)"
)

DEFAULT_INPUT_KINDS = {
    "custom_field_name": "all",
    "acf_repeater_field": "repeater",
    "acf_relationship_field": "relationship",
    "sub_field": "subfield",
    "acf_repeater_sub_field": "subfield",
}

DEFAULT_INPUT_LABELS = {
    "custom_field_name": "Find Custom",
    "acf_repeater_field": "Find Repeater",
    "acf_relationship_field": "Find Relationship",
    "sub_field": "Find Sub Field",
}

DEFAULT_HEADING_KINDS = {
    "Custom Field": "all",
    "ACF Image": "acf_image",
    "ACF Text": "acf_text",
    "ACF Number": "acf_number",
    "ACF Repeater Sub Field": "subfield",
    "Repeater Field": "repeater",
    "Relationship Field": "relationship",
}

DEFAULT_KIND_LABELS = {
    "all": "Find Field",
    "repeater": "Find Repeater",
    "relationship": "Find Relationship",
    "subfield": "Find Sub Field",
}

DEFAULT_SUBFIELD_KINDS = frozenset({"subfield"})

FALLBACK_INPUT_LABEL = "Find ACF"
FALLBACK_KIND_LABEL = "Find Field"
FALLBACK_GROUP_NAME = "Other"
