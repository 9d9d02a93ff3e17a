"""Per-input semantic context resolution."""

from __future__ import annotations

from dataclasses import dataclass

from field_catalog_picker.configuration.defaults import FALLBACK_INPUT_LABEL, FALLBACK_KIND_LABEL
from field_catalog_picker.configuration.runtime_settings import DomContract

from .document_model import TargetInput


@dataclass(frozen=True)
class ClientContext:
    """Semantic category of one target input."""

    kind: str
    trigger_label: str
    is_subfield: bool


def resolve_context(element: TargetInput, contract: DomContract) -> ClientContext | None:
    """Resolve by input name first, then by the heading of the enclosing wrapper."""
    kind = contract.input_kinds.get(element.name)
    if kind is not None:
        label = contract.input_labels.get(element.name, FALLBACK_INPUT_LABEL)
        return ClientContext(
            kind=kind, trigger_label=label, is_subfield=kind in contract.subfield_kinds
        )
    return _resolve_from_wrapper(element, contract)


def _resolve_from_wrapper(element: TargetInput, contract: DomContract) -> ClientContext | None:
    wrapper = element.closest(contract.wrapper_selector)
    if wrapper is None:
        return None
    heading = wrapper.query_selector(contract.heading_selector)
    if heading is None:
        return None
    kind = contract.heading_kinds.get((heading.text_content or "").strip())
    if kind is None:
        return None
    return ClientContext(
        kind=kind,
        trigger_label=contract.kind_labels.get(kind, FALLBACK_KIND_LABEL),
        is_subfield=kind in contract.subfield_kinds,
    )
