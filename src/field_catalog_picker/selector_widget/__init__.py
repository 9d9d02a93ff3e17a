"""Selector widget exports."""

from .catalog_filtering import (
    FILTER_PREDICATES,
    EntryBucket,
    display_name,
    filter_catalog,
    group_entries,
    matches_search,
    predicate_for,
    search_buckets,
    visible_entries,
)
from .panel_coordinator import PanelCoordinator
from .picker_session import FieldPickerSession
from .selector_widget import WRITE_BACK_EVENTS, SelectorWidget

__all__ = [
    "FILTER_PREDICATES",
    "WRITE_BACK_EVENTS",
    "EntryBucket",
    "FieldPickerSession",
    "PanelCoordinator",
    "SelectorWidget",
    "display_name",
    "filter_catalog",
    "group_entries",
    "matches_search",
    "predicate_for",
    "search_buckets",
    "visible_entries",
]
