"""Page observation exports."""

from .context_resolution import ClientContext, resolve_context
from .document_model import ChangeFeed, PageDocument, PageElement, Subscription, TargetInput
from .page_observer import PageObserver
from .trailing_debounce import TrailingDebouncer

__all__ = [
    "ChangeFeed",
    "ClientContext",
    "PageDocument",
    "PageElement",
    "PageObserver",
    "Subscription",
    "TargetInput",
    "TrailingDebouncer",
    "resolve_context",
]
