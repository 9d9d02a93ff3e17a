"""Discovers target inputs as they appear and attaches one widget per input."""

from __future__ import annotations

import logging
import weakref
from collections.abc import Callable
from typing import Generic, TypeVar

from field_catalog_picker.configuration.runtime_settings import DomContract, ObserverSettings

from .context_resolution import ClientContext, resolve_context
from .document_model import ChangeFeed, PageDocument, Subscription, TargetInput
from .trailing_debounce import AfterCancelFn, AfterFn, TrailingDebouncer

_LOGGER = logging.getLogger(__name__)

WidgetT = TypeVar("WidgetT")


class PageObserver(Generic[WidgetT]):
    """Scans the document after quiet periods and tracks attached inputs by identity."""

    def __init__(
        self,
        document: PageDocument,
        change_feed: ChangeFeed,
        attach: Callable[[TargetInput, ClientContext], WidgetT],
        *,
        contract: DomContract | None = None,
        settings: ObserverSettings | None = None,
        after: AfterFn | None = None,
        after_cancel: AfterCancelFn | None = None,
    ) -> None:
        self._document = document
        self._change_feed = change_feed
        self._attach = attach
        self._contract = contract or DomContract()
        resolved_settings = settings or ObserverSettings()
        self._debouncer = TrailingDebouncer(
            self.scan,
            delay_ms=resolved_settings.debounce_ms,
            after=after,
            after_cancel=after_cancel,
        )
        # Keyed by id(); the weak reference confirms the slot still belongs to the same object.
        self._attached: dict[int, tuple[weakref.ref[TargetInput], WidgetT]] = {}
        self._subscription: Subscription | None = None

    @property
    def running(self) -> bool:
        return self._subscription is not None

    def start(self) -> int:
        """Subscribe to document changes and attach to inputs already present."""
        if self._subscription is None:
            self._subscription = self._change_feed.subscribe(self._debouncer.trigger)
        return self.scan()

    def stop(self) -> None:
        self._debouncer.cancel()
        if self._subscription is not None:
            self._subscription.unsubscribe()
            self._subscription = None

    def widget_for(self, element: TargetInput) -> WidgetT | None:
        slot = self._attached.get(id(element))
        if slot is None or slot[0]() is not element:
            return None
        return slot[1]

    def scan(self) -> int:
        attached = 0
        for element in self._document.query_selector_all(self._contract.target_selector):
            if self.widget_for(element) is not None:
                continue
            context = resolve_context(element, self._contract)
            if context is None:
                continue
            self._remember(element, self._attach(element, context))
            attached += 1
        if attached:
            _LOGGER.debug("Attached %d field selector(s).", attached)
        return attached

    def forget_all(self) -> None:
        self._attached = {}

    def _remember(self, element: TargetInput, widget: WidgetT) -> None:
        key = id(element)
        attached = self._attached

        def _discard(ref: weakref.ref[TargetInput]) -> None:
            slot = attached.get(key)
            if slot is not None and slot[0] is ref:
                del attached[key]

        attached[key] = (weakref.ref(element, _discard), widget)
