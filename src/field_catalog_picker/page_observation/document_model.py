"""Protocols a host page implements for the observer and widgets."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import Protocol


class PageElement(Protocol):
    """Minimal element surface used for context resolution."""

    @property
    def text_content(self) -> str: ...

    def closest(self, selector: str) -> PageElement | None: ...

    def query_selector(self, selector: str) -> PageElement | None: ...


class TargetInput(PageElement, Protocol):
    """Text input that can receive a catalog value."""

    name: str
    value: str

    def dispatch_event(self, event_type: str) -> None: ...


class PageDocument(Protocol):  # pylint: disable=too-few-public-methods
    """Document queried on every scan."""

    def query_selector_all(self, selector: str) -> Sequence[TargetInput]: ...


class Subscription(Protocol):  # pylint: disable=too-few-public-methods
    def unsubscribe(self) -> None: ...


class ChangeFeed(Protocol):  # pylint: disable=too-few-public-methods
    """Notifies subscribers whenever nodes are inserted anywhere in the document."""

    def subscribe(self, callback: Callable[[], None]) -> Subscription: ...
