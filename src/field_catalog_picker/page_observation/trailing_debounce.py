"""Trailing-edge debounce for bursts of page mutations."""

from __future__ import annotations

import asyncio
from collections.abc import Callable

from field_catalog_picker.configuration.defaults import DEFAULT_DEBOUNCE_MS

AfterFn = Callable[[int, Callable[[], None]], object]
AfterCancelFn = Callable[[object], None]


def _loop_after(delay_ms: int, callback: Callable[[], None]) -> object:
    return asyncio.get_running_loop().call_later(delay_ms / 1000.0, callback)


def _loop_after_cancel(handle: object) -> None:
    if isinstance(handle, asyncio.Handle):
        handle.cancel()


class TrailingDebouncer:
    """Runs the callback once, after the triggers have been quiet for the delay."""

    def __init__(
        self,
        callback: Callable[[], None],
        *,
        delay_ms: int = DEFAULT_DEBOUNCE_MS,
        after: AfterFn | None = None,
        after_cancel: AfterCancelFn | None = None,
    ) -> None:
        self._callback = callback
        self._delay_ms = delay_ms
        self._after = after or _loop_after
        self._after_cancel = after_cancel or _loop_after_cancel
        self._handle: object | None = None

    @property
    def pending(self) -> bool:
        return self._handle is not None

    def trigger(self) -> None:
        self.cancel()
        self._handle = self._after(self._delay_ms, self._fire)

    def cancel(self) -> None:
        handle = self._handle
        self._handle = None
        if handle is not None:
            self._after_cancel(handle)

    def _fire(self) -> None:
        self._handle = None
        self._callback()
