"""Page-wide panel exclusivity."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .selector_widget import SelectorWidget


class PanelCoordinator:
    """Keeps at most one selector panel open across the page."""

    def __init__(self) -> None:
        self._widgets: list[SelectorWidget] = []

    @property
    def widgets(self) -> tuple[SelectorWidget, ...]:
        return tuple(self._widgets)

    @property
    def open_widget(self) -> SelectorWidget | None:
        for widget in self._widgets:
            if widget.is_open:
                return widget
        return None

    def register(self, widget: SelectorWidget) -> None:
        self._widgets.append(widget)

    def close_all(self) -> None:
        for widget in self._widgets:
            widget.close()

    def handle_document_click(self, clicked_widget: SelectorWidget | None) -> None:
        """Close every panel when a click lands outside all selector widgets."""
        if clicked_widget is None:
            self.close_all()

    def clear(self) -> None:
        self.close_all()
        self._widgets.clear()
