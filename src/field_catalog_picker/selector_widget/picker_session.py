"""Client-side picker session: load the catalog, observe the page, attach widgets."""

from __future__ import annotations

import logging

from field_catalog_picker.catalog_building import CatalogEntry
from field_catalog_picker.client_session import (
    CatalogFetchError,
    CatalogTransport,
    ClientCatalogCache,
)
from field_catalog_picker.configuration.runtime_settings import PickerConfiguration
from field_catalog_picker.page_observation import (
    ChangeFeed,
    ClientContext,
    PageDocument,
    PageObserver,
    TargetInput,
)
from field_catalog_picker.page_observation.trailing_debounce import AfterCancelFn, AfterFn

from .panel_coordinator import PanelCoordinator
from .selector_widget import SelectorWidget

_LOGGER = logging.getLogger(__name__)


class FieldPickerSession:
    """Wires the client catalog cache, page observer and selector widgets together."""

    def __init__(
        self,
        catalog_cache: ClientCatalogCache,
        document: PageDocument,
        change_feed: ChangeFeed,
        *,
        configuration: PickerConfiguration | None = None,
        coordinator: PanelCoordinator | None = None,
        after: AfterFn | None = None,
        after_cancel: AfterCancelFn | None = None,
    ) -> None:
        self._catalog_cache = catalog_cache
        self._configuration = configuration or PickerConfiguration()
        if catalog_cache.action != self._configuration.transport.action:
            _LOGGER.warning(
                "Catalog cache action '%s' differs from configured action '%s'.",
                catalog_cache.action,
                self._configuration.transport.action,
            )
        self._coordinator = coordinator or PanelCoordinator()
        self._entries: tuple[CatalogEntry, ...] = ()
        self._observer: PageObserver[SelectorWidget] = PageObserver(
            document,
            change_feed,
            self._attach,
            contract=self._configuration.dom,
            settings=self._configuration.observer,
            after=after,
            after_cancel=after_cancel,
        )

    @classmethod
    def create(
        cls,
        transport: CatalogTransport,
        nonce: str | None,
        document: PageDocument,
        change_feed: ChangeFeed,
        *,
        configuration: PickerConfiguration | None = None,
        coordinator: PanelCoordinator | None = None,
        after: AfterFn | None = None,
        after_cancel: AfterCancelFn | None = None,
    ) -> FieldPickerSession:
        """Build a session whose catalog requests use the configured action."""
        resolved = configuration or PickerConfiguration()
        return cls(
            ClientCatalogCache.from_settings(transport, nonce, resolved.transport),
            document,
            change_feed,
            configuration=resolved,
            coordinator=coordinator,
            after=after,
            after_cancel=after_cancel,
        )

    @property
    def coordinator(self) -> PanelCoordinator:
        return self._coordinator

    @property
    def observer(self) -> PageObserver[SelectorWidget]:
        return self._observer

    async def start(self) -> bool:
        """Return False when the catalog could not be loaded; the page stays usable."""
        try:
            self._entries = await self._catalog_cache.load()
        except CatalogFetchError as exc:
            _LOGGER.error("Field selector initialization failed: %s", exc)
            return False
        self._observer.start()
        return True

    def handle_document_click(self, clicked_widget: SelectorWidget | None) -> None:
        self._coordinator.handle_document_click(clicked_widget)

    def destroy(self) -> None:
        self._observer.stop()
        self._observer.forget_all()
        self._coordinator.clear()
        self._catalog_cache.clear()
        self._entries = ()

    def _attach(self, element: TargetInput, context: ClientContext) -> SelectorWidget:
        return SelectorWidget(
            element,
            context,
            self._entries,
            self._coordinator,
            layout_only_kinds=self._configuration.dom.layout_only_kinds,
        )
