"""Session-lifetime client cache of the transported catalog."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, Protocol

from field_catalog_picker.catalog_building import CatalogEntry, CatalogPayloadError
from field_catalog_picker.configuration.defaults import DEFAULT_ACTION
from field_catalog_picker.configuration.runtime_settings import TransportSettings

_LOGGER = logging.getLogger(__name__)


class CatalogFetchError(Exception):
    """Raised when the catalog cannot be fetched or decoded."""


class CatalogTransport(Protocol):  # pylint: disable=too-few-public-methods
    """Posts one form to the catalog endpoint and returns the decoded JSON body."""

    async def post(self, form: Mapping[str, str]) -> Mapping[str, Any]: ...


class ClientCatalogCache:
    """Fetches the catalog once per page session and keeps successful results.

    Failures are raised to the caller and never cached. There is no invalidation
    path: a catalog fetched here stays in use until the page is torn down.
    """

    def __init__(
        self,
        transport: CatalogTransport,
        nonce: str | None,
        *,
        action: str = DEFAULT_ACTION,
    ) -> None:
        self._transport = transport
        self._nonce = nonce
        self._action = action
        self._entries: tuple[CatalogEntry, ...] | None = None

    @classmethod
    def from_settings(
        cls, transport: CatalogTransport, nonce: str | None, settings: TransportSettings
    ) -> ClientCatalogCache:
        return cls(transport, nonce, action=settings.action)

    @property
    def action(self) -> str:
        return self._action

    @property
    def cached(self) -> tuple[CatalogEntry, ...] | None:
        return self._entries

    async def load(self) -> tuple[CatalogEntry, ...]:
        if self._entries is not None:
            return self._entries

        if not self._nonce:
            raise CatalogFetchError("Security token missing")

        try:
            body = await self._transport.post({"action": self._action, "nonce": self._nonce})
        except CatalogFetchError:
            raise
        except Exception as exc:
            raise CatalogFetchError(f"Network response failed: {exc}") from exc

        entries = _decode_body(body)
        self._entries = entries
        return entries

    def clear(self) -> None:
        self._entries = None


def _decode_body(body: Any) -> tuple[CatalogEntry, ...]:
    if not isinstance(body, Mapping):
        raise CatalogFetchError("Malformed catalog response.")
    data = body.get("data")
    if body.get("success") is not True:
        message = data if isinstance(data, str) and data else "Failed to load fields"
        raise CatalogFetchError(message)
    if not isinstance(data, list):
        raise CatalogFetchError("Malformed catalog response.")
    try:
        return tuple(CatalogEntry.from_payload(item) for item in data)
    except CatalogPayloadError as exc:
        raise CatalogFetchError(f"Malformed catalog response: {exc}") from exc
