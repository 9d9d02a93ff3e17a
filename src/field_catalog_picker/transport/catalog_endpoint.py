"""Authenticated catalog endpoint."""

from __future__ import annotations

import logging
import time
from collections.abc import Callable

from field_catalog_picker.catalog_caching import CatalogService
from field_catalog_picker.configuration.runtime_settings import TransportSettings
from field_catalog_picker.schema_sources import SchemaError

from .request_security import NonceIssuer
from .transport_contracts import CatalogRequest, CatalogResponse

_LOGGER = logging.getLogger(__name__)

UNSUPPORTED_REQUEST_MESSAGE = "Unsupported request"
INVALID_TOKEN_MESSAGE = "Invalid security token"
UNAUTHORIZED_MESSAGE = "Unauthorized"
CATALOG_UNAVAILABLE_MESSAGE = "Field catalog unavailable"


class CatalogEndpoint:
    """Validates catalog requests before handing them to the catalog service."""

    def __init__(
        self,
        service: CatalogService,
        nonce_issuer: NonceIssuer,
        settings: TransportSettings | None = None,
    ) -> None:
        self._service = service
        self._nonce_issuer = nonce_issuer
        self._settings = settings or TransportSettings()

    @classmethod
    def from_settings(
        cls,
        service: CatalogService,
        secret: bytes | str,
        settings: TransportSettings | None = None,
        *,
        clock: Callable[[], float] = time.time,
    ) -> CatalogEndpoint:
        """Build an endpoint whose nonce issuer honours the configured lifetime."""
        resolved = settings or TransportSettings()
        return cls(service, NonceIssuer.from_settings(secret, resolved, clock=clock), resolved)

    @property
    def action(self) -> str:
        return self._settings.action

    def issue_nonce(self, session_token: str) -> str:
        """Mint the token a page embeds for its catalog requests."""
        return self._nonce_issuer.create(self._settings.action, session_token)

    def handle(self, request: CatalogRequest) -> CatalogResponse:
        if request.method.upper() != "POST" or request.action != self._settings.action:
            _LOGGER.warning(
                "Rejected catalog request: method=%s action=%s", request.method, request.action
            )
            return CatalogResponse.error(UNSUPPORTED_REQUEST_MESSAGE)

        if not self._nonce_issuer.verify(
            request.nonce, self._settings.action, request.session_token
        ):
            _LOGGER.warning("Rejected catalog request: invalid or expired nonce.")
            return CatalogResponse.error(INVALID_TOKEN_MESSAGE)

        if self._settings.required_capability not in request.capabilities:
            _LOGGER.warning(
                "Rejected catalog request: missing capability '%s'.",
                self._settings.required_capability,
            )
            return CatalogResponse.error(UNAUTHORIZED_MESSAGE)

        try:
            entries = self._service.catalog()
        except SchemaError as exc:
            _LOGGER.error("Catalog build failed: %s", exc)
            return CatalogResponse.error(CATALOG_UNAVAILABLE_MESSAGE)
        return CatalogResponse.ok([entry.to_payload() for entry in entries])
