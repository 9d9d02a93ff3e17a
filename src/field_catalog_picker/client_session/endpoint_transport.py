"""In-process transport bound to a catalog endpoint."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from field_catalog_picker.transport import CatalogEndpoint, CatalogRequest


class EndpointTransport:  # pylint: disable=too-few-public-methods
    """Delivers client posts straight to an embedded endpoint for one editor session."""

    def __init__(
        self,
        endpoint: CatalogEndpoint,
        *,
        session_token: str,
        capabilities: frozenset[str],
    ) -> None:
        self._endpoint = endpoint
        self._session_token = session_token
        self._capabilities = capabilities
        self.requests_sent = 0

    async def post(self, form: Mapping[str, str]) -> Mapping[str, Any]:
        self.requests_sent += 1
        response = self._endpoint.handle(
            CatalogRequest(
                method="POST",
                form=dict(form),
                session_token=self._session_token,
                capabilities=self._capabilities,
            )
        )
        return response.to_json()
