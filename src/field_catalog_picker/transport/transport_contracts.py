"""Catalog transport request and response contracts."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class CatalogRequest:
    """Inbound catalog request as seen by the endpoint."""

    method: str
    form: Mapping[str, str]
    session_token: str
    capabilities: frozenset[str] = field(default_factory=frozenset)

    @property
    def action(self) -> str:
        return self.form.get("action", "")

    @property
    def nonce(self) -> str:
        return self.form.get("nonce", "")


@dataclass(frozen=True)
class CatalogResponse:
    """Outbound catalog response: entry payloads on success, a message on failure."""

    success: bool
    data: list[dict[str, Any]] | str

    @staticmethod
    def ok(data: list[dict[str, Any]]) -> CatalogResponse:
        return CatalogResponse(success=True, data=data)

    @staticmethod
    def error(message: str) -> CatalogResponse:
        return CatalogResponse(success=False, data=message)

    def to_json(self) -> dict[str, Any]:
        return {"success": self.success, "data": self.data}
