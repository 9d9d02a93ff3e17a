"""Client catalog cache tests."""

from __future__ import annotations

import asyncio
from collections.abc import Mapping
from typing import Any

import pytest
from field_catalog_picker.client_session import CatalogFetchError, ClientCatalogCache


def _payload(name: str) -> dict[str, Any]:
    return {
        "name": name,
        "label": name.title(),
        "kind": "text",
        "group": "Page",
        "parent": "",
        "base_name": name,
        "is_subfield_of_repeater": False,
    }


class ScriptedTransport:
    def __init__(self, *responses: object) -> None:
        self._responses = list(responses)
        self.forms: list[Mapping[str, str]] = []

    async def post(self, form: Mapping[str, str]) -> Mapping[str, Any]:
        self.forms.append(dict(form))
        await asyncio.sleep(0)
        response = self._responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return response  # type: ignore[return-value]


def test_first_load_posts_once_and_caches_result() -> None:
    transport = ScriptedTransport({"success": True, "data": [_payload("title")]})
    cache = ClientCatalogCache(transport, "nonce-1")

    async def scenario() -> None:
        first = await cache.load()
        second = await cache.load()
        assert first == second
        assert [entry.name for entry in first] == ["title"]

    asyncio.run(scenario())

    assert transport.forms == [{"action": "get_catalog_fields", "nonce": "nonce-1"}]
    assert cache.cached is not None


def test_missing_nonce_fails_without_request() -> None:
    transport = ScriptedTransport()
    cache = ClientCatalogCache(transport, None)

    with pytest.raises(CatalogFetchError, match="Security token missing"):
        asyncio.run(cache.load())

    assert transport.forms == []


def test_failure_response_is_raised_and_not_cached() -> None:
    transport = ScriptedTransport(
        {"success": False, "data": "Unauthorized"},
        {"success": True, "data": [_payload("title")]},
    )
    cache = ClientCatalogCache(transport, "nonce-1")

    with pytest.raises(CatalogFetchError, match="Unauthorized"):
        asyncio.run(cache.load())
    assert cache.cached is None

    entries = asyncio.run(cache.load())

    assert [entry.name for entry in entries] == ["title"]
    assert len(transport.forms) == 2


@pytest.mark.parametrize(
    "response",
    [
        ["not", "a", "mapping"],
        {"success": True, "data": "oops"},
        {"success": True, "data": [{"name": 7}]},
        {"success": False},
    ],
)
def test_malformed_responses_raise_fetch_error(response: object) -> None:
    cache = ClientCatalogCache(ScriptedTransport(response), "nonce-1")

    with pytest.raises(CatalogFetchError):
        asyncio.run(cache.load())
    assert cache.cached is None


def test_transport_exception_is_wrapped() -> None:
    cache = ClientCatalogCache(ScriptedTransport(ConnectionError("offline")), "nonce-1")

    with pytest.raises(CatalogFetchError, match="Network response failed"):
        asyncio.run(cache.load())


def test_concurrent_first_loads_are_not_deduplicated() -> None:
    body = {"success": True, "data": [_payload("title")]}
    transport = ScriptedTransport(body, body)
    cache = ClientCatalogCache(transport, "nonce-1")

    async def scenario() -> None:
        await asyncio.gather(cache.load(), cache.load())

    asyncio.run(scenario())

    assert len(transport.forms) == 2
