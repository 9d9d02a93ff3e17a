"""Catalog cache tests."""

from __future__ import annotations

from field_catalog_picker.catalog_building import CatalogEntry
from field_catalog_picker.catalog_caching import CatalogCache


class ClockStub:
    def __init__(self, value: float = 1_000.0) -> None:
        self.value = value

    def now(self) -> float:
        return self.value


class BuilderSpy:
    def __init__(self, *results: tuple[CatalogEntry, ...]) -> None:
        self._results = list(results)
        self.calls = 0

    def __call__(self) -> tuple[CatalogEntry, ...]:
        self.calls += 1
        if len(self._results) > 1:
            return self._results.pop(0)
        return self._results[0]


def _entry(name: str) -> CatalogEntry:
    return CatalogEntry(
        name=name,
        label=name.title(),
        kind="text",
        group="Page",
        parent="",
        base_name=name,
        is_subfield_of_repeater=False,
    )


def test_read_before_ttl_does_not_rebuild() -> None:
    clock = ClockStub()
    cache = CatalogCache(ttl_seconds=3600, clock=clock.now)
    builder = BuilderSpy((_entry("a"),))

    first = cache.get_or_build(builder)
    clock.value += 3599
    second = cache.get_or_build(builder)

    assert first == second == (_entry("a"),)
    assert builder.calls == 1


def test_read_after_ttl_rebuilds() -> None:
    clock = ClockStub()
    cache = CatalogCache(ttl_seconds=3600, clock=clock.now)
    builder = BuilderSpy((_entry("a"),), (_entry("b"),))

    cache.get_or_build(builder)
    clock.value += 3600
    refreshed = cache.get_or_build(builder)

    assert refreshed == (_entry("b"),)
    assert builder.calls == 2


def test_invalidate_forces_rebuild_with_ttl_remaining() -> None:
    clock = ClockStub()
    cache = CatalogCache(ttl_seconds=3600, clock=clock.now)
    builder = BuilderSpy((_entry("a"),), (_entry("b"),))

    cache.get_or_build(builder)
    clock.value += 10
    cache.invalidate()

    assert cache.peek() is None
    assert cache.get_or_build(builder) == (_entry("b"),)
    assert builder.calls == 2


def test_empty_catalog_is_cached_for_full_ttl() -> None:
    # Preserved behaviour: an empty build (no schema provider) is not retried until expiry.
    clock = ClockStub()
    cache = CatalogCache(ttl_seconds=3600, clock=clock.now)
    builder = BuilderSpy((), (_entry("late"),))

    assert cache.get_or_build(builder) == ()
    clock.value += 3599
    assert cache.get_or_build(builder) == ()
    assert builder.calls == 1

    clock.value += 1
    assert cache.get_or_build(builder) == (_entry("late"),)


def test_record_carries_key_timestamp_and_ttl() -> None:
    clock = ClockStub(50.0)
    cache = CatalogCache(ttl_seconds=10, key="custom_key", clock=clock.now)

    cache.get_or_build(lambda: [_entry("a")])
    record = cache.peek()

    assert record is not None
    assert record.key == "custom_key"
    assert record.created_at == 50.0
    assert record.ttl_seconds == 10
    assert record.payload == (_entry("a"),)
    clock.value = 60.0
    assert cache.peek() is None
