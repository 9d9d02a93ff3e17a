"""Page observer tests."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from field_catalog_picker.configuration import DomContract, ObserverSettings
from field_catalog_picker.page_observation import ClientContext, PageObserver


class FakeInput:
    def __init__(self, name: str) -> None:
        self.name = name
        self.value = ""
        self.text_content = ""

    def closest(self, selector: str) -> None:
        return None

    def query_selector(self, selector: str) -> None:
        return None

    def dispatch_event(self, event_type: str) -> None:
        return None


class FakeDocument:
    def __init__(self) -> None:
        self.inputs: list[FakeInput] = []
        self.queries: list[str] = []

    def query_selector_all(self, selector: str) -> list[FakeInput]:
        self.queries.append(selector)
        return list(self.inputs)


class FakeSubscription:
    def __init__(self, feed: FakeChangeFeed) -> None:
        self._feed = feed

    def unsubscribe(self) -> None:
        self._feed.callbacks.clear()


class FakeChangeFeed:
    def __init__(self) -> None:
        self.callbacks: list[Callable[[], None]] = []

    def subscribe(self, callback: Callable[[], None]) -> FakeSubscription:
        self.callbacks.append(callback)
        return FakeSubscription(self)

    def notify(self) -> None:
        for callback in list(self.callbacks):
            callback()


class AfterHarness:
    def __init__(self) -> None:
        self.pending: dict[int, Callable[[], None]] = {}
        self.delays: list[int] = []
        self._next = 0

    def after(self, ms: int, cb: Callable[[], None]) -> int:
        self._next += 1
        self.pending[self._next] = cb
        self.delays.append(ms)
        return self._next

    def cancel(self, handle: object) -> None:
        self.pending.pop(handle, None)  # type: ignore[arg-type]

    def flush(self) -> None:
        for handle in list(self.pending):
            self.pending.pop(handle)()


def _observer(
    document: FakeDocument, feed: FakeChangeFeed, harness: AfterHarness
) -> tuple[PageObserver[str], list[tuple[str, ClientContext]]]:
    attached: list[tuple[str, ClientContext]] = []

    def attach(element: FakeInput, context: ClientContext) -> str:
        attached.append((element.name, context))
        return f"widget-{element.name}"

    observer: PageObserver[str] = PageObserver(
        document,
        feed,
        attach,  # type: ignore[arg-type]
        contract=DomContract(),
        settings=ObserverSettings(debounce_ms=300),
        after=harness.after,
        after_cancel=harness.cancel,
    )
    return observer, attached


def test_start_scans_existing_inputs_with_target_selector() -> None:
    document = FakeDocument()
    document.inputs = [FakeInput("custom_field_name"), FakeInput("field")]
    observer, attached = _observer(document, FakeChangeFeed(), AfterHarness())

    assert observer.start() == 1

    assert document.queries == [DomContract().target_selector]
    assert [name for name, _ in attached] == ["custom_field_name"]
    assert observer.widget_for(document.inputs[0]) == "widget-custom_field_name"
    assert observer.widget_for(document.inputs[1]) is None


def test_scanning_unchanged_document_never_attaches_twice() -> None:
    document = FakeDocument()
    document.inputs = [FakeInput("sub_field")]
    observer, attached = _observer(document, FakeChangeFeed(), AfterHarness())

    observer.scan()
    observer.scan()

    assert len(attached) == 1


def test_mutation_bursts_are_coalesced_into_one_trailing_scan() -> None:
    document = FakeDocument()
    feed = FakeChangeFeed()
    harness = AfterHarness()
    observer, attached = _observer(document, feed, harness)
    observer.start()

    document.inputs.append(FakeInput("acf_relationship_field"))
    feed.notify()
    document.inputs.append(FakeInput("acf_repeater_field"))
    feed.notify()
    feed.notify()

    assert len(harness.pending) == 1
    assert harness.delays == [300, 300, 300]

    harness.flush()

    assert [name for name, _ in attached] == ["acf_relationship_field", "acf_repeater_field"]
    assert len(document.queries) == 2


def test_attachment_survives_attribute_changes() -> None:
    document = FakeDocument()
    element = FakeInput("custom_field_name")
    document.inputs = [element]
    observer, attached = _observer(document, FakeChangeFeed(), AfterHarness())
    observer.start()

    element.name = "renamed"
    element.value = "something"
    observer.scan()

    assert len(attached) == 1


def test_stop_unsubscribes_and_cancels_pending_scan() -> None:
    document = FakeDocument()
    feed = FakeChangeFeed()
    harness = AfterHarness()
    observer, _ = _observer(document, feed, harness)
    observer.start()
    feed.notify()

    observer.stop()

    assert not observer.running
    assert feed.callbacks == []
    assert harness.pending == {}


@dataclass(eq=True)
class ValueEqualInput:
    name: str
    value: str = ""
    text_content: str = ""

    def closest(self, selector: str) -> None:
        return None

    def query_selector(self, selector: str) -> None:
        return None

    def dispatch_event(self, event_type: str) -> None:
        return None


def test_inputs_equal_by_value_each_receive_their_own_widget() -> None:
    document = FakeDocument()
    first = ValueEqualInput("custom_field_name")
    second = ValueEqualInput("custom_field_name")
    document.inputs = [first, second]  # type: ignore[list-item]
    observer, attached = _observer(document, FakeChangeFeed(), AfterHarness())

    assert first == second
    assert observer.start() == 2
    assert observer.scan() == 0
    assert len(attached) == 2
    assert observer.widget_for(first) is not None  # type: ignore[arg-type]
    assert observer.widget_for(second) is not None  # type: ignore[arg-type]


def test_forget_all_allows_reattachment() -> None:
    document = FakeDocument()
    document.inputs = [FakeInput("sub_field")]
    observer, attached = _observer(document, FakeChangeFeed(), AfterHarness())
    observer.start()

    observer.forget_all()

    assert observer.widget_for(document.inputs[0]) is None
    assert observer.scan() == 1
    assert len(attached) == 2
