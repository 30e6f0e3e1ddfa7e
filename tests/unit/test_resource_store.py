"""Unit tests for the generic ResourceStore — cache rules, loading and error bookkeeping."""

import pytest

from admin_console.application.interfaces import ResourceClient
from admin_console.application.schemas import FAQ
from admin_console.application.services import FAQStore, ResourceStore
from admin_console.domain.entities import DeleteResult, MutationResult, Page, StoreState
from admin_console.domain.exceptions import RequestFailed


# ── Fakes ────────────────────────────────────────────────────────────


class FakeFAQClient(ResourceClient[FAQ]):
    """In-memory fake client. Set ``fail_with`` to make the next calls fail."""

    resource_name = "faqs"

    def __init__(self, faqs: list[FAQ] | None = None, total_count: int | None = None):
        self._faqs: dict[str, FAQ] = {f.id: f for f in faqs or []}
        self._total_count = total_count
        self._next_id = 100
        self.fail_with: str | None = None
        self.store: ResourceStore | None = None
        self.loading_seen: list[bool] = []
        self.error_seen: list[str | None] = []

    def _enter(self) -> None:
        # Observe the store from inside the in-flight call.
        if self.store is not None:
            self.loading_seen.append(self.store.loading)
            self.error_seen.append(self.store.error)
        if self.fail_with is not None:
            raise RequestFailed(self.fail_with)

    async def list_records(self, params=None) -> Page[FAQ]:
        self._enter()
        faqs = list(self._faqs.values())
        total = self._total_count if self._total_count is not None else len(faqs)
        return Page(records=faqs, total_count=total, total_pages=3)

    async def get_by_id(self, record_id: str) -> FAQ:
        self._enter()
        if record_id not in self._faqs:
            raise RequestFailed("FAQ not found")
        return self._faqs[record_id]

    async def create(self, payload) -> MutationResult[FAQ]:
        self._enter()
        faq = FAQ(id=f"f{self._next_id}", **dict(payload))
        self._next_id += 1
        self._faqs[faq.id] = faq
        return MutationResult(record=faq, message="FAQ created")

    async def update(self, record_id: str, patch) -> MutationResult[FAQ]:
        self._enter()
        faq = self._faqs[record_id].model_copy(update=dict(patch))
        self._faqs[record_id] = faq
        return MutationResult(record=faq, message="FAQ updated")

    async def delete(self, record_id: str) -> DeleteResult:
        self._enter()
        self._faqs.pop(record_id, None)
        return DeleteResult(message="FAQ deleted")


def _faq(faq_id: str, question: str = "Q?") -> FAQ:
    return FAQ(id=faq_id, question=question, answer="A.")


@pytest.fixture
def client() -> FakeFAQClient:
    return FakeFAQClient([_faq("a", "First?"), _faq("b", "Second?"), _faq("c", "Third?")])


@pytest.fixture
def store(client: FakeFAQClient) -> FAQStore:
    store = FAQStore(client)
    client.store = store
    return store


# ── Initial state ────────────────────────────────────────────────────


def test_initial_state(store: FAQStore):
    assert store.state == StoreState()
    assert store.resource_name == "faqs"


# ── list_records ─────────────────────────────────────────────────────


@pytest.mark.asyncio
async def test_list_replaces_cache_and_counts(store: FAQStore):
    page = await store.list_records({"page": 1})

    assert [r.id for r in store.records] == ["a", "b", "c"]
    assert store.total_count == 3
    assert store.total_pages == 3
    assert store.loading is False
    assert store.error is None
    assert page.records == list(store.records)


@pytest.mark.asyncio
async def test_list_discards_previous_records_entirely(store: FAQStore, client: FakeFAQClient):
    await store.list_records()
    client._faqs = {"z": _faq("z")}

    await store.list_records()

    assert [r.id for r in store.records] == ["z"]
    assert store.total_count == 1


# ── Loading / error bookkeeping ──────────────────────────────────────


@pytest.mark.asyncio
async def test_loading_is_true_only_while_call_is_in_flight(store: FAQStore, client: FakeFAQClient):
    await store.list_records()
    await store.get_by_id("a")
    await store.create({"question": "New?", "answer": "Yes."})

    assert client.loading_seen == [True, True, True]
    assert store.loading is False


@pytest.mark.asyncio
async def test_loading_released_and_error_set_on_failure(store: FAQStore, client: FakeFAQClient):
    client.fail_with = "Failed to fetch FAQs."

    with pytest.raises(RequestFailed) as exc_info:
        await store.list_records()

    assert exc_info.value.message == "Failed to fetch FAQs."
    assert client.loading_seen == [True]
    assert store.loading is False
    assert store.error == "Failed to fetch FAQs."


@pytest.mark.asyncio
async def test_new_operation_clears_previous_error(store: FAQStore, client: FakeFAQClient):
    client.fail_with = "boom"
    with pytest.raises(RequestFailed):
        await store.list_records()

    client.fail_with = None
    await store.list_records()

    assert client.error_seen == [None, None]
    assert store.error is None


@pytest.mark.asyncio
async def test_failure_reraises_same_exception_object(store: FAQStore):
    with pytest.raises(RequestFailed) as exc_info:
        await store.get_by_id("missing")

    assert store.error == "FAQ not found"
    assert str(exc_info.value) == store.error


@pytest.mark.asyncio
async def test_failed_mutation_leaves_cache_unchanged(store: FAQStore, client: FakeFAQClient):
    await store.list_records()
    before = store.records
    client.fail_with = "Failed to update FAQ."

    with pytest.raises(RequestFailed):
        await store.update("b", {"question": "Changed?"})

    assert store.records == before
    assert store.total_count == 3


# ── Cache rules ──────────────────────────────────────────────────────


@pytest.mark.asyncio
async def test_create_prepends_and_increments_count(store: FAQStore):
    await store.list_records()

    result = await store.create({"question": "New?", "answer": "Yes."})

    assert store.records[0] == result.record
    assert [r.id for r in store.records[1:]] == ["a", "b", "c"]
    assert store.total_count == 4
    assert result.message == "FAQ created"


@pytest.mark.asyncio
async def test_update_replaces_record_in_place(store: FAQStore):
    await store.list_records()
    untouched = [store.records[0], store.records[2]]

    result = await store.update("b", {"question": "Changed?"})

    assert [r.id for r in store.records] == ["a", "b", "c"]
    assert store.records[1] == result.record
    assert store.records[1].question == "Changed?"
    assert [store.records[0], store.records[2]] == untouched
    assert store.total_count == 3


@pytest.mark.asyncio
async def test_delete_removes_record_and_decrements_count(store: FAQStore):
    await store.list_records()

    result = await store.delete("b")

    assert [r.id for r in store.records] == ["a", "c"]
    assert store.total_count == 2
    assert result.message == "FAQ deleted"


@pytest.mark.asyncio
async def test_delete_never_drives_count_negative(client: FakeFAQClient):
    store = FAQStore(client)

    await store.delete("a")

    assert store.total_count == 0


@pytest.mark.asyncio
async def test_get_by_id_does_not_touch_cache(store: FAQStore):
    await store.list_records()
    before = store.state

    faq = await store.get_by_id("c")

    assert faq.id == "c"
    assert store.state == before


# ── Subscriptions ────────────────────────────────────────────────────


@pytest.mark.asyncio
async def test_listener_sees_loading_then_settled_snapshot(store: FAQStore):
    snapshots: list[StoreState] = []
    remove = store.add_listener(snapshots.append)

    await store.list_records()
    remove()
    await store.list_records()

    assert [s.loading for s in snapshots] == [True, False]
    assert snapshots[0].records == ()
    assert len(snapshots[1].records) == 3


@pytest.mark.asyncio
async def test_async_subscriber_receives_snapshots(store: FAQStore):
    stream = store.subscribe()

    initial = await anext(stream)
    await store.delete("a")
    loading = await anext(stream)
    settled = await anext(stream)
    await stream.aclose()

    assert initial == StoreState()
    assert loading.loading is True
    assert settled.loading is False
    assert settled.total_count == 0


def test_paginator_matches_total_pages(store: FAQStore):
    assert store.paginator().total_pages == 1


@pytest.mark.asyncio
async def test_failing_listener_does_not_break_bookkeeping(store: FAQStore):
    seen: list[StoreState] = []

    def broken(state: StoreState) -> None:
        raise ValueError("render failed")

    store.add_listener(broken)
    store.add_listener(seen.append)

    faq = await store.get_by_id("a")

    assert faq.id == "a"
    assert store.loading is False
    assert store.error is None
    assert [s.loading for s in seen] == [True, False]


@pytest.mark.asyncio
async def test_failing_listener_does_not_mask_request_failure(store: FAQStore):
    def broken(state: StoreState) -> None:
        raise ValueError("render failed")

    store.add_listener(broken)

    with pytest.raises(RequestFailed, match="FAQ not found"):
        await store.get_by_id("missing")

    assert store.loading is False
    assert store.error == "FAQ not found"


@pytest.mark.asyncio
async def test_subscription_keeps_snapshots_published_before_first_read(store: FAQStore):
    stream = store.subscribe()

    await store.list_records()
    snapshots = [await anext(stream) for _ in range(3)]
    await stream.aclose()

    assert [s.loading for s in snapshots] == [False, True, False]
    assert len(snapshots[2].records) == 3
