"""Generic resource store — the local, observable cache of one resource type.

Every operation follows the same shape:

1. mark the store loading and clear the previous error,
2. call the resource client,
3. on success apply the operation's cache rule,
4. on failure record the error message and re-raise the same exception,
5. always release the loading flag.

Cache rules echo successful server responses only: ``list_records``
replaces the cached page, ``create`` prepends, ``update`` replaces in place,
``delete`` removes. Reads such as ``get_by_id`` leave the cache untouched.

Overlapping operations are sequenced: each cache-writing call (``list_records``
and the mutations) takes a write sequence number when issued, and a page
fetched by an older call is discarded once a newer cache-writing call has
been issued. Reads never make a page stale. ``loading`` stays set while any
call is in flight, and only the most recently issued call may set ``error``.
Mutation echoes always apply since each one is a confirmed fact about a
single record.
"""

import logging
from collections.abc import AsyncGenerator, Awaitable, Callable
from typing import Generic, TypeVar

from admin_console.application.interfaces import Payload, QueryParams, ResourceClient
from admin_console.application.schemas import RecordBase
from admin_console.application.services.state_broadcaster import StateBroadcaster
from admin_console.domain.entities import (
    DeleteResult,
    MutationResult,
    Page,
    Paginator,
    StoreState,
)

logger = logging.getLogger(__name__)

RecordT = TypeVar("RecordT", bound=RecordBase)
ResultT = TypeVar("ResultT")

StateListener = Callable[[StoreState], None]


class ResourceStore(Generic[RecordT]):
    """Holds the cached records, counts, loading flag and last error of one resource.

    Depends on the ResourceClient port (DI); concrete stores only add the
    resource-specific verbs.
    """

    def __init__(
        self,
        client: ResourceClient[RecordT],
        *,
        broadcaster: StateBroadcaster | None = None,
    ):
        self._client = client
        self._broadcaster = broadcaster or StateBroadcaster()
        self._listeners: list[StateListener] = []

        self._records: list[RecordT] = []
        self._total_count = 0
        self._total_pages = 1
        self._loading = False
        self._error: str | None = None
        self._issued = 0
        self._write_sequence = 0
        self._in_flight = 0

    # ── State ────────────────────────────────────────────────────────

    @property
    def resource_name(self) -> str:
        return self._client.resource_name

    @property
    def records(self) -> tuple[RecordT, ...]:
        return tuple(self._records)

    @property
    def total_count(self) -> int:
        return self._total_count

    @property
    def total_pages(self) -> int:
        return self._total_pages

    @property
    def loading(self) -> bool:
        return self._loading

    @property
    def error(self) -> str | None:
        return self._error

    @property
    def state(self) -> StoreState[RecordT]:
        return StoreState(
            records=tuple(self._records),
            total_count=self._total_count,
            total_pages=self._total_pages,
            loading=self._loading,
            error=self._error,
        )

    def paginator(self) -> Paginator:
        """A page cursor sized to the last fetched page set."""
        return Paginator(total_pages=self._total_pages)

    # ── Subscriptions ────────────────────────────────────────────────

    def add_listener(self, listener: StateListener) -> Callable[[], None]:
        """Call ``listener`` with a snapshot after every state change.

        Returns a callable that removes the listener.
        """
        self._listeners.append(listener)

        def remove() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return remove

    def subscribe(self) -> AsyncGenerator[StoreState[RecordT], None]:
        """Async stream of snapshots, starting with the current state."""
        return self._broadcaster.subscribe(initial=self.state)

    def close(self) -> None:
        """Disconnect all async subscribers."""
        self._broadcaster.shutdown()

    def _notify(self) -> None:
        snapshot = self.state
        for listener in list(self._listeners):
            try:
                listener(snapshot)
            except Exception:
                logger.exception("%s state listener %r failed", self.resource_name, listener)
        self._broadcaster.publish(snapshot)

    # ── CRUD operations ──────────────────────────────────────────────

    async def list_records(self, params: QueryParams | None = None) -> Page[RecordT]:
        return await self._run(
            "list",
            lambda: self._client.list_records(params),
            self._replace_page,
            discard_if_stale=True,
        )

    async def get_by_id(self, record_id: str) -> RecordT:
        return await self._run("get", lambda: self._client.get_by_id(record_id))

    async def create(self, payload: Payload) -> MutationResult[RecordT]:
        return await self._run("create", lambda: self._client.create(payload), self._prepend)

    async def update(self, record_id: str, patch: Payload) -> MutationResult[RecordT]:
        return await self._run(
            "update",
            lambda: self._client.update(record_id, patch),
            lambda result: self._replace(record_id, result.record),
        )

    async def delete(self, record_id: str) -> DeleteResult:
        return await self._run(
            "delete",
            lambda: self._client.delete(record_id),
            lambda _: self._remove(record_id),
        )

    # ── Operation runner ─────────────────────────────────────────────

    async def _run(
        self,
        operation: str,
        call: Callable[[], Awaitable[ResultT]],
        apply: Callable[[ResultT], None] | None = None,
        *,
        discard_if_stale: bool = False,
    ) -> ResultT:
        """Run one client call with loading/error bookkeeping.

        ``apply`` is the cache rule; calls without one are reads and never
        make an in-flight page stale.
        """
        self._issued += 1
        issued = self._issued
        if apply is not None:
            self._write_sequence += 1
        write_sequence = self._write_sequence

        self._in_flight += 1
        self._loading = True
        self._error = None

        try:
            self._notify()
            result = await call()
        except Exception as exc:
            logger.warning("%s %s failed: %s", self.resource_name, operation, exc)
            if issued == self._issued:
                self._error = str(exc)
            raise
        else:
            if apply is not None:
                if discard_if_stale and write_sequence != self._write_sequence:
                    logger.info(
                        "Discarding stale %s %s result (superseded by a newer call)",
                        self.resource_name,
                        operation,
                    )
                else:
                    apply(result)
            return result
        finally:
            self._in_flight -= 1
            self._loading = self._in_flight > 0
            self._notify()

    # ── Cache rules ──────────────────────────────────────────────────

    def _replace_page(self, page: Page[RecordT]) -> None:
        self._records = list(page.records)
        self._total_count = page.total_count
        self._total_pages = page.total_pages

    def _prepend(self, result: MutationResult[RecordT]) -> None:
        if result.record is None:
            return
        self._records.insert(0, result.record)
        self._total_count += 1

    def _replace(self, record_id: str, record: RecordT | None) -> None:
        if record is None:
            return
        for index, cached in enumerate(self._records):
            if cached.id == record_id:
                self._records[index] = record
                return

    def _remove(self, record_id: str) -> None:
        self._records = [record for record in self._records if record.id != record_id]
        self._total_count = max(0, self._total_count - 1)
