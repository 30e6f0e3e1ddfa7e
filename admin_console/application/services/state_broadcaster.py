"""State broadcaster — in-process fan-out of store snapshots to UI subscribers."""

import asyncio
import logging
from collections.abc import AsyncGenerator

from admin_console.domain.entities import StoreState

logger = logging.getLogger(__name__)


class StateBroadcaster:
    """Pushes StoreState snapshots to every connected subscriber.

    Each subscriber gets its own asyncio.Queue. Publishing pushes the
    snapshot to all queues; subscribers consume via an async generator.
    """

    def __init__(self, max_queue_size: int = 100) -> None:
        self._max_queue_size = max_queue_size
        self._queues: list[asyncio.Queue[StoreState | None]] = []

    def subscribe(self, initial: StoreState | None = None) -> AsyncGenerator[StoreState, None]:
        """Register a subscriber and return its snapshot stream.

        The queue is registered before this returns, so snapshots published
        ahead of the first iteration are kept. ``initial`` is delivered
        first so a new subscriber can render immediately. The stream
        unsubscribes itself when closed after iteration has started; a
        stream that is never iterated stays registered until ``shutdown``
        or until its queue fills.
        """
        queue: asyncio.Queue[StoreState | None] = asyncio.Queue(maxsize=self._max_queue_size)
        if initial is not None:
            queue.put_nowait(initial)
        self._queues.append(queue)
        return self._stream(queue)

    async def _stream(self, queue: asyncio.Queue[StoreState | None]) -> AsyncGenerator[StoreState, None]:
        """Yield snapshots until the broadcaster shuts down."""
        try:
            while True:
                state = await queue.get()
                if state is None:
                    break
                yield state
        finally:
            if queue in self._queues:
                self._queues.remove(queue)

    def publish(self, state: StoreState) -> None:
        """Push a snapshot to all subscribers, dropping ones that fell behind."""
        dead_queues: list[asyncio.Queue[StoreState | None]] = []

        for queue in self._queues:
            try:
                queue.put_nowait(state)
            except asyncio.QueueFull:
                dead_queues.append(queue)
                logger.warning("Store subscriber queue full — disconnecting")

        for q in dead_queues:
            self._queues.remove(q)
            self._disconnect(q)

    def shutdown(self) -> None:
        """Disconnect all subscribers."""
        for queue in self._queues:
            self._disconnect(queue)
        self._queues.clear()

    @staticmethod
    def _disconnect(queue: asyncio.Queue[StoreState | None]) -> None:
        # Make room for the end-of-stream marker.
        while not queue.empty():
            queue.get_nowait()
        queue.put_nowait(None)

    @property
    def subscriber_count(self) -> int:
        return len(self._queues)
