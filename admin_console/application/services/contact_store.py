"""Store for support (contact) messages."""

from admin_console.application.interfaces import ContactMessageClient
from admin_console.application.schemas import ContactMessage
from admin_console.application.services.resource_store import ResourceStore
from admin_console.application.services.state_broadcaster import StateBroadcaster
from admin_console.domain.entities import ExportResult, MessageStatus, MutationResult


class ContactStore(ResourceStore[ContactMessage]):
    """Support inbox cache — adds the status workflow and export."""

    def __init__(
        self,
        client: ContactMessageClient,
        *,
        broadcaster: StateBroadcaster | None = None,
    ):
        super().__init__(client, broadcaster=broadcaster)
        self._contacts = client

    async def set_status(
        self, record_id: str, status: MessageStatus | str
    ) -> MutationResult[ContactMessage]:
        status = MessageStatus(status)
        return await self._run(
            "set_status",
            lambda: self._contacts.set_status(record_id, status),
            lambda result: self._apply_status(record_id, status, result),
        )

    async def export(self, export_format: str = "csv") -> ExportResult:
        """Return the export bytes; saving them is up to the caller."""
        return await self._run("export", lambda: self._contacts.export(export_format))

    def _apply_status(
        self,
        record_id: str,
        status: MessageStatus,
        result: MutationResult[ContactMessage],
    ) -> None:
        if result.record is not None:
            self._replace(record_id, result.record)
            return
        # The status endpoint may answer with a bare message.
        for index, cached in enumerate(self._records):
            if cached.id == record_id:
                self._records[index] = cached.model_copy(update={"status": status})
                return
