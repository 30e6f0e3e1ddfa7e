"""REST client for support (contact) messages."""

import logging

from admin_console.application.interfaces import ContactMessageClient
from admin_console.application.schemas import ContactMessage
from admin_console.domain.entities import ExportResult, MessageStatus, MutationResult
from admin_console.domain.exceptions import RequestFailed
from admin_console.infrastructure.api.resource_definition import CONTACT_MESSAGES, ResourceDefinition
from admin_console.infrastructure.api.rest_resource_client import RestResourceClient
from admin_console.infrastructure.http import Transport, extract_error_message

logger = logging.getLogger(__name__)

EXPORT_FORMATS = frozenset({"csv", "excel"})
EXPORT_CONTENT_TYPES = frozenset({"text/csv", "application/vnd.ms-excel"})


class RestContactMessageClient(RestResourceClient[ContactMessage], ContactMessageClient):
    """Contact messages over REST, including status changes and export."""

    def __init__(
        self,
        transport: Transport,
        definition: ResourceDefinition[ContactMessage] = CONTACT_MESSAGES,
    ):
        super().__init__(transport, definition)

    async def set_status(self, record_id: str, status: MessageStatus) -> MutationResult[ContactMessage]:
        return await self._mutate(
            "PATCH",
            f"/{record_id}/status",
            "set_status",
            require_record=False,
            json={"status": MessageStatus(status).value},
        )

    async def export(self, export_format: str = "csv") -> ExportResult:
        """Download all messages.

        The endpoint answers with the file on success but may also answer a
        2xx with a JSON error envelope, so the content type decides which
        one was received.

        Raises:
            ValueError: If ``export_format`` is not 'csv' or 'excel'.
            RequestFailed: If the server did not send a csv/excel file.
        """
        if export_format not in EXPORT_FORMATS:
            raise ValueError(
                f"Unsupported export format '{export_format}' (expected one of {sorted(EXPORT_FORMATS)})"
            )

        fallback = self._definition.failure_message("export")
        result = await self._transport.request(
            "GET",
            "/export",
            params={"format": export_format},
            response_kind="binary",
            fallback_message=fallback,
        )

        media_type = result.content_type.split(";")[0].strip().lower()
        if media_type not in EXPORT_CONTENT_TYPES:
            message = extract_error_message(result.content) or fallback
            logger.warning("Export returned %r instead of a file: %s", media_type, message)
            raise RequestFailed(message)

        return ExportResult(
            content=result.content,
            content_type=media_type,
            format=export_format,
            filename=f"contact_messages.{export_format}",
        )
