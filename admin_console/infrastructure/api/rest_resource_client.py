"""Generic REST client for the console API — implements the ResourceClient port.

Speaks the API's envelope convention: lists come back as
``{data: [...], count | total | totalPages}``, single records and mutations
as ``{data: {...}, message}``.
"""

import logging
import math
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ValidationError

from admin_console.application.interfaces import Payload, QueryParams, ResourceClient
from admin_console.domain.entities import DeleteResult, MutationResult, Page
from admin_console.domain.exceptions import RequestFailed
from admin_console.infrastructure.api.resource_definition import RecordT, ResourceDefinition
from admin_console.infrastructure.http import Transport

logger = logging.getLogger(__name__)


def serialize_payload(payload: Payload) -> dict[str, Any]:
    """Convert a DTO or mapping into the camelCase JSON body the API expects."""
    if isinstance(payload, BaseModel):
        return payload.model_dump(mode="json", by_alias=True, exclude_none=True)
    return dict(payload)


def _count(body: Mapping[str, Any], *keys: str) -> int | None:
    for key in keys:
        value = body.get(key)
        if isinstance(value, int) and not isinstance(value, bool):
            return value
    return None


class RestResourceClient(ResourceClient[RecordT]):
    """Infrastructure adapter — CRUD for one resource over the Transport."""

    def __init__(self, transport: Transport, definition: ResourceDefinition[RecordT]):
        self._transport = transport
        self._definition = definition

    @property
    def resource_name(self) -> str:
        return self._definition.name

    @property
    def definition(self) -> ResourceDefinition[RecordT]:
        return self._definition

    async def list_records(self, params: QueryParams | None = None) -> Page[RecordT]:
        fallback = self._definition.failure_message("list")
        result = await self._transport.request("GET", params=params, fallback_message=fallback)
        return self._parse_page(result.data, params or {}, fallback)

    async def get_by_id(self, record_id: str) -> RecordT:
        fallback = self._definition.failure_message("get")
        result = await self._transport.request("GET", f"/{record_id}", fallback_message=fallback)
        body = result.data
        if isinstance(body, dict) and isinstance(body.get("data"), dict):
            body = body["data"]
        return self._parse_record(body, fallback)

    async def create(self, payload: Payload) -> MutationResult[RecordT]:
        return await self._mutate("POST", "", "create", json=serialize_payload(payload))

    async def update(self, record_id: str, patch: Payload) -> MutationResult[RecordT]:
        return await self._mutate("PUT", f"/{record_id}", "update", json=serialize_payload(patch))

    async def delete(self, record_id: str) -> DeleteResult:
        fallback = self._definition.failure_message("delete")
        result = await self._transport.request("DELETE", f"/{record_id}", fallback_message=fallback)
        logger.info("Deleted %s %s", self._definition.singular, record_id)
        return DeleteResult(message=self._message(result.data, "delete"))

    # ── Envelope handling ───────────────────────────────────────────

    async def _mutate(
        self,
        method: str,
        path: str,
        operation: str,
        *,
        require_record: bool = True,
        **request_kwargs: Any,
    ) -> MutationResult[RecordT]:
        """Send a mutation and unwrap its ``{data, message}`` envelope."""
        fallback = self._definition.failure_message(operation)
        result = await self._transport.request(
            method, path, fallback_message=fallback, **request_kwargs
        )
        body = result.data if isinstance(result.data, dict) else {}
        raw_record = body.get("data")

        record: RecordT | None = None
        if raw_record is not None:
            record = self._parse_record(raw_record, fallback)
        elif require_record:
            logger.warning("%s %s response carried no record", self._definition.name, operation)
            raise RequestFailed(fallback)

        return MutationResult(record=record, message=self._message(body, operation))

    def _parse_record(self, raw: Any, fallback: str) -> RecordT:
        try:
            return self._definition.record_model.model_validate(raw)
        except ValidationError as exc:
            logger.warning("Malformed %s record: %s", self._definition.singular, exc)
            raise RequestFailed(fallback) from exc

    def _parse_page(self, body: Any, params: QueryParams, fallback: str) -> Page[RecordT]:
        if not isinstance(body, dict) or not isinstance(body.get("data", []), list):
            raise RequestFailed(fallback)

        records = [self._parse_record(item, fallback) for item in body.get("data", [])]
        total_count = _count(body, "count", "total")
        if total_count is None:
            total_count = len(records)

        total_pages = _count(body, "totalPages")
        if total_pages is None:
            limit = params.get("limit")
            try:
                limit = int(limit) if limit is not None else 0
            except (TypeError, ValueError):
                limit = 0
            total_pages = math.ceil(total_count / limit) if limit > 0 else 1

        return Page(
            records=records,
            total_count=max(0, total_count),
            total_pages=max(1, total_pages),
        )

    def _message(self, body: Any, operation: str) -> str:
        if isinstance(body, dict):
            message = body.get("message")
            if isinstance(message, str) and message.strip():
                return message
        return self._definition.success_message(operation)
