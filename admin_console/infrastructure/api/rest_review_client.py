"""REST client for product reviews.

Reviews are created with a multipart body so photos can be attached; every
other call uses the generic JSON encoding.
"""

from collections.abc import Iterable
from typing import Any

from admin_console.application.interfaces import Payload
from admin_console.application.schemas import MediaAttachment, Review, ReviewCreate
from admin_console.domain.entities import MutationResult
from admin_console.infrastructure.api.resource_definition import REVIEWS, ResourceDefinition
from admin_console.infrastructure.api.rest_resource_client import RestResourceClient, serialize_payload
from admin_console.infrastructure.http import Transport

# httpx multipart part: (field name, (filename, content[, content type]))
MultipartPart = tuple[str, tuple[Any, ...]]


def _form_value(value: Any) -> bytes:
    if isinstance(value, bool):
        return b"true" if value else b"false"
    return str(value).encode("utf-8")


def build_multipart(fields: dict[str, Any], photos: Iterable[MediaAttachment]) -> list[MultipartPart]:
    """Encode form fields and attachments as httpx multipart parts.

    Plain fields are sent as parts without a filename so the request is
    multipart even when no photo is attached.
    """
    parts: list[MultipartPart] = []
    for name, value in fields.items():
        if value is None:
            continue
        if isinstance(value, list):
            parts.extend((name, (None, _form_value(item))) for item in value)
        else:
            parts.append((name, (None, _form_value(value))))
    for photo in photos:
        parts.append(("photos", (photo.filename, photo.content, photo.content_type)))
    return parts


class RestReviewClient(RestResourceClient[Review]):
    """Reviews over REST."""

    def __init__(
        self,
        transport: Transport,
        definition: ResourceDefinition[Review] = REVIEWS,
    ):
        super().__init__(transport, definition)

    async def create(self, payload: Payload) -> MutationResult[Review]:
        if isinstance(payload, ReviewCreate):
            fields = serialize_payload(payload)
            photos = payload.photos
        else:
            fields = dict(payload)
            photos = [MediaAttachment.model_validate(p) for p in fields.pop("photos", [])]
        return await self._mutate("POST", "", "create", files=build_multipart(fields, photos))
