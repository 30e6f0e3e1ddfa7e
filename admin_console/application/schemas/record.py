"""Base model shared by every record returned from the console API."""

from datetime import datetime

from pydantic import AliasChoices, BaseModel, Field
from pydantic.alias_generators import to_camel

# Wire payloads use camelCase; Python code uses snake_case.
CAMEL_CASE_CONFIG = {
    "alias_generator": to_camel,
    "populate_by_name": True,
}


class RecordBase(BaseModel):
    """A server-side record identified by an immutable ``id``.

    The API sends the identifier as ``_id``; ``id`` is accepted as well.
    Fields not declared by a subclass are kept verbatim as extras.
    """

    id: str = Field(validation_alias=AliasChoices("_id", "id"))
    created_at: datetime | None = None
    updated_at: datetime | None = None

    model_config = {
        **CAMEL_CASE_CONFIG,
        "extra": "allow",
        "frozen": True,
    }
