"""Pydantic DTOs for product reviews."""

from typing import Any

from pydantic import BaseModel, Field

from admin_console.application.schemas.record import CAMEL_CASE_CONFIG, RecordBase


class Review(RecordBase):
    """A customer review of a product.

    ``product`` and ``user`` are either identifiers or populated objects,
    depending on how the server expanded them.
    """

    product: Any = None
    user: Any = None
    rating: int | None = None
    comment: str = ""
    is_approved: bool = False
    photos: list[Any] = Field(default_factory=list)


class MediaAttachment(BaseModel):
    """A file uploaded alongside a review."""

    filename: str
    content: bytes
    content_type: str = "application/octet-stream"


class ReviewCreate(BaseModel):
    """Schema for creating a review; photos travel as multipart file parts."""

    product: str = Field(..., min_length=1)
    rating: int = Field(..., ge=1, le=5)
    comment: str = ""
    is_approved: bool = False
    photos: list[MediaAttachment] = Field(default_factory=list, exclude=True)

    model_config = CAMEL_CASE_CONFIG


class ReviewUpdate(BaseModel):
    """Schema for moderating a review — all fields optional."""

    is_approved: bool | None = None
    comment: str | None = None

    model_config = CAMEL_CASE_CONFIG
