"""Pydantic DTOs for FAQ entries."""

from pydantic import BaseModel, Field

from admin_console.application.schemas.record import CAMEL_CASE_CONFIG, RecordBase


class FAQ(RecordBase):
    """A question/answer pair shown on the storefront help page."""

    question: str = ""
    answer: str = ""
    category: str | None = None
    tags: list[str] = Field(default_factory=list)
    is_active: bool = True


class FAQCreate(BaseModel):
    """Schema for creating a new FAQ entry."""

    question: str = Field(..., min_length=1, examples=["How long does shipping take?"])
    answer: str = Field(..., min_length=1, examples=["Orders ship within 2 business days."])
    category: str | None = None
    tags: list[str] = Field(default_factory=list)
    is_active: bool = True

    model_config = CAMEL_CASE_CONFIG


class FAQUpdate(BaseModel):
    """Schema for updating an existing FAQ entry — all fields optional."""

    question: str | None = Field(None, min_length=1)
    answer: str | None = Field(None, min_length=1)
    category: str | None = None
    tags: list[str] | None = None
    is_active: bool | None = None

    model_config = CAMEL_CASE_CONFIG
