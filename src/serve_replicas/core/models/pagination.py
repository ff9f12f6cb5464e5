"""Pagination models."""

from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field, StrictInt

from serve_replicas.core.utils.constants import (
    DEFAULT_PAGE_NO,
    DEFAULT_PAGE_SIZE,
    MAX_PAGE_SIZE,
    MIN_PAGE_SIZE,
)

ItemT = TypeVar("ItemT")


class PaginationParams(BaseModel):
    """Pagination state chosen by the user.

    ``page_no`` is kept as requested, even when it lies outside the pages
    that currently exist; the page slicer clamps it at read time.
    """

    model_config = ConfigDict(validate_assignment=True)

    page_no: StrictInt = Field(
        default=DEFAULT_PAGE_NO,
        description="Requested page number (1-based, not range checked)",
    )
    page_size: StrictInt = Field(
        default=DEFAULT_PAGE_SIZE,
        ge=MIN_PAGE_SIZE,
        le=MAX_PAGE_SIZE,
        description="Items per page",
    )


class PageResult(BaseModel, Generic[ItemT]):
    """One derived page of a filtered collection, ready for display."""

    model_config = ConfigDict(frozen=True)

    items: list[ItemT] = Field(..., description="Items on the constrained page")
    constrained_page: StrictInt = Field(
        ...,
        ge=1,
        description="Requested page clamped into [1, max_page]",
    )
    max_page: StrictInt = Field(..., ge=1, description="Total number of pages (at least 1)")
    total_count: StrictInt = Field(
        ...,
        ge=0,
        description="Number of items before slicing",
    )
    page_size: StrictInt = Field(..., ge=MIN_PAGE_SIZE, description="Page size used for the slice")
