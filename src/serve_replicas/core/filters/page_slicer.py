"""
Page slicing utilities.
"""

import math
from collections.abc import Sequence
from typing import Any

from aws_lambda_powertools import Logger

from serve_replicas.core.models.pagination import PageResult
from serve_replicas.core.utils.constants import MIN_PAGE_SIZE
from serve_replicas.core.utils.sanitizers import coerce_page_no

logger = Logger(UTC=True)


class PageSlicer:
    """
    Page-number based slicing helper.

    This class computes one page of an ordered collection together with the
    metadata a pagination control needs. Requested page numbers are clamped,
    never rejected: a request is usually stale (issued before a filter shrank
    the collection) rather than wrong.

    Typical usage:
    1. Sanitize the page size (see ``parse_page_size``)
    2. Slice the filtered collection for the requested page
    3. Render ``items`` and feed ``constrained_page`` back as the next request
    """

    @staticmethod
    def validate_page_size(page_size: int) -> None:
        """
        Reject a page size that cannot slice anything.

        Raises:
            ValueError: If page_size is not an integer of at least MIN_PAGE_SIZE
        """
        if (
            isinstance(page_size, bool)
            or not isinstance(page_size, int)
            or page_size < MIN_PAGE_SIZE
        ):
            logger.error(
                "Invalid page size",
                extra={"page_size": page_size, "min_page_size": MIN_PAGE_SIZE},
            )
            raise ValueError(f"Page size must be an integer of at least {MIN_PAGE_SIZE}")

    @staticmethod
    def compute_max_page(total_count: int, page_size: int) -> int:
        """
        Compute the number of pages, which is never less than 1.

        Raises:
            ValueError: If page_size is below MIN_PAGE_SIZE

        Example:
            compute_max_page(23, 10) → 3
            compute_max_page(0, 10)  → 1
        """
        PageSlicer.validate_page_size(page_size)
        return max(1, math.ceil(total_count / page_size))

    @staticmethod
    def constrain_page(page_no: Any, max_page: int) -> int:
        """Clamp a requested page number into [1, max_page]."""
        return min(max(coerce_page_no(page_no), 1), max(max_page, 1))

    @staticmethod
    def slice(
        collection: Sequence[Any],
        page_no: Any,
        page_size: int,
    ) -> PageResult[Any]:
        """
        Slice one page out of an ordered collection.

        Args:
            collection: Ordered items to paginate, possibly empty
            page_no: Requested 1-based page; may be out of range
            page_size: Items per page, already sanitized to at least 1

        Returns:
            PageResult with the page items, the clamped page number,
            the total page count and the collection size

        Raises:
            ValueError: If page_size is below MIN_PAGE_SIZE

        Example:
            collection = 23 items, page_no = 5, page_size = 10

            → items 21-23, constrained_page=3, max_page=3
        """
        total_count = len(collection)
        max_page = PageSlicer.compute_max_page(total_count, page_size)
        constrained_page = PageSlicer.constrain_page(page_no, max_page)

        start = (constrained_page - 1) * page_size
        items = list(collection[start : start + page_size])

        return PageResult(
            items=items,
            constrained_page=constrained_page,
            max_page=max_page,
            total_count=total_count,
            page_size=page_size,
        )


def slice_to_page(
    collection: Sequence[Any],
    page_no: Any,
    page_size: int,
) -> PageResult[Any]:
    """Module-level shortcut for ``PageSlicer.slice``."""
    return PageSlicer.slice(collection, page_no, page_size)
