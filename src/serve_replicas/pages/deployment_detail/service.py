"""
Selection state for the replicas table of a deployment detail page.
"""

from collections.abc import Sequence
from enum import Enum
from typing import Any

from aws_lambda_powertools import Logger

from serve_replicas.core.filters.in_memory_replica_filter import InMemoryReplicaFilter
from serve_replicas.core.models.pagination import PageResult, PaginationParams
from serve_replicas.core.models.replica import ServeDeployment
from serve_replicas.core.utils.constants import (
    DEFAULT_PAGE_NO,
    PAGE_NO_KEY,
    PAGE_SIZE_KEY,
    PAGINATION_KEYS,
)
from serve_replicas.core.utils.sanitizers import (
    coerce_page_no,
    normalize_filter_value,
    parse_page_size,
)

ReplicaItem = Any

logger = Logger(UTC=True)


class ReplicaSelectionController:
    """Owns filter and pagination state for one deployment's replica list.

    The backing collection belongs to whoever fetched it and may be swapped
    at any time with ``set_replicas``. Nothing derived is cached: every
    ``get_view`` filters and slices the current collection from scratch, so
    a read always reflects every earlier mutation.
    """

    def __init__(
        self,
        replicas: Sequence[ReplicaItem] | None = None,
        *,
        filters: InMemoryReplicaFilter | None = None,
    ) -> None:
        self._replicas: Sequence[ReplicaItem] = replicas if replicas is not None else []
        self._filters = filters or InMemoryReplicaFilter()
        self._filter_set: dict[str, str] = {}
        self._pagination = PaginationParams()

    @classmethod
    def for_deployment(
        cls,
        deployment: ServeDeployment,
        *,
        filters: InMemoryReplicaFilter | None = None,
    ) -> "ReplicaSelectionController":
        """Build a controller over a deployment's replicas with default state."""
        return cls(deployment.replicas, filters=filters)

    @property
    def filter_set(self) -> dict[str, str]:
        """A copy of the active filters."""
        return dict(self._filter_set)

    @property
    def pagination(self) -> PaginationParams:
        return self._pagination.model_copy()

    def set_replicas(self, replicas: Sequence[ReplicaItem]) -> None:
        """Replace the backing collection, keeping filter and page state."""
        self._replicas = replicas
        logger.info(
            "Replica collection replaced",
            extra={"replica_count": len(replicas)},
        )

    def set_filter(self, field_name: str, value: str | Enum | None) -> None:
        """Set the filter for one field and return to the first page.

        A blank value (or the "-" placeholder) clears the field's filter.
        Other fields are left untouched.
        """
        normalized = normalize_filter_value(value)
        self._filter_set[field_name] = normalized
        self._pagination.page_no = DEFAULT_PAGE_NO

        logger.info(
            "Replica filter changed",
            extra={"field": field_name, "value": normalized},
        )

    def set_page(self, key: str, value: Any) -> None:
        """Update one pagination parameter.

        ``page_size`` is sanitized immediately and never fails.
        ``page_no`` is stored as requested; the slicer clamps it on read.

        Raises:
            ValueError: If key is not a pagination parameter
        """
        if key not in PAGINATION_KEYS:
            raise ValueError(
                f"Invalid pagination key '{key}'. Expected one of {sorted(PAGINATION_KEYS)}"
            )

        if key == PAGE_SIZE_KEY:
            self._pagination.page_size = parse_page_size(value)
        elif key == PAGE_NO_KEY:
            self._pagination.page_no = coerce_page_no(value)

    def filtered_items(self) -> list[ReplicaItem]:
        """The backing collection narrowed by every active filter."""
        return self._filters.apply(self._replicas, self._filter_set)

    def get_view(self) -> PageResult[ReplicaItem]:
        """Filter the current collection and slice the requested page."""
        filtered = self.filtered_items()
        view = self._filters.paginate(
            filtered,
            page_no=self._pagination.page_no,
            page_size=self._pagination.page_size,
        )

        logger.debug(
            "Replica view derived",
            extra={
                "replica_count": len(self._replicas),
                "filtered_count": view.total_count,
                "requested_page": self._pagination.page_no,
                "constrained_page": view.constrained_page,
                "max_page": view.max_page,
            },
        )
        return view

    def filter_options(self, field_name: str) -> list[str]:
        """Distinct values of a field across the unfiltered collection."""
        return self._filters.distinct_values(self._replicas, field_name)
