"""
Replica filtering service for the deployment detail page.

Provides a coordination layer that applies per-field filter predicates and
page slicing to in-memory replica collections. This service does not
perform data access and is intended to operate on pre-fetched items.
"""

from collections.abc import Iterable, Mapping, Sequence
from typing import Any

from aws_lambda_powertools import Logger

from serve_replicas.core.filters.field_filters import (
    ExactMatchFilter,
    FieldFilter,
    SubstringFilter,
    read_field,
)
from serve_replicas.core.filters.page_slicer import PageSlicer
from serve_replicas.core.models.errors import FilterError
from serve_replicas.core.models.pagination import PageResult
from serve_replicas.core.models.replica import ReplicaState
from serve_replicas.core.utils.constants import REPLICA_ID_FIELD, STATE_FIELD

ReplicaItem = Any
logger = Logger(UTC=True)


def default_field_filters() -> dict[str, FieldFilter]:
    """Predicates for the fields the replicas page filters on."""
    return {
        REPLICA_ID_FIELD: SubstringFilter(),
        STATE_FIELD: ExactMatchFilter(state.value for state in ReplicaState),
    }


class InMemoryReplicaFilter:
    """
    Service responsible for filtering and paginating replicas.

    This class orchestrates in-memory refinement strategies:
    - Per-field predicates combined with logical AND
    - Page-number based slicing with clamping

    Fields without a registered predicate fall back to substring matching,
    so a new filterable field only needs ``register`` when it wants
    different semantics.
    """

    def __init__(
        self,
        field_filters: Mapping[str, FieldFilter] | None = None,
        *,
        fallback: FieldFilter | None = None,
    ) -> None:
        """Initialize filter components used for orchestration."""
        self._field_filters: dict[str, FieldFilter] = (
            dict(field_filters) if field_filters is not None else default_field_filters()
        )
        self._fallback: FieldFilter = fallback or SubstringFilter()
        self._pagination: PageSlicer = PageSlicer()

    def register(self, field_name: str, field_filter: FieldFilter) -> None:
        """
        Register the predicate used for ``field_name``.

        Raises:
            FilterError: If the field name is blank
        """
        if not field_name or not field_name.strip():
            raise FilterError(
                message="Filter field name must not be blank",
                details={"field_name": field_name},
            )
        self._field_filters[field_name] = field_filter

    def filter_for(self, field_name: str) -> FieldFilter:
        return self._field_filters.get(field_name, self._fallback)

    def apply(
        self,
        items: Iterable[ReplicaItem],
        filter_set: Mapping[str, str],
    ) -> list[ReplicaItem]:
        """
        Keep the items matching every active filter.

        Args:
            items: Replica records (mappings or models)
            filter_set: Field name to filter value; empty values are ignored

        Returns:
            Matching items in their original order
        """
        filtered = list(items)
        for field, value in filter_set.items():
            # Each predicate skips blank terms, so inactive fields pass through.
            filtered = self.filter_for(field).apply(filtered, value, field)
        return filtered

    def paginate(
        self,
        items: Sequence[ReplicaItem],
        *,
        page_no: Any,
        page_size: int,
    ) -> PageResult[ReplicaItem]:
        """
        Slice one page out of the filtered items.

        Raises:
            ValueError: If page_size is below the minimum
        """
        return self._pagination.slice(items, page_no, page_size)

    @staticmethod
    def distinct_values(items: Iterable[ReplicaItem], field_name: str) -> list[str]:
        """Distinct non-empty values of a field, in first-seen order."""
        seen: dict[str, None] = {}
        for item in items:
            value = read_field(item, field_name)
            if value:
                seen.setdefault(value, None)
        return list(seen)
