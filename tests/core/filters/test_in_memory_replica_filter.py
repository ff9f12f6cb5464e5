"""Unit tests for InMemoryReplicaFilter."""

import pytest

from serve_replicas.core.filters.field_filters import ExactMatchFilter
from serve_replicas.core.filters.in_memory_replica_filter import InMemoryReplicaFilter
from serve_replicas.core.models.errors import FilterError


class TestInMemoryReplicaFilter:
    """Tests for in-memory replica filtering and pagination."""

    def test_empty_filter_set_returns_all(self, replica_items) -> None:
        service = InMemoryReplicaFilter()

        assert service.apply(replica_items, {}) == replica_items

    def test_empty_values_are_ignored(self, replica_items) -> None:
        service = InMemoryReplicaFilter()

        result = service.apply(replica_items, {"replica_id": "", "state": ""})

        assert result == replica_items

    def test_state_filter_is_exact(self, replica_items) -> None:
        service = InMemoryReplicaFilter()

        result = service.apply(replica_items, {"state": "RUNNING"})

        assert len(result) == 5
        assert {item["state"] for item in result} == {"RUNNING"}
        assert service.apply(replica_items, {"state": "RUN"}) == []

    def test_replica_id_filter_is_substring(self, replica_items) -> None:
        service = InMemoryReplicaFilter()

        result = service.apply(replica_items, {"replica_id": "replica-2"})

        assert [item["replica_id"] for item in result] == [
            "replica-20",
            "replica-21",
            "replica-22",
            "replica-23",
        ]

    def test_works_on_models(self, serve_replicas) -> None:
        service = InMemoryReplicaFilter()

        result = service.apply(serve_replicas, {"state": "RUNNING"})

        assert [replica.replica_id for replica in result] == [
            "replica-01",
            "replica-06",
            "replica-11",
            "replica-16",
            "replica-21",
        ]

    def test_filters_compose_as_intersection(self, replica_items) -> None:
        service = InMemoryReplicaFilter()
        by_id = service.apply(replica_items, {"replica_id": "replica-1"})
        by_state = service.apply(replica_items, {"state": "RUNNING"})

        combined = service.apply(
            replica_items,
            {"replica_id": "replica-1", "state": "RUNNING"},
        )

        expected = [item for item in by_id if item in by_state]
        assert combined == expected
        assert [item["replica_id"] for item in combined] == ["replica-11", "replica-16"]

    def test_unregistered_field_uses_substring(self, replica_items) -> None:
        service = InMemoryReplicaFilter()

        result = service.apply(replica_items, {"node_ip": "10.0.0.1"})

        assert len(result) == len([i for i in replica_items if i["node_ip"] == "10.0.0.1"])

    def test_register_custom_predicate(self, replica_items) -> None:
        service = InMemoryReplicaFilter()
        service.register("node_id", ExactMatchFilter())

        result = service.apply(replica_items, {"node_id": "node-1"})

        assert all(item["node_id"] == "node-1" for item in result)
        assert service.apply(replica_items, {"node_id": "node"}) == []

    @pytest.mark.parametrize("field_name", ["", "   "])
    def test_register_blank_field_raises_filter_error(self, field_name: str) -> None:
        service = InMemoryReplicaFilter()

        with pytest.raises(FilterError) as exc_info:
            service.register(field_name, ExactMatchFilter())

        assert exc_info.value.error_code == "INVALID_FILTER"

    def test_paginate_first_page(self, replica_items) -> None:
        service = InMemoryReplicaFilter()

        page = service.paginate(replica_items, page_no=1, page_size=10)

        assert len(page.items) == 10
        assert page.max_page == 3
        assert page.total_count == 23

    def test_paginate_clamps_page(self, replica_items) -> None:
        service = InMemoryReplicaFilter()

        page = service.paginate(replica_items, page_no=50, page_size=10)

        assert page.constrained_page == 3
        assert len(page.items) == 3

    def test_paginate_invalid_page_size_raises_value_error(self, replica_items) -> None:
        service = InMemoryReplicaFilter()

        with pytest.raises(ValueError):
            service.paginate(replica_items, page_no=1, page_size=0)

    def test_distinct_values_keep_first_seen_order(self) -> None:
        items = [
            {"state": "RUNNING"},
            {"state": "STARTING"},
            {"state": "RUNNING"},
            {"state": ""},
            {},
        ]

        assert InMemoryReplicaFilter.distinct_values(items, "state") == [
            "RUNNING",
            "STARTING",
        ]

    def test_whitespace_values_are_ignored(self, replica_items) -> None:
        service = InMemoryReplicaFilter()

        result = service.apply(replica_items, {"replica_id": "   ", "state": "RUNNING"})

        assert len(result) == 5

    def test_custom_predicate_validate_decides_activity(self, replica_items) -> None:
        class AnyStateFilter(ExactMatchFilter):
            @staticmethod
            def validate(search_term: str | None) -> bool:
                return bool(search_term) and search_term != "ANY"

        service = InMemoryReplicaFilter()
        service.register("state", AnyStateFilter())

        assert service.apply(replica_items, {"state": "ANY"}) == replica_items
        assert len(service.apply(replica_items, {"state": "RUNNING"})) == 5
